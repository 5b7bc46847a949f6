# tinyclass/__init__.py
"""
tinyclass - a minimalist class construction kit.

Declare attributes, get read-write accessors, a validating constructor that
runs BUILD hooks parent to child, and teardown that runs DEMOLISH hooks child
to parent. Multiple inheritance follows C3 linearization.

Quick Start:
    >>> from tinyclass import TinyObject
    >>>
    >>> class Person(TinyObject, attributes=("name",)):
    ...     pass
    >>>
    >>> class Employee(Person, attributes=("ssn",)):
    ...     pass
    >>>
    >>> larry = Employee(name="Larry", ssn="111-22-3333")
    >>> larry.name()
    'Larry'
    >>> sorted(get_all_attributes_for(Employee))
    ['name', 'ssn']

Public API:
    Python classes:
        - TinyObject: base class (attributes= / registry= class keywords)
        - get_all_attributes_for: introspection

    Registry-only classes:
        - AttributeRegistry: explicit registry value
        - declare / new / destroy: declaration, construction, teardown
        - Instance: instances of registry-only classes

    Exceptions:
        - TinyClassError and subclasses (see tinyclass.exceptions)
"""

__version__ = "1.0.0"

from tinyclass.core import (
    ROOT,
    AttributeRegistry,
    Instance,
    LinearizationResolver,
    ObjectConstructor,
    ObjectDestructor,
    declare,
    destroy,
    get_all_attributes_for,
    new,
)
from tinyclass.exceptions import (
    ConstructorArgumentError,
    FrozenHierarchyError,
    InconsistentHierarchyError,
    InstanceStateError,
    InvalidNameError,
    TinyClassError,
    UnknownAttributeError,
    UnknownClassError,
)
from tinyclass.object import DEFAULT_REGISTRY, TinyObject

__all__ = [
    "__version__",
    # Python classes
    "TinyObject",
    "DEFAULT_REGISTRY",
    "get_all_attributes_for",
    # Registry-only classes
    "AttributeRegistry",
    "ROOT",
    "LinearizationResolver",
    "ObjectConstructor",
    "ObjectDestructor",
    "Instance",
    "declare",
    "new",
    "destroy",
    # Exceptions
    "TinyClassError",
    "InvalidNameError",
    "InconsistentHierarchyError",
    "FrozenHierarchyError",
    "ConstructorArgumentError",
    "UnknownAttributeError",
    "UnknownClassError",
    "InstanceStateError",
]
