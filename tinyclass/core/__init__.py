# tinyclass/core/__init__.py
"""
tinyclass core - registry, linearization, accessors and lifecycle.

Public API:
    - AttributeRegistry: per-registry class declarations and ancestor graph
    - LinearizationResolver / c3_merge: C3 method resolution order
    - AccessorFactory / make_accessor: generated get/set methods
    - ObjectConstructor / ObjectDestructor: BUILD and DEMOLISH dispatch
    - Instance: instances of registry-only classes
    - declare / new / destroy / get_all_attributes_for: entry points
"""

from .accessors import AccessorFactory, make_accessor
from .declaration import declare, destroy, get_all_attributes_for, new
from .instance import Instance, InstanceState, class_of, fields_of, state_of
from .lifecycle import ObjectConstructor, ObjectDestructor, normalize_args
from .linearization import LinearizationResolver, c3_merge
from .registry import (
    BUILD_HOOK,
    DEMOLISH_HOOK,
    NO_HOOKS,
    ROOT,
    AttributeRegistry,
    ClassSpec,
    Hooks,
    validate_name,
)

__all__ = [
    # Registry
    "AttributeRegistry",
    "ClassSpec",
    "Hooks",
    "NO_HOOKS",
    "ROOT",
    "BUILD_HOOK",
    "DEMOLISH_HOOK",
    "validate_name",
    # Linearization
    "LinearizationResolver",
    "c3_merge",
    # Accessors
    "AccessorFactory",
    "make_accessor",
    # Instances
    "Instance",
    "InstanceState",
    "class_of",
    "fields_of",
    "state_of",
    # Lifecycle
    "ObjectConstructor",
    "ObjectDestructor",
    "normalize_args",
    # Entry points
    "declare",
    "new",
    "destroy",
    "get_all_attributes_for",
]
