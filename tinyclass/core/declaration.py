# tinyclass/core/declaration.py
"""
Entry points for registry-only classes.

    >>> registry = AttributeRegistry()
    >>> _ = declare("Person", attributes=["name"], registry=registry)
    >>> _ = declare("Employee", ["Person"], ["ssn"], registry=registry)
    >>> bob = new("Employee", registry, name="Bob", ssn="111-22-3333")
    >>> bob.ssn()
    '111-22-3333'

``TinyObject`` subclasses go through the same functions from
``__init_subclass__`` and ``__new__``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, Optional, Set

from tinyclass.core.accessors import AccessorFactory
from tinyclass.core.lifecycle import ObjectConstructor, ObjectDestructor
from tinyclass.core.registry import AttributeRegistry, ClassSpec


def declare(
    cls: Hashable,
    ancestors: Iterable[Hashable] = (),
    attributes: Iterable[str] = (),
    *,
    registry: AttributeRegistry,
    build: Optional[Callable] = None,
    demolish: Optional[Callable] = None,
    methods: Optional[Dict[str, Callable]] = None,
) -> ClassSpec:
    """
    Declare a class and generate its accessors.

    Raises:
        InvalidNameError: If an attribute name is not an identifier. Nothing
            is recorded in that case.
        FrozenHierarchyError: If the class's ancestry is already in use.
    """
    attributes = list(attributes)
    spec = registry.declare(
        cls,
        ancestors,
        attributes,
        build=build,
        demolish=demolish,
        methods=methods,
    )
    AccessorFactory(registry).install_accessors(cls, attributes)
    return spec


def new(cls: Hashable, registry: AttributeRegistry, /, *args: Any, **kwargs: Any) -> Any:
    """
    Construct an instance of ``cls``; see ObjectConstructor.new.

    ``cls`` and ``registry`` are positional-only so any declared attribute,
    including ``cls`` or ``registry``, can be passed as a keyword.
    """
    return ObjectConstructor(registry).new(cls, *args, **kwargs)


def destroy(instance: Any, *, registry: AttributeRegistry, in_global_destruction: Optional[bool] = None) -> None:
    """Tear an instance down; see ObjectDestructor.destroy."""
    ObjectDestructor(registry).destroy(instance, in_global_destruction)


def get_all_attributes_for(cls: Hashable, registry: Optional[AttributeRegistry] = None) -> Set[str]:
    """
    Every attribute valid for ``cls``, including inherited ones.

    ``registry`` defaults to the one a TinyObject subclass is bound to, or the
    default registry for any other handle.
    """
    if registry is None:
        from tinyclass.object import DEFAULT_REGISTRY

        registry = getattr(cls, "_tinyclass_registry", DEFAULT_REGISTRY)
    return registry.all_attributes_for(cls)
