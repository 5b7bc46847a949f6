# tinyclass/object.py
"""
TinyObject - base class for Python classes built by tinyclass.

    class Person(TinyObject, attributes=("name",)):
        pass

    class Employee(Person, attributes=("ssn",)):
        def BUILD(self, args):
            if self.ssn() is None:
                raise ValueError("ssn is required")

    larry = Employee(name="Larry", ssn="111-22-3333")
    larry.name()            # 'Larry'
    larry.name("Lawrence")  # setter

    Employee(name="Larry", OS="Linux")  # UnknownAttributeError

Construction accepts one mapping, alternating key/value arguments or keyword
arguments. Put initialization logic in BUILD rather than ``__init__``.
Teardown runs DEMOLISH hooks child first, either explicitly (``destroy()``, a
``with`` block) or when the object is finalized.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from tinyclass.core.declaration import declare
from tinyclass.core.instance import has_state, state_of
from tinyclass.core.lifecycle import ObjectConstructor, ObjectDestructor
from tinyclass.core.registry import BUILD_HOOK, DEMOLISH_HOOK, AttributeRegistry, own_hook


class TinyObject:
    """
    Root of every tinyclass Python class.

    Class keywords:
        attributes: Attribute names declared directly by the class.
        registry: Registry for this class and its subclasses (defaults to the
            parent's registry).
    """

    _tinyclass_registry: AttributeRegistry

    def __init_subclass__(
        cls,
        attributes: Iterable[str] = (),
        registry: Optional[AttributeRegistry] = None,
        **kwargs: Any,
    ):
        super().__init_subclass__(**kwargs)
        if registry is not None:
            cls._tinyclass_registry = registry

        if isinstance(attributes, str):
            attributes = (attributes,)

        declare(
            cls,
            cls.__bases__,
            attributes,
            registry=cls._tinyclass_registry,
            build=own_hook(cls, BUILD_HOOK),
            demolish=own_hook(cls, DEMOLISH_HOOK),
        )

    def __new__(cls, /, *args: Any, **kwargs: Any):
        return ObjectConstructor(cls._tinyclass_registry).new(cls, *args, **kwargs)

    def __init__(self, /, *args: Any, **kwargs: Any):
        # construction already happened in __new__
        pass

    def destroy(self) -> None:
        """Run DEMOLISH hooks now. Later calls (and finalization) do nothing."""
        ObjectDestructor(type(self)._tinyclass_registry).destroy(self, False)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __del__(self):
        if has_state(self) and not state_of(self).torn_down:
            ObjectDestructor(type(self)._tinyclass_registry).destroy(self)

    def __repr__(self) -> str:
        if not has_state(self):
            return f"<{type(self).__name__} (unbuilt)>"
        fields = ", ".join(f"{k}={v!r}" for k, v in state_of(self).fields.items())
        return f"{type(self).__name__}({fields})"


DEFAULT_REGISTRY = AttributeRegistry(root=TinyObject)
DEFAULT_REGISTRY.declare(TinyObject)
TinyObject._tinyclass_registry = DEFAULT_REGISTRY

