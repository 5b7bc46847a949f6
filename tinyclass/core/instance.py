# tinyclass/core/instance.py
"""
Per-instance storage.

Every object built by the constructor carries an ``InstanceState``: the keyed
field store accessors read and write, plus the flag that makes teardown run at
most once. The state lives in the object's ``__dict__`` under a reserved key,
so it never shadows an accessor method of the same name as a field.
"""

from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, Optional

from tinyclass.exceptions import InstanceStateError, class_label

if TYPE_CHECKING:
    from tinyclass.core.registry import AttributeRegistry

STATE_ATTR = "__tinyclass_state__"
CLASS_ATTR = "__tinyclass_class__"
REGISTRY_ATTR = "__tinyclass_registry__"


@dataclass
class InstanceState:
    fields: Dict[str, Any] = field(default_factory=dict)
    torn_down: bool = False


def attach_state(obj: Any, state: InstanceState) -> None:
    # bypass any user __setattr__
    object.__setattr__(obj, STATE_ATTR, state)


def has_state(obj: Any) -> bool:
    return STATE_ATTR in getattr(obj, "__dict__", {})


def state_of(obj: Any) -> InstanceState:
    try:
        return vars(obj)[STATE_ATTR]
    except (KeyError, TypeError):
        raise InstanceStateError(
            f"{type(obj).__qualname__} object was not built by a tinyclass constructor"
        ) from None


def fields_of(obj: Any) -> Dict[str, Any]:
    """The live attribute store of ``obj``."""
    return state_of(obj).fields


def class_of(obj: Any) -> Hashable:
    if isinstance(obj, Instance):
        return vars(obj)[CLASS_ATTR]
    return type(obj)


class Instance:
    """
    Instance of a registry-only class (a class handle that isn't a Python type).

    Method lookup follows the class's linearization through the registry's
    method tables, so accessors and user methods are called as usual:

        >>> person = new("Person", registry, name="Ada")
        >>> person.name()
        'Ada'

    The class handle and registry are kept under reserved keys so that no
    declared attribute name is shadowed. For the same reason teardown is only
    reachable through dunders: a ``with`` block, finalization, or
    ``destroy(instance, registry=...)``.
    """

    def __init__(self, class_name: Hashable, registry: "AttributeRegistry"):
        object.__setattr__(self, CLASS_ATTR, class_name)
        object.__setattr__(self, REGISTRY_ATTR, registry)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)

        class_name = vars(self)[CLASS_ATTR]
        method = vars(self)[REGISTRY_ATTR].resolve_method(class_name, name)
        if method is None:
            raise AttributeError(
                f"{class_label(class_name)} instance has no method {name!r}"
            )
        if isinstance(method, (staticmethod, classmethod, property)):
            raise AttributeError(
                f"{name!r} on {class_label(class_name)} must be a plain function"
            )
        return types.MethodType(method, self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _teardown(self, False)

    def __del__(self):
        if has_state(self) and not state_of(self).torn_down:
            _teardown(self, None)

    def __repr__(self) -> str:
        fields = state_of(self).fields if has_state(self) else {}
        shown = ", ".join(f"{k}={v!r}" for k, v in fields.items())
        return f"<Instance {class_label(class_of(self))}({shown})>"


def _teardown(instance: Instance, in_global_destruction: Optional[bool]) -> None:
    from tinyclass.core.lifecycle import ObjectDestructor

    ObjectDestructor(vars(instance)[REGISTRY_ATTR]).destroy(instance, in_global_destruction)
