# tinyclass/core/accessors.py
"""
Generated read-write accessors.

For every declared attribute a method is installed on the class:

    obj.name()          # getter, None if never set
    obj.name("Ada")     # setter, returns the stored value

A class that already defines a method of the same name keeps it; declaring the
attribute then only makes the name a valid constructor argument.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Hashable, Iterable, List

from tinyclass.core.instance import fields_of
from tinyclass.exceptions import class_label
from tinyclass.logging import get_logger
from tinyclass.logging_tags import ACCESSORS

if TYPE_CHECKING:
    from tinyclass.core.registry import AttributeRegistry

logger = get_logger(__name__)


def make_accessor(name: str) -> Callable[..., Any]:
    """Build the get/set method for attribute ``name``."""

    def accessor(self, *value):
        fields = fields_of(self)
        if not value:
            return fields.get(name)
        if len(value) > 1:
            raise TypeError(f"{name}() takes at most 1 argument ({len(value)} given)")
        fields[name] = value[0]
        return value[0]

    accessor.__name__ = name
    accessor.__qualname__ = name
    accessor.__doc__ = f"Get or set the {name!r} attribute."
    return accessor


class AccessorFactory:
    """Installs accessors into a class's own method table."""

    def __init__(self, registry: "AttributeRegistry"):
        self.registry = registry

    def install_accessors(self, cls: Hashable, names: Iterable[str]) -> List[str]:
        """
        Install an accessor for each name the class doesn't define itself.

        Only the class's own methods count; an inherited method of the same
        name is overridden, just like any subclass method would.

        Returns:
            The names an accessor was installed for.
        """
        installed = []
        for name in names:
            if self.registry.own_method(cls, name) is not None:
                logger.debug(
                    f"{ACCESSORS} {class_label(cls)}.{name} is user-defined, not generating"
                )
                continue
            self.registry.install_method(cls, name, make_accessor(name))
            installed.append(name)

        if installed:
            logger.debug(f"{ACCESSORS} {class_label(cls)}: generated {installed}")
        return installed
