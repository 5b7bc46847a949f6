# tinyclass/exceptions.py
"""
All exceptions raised by the tinyclass runtime.

Hierarchy:
    TinyClassError
    ├── InvalidNameError - attribute name is not an identifier
    ├── InconsistentHierarchyError - no C3 linearization exists (or a cycle)
    ├── FrozenHierarchyError - ancestry changed after first use
    ├── ConstructorArgumentError - constructor args have the wrong shape
    ├── UnknownAttributeError - constructor got undeclared attributes
    ├── UnknownClassError - class was never declared in the registry
    └── InstanceStateError - object was not built by a tinyclass constructor

Errors raised by user BUILD / DEMOLISH hooks are never wrapped.
"""

from __future__ import annotations

from typing import Any, Iterable, List


def class_label(cls: Any) -> str:
    """Human readable name for a class handle (type or registry key)."""
    if isinstance(cls, type):
        return cls.__qualname__
    return str(cls)


class TinyClassError(Exception):
    """Base error for all tinyclass failures."""

    pass


class InvalidNameError(TinyClassError, ValueError):
    """Raised when an attribute name fails identifier syntax."""

    def __init__(self, name: Any, reason: str = ""):
        self.name = name
        message = f"Invalid accessor name {name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InconsistentHierarchyError(TinyClassError, TypeError):
    """Raised when a class's ancestor graph has no consistent linearization."""

    def __init__(self, class_name: Any, detail: str):
        self.class_name = class_name
        super().__init__(
            f"Cannot linearize {class_label(class_name)}: {detail}"
        )


class FrozenHierarchyError(TinyClassError):
    """Raised when a declaration would change ancestry that is already in use."""

    pass


class ConstructorArgumentError(TinyClassError, TypeError):
    """Raised when constructor arguments are neither a mapping nor key/value pairs."""

    pass


class UnknownAttributeError(TinyClassError, TypeError):
    """
    Raised when constructor arguments name attributes the class doesn't know.

    Carries every offending key, not just the first one.
    """

    def __init__(self, class_name: Any, attributes: Iterable[Any]):
        self.class_name = class_name
        self.attributes: List[Any] = list(attributes)
        names = " ".join(str(a) for a in self.attributes)
        super().__init__(f"Invalid attributes for {class_label(class_name)}: {names}")


class UnknownClassError(TinyClassError, LookupError):
    """Raised when constructing a class the registry has no declaration for."""

    def __init__(self, class_name: Any):
        self.class_name = class_name
        super().__init__(f"Class {class_label(class_name)} has not been declared")


class InstanceStateError(TinyClassError):
    """Raised when an object has no tinyclass instance state attached."""

    pass


__all__ = [
    "class_label",
    "TinyClassError",
    "InvalidNameError",
    "InconsistentHierarchyError",
    "FrozenHierarchyError",
    "ConstructorArgumentError",
    "UnknownAttributeError",
    "UnknownClassError",
    "InstanceStateError",
]
