# tinyclass/core/registry.py
"""
Attribute registry and ancestor graph.

One ``AttributeRegistry`` value owns, per class handle:
- the ordered list of direct parents (the ancestor graph)
- the attribute names the class declares directly
- its lifecycle hooks (BUILD / DEMOLISH)
- an explicit method table, for classes that are not Python types

Class handles are any hashable. Python types keep their methods in their own
``__dict__``; every other handle uses the registry's method table.

Registries are populated while classes are declared and are read-only on the
construction / teardown paths. A class's ancestry is frozen as soon as it takes
part in a linearization; changing it afterwards raises FrozenHierarchyError.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Hashable, Iterable, List, NamedTuple, Optional, Set, Tuple

from tinyclass.core.linearization import Linearization, LinearizationResolver
from tinyclass.exceptions import FrozenHierarchyError, InvalidNameError, class_label
from tinyclass.logging import get_logger
from tinyclass.logging_tags import REGISTRY

logger = get_logger(__name__)

BUILD_HOOK = "BUILD"
DEMOLISH_HOOK = "DEMOLISH"

# letter or underscore, then word characters; whole string
_IDENTIFIER = re.compile(r"[^\W\d]\w*", re.UNICODE)


class _Root:
    """Sentinel root class for registries that aren't tied to a Python base class."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "ROOT"


ROOT = _Root()


def _no_hook(instance: Any, arg: Any) -> None:
    return None


class Hooks(NamedTuple):
    """A class's lifecycle hooks. Absent hooks are no-ops, never None."""

    build: Callable[[Any, Any], Any] = _no_hook
    demolish: Callable[[Any, Any], Any] = _no_hook

    @classmethod
    def from_callables(cls, build: Optional[Callable] = None, demolish: Optional[Callable] = None) -> "Hooks":
        return cls(
            build=build if build is not None else _no_hook,
            demolish=demolish if demolish is not None else _no_hook,
        )


NO_HOOKS = Hooks()


@dataclass(frozen=True)
class ClassSpec:
    """
    Everything the registry knows about one class.

    Instances are immutable; the registry swaps in a new spec on every change so
    readers never see a half-updated class.
    """

    name: Hashable
    parents: Tuple[Hashable, ...] = ()
    attributes: Tuple[str, ...] = ()
    hooks: Hooks = NO_HOOKS
    methods: Dict[str, Callable[..., Any]] = field(default_factory=dict, repr=False, compare=False)


def validate_name(name: Any) -> str:
    """
    Check attribute identifier syntax.

    Dunder names (``__init__``, ``__new__``...) are refused: an accessor would
    replace the Python protocol method of the same name.

    Raises:
        InvalidNameError: naming the offending token
    """
    if not isinstance(name, str) or not _IDENTIFIER.fullmatch(name):
        raise InvalidNameError(name)
    if len(name) > 4 and name.startswith("__") and name.endswith("__"):
        raise InvalidNameError(name, "dunder names are reserved for Python protocols")
    return name


def own_hook(cls: type, hook_name: str) -> Optional[Callable]:
    hook = vars(cls).get(hook_name)
    return hook if callable(hook) else None


class AttributeRegistry:
    """
    Registry of class declarations.

    Args:
        root: Implicit root class. Classes declared without ancestors inherit
            from it, so every linearization has at least two entries.
    """

    def __init__(self, root: Hashable = ROOT):
        self.root = root
        self._classes: Dict[Hashable, ClassSpec] = {}
        self._frozen: Set[Hashable] = set()
        self._lock = threading.RLock()
        self.resolver = LinearizationResolver(
            self.parents_of, on_resolve=self._freeze, lock=self._lock
        )

    def __repr__(self) -> str:
        return f"AttributeRegistry(root={class_label(self.root)}, classes={len(self._classes)})"

    # -------------------------------------------------------------------------
    # Declaration
    # -------------------------------------------------------------------------

    def declare(
        self,
        cls: Hashable,
        ancestors: Iterable[Hashable] = (),
        attributes: Iterable[str] = (),
        build: Optional[Callable] = None,
        demolish: Optional[Callable] = None,
        methods: Optional[Dict[str, Callable]] = None,
    ) -> ClassSpec:
        """
        Declare a class: ancestry, direct attributes and hooks in one publish.

        An empty ancestor list means the class inherits from ``root``.
        Re-declaring a class merges attributes and replaces hooks; its ancestry
        can only change while no linearization has used it.

        Raises:
            InvalidNameError: If any attribute name is not an identifier.
            FrozenHierarchyError: If the ancestry is frozen and would change.
        """
        names = [validate_name(name) for name in attributes]
        parents = tuple(ancestors)
        if not parents and cls != self.root:
            parents = (self.root,)
        if cls == self.root:
            parents = ()

        with self._lock:
            if cls in self._frozen and parents != tuple(self.parents_of(cls)):
                raise FrozenHierarchyError(
                    f"Ancestry of {class_label(cls)} is already in use and cannot change "
                    f"to {[class_label(p) for p in parents]}"
                )

            current = self._classes.get(cls)
            table = dict(current.methods) if current is not None else {}
            if methods:
                table.update(methods)

            spec = ClassSpec(
                name=cls,
                parents=parents,
                attributes=self._merged(current, names),
                hooks=Hooks.from_callables(build, demolish),
                methods=table,
            )
            self._classes[cls] = spec

        logger.debug(
            f"{REGISTRY} Declared {class_label(cls)} "
            f"parents={[class_label(p) for p in parents]} attributes={list(spec.attributes)}"
        )
        return spec

    def register(self, cls: Hashable, names: Iterable[str]) -> ClassSpec:
        """
        Record attribute names as directly declared by ``cls``.

        All names are validated before any is recorded. Registering a name twice
        is a no-op. An undeclared class is declared with default ancestry.
        """
        names = [validate_name(name) for name in names]

        with self._lock:
            current = self._classes.get(cls)
            if current is None:
                return self.declare(cls, attributes=names)

            spec = replace(current, attributes=self._merged(current, names))
            self._classes[cls] = spec

        logger.debug(f"{REGISTRY} Registered {names} on {class_label(cls)}")
        return spec

    @staticmethod
    def _merged(current: Optional[ClassSpec], names: List[str]) -> Tuple[str, ...]:
        merged = list(current.attributes) if current is not None else []
        for name in names:
            if name not in merged:
                merged.append(name)
        return tuple(merged)

    # -------------------------------------------------------------------------
    # Ancestor graph + linearization
    # -------------------------------------------------------------------------

    def parents_of(self, cls: Hashable) -> Tuple[Hashable, ...]:
        """
        Direct parents of ``cls``.

        Undeclared Python types contribute their own bases (minus ``object``) so
        plain mixins take part in the order; other undeclared handles are leaves.
        """
        spec = self._classes.get(cls)
        if spec is not None:
            return spec.parents
        if cls == self.root:
            return ()
        if isinstance(cls, type):
            return tuple(base for base in cls.__bases__ if base is not object)
        return ()

    def linearize(self, cls: Hashable) -> Linearization:
        """C3 linearization of ``cls``; freezes the ancestry of every class in it."""
        return self.resolver.linearize(cls)

    def _freeze(self, linearization: Linearization) -> None:
        with self._lock:
            self._frozen.update(linearization)

    def is_frozen(self, cls: Hashable) -> bool:
        return cls in self._frozen

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def direct_attributes_of(self, cls: Hashable) -> Set[str]:
        spec = self._classes.get(cls)
        return set(spec.attributes) if spec is not None else set()

    def all_attributes_for(self, cls: Hashable) -> Set[str]:
        """Every attribute declared by ``cls`` or any of its ancestors."""
        names: Set[str] = set()
        for klass in self.linearize(cls):
            spec = self._classes.get(klass)
            if spec is not None:
                names.update(spec.attributes)
        return names

    # -------------------------------------------------------------------------
    # Hooks and method tables
    # -------------------------------------------------------------------------

    def hooks_for(self, cls: Hashable) -> Hooks:
        """
        Lifecycle hooks defined on ``cls`` itself (never inherited).

        Undeclared Python types in a linearization (plain mixins) are looked up
        in their own namespace.
        """
        spec = self._classes.get(cls)
        if spec is not None:
            return spec.hooks
        if isinstance(cls, type):
            return Hooks.from_callables(own_hook(cls, BUILD_HOOK), own_hook(cls, DEMOLISH_HOOK))
        return NO_HOOKS

    def own_method(self, cls: Hashable, name: str) -> Any:
        """The method ``cls`` defines itself under ``name``, or None."""
        if isinstance(cls, type):
            member = vars(cls).get(name)
            if callable(member) or isinstance(member, (property, staticmethod, classmethod)):
                return member
            return None
        spec = self._classes.get(cls)
        if spec is None:
            return None
        return spec.methods.get(name)

    def install_method(self, cls: Hashable, name: str, method: Callable[..., Any]) -> None:
        if isinstance(cls, type):
            setattr(cls, name, method)
            return

        with self._lock:
            current = self._classes.get(cls)
            if current is None:
                current = self.declare(cls)
            table = dict(current.methods)
            table[name] = method
            self._classes[cls] = replace(current, methods=table)

    def resolve_method(self, cls: Hashable, name: str) -> Any:
        """First method named ``name`` along the linearization of ``cls``."""
        for klass in self.linearize(cls):
            method = self.own_method(klass, name)
            if method is not None:
                return method
        return None

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def is_declared(self, cls: Hashable) -> bool:
        return cls in self._classes

    def declared_classes(self) -> List[Hashable]:
        return list(self._classes)

    def spec(self, cls: Hashable) -> Optional[ClassSpec]:
        return self._classes.get(cls)
