# tinyclass/core/lifecycle.py
"""
Object construction and teardown.

Construction (ObjectConstructor.new):
    1. refuse classes the registry has never declared
    2. normalize the arguments into a fresh dict
    3. reject keys no class in the linearization declares
    4. allocate the instance, its field store copied from the arguments
    5. call BUILD(instance, args) for each class, root first

    If a BUILD hook fails the error propagates and the half-built instance is
    dropped. It is still torn down (DEMOLISH runs) when it is finalized, so
    resources taken by the hooks that did run are released.

Teardown (ObjectDestructor.destroy):
    call DEMOLISH(instance, in_global_destruction) for each class, child first.
    The first failing hook stops the walk and its error is re-raised, so the
    more ancestral DEMOLISH hooks do not run.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, Hashable, Optional, Sequence

from tinyclass.core.instance import Instance, InstanceState, attach_state, class_of, state_of
from tinyclass.exceptions import (
    ConstructorArgumentError,
    UnknownAttributeError,
    UnknownClassError,
    class_label,
)
from tinyclass.logging import get_logger
from tinyclass.logging_tags import BUILD, DEMOLISH

if TYPE_CHECKING:
    from tinyclass.core.registry import AttributeRegistry

logger = get_logger(__name__)


def normalize_args(cls: Hashable, args: Sequence[Any], kwargs: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Turn constructor arguments into a new dict.

    Accepted shapes:
        new(cls, {"name": "Ada"})       # one mapping, shallow-copied
        new(cls, "name", "Ada")         # alternating keys and values
        new(cls, name="Ada")            # keywords, merged last

    Raises:
        ConstructorArgumentError: For a single non-mapping argument or an odd
            number of positional elements.
    """
    if len(args) == 1:
        source = args[0]
        if not isinstance(source, Mapping):
            raise ConstructorArgumentError(
                f"Argument to {class_label(cls)}() could not be dereferenced as a mapping"
            )
        params = dict(source)
    elif len(args) % 2 == 0:
        params = dict(zip(args[0::2], args[1::2]))
    else:
        raise ConstructorArgumentError(
            f"{class_label(cls)}() got an odd number of elements"
        )

    if kwargs:
        params.update(kwargs)
    return params


class ObjectConstructor:
    """Builds instances of declared classes."""

    def __init__(self, registry: "AttributeRegistry"):
        self.registry = registry

    def new(self, cls: Hashable, /, *args: Any, **kwargs: Any) -> Any:
        if not self.registry.is_declared(cls):
            raise UnknownClassError(cls)
        params = normalize_args(cls, args, kwargs)
        self.validate(cls, params)
        instance = self.allocate(cls, params)
        self.run_hooks(cls, instance, params)
        return instance

    def validate(self, cls: Hashable, params: Dict[str, Any]) -> None:
        """
        Raises:
            UnknownAttributeError: Listing every key no class in the
                linearization declares.
        """
        known = self.registry.all_attributes_for(cls)
        bad = [key for key in params if key not in known]
        if bad:
            raise UnknownAttributeError(cls, bad)

    def allocate(self, cls: Hashable, params: Dict[str, Any]) -> Any:
        if isinstance(cls, type):
            instance = object.__new__(cls)
        else:
            instance = Instance(cls, self.registry)
        attach_state(instance, InstanceState(fields=dict(params)))
        return instance

    def run_hooks(self, cls: Hashable, instance: Any, params: Dict[str, Any]) -> None:
        """Call every BUILD hook, most ancestral class first."""
        for klass in reversed(self.registry.linearize(cls)):
            hook = self.registry.hooks_for(klass).build
            try:
                hook(instance, params)
            except Exception:
                logger.warning(
                    f"{BUILD} {class_label(klass)}.BUILD failed while constructing {class_label(cls)}"
                )
                raise


class ObjectDestructor:
    """Runs DEMOLISH hooks for an instance, once."""

    def __init__(self, registry: "AttributeRegistry"):
        self.registry = registry

    def destroy(self, instance: Any, in_global_destruction: Optional[bool] = None) -> None:
        """
        Tear ``instance`` down.

        Args:
            instance: An object built by ObjectConstructor.
            in_global_destruction: Whether the interpreter is shutting down.
                Defaults to ``sys.is_finalizing()``.

        Calling it again on the same instance is a no-op. If a DEMOLISH hook
        raises, remaining (more ancestral) hooks are skipped and the error is
        re-raised.
        """
        state = state_of(instance)
        if state.torn_down:
            return
        state.torn_down = True

        if in_global_destruction is None:
            in_global_destruction = sys.is_finalizing()

        cls = class_of(instance)
        failure: Optional[BaseException] = None
        for klass in self.registry.linearize(cls):
            hook = self.registry.hooks_for(klass).demolish
            try:
                hook(instance, in_global_destruction)
            except Exception as exc:
                failure = exc
                logger.warning(
                    f"{DEMOLISH} {class_label(klass)}.DEMOLISH failed for {class_label(cls)}: {exc}"
                )
            if failure is not None:
                break

        if failure is not None:
            raise failure
