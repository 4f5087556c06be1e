"""Existence-checking assignment (``target ?= default``).

A target is a resolved storage location.  ``assign_if_absent`` validates
it, reads it once, computes ``fallback(current, default)`` and writes the
result back once to the same location::

    assign_if_absent(attr(config, "timeout"), lambda: 30)
    assign_if_absent(item(cache, key), lambda: load(key))
    assign_if_absent(var(scope, "retries"), lambda: 3)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import Any

from presence.domain.errors import TargetError
from presence.domain.operators import fallback
from presence.domain.thunks import require_thunks


class Target(ABC):
    """An assignable location: a variable, attribute, or subscript slot."""

    @abstractmethod
    def validate(self) -> None:
        """Raise :class:`TargetError` if the location cannot be assigned."""

    @abstractmethod
    def read(self) -> Any: ...

    @abstractmethod
    def write(self, value: Any) -> None: ...


@dataclass(frozen=True)
class NameTarget(Target):
    """A variable slot in a namespace mapping (``globals()``, a scope dict)."""

    namespace: Any
    name: str

    def validate(self) -> None:
        if not isinstance(self.namespace, MutableMapping):
            msg = f"Namespace must be a mutable mapping, got {type(self.namespace).__name__}"
            raise TargetError(msg)
        if not isinstance(self.name, str) or not self.name.isidentifier():
            msg = f"{self.name!r} is not a valid variable name"
            raise TargetError(msg)

    def read(self) -> Any:
        try:
            return self.namespace[self.name]
        except KeyError:
            msg = f"name {self.name!r} is not defined"
            raise NameError(msg, name=self.name) from None

    def write(self, value: Any) -> None:
        self.namespace[self.name] = value


@dataclass(frozen=True)
class AttrTarget(Target):
    """An attribute slot on an object."""

    obj: Any
    name: str

    def validate(self) -> None:
        if not isinstance(self.name, str):
            msg = f"Attribute name must be a string, got {type(self.name).__name__}"
            raise TargetError(msg)

    def read(self) -> Any:
        return getattr(self.obj, self.name)

    def write(self, value: Any) -> None:
        setattr(self.obj, self.name, value)


@dataclass(frozen=True)
class ItemTarget(Target):
    """A subscript slot in a container."""

    container: Any
    key: Any

    def validate(self) -> None:
        cls = type(self.container)
        missing = [m for m in ("__getitem__", "__setitem__") if not hasattr(cls, m)]
        if missing:
            msg = f"{cls.__name__} object does not support item assignment"
            raise TargetError(msg)

    def read(self) -> Any:
        return self.container[self.key]

    def write(self, value: Any) -> None:
        self.container[self.key] = value


def var(namespace: MutableMapping[str, Any], name: str) -> NameTarget:
    """Build a variable target."""
    return NameTarget(namespace, name)


def attr(obj: Any, name: str) -> AttrTarget:
    """Build an attribute target."""
    return AttrTarget(obj, name)


def item(container: Any, key: Any) -> ItemTarget:
    """Build a subscript target."""
    return ItemTarget(container, key)


def resolve_target(target: Any) -> Target:
    """Check that *target* names an assignable location and return it."""
    if not isinstance(target, Target):
        msg = (
            "?= target must be a variable, attribute, or subscript slot, "
            f"got {type(target).__name__}"
        )
        raise TargetError(msg)
    target.validate()
    return target


def assign_if_absent(target: Target, default: Callable[[], Any]) -> Any:
    """``target ?= default()``.  Returns the value stored at *target*.

    *default* is only called when the current value is absent.  The store
    happens in both cases, matching ``target = target ?else default``.
    """
    location = resolve_target(target)
    require_thunks("assign_if_absent", (default,))
    value = fallback(location.read(), default)
    location.write(value)
    return value
