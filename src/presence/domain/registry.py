"""Per-type existence-check registry.

Maps a class to a hook ``hook(value) -> bool``.  Lookup walks the value's
MRO so a hook registered for a base class covers its subclasses; the
nearest registration wins.  If no class in the MRO has a hook, abstract
base classes are tried with ``issubclass`` in registration order, so a hook
on ``numbers.Number`` also covers ``float`` (a virtual subclass).  The
sentinel types never resolve to a hook.

Writes are serialized by a lock and replace the mapping wholesale, so a
concurrent :func:`exists` call always sees a complete snapshot.
"""

from __future__ import annotations

import logging
import threading
from abc import ABCMeta
from collections.abc import Callable
from typing import Any, TypeVar

from presence.domain.sentinels import SENTINEL_TYPES

logger = logging.getLogger(__name__)

ExistenceHook = Callable[[Any], Any]

_F = TypeVar("_F", bound=ExistenceHook)

_lock = threading.Lock()
_hooks: dict[type, ExistenceHook] = {}


def register_existence_check(cls: type, hook: ExistenceHook) -> None:
    """Register *hook* as the existence check for *cls* and its subclasses.

    Re-registering a class replaces its previous hook.  The sentinel types
    are fixed for the life of the process and cannot be overridden.
    """
    global _hooks

    if not isinstance(cls, type):
        msg = f"Existence checks are registered per class, got {cls!r}"
        raise TypeError(msg)
    if not callable(hook):
        msg = f"Existence check for {cls.__qualname__} must be callable"
        raise TypeError(msg)
    if cls in SENTINEL_TYPES:
        msg = f"{cls.__qualname__} is an absence sentinel type and cannot be overridden"
        raise ValueError(msg)
    if isinstance(cls, ABCMeta):
        try:
            issubclass(object, cls)
        except TypeError as exc:
            msg = f"{cls.__qualname__} does not support issubclass() checks"
            raise TypeError(msg) from exc

    with _lock:
        updated = dict(_hooks)
        replaced = cls in updated
        updated[cls] = hook
        _hooks = updated
    logger.debug(
        "%s existence check for %s",
        "Replaced" if replaced else "Registered",
        cls.__qualname__,
    )


def unregister_existence_check(cls: type) -> bool:
    """Remove the hook registered directly on *cls*.

    Returns True if a hook was removed.  Hooks inherited from a base class
    are untouched.
    """
    global _hooks

    with _lock:
        if cls not in _hooks:
            return False
        updated = dict(_hooks)
        del updated[cls]
        _hooks = updated
    logger.debug("Unregistered existence check for %s", cls.__qualname__)
    return True


def get_existence_check(cls: type) -> ExistenceHook | None:
    """Return the effective registered hook for *cls*, or None."""
    hooks = _hooks
    if not hooks or cls in SENTINEL_TYPES:
        return None
    for klass in cls.__mro__:
        hook = hooks.get(klass)
        if hook is not None:
            return hook
    for klass, hook in hooks.items():
        if isinstance(klass, ABCMeta) and issubclass(cls, klass):
            return hook
    return None


def registered_types() -> list[type]:
    """Return the classes that currently have a registered hook."""
    return list(_hooks)


def existence_check(cls: type) -> Callable[[_F], _F]:
    """Decorator form of :func:`register_existence_check`.

    Usage::

        @existence_check(RemoteHandle)
        def _remote_exists(handle: RemoteHandle) -> bool:
            return handle.fetched and handle.payload is not None
    """

    def decorator(hook: _F) -> _F:
        register_existence_check(cls, hook)
        return hook

    return decorator


def snapshot() -> dict[type, ExistenceHook]:
    """Return a copy of the current registrations."""
    return dict(_hooks)


def restore(saved: dict[type, ExistenceHook]) -> None:
    """Replace all registrations with *saved* (see :func:`snapshot`)."""
    global _hooks

    with _lock:
        _hooks = dict(saved)
