"""The ExistenceCheckable protocol.

A type opts into custom existence semantics either by defining
``__exists__`` (checked structurally) or by registering a hook with
:func:`presence.domain.registry.register_existence_check`.  Registered
hooks take precedence over ``__exists__``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ExistenceCheckable(Protocol):
    """Objects that compute their own existence verdict.

    Typical implementers are proxies for remote or deferred resources
    that are truthy objects but may not refer to present data.
    """

    def __exists__(self) -> bool: ...
