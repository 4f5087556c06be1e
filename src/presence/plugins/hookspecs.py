"""Pluggy hook specifications for presence.

One setup-time hook lets installed packages contribute existence checks
for their own types (proxies, lazy handles, domain-specific "unknown"
markers) without the host application registering them by hand.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pluggy

PROJECT_NAME = "presence"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class PresenceHookSpec:
    """Hook specifications for the presence plugin system."""

    @hookspec
    def register_existence_checks(self) -> dict[type, Callable[[Any], bool]] | None:
        """Return class -> hook mappings to add to the existence-check registry."""
