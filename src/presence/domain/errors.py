"""Exception hierarchy for existence evaluation and ``?=`` targets."""

from __future__ import annotations


class PresenceError(Exception):
    """Base class for all errors raised by presence."""


class EvaluationError(PresenceError):
    """A custom existence check raised while computing a verdict.

    The hook's own exception is kept as :attr:`original` and is also the
    ``__cause__`` of this error, so nothing is lost on the way up.
    """

    def __init__(self, value_type: type, original: BaseException) -> None:
        self.value_type = value_type
        self.original = original
        super().__init__(
            f"Existence check for {value_type.__qualname__} failed: "
            f"{type(original).__name__}: {original}"
        )


class TargetError(PresenceError, TypeError):
    """The ``?=`` target does not denote an assignable location."""
