"""Error types raised inside mode-selector.

None of them reaches the caller: the selection controller folds every
failure into a cancelled run (no output, exit 1) and logs it at debug level.
"""

from __future__ import annotations

from typing import Any, Mapping

ContextValue = str | int | float | bool | None


def _flatten(value: Any) -> ContextValue:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


class MSError(Exception):
    """Base error; ``context`` holds flat details such as the tty path."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, ContextValue] = {
            key: _flatten(value) for key, value in (context or {}).items()
        }
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class PresentationError(MSError):
    """The choices could not be shown or the user action could not be read."""


class SelectionError(MSError):
    """A controller was built over an inconsistent set of modes."""
