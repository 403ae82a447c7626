"""Public API surface for ms_common."""

from ms_common.errors import MSError, PresentationError, SelectionError
from ms_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "MSError",
    "PresentationError",
    "SelectionError",
]
