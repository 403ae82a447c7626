"""Public API surface for ms_core."""

from ms_core.catalog import LaunchMode, by_identifier, catalog
from ms_core.selection import (
    EXIT_CHOSEN,
    EXIT_NO_SELECTION,
    Cancelled,
    Choice,
    Chosen,
    EventCallback,
    Outcome,
    Presentation,
    PresentationEvent,
    Selected,
    SelectionController,
    SelectionResult,
    SelectionState,
    choices_for,
    emit,
    select_mode,
)

__all__ = [
    "EXIT_CHOSEN",
    "EXIT_NO_SELECTION",
    "LaunchMode",
    "by_identifier",
    "catalog",
    "Cancelled",
    "Choice",
    "Chosen",
    "EventCallback",
    "Outcome",
    "Presentation",
    "PresentationEvent",
    "Selected",
    "SelectionController",
    "SelectionResult",
    "SelectionState",
    "choices_for",
    "emit",
    "select_mode",
]
