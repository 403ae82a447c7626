"""Launch mode catalog and the selection state machine."""

from ms_core.api import LaunchMode, Outcome, SelectionController, catalog, emit, select_mode

__all__ = ["LaunchMode", "Outcome", "SelectionController", "catalog", "emit", "select_mode"]
