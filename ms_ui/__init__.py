"""UI facade for the mode-selector CLI and terminal picker."""

from ms_ui.cli import app, main

__all__ = ["app", "main"]
