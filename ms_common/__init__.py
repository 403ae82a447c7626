"""Shared helpers for mode-selector."""

from ms_common.api import MSError, PresentationError, SelectionError, configure_logging

__all__ = ["configure_logging", "MSError", "PresentationError", "SelectionError"]
