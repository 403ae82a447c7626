"""
Presentation package providing the terminal picker and a headless stand-in.
"""

from ms_ui.tui.system.protocols import UI, Presentation
from ms_ui.tui.system.facade import TUI
from ms_ui.tui.system.headless import HeadlessUI

__all__ = [
    "UI",
    "TUI",
    "HeadlessUI",
    "Presentation",
]
