from ms_core.selection import Presentation
from ms_ui.tui.core import theme
from ms_ui.tui.system.components.picker import TerminalPresentation
from ms_ui.tui.system.protocols import UI


class TUI(UI):
    def __init__(self, title: str = theme.WINDOW_TITLE):
        self.presentation: Presentation = TerminalPresentation(title=title)
