"""Process-wide holder for the UI the CLI presents through."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ms_ui.tui.system.protocols import UI


@dataclass
class UIContext:
    """Builds the UI on first access; tests assign ``ui`` to inject a fake."""

    headless: bool = False
    _ui: Optional[UI] = field(default=None, repr=False)

    @property
    def ui(self) -> UI:
        if self._ui is None:
            self._ui = self._build()
        return self._ui

    @ui.setter
    def ui(self, value: UI) -> None:
        self._ui = value

    def _build(self) -> UI:
        if self.headless:
            from ms_ui.tui.system.headless import HeadlessUI

            return HeadlessUI()
        from ms_ui.tui.system.facade import TUI

        return TUI()

    def reset(self) -> None:
        self.headless = False
        self._ui = None
