from dataclasses import dataclass, field
from typing import Sequence

from ms_core.selection import Cancelled, Choice, EventCallback, PresentationEvent
from ms_ui.tui.system.protocols import UI


@dataclass
class HeadlessUI(UI):
    """Scripted UI for tests and non-interactive runs.

    Replays ``next_event`` (cancel by default) and records what was shown.
    """

    next_event: PresentationEvent = field(default_factory=Cancelled)
    recorded_choices: list[Choice] = field(default_factory=list)
    recorded_context: str | None = None
    presented: int = 0

    def __post_init__(self):
        self.presentation = _HeadlessPresentation(self)


class _HeadlessPresentation:
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def present(
        self,
        choices: Sequence[Choice],
        *,
        context: str | None,
        on_event: EventCallback,
    ) -> None:
        self._ui.presented += 1
        self._ui.recorded_choices = list(choices)
        self._ui.recorded_context = context
        on_event(self._ui.next_event)
