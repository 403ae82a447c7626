"""Single-shot selection flow.

The controller hands the catalog to a :class:`Presentation`, waits for exactly
one terminal event and turns it into an :class:`Outcome`: the line to print on
stdout (if any) and the process exit code. Every anomaly collapses into the
cancelled outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import IO, Callable, Protocol, Sequence, TypeAlias

from ms_common.errors import PresentationError, SelectionError
from ms_core.catalog import LaunchMode, catalog

logger = logging.getLogger(__name__)

EXIT_CHOSEN = 0
EXIT_NO_SELECTION = 1


@dataclass(frozen=True)
class Choice:
    """Display data for one catalog entry."""

    title: str
    description: str


@dataclass(frozen=True)
class Selected:
    """Presentation event: the entry at ``index`` was picked."""

    index: int


@dataclass(frozen=True)
class Cancelled:
    """Presentation event and result: nothing was picked."""


@dataclass(frozen=True)
class Chosen:
    """Result: the mode with ``identifier`` was picked."""

    identifier: str


PresentationEvent: TypeAlias = Selected | Cancelled
SelectionResult: TypeAlias = Chosen | Cancelled
EventCallback: TypeAlias = Callable[[PresentationEvent], None]


class Presentation(Protocol):
    def present(
        self,
        choices: Sequence[Choice],
        *,
        context: str | None,
        on_event: EventCallback,
    ) -> None:
        """Show ``choices`` in order and report one event through ``on_event``.

        Blocks until the user commits a choice or dismisses the picker.
        """


class SelectionState(Enum):
    AWAITING_CHOICE = "awaiting_choice"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class Outcome:
    """What the process reports to its caller."""

    output_line: str | None
    exit_code: int

    @classmethod
    def from_result(cls, result: SelectionResult) -> "Outcome":
        if isinstance(result, Chosen):
            return cls(output_line=result.identifier, exit_code=EXIT_CHOSEN)
        return cls(output_line=None, exit_code=EXIT_NO_SELECTION)

    @property
    def chosen(self) -> bool:
        return self.exit_code == EXIT_CHOSEN


def choices_for(modes: Sequence[LaunchMode]) -> list[Choice]:
    """Project modes onto the display data a presentation needs."""
    return [Choice(title=mode.title, description=mode.description) for mode in modes]


def _check_modes(modes: Sequence[LaunchMode]) -> None:
    seen: set[str] = set()
    for mode in modes:
        if mode.identifier in seen:
            raise SelectionError(
                "Duplicate launch mode identifier",
                context={"identifier": mode.identifier},
            )
        seen.add(mode.identifier)


class SelectionController:
    """State machine for one choose-or-cancel round."""

    def __init__(
        self,
        presentation: Presentation,
        modes: Sequence[LaunchMode] | None = None,
    ) -> None:
        self._presentation = presentation
        self._modes: tuple[LaunchMode, ...] = tuple(modes) if modes is not None else catalog()
        _check_modes(self._modes)
        self._result: SelectionResult | None = None

    @property
    def modes(self) -> tuple[LaunchMode, ...]:
        return self._modes

    @property
    def state(self) -> SelectionState:
        if self._result is None:
            return SelectionState.AWAITING_CHOICE
        return SelectionState.RESOLVED

    @property
    def result(self) -> SelectionResult | None:
        return self._result

    def _is_valid_index(self, index: object) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._modes)

    def _resolve(self, result: SelectionResult) -> SelectionResult:
        self._result = result
        logger.debug("Selection resolved: %s", result)
        return result

    def choose(self, index: int) -> SelectionResult:
        if self._result is not None:
            logger.debug("Ignoring choose(%r): already resolved", index)
            return self._result
        if not self._is_valid_index(index):
            logger.debug(
                "Presentation reported index %r outside catalog of %d modes",
                index,
                len(self._modes),
            )
            return self._resolve(Cancelled())
        return self._resolve(Chosen(self._modes[index].identifier))

    def cancel(self) -> SelectionResult:
        if self._result is not None:
            logger.debug("Ignoring cancel(): already resolved")
            return self._result
        return self._resolve(Cancelled())

    def handle(self, event: PresentationEvent) -> SelectionResult:
        """Callback given to the presentation."""
        if isinstance(event, Selected):
            return self.choose(event.index)
        return self.cancel()

    def run(self, context: str | None = None) -> Outcome:
        """Present the catalog once and return the resulting outcome."""
        if self._result is not None:
            return Outcome.from_result(self._result)

        if not self._modes:
            logger.debug("No launch modes to present")
            return Outcome.from_result(self.cancel())

        try:
            self._presentation.present(
                choices_for(self._modes),
                context=context,
                on_event=self.handle,
            )
        except KeyboardInterrupt:
            logger.debug("Interrupted while awaiting a choice")
        except PresentationError as exc:
            logger.debug("Presentation failed: %s", exc, exc_info=True)
        except Exception:
            logger.debug("Unexpected presentation failure", exc_info=True)

        result = self._result
        if result is None:
            logger.debug("Presentation returned without reporting an event")
            result = self.cancel()
        return Outcome.from_result(result)


def select_mode(
    presentation: Presentation,
    context: str | None = None,
    modes: Sequence[LaunchMode] | None = None,
) -> Outcome:
    """Run one selection round against ``presentation``."""
    return SelectionController(presentation, modes).run(context)


def emit(outcome: Outcome, stream: IO[str]) -> None:
    """Write the outcome's stdout line, if any, as a single flushed line."""
    if outcome.output_line is None:
        return
    stream.write(f"{outcome.output_line}\n")
    stream.flush()
