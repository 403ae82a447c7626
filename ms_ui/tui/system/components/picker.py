from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from typing import Any, Callable, ContextManager, Iterator, Sequence, TypeAlias

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.output import Output, create_output
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ms_common.errors import PresentationError
from ms_core.selection import Cancelled, Choice, EventCallback, Selected
from ms_ui.tui.core import theme
from ms_ui.tui.system.components.mode_list import ModeList

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"

TerminalIO: TypeAlias = tuple[Input, Output]
TerminalFactory: TypeAlias = Callable[[], ContextManager[TerminalIO]]


@contextmanager
def controlling_terminal(path: str = TTY_PATH) -> Iterator[TerminalIO]:
    """Open the controlling terminal for prompt_toolkit input and output.

    The picker never draws on stdout, which belongs to the caller.
    """
    with ExitStack() as stack:
        try:
            tty_in = stack.enter_context(open(path, "r", encoding="utf-8"))
            tty_out = stack.enter_context(open(path, "w", encoding="utf-8"))
        except OSError as exc:
            raise PresentationError(
                "No controlling terminal available",
                context={"path": path},
                cause=exc,
            ) from exc
        yield create_input(stdin=tty_in), create_output(stdout=tty_out)


def _line(style: str, text: str) -> Window:
    return Window(height=1, content=FormattedTextControl([(style, text)]))


class _ModePickerApp:
    """Full-screen picker whose ``run()`` returns a catalog index or None."""

    def __init__(
        self,
        choices: Sequence[Choice],
        *,
        title: str = theme.WINDOW_TITLE,
        context: str | None = None,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.modes = ModeList(choices)
        self._console = Console(force_terminal=True)

        self.search = TextArea(
            height=1, prompt="Search: ", style="class:search", multiline=False
        )
        self.search.buffer.on_text_changed += self._on_search
        self.list_control = FormattedTextControl(self._render_rows)
        self.preview_control = FormattedTextControl(self._render_preview)

        self.app: Application[int | None] = Application(
            layout=Layout(
                Frame(self._body(context), title=title), focused_element=self.search
            ),
            key_bindings=self._keybindings(),
            style=Style.from_dict(dict(theme.prompt_toolkit_picker_style())),
            full_screen=True,
            input=input,
            output=output,
        )

    def _body(self, context: str | None) -> HSplit:
        rows: list[Any] = [_line("class:header", theme.HEADER_TEXT)]
        if context:
            rows.append(_line("class:path", theme.context_line(context)))
        rows += [
            self.search,
            Window(height=1, char="-", style="class:separator"),
            VSplit(
                [
                    Window(self.list_control, width=Dimension(weight=1)),
                    Window(width=1, char="|", style="class:separator"),
                    Window(self.preview_control, width=Dimension(weight=1)),
                ],
                padding=1,
            ),
            _line("class:hint", theme.FOOTER_HINT),
        ]
        return HSplit(rows)

    def _on_search(self, _buffer: Any) -> None:
        self.modes.narrow(self.search.text)
        self.app.invalidate()

    def _render_rows(self) -> list[tuple[str, str]]:
        fragments = []
        for position, index in enumerate(self.modes.rows):
            title = self.modes.choices[index].title
            if position == self.modes.cursor:
                fragments.append(("class:selected", f" ▸ {index + 1}. {title}\n"))
            else:
                fragments.append(("", f"   {index + 1}. {title}\n"))
        return fragments

    def _render_preview(self) -> ANSI:
        index = self.modes.highlighted
        if index is None:
            return ANSI("")
        choice = self.modes.choices[index]
        text = Text()
        text.append(f"{choice.title}\n", style="bold")
        text.append(f"{choice.description or '-'}\n\n")
        text.append("Enter to launch with this mode", style="italic")
        with self._console.capture() as capture:
            self._console.print(
                Panel(
                    text,
                    title=theme.panel_title("Mode"),
                    border_style=theme.RICH_BORDER_STYLE,
                    padding=(1, 2),
                )
            )
        return ANSI(capture.get())

    def _keybindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down")
        def _(e: Any) -> None:
            self._move(1)

        @kb.add("up")
        def _(e: Any) -> None:
            self._move(-1)

        @kb.add("enter")
        def _(e: Any) -> None:
            index = self.modes.highlighted
            if index is not None:
                self._finish(e.app, index)

        @kb.add("escape")
        @kb.add("c-c")
        @kb.add("c-d")
        def _(e: Any) -> None:
            self._finish(e.app, None)

        @kb.add("c-r")
        def _(e: Any) -> None:
            self.search.text = ""

        return kb

    def _finish(self, app: Application[Any], result: int | None) -> None:
        # a second key in the same batch must not exit twice
        if not app.is_done:
            app.exit(result=result)

    def _move(self, delta: int) -> None:
        self.modes.move(delta)
        self.app.invalidate()

    def run(self) -> int | None:
        return self.app.run()


class TerminalPresentation:
    """Presentation backed by the full-screen terminal picker."""

    def __init__(
        self,
        *,
        title: str = theme.WINDOW_TITLE,
        terminal: TerminalFactory = controlling_terminal,
    ) -> None:
        self.title = title
        self._terminal = terminal

    def present(
        self,
        choices: Sequence[Choice],
        *,
        context: str | None,
        on_event: EventCallback,
    ) -> None:
        if not choices:
            on_event(Cancelled())
            return

        with self._terminal() as (term_input, term_output):
            picker = _ModePickerApp(
                choices,
                title=self.title,
                context=context,
                input=term_input,
                output=term_output,
            )
            index = picker.run()

        if index is None:
            logger.debug("Picker dismissed")
            on_event(Cancelled())
            return
        on_event(Selected(index))
