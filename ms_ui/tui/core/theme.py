from __future__ import annotations

from typing import Mapping

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = "cyan"

WINDOW_TITLE = "Project Launcher - Choose mode"
HEADER_TEXT = "Choose how to launch the project:"
FOOTER_HINT = "Up/Down move  Enter select  Esc cancel  Ctrl+R clear search"


def panel_title(text: str) -> str:
    return f"[{RICH_ACCENT_BOLD}]{text}[/{RICH_ACCENT_BOLD}]"


def context_line(context: str) -> str:
    return f"Project: {context}"


def prompt_toolkit_picker_style() -> Mapping[str, str]:
    return {
        "selected": "bg:#0000aa fg:white bold",
        "separator": "fg:#0000aa",
        "frame.border": "fg:#0000aa",
        "frame.label": "fg:#0000aa bold",
        "search": "bg:#eeeeee fg:#000000",
        "header": "bold",
        "path": "fg:#888888",
        "hint": "fg:#888888 italic",
    }
