"""Launch mode catalog.

The members of :class:`LaunchMode` are the complete, ordered set of startup
strategies offered to the user. Their values are the identifiers written to
stdout and matched by downstream launcher scripts, so they must never change.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class LaunchMode(Enum):
    """A named startup strategy with its display strings."""

    title: str
    description: str

    TERMINAL_ONLY = (
        "terminal-only",
        "Terminal (Ghostty)",
        "Only a terminal in the chosen directory",
    )
    TERMINAL_TMUX = (
        "terminal-tmux",
        "Terminal + Tmux",
        "Terminal with tmux running (no named session)",
    )
    TMUX_SESSION = (
        "tmux-session",
        "Tmux Session",
        "Named tmux session, reattachable",
    )
    TMUX_NVIM = (
        "tmux-nvim",
        "Tmux + Neovim",
        "Tmux session with Neovim auto-started",
    )
    TMUX_NVIM_CLAUDE = (
        "tmux-nvim-claude",
        "Tmux + Neovim + Claude Code",
        "Session with Neovim and an assistant tool in separate windows",
    )

    def __new__(cls, identifier: str, title: str, description: str) -> "LaunchMode":
        member = object.__new__(cls)
        member._value_ = identifier
        member.title = title
        member.description = description
        return member

    @property
    def identifier(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def catalog() -> tuple[LaunchMode, ...]:
    """Return every launch mode in presentation order."""
    return tuple(LaunchMode)


def by_identifier(identifier: str) -> LaunchMode | None:
    """Look up a mode by its stdout token; unknown tokens yield None."""
    try:
        return LaunchMode(identifier)
    except ValueError:
        return None
