"""Tests for the launch mode catalog."""

import pytest

from ms_core.catalog import LaunchMode, by_identifier, catalog

pytestmark = pytest.mark.unit_core

EXPECTED = [
    ("terminal-only", "Terminal (Ghostty)", "Only a terminal in the chosen directory"),
    ("terminal-tmux", "Terminal + Tmux", "Terminal with tmux running (no named session)"),
    ("tmux-session", "Tmux Session", "Named tmux session, reattachable"),
    ("tmux-nvim", "Tmux + Neovim", "Tmux session with Neovim auto-started"),
    (
        "tmux-nvim-claude",
        "Tmux + Neovim + Claude Code",
        "Session with Neovim and an assistant tool in separate windows",
    ),
]


def test_catalog_order_and_display_strings():
    modes = catalog()
    assert [(m.identifier, m.title, m.description) for m in modes] == EXPECTED


def test_catalog_identifiers_are_distinct():
    identifiers = [m.identifier for m in catalog()]
    assert len(identifiers) == len(set(identifiers))


def test_catalog_is_stable_between_calls():
    assert catalog() == catalog()
    assert catalog() == tuple(LaunchMode)


def test_identifier_is_enum_value_and_str():
    assert LaunchMode.TMUX_NVIM.value == "tmux-nvim"
    assert LaunchMode.TMUX_NVIM.identifier == "tmux-nvim"
    assert str(LaunchMode.TMUX_NVIM_CLAUDE) == "tmux-nvim-claude"


def test_by_identifier_round_trips_known_tokens():
    for mode in catalog():
        assert by_identifier(mode.identifier) is mode


@pytest.mark.parametrize("token", ["", "tmux", "TERMINAL-ONLY", "terminal_only"])
def test_by_identifier_unknown_returns_none(token):
    assert by_identifier(token) is None
