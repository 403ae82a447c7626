"""CLI contract tests: one identifier line and exit 0, or nothing and exit 1."""

import pytest
from typer.testing import CliRunner

from ms_core.catalog import catalog
from ms_core.selection import Cancelled, Selected
from ms_ui import cli
from ms_ui.tui.system.headless import HeadlessUI

pytestmark = pytest.mark.unit_ui

runner = CliRunner()


def _invoke(ctx_store, event, args=()):
    ui = HeadlessUI(next_event=event)
    ctx_store.ui = ui
    result = runner.invoke(cli.app, list(args), catch_exceptions=False)
    return result, ui


def test_no_argument_select_fourth(cli_context):
    result, ui = _invoke(cli_context, Selected(3))
    assert result.exit_code == 0
    assert result.stdout == "tmux-nvim\n"
    assert ui.recorded_context is None


def test_project_path_then_cancel(cli_context):
    result, ui = _invoke(cli_context, Cancelled(), ["/Users/x/proj"])
    assert result.exit_code == 1
    assert result.stdout == ""
    assert ui.recorded_context == "/Users/x/proj"


def test_select_first(cli_context):
    result, _ = _invoke(cli_context, Selected(0))
    assert (result.exit_code, result.stdout) == (0, "terminal-only\n")


def test_select_fifth(cli_context):
    result, _ = _invoke(cli_context, Selected(4), ["/srv/project"])
    assert (result.exit_code, result.stdout) == (0, "tmux-nvim-claude\n")


def test_invalid_index_exits_one_without_identifier(cli_context):
    result, _ = _invoke(cli_context, Selected(99))
    assert result.exit_code == 1
    identifiers = {m.identifier for m in catalog()}
    assert not any(token in result.output for token in identifiers)


def test_empty_project_path_is_treated_as_absent(cli_context):
    result, ui = _invoke(cli_context, Selected(1), [""])
    assert result.stdout == "terminal-tmux\n"
    assert ui.recorded_context is None


def test_extra_arguments_are_ignored(cli_context):
    result, ui = _invoke(cli_context, Selected(2), ["/a", "/b", "--unknown"])
    assert (result.exit_code, result.stdout) == (0, "tmux-session\n")
    assert ui.recorded_context == "/a"


def test_headless_flag_cancels_without_scripted_ui(cli_context):
    result = runner.invoke(cli.app, ["--headless", "/tmp/p"], catch_exceptions=False)
    assert result.exit_code == 1
    assert result.stdout == ""
    assert isinstance(cli_context.ui, HeadlessUI)


def test_presentation_failure_exits_one(cli_context):
    class BrokenPresentation:
        def present(self, choices, *, context, on_event):
            raise RuntimeError("display went away")

    ui = HeadlessUI()
    ui.presentation = BrokenPresentation()
    cli_context.ui = ui
    result = runner.invoke(cli.app, [], catch_exceptions=False)
    assert result.exit_code == 1
    assert result.stdout == ""


def test_help_flag_is_just_a_project_path(cli_context):
    result, ui = _invoke(cli_context, Cancelled(), ["--help"])
    assert (result.exit_code, result.stdout) == (1, "")
    assert ui.recorded_context == "--help"


def test_dash_prefixed_project_path_is_displayed(cli_context):
    result, ui = _invoke(cli_context, Selected(3), ["-proj"])
    assert (result.exit_code, result.stdout) == (0, "tmux-nvim\n")
    assert ui.recorded_context == "-proj"


@pytest.mark.parametrize(
    "args",
    [["--debug=x"], ["--headless", "--headless=1"], ["/tmp/p", "--debug=yes"]],
)
def test_flag_with_value_exits_one_without_presenting(cli_context, args):
    result, ui = _invoke(cli_context, Selected(0), args)
    assert (result.exit_code, result.stdout) == (1, "")
    assert ui.presented == 0
