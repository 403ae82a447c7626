"""
Command-line interface for mode-selector.

Shows the launch modes, prints the chosen identifier on stdout and exits 0, or
prints nothing and exits 1 when the user cancels.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import typer
from typer.core import TyperCommand

from ms_common.api import configure_logging
from ms_core.api import EXIT_NO_SELECTION, emit, select_mode
from ms_ui.wiring.dependencies import UIContext

logger = logging.getLogger(__name__)

ctx_store = UIContext()

app = typer.Typer(
    help="Pick how a project should be launched.",
    add_completion=False,
)


class SelectCommand(TyperCommand):
    """Command whose argument errors end the run as a cancellation.

    The caller only understands exit codes 0 and 1, so a flag given a value
    (``--debug=x``) exits 1 with empty stdout instead of click's usage
    error.
    """

    def parse_args(self, ctx: Any, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except (typer.Exit, typer.Abort):
            raise
        except Exception as exc:
            logger.debug("Unusable command line %s: %s", args, exc)
            raise typer.Exit(EXIT_NO_SELECTION) from exc


@app.command(
    cls=SelectCommand,
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def select(
    ctx: typer.Context,
    project_path: Optional[str] = typer.Argument(
        None,
        help="Project path shown above the modes (display only).",
        show_default=False,
    ),
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Use the non-interactive presentation (always cancels).",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log diagnostics to stderr.",
    ),
) -> None:
    """Choose a launch mode for PROJECT_PATH."""
    configure_logging(debug=debug, force=True)
    ctx_store.headless = headless
    if ctx.args:
        logger.debug("Ignoring extra arguments: %s", ctx.args)

    outcome = select_mode(ctx_store.ui.presentation, context=project_path or None)
    emit(outcome, sys.stdout)
    raise typer.Exit(outcome.exit_code)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
