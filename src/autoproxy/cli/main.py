"""CLI entry point.

`autoproxy` without arguments runs the interactive flow; `autoproxy doctor`
groups the read-only diagnostics.
"""

from __future__ import annotations

from functools import partial

import typer
from rich.console import Console

from autoproxy.cli import doctor
from autoproxy.cli.context import build_context
from autoproxy.cli.ui_components import (
    print_banner,
    print_completion,
    print_error,
    print_info,
    print_success,
    print_verification_hints,
    print_warning,
)
from autoproxy.core.config import AppSettings
from autoproxy.core.errors import AutoproxyError
from autoproxy.core.logging_config import configure_logging
from autoproxy.core.services.workflow import RunOutcome, WorkflowHooks, WorkflowResult, run_autoproxy

app = typer.Typer(
    add_completion=False,
    help="Detect the WSL2 network and write or remove the APT/shell proxy configuration.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _console_hooks(console: Console) -> WorkflowHooks:
    return WorkflowHooks(
        info=partial(print_info, console),
        success=partial(print_success, console),
        warning=partial(print_warning, console),
    )


def _report(result: WorkflowResult, settings: AppSettings) -> None:
    if result.outcome is RunOutcome.CONFIGURED:
        print_success(_console, "Proxy configured for current session")
        print_warning(
            _console,
            "For full effect in all applications, please restart your terminal "
            f"or run: source {settings.profile_script}",
        )
        _console.print()
        print_success(_console, "Proxy configuration completed!")
        print_verification_hints(_console)
    elif result.outcome is RunOutcome.REMOVED:
        print_success(
            _console,
            "Proxy configuration removed. Please restart your terminal for full effect.",
        )


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Configure the proxy when the IP is on the proxied network, offer removal otherwise."""

    if ctx.invoked_subcommand is not None:
        return

    settings = AppSettings()
    configure_logging(settings.log_level)
    if settings.show_banner:
        print_banner(_console)

    try:
        result = run_autoproxy(build_context(settings), hooks=_console_hooks(_console))
    except AutoproxyError as exc:
        print_error(_console, str(exc))
        raise typer.Exit(code=1) from exc

    if not result.environment.is_empty:
        result.environment.apply()
    _report(result, settings)
    print_completion(_console)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
