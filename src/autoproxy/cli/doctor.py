"""Doctor commands: read-only diagnostics of the host and installed files."""

from __future__ import annotations

import os
import shutil

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from autoproxy.adapters.privileged_fs import is_root
from autoproxy.cli.context import build_context
from autoproxy.cli.ui_components import build_doctor_table, print_error, print_info, print_success
from autoproxy.core.config import AppSettings
from autoproxy.core.domain.models import PROXY_ENV_VARS
from autoproxy.core.errors import AutoproxyError
from autoproxy.core.logging_config import configure_logging
from autoproxy.core.services.network_policy import describe_policy, detect_ipv4
from autoproxy.core.services.proxy_config import mask_credentials

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run() -> None:
    """Show what autoproxy would do on this host, without changing anything."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    context = build_context(settings)

    table = build_doctor_table()

    address = detect_ipv4(context.address_source)
    if address is None:
        table.add_row("IPv4 address", "FAIL", Text("No IPv4 address reported by hostname -I"))
    else:
        table.add_row("IPv4 address", "OK", Text(address))
        needed = context.policy(address)
        table.add_row(
            "Proxy policy",
            "REQUIRED" if needed else "NOT NEEDED",
            Text(f"IP {describe_policy(context.policy, negate=not needed)}"),
        )

    for label, path in (("APT proxy file", settings.apt_proxy_conf), ("Profile script", settings.profile_script)):
        table.add_row(label, "PRESENT" if context.writer.exists(path) else "ABSENT", Text(str(path)))

    encoder = context.encoder
    command = encoder.required_command
    if command is None:
        table.add_row("URL encoder", "OK", Text(f"{encoder.name} (built in)"))
    elif shutil.which(command):
        table.add_row("URL encoder", "OK", Text(f"{encoder.name} ({shutil.which(command)})"))
    else:
        table.add_row("URL encoder", "MISSING", Text(f"{command} is installed on the next configuration run"))

    if is_root():
        table.add_row("Privileges", "OK", Text("Running as root"))
    elif context.writer.escalates:
        table.add_row("Privileges", "SUDO", Text("File writes and installs escalate through sudo"))
    else:
        table.add_row("Privileges", "USER", Text("Escalation disabled (AUTOPROXY_USE_SUDO=false)"))

    for name in PROXY_ENV_VARS:
        value = os.environ.get(name)
        if value is None:
            table.add_row(name, "UNSET", Text(""))
        else:
            table.add_row(name, "SET", Text(mask_credentials(value)))

    _console.print(table)


@app.command()
def show() -> None:
    """Print the installed configuration files, passwords masked."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    writer = build_context(settings).writer

    found = False
    for path in (settings.apt_proxy_conf, settings.profile_script):
        try:
            content = writer.read_text(path)
        except AutoproxyError as exc:
            print_error(_console, str(exc))
            raise typer.Exit(code=1) from exc
        if content is None:
            print_info(_console, f"{path} is not present")
            continue
        found = True
        _console.print(Panel(Text(mask_credentials(content)), title=str(path), border_style="cyan"))

    if not found:
        print_success(_console, "No proxy configuration installed")
