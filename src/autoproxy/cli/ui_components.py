"""UI components for the CLI (Rich).

Status lines follow a fixed `[LEVEL] message` shape so they stay readable
without colours. Messages are assembled as `Text`, never parsed as markup:
prompts and paths may contain square brackets.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text


_LEVEL_STYLES = {
    "INFO": "blue",
    "SUCCESS": "green",
    "WARNING": "bold yellow",
    "ERROR": "red",
}


def print_status(console: Console, level: str, message: str) -> None:
    line = Text.assemble((f"[{level}]", _LEVEL_STYLES.get(level, "")), " ", message)
    console.print(line, soft_wrap=True)


def print_info(console: Console, message: str) -> None:
    print_status(console, "INFO", message)


def print_success(console: Console, message: str) -> None:
    print_status(console, "SUCCESS", message)


def print_warning(console: Console, message: str) -> None:
    print_status(console, "WARNING", message)


def print_error(console: Console, message: str) -> None:
    print_status(console, "ERROR", message)


def print_banner(console: Console) -> None:
    title = Text("WSL2 Ubuntu Proxy Auto-Configuration", style="bold cyan")
    subtitle = Text("Mirrored network detection • APT • login shells", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_completion(console: Console) -> None:
    console.print()
    console.print(Rule("Configuration Complete", style="cyan"))
    console.print()


def print_verification_hints(console: Console) -> None:
    console.print()
    console.print("To verify, run:")
    console.print(Text("  echo $http_proxy"))
    console.print(Text("  sudo apt-get update"))


def build_doctor_table() -> Table:
    table = Table(title="autoproxy doctor")
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
