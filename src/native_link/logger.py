"""User-facing console output for the CLI."""

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, highlight=False)

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def info(message: str) -> None:
    console.print(f"[cyan]info[/cyan] {escape(message)}")


def success(message: str) -> None:
    console.print(f"[green]success[/green] {escape(message)}")


def warn(message: str) -> None:
    console.print(f"[yellow]warn[/yellow] {escape(message)}")


def error(message: str) -> None:
    console.print(f"[red]error[/red] {escape(message)}")


def debug(message: str) -> None:
    if _verbose:
        console.print(f"[dim]debug {escape(message)}[/dim]")
