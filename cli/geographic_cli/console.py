from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()


def print_json(data) -> None:
    console.print_json(data=data)


def print_body(body: Any) -> None:
    """Print a response body: JSON documents pretty-printed, anything else verbatim."""
    if isinstance(body, (dict, list)):
        print_json(body)
    elif body is None:
        info("(no content)")
    else:
        console.print(str(body), markup=False, highlight=False)


def info(msg: str) -> None:
    console.print(f"[bold cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    console.print(f"[bold green]OK[/] {msg}")


def warn(msg: str) -> None:
    console.print(f"[bold yellow]WARN[/] {msg}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {escape(msg)}")


def print(*args, **kwargs):
    """Proxy to underlying rich Console.print()."""
    console.print(*args, **kwargs)
