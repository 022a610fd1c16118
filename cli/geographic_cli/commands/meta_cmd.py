from __future__ import annotations

import typer

from .. import console
from ..calls import run_request


def languages(
        domain: str | None = typer.Option(None, "--domain", help="Override API domain."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Languages in which geographic data can be localized."""
    result = run_request(
        lambda client: client.supported_languages(),
        action="list supported languages",
        domain=domain,
    )
    body = result.body
    langs = body.get("languages") if isinstance(body, dict) else None
    if json_out or not isinstance(langs, list):
        console.print_body(body)
        return
    console.console.print(" ".join(str(lang) for lang in langs))


def version(
        domain: str | None = typer.Option(None, "--domain", help="Override API domain."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Current version of the geographic API."""
    result = run_request(
        lambda client: client.api_version(),
        action="fetch API version",
        domain=domain,
    )
    body = result.body
    value = body.get("version") if isinstance(body, dict) else None
    if json_out or value is None:
        console.print_body(body)
        return
    console.console.print(str(value))
