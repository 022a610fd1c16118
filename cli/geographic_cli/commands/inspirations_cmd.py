from __future__ import annotations

import typer
from geographic_client.endpoints import INSPIRATION_KINDS

from .. import console
from ..calls import localized, parse_params, run_request
from ..formatting import extract_items, items_table

app = typer.Typer(help="Inspirations (dossiers, events, news in brief, slide shows, tests).")


@app.command("list")
def list_inspirations(
        kind: str = typer.Option(
            "all",
            "--kind",
            help=f"Inspiration kind: {', '.join(INSPIRATION_KINDS)}.",
        ),
        lat: float | None = typer.Option(None, "--lat", help="Latitude (use with --lon and --radius)."),
        lon: float | None = typer.Option(None, "--lon", help="Longitude (use with --lat and --radius)."),
        radius: int | None = typer.Option(None, "--radius", help="Radius in meters."),
        city: str | None = typer.Option(None, "--city", help="City."),
        country: str | None = typer.Option(None, "--country", help="Country."),
        postal_code: str | None = typer.Option(None, "--postal-code", help="Postal code."),
        limit: int | None = typer.Option(None, "--limit", help="Pagination limit."),
        offset: int | None = typer.Option(None, "--offset", help="Pagination offset."),
        lang: str | None = typer.Option(None, "--lang", help="Accept-Language for localized results."),
        extra: list[str] | None = typer.Option(None, "--param", help="Extra query parameter key=value. Repeatable."),
        domain: str | None = typer.Option(None, "--domain", help="Override API domain."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    endpoint = INSPIRATION_KINDS.get(kind.strip().lower())
    if endpoint is None:
        console.err(f"Unknown inspiration kind: {kind}")
        raise typer.Exit(code=2)

    params = localized(lang, limit, offset)
    params.update(
        latitude=lat,
        longitude=lon,
        radius=radius,
        city=city,
        country=country,
        postal_code=postal_code,
    )
    extra_query = parse_params(extra)

    result = run_request(
        lambda client: client.call(endpoint, extra_query=extra_query, **params),
        action="list inspirations",
        domain=domain,
    )
    if json_out:
        console.print_body(result.body)
        return

    items = extract_items(result.body, "inspirations")
    if not items:
        console.info("No inspirations found.")
        return
    console.console.print(items_table("Inspirations", items))


@app.command("get")
def get_inspiration(
        inspiration_id: str = typer.Argument(..., help="Inspiration identifier."),
        lang: str | None = typer.Option(None, "--lang", help="Accept-Language for localized results."),
        domain: str | None = typer.Option(None, "--domain", help="Override API domain."),
):
    params = localized(lang)
    result = run_request(
        lambda client: client.inspirations_get(id=inspiration_id, **params),
        action=f"fetch inspiration {inspiration_id}",
        domain=domain,
    )
    console.print_body(result.body)
