from __future__ import annotations

import typer

from .. import console
from ..calls import localized, parse_params, run_request
from ..formatting import extract_items, items_table

app = typer.Typer(help="Destinations.")


@app.command("list")
def list_destinations(
        lat: float | None = typer.Option(None, "--lat", help="Latitude (use with --lon and --radius)."),
        lon: float | None = typer.Option(None, "--lon", help="Longitude (use with --lat and --radius)."),
        radius: int | None = typer.Option(None, "--radius", help="Radius in meters."),
        address: str | None = typer.Option(None, "--address", help="Address."),
        city: str | None = typer.Option(None, "--city", help="City."),
        county: str | None = typer.Option(None, "--county", help="County."),
        state: str | None = typer.Option(None, "--state", help="State."),
        country: str | None = typer.Option(None, "--country", help="Country."),
        postal_code: str | None = typer.Option(None, "--postal-code", help="Postal code."),
        limit: int | None = typer.Option(None, "--limit", help="Pagination limit."),
        offset: int | None = typer.Option(None, "--offset", help="Pagination offset."),
        lang: str | None = typer.Option(None, "--lang", help="Accept-Language for localized results."),
        extra: list[str] | None = typer.Option(None, "--param", help="Extra query parameter key=value. Repeatable."),
        domain: str | None = typer.Option(None, "--domain", help="Override API domain."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    params = localized(lang, limit, offset)
    params.update(
        latitude=lat,
        longitude=lon,
        radius=radius,
        address=address,
        city=city,
        county=county,
        state=state,
        country=country,
        postal_code=postal_code,
    )
    extra_query = parse_params(extra)

    result = run_request(
        lambda client: client.destinations_list(extra_query=extra_query, **params),
        action="list destinations",
        domain=domain,
    )
    if json_out:
        console.print_body(result.body)
        return

    items = extract_items(result.body, "destinations")
    if not items:
        console.info("No destinations found.")
        return
    console.console.print(items_table("Destinations", items, with_kind=False))


@app.command("get")
def get_destination(
        destination_id: str = typer.Argument(..., help="Destination identifier."),
        lang: str | None = typer.Option(None, "--lang", help="Accept-Language for localized results."),
        domain: str | None = typer.Option(None, "--domain", help="Override API domain."),
):
    params = localized(lang)
    result = run_request(
        lambda client: client.destinations_get(id=destination_id, **params),
        action=f"fetch destination {destination_id}",
        domain=domain,
    )
    console.print_body(result.body)
