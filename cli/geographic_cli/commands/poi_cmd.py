from __future__ import annotations

from typing import Any

import typer

from .. import console
from ..calls import localized, parse_params, run_request
from ..formatting import extract_items, items_table

app = typer.Typer(help="Points of interest.")


@app.command("list")
def list_pois(
        lat: float | None = typer.Option(None, "--lat", help="Latitude (use with --lon and --radius)."),
        lon: float | None = typer.Option(None, "--lon", help="Longitude (use with --lat and --radius)."),
        radius: int | None = typer.Option(None, "--radius", help="Radius in meters."),
        max_lat: float | None = typer.Option(None, "--max-lat", help="Bounding box: northernmost latitude."),
        max_lon: float | None = typer.Option(None, "--max-lon", help="Bounding box: easternmost longitude."),
        min_lat: float | None = typer.Option(None, "--min-lat", help="Bounding box: southernmost latitude."),
        min_lon: float | None = typer.Option(None, "--min-lon", help="Bounding box: westernmost longitude."),
        filters: list[str] | None = typer.Option(None, "--filter", help="Filter on all POI data. Repeatable."),
        names: list[str] | None = typer.Option(None, "--name", help="POI name. Repeatable."),
        main_type: str | None = typer.Option(None, "--main-type", help="POI main type."),
        types: list[str] | None = typer.Option(None, "--type", help="POI type. Repeatable."),
        city: str | None = typer.Option(None, "--city", help="City."),
        country: str | None = typer.Option(None, "--country", help="Country."),
        postal_code: str | None = typer.Option(None, "--postal-code", help="Postal code."),
        rank_by: str | None = typer.Option(None, "--rank-by", help="Ranking criteria."),
        open_now: bool = typer.Option(False, "--open-now", help="Only POIs open for business now."),
        min_rating: int | None = typer.Option(None, "--min-rating", help="Minimum rating (1-5)."),
        max_price: int | None = typer.Option(None, "--max-price", help="Maximum price level (0-3)."),
        limit: int | None = typer.Option(None, "--limit", help="Pagination limit."),
        offset: int | None = typer.Option(None, "--offset", help="Pagination offset."),
        lang: str | None = typer.Option(None, "--lang", help="Accept-Language for localized results."),
        extra: list[str] | None = typer.Option(None, "--param", help="Extra query parameter key=value. Repeatable."),
        domain: str | None = typer.Option(None, "--domain", help="Override API domain."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    params: dict[str, Any] = localized(lang, limit, offset)
    params.update(
        latitude=lat,
        longitude=lon,
        radius=radius,
        maximum_latitude=max_lat,
        maximum_longitude=max_lon,
        minimum_latitude=min_lat,
        minimum_longitude=min_lon,
        filter=list(filters) if filters else None,
        name=list(names) if names else None,
        main_type=main_type,
        type=list(types) if types else None,
        city=city,
        country=country,
        postal_code=postal_code,
        rank_by=rank_by,
        open_now=True if open_now else None,
        minimum_rating=min_rating,
        maximum_price=max_price,
    )
    extra_query = parse_params(extra)

    result = run_request(
        lambda client: client.poi_list(extra_query=extra_query, **params),
        action="list points of interest",
        domain=domain,
    )
    if json_out:
        console.print_body(result.body)
        return

    items = extract_items(result.body, "pointsOfInterest")
    if not items:
        console.info("No points of interest found.")
        return
    console.console.print(items_table("Points of interest", items))


@app.command("get")
def get_poi(
        poi_id: str = typer.Argument(..., help="POI identifier."),
        lang: str | None = typer.Option(None, "--lang", help="Accept-Language for localized results."),
        domain: str | None = typer.Option(None, "--domain", help="Override API domain."),
):
    params = localized(lang)
    result = run_request(
        lambda client: client.poi_get(id=poi_id, **params),
        action=f"fetch point of interest {poi_id}",
        domain=domain,
    )
    console.print_body(result.body)


@app.command("types")
def poi_types(
        lang: str | None = typer.Option(None, "--lang", help="Accept-Language for localized results."),
        domain: str | None = typer.Option(None, "--domain", help="Override API domain."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    result = run_request(
        lambda client: client.poi_types(**localized(lang)),
        action="list point of interest types",
        domain=domain,
    )
    body = result.body
    if json_out or not isinstance(body, dict):
        console.print_body(body)
        return

    types = body.get("types") if isinstance(body.get("types"), (list, dict)) else body
    if isinstance(types, dict):
        for main, subtypes in types.items():
            if isinstance(subtypes, list):
                console.console.print(f"[bold]{main}[/]: {', '.join(str(s) for s in subtypes)}")
            else:
                console.console.print(f"[bold]{main}[/]")
        return
    for entry in types:
        console.console.print(str(entry.get("name") or entry) if isinstance(entry, dict) else str(entry))
