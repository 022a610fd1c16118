from __future__ import annotations

from typing import Any

from rich.table import Table


def extract_items(body: Any, key: str) -> list[dict[str, Any]]:
    if isinstance(body, list):
        items = body
    elif isinstance(body, dict):
        items = body.get(key)
        if items is None:
            # single list-valued field, whatever it is called
            lists = [v for v in body.values() if isinstance(v, list)]
            items = lists[0] if len(lists) == 1 else []
    else:
        items = []
    return [item for item in items or [] if isinstance(item, dict)]


def item_title(item: dict[str, Any]) -> str:
    for key in ("name", "title", "label"):
        value = item.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return "-"


def item_kind(item: dict[str, Any]) -> str:
    value = item.get("mainType") or item.get("type")
    if isinstance(value, list):
        return ", ".join(str(v) for v in value) or "-"
    return str(value) if value else "-"


def describe_place(item: dict[str, Any]) -> str:
    location = item.get("location")
    source = location if isinstance(location, dict) else item
    address = source.get("address")
    if isinstance(address, dict):
        source = {**source, **address}
    elif isinstance(address, str) and address.strip():
        return address.strip()
    parts = [str(source[key]).strip() for key in ("city", "state", "country") if source.get(key)]
    return ", ".join(p for p in parts if p) or "-"


def items_table(title: str, items: list[dict[str, Any]], *, with_kind: bool = True) -> Table:
    table = Table(title=title)
    table.add_column("id", style="bold")
    table.add_column("name")
    if with_kind:
        table.add_column("type")
    table.add_column("place")
    for item in items:
        row = [str(item.get("id", "-")), item_title(item)]
        if with_kind:
            row.append(item_kind(item))
        row.append(describe_place(item))
        table.add_row(*row)
    return table
