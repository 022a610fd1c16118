from __future__ import annotations

import json


def parse_api_error_detail(details: str | None) -> dict | None:
    if not details:
        return None
    try:
        data = json.loads(details)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def api_error_message(data: dict | None) -> str | None:
    """Pick the human readable message out of a decoded error body."""
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    for key in ("message", "detail"):
        value = data.get(key)
        if value:
            return str(value)
    return None
