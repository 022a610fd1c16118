from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import typer
from geographic_client import (
    ApiError,
    ApiResult,
    AuthError,
    GeographicClient,
    MissingParameterError,
    NetworkError,
)
from geographic_client.errors_utils import api_error_message, parse_api_error_detail

from . import console
from .config import load_config
from .http import make_client


def parse_params(values: list[str] | None) -> dict[str, str]:
    """Parse repeated ``--param key=value`` options into an extra query bag."""
    out: dict[str, str] = {}
    for raw in values or []:
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {raw!r}", param_hint="--param")
        out[key] = value
    return out


def run_request(
        call: Callable[[GeographicClient], Awaitable[ApiResult]],
        *,
        action: str,
        domain: str | None = None,
) -> ApiResult:
    cfg = load_config()
    client = make_client(cfg, domain_override=domain)

    async def _run() -> ApiResult:
        async with client:
            return await call(client)

    try:
        return asyncio.run(_run())
    except MissingParameterError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    except AuthError as e:
        console.err(f"Unauthorized ({e.status_code}). Check the token: geographic settings set --token ...")
        raise typer.Exit(code=2)
    except ApiError as e:
        detail = api_error_message(parse_api_error_detail(e.details))
        msg = detail if detail and detail != str(e) else str(e)
        console.err(f"Failed to {action}: {msg} (HTTP {e.status_code})")
        raise typer.Exit(code=2)
    except NetworkError as e:
        console.err(f"Request failed: {e}")
        raise typer.Exit(code=2)


def localized(lang: str | None, limit: int | None = None, offset: int | None = None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if lang:
        params["accept_language"] = lang
    if limit is not None:
        params["limit"] = int(limit)
    if offset is not None:
        params["offset"] = int(offset)
    return params
