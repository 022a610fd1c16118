from __future__ import annotations

import typer
from geographic_client import GeographicClient
from geographic_client.config_types import AuthToken, ClientConfig

from . import console
from .config import AppConfig, resolve_domain, resolve_token


def make_client(cfg: AppConfig, *, domain_override: str | None = None) -> GeographicClient:
    domain = resolve_domain(cfg, domain_override)
    if not domain:
        console.err("Domain is not configured. Run `geographic settings init` or pass --domain.")
        raise typer.Exit(code=2)

    token = resolve_token(cfg) or None
    auth = AuthToken(
        value=token,
        header_or_query_name=cfg.auth.header_or_query_name or None,
        is_query=cfg.auth.is_query,
    )
    return GeographicClient(ClientConfig(domain=domain, token=auth))
