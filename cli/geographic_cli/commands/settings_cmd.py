from __future__ import annotations

import os

import typer

from .. import console
from ..config import AuthConfig, config_path, default_config, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/geographic/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        domain: str = typer.Option(
            ...,
            "--domain",
            prompt="API domain",
            help="API domain like https://api.example.com",
        ),
        token: str = typer.Option("", "--token", help="API key or bearer token."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.domain = normalize_base_url(domain, warn=True)
    if not cfg.domain:
        console.err("Domain cannot be empty.")
        raise typer.Exit(code=2)
    cfg.auth = AuthConfig(token=token.strip())
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    token_state = "(set)" if (cfg.auth.token or "").strip() else "(empty)"
    console.console.print(
        f"domain={cfg.domain or '-'} token={token_state} token_placement={cfg.auth.placement()}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (domain, token_placement)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "domain":
        console.console.print(cfg.domain)
        return
    if k == "token_placement":
        console.console.print(cfg.auth.placement())
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        domain: str | None = typer.Option(None, "--domain", help="Set API domain."),
        token: str | None = typer.Option(None, "--token", help="Set API key or bearer token."),
        header: str | None = typer.Option(None, "--token-header", help="Send the token in this header."),
        query: str | None = typer.Option(None, "--token-query", help="Send the token as this query parameter."),
        bearer: bool = typer.Option(False, "--bearer", help="Send the token as Authorization: Bearer."),
):
    if sum(1 for flag in (header, query, bearer) if flag) > 1:
        console.err("Use only one of --token-header, --token-query, --bearer.")
        raise typer.Exit(code=2)

    cfg = load_config()
    if domain is not None:
        cfg.domain = normalize_base_url(domain, warn=True)
    if token is not None:
        cfg.auth.token = token.strip()
    if header:
        cfg.auth.header_or_query_name = header.strip()
        cfg.auth.is_query = False
    elif query:
        cfg.auth.header_or_query_name = query.strip()
        cfg.auth.is_query = True
    elif bearer:
        cfg.auth.header_or_query_name = ""
        cfg.auth.is_query = False
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
