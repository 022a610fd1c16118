from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from . import console

APP_NAME = "geographic"
CONFIG_FILENAME = "config.toml"
ENV_DOMAIN = "GEOGRAPHIC_DOMAIN"
ENV_TOKEN = "GEOGRAPHIC_TOKEN"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    token: str = ""
    header_or_query_name: str = ""
    is_query: bool = False

    def placement(self) -> str:
        if self.is_query and self.header_or_query_name:
            return f"query:{self.header_or_query_name}"
        if self.header_or_query_name:
            return f"header:{self.header_or_query_name}"
        return "bearer"


@dataclass
class AppConfig:
    domain: str
    auth: AuthConfig


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(domain="", auth=AuthConfig())


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"domain missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    auth: dict[str, Any] = {"token": cfg.auth.token}
    if cfg.auth.header_or_query_name:
        auth["header_or_query_name"] = cfg.auth.header_or_query_name
        auth["is_query"] = cfg.auth.is_query
    return {"domain": cfg.domain, "auth": auth}


def from_toml(data: dict[str, Any]) -> AppConfig:
    domain = normalize_base_url(str(data.get("domain") or ""), warn=True)
    auth_raw = data.get("auth") or {}
    auth = AuthConfig()
    if isinstance(auth_raw, dict):
        auth.token = str(auth_raw.get("token") or "")
        auth.header_or_query_name = str(auth_raw.get("header_or_query_name") or "").strip()
        auth.is_query = bool(auth_raw.get("is_query")) and bool(auth.header_or_query_name)
    return AppConfig(domain=domain, auth=auth)


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_domain(cfg: AppConfig, override: str | None = None) -> str:
    value = override or os.getenv(ENV_DOMAIN, "").strip() or cfg.domain
    return normalize_base_url(value, warn=True)


def resolve_token(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_TOKEN, "").strip()
    return env_value or cfg.auth.token


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
