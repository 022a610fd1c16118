from __future__ import annotations

import json
import logging
import re
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from .config_types import AuthToken, ClientConfig
from .endpoints import ACCEPT_LANGUAGE_HEADER, ACCEPT_LANGUAGE_PARAM, Endpoint, to_wire_name
from .errors import ApiError, AuthError, MissingParameterError, NetworkError
from .errors_utils import api_error_message
from .results import ApiResult

logger = logging.getLogger(__name__)

# application/json, application/vnd.foo+json, ... (parameters like charset ignored)
_JSON_CONTENT_TYPE = re.compile(r"^application/([^;\s]*\+)?json\b", re.IGNORECASE)


@dataclass(frozen=True)
class RequestSpec:
    url: str
    query: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    method: str = "GET"


def is_json_content_type(value: str | None) -> bool:
    return bool(value) and _JSON_CONTENT_TYPE.match(value.strip()) is not None


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_client: httpx.AsyncClient | None = None):
        self._cfg = cfg
        self._token = cfg.token
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=cfg.timeout_s,
            follow_redirects=True,
        )

    @property
    def token(self) -> AuthToken:
        return self._token

    def set_token(self, token: AuthToken) -> None:
        self._token = token

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def build_request(
            self,
            endpoint: Endpoint,
            params: Mapping[str, Any] | None = None,
            *,
            extra_query: Mapping[str, Any] | None = None,
            token: AuthToken | None = None,
    ) -> RequestSpec:
        token = token or self._token
        query: dict[str, Any] = {}
        headers: dict[str, str] = {"User-Agent": self._cfg.user_agent}

        if token.value is not None:
            if token.is_query:
                query[token.header_or_query_name] = token.value
            elif token.header_or_query_name:
                headers[token.header_or_query_name] = token.value
            else:
                headers["Authorization"] = f"Bearer {token.value}"

        bag: dict[str, Any] = {}
        for name, value in (params or {}).items():
            wire = to_wire_name(name)
            if wire not in endpoint.params:
                logger.warning("%s: ignoring unknown parameter %r", endpoint.name, name)
                continue
            if value is not None:
                bag[wire] = value

        for name in endpoint.required:
            if name not in bag:
                raise MissingParameterError(name)

        for name in endpoint.params:
            if name not in bag:
                continue
            if name == ACCEPT_LANGUAGE_PARAM:
                headers[ACCEPT_LANGUAGE_HEADER] = str(bag[name])
            else:
                query[name] = bag[name]

        if extra_query:
            query.update(extra_query)

        url = self._cfg.domain.rstrip("/") + endpoint.path
        return RequestSpec(url=url, query=query, headers=headers)

    async def call(
            self,
            endpoint: Endpoint,
            params: Mapping[str, Any] | None = None,
            *,
            extra_query: Mapping[str, Any] | None = None,
    ) -> ApiResult:
        spec = self.build_request(endpoint, params, extra_query=extra_query, token=self._token)
        logger.debug("GET %s params=%s", endpoint.path, sorted(spec.query))

        started = time.perf_counter()
        try:
            r = await self._client.request(spec.method, spec.url, params=spec.query, headers=spec.headers)
        except httpx.RequestError as e:
            raise NetworkError(str(e) or e.__class__.__name__) from e
        logger.debug(
            "GET %s -> %s in %.0fms", endpoint.path, r.status_code, (time.perf_counter() - started) * 1000
        )

        body = _decode_body(r)

        if r.status_code == 204:
            return ApiResult(response=r)
        if 200 <= r.status_code <= 299:
            return ApiResult(response=r, body=body)

        msg = api_error_message(body if isinstance(body, dict) else None)
        msg = msg or f"GET {endpoint.path} failed with {r.status_code}"
        if isinstance(body, (dict, list)):
            details = json.dumps(body, ensure_ascii=False)
        elif body:
            details = str(body)[:1000]
        else:
            details = None

        if r.status_code in (401, 403):
            raise AuthError(r.status_code, msg, details, response=r, body=body)
        raise ApiError(r.status_code, msg, details, response=r, body=body)


def _decode_body(r: httpx.Response) -> Any:
    text = r.text
    if not is_json_content_type(r.headers.get("content-type")):
        return text
    # Malformed JSON falls back to the raw text
    try:
        return json.loads(text)
    except ValueError:
        return text
