from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from . import endpoints
from .config_types import AuthToken, ClientConfig
from .endpoints import Endpoint
from .results import ApiResult
from .transport import Transport


class GeographicClient:
    """Async client for the geographic points-of-interest API.

    Every endpoint method takes its parameters as keyword arguments, either in
    snake_case (``postal_code=...``) or in the API's camelCase spelling.
    ``accept_language`` is sent as the ``Accept-Language`` header; everything
    else goes to the query string. ``extra_query`` is merged last and wins on
    collisions.

    Methods return an :class:`ApiResult` for 2xx responses and raise
    :class:`ApiError` for anything else, :class:`NetworkError` when the
    request never got a response, and :class:`MissingParameterError` before
    any I/O when a required parameter such as ``id`` is absent.
    """

    def __init__(self, cfg: ClientConfig, *, http_client: httpx.AsyncClient | None = None):
        self._cfg = cfg
        self._t = Transport(cfg, http_client=http_client)

    @classmethod
    def from_domain(
            cls,
            domain: str,
            token: str | None = None,
            *,
            header_or_query_name: str | None = None,
            is_query: bool = False,
            **kwargs: Any,
    ) -> GeographicClient:
        auth = AuthToken(value=token, header_or_query_name=header_or_query_name, is_query=is_query)
        http_client = kwargs.pop("http_client", None)
        return cls(ClientConfig(domain=domain, token=auth, **kwargs), http_client=http_client)

    @property
    def domain(self) -> str:
        return self._cfg.domain

    @property
    def token(self) -> AuthToken:
        return self._t.token

    def set_token(self, value: str | None, header_or_query_name: str | None = None, is_query: bool = False) -> None:
        self._t.set_token(AuthToken(value=value, header_or_query_name=header_or_query_name, is_query=is_query))

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> GeographicClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _call(
            self,
            endpoint: Endpoint,
            params: dict[str, Any],
            extra_query: Mapping[str, Any] | None,
    ) -> ApiResult:
        return await self._t.call(endpoint, params, extra_query=extra_query)

    # --- points of interest ---
    async def poi_list(self, *, extra_query: Mapping[str, Any] | None = None, **params: Any) -> ApiResult:
        """List points of interest around a position, inside a bounding box, or by text search."""
        return await self._call(endpoints.POI_LIST, params, extra_query)

    async def poi_get(self, *, extra_query: Mapping[str, Any] | None = None, **params: Any) -> ApiResult:
        return await self._call(endpoints.POI_GET, params, extra_query)

    async def poi_types(self, *, extra_query: Mapping[str, Any] | None = None, **params: Any) -> ApiResult:
        return await self._call(endpoints.POI_TYPES, params, extra_query)

    # --- service metadata ---
    async def supported_languages(self, *, extra_query: Mapping[str, Any] | None = None, **params: Any) -> ApiResult:
        """Languages in which geographic data can be localized."""
        return await self._call(endpoints.SUPPORTED_LANGUAGES, params, extra_query)

    async def api_version(self, *, extra_query: Mapping[str, Any] | None = None, **params: Any) -> ApiResult:
        return await self._call(endpoints.API_VERSION, params, extra_query)

    # --- destinations ---
    async def destinations_list(self, *, extra_query: Mapping[str, Any] | None = None, **params: Any) -> ApiResult:
        return await self._call(endpoints.DESTINATIONS_LIST, params, extra_query)

    async def destinations_get(self, *, extra_query: Mapping[str, Any] | None = None, **params: Any) -> ApiResult:
        return await self._call(endpoints.DESTINATIONS_GET, params, extra_query)

    # --- inspirations ---
    async def inspirations_list(self, *, extra_query: Mapping[str, Any] | None = None, **params: Any) -> ApiResult:
        return await self._call(endpoints.INSPIRATIONS_LIST, params, extra_query)

    async def inspirations_dossiers_list(
            self, *, extra_query: Mapping[str, Any] | None = None, **params: Any
    ) -> ApiResult:
        return await self._call(endpoints.INSPIRATIONS_DOSSIERS_LIST, params, extra_query)

    async def inspirations_events_list(
            self, *, extra_query: Mapping[str, Any] | None = None, **params: Any
    ) -> ApiResult:
        return await self._call(endpoints.INSPIRATIONS_EVENTS_LIST, params, extra_query)

    async def inspirations_news_in_brief_list(
            self, *, extra_query: Mapping[str, Any] | None = None, **params: Any
    ) -> ApiResult:
        return await self._call(endpoints.INSPIRATIONS_NEWS_IN_BRIEF_LIST, params, extra_query)

    async def inspirations_slide_shows_list(
            self, *, extra_query: Mapping[str, Any] | None = None, **params: Any
    ) -> ApiResult:
        return await self._call(endpoints.INSPIRATIONS_SLIDE_SHOWS_LIST, params, extra_query)

    async def inspirations_tests_list(
            self, *, extra_query: Mapping[str, Any] | None = None, **params: Any
    ) -> ApiResult:
        return await self._call(endpoints.INSPIRATIONS_TESTS_LIST, params, extra_query)

    async def inspirations_get(self, *, extra_query: Mapping[str, Any] | None = None, **params: Any) -> ApiResult:
        return await self._call(endpoints.INSPIRATIONS_GET, params, extra_query)

    async def call(
            self,
            endpoint: Endpoint,
            *,
            extra_query: Mapping[str, Any] | None = None,
            **params: Any,
    ) -> ApiResult:
        """Call any endpoint from :mod:`geographic_client.endpoints` by its descriptor."""
        return await self._call(endpoint, params, extra_query)
