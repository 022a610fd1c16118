from __future__ import annotations

import asyncio
import logging

import httpx
import pytest

from geographic_client import (
    ApiError,
    AuthError,
    AuthToken,
    ClientConfig,
    GeographicClient,
    MissingParameterError,
    NetworkError,
)
from geographic_client.transport import is_json_content_type

DOMAIN = "https://geo.example.test"


def _client(handler, token: AuthToken | None = None) -> GeographicClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    cfg = ClientConfig(domain=DOMAIN, token=token or AuthToken(value="secret"))
    return GeographicClient(cfg, http_client=http_client)


class _Recorder:
    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.response = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.response is not None:
            return self.response
        return httpx.Response(200, json={"ok": True})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.mark.asyncio
async def test_bearer_token_is_default_auth_placement() -> None:
    rec = _Recorder()
    await _client(rec).api_version()

    assert rec.last.method == "GET"
    assert str(rec.last.url) == f"{DOMAIN}/geographic/apiVersion"
    assert rec.last.headers["Authorization"] == "Bearer secret"


@pytest.mark.asyncio
async def test_named_header_token() -> None:
    rec = _Recorder()
    await _client(rec, AuthToken(value="k-123", header_or_query_name="X-Api-Key")).api_version()

    assert rec.last.headers["X-Api-Key"] == "k-123"
    assert "Authorization" not in rec.last.headers
    assert "X-Api-Key" not in rec.last.url.params


@pytest.mark.asyncio
async def test_query_token() -> None:
    rec = _Recorder()
    await _client(rec, AuthToken(value="k-123", header_or_query_name="key", is_query=True)).supported_languages()

    assert rec.last.url.params["key"] == "k-123"
    assert "Authorization" not in rec.last.headers


@pytest.mark.asyncio
async def test_missing_token_sends_no_auth() -> None:
    rec = _Recorder()
    await _client(rec, AuthToken()).api_version()

    assert "Authorization" not in rec.last.headers
    assert rec.last.url.query == b""


def test_query_token_requires_a_name() -> None:
    with pytest.raises(ValueError):
        AuthToken(value="k", is_query=True)


def test_client_config_requires_domain() -> None:
    with pytest.raises(ValueError):
        ClientConfig(domain="")
    with pytest.raises(ValueError):
        ClientConfig(domain="   ")


@pytest.mark.asyncio
async def test_parameters_are_copied_to_query_and_language_to_header() -> None:
    rec = _Recorder()
    await _client(rec).poi_list(
        latitude=47.21951,
        longitude=-1.553694,
        radius=1000,
        postal_code="44000",
        open_now=True,
        accept_language="fr",
        callback=None,
    )

    params = rec.last.url.params
    assert params["latitude"] == "47.21951"
    assert params["longitude"] == "-1.553694"
    assert params["radius"] == "1000"
    assert params["postalCode"] == "44000"
    assert params["openNow"] == "true"
    assert "callback" not in params
    assert "acceptLanguage" not in params
    assert rec.last.headers["Accept-Language"] == "fr"


@pytest.mark.asyncio
async def test_camel_case_names_are_accepted() -> None:
    rec = _Recorder()
    await _client(rec).poi_list(mainType="restaurant", minimumRating=3)

    assert rec.last.url.params["mainType"] == "restaurant"
    assert rec.last.url.params["minimumRating"] == "3"


@pytest.mark.asyncio
async def test_list_values_are_sent_as_repeated_keys() -> None:
    rec = _Recorder()
    names = ["OUEST INFO", "RHUMS ET COCKTAILS", "LES SENTIERS DE DAKAR"]
    await _client(rec).poi_list(name=names)

    assert rec.last.url.params.get_list("name") == names


@pytest.mark.asyncio
async def test_unknown_parameters_are_ignored_with_warning(caplog) -> None:
    rec = _Recorder()
    with caplog.at_level(logging.WARNING, logger="geographic_client"):
        await _client(rec).destinations_list(street="Rue Crebillon", limit=3)

    assert "street" not in rec.last.url.params
    assert rec.last.url.params["limit"] == "3"
    assert "street" in caplog.text


@pytest.mark.asyncio
async def test_extra_query_is_merged_last_and_wins() -> None:
    rec = _Recorder()
    await _client(rec).poi_list(limit=10, extra_query={"limit": "2", "bundleId": "com.example.app"})

    assert rec.last.url.params["limit"] == "2"
    assert rec.last.url.params["bundleId"] == "com.example.app"


@pytest.mark.asyncio
async def test_extra_query_can_override_query_token() -> None:
    rec = _Recorder()
    client = _client(rec, AuthToken(value="k-1", header_or_query_name="key", is_query=True))
    await client.api_version(extra_query={"key": "k-2"})

    assert rec.last.url.params["key"] == "k-2"


@pytest.mark.asyncio
async def test_trailing_slash_on_domain_is_ignored() -> None:
    rec = _Recorder()
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(rec))
    client = GeographicClient(ClientConfig(domain=DOMAIN + "/"), http_client=http_client)
    await client.poi_types()

    assert str(rec.last.url) == f"{DOMAIN}/geographic/poi/types"


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["poi_get", "destinations_get", "inspirations_get"])
async def test_get_without_id_fails_before_any_request(method: str) -> None:
    rec = _Recorder()
    client = _client(rec)

    with pytest.raises(MissingParameterError) as exc_info:
        await getattr(client, method)(accept_language="en")
    assert exc_info.value.parameter == "id"
    assert "Missing required parameter: id" in str(exc_info.value)

    with pytest.raises(MissingParameterError):
        await getattr(client, method)(id=None)
    assert rec.requests == []


@pytest.mark.asyncio
async def test_json_body_is_parsed() -> None:
    rec = _Recorder(httpx.Response(200, json={"languages": ["en", "fr"]}))
    result = await _client(rec).supported_languages()

    assert result.status_code == 200
    assert result.body == {"languages": ["en", "fr"]}
    assert result.json_dict() == {"languages": ["en", "fr"]}


@pytest.mark.asyncio
async def test_vendor_json_content_type_is_parsed() -> None:
    rec = _Recorder(
        httpx.Response(200, content=b'{"version": "1.0.0"}', headers={"content-type": "application/vnd.geo+json"})
    )
    result = await _client(rec).api_version()

    assert result.body == {"version": "1.0.0"}


@pytest.mark.asyncio
async def test_malformed_json_falls_back_to_raw_text() -> None:
    rec = _Recorder(
        httpx.Response(200, content=b"{not json", headers={"content-type": "application/json; charset=utf-8"})
    )
    result = await _client(rec).api_version()

    assert result.body == "{not json"


@pytest.mark.asyncio
async def test_jsonp_body_is_returned_raw() -> None:
    payload = 'supportedLanguagesCallback({"languages": ["en", "fr"]});'
    rec = _Recorder(
        httpx.Response(200, content=payload.encode(), headers={"content-type": "application/javascript"})
    )
    result = await _client(rec).supported_languages(callback="supportedLanguagesCallback")

    assert rec.last.url.params["callback"] == "supportedLanguagesCallback"
    assert result.body == payload


@pytest.mark.asyncio
async def test_no_content_response_has_no_body() -> None:
    rec = _Recorder(httpx.Response(204, headers={"content-type": "application/json"}))
    result = await _client(rec).poi_types()

    assert result.status_code == 204
    assert result.body is None


@pytest.mark.asyncio
async def test_not_found_raises_api_error_with_response_and_body() -> None:
    rec = _Recorder(httpx.Response(404, json={"error": {"message": "POI not found"}}))

    with pytest.raises(ApiError) as exc_info:
        await _client(rec).poi_get(id="missing")

    err = exc_info.value
    assert not isinstance(err, AuthError)
    assert err.status_code == 404
    assert str(err) == "POI not found"
    assert err.response is not None and err.response.status_code == 404
    assert err.body == {"error": {"message": "POI not found"}}
    assert err.details and "POI not found" in err.details


@pytest.mark.asyncio
async def test_error_with_plain_text_body_keeps_raw_body() -> None:
    rec = _Recorder(httpx.Response(502, content=b"Bad Gateway", headers={"content-type": "text/html"}))

    with pytest.raises(ApiError) as exc_info:
        await _client(rec).poi_list()

    assert exc_info.value.status_code == 502
    assert exc_info.value.body == "Bad Gateway"
    assert str(exc_info.value) == "GET /geographic/poi/list failed with 502"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 403])
async def test_auth_failures_raise_auth_error(status: int) -> None:
    rec = _Recorder(httpx.Response(status, json={"message": "invalid key"}))

    with pytest.raises(AuthError) as exc_info:
        await _client(rec).api_version()
    assert exc_info.value.status_code == status


@pytest.mark.asyncio
async def test_redirect_status_is_not_success() -> None:
    rec = _Recorder(httpx.Response(304))

    with pytest.raises(ApiError) as exc_info:
        await _client(rec).api_version()
    assert exc_info.value.status_code == 304


@pytest.mark.asyncio
async def test_transport_error_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkError) as exc_info:
        await _client(handler).api_version()
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_each_call_issues_exactly_one_request() -> None:
    rec = _Recorder(httpx.Response(500, json={"message": "boom"}))
    client = _client(rec)

    with pytest.raises(ApiError):
        await client.inspirations_list()
    assert len(rec.requests) == 1


@pytest.mark.asyncio
async def test_limit_is_passed_through() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        limit = int(request.url.params.get("limit", "50"))
        items = [{"id": f"d{i}"} for i in range(10)][:limit]
        return httpx.Response(200, json={"destinations": items})

    result = await _client(handler).destinations_list(limit=3)

    assert len(result.body["destinations"]) == 3


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("list_method", "get_method", "key", "get_path"),
    [
        ("poi_list", "poi_get", "pointsOfInterest", "/geographic/poi/get"),
        ("destinations_list", "destinations_get", "destinations", "/geographic/destinations/get"),
        ("inspirations_list", "inspirations_get", "inspirations", "/geographic/inspirations/get"),
    ],
)
async def test_id_from_list_resolves_with_get(list_method: str, get_method: str, key: str, get_path: str) -> None:
    known = {"a1": {"id": "a1", "name": "Passage Pommeraye"}}

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/list"):
            return httpx.Response(200, json={key: list(known.values())})
        item = known.get(request.url.params.get("id", ""))
        if item is None:
            return httpx.Response(404, json={"error": "not found"})
        return httpx.Response(200, json=item)

    client = _client(handler)
    listed = await getattr(client, list_method)(limit=1)
    item_id = listed.body[key][0]["id"]
    got = await getattr(client, get_method)(id=item_id)

    assert got.status_code == 200
    assert got.response.request.url.path == get_path
    assert got.body["name"] == "Passage Pommeraye"


@pytest.mark.asyncio
async def test_concurrent_calls_do_not_share_parameters() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        if "/poi/" in request.url.path:
            await asyncio.sleep(0.05)
        return httpx.Response(
            200,
            json={
                "path": request.url.path,
                "city": request.url.params.get("city"),
                "lang": request.headers.get("accept-language"),
                "auth": request.headers.get("authorization"),
            },
        )

    client = _client(handler)
    poi, dest = await asyncio.gather(
        client.poi_list(city="Paris", accept_language="fr"),
        client.destinations_list(city="Nantes", accept_language="en"),
    )

    assert poi.body == {"path": "/geographic/poi/list", "city": "Paris", "lang": "fr", "auth": "Bearer secret"}
    assert dest.body == {
        "path": "/geographic/destinations/list",
        "city": "Nantes",
        "lang": "en",
        "auth": "Bearer secret",
    }


@pytest.mark.asyncio
async def test_token_replacement_does_not_affect_in_flight_call() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        if "/poi/" in request.url.path:
            await asyncio.sleep(0.05)
        return httpx.Response(200, json={"auth": request.headers.get("authorization")})

    client = _client(handler, AuthToken(value="one"))
    first = asyncio.create_task(client.poi_list())
    await asyncio.sleep(0)
    client.set_token("two")
    second = await client.destinations_list()

    assert (await first).body == {"auth": "Bearer one"}
    assert second.body == {"auth": "Bearer two"}
    assert client.token == AuthToken(value="two")


@pytest.mark.asyncio
async def test_from_domain_and_context_manager() -> None:
    rec = _Recorder()
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(rec))
    async with GeographicClient.from_domain(DOMAIN, "tok", http_client=http_client, timeout_s=5.0) as client:
        assert client.domain == DOMAIN
        await client.inspirations_tests_list(limit=1)

    assert rec.last.url.path == "/geographic/inspirations/tests/list"
    assert rec.last.headers["Authorization"] == "Bearer tok"
    assert not http_client.is_closed


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("application/json", True),
        ("application/json; charset=utf-8", True),
        ("Application/JSON", True),
        ("application/vnd.api+json", True),
        ("application/problem+json; charset=utf-8", True),
        ("application/javascript", False),
        ("application/jsonp", False),
        ("text/json", False),
        ("text/html", False),
        ("", False),
        (None, False),
    ],
)
def test_is_json_content_type(value, expected: bool) -> None:
    assert is_json_content_type(value) is expected
