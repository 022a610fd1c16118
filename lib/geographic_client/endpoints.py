from __future__ import annotations

import re
from dataclasses import dataclass

ACCEPT_LANGUAGE_PARAM = "acceptLanguage"
ACCEPT_LANGUAGE_HEADER = "Accept-Language"


@dataclass(frozen=True)
class Endpoint:
    name: str
    path: str
    params: tuple[str, ...]
    required: tuple[str, ...] = ()


_POSITION = ("latitude", "longitude", "radius")
_BOUNDING_BOX = ("maximumLatitude", "maximumLongitude", "minimumLatitude", "minimumLongitude")
_LOCATION = ("address", "country", "state", "county", "city", "postalCode")
_PAGINATION = ("limit", "offset")
_LOCALIZED = (ACCEPT_LANGUAGE_PARAM, "callback")

_LOCATION_LIST_PARAMS = _POSITION + _LOCATION + _PAGINATION + _LOCALIZED
_GET_PARAMS = ("id",) + _LOCALIZED

POI_LIST = Endpoint(
    name="poi_list",
    path="/geographic/poi/list",
    params=(
        _POSITION
        + _BOUNDING_BOX
        + ("filter", "name", "mainType", "type")
        + _LOCATION
        + ("street", "rankBy", "openNow")
        + ("minimumRating", "maximumRating", "minimumPrice", "maximumPrice")
        + _PAGINATION
        + _LOCALIZED
    ),
)
POI_GET = Endpoint("poi_get", "/geographic/poi/get", _GET_PARAMS, required=("id",))
POI_TYPES = Endpoint("poi_types", "/geographic/poi/types", _LOCALIZED)
SUPPORTED_LANGUAGES = Endpoint("supported_languages", "/geographic/supportedLanguages", ("callback",))
API_VERSION = Endpoint("api_version", "/geographic/apiVersion", ("callback",))

DESTINATIONS_LIST = Endpoint("destinations_list", "/geographic/destinations/list", _LOCATION_LIST_PARAMS)
DESTINATIONS_GET = Endpoint("destinations_get", "/geographic/destinations/get", _GET_PARAMS, required=("id",))

INSPIRATIONS_LIST = Endpoint("inspirations_list", "/geographic/inspirations/list", _LOCATION_LIST_PARAMS)
INSPIRATIONS_DOSSIERS_LIST = Endpoint(
    "inspirations_dossiers_list", "/geographic/inspirations/dossiers/list", _LOCATION_LIST_PARAMS
)
INSPIRATIONS_EVENTS_LIST = Endpoint(
    "inspirations_events_list", "/geographic/inspirations/events/list", _LOCATION_LIST_PARAMS
)
INSPIRATIONS_NEWS_IN_BRIEF_LIST = Endpoint(
    "inspirations_news_in_brief_list", "/geographic/inspirations/newsInBrief/list", _LOCATION_LIST_PARAMS
)
INSPIRATIONS_SLIDE_SHOWS_LIST = Endpoint(
    "inspirations_slide_shows_list", "/geographic/inspirations/slideShows/list", _LOCATION_LIST_PARAMS
)
INSPIRATIONS_TESTS_LIST = Endpoint(
    "inspirations_tests_list", "/geographic/inspirations/tests/list", _LOCATION_LIST_PARAMS
)
INSPIRATIONS_GET = Endpoint("inspirations_get", "/geographic/inspirations/get", _GET_PARAMS, required=("id",))

ALL_ENDPOINTS: tuple[Endpoint, ...] = (
    POI_LIST,
    POI_GET,
    POI_TYPES,
    SUPPORTED_LANGUAGES,
    API_VERSION,
    DESTINATIONS_LIST,
    DESTINATIONS_GET,
    INSPIRATIONS_LIST,
    INSPIRATIONS_DOSSIERS_LIST,
    INSPIRATIONS_EVENTS_LIST,
    INSPIRATIONS_NEWS_IN_BRIEF_LIST,
    INSPIRATIONS_SLIDE_SHOWS_LIST,
    INSPIRATIONS_TESTS_LIST,
    INSPIRATIONS_GET,
)

# inspiration kinds as exposed by the CLI
INSPIRATION_KINDS: dict[str, Endpoint] = {
    "all": INSPIRATIONS_LIST,
    "dossiers": INSPIRATIONS_DOSSIERS_LIST,
    "events": INSPIRATIONS_EVENTS_LIST,
    "news-in-brief": INSPIRATIONS_NEWS_IN_BRIEF_LIST,
    "slide-shows": INSPIRATIONS_SLIDE_SHOWS_LIST,
    "tests": INSPIRATIONS_TESTS_LIST,
}

_SNAKE_RE = re.compile(r"_([a-z0-9])")


def to_wire_name(name: str) -> str:
    """postal_code -> postalCode; camelCase names pass through unchanged."""
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), name)
