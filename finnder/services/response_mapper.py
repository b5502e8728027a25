# finnder/services/response_mapper.py

import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from finnder.core.errors import FinnderResponseError
from finnder.core.logger import logger
from finnder.models.finnder import FinnderRoute, GeocodingResponse
from finnder.models.location import Address, LatLng

_GEOCODING_ADAPTER = TypeAdapter(Optional[List[GeocodingResponse]])
_ROUTE_ADAPTER = TypeAdapter(Optional[FinnderRoute])

# Integer text: optional surrounding whitespace and sign, ASCII digits only.
_INTEGER_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$", re.ASCII)
_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


# ---------------------------------------------------------------------- #
# Decoding
# ---------------------------------------------------------------------- #

def parse_geocoding(text: str) -> List[GeocodingResponse]:
    """
    Decode a geocode/reverse-geocode body. Blank text and `null` give [].
    """
    if not text or not text.strip():
        return []
    try:
        return _GEOCODING_ADAPTER.validate_json(text) or []
    except ValidationError as exc:
        raise FinnderResponseError(f"Invalid geocoding response: {exc}") from exc


def parse_route(text: str) -> Optional[FinnderRoute]:
    """
    Decode a route body. Blank text and `null` give None.
    """
    if not text or not text.strip():
        return None
    try:
        return _ROUTE_ADAPTER.validate_json(text)
    except ValidationError as exc:
        raise FinnderResponseError(f"Invalid route response: {exc}") from exc


def parse_invariant_int(value: Optional[str]) -> int:
    """
    Parse a 32-bit integer written with invariant formatting; 0 when it isn't one.
    """
    if value is None or not _INTEGER_RE.match(value):
        return 0
    result = int(value)
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result


def _parse_decimal(value: str) -> Decimal:
    try:
        result = Decimal(value.strip())
    except InvalidOperation as exc:
        raise FinnderResponseError(f"Invalid route coordinate: {value!r}") from exc
    if not result.is_finite():
        raise FinnderResponseError(f"Invalid route coordinate: {value!r}")
    return result


# ---------------------------------------------------------------------- #
# Projection to public results
# ---------------------------------------------------------------------- #

def map_geocode(text: str) -> LatLng:
    results = parse_geocoding(text)
    if not results:
        logger.debug("Geocode returned no results; using zero coordinate.")
        return LatLng()

    first = results[0]
    return LatLng(lat=first.lat, lng=first.lon)


def map_reverse_geocode(text: str) -> Optional[Address]:
    results = parse_geocoding(text)
    if not results:
        logger.debug("Reverse geocode returned no results.")
        return None

    # Name and number both come from element 0. The async lookup once read the
    # name from element 1; which index the API intends is still unconfirmed.
    first = results[0]
    return Address(street_name=first.street_name, street_no=first.street_no)


def map_distance(text: str) -> int:
    route = parse_route(text)
    if route is None:
        logger.debug("Route response empty; distance is 0.")
        return 0

    length = route.length_in_meters
    if length is not None and not _INTEGER_RE.match(length):
        logger.warning(f"Unparsable route length {length!r}; using 0.")
    return parse_invariant_int(length)


def map_route(text: str) -> List[LatLng]:
    route = parse_route(text)
    if route is None or not route.route:
        logger.debug("Route response has no points.")
        return []

    return [
        LatLng(lat=_parse_decimal(part.lat), lng=_parse_decimal(part.lon))
        for part in route.route
    ]
