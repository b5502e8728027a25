# finnder/models/finnder.py

from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RouteType(str, Enum):
    """
    Routing profile, sent as the `routing_profile` query token.
    """
    BALANCED = "balanced"


class BikeType(str, Enum):
    """
    Bike profile, sent as the `bike_profile` query token.
    """
    CITY_BIKE = "citybike"


class FinnderAddress(BaseModel):
    house_number: Optional[str] = None


class GeocodingResponse(BaseModel):
    """
    One element of the array returned by the geocode and reverse-geocode endpoints.

    Longitude arrives as `lon`; older payloads used `long`, which is accepted too.
    """
    lat: Decimal = Decimal(0)
    lon: Decimal = Field(
        default=Decimal(0),
        validation_alias=AliasChoices("lon", "long"),
    )
    display_address: Optional[str] = None
    address: Optional[FinnderAddress] = None

    @property
    def street_no(self) -> str:
        if self.address is None or not self.address.house_number:
            return ""
        return self.address.house_number

    @property
    def street_name(self) -> str:
        """
        Street name derived from `display_address`.

        Only a "<street and number>, <city>" address (exactly two non-empty
        comma-separated parts) yields a name: the first part with the house
        number removed. Anything else yields "".
        """
        if not self.display_address:
            return ""

        parts = [part for part in self.display_address.split(",") if part]
        if len(parts) != 2:
            return ""

        return parts[0].replace(self.street_no, "").strip()


class _RouteRecord(BaseModel):
    # Route payloads carry numbers as strings, but tolerate bare JSON numbers.
    model_config = ConfigDict(coerce_numbers_to_str=True)


class RoutePart(_RouteRecord):
    lat: str
    lon: str


class Endpoint(_RouteRecord):
    lat: Optional[str] = None
    lon: Optional[str] = None


class Turn(BaseModel):
    """Turn instruction, kept with whatever keys the API sends."""
    model_config = ConfigDict(extra="allow")


class Notification(_RouteRecord):
    """
    Turn-by-turn notification attached to a route.
    """
    index: Optional[str] = None
    position: Optional[Endpoint] = None
    type: Optional[str] = None
    turns: Optional[List[Turn]] = None
    meters_to_next_turn: Optional[str] = None
    next_street_name: Optional[str] = None
    next_street_basic_name: Optional[str] = None
    # Spelling matches the wire field.
    next_street_metadat: Optional[str] = None


class FinnderRoute(_RouteRecord):
    """
    Body of the route endpoint.

    `route` holds the ordered route points; `length_in_meters` is the
    distance as an integer string.
    """
    route: Optional[List[RoutePart]] = None
    endpoints: Optional[List[Endpoint]] = None
    notifications: Optional[List[Notification]] = None
    length_in_meters: Optional[str] = None
    estimated_duration_in_seconds: Optional[str] = None
    elevation_profile: Optional[List[str]] = None
    steepness_profile: Optional[List[str]] = None
    total_climb_m: Optional[str] = None
    total_descent_m: Optional[str] = None
    routing_version: Optional[str] = None
    map_timestamp: Optional[str] = None
    map_version: Optional[str] = None
    debug_info: Optional[str] = None
