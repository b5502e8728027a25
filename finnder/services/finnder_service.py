# finnder/services/finnder_service.py

from typing import List, Optional

import httpx

from finnder.core.config import (
    DEFAULT_GEOCODE_URL,
    DEFAULT_REVERSE_GEOCODE_URL,
    DEFAULT_ROUTE_URL,
    FinnderConfig,
    Settings,
    settings as default_settings,
)
from finnder.core.errors import FinnderConfigurationError
from finnder.core.logger import logger
from finnder.models.finnder import BikeType, FinnderRoute, RouteType
from finnder.models.location import Address, LatLng
from finnder.services import response_mapper, url_builder
from finnder.services.http_fetcher import fetch_text, fetch_text_async
from finnder.services.location_service import LocationService


class FinnderService(LocationService):
    """
    Finnder API client for geocoding, reverse geocoding, distance and routing.

    - builds the endpoint URL from the immutable FinnderConfig
    - performs exactly one GET per call
    - maps the JSON body to LatLng / Address / int / list results

    Empty responses map to LatLng(), None, 0 and [] respectively. Nothing is
    mutated after construction, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        api_key: str,
        cccode: str,
        geocode_url: str = DEFAULT_GEOCODE_URL,
        reverse_geocode_url: str = DEFAULT_REVERSE_GEOCODE_URL,
        route_url: str = DEFAULT_ROUTE_URL,
        *,
        client: httpx.Client | None = None,
        async_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = FinnderConfig(
            api_key=api_key,
            cccode=cccode,
            geocode_url=geocode_url,
            reverse_geocode_url=reverse_geocode_url,
            route_url=route_url,
        )
        self._client = client
        self._async_client = async_client
        logger.info(f"FinnderService initialised for cccode={cccode!r}.")

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        client: httpx.Client | None = None,
        async_client: httpx.AsyncClient | None = None,
    ) -> "FinnderService":
        """
        Build a service from environment settings (FINNDER_* variables).
        """
        settings = settings or default_settings
        if not settings.FINNDER_API_KEY:
            raise FinnderConfigurationError(
                "FINNDER_API_KEY is not set; the Finnder service cannot be used."
            )

        return cls(
            settings.FINNDER_API_KEY,
            settings.FINNDER_CCCODE,
            geocode_url=settings.FINNDER_GEOCODE_URL,
            reverse_geocode_url=settings.FINNDER_REVERSE_GEOCODE_URL,
            route_url=settings.FINNDER_ROUTE_URL,
            client=client,
            async_client=async_client,
        )

    # ------------------------------------------------------------------ #
    # Geocoding
    # ------------------------------------------------------------------ #

    def geocode(self, address: Address) -> LatLng:
        url = self._geocode_url(address)
        result = response_mapper.map_geocode(fetch_text(url, self._client))
        logger.info(f"Geocoded '{address}' -> ({result.lat}, {result.lng})")
        return result

    async def geocode_async(self, address: Address) -> LatLng:
        url = self._geocode_url(address)
        result = response_mapper.map_geocode(await fetch_text_async(url, self._async_client))
        logger.info(f"Geocoded '{address}' -> ({result.lat}, {result.lng})")
        return result

    def reverse_geocode(self, point: LatLng) -> Optional[Address]:
        url = url_builder.build_reverse_geocode_url(self.config, point)
        result = response_mapper.map_reverse_geocode(fetch_text(url, self._client))
        self._log_reverse_geocode(point, result)
        return result

    async def reverse_geocode_async(self, point: LatLng) -> Optional[Address]:
        url = url_builder.build_reverse_geocode_url(self.config, point)
        text = await fetch_text_async(url, self._async_client)
        result = response_mapper.map_reverse_geocode(text)
        self._log_reverse_geocode(point, result)
        return result

    # ------------------------------------------------------------------ #
    # Routing
    # ------------------------------------------------------------------ #

    def get_distance(
        self,
        from_: LatLng,
        to: LatLng,
        route_type: RouteType = RouteType.BALANCED,
        bike_type: BikeType = BikeType.CITY_BIKE,
    ) -> int:
        url = url_builder.build_route_url(self.config, from_, to, route_type, bike_type)
        distance = response_mapper.map_distance(fetch_text(url, self._client))
        logger.info(f"Distance {self._describe(from_, to)}: {distance} m")
        return distance

    async def get_distance_async(
        self,
        from_: LatLng,
        to: LatLng,
        route_type: RouteType = RouteType.BALANCED,
        bike_type: BikeType = BikeType.CITY_BIKE,
    ) -> int:
        url = url_builder.build_route_url(self.config, from_, to, route_type, bike_type)
        distance = response_mapper.map_distance(await fetch_text_async(url, self._async_client))
        logger.info(f"Distance {self._describe(from_, to)}: {distance} m")
        return distance

    def get_route(
        self,
        from_: LatLng,
        to: LatLng,
        route_type: RouteType = RouteType.BALANCED,
        bike_type: BikeType = BikeType.CITY_BIKE,
    ) -> List[LatLng]:
        url = url_builder.build_route_url(self.config, from_, to, route_type, bike_type)
        points = response_mapper.map_route(fetch_text(url, self._client))
        logger.info(f"Route {self._describe(from_, to)}: {len(points)} points")
        return points

    async def get_route_async(
        self,
        from_: LatLng,
        to: LatLng,
        route_type: RouteType = RouteType.BALANCED,
        bike_type: BikeType = BikeType.CITY_BIKE,
    ) -> List[LatLng]:
        url = url_builder.build_route_url(self.config, from_, to, route_type, bike_type)
        points = response_mapper.map_route(await fetch_text_async(url, self._async_client))
        logger.info(f"Route {self._describe(from_, to)}: {len(points)} points")
        return points

    def get_route_details(
        self,
        from_: LatLng,
        to: LatLng,
        route_type: RouteType = RouteType.BALANCED,
        bike_type: BikeType = BikeType.CITY_BIKE,
    ) -> Optional[FinnderRoute]:
        """
        Full decoded route record (points, notifications, duration, profiles),
        or None when the API returns nothing.
        """
        url = url_builder.build_route_url(self.config, from_, to, route_type, bike_type)
        return response_mapper.parse_route(fetch_text(url, self._client))

    async def get_route_details_async(
        self,
        from_: LatLng,
        to: LatLng,
        route_type: RouteType = RouteType.BALANCED,
        bike_type: BikeType = BikeType.CITY_BIKE,
    ) -> Optional[FinnderRoute]:
        url = url_builder.build_route_url(self.config, from_, to, route_type, bike_type)
        return response_mapper.parse_route(await fetch_text_async(url, self._async_client))

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _geocode_url(self, address: Address) -> str:
        if address is None:
            raise ValueError("address must not be None")
        return url_builder.build_geocode_url(self.config, address)

    @staticmethod
    def _log_reverse_geocode(point: LatLng, result: Optional[Address]) -> None:
        if result is None:
            logger.info(f"No address found at ({point.lat}, {point.lng})")
        else:
            logger.info(f"Reverse geocoded ({point.lat}, {point.lng}) -> '{result}'")

    @staticmethod
    def _describe(from_: LatLng, to: LatLng) -> str:
        return f"({from_.lat}, {from_.lng}) -> ({to.lat}, {to.lng})"
