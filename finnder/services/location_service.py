# finnder/services/location_service.py

from abc import ABC, abstractmethod
from typing import List, Optional

from finnder.models.location import Address, LatLng


class LocationService(ABC):
    """
    Operation set every location backend provides: geocoding, reverse
    geocoding, distance and route, each blocking and awaitable.
    """

    @abstractmethod
    def geocode(self, address: Address) -> LatLng:
        """Converts a human-readable address into coordinates."""

    @abstractmethod
    async def geocode_async(self, address: Address) -> LatLng:
        ...

    @abstractmethod
    def reverse_geocode(self, point: LatLng) -> Optional[Address]:
        """Converts coordinates into an address, or None when nothing is there."""

    @abstractmethod
    async def reverse_geocode_async(self, point: LatLng) -> Optional[Address]:
        ...

    @abstractmethod
    def get_distance(self, from_: LatLng, to: LatLng) -> int:
        """Distance in meters along the route between two points."""

    @abstractmethod
    async def get_distance_async(self, from_: LatLng, to: LatLng) -> int:
        ...

    @abstractmethod
    def get_route(self, from_: LatLng, to: LatLng) -> List[LatLng]:
        """Ordered route points between two points; empty when there is no route."""

    @abstractmethod
    async def get_route_async(self, from_: LatLng, to: LatLng) -> List[LatLng]:
        ...
