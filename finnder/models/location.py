# finnder/models/location.py

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class LatLng(BaseModel):
    """
    Latitude/longitude pair with decimal precision.

    LatLng() is the zero-valued coordinate returned when a lookup finds nothing.
    """
    model_config = ConfigDict(frozen=True)

    lat: Decimal = Decimal(0)
    lng: Decimal = Decimal(0)


class Address(BaseModel):
    """
    Postal address as understood by the geocoding endpoints.
    """
    street_name: str = ""
    street_no: str = ""

    def __str__(self) -> str:
        return " ".join(part for part in (self.street_name, self.street_no) if part)
