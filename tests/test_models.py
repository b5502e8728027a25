# tests/test_models.py
from decimal import Decimal

from finnder.models.finnder import FinnderRoute, GeocodingResponse
from finnder.models.location import Address, LatLng


def make_response(display_address, house_number="10") -> GeocodingResponse:
    return GeocodingResponse.model_validate(
        {
            "lat": 45.1,
            "lon": 25.2,
            "display_address": display_address,
            "address": {"house_number": house_number},
        }
    )


def test_street_name_strips_number_from_two_part_address():
    response = make_response("Str. Exemplu 10, Bucuresti")
    assert response.street_no == "10"
    assert response.street_name == "Str. Exemplu"


def test_street_name_is_empty_unless_exactly_two_parts():
    assert make_response("Str. Exemplu 10, Sector 2, Bucuresti").street_name == ""
    assert make_response("Str. Exemplu 10").street_name == ""
    assert make_response("").street_name == ""
    assert make_response(None).street_name == ""


def test_empty_segments_are_ignored_when_splitting():
    assert make_response("Str. Exemplu 10,, Bucuresti").street_name == "Str. Exemplu"


def test_street_no_defaults_to_empty():
    response = GeocodingResponse.model_validate({"lat": 1, "lon": 2, "display_address": "Calea Victoriei, Bucuresti"})
    assert response.street_no == ""
    assert response.street_name == "Calea Victoriei"
    assert make_response("Calea Victoriei, Bucuresti", house_number=None).street_no == ""


def test_longitude_accepts_legacy_key():
    response = GeocodingResponse.model_validate({"lat": "44.5", "long": "26.5"})
    assert response.lon == Decimal("26.5")


def test_route_accepts_numbers_and_keeps_extra_details():
    route = FinnderRoute.model_validate(
        {
            "route": [{"lat": 44.1, "lon": 26.1}],
            "length_in_meters": 1532,
            "estimated_duration_in_seconds": "420",
            "notifications": [
                {
                    "index": 3,
                    "position": {"lat": "44.1", "lon": "26.1"},
                    "type": "turn",
                    "turns": [{"direction": "left"}],
                    "next_street_name": "Bd. Unirii",
                }
            ],
            "unexpected": True,
        }
    )
    assert route.length_in_meters == "1532"
    assert route.route[0].lat == "44.1"
    assert route.notifications[0].index == "3"
    assert route.notifications[0].turns[0].model_extra == {"direction": "left"}


def test_address_text_form():
    assert str(Address(street_name="Str. Exemplu", street_no="10")) == "Str. Exemplu 10"
    assert str(Address(street_name="Str. Exemplu")) == "Str. Exemplu"
    assert str(Address()) == ""


def test_latlng_defaults_to_zero_and_compares_numerically():
    assert LatLng() == LatLng(lat=Decimal("0"), lng=Decimal("0"))
    assert LatLng(lat=1.5, lng=2) == LatLng(lat=Decimal("1.50"), lng=Decimal("2.0"))
