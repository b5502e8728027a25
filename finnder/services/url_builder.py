# finnder/services/url_builder.py
from decimal import ROUND_HALF_UP, Decimal, localcontext
from urllib.parse import quote

from finnder.core.config import FinnderConfig
from finnder.models.finnder import BikeType, RouteType
from finnder.models.location import Address, LatLng

# At most 15 fractional digits are sent for each coordinate.
COORDINATE_QUANTUM = Decimal("1e-15")

# Reserved URL characters left untouched so the query structure survives encoding.
URL_SAFE_CHARS = "!#$%&'()*+,-./:;=?@[]~_"


def format_coordinate(value: Decimal) -> str:
    """
    Locale-independent text for a coordinate: '.' separator, up to 15
    fractional digits, no trailing zeros, no exponent.
    """
    value = Decimal(value)
    with localcontext() as ctx:
        # Room for every integer digit plus the 15 fractional ones.
        ctx.prec = max(28, value.adjusted() + 17)
        rounded = value.quantize(COORDINATE_QUANTUM, rounding=ROUND_HALF_UP)
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def encode_url(url: str) -> str:
    """
    Percent-encode spaces, non-ASCII and other unsafe characters.
    Existing %-escapes and reserved characters are kept.
    """
    return quote(url, safe=URL_SAFE_CHARS)


def build_geocode_url(config: FinnderConfig, address: Address) -> str:
    url = config.geocode_url.format(config.cccode, address, config.api_key)
    return encode_url(url)


def build_reverse_geocode_url(config: FinnderConfig, point: LatLng) -> str:
    url = config.reverse_geocode_url.format(
        config.cccode,
        format_coordinate(point.lat),
        format_coordinate(point.lng),
        config.api_key,
    )
    return encode_url(url)


def build_route_url(
    config: FinnderConfig,
    from_: LatLng,
    to: LatLng,
    route_type: RouteType = RouteType.BALANCED,
    bike_type: BikeType = BikeType.CITY_BIKE,
) -> str:
    url = config.route_url.format(
        config.cccode,
        route_type.value,
        bike_type.value,
        format_coordinate(from_.lat),
        format_coordinate(from_.lng),
        format_coordinate(to.lat),
        format_coordinate(to.lng),
        config.api_key,
    )
    return encode_url(url)
