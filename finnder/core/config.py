# finnder/core/config.py
from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GEOCODE_URL = (
    "http://finnder.org/api/v1/locations.json?cccode={0}&street={1}&api_key={2}"
)
DEFAULT_REVERSE_GEOCODE_URL = (
    "http://finnder.org/api/v1/locations/reverse.json"
    "?cccode={0}&lat={1}&lng={2}&api_key={3}"
)
DEFAULT_ROUTE_URL = (
    "http://finnder.org/api/v1/locations/route.json"
    "?cccode={0}&routing_profile={1}&bike_profile={2}"
    "&from_lat={3}&from_lon={4}&to_lat={5}&to_lon={6}"
    "&pedestrian_support=false&api_key={7}"
)


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Finnder Location Services"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    FINNDER_LOG_LEVEL: str = "INFO"

    FINNDER_API_KEY: str | None = None
    # Country and city code, e.g. "ro-bucharest"
    FINNDER_CCCODE: str = "ro-bucharest"

    FINNDER_GEOCODE_URL: str = DEFAULT_GEOCODE_URL
    FINNDER_REVERSE_GEOCODE_URL: str = DEFAULT_REVERSE_GEOCODE_URL
    FINNDER_ROUTE_URL: str = DEFAULT_ROUTE_URL


class FinnderConfig(BaseModel):
    """
    Immutable per-service configuration: API key, country/city code and the
    three URL templates with positional placeholders.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    cccode: str
    geocode_url: str = DEFAULT_GEOCODE_URL
    reverse_geocode_url: str = DEFAULT_REVERSE_GEOCODE_URL
    route_url: str = DEFAULT_ROUTE_URL

    def __repr__(self) -> str:
        return f"FinnderConfig(cccode={self.cccode!r}, api_key='***')"


settings = Settings()
