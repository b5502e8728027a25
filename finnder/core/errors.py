# finnder/core/errors.py


class FinnderError(Exception):
    """Base class for errors raised by the Finnder client."""


class FinnderConfigurationError(FinnderError):
    """Raised when the client cannot be built from the current settings."""


class FinnderResponseError(FinnderError, ValueError):
    """
    Raised when a Finnder response body cannot be decoded into the expected
    records (malformed JSON, wrong shape, unparsable route point).

    Empty bodies and empty result arrays are not errors.
    """
