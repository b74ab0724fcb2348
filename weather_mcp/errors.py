"""ABOUTME: Error taxonomy for the weather and location services.

Two families share one base class carrying a machine-readable ``code`` and a
human-readable ``message``. Clients raise these at the point where an upstream
call fails; everything above them lets typed errors pass through unchanged.
"""

# Location-domain codes
ERROR_ADDRESS_NOT_FOUND = "ADDRESS_NOT_FOUND"
ERROR_GEOCODING = "GEOCODING_ERROR"
ERROR_IP_LOCATION = "IP_LOCATION_ERROR"
ERROR_INVALID_COORDINATES = "INVALID_COORDINATES"

# Weather-domain codes
ERROR_API = "API_ERROR"
ERROR_UNKNOWN = "UNKNOWN_ERROR"


class WeatherServiceError(Exception):
    """Base class for every error the weather service reports to callers."""

    family = "service"

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class LocationError(WeatherServiceError):
    """Failures while resolving where the caller wants weather for."""

    family = "location"


class AddressNotFoundError(LocationError):
    def __init__(self, address: str):
        super().__init__(f"Address not found: {address}", ERROR_ADDRESS_NOT_FOUND)
        self.address = address


class GeocodingUnavailableError(LocationError):
    def __init__(self, reason: str):
        super().__init__(f"Geocoding failed: {reason}", ERROR_GEOCODING)


class IpLocationUnavailableError(LocationError):
    def __init__(self, reason: str):
        super().__init__(f"Could not determine current location: {reason}", ERROR_IP_LOCATION)


class InvalidCoordinatesError(LocationError):
    def __init__(self, latitude, longitude):
        super().__init__(
            f"Invalid coordinates: latitude {latitude} must be within [-90, 90] "
            f"and longitude {longitude} within [-180, 180]",
            ERROR_INVALID_COORDINATES,
        )
        self.latitude = latitude
        self.longitude = longitude


class WeatherError(WeatherServiceError):
    """Failures while fetching or interpreting weather data."""

    family = "weather"


class WeatherUnavailableError(WeatherError):
    """Weather upstream failed.

    ``code`` is API_ERROR when the upstream answered with an error (its reason
    text is kept in the message) and UNKNOWN_ERROR for transport or payload
    problems.
    """

    def __init__(self, reason: str, code: str = ERROR_UNKNOWN):
        super().__init__(f"Weather data unavailable: {reason}", code)
        self.reason = reason
