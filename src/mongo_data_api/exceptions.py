"""
Mongo Data API SDK Exceptions.

Custom exception hierarchy for the SDK.

Only configuration problems are raised. Remote failures are returned as
``DataAPIError`` values inside a ``DataAPIResponse``.
"""


class MongoDataAPIError(Exception):
    """Base exception for all Mongo Data API SDK errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"


class DataAPIError(MongoDataAPIError):
    """
    Error reported by the Data API.

    ``code`` holds the HTTP status of the failed response, or ``-1`` when the
    response carried no usable payload.
    """

    def __init__(self, message: str, code: int):
        super().__init__(message, code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataAPIError):
            return NotImplemented
        return (self.message, self.code) == (other.message, other.code)

    def __hash__(self) -> int:
        return hash((self.message, self.code))


class ConfigurationError(MongoDataAPIError):
    """Raised when the client is constructed with unusable settings."""

    pass


class InvalidAuthError(ConfigurationError):
    """Raised when the auth options match no supported authentication method."""

    pass


class TransportConfigurationError(ConfigurationError):
    """Raised when no usable transport is available."""

    pass
