"""Custom exceptions for the podcastindex client."""

from typing import Any


class PodcastIndexError(Exception):
    """Base exception for all podcastindex errors."""

    pass


class ConfigurationError(PodcastIndexError):
    """Exception raised when the client is missing required configuration."""

    pass


class ExecutionError(PodcastIndexError):
    """Exception raised when the HTTP exchange itself fails."""

    def __init__(self, url: str, cause: Exception) -> None:
        """Initialize the exception.

        Args:
            url: The URL of the request that could not be executed
            cause: The underlying network, timeout or connection error

        """
        self.url = url
        self.cause = cause
        super().__init__(f"failed to execute HTTP request to {url}: {cause}")


class AuthenticationError(PodcastIndexError):
    """Exception raised when the API rejects the request credentials (HTTP 401)."""

    def __init__(self, url: str) -> None:
        """Initialize the exception.

        Args:
            url: The URL of the rejected request

        """
        self.url = url
        self.status_code = 401
        super().__init__(
            f"authentication error when making request to podcast index API ({url}), "
            "please verify your API key and API secret values are correct"
        )


class MalformedRequestError(PodcastIndexError):
    """Exception raised when the API rejects the request as malformed (HTTP 400)."""

    def __init__(self, url: str, status_code: int = 400) -> None:
        """Initialize the exception.

        Args:
            url: The URL of the rejected request
            status_code: The HTTP status code returned by the API

        """
        self.url = url
        self.status_code = status_code
        super().__init__(
            f"podcast index API at {url} returned status code {status_code}. "
            "This usually indicates a malformed request, potentially a bug in this client or an API change. "
            "Please file an issue with steps to reproduce the error"
        )


class ServerError(PodcastIndexError):
    """Exception raised for any other non-success status code."""

    def __init__(self, url: str, status_code: int, body: str) -> None:
        """Initialize the exception.

        Args:
            url: The URL of the failed request
            status_code: The HTTP status code returned by the API
            body: The raw response body text

        """
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"podcast index API at {url} returned status code {status_code} with response: {body}")


class ReadError(PodcastIndexError):
    """Exception raised when the response body cannot be read."""

    def __init__(self, url: str, status_code: int, cause: Exception) -> None:
        """Initialize the exception.

        Args:
            url: The URL of the failed request
            status_code: The HTTP status code returned by the API
            cause: The error raised while reading the body

        """
        self.url = url
        self.status_code = status_code
        self.cause = cause
        super().__init__(
            f"podcast index API at {url} returned status code {status_code}, failed to read error response: {cause}"
        )


class DecodeError(PodcastIndexError):
    """Exception raised when a successful response cannot be decoded."""

    def __init__(self, url: str, cause: Exception) -> None:
        """Initialize the exception.

        Args:
            url: The URL of the request whose response failed to decode
            cause: The JSON or field-level parse failure

        """
        self.url = url
        self.cause = cause
        super().__init__(f"failed to decode response from podcast index API ({url}): {cause}")


class FieldParseError(PodcastIndexError, ValueError):
    """Exception raised when a single field value cannot be converted."""

    def __init__(self, field: str, value: Any, message: str | None = None) -> None:
        """Initialize the exception.

        Args:
            field: The name of the offending field
            value: The raw value found on the wire
            message: Description of the failure, defaults to a generic one

        """
        self.field = field
        self.value = value
        super().__init__(message or f"failed to parse {field} {value!r}")


class TypeMismatchError(FieldParseError):
    """Exception raised when a field has none of its accepted JSON types."""

    def __init__(self, field: str, value: Any, expected: str) -> None:
        """Initialize the exception.

        Args:
            field: The name of the offending field
            value: The raw value found on the wire
            expected: Human readable list of accepted types

        """
        self.expected = expected
        super().__init__(
            field,
            value,
            f"unable to parse json value for {field}: expected {expected}, got {type(value).__name__} {value!r}",
        )
