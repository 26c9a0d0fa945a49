"""
Catalog failure taxonomy.

Every failure the API client can produce is one of four kinds:

- InvalidRequest: the request URL could not be built from the inputs
- Transport: no HTTP response was obtained (DNS, connection, timeout)
- Api: the server answered with a non-200 status
- Decoding: the body did not match the expected response shape

The client raises these and performs no recovery. Callers that show errors
to a user use ``str(error)`` as the message.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of catalog failures."""

    INVALID_REQUEST = "invalid_request"
    TRANSPORT = "transport"
    API = "api"
    DECODING = "decoding"


class CatalogError(Exception):
    """
    Base class for failures raised by the catalog client.

    Attributes:
        kind: Classification of the failure
        message: Human-readable explanation
    """

    def __init__(self, kind: FailureKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class InvalidRequestError(CatalogError, ValueError):
    """Raised when a request cannot be built from the given inputs."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(FailureKind.INVALID_REQUEST, f"Invalid request: {detail}")


class TransportError(CatalogError):
    """Raised when the request failed before a response was received."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(FailureKind.TRANSPORT, f"Network error: {cause}")


class ApiError(CatalogError):
    """Raised for any non-200 HTTP response."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(FailureKind.API, f"API Error ({status_code}): {body}")


class DecodingError(CatalogError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, body: str, cause: Exception):
        self.body = body
        self.cause = cause
        super().__init__(FailureKind.DECODING, f"Failed to decode response: {cause}")
