from enum import Enum


class ErrorKind(str, Enum):
    """The four failure kinds a web service lookup can end in."""

    generic = "generic"
    http = "http"
    invalid_request = "invalid_request"
    address_not_found = "address_not_found"


class GeoIP2Error(Exception):
    """Base error for GeoIP2 web service failures.

    Raised directly when a 200 response cannot be turned into a model
    (wrong content type or an undecodable body).
    """

    kind = ErrorKind.generic

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class HTTPError(GeoIP2Error):
    """Raised when the transport or the HTTP exchange itself fails.

    `status_code` is None when no response was received at all.
    """

    kind = ErrorKind.http

    def __init__(self, message: str, status_code: int | None, uri: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.uri = uri


class InvalidRequestError(GeoIP2Error):
    """Raised when the service rejects the request with a JSON error body."""

    kind = ErrorKind.invalid_request

    def __init__(self, message: str, code: str, uri: str) -> None:
        super().__init__(message)
        self.code = code
        self.uri = uri


class AddressNotFoundError(GeoIP2Error):
    """Raised when the service has no data for the IP address."""

    kind = ErrorKind.address_not_found
