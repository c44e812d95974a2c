"""Result types for lookups that report failures as values."""

from dataclasses import dataclass

from geoip2ws.errors import AddressNotFoundError, ErrorKind, GeoIP2Error, HTTPError, InvalidRequestError
from geoip2ws.models.response_models import CountryFields


@dataclass(frozen=True, slots=True)
class LookupSuccess:
    """Outcome of a lookup that returned a populated model."""

    response: CountryFields

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class LookupFailure:
    """Outcome of a lookup that failed; only the fields of its kind are set."""

    kind: ErrorKind
    message: str
    status_code: int | None = None
    code: str | None = None
    uri: str | None = None

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, exc: GeoIP2Error) -> "LookupFailure":
        if isinstance(exc, HTTPError):
            return cls(kind=exc.kind, message=exc.message, status_code=exc.status_code, uri=exc.uri)
        if isinstance(exc, InvalidRequestError):
            return cls(kind=exc.kind, message=exc.message, code=exc.code, uri=exc.uri)
        if isinstance(exc, AddressNotFoundError):
            return cls(kind=exc.kind, message=exc.message)
        return cls(kind=ErrorKind.generic, message=exc.message)

    def to_error(self) -> GeoIP2Error:
        """Rebuild the exception this failure stands for."""
        if self.kind is ErrorKind.http:
            return HTTPError(self.message, self.status_code, self.uri or "")
        if self.kind is ErrorKind.invalid_request:
            return InvalidRequestError(self.message, self.code or "", self.uri or "")
        if self.kind is ErrorKind.address_not_found:
            return AddressNotFoundError(self.message)
        return GeoIP2Error(self.message)


LookupResult = LookupSuccess | LookupFailure
