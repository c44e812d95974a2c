"""Record models shared by the web service responses.

Each record maps one top-level key of the response JSON. Keys the service
does not return are left as None (or an empty record).
"""

from geoip2ws.models.common import GeoIP2Model, NamedRecord


class Continent(NamedRecord):
    code: str | None = None


class Country(NamedRecord):
    confidence: int | None = None
    iso_code: str | None = None


class RepresentedCountry(Country):
    """Country represented by the users of the IP address, e.g. a military base."""

    type: str | None = None


class City(NamedRecord):
    confidence: int | None = None


class Subdivision(NamedRecord):
    confidence: int | None = None
    iso_code: str | None = None


class Location(GeoIP2Model):
    accuracy_radius: int | None = None
    latitude: float | None = None
    longitude: float | None = None
    metro_code: int | None = None
    time_zone: str | None = None


class Postal(GeoIP2Model):
    code: str | None = None
    confidence: int | None = None


class MaxMind(GeoIP2Model):
    queries_remaining: int | None = None


class Traits(GeoIP2Model):
    autonomous_system_number: int | None = None
    autonomous_system_organization: str | None = None
    domain: str | None = None
    ip_address: str | None = None
    is_anonymous_proxy: bool | None = None
    is_satellite_provider: bool | None = None
    isp: str | None = None
    organization: str | None = None
    user_type: str | None = None
