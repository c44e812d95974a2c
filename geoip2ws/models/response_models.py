from typing import Any

from pydantic import BaseModel, Field, PrivateAttr

from geoip2ws.models.common import GeoIP2Model, NamedRecord
from geoip2ws.models.records import (
    City,
    Continent,
    Country,
    Location,
    MaxMind,
    Postal,
    RepresentedCountry,
    Subdivision,
    Traits,
)
from geoip2ws.models.request_models import Endpoint


class LocalizedResponse(GeoIP2Model):
    """Carries the language preference list down to every named record."""

    _languages: list[str] = PrivateAttr(default_factory=lambda: ["en"])

    @property
    def languages(self) -> list[str]:
        return list(self._languages)

    def set_languages(self, languages: list[str]) -> None:
        self._languages = list(languages)
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            records = value if isinstance(value, list) else [value]
            for record in records:
                if isinstance(record, NamedRecord):
                    record.set_languages(self._languages)


class CountryFields(LocalizedResponse):
    """Records returned by every endpoint."""

    continent: Continent = Field(default_factory=Continent)
    country: Country = Field(default_factory=Country)
    maxmind: MaxMind = Field(default_factory=MaxMind)
    registered_country: Country = Field(default_factory=Country)
    represented_country: RepresentedCountry = Field(default_factory=RepresentedCountry)
    traits: Traits = Field(default_factory=Traits)


class CityFields(LocalizedResponse):
    """Records added by the city level endpoints."""

    city: City = Field(default_factory=City)
    location: Location = Field(default_factory=Location)
    postal: Postal = Field(default_factory=Postal)
    subdivisions: list[Subdivision] = Field(default_factory=list)

    @property
    def most_specific_subdivision(self) -> Subdivision:
        """The smallest subdivision returned, or an empty one."""
        if not self.subdivisions:
            subdivision = Subdivision()
            subdivision.set_languages(self._languages)
            return subdivision
        return self.subdivisions[-1]


class CountryResponse(CountryFields):
    """Response of the Country endpoint."""


class CityResponse(CountryFields, CityFields):
    """Response of the City endpoint."""


class CityIspOrgResponse(CountryFields, CityFields):
    """Response of the City/ISP/Org endpoint; ISP and organization live in `traits`."""


class OmniResponse(CountryFields, CityFields):
    """Response of the Omni endpoint, carrying every record the service knows."""


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str


class IPLookupResponse(BaseModel):
    """Response model for a lookup made through the service."""

    endpoint: Endpoint
    ip: str
    languages: list[str]
    data: dict[str, Any]
