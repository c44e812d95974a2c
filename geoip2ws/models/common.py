from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class WebServiceError(BaseModel):
    """Error body returned by the web service with 4xx responses.

    Both keys are optional here so a well-formed JSON object that lacks
    them can still be reported with its raw body.
    """

    code: str | None = None
    error: str | None = None


class GeoIP2Model(BaseModel):
    """Base for all records and responses: unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class NamedRecord(GeoIP2Model):
    """A record carrying localized names keyed by language code."""

    geoname_id: int | None = None
    names: dict[str, str] = Field(default_factory=dict)

    _languages: list[str] = PrivateAttr(default_factory=lambda: ["en"])

    def set_languages(self, languages: list[str]) -> None:
        self._languages = list(languages)

    @property
    def name(self) -> str | None:
        """Name in the first preferred language the service returned."""
        for language in self._languages:
            if language in self.names:
                return self.names[language]
        return None
