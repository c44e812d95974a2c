from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Endpoint(str, Enum):
    """GeoIP2 web service endpoints, from the least to the most data."""

    country = "country"
    city = "city"
    city_isp_org = "city_isp_org"
    omni = "omni"

    @property
    def path_template(self) -> str:
        return f"{self.value}/{{ip}}"

    @property
    def content_type(self) -> str:
        return f"application/vnd.maxmind.com-{self.value.replace('_', '-')}+json"


class IPLookupRequest(BaseModel):
    """Request model for a lookup via query parameters.

    The IP address is passed through to the web service untouched apart from
    surrounding whitespace; the service decides whether it is valid.
    """

    ip: str = Field(
        description="IPv4 or IPv6 address to look up.",
        examples=["8.8.8.8", "2001:4860:4860::8888"],
    )
    endpoint: Endpoint = Field(
        default=Endpoint.city,
        description="Web service endpoint to query. Defaults to city.",
        examples=["country", "city", "city_isp_org", "omni"],
    )

    @field_validator("ip", mode="before")
    @classmethod
    def _strip_ip(cls, value: str) -> str:
        value_str = str(value).strip()
        if not value_str:
            raise ValueError("ip must not be blank")
        return value_str
