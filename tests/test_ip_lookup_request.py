from typing import Any

import pytest
from pydantic import ValidationError

from geoip2ws.models.request_models import Endpoint, IPLookupRequest


def _build_request(ip: Any, **kwargs: Any) -> IPLookupRequest:
    """Helper to construct IPLookupRequest, used to keep tests small."""
    return IPLookupRequest(ip=ip, **kwargs)


def test_ip_lookup_request_defaults_to_city() -> None:
    req = _build_request("8.8.8.8")
    assert req.ip == "8.8.8.8"
    assert req.endpoint is Endpoint.city


def test_ip_lookup_request_strips_whitespace() -> None:
    req = _build_request("  2001:4860:4860::8888 ")
    assert req.ip == "2001:4860:4860::8888"


def test_ip_lookup_request_passes_through_non_ip_strings() -> None:
    """Address syntax is left to the web service."""
    req = _build_request("qwerty")
    assert req.ip == "qwerty"


def test_ip_lookup_request_rejects_blank_ip() -> None:
    with pytest.raises(ValidationError):
        _build_request("   ")


def test_ip_lookup_request_rejects_unknown_endpoint() -> None:
    with pytest.raises(ValidationError):
        _build_request("8.8.8.8", endpoint="insights")


@pytest.mark.parametrize(
    ("endpoint", "path", "content_type"),
    [
        (Endpoint.country, "country/{ip}", "application/vnd.maxmind.com-country+json"),
        (Endpoint.city, "city/{ip}", "application/vnd.maxmind.com-city+json"),
        (Endpoint.city_isp_org, "city_isp_org/{ip}", "application/vnd.maxmind.com-city-isp-org+json"),
        (Endpoint.omni, "omni/{ip}", "application/vnd.maxmind.com-omni+json"),
    ],
)
def test_endpoint_templates(endpoint: Endpoint, path: str, content_type: str) -> None:
    assert endpoint.path_template == path
    assert endpoint.content_type == content_type
