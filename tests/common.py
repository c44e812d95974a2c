import json
from http import HTTPStatus
from typing import Any

from geoip2ws.clients.base import BaseTransport, TransportResponse


class RecordedRequest:
    def __init__(self, method: str, url: str, headers: dict[str, str]) -> None:
        self.method = method
        self.url = url
        self.headers = headers


class FakeTransport(BaseTransport):
    """Transport returning a fixed status/body and recording every request."""

    def __init__(self, status_code: int, text: str = "", content_type: str | None = None) -> None:
        self._status_code = int(status_code)
        self._text = text
        self._content_type = content_type
        self.requests: list[RecordedRequest] = []
        self.closed = False

    def send(self, method: str, url: str, headers: dict[str, str]) -> TransportResponse:
        self.requests.append(RecordedRequest(method, url, dict(headers)))
        return TransportResponse(
            status_code=self._status_code,
            url=url,
            text=self._text,
            content_type=self._content_type,
        )

    def close(self) -> None:
        self.closed = True


def json_transport(payload: Any, endpoint: str = "city", status_code: int = HTTPStatus.OK) -> FakeTransport:
    """FakeTransport answering with `payload` and the vendor content type of `endpoint`."""
    return FakeTransport(
        status_code=status_code,
        text=json.dumps(payload),
        content_type=f"application/vnd.maxmind.com-{endpoint}+json; charset=UTF-8; version=2.0",
    )


def error_transport(status_code: int, text: str) -> FakeTransport:
    return FakeTransport(status_code=status_code, text=text, content_type="application/vnd.maxmind.com-error+json")


COUNTRY_PAYLOAD: dict[str, Any] = {
    "continent": {
        "code": "NA",
        "geoname_id": 42,
        "names": {"en": "North America", "zh-CN": "北美洲"},
    },
    "country": {
        "geoname_id": 1,
        "iso_code": "US",
        "names": {"en": "United States of America", "ru": "США"},
    },
    "maxmind": {"queries_remaining": 11},
    "registered_country": {"geoname_id": 2, "iso_code": "CA", "names": {"en": "Canada"}},
    "traits": {"ip_address": "1.2.3.4"},
}

CITY_PAYLOAD: dict[str, Any] = {
    **COUNTRY_PAYLOAD,
    "city": {"geoname_id": 5375480, "names": {"en": "Mountain View", "de": "Mountain View"}},
    "location": {
        "accuracy_radius": 1000,
        "latitude": 37.386,
        "longitude": -122.0838,
        "metro_code": 807,
        "time_zone": "America/Los_Angeles",
    },
    "postal": {"code": "94043", "confidence": 40},
    "subdivisions": [
        {"geoname_id": 5332921, "iso_code": "CA", "names": {"en": "California"}},
        {"geoname_id": 5393021, "iso_code": "SCC", "names": {"en": "Santa Clara County"}},
    ],
}

CITY_ISP_ORG_PAYLOAD: dict[str, Any] = {
    **CITY_PAYLOAD,
    "traits": {
        "ip_address": "1.2.3.4",
        "autonomous_system_number": 15169,
        "autonomous_system_organization": "Google LLC",
        "isp": "Google",
        "organization": "Google LLC",
    },
}

OMNI_PAYLOAD: dict[str, Any] = {
    **CITY_ISP_ORG_PAYLOAD,
    "represented_country": {"geoname_id": 3, "iso_code": "DE", "names": {"en": "Germany"}, "type": "military"},
    "traits": {
        **CITY_ISP_ORG_PAYLOAD["traits"],
        "domain": "google.com",
        "is_anonymous_proxy": False,
        "is_satellite_provider": True,
        "user_type": "hosting",
    },
}
