import httpx

from geoip2ws.clients.base import BaseTransport, TransportResponse
from geoip2ws.errors import HTTPError
from geoip2ws.logger import logger


class HttpxTransport(BaseTransport):
    """Transport backed by a shared httpx.Client.

    Redirects are not followed, so a 3xx reaches the client's status
    classification instead of being resolved here.
    """

    def __init__(self, timeout_seconds: float = 5.0, client: httpx.Client | None = None) -> None:
        self._client = client or httpx.Client(timeout=timeout_seconds, follow_redirects=False)

    def send(self, method: str, url: str, headers: dict[str, str]) -> TransportResponse:
        try:
            response = self._client.request(method, url, headers=headers)
        except httpx.RequestError as exc:
            logger.error(f"Request to GeoIP2 web service failed url={url} error={exc!r}")
            raise HTTPError(f"Request to {url} failed: {exc!r}", None, url) from exc

        return TransportResponse(
            status_code=response.status_code,
            url=str(response.url),
            text=response.text,
            content_type=response.headers.get("content-type"),
        )

    def close(self) -> None:
        self._client.close()
