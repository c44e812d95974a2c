import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """What the web service client needs to know about an HTTP response."""

    status_code: int
    url: str
    text: str = ""
    content_type: str | None = None

    @property
    def content_length(self) -> int:
        return len(self.text.encode("utf-8"))

    def json(self) -> Any:
        """Decode the body; raises ValueError when it is not valid JSON."""
        return json.loads(self.text)


class BaseTransport(ABC):
    """Abstract base for the HTTP transports used by WebServiceClient.

    The real implementation talks to the network via httpx; tests supply
    their own implementation returning canned responses.
    """

    @abstractmethod
    def send(self, method: str, url: str, headers: dict[str, str]) -> TransportResponse:
        """Send a request and return the response, whatever its status."""
        raise NotImplementedError

    def close(self) -> None:
        """Release any resources held by the transport."""
        return None
