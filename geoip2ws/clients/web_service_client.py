import base64
from http import HTTPStatus
from typing import TypeVar
from urllib.parse import quote

from pydantic import ValidationError

from geoip2ws.clients.base import BaseTransport, TransportResponse
from geoip2ws.clients.httpx_transport import HttpxTransport
from geoip2ws.config import DEFAULT_BASE_URL
from geoip2ws.errors import AddressNotFoundError, GeoIP2Error, HTTPError, InvalidRequestError
from geoip2ws.logger import logger
from geoip2ws.models.common import WebServiceError
from geoip2ws.models.request_models import Endpoint
from geoip2ws.models.response_models import (
    CityIspOrgResponse,
    CityResponse,
    CountryFields,
    CountryResponse,
    OmniResponse,
)
from geoip2ws.results import LookupFailure, LookupResult, LookupSuccess

ResponseT = TypeVar("ResponseT", bound=CountryFields)

ADDRESS_NOT_FOUND_CODE = "IP_ADDRESS_NOT_FOUND"


class WebServiceClient:
    """Client for the GeoIP2 precision web service.

    Each endpoint returns a different amount of data about an IP address,
    Country the least and Omni the most. Records the service does not return
    are left empty on the model. Failures are raised as GeoIP2Error
    subclasses; `try_lookup` reports them as values instead.
    """

    RESPONSE_MODELS: dict[Endpoint, type[CountryFields]] = {
        Endpoint.country: CountryResponse,
        Endpoint.city: CityResponse,
        Endpoint.city_isp_org: CityIspOrgResponse,
        Endpoint.omni: OmniResponse,
    }

    def __init__(
        self,
        user_id: int,
        license_key: str,
        languages: list[str] | None = None,
        transport: BaseTransport | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float | None = None,
    ) -> None:
        """`timeout_seconds` configures the default httpx transport (5 seconds when
        omitted); an injected `transport` owns its own timeout, so passing both
        raises ValueError.
        """
        if transport is not None and timeout_seconds is not None:
            raise ValueError("timeout_seconds cannot be combined with a custom transport")
        self._languages = list(languages) if languages else ["en"]
        if transport is None:
            transport = HttpxTransport(timeout_seconds=5.0 if timeout_seconds is None else timeout_seconds)
        self._transport = transport
        self._base_url = base_url.rstrip("/")
        credentials = base64.b64encode(f"{user_id}:{license_key}".encode()).decode("ascii")
        self._headers = {"Authorization": f"Basic {credentials}"}

    @property
    def languages(self) -> list[str]:
        return list(self._languages)

    def __enter__(self) -> "WebServiceClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def country(self, ip: str) -> CountryResponse:
        """Look up country level data for an IP address."""
        return self.lookup(Endpoint.country, ip)

    def city(self, ip: str) -> CityResponse:
        """Look up city level data for an IP address."""
        return self.lookup(Endpoint.city, ip)

    def city_isp_org(self, ip: str) -> CityIspOrgResponse:
        """Look up city level data plus ISP and organization for an IP address."""
        return self.lookup(Endpoint.city_isp_org, ip)

    def omni(self, ip: str) -> OmniResponse:
        """Look up everything the service knows about an IP address."""
        return self.lookup(Endpoint.omni, ip)

    def lookup(self, endpoint: Endpoint, ip: str) -> CountryFields:
        return self._execute(endpoint, ip, self.RESPONSE_MODELS[endpoint])

    def try_lookup(self, endpoint: Endpoint, ip: str) -> LookupResult:
        """Like `lookup`, but return failures as a LookupFailure."""
        try:
            return LookupSuccess(self.lookup(endpoint, ip))
        except GeoIP2Error as exc:
            return LookupFailure.from_error(exc)

    def build_url(self, path_template: str, ip: str) -> str:
        return f"{self._base_url}/{path_template.replace('{ip}', quote(ip, safe=':'))}"

    def _execute(self, endpoint: Endpoint, ip: str, model: type[ResponseT]) -> ResponseT:
        url = self.build_url(endpoint.path_template, ip)
        headers = {**self._headers, "Accept": f"{endpoint.content_type}, application/json"}
        logger.debug(f"Performing GeoIP2 web service lookup url={url}")
        response = self._transport.send("GET", url, headers)

        status_code = response.status_code
        if status_code == HTTPStatus.OK:
            return self._handle_success(response, model)

        if HTTPStatus.BAD_REQUEST <= status_code < HTTPStatus.INTERNAL_SERVER_ERROR:
            self._handle_4xx_status(response)

        if HTTPStatus.INTERNAL_SERVER_ERROR <= status_code < 600:
            logger.error(f"GeoIP2 web service server error status={status_code} url={response.url}")
            raise HTTPError(
                f"Received a server error ({status_code}) for {response.url}",
                status_code,
                response.url,
            )

        raise HTTPError(
            f"Received a very surprising HTTP status ({status_code}) for {response.url}",
            status_code,
            response.url,
        )

    def _handle_success(self, response: TransportResponse, model: type[ResponseT]) -> ResponseT:
        """Turn a 200 response into a model carrying the configured languages."""
        if response.content_length <= 0:
            raise HTTPError(
                f"Received a 200 response for {response.url} but there was no message body.",
                response.status_code,
                response.url,
            )

        if not response.content_type or "json" not in response.content_type:
            raise GeoIP2Error(
                f"Received a 200 response for {response.url} "
                f"but it does not appear to be JSON: {response.content_type}"
            )

        try:
            data = model.model_validate_json(response.text)
        except ValidationError as exc:
            logger.warning(f"Undecodable GeoIP2 response url={response.url} error={exc}")
            raise GeoIP2Error(
                f"Received a 200 response for {response.url} "
                f"but could not decode the response as JSON: {response.text}"
            ) from exc

        data.set_languages(self._languages)
        return data

    def _handle_4xx_status(self, response: TransportResponse) -> None:
        """Map a 4xx response to the matching error; always raises."""
        status_code = response.status_code
        if not response.text:
            raise HTTPError(
                f"Received a {status_code} error for {response.url} with no body",
                status_code,
                response.url,
            )

        try:
            error_body = WebServiceError.model_validate_json(response.text)
        except ValidationError as exc:
            raise HTTPError(
                f"Received a {status_code} error for {response.url} "
                f"but it did not include the expected JSON body: {response.text}",
                status_code,
                response.url,
            ) from exc

        self._handle_error_with_json_body(error_body, response)

    @staticmethod
    def _handle_error_with_json_body(error_body: WebServiceError, response: TransportResponse) -> None:
        if error_body.code is None or error_body.error is None:
            raise HTTPError(
                f"Response contains JSON but does not specify code or error keys: {response.text}",
                response.status_code,
                response.url,
            )

        logger.warning(
            "GeoIP2 web service rejected lookup "
            f"status={response.status_code} code={error_body.code} url={response.url}"
        )
        if error_body.code == ADDRESS_NOT_FOUND_CODE:
            raise AddressNotFoundError(error_body.error)

        raise InvalidRequestError(error_body.error, error_body.code, response.url)
