from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from geoip2ws.clients.web_service_client import WebServiceClient
from geoip2ws.config import Settings
from geoip2ws.errors import AddressNotFoundError, GeoIP2Error, HTTPError, InvalidRequestError
from geoip2ws.exception_handlers import (
    request_validation_exception_handler,
    unhandled_exception_handler,
)
from geoip2ws.logger import configure_logging, logger
from geoip2ws.models.request_models import IPLookupRequest
from geoip2ws.models.response_models import HealthResponse, IPLookupResponse

configure_logging()

app = FastAPI(
    title="GeoIP2 Lookup Service",
    version="0.1.0",
    description="Looks up IP addresses through the GeoIP2 precision web service.",
)
logger.info("Started GeoIP2 Lookup Service")


def get_settings() -> Settings:
    """Dependency to provide the settings read from the environment."""
    return Settings.from_env()


def get_web_service_client(settings: Annotated[Settings, Depends(get_settings)]) -> Iterator[WebServiceClient]:
    """Dependency to provide a WebServiceClient, closed after the request."""
    client = WebServiceClient(
        settings.user_id,
        settings.license_key,
        languages=settings.languages,
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
    )
    try:
        yield client
    finally:
        client.close()


# Register global exception handlers using the shared handlers module.
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(ValidationError, request_validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.get(
    "/health",
    tags=["health"],
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="ok")


@app.get(
    "/v1/ip/lookup",
    response_model=IPLookupResponse,
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Look up an IP address through a GeoIP2 web service endpoint.",
)
def ip_lookup(
    query: Annotated[IPLookupRequest, Depends()],
    client: Annotated[WebServiceClient, Depends(get_web_service_client)],
) -> IPLookupResponse:
    """Look up `query.ip` on the `query.endpoint` endpoint (city by default).

    The handler is synchronous; FastAPI runs it in its threadpool so the
    blocking web service call does not stall the event loop.
    """
    ip = query.ip
    endpoint = query.endpoint
    logger.info(f"Performing GeoIP2 lookup ip={ip} endpoint={endpoint.value}")

    try:
        data = client.lookup(endpoint, ip)
    except AddressNotFoundError as exc:
        logger.info(f"Address not found ip={ip} endpoint={endpoint.value} error={exc}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "code": "ip_not_found",
                "message": str(exc),
                "endpoint": endpoint.value,
            },
        ) from exc
    except InvalidRequestError as exc:
        logger.error(f"Invalid lookup request ip={ip} endpoint={endpoint.value} code={exc.code} error={exc}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "code": "invalid_request",
                "service_code": exc.code,
                "message": str(exc),
                "endpoint": endpoint.value,
            },
        ) from exc
    except HTTPError as exc:
        logger.exception(
            f"GeoIP2 web service HTTP error ip={ip} endpoint={endpoint.value} status={exc.status_code} error={exc}"
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "code": "upstream_error",
                "message": str(exc),
                "endpoint": endpoint.value,
            },
        ) from exc
    except GeoIP2Error as exc:
        logger.exception(f"Unusable GeoIP2 web service response ip={ip} endpoint={endpoint.value} error={exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "code": "upstream_error",
                "message": str(exc),
                "endpoint": endpoint.value,
            },
        ) from exc

    return IPLookupResponse(
        endpoint=endpoint,
        ip=ip,
        languages=data.languages,
        data=data.model_dump(mode="json"),
    )
