from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from geoip2ws.logger import logger
from geoip2ws.models.request_models import Endpoint

PARAMETER_MESSAGES = {
    "ip": "The ip query parameter is required and must not be blank.",
    "endpoint": "The endpoint query parameter must be one of "
    + ", ".join(endpoint.value for endpoint in Endpoint)
    + ".",
}


def _invalid_parameter_message(errors: list[dict]) -> str:
    """Message for the first query parameter we know how to describe."""
    for error in errors:
        loc = error.get("loc") or ()
        if loc and loc[-1] in PARAMETER_MESSAGES:
            return PARAMETER_MESSAGES[loc[-1]]
    return "Invalid request parameters"


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError | ValidationError
) -> JSONResponse:
    """Answer any query validation failure with 400 `invalid_request`.

    FastAPI raises RequestValidationError for missing or mistyped parameters;
    IPLookupRequest's own validators raise a plain pydantic ValidationError.
    """
    endpoint = request.query_params.get("endpoint")
    errors = list(exc.errors())
    logger.info(
        f"Rejected lookup request path={request.url.path} endpoint={endpoint} "
        f"locations={[error.get('loc') for error in errors]}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "code": "invalid_request",
            "message": _invalid_parameter_message(errors),
            "endpoint": endpoint,
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for anything the lookup handler did not map itself."""
    logger.exception(f"Unhandled error path={request.url.path} method={request.method} error={exc!r}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "internal_error",
            "message": "An unexpected error occurred while processing the request.",
            "endpoint": request.query_params.get("endpoint"),
        },
    )
