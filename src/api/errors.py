"""Mapping of catalog errors to HTTP responses."""

from litestar import Request, Response
from litestar.exceptions import HTTPException
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
)
from loguru import logger

from domain.exceptions import SyncError, UnsupportedPlatformError
from domain.models import Platform
from infrastructure.errors import QueryError, TransportError


def parse_platform(value: str) -> Platform:
    """Parse a path parameter, rejecting unknown platforms with 400."""
    platform = Platform.parse(value)
    if platform is Platform.UNKNOWN:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=f"Unknown platform: {value}")
    return platform


def _error(status_code: int, message: str) -> Response:
    return Response(content={"status_code": status_code, "detail": message}, status_code=status_code)


def handle_query_error(request: Request, exc: QueryError) -> Response:
    logger.error(f"Query failed for {request.url.path}: {exc}")
    return _error(HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to read catalog: {exc}")


def handle_upstream_error(request: Request, exc: Exception) -> Response:
    logger.error(f"Upstream failure for {request.url.path}: {exc}")
    return _error(HTTP_502_BAD_GATEWAY, str(exc))


def handle_unsupported_platform(request: Request, exc: UnsupportedPlatformError) -> Response:
    return _error(HTTP_400_BAD_REQUEST, str(exc))


EXCEPTION_HANDLERS = {
    QueryError: handle_query_error,
    SyncError: handle_upstream_error,
    TransportError: handle_upstream_error,
    UnsupportedPlatformError: handle_unsupported_platform,
}
