"""Error types raised by the catalog client."""

from enum import Enum


class ErrorKind(str, Enum):
    HTTP_STATUS = "http_status"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    DECODE = "decode"


class CatalogApiError(RuntimeError):
    """Represents failures when communicating with the catalog service."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        *,
        method: str,
        path: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code


class HttpStatusError(CatalogApiError):
    """The service answered with a non-2xx status."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, *, method: str, path: str) -> None:
        super().__init__(
            f"Request failed with status code {status_code}",
            method=method,
            path=path,
            status_code=status_code,
        )


class UnauthorizedError(HttpStatusError):
    """401: the bearer token was missing or rejected."""

    kind = ErrorKind.UNAUTHORIZED


class NotFoundError(HttpStatusError):
    """404: the requested product does not exist."""

    kind = ErrorKind.NOT_FOUND


class CatalogTransportError(CatalogApiError):
    """The request never produced a response (connection, DNS, protocol)."""

    kind = ErrorKind.TRANSPORT


class RequestTimeoutError(CatalogTransportError):
    pass


class ResponseDecodeError(CatalogApiError):
    """A successful response carried a body that is not the expected JSON shape."""

    kind = ErrorKind.DECODE


_STATUS_ERRORS: dict[int, type[HttpStatusError]] = {
    401: UnauthorizedError,
    404: NotFoundError,
}


def error_for_status(status_code: int, *, method: str, path: str) -> HttpStatusError:
    """Pick the error class matching a non-2xx status code."""
    error_cls = _STATUS_ERRORS.get(status_code, HttpStatusError)
    return error_cls(status_code, method=method, path=path)
