"""
nightlife/app/core/errors.py - Hata sınıfları ve FastAPI exception handler'ları.

Her hata `{"error": "<mesaj>"}` gövdesiyle ve taksonomideki HTTP koduyla döner.
Framework'ün kendi fırlattığı HTTP hataları (405, 404) da aynı biçime çevrilir.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("nightlife.errors")


class StaffAdminError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MethodNotAllowed(StaffAdminError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    default_message = "Method Not Allowed"


class Unauthenticated(StaffAdminError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized: No token provided."


class PermissionDenied(StaffAdminError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Permission Denied"


class InvalidArgument(StaffAdminError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields."


class Conflict(StaffAdminError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "The email address is already in use by another account."


class NotFound(StaffAdminError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"


class InternalError(StaffAdminError):
    pass


def error_response(exc: StaffAdminError, headers: Optional[Mapping[str, str]] = None) -> JSONResponse:
    if isinstance(exc, Unauthenticated):
        headers = {**(headers or {}), "WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)


@contextmanager
def handler_boundary(operation: str) -> Iterator[None]:
    """
    Taksonomi hataları olduğu gibi geçer; beklenmeyen her şey loglanır ve
    InternalError'a çevrilir. Yeniden deneme yapılmaz.
    """
    try:
        yield
    except StaffAdminError:
        raise
    except Exception as exc:
        logger.exception("Error in %s", operation)
        raise InternalError() from exc


async def _staff_admin_error_handler(request: Request, exc: StaffAdminError) -> JSONResponse:
    return error_response(exc)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    headers = getattr(exc, "headers", None)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return error_response(MethodNotAllowed(), headers)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=headers,
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # handler_boundary dışında kalan hatalar (ör. Firebase başlatma, bağımlılıklar)
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StaffAdminError, _staff_admin_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
