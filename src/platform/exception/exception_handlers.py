from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.http.cors_headers import get_cors_headers

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _error_response(request: Request, *, status_code: int, error: Any) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=status_code,
        content={'error': error},
        headers=get_cors_headers(request.headers.get('origin')),
    )


async def custom_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    return _error_response(request, status_code=error.status_code, error=error.message)


async def value_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
    return _error_response(request, status_code=status.HTTP_400_BAD_REQUEST, error=str(exc))


async def validation_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return _error_response(
        request, status_code=status.HTTP_400_BAD_REQUEST, error=jsonable_errors(error)
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    return _error_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error='Internal server error',
    )


def jsonable_errors(error: RequestValidationError) -> list[dict[str, Any]]:
    # pydantic puts the raw exception under ctx['error'] for custom validators
    return [
        {key: value for key, value in item.items() if key in ('type', 'loc', 'msg')}
        for item in error.errors()
    ]


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
