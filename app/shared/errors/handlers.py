"""
Centralized error handlers for FastAPI.

Every exception that escapes request handling is translated here into
a status code and an HttpResponse envelope:

1. Bad requests (code: 400): request body validation, constraint
   violations and argument type mismatches. Not logged.
2. Business errors (code: 400), logged at ERROR with traceback, and
   request-handling infrastructure errors (code: 400), logged at ERROR.
3. Unexpected errors (code: 500). Logged at ERROR with traceback.

Rules are selected by the exception's MRO, so the most specific
declared type always wins over the catch-all.
"""

import logging
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.domain.errors import BusinessError
from app.interfaces.schemas import STATUS_BAD_REQUEST, STATUS_INTERNAL_ERROR, HttpResponse
from app.shared.errors.adapters import from_request_validation, from_validation_error
from app.shared.errors.exceptions import (
    ArgumentTypeMismatchError,
    ConstraintViolationError,
    MethodArgumentNotValidError,
    qualified_name,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

Outcome = tuple[int, HttpResponse]


def _message_of(exc: BaseException) -> str | None:
    return str(exc) or None


def _text(value: object) -> str | None:
    return None if value is None else str(value)


def _bad_request(**fields: Any) -> Outcome:
    return STATUS_BAD_REQUEST, HttpResponse(code=STATUS_BAD_REQUEST, **fields)


def _validation_errors(exc: MethodArgumentNotValidError) -> Outcome:
    """Field errors first, then object-level errors."""
    errors = [f"{error.field}: {error.message}" for error in exc.field_errors]
    errors += [f"{error.object_name}: {error.message}" for error in exc.global_errors]
    return _bad_request(data=errors)


def _constraint_violations(exc: ConstraintViolationError) -> Outcome:
    errors = [
        f"{violation.root_bean} {violation.property_path}: {violation.message}"
        for violation in exc.violations
    ]
    return _bad_request(data=errors)


def _type_mismatch(exc: ArgumentTypeMismatchError) -> Outcome:
    return _bad_request(
        message=f"{exc.name} should be of type {qualified_name(exc.required_type)}"
    )


def _request_validation(exc: RequestValidationError) -> Outcome:
    converted = from_request_validation(exc)
    if isinstance(converted, ArgumentTypeMismatchError):
        return _type_mismatch(converted)
    return _validation_errors(converted)


def _pydantic_validation(exc: ValidationError) -> Outcome:
    return _constraint_violations(from_validation_error(exc))


def _business_error(exc: BusinessError) -> Outcome:
    logger.error("global exception: %s", exc, exc_info=exc)
    return _bad_request(message=_text(exc.message))


def _infrastructure_error(exc: StarletteHTTPException) -> Outcome:
    logger.error("global exception: %s", exc)
    return _bad_request(message=_text(exc.detail))


def _internal_error(exc: BaseException) -> Outcome:
    logger.error("Unexpected error: %s", exc, exc_info=exc)
    response = HttpResponse(code=STATUS_INTERNAL_ERROR, message=_message_of(exc))
    return STATUS_INTERNAL_ERROR, response


RULES: dict[type[BaseException], Callable[[Any], Outcome]] = {
    RequestValidationError: _request_validation,
    MethodArgumentNotValidError: _validation_errors,
    ValidationError: _pydantic_validation,
    ConstraintViolationError: _constraint_violations,
    ArgumentTypeMismatchError: _type_mismatch,
    BusinessError: _business_error,
    StarletteHTTPException: _infrastructure_error,
    Exception: _internal_error,
}


def resolve_rule(exc_type: type[BaseException]) -> Callable[[Any], Outcome]:
    """Return the rule declared for the most specific type in the MRO."""
    for klass in exc_type.__mro__:
        rule = RULES.get(klass)
        if rule is not None:
            return rule
    return _internal_error


def translate_error(
    exc: BaseException, *, expose_internal_errors: bool = True
) -> Outcome:
    """Translate an exception into a status code and response envelope.

    Args:
        exc: The exception that escaped request handling.
        expose_internal_errors: When False, 500 responses carry a generic
            message instead of the exception text.

    Returns:
        The HTTP status code and the envelope to serialize.
    """
    status_code, response = resolve_rule(type(exc))(exc)
    if status_code == STATUS_INTERNAL_ERROR and not expose_internal_errors:
        response = HttpResponse(code=STATUS_INTERNAL_ERROR, message=INTERNAL_ERROR_MESSAGE)
    return status_code, response


def register_error_handlers(
    app: FastAPI, *, expose_internal_errors: bool | None = None
) -> None:
    """Register the error translator on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        expose_internal_errors: Overrides ``settings.expose_internal_errors``.
    """
    if expose_internal_errors is None:
        expose_internal_errors = settings.expose_internal_errors

    async def handle_error(_request: Request, exc: Exception) -> JSONResponse:
        """Render any declared exception type as an envelope."""
        status_code, response = translate_error(
            exc, expose_internal_errors=expose_internal_errors
        )
        return JSONResponse(status_code=status_code, content=response.to_content())

    for exc_type in RULES:
        app.add_exception_handler(exc_type, handle_error)
