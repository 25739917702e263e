"""
Adapters from FastAPI / pydantic validation errors to the error types
in exceptions.py.

FastAPI reports body validation, missing parameters and parameter
conversion failures in a single RequestValidationError. Conversion
failures of path, query, header or cookie parameters are reported as
an ArgumentTypeMismatchError (the first one wins); everything else
becomes field or object errors of a MethodArgumentNotValidError; a
body that is not valid JSON is an object error on the body.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any
from uuid import UUID

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.shared.errors.exceptions import (
    ArgumentTypeMismatchError,
    ConstraintViolation,
    ConstraintViolationError,
    FieldError,
    MethodArgumentNotValidError,
    ObjectError,
    qualified_name,
)

BODY = "body"
JSON_INVALID = "json_invalid"
PARAMETER_SOURCES = frozenset({"path", "query", "header", "cookie"})

# pydantic error type -> the Python type the input failed to become
PARSING_ERROR_TYPES: dict[str, type] = {
    "int_parsing": int,
    "int_type": int,
    "int_from_float": int,
    "float_parsing": float,
    "float_type": float,
    "bool_parsing": bool,
    "bool_type": bool,
    "decimal_parsing": Decimal,
    "decimal_type": Decimal,
    "uuid_parsing": UUID,
    "uuid_type": UUID,
    "date_parsing": date,
    "date_from_datetime_parsing": date,
    "date_from_datetime_inexact": date,
    "date_type": date,
    "datetime_parsing": datetime,
    "datetime_from_date_parsing": datetime,
    "datetime_type": datetime,
    "time_parsing": time,
    "time_type": time,
    "time_delta_parsing": timedelta,
    "time_delta_type": timedelta,
}


def _join(loc: tuple[Any, ...]) -> str:
    """Render a location as a property path: ``items[0].qty``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def _names_a_field(loc: tuple[Any, ...]) -> bool:
    """A body location names a field unless it is only the body or offsets into it."""
    return any(not isinstance(part, int) for part in loc[1:])


def _type_mismatch(error: dict[str, Any]) -> ArgumentTypeMismatchError | None:
    loc = tuple(error.get("loc", ()))
    expected = PARSING_ERROR_TYPES.get(error.get("type", ""))
    if expected is None or len(loc) < 2 or loc[0] not in PARAMETER_SOURCES:
        return None
    return ArgumentTypeMismatchError(str(loc[1]), expected, error.get("input"))


def from_request_validation(
    exc: RequestValidationError,
) -> MethodArgumentNotValidError | ArgumentTypeMismatchError:
    """Convert a FastAPI request validation failure.

    Args:
        exc: The error raised by FastAPI while resolving route arguments.

    Returns:
        An ArgumentTypeMismatchError for the first parameter conversion
        failure, otherwise a MethodArgumentNotValidError holding every
        reported error.
    """
    errors = list(exc.errors())
    for error in errors:
        mismatch = _type_mismatch(error)
        if mismatch is not None:
            return mismatch

    field_errors: list[FieldError] = []
    global_errors: list[ObjectError] = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        message = str(error.get("msg", ""))
        if error.get("type") == JSON_INVALID or not _names_a_field(loc):
            global_errors.append(ObjectError(str(loc[0]) if loc else BODY, message))
        else:
            field_errors.append(FieldError(_join(loc[1:]), message))
    return MethodArgumentNotValidError(field_errors, global_errors)


def from_validation_error(
    exc: ValidationError, root_bean_class: type | None = None
) -> ConstraintViolationError:
    """Convert a pydantic ValidationError raised inside handler code.

    The root is the supplied class, or the error's title (the model or
    function name) when none is given.
    """
    root = qualified_name(root_bean_class) if root_bean_class is not None else exc.title
    return ConstraintViolationError(
        ConstraintViolation(root, _join(tuple(error["loc"])), error["msg"])
        for error in exc.errors()
    )
