"""
Validation error types understood by the error handlers.

These are the framework-neutral shapes of the three validation failures
the API reports as 400:

- MethodArgumentNotValidError: a request body failed its declared
  field-level or object-level constraints.
- ConstraintViolationError: a model or method parameter failed its
  constraints inside handler code.
- ArgumentTypeMismatchError: a request parameter could not be
  converted to its declared type.

FastAPI and pydantic errors are converted into these in adapters.py.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def qualified_name(tp: type) -> str:
    """Return ``module.QualName`` for a type, without the ``builtins.`` prefix."""
    if tp.__module__ == "builtins":
        return tp.__qualname__
    return f"{tp.__module__}.{tp.__qualname__}"


@dataclass(frozen=True)
class FieldError:
    """A single field failing a declared constraint."""

    field: str
    message: str


@dataclass(frozen=True)
class ObjectError:
    """A cross-field (object-level) constraint failure."""

    object_name: str
    message: str


class MethodArgumentNotValidError(Exception):
    """Raised when a request body fails validation.

    Field errors and object errors are kept apart, each in the order
    the validator reported them.
    """

    def __init__(
        self,
        field_errors: Iterable[FieldError] = (),
        global_errors: Iterable[ObjectError] = (),
    ) -> None:
        self.field_errors = list(field_errors)
        self.global_errors = list(global_errors)
        super().__init__(
            f"Validation failed with {len(self.field_errors) + len(self.global_errors)} error(s)"
        )


@dataclass(frozen=True)
class ConstraintViolation:
    """One violated constraint: where it happened and what it says."""

    root_bean: str
    property_path: str
    message: str

    @classmethod
    def of(cls, root_bean_class: type, property_path: str, message: str) -> ConstraintViolation:
        return cls(qualified_name(root_bean_class), property_path, message)


class ConstraintViolationError(Exception):
    """Raised when model or method-parameter constraints are violated."""

    def __init__(self, violations: Iterable[ConstraintViolation]) -> None:
        self.violations = list(violations)
        super().__init__(
            ", ".join(f"{v.property_path}: {v.message}" for v in self.violations)
        )


class ArgumentTypeMismatchError(Exception):
    """Raised when a request argument cannot be converted to its declared type."""

    def __init__(self, name: str, required_type: type, value: object = None) -> None:
        self.name = name
        self.required_type = required_type
        self.value = value
        super().__init__(
            f"Failed to convert value {value!r} of parameter '{name}' "
            f"to required type '{qualified_name(required_type)}'"
        )
