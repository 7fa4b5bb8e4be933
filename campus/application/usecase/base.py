"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from campus.domain.error import ValidationError
from campus.domain.value import CourseCode


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, field: str) -> UUID:
    """Parse a UUID from a request, raising a domain validation error.

    Args:
        value: Raw identifier string
        field: Field name for the error message

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (ValueError, AttributeError, TypeError):
        raise ValidationError(f"Invalid {field}: {value!r}")


def parse_course_code(value: str) -> CourseCode:
    """Parse a course code from a request path.

    Raises:
        ValidationError: If the code is malformed
    """
    try:
        return CourseCode(value)
    except PydanticValidationError:
        raise ValidationError(f"Invalid course code: {value!r}")
