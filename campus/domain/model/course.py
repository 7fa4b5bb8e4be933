"""Course entity."""

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import CourseCode


class Course(DomainModel):
    """Course in the course directory."""

    code: CourseCode
    name: str = Field(min_length=1, max_length=255)
