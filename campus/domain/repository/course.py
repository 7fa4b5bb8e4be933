"""Course repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from campus.domain.model.course import Course
from campus.domain.value import CourseCode


class CourseRepository(ABC):
    """Repository for the course directory."""

    @abstractmethod
    async def find_by_code(self, code: CourseCode) -> Optional[Course]:
        """Find a course by its code."""
        pass

    @abstractmethod
    async def save(self, course: Course) -> Course:
        """Save a course."""
        pass
