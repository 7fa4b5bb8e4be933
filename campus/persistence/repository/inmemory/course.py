"""In-memory course repository for testing."""

from typing import Optional

from campus.domain.model.course import Course
from campus.domain.repository.course import CourseRepository
from campus.domain.value import CourseCode


class InMemoryCourseRepository(CourseRepository):
    """In-memory implementation of CourseRepository for testing."""

    def __init__(self) -> None:
        self._courses: dict[str, Course] = {}

    async def find_by_code(self, code: CourseCode) -> Optional[Course]:
        """Find a course by its code."""
        return self._courses.get(code.root)

    async def save(self, course: Course) -> Course:
        """Save a course."""
        self._courses[course.code.root] = course
        return course
