"""PostgreSQL implementation of Course repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import Course
from campus.domain.repository import CourseRepository
from campus.domain.value import CourseCode
from campus.persistence.mappers import course_to_dict, row_to_course
from campus.persistence.tables import courses_table


class PostgresCourseRepository(CourseRepository):
    """PostgreSQL implementation of CourseRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_code(self, code: CourseCode) -> Optional[Course]:
        """Find a course by its code."""
        stmt = select(courses_table).where(courses_table.c.code == code.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_course(row._asdict()) if row else None

    async def save(self, course: Course) -> Course:
        """Save a course (upsert on code)."""
        course_dict = course_to_dict(course)
        stmt = (
            insert(courses_table)
            .values(**course_dict)
            .on_conflict_do_update(
                index_elements=[courses_table.c.code],
                set_={"name": course_dict["name"]},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return course
