"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import Comment
from campus.domain.repository import CommentRepository
from campus.domain.value import CommentId, CourseCode
from campus.persistence.mappers import comment_to_dict, row_to_comment
from campus.persistence.tables import course_comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(course_comments_table).where(
            course_comments_table.c.id == comment_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: List[CommentId]) -> List[Comment]:
        """Find the comments that still exist among the given IDs."""
        if not comment_ids:
            return []
        stmt = select(course_comments_table).where(
            course_comments_table.c.id.in_(comment_ids)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_course(self, course_code: CourseCode) -> List[Comment]:
        """Find all comments for a course, oldest first."""
        stmt = (
            select(course_comments_table)
            .where(course_comments_table.c.course_code == course_code.root)
            .order_by(course_comments_table.c.created_at, course_comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                course_comments_table.update()
                .where(course_comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = course_comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete_thread(self, comment_id: CommentId) -> int:
        """Delete a comment and all of its descendants in one statement.

        The subtree is collected with a recursive CTE. UNION (not UNION ALL)
        stops the recursion on corrupt cyclic parent links.
        """
        subtree = (
            select(course_comments_table.c.id)
            .where(course_comments_table.c.id == comment_id)
            .cte("subtree", recursive=True)
        )
        subtree = subtree.union(
            select(course_comments_table.c.id).join(
                subtree, course_comments_table.c.parent_id == subtree.c.id
            )
        )

        stmt = delete(course_comments_table).where(
            course_comments_table.c.id.in_(select(subtree.c.id))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
