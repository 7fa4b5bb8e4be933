"""In-memory comment repository for testing."""

from collections import deque
from typing import Optional

from campus.domain.model.comment import Comment
from campus.domain.repository.comment import CommentRepository
from campus.domain.value import CommentId, CourseCode


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: list[CommentId]) -> list[Comment]:
        """Find the comments that still exist among the given IDs."""
        return [self._comments[i] for i in set(comment_ids) if i in self._comments]

    async def find_by_course(self, course_code: CourseCode) -> list[Comment]:
        """Find all comments for a course, oldest first."""
        comments = [c for c in self._comments.values() if c.course_code == course_code]
        comments.sort(key=lambda c: (c.created_at, str(c.id)))
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete_thread(self, comment_id: CommentId) -> int:
        """Delete a comment and all of its descendants.

        Runs without awaiting, so it is atomic with respect to other
        coroutines on the loop.
        """
        if comment_id not in self._comments:
            return 0

        doomed: set[CommentId] = {comment_id}
        queue = deque([comment_id])
        while queue:
            parent_id = queue.popleft()
            for comment in self._comments.values():
                if comment.parent_id == parent_id and comment.id not in doomed:
                    doomed.add(comment.id)
                    queue.append(comment.id)

        for doomed_id in doomed:
            del self._comments[doomed_id]
        return len(doomed)

    def snapshot(self) -> dict[CommentId, Comment]:
        return dict(self._comments)

    def restore(self, snapshot: dict[CommentId, Comment]) -> None:
        self._comments = dict(snapshot)
