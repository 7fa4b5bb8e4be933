"""Unit tests for GetThreadUseCase."""

from uuid import uuid4

import pytest

from campus.application.usecase.comment import GetThreadRequest, GetThreadUseCase
from campus.domain.error import NotFoundError, ValidationError
from campus.domain.repository import CommentRepository, CourseRepository, UserRepository
from campus.domain.value import CommentId, ThreadOrder
from tests.conftest import make_comment, make_course, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetThread:
    """Tests for the nested thread response."""

    @pytest.mark.asyncio
    async def test_nests_replies_with_counts_and_authors(self, unit_env):
        # Arrange
        course_repo = await unit_env.get(CourseRepository)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(GetThreadUseCase)
        await course_repo.save(make_course("CPIT370"))
        author = make_user(full_name="Lina Hassan")
        await user_repo.save(author)

        question = make_comment(author_id=author.id, minutes=0, content="Question")
        answer = make_comment(parent=question, minutes=1, content="Answer")
        follow_up = make_comment(parent=answer, minutes=2, content="Thanks")
        for c in (question, answer, follow_up):
            await comment_repo.save(c)

        # Act
        response = await use_case.execute(GetThreadRequest(course_code="cpit370"))

        # Assert
        assert response.course_code == "CPIT370"
        assert response.total == 3
        [root] = response.roots
        assert root.author.display_name == "Lina Hassan"
        assert root.reply_count == 2
        assert root.depth == 0
        [child] = root.replies
        assert child.parent_id == str(question.id)
        assert child.depth == 1
        assert child.reply_count == 1
        assert child.author.display_name == "Anonymous"  # Not in the directory
        assert child.replies[0].content == "Thanks"
        assert child.replies[0].replies == []

    @pytest.mark.asyncio
    async def test_orphan_reply_surfaces_as_root(self, unit_env):
        # Arrange
        course_repo = await unit_env.get(CourseRepository)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(GetThreadUseCase)
        await course_repo.save(make_course("CPIT370"))
        top = make_comment(minutes=0)
        orphan = make_comment(minutes=1, parent_id=CommentId(uuid4()))
        await comment_repo.save(top)
        await comment_repo.save(orphan)

        # Act
        response = await use_case.execute(
            GetThreadRequest(course_code="CPIT370", order=ThreadOrder.NEWEST_FIRST)
        )

        # Assert
        assert [r.comment_id for r in response.roots] == [str(orphan.id), str(top.id)]
        assert response.roots[0].is_orphan is True
        assert response.roots[0].depth == 0
        assert response.roots[1].is_orphan is False

    @pytest.mark.asyncio
    async def test_empty_course(self, unit_env):
        course_repo = await unit_env.get(CourseRepository)
        use_case = await unit_env.get(GetThreadUseCase)
        await course_repo.save(make_course("MATH101"))

        response = await use_case.execute(GetThreadRequest(course_code="MATH101"))

        assert response.roots == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_unknown_course(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadRequest(course_code="NOPE101"))

    @pytest.mark.asyncio
    async def test_malformed_course_code(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(GetThreadRequest(course_code="not a code"))
