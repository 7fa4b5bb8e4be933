"""API tests for the course discussion endpoints."""

from uuid import uuid4

import pytest

from campus.config import AuthSettings
from campus.domain.repository import CommentRepository, CourseRepository, UserRepository
from campus.domain.service import JWTService
from campus.domain.value import UserId
from tests.conftest import make_comment, make_course, make_user
from tests.harness import create_api_fixture

api_env = create_api_fixture()


async def _auth_headers(container, user_id: UserId, is_admin: bool = False) -> dict:
    jwt_service = JWTService(await container.get(AuthSettings))
    token = jwt_service.create_token(user_id, is_admin=is_admin)
    return {"Cookie": f"auth_token={token}"}


async def _seed_course(container, code: str = "CPIT370") -> None:
    course_repo = await container.get(CourseRepository)
    await course_repo.save(make_course(code))


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, api_env):
        client, _ = api_env

        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPostComment:
    """Tests for POST /courses/{code}/comments."""

    @pytest.mark.asyncio
    async def test_post_and_reply(self, api_env):
        # Arrange
        client, container = api_env
        await _seed_course(container)
        user_repo = await container.get(UserRepository)
        user = make_user(full_name="Faisal Omar")
        await user_repo.save(user)
        headers = await _auth_headers(container, user.id)

        # Act
        created = await client.post(
            "/courses/cpit370/comments",
            json={"content": "Is the lab open on Friday?"},
            headers=headers,
        )
        reply = await client.post(
            "/courses/CPIT370/comments",
            json={"content": "Yes, until 4pm", "parent_id": created.json()["comment_id"]},
            headers=headers,
        )

        # Assert
        assert created.status_code == 201
        body = created.json()
        assert body["course_code"] == "CPIT370"
        assert body["author"]["display_name"] == "Faisal Omar"
        assert body["parent_id"] is None
        assert reply.status_code == 201
        assert reply.json()["parent_id"] == body["comment_id"]

    @pytest.mark.asyncio
    async def test_requires_authentication(self, api_env):
        client, container = api_env
        await _seed_course(container)

        response = await client.post(
            "/courses/CPIT370/comments", json={"content": "Hello"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, api_env):
        client, container = api_env
        await _seed_course(container)
        headers = await _auth_headers(container, UserId(uuid4()))

        response = await client.post(
            "/courses/CPIT370/comments", json={"content": "   "}, headers=headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_too_long_content_rejected(self, api_env):
        client, container = api_env
        await _seed_course(container)
        headers = await _auth_headers(container, UserId(uuid4()))

        response = await client.post(
            "/courses/CPIT370/comments", json={"content": "x" * 10001}, headers=headers
        )

        assert response.status_code == 400
        assert "10000" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_length_limit_applies_after_trimming(self, api_env):
        client, container = api_env
        await _seed_course(container)
        headers = await _auth_headers(container, UserId(uuid4()))

        response = await client.post(
            "/courses/CPIT370/comments",
            json={"content": "\n" + "x" * 10000 + "   "},
            headers=headers,
        )

        assert response.status_code == 201
        assert response.json()["content"] == "x" * 10000

    @pytest.mark.asyncio
    async def test_reply_to_other_course_rejected(self, api_env):
        # Arrange
        client, container = api_env
        await _seed_course(container, "CPIT370")
        await _seed_course(container, "MATH101")
        comment_repo = await container.get(CommentRepository)
        parent = make_comment(course_code="MATH101")
        await comment_repo.save(parent)
        headers = await _auth_headers(container, UserId(uuid4()))

        # Act
        response = await client.post(
            "/courses/CPIT370/comments",
            json={"content": "Wrong place", "parent_id": str(parent.id)},
            headers=headers,
        )

        # Assert
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_course(self, api_env):
        client, container = api_env
        headers = await _auth_headers(container, UserId(uuid4()))

        response = await client.post(
            "/courses/NOPE101/comments", json={"content": "Hello"}, headers=headers
        )

        assert response.status_code == 404


class TestReadComments:
    """Tests for the flat and threaded listings."""

    @pytest.mark.asyncio
    async def test_flat_listing_oldest_first(self, api_env):
        # Arrange
        client, container = api_env
        await _seed_course(container)
        comment_repo = await container.get(CommentRepository)
        first = make_comment(minutes=0)
        second = make_comment(minutes=5)
        await comment_repo.save(second)
        await comment_repo.save(first)

        # Act
        response = await client.get("/courses/CPIT370/comments")

        # Assert
        assert response.status_code == 200
        ids = [c["comment_id"] for c in response.json()["comments"]]
        assert ids == [str(first.id), str(second.id)]

    @pytest.mark.asyncio
    async def test_thread_nesting_and_order(self, api_env):
        # Arrange
        client, container = api_env
        await _seed_course(container)
        comment_repo = await container.get(CommentRepository)
        older = make_comment(minutes=0)
        newer = make_comment(minutes=10)
        reply = make_comment(parent=older, minutes=1)
        for c in (older, newer, reply):
            await comment_repo.save(c)

        # Act
        response = await client.get(
            "/courses/CPIT370/comments/thread", params={"order": "newest_first"}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert [r["comment_id"] for r in body["roots"]] == [str(newer.id), str(older.id)]
        assert body["roots"][1]["replies"][0]["comment_id"] == str(reply.id)

    @pytest.mark.asyncio
    async def test_invalid_course_code(self, api_env):
        client, _ = api_env

        response = await client.get("/courses/bad%20code!/comments")

        assert response.status_code == 400


class TestDeleteComment:
    """Tests for DELETE /comments/{id}."""

    @pytest.mark.asyncio
    async def test_author_deletes_subtree(self, api_env):
        # Arrange
        client, container = api_env
        await _seed_course(container)
        comment_repo = await container.get(CommentRepository)
        author_id = UserId(uuid4())
        root = make_comment(author_id=author_id, minutes=0)
        reply = make_comment(parent=root, minutes=1)
        await comment_repo.save(root)
        await comment_repo.save(reply)

        # Act
        response = await client.delete(
            f"/comments/{root.id}", headers=await _auth_headers(container, author_id)
        )

        # Assert
        assert response.status_code == 204
        assert await comment_repo.find_by_id(root.id) is None
        assert await comment_repo.find_by_id(reply.id) is None

    @pytest.mark.asyncio
    async def test_admin_may_delete(self, api_env):
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        headers = await _auth_headers(container, UserId(uuid4()), is_admin=True)

        response = await client.delete(f"/comments/{comment.id}", headers=headers)

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_stranger_forbidden(self, api_env):
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        headers = await _auth_headers(container, UserId(uuid4()))

        response = await client.delete(f"/comments/{comment.id}", headers=headers)

        assert response.status_code == 403
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_unknown_comment(self, api_env):
        client, container = api_env
        headers = await _auth_headers(container, UserId(uuid4()))

        response = await client.delete(f"/comments/{uuid4()}", headers=headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_id(self, api_env):
        client, container = api_env
        headers = await _auth_headers(container, UserId(uuid4()))

        response = await client.delete("/comments/not-a-uuid", headers=headers)

        assert response.status_code == 400
