"""API tests for reporting and moderation."""

import asyncio
from uuid import uuid4

import logfire
import pytest

from campus.config import AuthSettings
from campus.domain.repository import (
    CommentRepository,
    MaterialRepository,
    UserRepository,
)
from campus.domain.service import JWTService
from campus.domain.value import UserId
from campus.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment, make_material, make_user
from tests.harness import create_api_fixture

api_env = create_api_fixture()


async def _auth_headers(container, user_id: UserId, is_admin: bool = False) -> dict:
    jwt_service = JWTService(await container.get(AuthSettings))
    token = jwt_service.create_token(user_id, is_admin=is_admin)
    return {"Cookie": f"auth_token={token}"}


async def _admin_headers(container) -> dict:
    return await _auth_headers(container, UserId(uuid4()), is_admin=True)


async def _file(client, headers, target_type, target_id, reason="spam", details=None):
    return await client.post(
        "/reports",
        json={
            "target_type": target_type,
            "target_id": str(target_id),
            "reason": reason,
            "details": details,
        },
        headers=headers,
    )


class TestFileReport:
    """Tests for POST /reports."""

    @pytest.mark.asyncio
    async def test_file_report_on_comment(self, api_env):
        # Arrange
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        reporter_id = UserId(uuid4())

        # Act
        response = await _file(
            client, await _auth_headers(container, reporter_id), "comment", comment.id
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pending"
        assert body["reporter_id"] == str(reporter_id)
        assert body["reason_label"] == "Spam or misleading"

    @pytest.mark.asyncio
    async def test_requires_authentication(self, api_env):
        client, _ = api_env

        response = await _file(client, {}, "comment", uuid4())

        assert response.status_code == 401

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "target_type,reason,details",
        [
            ("course", "spam", None),
            ("comment", "boring", None),
            ("comment", "other", None),
        ],
    )
    async def test_invalid_input(self, api_env, target_type, reason, details):
        # Arrange
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        headers = await _auth_headers(container, UserId(uuid4()))

        # Act
        response = await _file(
            client, headers, target_type, comment.id, reason=reason, details=details
        )

        # Assert
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_details_too_long(self, api_env):
        # Arrange
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        headers = await _auth_headers(container, UserId(uuid4()))

        # Act
        response = await _file(
            client, headers, "comment", comment.id, reason="other", details="x" * 1001
        )

        # Assert
        assert response.status_code == 400
        assert "1000" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_details_trimmed_before_length_check(self, api_env):
        # Arrange
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        headers = await _auth_headers(container, UserId(uuid4()))

        # Act
        response = await _file(
            client,
            headers,
            "comment",
            comment.id,
            reason="other",
            details="  " + "x" * 1000 + "   ",
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["details"] == "x" * 1000

    @pytest.mark.asyncio
    async def test_missing_target(self, api_env):
        client, container = api_env
        headers = await _auth_headers(container, UserId(uuid4()))

        response = await _file(client, headers, "material", uuid4(), reason="outdated")

        assert response.status_code == 404


class TestListReports:
    """Tests for GET /reports."""

    @pytest.mark.asyncio
    async def test_admin_lists_pending_reports(self, api_env):
        # Arrange
        client, container = api_env
        user_repo = await container.get(UserRepository)
        material_repo = await container.get(MaterialRepository)
        uploader = make_user(full_name="Huda Saleh", email="huda@uni.edu")
        await user_repo.save(uploader)
        material = make_material(uploader_id=uploader.id, file_name="week3.pdf")
        await material_repo.save(material)
        await _file(
            client,
            await _auth_headers(container, UserId(uuid4())),
            "material",
            material.id,
            reason="copyright",
        )

        # Act
        response = await client.get(
            "/reports", headers=await _admin_headers(container)
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "pending"
        assert body["total"] == 1
        row = body["reports"][0]
        assert row["target"]["preview"] == "week3.pdf"
        assert row["target"]["author"]["display_name"] == "Huda Saleh"

    @pytest.mark.asyncio
    async def test_non_admin_forbidden(self, api_env):
        client, container = api_env

        response = await client.get(
            "/reports", headers=await _auth_headers(container, UserId(uuid4()))
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_unknown_status_filter(self, api_env):
        client, container = api_env

        response = await client.get(
            "/reports",
            params={"status": "archived"},
            headers=await _admin_headers(container),
        )

        assert response.status_code == 400


class TestProcessReport:
    """Tests for PATCH /reports/{id}."""

    @pytest.mark.asyncio
    async def test_review_removes_thread(self, api_env):
        # Arrange
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment(minutes=0)
        reply = make_comment(parent=comment, minutes=1)
        await comment_repo.save(comment)
        await comment_repo.save(reply)
        filed = await _file(
            client,
            await _auth_headers(container, UserId(uuid4())),
            "comment",
            comment.id,
            reason="harassment",
        )
        report_id = filed.json()["report_id"]
        admin = await _admin_headers(container)

        # Act
        response = await client.patch(
            f"/reports/{report_id}", json={"action": "reviewed"}, headers=admin
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "reviewed"
        assert await comment_repo.find_by_id(comment.id) is None
        assert await comment_repo.find_by_id(reply.id) is None

        processed = await client.get(
            "/reports", params={"status": "processed"}, headers=admin
        )
        [row] = processed.json()["reports"]
        assert row["report_id"] == report_id
        assert row["target"] is None

    @pytest.mark.asyncio
    async def test_failed_removal_keeps_report_pending(self, api_env, monkeypatch):
        # Arrange
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment(minutes=0)
        reply = make_comment(parent=comment, minutes=1)
        await comment_repo.save(comment)
        await comment_repo.save(reply)
        filed = await _file(
            client,
            await _auth_headers(container, UserId(uuid4())),
            "comment",
            comment.id,
            reason="harassment",
        )
        report_id = filed.json()["report_id"]
        admin = await _admin_headers(container)

        delete_thread = InMemoryCommentRepository.delete_thread

        async def _delete_then_fail(self, comment_id):
            await delete_thread(self, comment_id)
            raise RuntimeError("connection lost")

        errors = []

        def _record_error(msg, **attributes):
            errors.append((msg, attributes))

        monkeypatch.setattr(InMemoryCommentRepository, "delete_thread", _delete_then_fail)
        monkeypatch.setattr(logfire, "error", _record_error)

        # Act
        response = await client.patch(
            f"/reports/{report_id}", json={"action": "reviewed"}, headers=admin
        )

        # Assert
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to process report, please try again"
        assert await comment_repo.find_by_id(comment.id) is not None
        assert await comment_repo.find_by_id(reply.id) is not None
        pending = await client.get("/reports", headers=admin)
        assert [r["report_id"] for r in pending.json()["reports"]] == [report_id]

        [(_, attributes)] = errors
        assert attributes["error_type"] == "RuntimeError"
        assert isinstance(attributes["_exc_info"][1], RuntimeError)

    @pytest.mark.asyncio
    async def test_put_dismisses_and_repeat_is_noop(self, api_env):
        # Arrange
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        filed = await _file(
            client, await _auth_headers(container, UserId(uuid4())), "comment", comment.id
        )
        report_id = filed.json()["report_id"]
        admin = await _admin_headers(container)

        # Act
        first = await client.put(
            f"/reports/{report_id}", json={"action": "dismissed"}, headers=admin
        )
        second = await client.patch(
            f"/reports/{report_id}", json={"action": "dismissed"}, headers=admin
        )
        conflict = await client.patch(
            f"/reports/{report_id}", json={"action": "reviewed"}, headers=admin
        )

        # Assert
        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json() == first.json()
        assert conflict.status_code == 409
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_concurrent_reviews(self, api_env):
        # Arrange
        client, container = api_env
        comment_repo = await container.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        filed = await _file(
            client, await _auth_headers(container, UserId(uuid4())), "comment", comment.id
        )
        report_id = filed.json()["report_id"]

        # Act
        responses = await asyncio.gather(
            client.patch(
                f"/reports/{report_id}",
                json={"action": "reviewed"},
                headers=await _admin_headers(container),
            ),
            client.patch(
                f"/reports/{report_id}",
                json={"action": "reviewed"},
                headers=await _admin_headers(container),
            ),
        )

        # Assert
        assert [r.status_code for r in responses] == [200, 200]
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_non_admin_forbidden(self, api_env):
        client, container = api_env
        headers = await _auth_headers(container, UserId(uuid4()))

        response = await client.patch(
            f"/reports/{uuid4()}", json={"action": "reviewed"}, headers=headers
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_unknown_report(self, api_env):
        client, container = api_env

        response = await client.patch(
            f"/reports/{uuid4()}",
            json={"action": "reviewed"},
            headers=await _admin_headers(container),
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_action(self, api_env):
        client, container = api_env

        response = await client.patch(
            f"/reports/{uuid4()}",
            json={"action": "deleted"},
            headers=await _admin_headers(container),
        )

        assert response.status_code == 400
