"""Unit tests for ReportService."""

from uuid import uuid4

import pytest

from campus.domain.error import NotFoundError, ValidationError
from campus.domain.model import Report
from campus.domain.repository import (
    CommentRepository,
    MaterialRepository,
    ReportRepository,
    UserRepository,
)
from campus.domain.service import ReportService
from campus.domain.value import (
    ReportId,
    ReportReason,
    ReportStatus,
    ReportStatusFilter,
    ReportTargetType,
    UserId,
)
from tests.conftest import at, make_comment, make_material, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestFileReport:
    """Tests for file_report method."""

    @pytest.mark.asyncio
    async def test_file_report_on_comment(self, unit_env):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        report_service = await unit_env.get(ReportService)
        comment = make_comment()
        await comment_repo.save(comment)
        reporter_id = UserId(uuid4())

        # Act
        report = await report_service.file_report(
            target_type=ReportTargetType.COMMENT,
            target_id=comment.id,
            reporter_id=reporter_id,
            reason=ReportReason.SPAM,
        )

        # Assert
        assert report.status is ReportStatus.PENDING
        assert report.target_id == comment.id
        assert report.reporter_id == reporter_id
        assert report.details is None

    @pytest.mark.asyncio
    async def test_duplicate_reports_are_all_kept(self, unit_env):
        # Arrange
        material_repo = await unit_env.get(MaterialRepository)
        report_service = await unit_env.get(ReportService)
        material = make_material()
        await material_repo.save(material)
        reporter_id = UserId(uuid4())

        # Act
        for _ in range(3):
            await report_service.file_report(
                ReportTargetType.MATERIAL,
                material.id,
                reporter_id,
                ReportReason.COPYRIGHT,
            )

        # Assert
        report_repo = await unit_env.get(ReportRepository)
        reports = [
            r for r in await report_repo.find_by_statuses() if r.target_id == material.id
        ]
        assert len(reports) == 3
        assert len({r.id for r in reports}) == 3

    @pytest.mark.asyncio
    async def test_other_requires_details(self, unit_env):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        report_repo = await unit_env.get(ReportRepository)
        report_service = await unit_env.get(ReportService)
        comment = make_comment()
        await comment_repo.save(comment)

        # Act / Assert
        with pytest.raises(ValidationError, match="details"):
            await report_service.file_report(
                ReportTargetType.COMMENT,
                comment.id,
                UserId(uuid4()),
                ReportReason.OTHER,
                details="   ",
            )
        assert await report_repo.find_by_statuses() == []

    @pytest.mark.asyncio
    async def test_details_are_stripped(self, unit_env):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        report_service = await unit_env.get(ReportService)
        comment = make_comment()
        await comment_repo.save(comment)

        # Act
        report = await report_service.file_report(
            ReportTargetType.COMMENT,
            comment.id,
            UserId(uuid4()),
            ReportReason.OTHER,
            details="  Posted exam answers  ",
        )

        # Assert
        assert report.details == "Posted exam answers"

    @pytest.mark.asyncio
    async def test_overlong_details_rejected(self, unit_env):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        report_service = await unit_env.get(ReportService)
        comment = make_comment()
        await comment_repo.save(comment)

        # Act / Assert
        with pytest.raises(ValidationError):
            await report_service.file_report(
                ReportTargetType.COMMENT,
                comment.id,
                UserId(uuid4()),
                ReportReason.SPAM,
                details="x" * 1001,
            )

    @pytest.mark.asyncio
    async def test_missing_target_rejected(self, unit_env):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(NotFoundError):
            await report_service.file_report(
                ReportTargetType.COMMENT,
                uuid4(),
                UserId(uuid4()),
                ReportReason.SPAM,
            )


class TestListReports:
    """Tests for list_reports method."""

    @pytest.mark.asyncio
    async def test_filters_and_orders_newest_first(self, unit_env):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        report_repo = await unit_env.get(ReportRepository)
        report_service = await unit_env.get(ReportService)
        comment = make_comment()
        await comment_repo.save(comment)

        filed = []
        for minutes in range(3):
            filed.append(
                await report_repo.save(
                    Report(
                        id=ReportId(uuid4()),
                        target_type=ReportTargetType.COMMENT,
                        target_id=comment.id,
                        reason=ReportReason.SPAM,
                        reporter_id=UserId(uuid4()),
                        created_at=at(minutes),
                        updated_at=at(minutes),
                    )
                )
            )
        await report_repo.transition_from_pending(
            filed[0].id, ReportStatus.DISMISSED, at(5)
        )

        # Act
        pending = await report_service.list_reports(ReportStatusFilter.PENDING)
        processed = await report_service.list_reports(ReportStatusFilter.PROCESSED)
        everything = await report_service.list_reports(ReportStatusFilter.ALL)

        # Assert
        assert [v.report.id for v in pending] == [filed[2].id, filed[1].id]
        assert [v.report.id for v in processed] == [filed[0].id]
        assert len(everything) == 3
        created = [v.report.created_at for v in everything]
        assert created == sorted(created, reverse=True)

    @pytest.mark.asyncio
    async def test_rows_carry_reporter_and_target_author(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)
        report_service = await unit_env.get(ReportService)
        author = make_user(full_name="Sara Ahmed", email="sara@uni.edu")
        reporter = make_user(full_name=None, email="omar.k@uni.edu")
        await user_repo.save(author)
        await user_repo.save(reporter)
        comment = make_comment(author_id=author.id, content="Buy cheap essays")
        await comment_repo.save(comment)
        await report_service.file_report(
            ReportTargetType.COMMENT, comment.id, reporter.id, ReportReason.SPAM
        )

        # Act
        [view] = await report_service.list_reports(ReportStatusFilter.ALL)

        # Assert
        assert view.reporter.display_name == "omar.k"
        assert view.target.preview == "Buy cheap essays"
        assert view.target.course_code.root == "CPIT370"
        assert view.target_author.display_name == "Sara Ahmed"

    @pytest.mark.asyncio
    async def test_removed_target_leaves_row_without_summary(self, unit_env):
        # Arrange
        material_repo = await unit_env.get(MaterialRepository)
        report_service = await unit_env.get(ReportService)
        material = make_material(file_name="notes.pdf")
        await material_repo.save(material)
        await report_service.file_report(
            ReportTargetType.MATERIAL, material.id, UserId(uuid4()), ReportReason.QUALITY
        )
        await material_repo.delete(material.id)

        # Act
        [view] = await report_service.list_reports(ReportStatusFilter.ALL)

        # Assert
        assert view.target is None
        assert view.target_author is None
        assert view.reporter is None  # Reporter not in the directory
