"""Reportable content kinds.

Comments and materials share one report queue and one moderation flow.
Each kind plugs in through a ``ReportableContent`` handler, and the
moderation services dispatch on ``Report.target_type`` through a table
that must cover every ``ReportTargetType``.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import ClassVar, Iterable, Mapping
from uuid import UUID

import logfire

from campus.domain.error import CascadeInconsistencyError
from campus.domain.repository import CommentRepository, MaterialRepository
from campus.domain.value import (
    CommentId,
    CourseCode,
    MaterialId,
    ReportTargetType,
    UserId,
)
from campus.domain.value.common import ValueObject

from .comment_service import CommentService

# Longest content excerpt shown in the moderation tables
PREVIEW_LENGTH = 200


class ReportTarget(ValueObject):
    """Summary of reported content, for the moderation screens."""

    target_type: ReportTargetType
    target_id: UUID
    author_id: UserId
    course_code: CourseCode
    preview: str
    created_at: datetime


def _preview(text: str) -> str:
    if len(text) <= PREVIEW_LENGTH:
        return text
    return text[: PREVIEW_LENGTH - 1].rstrip() + "…"


class ReportableContent(ABC):
    """Handler for one kind of reportable content."""

    target_type: ClassVar[ReportTargetType]

    @abstractmethod
    async def find(self, target_id: UUID) -> ReportTarget | None:
        """Summarize a target, or None if it does not exist."""
        pass

    @abstractmethod
    async def find_many(self, target_ids: Iterable[UUID]) -> dict[UUID, ReportTarget]:
        """Summarize several targets; missing ones are left out."""
        pass

    @abstractmethod
    async def remove(self, target_id: UUID) -> int:
        """Delete a target, cascading to anything it owns.

        Returns:
            Number of records removed

        Raises:
            CascadeInconsistencyError: If the target was already gone
        """
        pass


class CommentContent(ReportableContent):
    """Comments: removal takes the whole reply subtree."""

    target_type = ReportTargetType.COMMENT

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
    ) -> None:
        self.comment_repository = comment_repository
        self.comment_service = comment_service

    async def find(self, target_id: UUID) -> ReportTarget | None:
        comment = await self.comment_repository.find_by_id(CommentId(target_id))
        if not comment:
            return None
        return ReportTarget(
            target_type=self.target_type,
            target_id=comment.id,
            author_id=comment.author_id,
            course_code=comment.course_code,
            preview=_preview(comment.content),
            created_at=comment.created_at,
        )

    async def find_many(self, target_ids: Iterable[UUID]) -> dict[UUID, ReportTarget]:
        comments = await self.comment_repository.find_by_ids(
            [CommentId(target_id) for target_id in set(target_ids)]
        )
        return {
            comment.id: ReportTarget(
                target_type=self.target_type,
                target_id=comment.id,
                author_id=comment.author_id,
                course_code=comment.course_code,
                preview=_preview(comment.content),
                created_at=comment.created_at,
            )
            for comment in comments
        }

    async def remove(self, target_id: UUID) -> int:
        removed = await self.comment_service.delete_thread(CommentId(target_id))
        if removed == 0:
            raise CascadeInconsistencyError(self.target_type.value, str(target_id))
        return removed


class MaterialContent(ReportableContent):
    """Uploaded course materials."""

    target_type = ReportTargetType.MATERIAL

    def __init__(self, material_repository: MaterialRepository) -> None:
        self.material_repository = material_repository

    async def find(self, target_id: UUID) -> ReportTarget | None:
        material = await self.material_repository.find_by_id(MaterialId(target_id))
        if not material:
            return None
        return ReportTarget(
            target_type=self.target_type,
            target_id=material.id,
            author_id=material.uploader_id,
            course_code=material.course_code,
            preview=material.file_name,
            created_at=material.uploaded_at,
        )

    async def find_many(self, target_ids: Iterable[UUID]) -> dict[UUID, ReportTarget]:
        materials = await self.material_repository.find_by_ids(
            [MaterialId(target_id) for target_id in set(target_ids)]
        )
        return {
            material.id: ReportTarget(
                target_type=self.target_type,
                target_id=material.id,
                author_id=material.uploader_id,
                course_code=material.course_code,
                preview=material.file_name,
                created_at=material.uploaded_at,
            )
            for material in materials
        }

    async def remove(self, target_id: UUID) -> int:
        with logfire.span("material_content.remove", material_id=str(target_id)):
            deleted = await self.material_repository.delete(MaterialId(target_id))
            if not deleted:
                raise CascadeInconsistencyError(self.target_type.value, str(target_id))
            logfire.info("Material deleted", material_id=str(target_id))
            return 1


ContentRegistry = Mapping[ReportTargetType, ReportableContent]


def build_content_registry(
    *handlers: ReportableContent,
) -> dict[ReportTargetType, ReportableContent]:
    """Build the target-type dispatch table.

    Raises:
        ValueError: If a target type has no handler or two handlers
    """
    registry: dict[ReportTargetType, ReportableContent] = {}
    for handler in handlers:
        if handler.target_type in registry:
            raise ValueError(f"Duplicate handler for {handler.target_type.value}")
        registry[handler.target_type] = handler

    missing = set(ReportTargetType) - set(registry)
    if missing:
        names = ", ".join(sorted(t.value for t in missing))
        raise ValueError(f"No reportable content handler for: {names}")
    return registry
