"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from campus.domain.model import Comment, Course, Material, Report, User
from campus.domain.value import (
    CommentId,
    CourseCode,
    MaterialId,
    ReportId,
    ReportReason,
    ReportStatus,
    ReportTargetType,
    UserId,
)


def _uuid(value: Any) -> UUID:
    # asyncpg hands back UUID objects, other drivers may use strings
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        full_name=row.get("full_name"),
        email=row.get("email"),
        student_id=row.get("student_id"),
        avatar_url=row.get("avatar_url"),
        is_admin=row.get("is_admin", False),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_course(row: Dict[str, Any]) -> Course:
    """Convert database row to Course domain model."""
    return Course(code=CourseCode(row["code"]), name=row["name"])


def course_to_dict(course: Course) -> Dict[str, Any]:
    """Convert Course domain model to database dict."""
    return {"code": course.code.root, "name": course.name}


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        course_code=CourseCode(row["course_code"]),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["course_code"] = comment.course_code.root
    return data


def row_to_material(row: Dict[str, Any]) -> Material:
    """Convert database row to Material domain model."""
    return Material(
        id=MaterialId(_uuid(row["id"])),
        course_code=CourseCode(row["course_code"]),
        uploader_id=UserId(_uuid(row["uploader_id"])),
        file_name=row["file_name"],
        file_type=row["file_type"],
        file_size=row["file_size"],
        file_url=row["file_url"],
        description=row.get("description"),
        uploaded_at=row["uploaded_at"],
    )


def material_to_dict(material: Material) -> Dict[str, Any]:
    """Convert Material domain model to database dict."""
    data = material.model_dump()
    data["course_code"] = material.course_code.root
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model.

    Args:
        row: Database row as dict

    Returns:
        Report domain model
    """
    return Report(
        id=ReportId(_uuid(row["id"])),
        target_type=ReportTargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        reason=ReportReason(row["reason"]),
        details=row.get("details"),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        status=ReportStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict.

    Enums are stored by value.
    """
    return report.model_dump() | {
        "target_type": report.target_type.value,
        "reason": report.reason.value,
        "status": report.status.value,
    }
