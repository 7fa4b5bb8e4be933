"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from campus.domain.model import Comment, Course, Material, User
from campus.domain.value import (
    CommentId,
    CourseCode,
    MaterialId,
    UserId,
)

BASE_TIME = datetime(2025, 3, 1, 9, 0, 0)


def at(minutes: int) -> datetime:
    """Timestamp ``minutes`` after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(
    full_name: str | None = "Test Student",
    email: str | None = "student@uni.edu",
    is_admin: bool = False,
) -> User:
    """Build a directory entry with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        full_name=full_name,
        email=email,
        student_id="2100123",
        is_admin=is_admin,
    )


def make_course(code: str = "CPIT370", name: str = "Software Engineering") -> Course:
    return Course(code=CourseCode(code), name=name)


def make_comment(
    course_code: str = "CPIT370",
    author_id: UserId | None = None,
    parent: Comment | None = None,
    minutes: int = 0,
    content: str = "Comment text",
    parent_id: CommentId | None = None,
) -> Comment:
    """Build a comment.

    ``parent`` links a reply to an existing comment; ``parent_id`` sets
    an arbitrary (possibly dangling) parent ID.
    """
    return Comment(
        id=CommentId(uuid4()),
        course_code=CourseCode(course_code),
        author_id=author_id or UserId(uuid4()),
        content=content,
        parent_id=parent.id if parent else parent_id,
        created_at=at(minutes),
    )


def make_material(
    course_code: str = "CPIT370",
    uploader_id: UserId | None = None,
    file_name: str = "lecture-01.pdf",
) -> Material:
    return Material(
        id=MaterialId(uuid4()),
        course_code=CourseCode(course_code),
        uploader_id=uploader_id or UserId(uuid4()),
        file_name=file_name,
        file_type="application/pdf",
        file_size=120_000,
        file_url=f"https://files.uni.edu/{file_name}",
    )
