"""Domain model entities for the campus discussion service."""

from campus.domain.model.comment import Comment
from campus.domain.model.course import Course
from campus.domain.model.material import Material
from campus.domain.model.report import Report
from campus.domain.model.user import User

__all__ = [
    "Comment",
    "Course",
    "Material",
    "Report",
    "User",
]
