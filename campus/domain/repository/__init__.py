"""Repository interfaces for the campus domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from campus.domain.repository.comment import CommentRepository
from campus.domain.repository.course import CourseRepository
from campus.domain.repository.material import MaterialRepository
from campus.domain.repository.report import ReportRepository
from campus.domain.repository.transaction import TransactionManager
from campus.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "CourseRepository",
    "MaterialRepository",
    "ReportRepository",
    "TransactionManager",
    "UserRepository",
]
