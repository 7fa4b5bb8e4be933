"""PostgreSQL repository implementations."""

from campus.persistence.repository.comment import PostgresCommentRepository
from campus.persistence.repository.course import PostgresCourseRepository
from campus.persistence.repository.material import PostgresMaterialRepository
from campus.persistence.repository.report import PostgresReportRepository
from campus.persistence.repository.transaction import PostgresTransactionManager
from campus.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresCourseRepository",
    "PostgresMaterialRepository",
    "PostgresReportRepository",
    "PostgresTransactionManager",
    "PostgresUserRepository",
]
