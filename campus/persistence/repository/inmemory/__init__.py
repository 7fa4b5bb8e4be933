"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .course import InMemoryCourseRepository
from .material import InMemoryMaterialRepository
from .report import InMemoryReportRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCourseRepository",
    "InMemoryMaterialRepository",
    "InMemoryReportRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
