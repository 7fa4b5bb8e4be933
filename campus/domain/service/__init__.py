"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .report_service import ReportService, ReportView
from .reportable import (
    CommentContent,
    ContentRegistry,
    MaterialContent,
    ReportableContent,
    ReportTarget,
    build_content_registry,
)
from .thread_service import ThreadNode, build_thread, count_nodes, iter_nodes
from .thread_state import ThreadUIState, ThreadViewState
from .user_service import UserService

__all__ = [
    "CommentContent",
    "CommentService",
    "ContentRegistry",
    "JWTService",
    "MaterialContent",
    "ModerationService",
    "ReportService",
    "ReportTarget",
    "ReportView",
    "ReportableContent",
    "Service",
    "ThreadNode",
    "ThreadUIState",
    "ThreadViewState",
    "UserService",
    "build_content_registry",
    "build_thread",
    "count_nodes",
    "iter_nodes",
]
