"""Domain layer DI providers."""

from dishka import Scope, provide

from campus.config import AuthSettings, ModerationSettings, ThreadSettings
from campus.domain.repository import (
    CommentRepository,
    CourseRepository,
    MaterialRepository,
    ReportRepository,
    TransactionManager,
    UserRepository,
)
from campus.domain.service import (
    CommentContent,
    CommentService,
    ContentRegistry,
    JWTService,
    MaterialContent,
    ModerationService,
    ReportService,
    UserService,
    build_content_registry,
)
from campus.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        course_repository: CourseRepository,
        thread_settings: ThreadSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            course_repository=course_repository,
            thread_settings=thread_settings,
        )

    @provide
    def get_content_registry(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
        material_repository: MaterialRepository,
    ) -> ContentRegistry:
        """Provide the report target dispatch table.

        Fails at resolution time if a target type has no handler.
        """
        return build_content_registry(
            CommentContent(
                comment_repository=comment_repository,
                comment_service=comment_service,
            ),
            MaterialContent(material_repository=material_repository),
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        user_service: UserService,
        contents: ContentRegistry,
        moderation_settings: ModerationSettings,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            user_service=user_service,
            contents=contents,
            moderation_settings=moderation_settings,
        )

    @provide
    def get_moderation_service(
        self,
        report_repository: ReportRepository,
        contents: ContentRegistry,
        transactions: TransactionManager,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            report_repository=report_repository,
            contents=contents,
            transactions=transactions,
        )
