"""Application layer DI providers."""

from dishka import Scope, provide

from campus.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetThreadUseCase,
    ListCommentsUseCase,
)
from campus.application.usecase.report import (
    FileReportUseCase,
    ListReportsUseCase,
    ProcessReportUseCase,
)
from campus.domain.service import (
    CommentService,
    ModerationService,
    ReportService,
    UserService,
)
from campus.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_thread_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Report use cases
    @provide(scope=Scope.REQUEST)
    def get_file_report_use_case(
        self, report_service: ReportService
    ) -> FileReportUseCase:
        """Provide file report use case."""
        return FileReportUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_list_reports_use_case(
        self, report_service: ReportService
    ) -> ListReportsUseCase:
        """Provide list reports use case."""
        return ListReportsUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_process_report_use_case(
        self, moderation_service: ModerationService
    ) -> ProcessReportUseCase:
        """Provide process report use case."""
        return ProcessReportUseCase(moderation_service=moderation_service)
