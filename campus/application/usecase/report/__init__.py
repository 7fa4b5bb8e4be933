"""Report use cases."""

from .common import ReportItem, ReportListItem, TargetInfo, UserInfo
from .file_report import FileReportRequest, FileReportUseCase
from .list_reports import ListReportsRequest, ListReportsResponse, ListReportsUseCase
from .process_report import ProcessReportRequest, ProcessReportUseCase

__all__ = [
    "FileReportRequest",
    "FileReportUseCase",
    "ListReportsRequest",
    "ListReportsResponse",
    "ListReportsUseCase",
    "ProcessReportRequest",
    "ProcessReportUseCase",
    "ReportItem",
    "ReportListItem",
    "TargetInfo",
    "UserInfo",
]
