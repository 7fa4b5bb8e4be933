"""SQLAlchemy table definitions for the campus discussion service.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# STUDENTS TABLE (directory entries owned by the auth service)
# ============================================================================
students_table = Table(
    "students",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("full_name", String(255), nullable=True),
    Column("email", String(255), nullable=True),
    Column("student_id", String(50), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_students_email", students_table.c.email)

# ============================================================================
# COURSES TABLE
# ============================================================================
courses_table = Table(
    "courses",
    metadata,
    Column("code", String(20), primary_key=True),
    Column("name", String(255), nullable=False),
)

# ============================================================================
# COURSE COMMENTS TABLE (flat; threads derived from parent_id)
# ============================================================================
course_comments_table = Table(
    "course_comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "course_code",
        String(20),
        ForeignKey("courses.code", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    # No ON DELETE CASCADE: subtree deletes are explicit so they can be counted
    Column("parent_id", UUID, ForeignKey("course_comments.id"), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(content) > 0", name="content_not_empty"),
)

Index("idx_course_comments_course_code", course_comments_table.c.course_code)
Index("idx_course_comments_parent_id", course_comments_table.c.parent_id)
Index("idx_course_comments_created_at", course_comments_table.c.created_at)

# ============================================================================
# COURSE FILES TABLE (uploaded materials)
# ============================================================================
course_files_table = Table(
    "course_files",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "course_code",
        String(20),
        ForeignKey("courses.code", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "uploader_id",
        UUID,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("file_name", String(255), nullable=False),
    Column("file_type", String(100), nullable=False),
    Column("file_size", BigInteger, nullable=False),
    Column("file_url", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "uploaded_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("file_size > 0", name="file_size_positive"),
)

Index("idx_course_files_course_code", course_files_table.c.course_code)

# ============================================================================
# REPORTS TABLE (polymorphic target, no FK so reports outlive content)
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "target_type",
        Enum("comment", "material", name="report_target_type", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID, nullable=False),
    Column(
        "reason",
        Enum(
            "spam",
            "inappropriate",
            "harassment",
            "hate_speech",
            "misinformation",
            "copyright",
            "outdated",
            "duplicate",
            "quality",
            "other",
            name="report_reason",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("details", Text, nullable=True),
    Column(
        "reporter_id",
        UUID,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "status",
        Enum(
            "pending", "reviewed", "dismissed", name="report_status", create_type=False
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_reports_status_created_at", reports_table.c.status, reports_table.c.created_at)
Index("idx_reports_target", reports_table.c.target_type, reports_table.c.target_id)
