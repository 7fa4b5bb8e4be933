"""campus_discussions_schema

Create the schema for course discussions and moderation:
- Students (directory entries, display info and admin flag)
- Courses (course directory)
- Course comments (flat rows, threaded through parent_id)
- Course files (uploaded material records)
- Reports (polymorphic complaints against comments or files)

Revision ID: 3c1f0a7d9b42
Revises:
Create Date: 2026-10-17 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d9b42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE report_target_type AS ENUM ('comment', 'material');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE report_reason AS ENUM (
                'spam', 'inappropriate', 'harassment', 'hate_speech',
                'misinformation', 'copyright', 'outdated', 'duplicate',
                'quality', 'other'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE report_status AS ENUM ('pending', 'reviewed', 'dismissed');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # STUDENTS table
    # ========================================================================
    op.create_table(
        "students",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("student_id", sa.String(50), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_students_email", "students", ["email"])

    # ========================================================================
    # COURSES table
    # ========================================================================
    op.create_table(
        "courses",
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("code"),
    )

    # ========================================================================
    # COURSE_COMMENTS table
    # ========================================================================
    op.create_table(
        "course_comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("course_code", sa.String(20), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["course_code"], ["courses.code"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["students.id"], ondelete="CASCADE"),
        # Subtree deletes are issued explicitly so the row count is known
        sa.ForeignKeyConstraint(["parent_id"], ["course_comments.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(content) > 0", name="content_not_empty"),
    )
    op.create_index(
        "idx_course_comments_course_code", "course_comments", ["course_code"]
    )
    op.create_index("idx_course_comments_parent_id", "course_comments", ["parent_id"])
    op.create_index(
        "idx_course_comments_created_at", "course_comments", ["created_at"]
    )

    # ========================================================================
    # COURSE_FILES table
    # ========================================================================
    op.create_table(
        "course_files",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("course_code", sa.String(20), nullable=False),
        sa.Column("uploader_id", sa.UUID(), nullable=False),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("file_type", sa.String(100), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "uploaded_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["course_code"], ["courses.code"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["uploader_id"], ["students.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("file_size > 0", name="file_size_positive"),
    )
    op.create_index("idx_course_files_course_code", "course_files", ["course_code"])

    # ========================================================================
    # REPORTS table (no FK on target_id: reports outlive their content)
    # ========================================================================
    op.create_table(
        "reports",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column(
            "target_type",
            postgresql.ENUM(
                "comment", "material", name="report_target_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column(
            "reason",
            postgresql.ENUM(
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
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "reviewed",
                "dismissed",
                name="report_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["reporter_id"], ["students.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_reports_status_created_at", "reports", ["status", "created_at"]
    )
    op.create_index("idx_reports_target", "reports", ["target_type", "target_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("reports")
    op.drop_table("course_files")
    op.drop_table("course_comments")
    op.drop_table("courses")
    op.drop_table("students")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS report_status")
    op.execute("DROP TYPE IF EXISTS report_reason")
    op.execute("DROP TYPE IF EXISTS report_target_type")
