"""Initial schema for ExpressFix

Revision ID: 20260101_000000
Revises: None
Create Date: 2026-01-01 00:00:00.000000

Creates the six application tables:
- profiles
- design_uploads
- ai_analysis_results (cascade-deleted with their upload)
- brand_guidelines
- export_history (upload reference set to NULL when the upload is deleted)
- notifications

JSON columns use the generic ``sa.JSON`` type so the migration also runs on
SQLite.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260101_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "profiles",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("full_name", sa.String(256), nullable=True),
        sa.Column("avatar_url", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "design_uploads",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("file_name", sa.String(512), nullable=False),
        sa.Column("file_url", sa.String(), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("file_type", sa.String(128), nullable=False),
        sa.Column("upload_type", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_design_uploads_user_id", "user_id"),
        sa.Index("ix_design_uploads_upload_type", "upload_type"),
        sa.Index("ix_design_uploads_created_at", "created_at"),
    )

    op.create_table(
        "ai_analysis_results",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("design_upload_id", sa.String(64), nullable=False),
        sa.Column("analysis_type", sa.String(32), nullable=False),
        sa.Column("overall_score", sa.Integer(), nullable=False),
        sa.Column("results", sa.JSON(), nullable=False),
        sa.Column("suggestions", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["design_upload_id"], ["design_uploads.id"], ondelete="CASCADE"),
        sa.Index("ix_ai_analysis_results_design_upload_id", "design_upload_id"),
        sa.Index("ix_ai_analysis_results_analysis_type", "analysis_type"),
        sa.Index("ix_ai_analysis_results_created_at", "created_at"),
    )

    op.create_table(
        "brand_guidelines",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("colors", sa.JSON(), nullable=False),
        sa.Column("typography", sa.JSON(), nullable=False),
        sa.Column("logo_specs", sa.JSON(), nullable=False),
        sa.Column("spacing", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_brand_guidelines_user_id", "user_id"),
        sa.Index("ix_brand_guidelines_updated_at", "updated_at"),
    )

    op.create_table(
        "export_history",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("design_upload_id", sa.String(64), nullable=True),
        sa.Column("export_format", sa.String(8), nullable=False),
        sa.Column("export_quality", sa.String(16), nullable=False),
        sa.Column("file_url", sa.String(), nullable=True),
        sa.Column("width", sa.Integer(), nullable=True),
        sa.Column("height", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["design_upload_id"], ["design_uploads.id"], ondelete="SET NULL"),
        sa.Index("ix_export_history_user_id", "user_id"),
        sa.Index("ix_export_history_created_at", "created_at"),
    )

    op.create_table(
        "notifications",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("message", sa.String(), nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("unread", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_notifications_user_id", "user_id"),
        sa.Index("ix_notifications_unread", "unread"),
        sa.Index("ix_notifications_created_at", "created_at"),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("notifications")
    op.drop_table("export_history")
    op.drop_table("brand_guidelines")
    op.drop_table("ai_analysis_results")
    op.drop_table("design_uploads")
    op.drop_table("profiles")
