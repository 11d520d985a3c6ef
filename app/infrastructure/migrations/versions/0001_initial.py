"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

take_stage = postgresql.ENUM("pre-interview", "interview", name="take_stage", create_type=False)
message_role = postgresql.ENUM("user", "assistant", name="message_role", create_type=False)


def upgrade():
    take_stage.create(op.get_bind(), checkfirst=True)
    message_role.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "users",
        sa.Column("id", sa.UUID(as_uuid=False), primary_key=True),
        sa.Column("external_id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_external_id", "users", ["external_id"], unique=True)

    op.create_table(
        "interviews",
        sa.Column("id", sa.UUID(as_uuid=False), primary_key=True),
        sa.Column("user_id", sa.UUID(as_uuid=False), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_interviews_user_id", "interviews", ["user_id"])

    op.create_table(
        "documents",
        sa.Column("id", sa.UUID(as_uuid=False), primary_key=True),
        sa.Column("interview_id", sa.UUID(as_uuid=False), sa.ForeignKey("interviews.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_documents_interview_id", "documents", ["interview_id"])

    op.create_table(
        "takes",
        sa.Column("id", sa.UUID(as_uuid=False), primary_key=True),
        sa.Column("interview_id", sa.UUID(as_uuid=False), sa.ForeignKey("interviews.id", ondelete="CASCADE"), nullable=False),
        sa.Column("stage", take_stage, nullable=False, server_default="pre-interview"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_takes_interview_id", "takes", ["interview_id"])

    op.create_table(
        "messages",
        sa.Column("id", sa.UUID(as_uuid=False), primary_key=True),
        sa.Column("take_id", sa.UUID(as_uuid=False), sa.ForeignKey("takes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("role", message_role, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("enabled_document_ids", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"),
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_messages_take_id", "messages", ["take_id"])


def downgrade():
    op.drop_table("messages")
    op.drop_table("takes")
    op.drop_table("documents")
    op.drop_table("interviews")
    op.drop_table("users")
    message_role.drop(op.get_bind(), checkfirst=True)
    take_stage.drop(op.get_bind(), checkfirst=True)
