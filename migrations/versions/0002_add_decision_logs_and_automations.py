"""add decision_logs and automations tables

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-12

Both tables are owned by a user id with no foreign key; visibility of
automations is decided by created_by / is_public at query time.
"""
from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    decision_type_enum = sa.Enum(
        "eliminate", "automate", "delegate", "simplify", name="decision_type_enum"
    )
    decision_type_enum.create(op.get_bind(), checkfirst=True)

    impact_level_enum = sa.Enum("low", "medium", "high", name="impact_level_enum")
    impact_level_enum.create(op.get_bind(), checkfirst=True)

    category_enum = sa.Enum(
        "process", "communication", "data", "development", "marketing",
        name="automation_category_enum",
    )
    category_enum.create(op.get_bind(), checkfirst=True)

    difficulty_enum = sa.Enum("easy", "medium", "hard", name="difficulty_level_enum")
    difficulty_enum.create(op.get_bind(), checkfirst=True)

    # --- decision_logs ---
    op.create_table(
        "decision_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("decision_type", sa.Enum(
            "eliminate", "automate", "delegate", "simplify",
            name="decision_type_enum", create_type=False,
        ), nullable=False),
        sa.Column("impact_level", sa.Enum(
            "low", "medium", "high", name="impact_level_enum", create_type=False,
        ), nullable=False),
        sa.Column("principle_applied", sa.String(128), nullable=True),
        sa.Column("time_saved_estimate", sa.Float(), nullable=False, server_default="0",
                  comment="Estimated hours saved"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_decision_logs_id", "decision_logs", ["id"])
    op.create_index("ix_decision_logs_user_id", "decision_logs", ["user_id"])

    # --- automations ---
    op.create_table(
        "automations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("created_by", sa.String(36), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.Enum(
            "process", "communication", "data", "development", "marketing",
            name="automation_category_enum", create_type=False,
        ), nullable=False),
        sa.Column("difficulty_level", sa.Enum(
            "easy", "medium", "hard", name="difficulty_level_enum", create_type=False,
        ), nullable=False),
        sa.Column("time_to_implement", sa.Float(), nullable=False, server_default="0"),
        sa.Column("hours_saved", sa.Float(), nullable=False, server_default="0"),
        sa.Column("tools_used", sa.Text(), nullable=True),
        sa.Column("steps_description", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_automations_id", "automations", ["id"])
    op.create_index("ix_automations_created_by", "automations", ["created_by"])
    op.create_index("ix_automations_is_public", "automations", ["is_public"])


def downgrade() -> None:
    op.drop_table("automations")
    op.drop_table("decision_logs")
    sa.Enum(name="difficulty_level_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="automation_category_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="impact_level_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="decision_type_enum").drop(op.get_bind(), checkfirst=True)
