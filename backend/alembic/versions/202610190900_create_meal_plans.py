"""create meal plans and plan action logs"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "202610190900"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONB = sa.JSON().with_variant(sa.dialects.postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "meal_plans",
        sa.Column("id", sa.dialects.postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("subject_id", sa.dialects.postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("subject_type", sa.String(length=20), nullable=False, server_default="kid"),
        sa.Column("created_by", sa.dialects.postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("plan_data", JSONB, nullable=False),
        sa.Column("preferences", JSONB, nullable=False),
        sa.Column("source", sa.String(length=20), nullable=False, server_default="ai"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_meal_plans_subject_id", "meal_plans", ["subject_id"])
    op.create_index(
        "uq_meal_plans_active_subject",
        "meal_plans",
        ["subject_id"],
        unique=True,
        postgresql_where=sa.text("is_active"),
    )

    op.create_table(
        "plan_action_logs",
        sa.Column("id", sa.dialects.postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("subject_id", sa.dialects.postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("plan_id", sa.dialects.postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("action_type", sa.String(length=50), nullable=False),
        sa.Column("action_payload", JSONB, nullable=True),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_plan_action_logs_subject_id", "plan_action_logs", ["subject_id"])


def downgrade() -> None:
    op.drop_index("ix_plan_action_logs_subject_id", table_name="plan_action_logs")
    op.drop_table("plan_action_logs")
    op.drop_index("uq_meal_plans_active_subject", table_name="meal_plans")
    op.drop_index("ix_meal_plans_subject_id", table_name="meal_plans")
    op.drop_table("meal_plans")
