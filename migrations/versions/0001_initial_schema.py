"""Начальная схема: месяцы, привычки, дневные записи, отметки выполнения

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="Время создания записи",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="Время последнего обновления записи",
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "months",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("locked", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("month BETWEEN 1 AND 12", name=op.f("ck_months_month_range")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_months")),
        sa.UniqueConstraint("year", "month", name="uq_month_year_month"),
    )
    op.create_index(op.f("ix_months_id"), "months", ["id"], unique=False)

    op.create_table(
        "habits",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("month_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("is_scoring", sa.Boolean(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["month_id"], ["months.id"], name=op.f("fk_habits_month_id_months"), ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_habits")),
    )
    op.create_index(op.f("ix_habits_id"), "habits", ["id"], unique=False)
    op.create_index(op.f("ix_habits_month_id"), "habits", ["month_id"], unique=False)

    op.create_table(
        "daily_records",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("month_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("recorded", sa.Boolean(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=False),
        sa.Column("recorded_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("score BETWEEN 0 AND 100", name=op.f("ck_daily_records_score_range")),
        sa.ForeignKeyConstraint(
            ["month_id"], ["months.id"], name=op.f("fk_daily_records_month_id_months"), ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_daily_records")),
        sa.UniqueConstraint("month_id", "date", name="uq_daily_record_per_date"),
    )
    op.create_index(op.f("ix_daily_records_id"), "daily_records", ["id"], unique=False)
    op.create_index(op.f("ix_daily_records_month_id"), "daily_records", ["month_id"], unique=False)
    op.create_index(op.f("ix_daily_records_date"), "daily_records", ["date"], unique=False)

    op.create_table(
        "habit_completions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("daily_record_id", sa.Integer(), nullable=False),
        sa.Column("habit_id", sa.Integer(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("value", sa.Float(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["daily_record_id"],
            ["daily_records.id"],
            name=op.f("fk_habit_completions_daily_record_id_daily_records"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["habit_id"], ["habits.id"], name=op.f("fk_habit_completions_habit_id_habits"), ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_habit_completions")),
        sa.UniqueConstraint("daily_record_id", "habit_id", name="uq_habit_completion_per_record"),
    )
    op.create_index(op.f("ix_habit_completions_id"), "habit_completions", ["id"], unique=False)
    op.create_index(
        op.f("ix_habit_completions_daily_record_id"), "habit_completions", ["daily_record_id"], unique=False
    )
    op.create_index(op.f("ix_habit_completions_habit_id"), "habit_completions", ["habit_id"], unique=False)


def downgrade() -> None:
    op.drop_table("habit_completions")
    op.drop_table("daily_records")
    op.drop_table("habits")
    op.drop_table("months")
