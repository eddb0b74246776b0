"""organization hierarchy tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "organizations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "payrolls",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_payrolls_organization_id", "payrolls", ["organization_id"])

    op.create_table(
        "divisions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("budget_code", sa.String(100), nullable=False),
        sa.Column("payroll_id", sa.Uuid(), nullable=False),
        sa.Column("parent_division_id", sa.Uuid(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_divisions_payroll_id", "divisions", ["payroll_id"])
    op.create_index("ix_divisions_parent_division_id", "divisions", ["parent_division_id"])

    op.create_table(
        "jobs",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("job_title", sa.String(200), nullable=False),
        sa.Column("salary", sa.Float(), nullable=False),
        sa.Column("payroll_id", sa.Uuid(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_jobs_payroll_id", "jobs", ["payroll_id"])

    op.create_table(
        "banks",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_banks_organization_id", "banks", ["organization_id"])

    op.create_table(
        "employees",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("id_number", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(150), nullable=False),
        sa.Column("first_name", sa.String(150), nullable=False),
        sa.Column("address", sa.String(300), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("place_of_birth", sa.String(150), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("nationality", sa.String(100), nullable=False),
        sa.Column("marital_status", sa.String(50), nullable=False),
        sa.Column("gender", sa.String(50), nullable=False),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("termination_date", sa.Date(), nullable=True),
        sa.Column("classification", sa.String(100), nullable=False),
        sa.Column("job_id", sa.Uuid(), nullable=False),
        sa.Column("bank_id", sa.Uuid(), nullable=False),
        sa.Column("bank_account", sa.String(100), nullable=False),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("hours", sa.Integer(), nullable=False),
        sa.Column("division_id", sa.Uuid(), nullable=False),
        sa.Column("payroll_id", sa.Uuid(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_employees_last_name", "employees", ["last_name"])
    op.create_index("ix_employees_division_id", "employees", ["division_id"])
    op.create_index("ix_employees_payroll_id", "employees", ["payroll_id"])
    op.create_index("ix_employees_job_id", "employees", ["job_id"])
    op.create_index("ix_employees_bank_id", "employees", ["bank_id"])


def downgrade() -> None:
    op.drop_table("employees")
    op.drop_table("banks")
    op.drop_table("jobs")
    op.drop_table("divisions")
    op.drop_table("payrolls")
    op.drop_table("organizations")
