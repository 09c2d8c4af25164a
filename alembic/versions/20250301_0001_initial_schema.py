"""Employee roster table.

Revision ID: 20250301_0001
Revises:
Create Date: 2025-03-01 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20250301_0001"
down_revision = None
branch_labels = None
depends_on = None


def _area_enum() -> sa.Enum:
    return sa.Enum("KASSE", "BISTRO", "LAGER", "WERKSTATT", name="employeearea")


def _employment_type_enum() -> sa.Enum:
    return sa.Enum("ANGESTELLTER", "AUSHILFE", name="employmenttype")


def upgrade() -> None:
    op.create_table(
        "employee",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("monthly_hours", sa.Integer(), nullable=False),
        sa.Column("area", _area_enum(), nullable=False, server_default="KASSE"),
        sa.Column("employment_type", _employment_type_enum(), nullable=False, server_default="ANGESTELLTER"),
        sa.Column("available_weekdays", sa.JSON(), nullable=False),
        sa.Column("weekend_availability", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("fixed_cashier_slots", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )
    op.create_index("ix_employee_id", "employee", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_employee_id", table_name="employee")
    op.drop_table("employee")

    bind = op.get_bind()
    _employment_type_enum().drop(bind, checkfirst=True)
    _area_enum().drop(bind, checkfirst=True)
