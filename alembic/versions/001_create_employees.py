"""Initial schema: employees table.

Revision ID: 001_employees
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_employees"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # name/email uniqueness is checked by the service, not constrained here
    op.create_table(
        "employees",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("name_key", sa.String(300), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("email_key", sa.String(300), nullable=False),
        sa.Column("phone", sa.String(15), nullable=True),
        sa.Column("salary", sa.Numeric(18, 2), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_employees_name_key", "employees", ["name_key"])
    op.create_index("ix_employees_email_key", "employees", ["email_key"])


def downgrade() -> None:
    op.drop_index("ix_employees_email_key", table_name="employees")
    op.drop_index("ix_employees_name_key", table_name="employees")
    op.drop_table("employees")
