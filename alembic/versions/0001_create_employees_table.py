"""create employees table

Revision ID: 0001
Revises:
Create Date: 2025-09-02 10:12:40.118305
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

COLUMN_COMMENTS = {
    "employee_id": "Primary key - auto-generated employee ID",
    "first_name": "Employee first name",
    "last_name": "Employee last name",
    "email": "Employee email address - must be unique",
    "phone_number": "Employee phone number",
    "job_id": "Job identifier/code",
    "salary": "Employee salary in decimal format",
}


def upgrade() -> None:
    op.execute("CREATE SCHEMA IF NOT EXISTS hr")

    op.create_table(
        "employees",
        sa.Column("employee_id", sa.Integer(), primary_key=True, autoincrement=True,
                  comment=COLUMN_COMMENTS["employee_id"]),
        sa.Column("first_name", sa.String(50), nullable=False, comment=COLUMN_COMMENTS["first_name"]),
        sa.Column("last_name", sa.String(50), nullable=False, comment=COLUMN_COMMENTS["last_name"]),
        sa.Column("email", sa.String(100), nullable=False, unique=True, comment=COLUMN_COMMENTS["email"]),
        sa.Column("phone_number", sa.String(20), nullable=True, comment=COLUMN_COMMENTS["phone_number"]),
        sa.Column("job_id", sa.String(10), nullable=False, comment=COLUMN_COMMENTS["job_id"]),
        sa.Column("salary", sa.Numeric(8, 2), nullable=False, comment=COLUMN_COMMENTS["salary"]),
        sa.CheckConstraint("salary >= 0", name="employees_salary_check"),
        schema="hr",
        comment="Employee information table for HR Web Application",
    )

    op.create_index("idx_employees_email", "employees", ["email"], schema="hr")
    op.create_index("idx_employees_job_id", "employees", ["job_id"], schema="hr")
    op.create_index("idx_employees_name", "employees", ["last_name", "first_name"], schema="hr")


def downgrade() -> None:
    op.drop_index("idx_employees_name", table_name="employees", schema="hr")
    op.drop_index("idx_employees_job_id", table_name="employees", schema="hr")
    op.drop_index("idx_employees_email", table_name="employees", schema="hr")
    op.drop_table("employees", schema="hr")
    # Leave the schema if anything else was put in it.
    op.execute("DROP SCHEMA IF EXISTS hr RESTRICT")
