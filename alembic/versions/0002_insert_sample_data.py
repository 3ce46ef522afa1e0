"""insert sample employee data

Revision ID: 0002
Revises: 0001
Create Date: 2025-09-02 10:20:03.551920
"""
from decimal import Decimal
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0002"
down_revision: Union[str, None] = "0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

employees = sa.table(
    "employees",
    sa.column("first_name", sa.String),
    sa.column("last_name", sa.String),
    sa.column("email", sa.String),
    sa.column("phone_number", sa.String),
    sa.column("job_id", sa.String),
    sa.column("salary", sa.Numeric(8, 2)),
    schema="hr",
)

SAMPLE_EMPLOYEES = [
    ("John", "Doe", "john.doe@anyco.com", "555-0101", "IT_PROG", "75000.00"),
    ("Jane", "Smith", "jane.smith@anyco.com", "555-0102", "HR_REP", "65000.00"),
    ("Bob", "Johnson", "bob.johnson@anyco.com", "555-0103", "SA_MAN", "85000.00"),
    ("Alice", "Williams", "alice.williams@anyco.com", "555-0104", "IT_PROG", "72000.00"),
    ("Charlie", "Brown", "charlie.brown@anyco.com", "555-0105", "HR_REP", "68000.00"),
    ("Diana", "Davis", "diana.davis@anyco.com", "555-0106", "SA_REP", "55000.00"),
    ("Edward", "Miller", "edward.miller@anyco.com", "555-0107", "IT_PROG", "78000.00"),
    ("Fiona", "Wilson", "fiona.wilson@anyco.com", "555-0108", "HR_MAN", "95000.00"),
    ("George", "Moore", "george.moore@anyco.com", "555-0109", "SA_MAN", "88000.00"),
    ("Helen", "Taylor", "helen.taylor@anyco.com", "555-0110", "IT_PROG", "74000.00"),
    ("Ian", "Anderson", "ian.anderson@anyco.com", "555-0111", "SA_REP", "58000.00"),
    ("Julia", "Thomas", "julia.thomas@anyco.com", "555-0112", "HR_REP", "66000.00"),
    ("Kevin", "Jackson", "kevin.jackson@anyco.com", "555-0113", "IT_PROG", "76000.00"),
    ("Linda", "White", "linda.white@anyco.com", "555-0114", "SA_MAN", "90000.00"),
    ("Michael", "Harris", "michael.harris@anyco.com", "555-0115", "HR_REP", "67000.00"),
]


def upgrade() -> None:
    op.bulk_insert(
        employees,
        [
            {
                "first_name": first,
                "last_name": last,
                "email": email,
                "phone_number": phone,
                "job_id": job,
                "salary": Decimal(salary),
            }
            for first, last, email, phone, job, salary in SAMPLE_EMPLOYEES
        ],
    )


def downgrade() -> None:
    op.execute(
        employees.delete().where(employees.c.email.in_([row[2] for row in SAMPLE_EMPLOYEES]))
    )
