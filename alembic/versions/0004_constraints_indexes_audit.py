"""add constraints, indexes, audit timestamps and summary view

Revision ID: 0004
Revises: 0003
Create Date: 2025-09-03 09:41:55.630271
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0004"
down_revision: Union[str, None] = "0003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JOB_IDS = (
    "IT_PROG", "HR_REP", "HR_MAN", "SA_REP", "SA_MAN",
    "FI_ACCOUNT", "FI_MGR", "AD_ASST", "AD_VP", "AD_PRES",
)

CHECK_CONSTRAINTS = {
    "chk_employees_first_name_not_empty": "LENGTH(TRIM(first_name)) > 0",
    "chk_employees_last_name_not_empty": "LENGTH(TRIM(last_name)) > 0",
    "chk_employees_email_format": r"email ~* '^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$'",
    "chk_employees_salary_reasonable": "salary BETWEEN 0 AND 1000000",
    "chk_employees_job_id_valid": "job_id IN (" + ", ".join(f"'{j}'" for j in JOB_IDS) + ")",
}

# clock_timestamp() rather than CURRENT_TIMESTAMP so an update made in the
# same transaction as the insert still moves updated_at forward.
UPDATE_UPDATED_AT_FUNCTION = """
CREATE OR REPLACE FUNCTION hr.update_updated_at_column()
RETURNS TRIGGER AS $$
BEGIN
    NEW.updated_at = clock_timestamp();
    RETURN NEW;
END;
$$ LANGUAGE plpgsql
"""

EMPLOYEE_SUMMARY_VIEW = """
CREATE OR REPLACE VIEW hr.employee_summary AS
SELECT
    job_id,
    COUNT(*) AS employee_count,
    AVG(salary) AS average_salary,
    MIN(salary) AS min_salary,
    MAX(salary) AS max_salary,
    SUM(salary) AS total_salary
FROM hr.employees
GROUP BY job_id
ORDER BY job_id
"""


def upgrade() -> None:
    for name, condition in CHECK_CONSTRAINTS.items():
        op.create_check_constraint(name, "employees", condition, schema="hr")

    op.execute("CREATE INDEX IF NOT EXISTS idx_employees_salary ON hr.employees (salary)")
    op.execute("CREATE INDEX IF NOT EXISTS idx_employees_salary_desc ON hr.employees (salary DESC)")
    op.execute("CREATE INDEX IF NOT EXISTS idx_employees_full_name ON hr.employees (first_name, last_name)")
    op.execute(
        "CREATE INDEX IF NOT EXISTS idx_employees_high_salary ON hr.employees (salary) "
        "WHERE salary > 80000"
    )

    op.add_column(
        "employees",
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=True,
            server_default=sa.text("CURRENT_TIMESTAMP"),
            comment="Timestamp when the employee record was created",
        ),
        schema="hr",
    )
    op.add_column(
        "employees",
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            server_default=sa.text("CURRENT_TIMESTAMP"),
            comment="Timestamp when the employee record was last updated",
        ),
        schema="hr",
    )

    op.execute(UPDATE_UPDATED_AT_FUNCTION)
    op.execute(
        "CREATE TRIGGER tr_employees_updated_at "
        "BEFORE UPDATE ON hr.employees "
        "FOR EACH ROW EXECUTE FUNCTION hr.update_updated_at_column()"
    )

    # Rows that predate the audit columns (none when the columns carry a default)
    op.execute(
        "UPDATE hr.employees "
        "SET created_at = CURRENT_TIMESTAMP - INTERVAL '1 day', "
        "updated_at = CURRENT_TIMESTAMP - INTERVAL '1 day' "
        "WHERE created_at IS NULL"
    )

    op.execute(EMPLOYEE_SUMMARY_VIEW)
    op.execute(
        "COMMENT ON VIEW hr.employee_summary IS "
        "'Summary statistics of employees grouped by job_id'"
    )


def downgrade() -> None:
    op.execute("DROP VIEW IF EXISTS hr.employee_summary")
    op.execute("DROP TRIGGER IF EXISTS tr_employees_updated_at ON hr.employees")
    op.execute("DROP FUNCTION IF EXISTS hr.update_updated_at_column()")

    op.drop_column("employees", "updated_at", schema="hr")
    op.drop_column("employees", "created_at", schema="hr")

    op.execute("DROP INDEX IF EXISTS hr.idx_employees_high_salary")
    op.execute("DROP INDEX IF EXISTS hr.idx_employees_full_name")
    op.execute("DROP INDEX IF EXISTS hr.idx_employees_salary_desc")
    op.execute("DROP INDEX IF EXISTS hr.idx_employees_salary")

    for name in reversed(list(CHECK_CONSTRAINTS)):
        op.drop_constraint(name, "employees", schema="hr", type_="check")
