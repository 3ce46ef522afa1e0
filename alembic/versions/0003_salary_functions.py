"""create salary and read functions

Revision ID: 0003
Revises: 0002
Create Date: 2025-09-02 11:04:27.902114
"""
from typing import Sequence, Union

from alembic import op

revision: str = "0003"
down_revision: Union[str, None] = "0002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# old_salary is recovered from the new value inside the same UPDATE ... RETURNING,
# so it agrees with the stored salary only up to the two ROUND calls.
INCREMENT_SALARY_BY_PERCENTAGE = """
CREATE OR REPLACE FUNCTION hr.increment_salary_by_percentage(
    percentage_change NUMERIC
)
RETURNS TABLE(
    employee_id INTEGER,
    first_name VARCHAR(50),
    last_name VARCHAR(50),
    email VARCHAR(100),
    phone_number VARCHAR(20),
    job_id VARCHAR(10),
    old_salary NUMERIC(8,2),
    new_salary NUMERIC(8,2)
)
LANGUAGE plpgsql
AS $$
BEGIN
    IF percentage_change IS NULL THEN
        RAISE EXCEPTION 'Percentage change cannot be NULL';
    END IF;

    RAISE NOTICE 'Applying salary change of % to all employees', percentage_change;

    RETURN QUERY
    WITH salary_updates AS (
        UPDATE hr.employees
        SET salary = ROUND(salary * (1 + percentage_change / 100.0), 2)
        WHERE salary > 0
        RETURNING
            employees.employee_id,
            employees.first_name,
            employees.last_name,
            employees.email,
            employees.phone_number,
            employees.job_id,
            ROUND(salary / (1 + percentage_change / 100.0), 2) AS old_salary,
            employees.salary AS new_salary
    )
    SELECT * FROM salary_updates
    ORDER BY salary_updates.employee_id;
END;
$$
"""

UPDATE_ALL_SALARIES_BY_PERCENTAGE = """
CREATE OR REPLACE FUNCTION hr.update_all_salaries_by_percentage(
    percentage_change NUMERIC
)
RETURNS INTEGER
LANGUAGE plpgsql
AS $$
DECLARE
    affected_rows INTEGER;
BEGIN
    IF percentage_change IS NULL THEN
        RAISE EXCEPTION 'Percentage change cannot be NULL';
    END IF;

    IF ABS(percentage_change) > 100 THEN
        RAISE EXCEPTION 'Percentage change cannot exceed 100%% (was: %)', percentage_change;
    END IF;

    UPDATE hr.employees
    SET salary = ROUND(salary * (1 + percentage_change / 100.0), 2)
    WHERE salary > 0;

    GET DIAGNOSTICS affected_rows = ROW_COUNT;

    RAISE NOTICE 'Updated % employee salaries by % percent', affected_rows, percentage_change;

    RETURN affected_rows;
END;
$$
"""

GET_ALL_EMPLOYEES = """
CREATE OR REPLACE FUNCTION hr.get_all_employees()
RETURNS TABLE(
    employee_id INTEGER,
    first_name VARCHAR(50),
    last_name VARCHAR(50),
    email VARCHAR(100),
    phone_number VARCHAR(20),
    job_id VARCHAR(10),
    salary NUMERIC(8,2)
)
LANGUAGE sql
STABLE
AS $$
    SELECT
        e.employee_id,
        e.first_name,
        e.last_name,
        e.email,
        e.phone_number,
        e.job_id,
        e.salary
    FROM hr.employees e
    ORDER BY e.employee_id;
$$
"""


def upgrade() -> None:
    op.execute(INCREMENT_SALARY_BY_PERCENTAGE)
    op.execute(UPDATE_ALL_SALARIES_BY_PERCENTAGE)
    op.execute(GET_ALL_EMPLOYEES)

    op.execute(
        "COMMENT ON FUNCTION hr.increment_salary_by_percentage(NUMERIC) IS "
        "'Increments all employee salaries by the specified percentage and returns "
        "the updated records with old and new salary values'"
    )
    op.execute(
        "COMMENT ON FUNCTION hr.update_all_salaries_by_percentage(NUMERIC) IS "
        "'Updates all employee salaries by the specified percentage and returns "
        "the number of affected rows'"
    )
    op.execute("COMMENT ON FUNCTION hr.get_all_employees() IS 'Returns all employees ordered by employee_id'")


def downgrade() -> None:
    op.execute("DROP FUNCTION IF EXISTS hr.get_all_employees()")
    op.execute("DROP FUNCTION IF EXISTS hr.update_all_salaries_by_percentage(NUMERIC)")
    op.execute("DROP FUNCTION IF EXISTS hr.increment_salary_by_percentage(NUMERIC)")
