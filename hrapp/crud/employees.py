"""
Data access for hr.employees.

Reads and bulk salary changes go through the stored functions created by
migration 0003; single-row writes use the ORM. Database errors are logged
and propagate unchanged to the caller, whose transaction then rolls back.
"""

import logging
from decimal import Decimal
from typing import Any

from sqlalchemy import func, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hrapp.models.employee import Employee
from hrapp.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)

LEGACY_RAISE_FACTOR = Decimal("1.1")


def get_employees(db: Session) -> list[Employee]:
    """All employees ordered by employee_id, via hr.get_all_employees()."""
    stmt = (
        select(Employee)
        .from_statement(text("SELECT * FROM hr.get_all_employees()"))
        .execution_options(populate_existing=True)
    )
    employees = list(db.execute(stmt).scalars().all())
    logger.info("Retrieved %d employees from database", len(employees))
    return employees


def get_employee(db: Session, employee_id: int) -> Employee | None:
    employee = db.get(Employee, employee_id, populate_existing=True)
    if employee is None:
        logger.info("No employee found with ID: %s", employee_id)
    return employee


def get_employees_by_first_name(db: Session, prefix: str) -> list[Employee]:
    """Case-insensitive first-name prefix search."""
    employees = (
        db.query(Employee)
        .filter(Employee.first_name.ilike(f"{prefix}%"))
        .order_by(Employee.first_name.asc(), Employee.last_name.asc())
        .all()
    )
    logger.info("Retrieved %d employees with first name starting with: %s", len(employees), prefix)
    return employees


def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    employee = Employee(**data.model_dump())
    db.add(employee)
    try:
        db.flush()
    except SQLAlchemyError:
        logger.error("Failed to create employee: %s", data.email, exc_info=True)
        raise
    db.refresh(employee)
    logger.info("Created employee with ID: %s", employee.employee_id)
    return employee


def update_employee(db: Session, employee_id: int, data: EmployeeUpdate) -> Employee | None:
    employee = db.get(Employee, employee_id)
    if employee is None:
        logger.warning("No employee found with ID: %s for update", employee_id)
        return None

    for field, value in data.model_dump().items():
        setattr(employee, field, value)
    try:
        db.flush()
    except SQLAlchemyError:
        logger.error("Failed to update employee with ID: %s", employee_id, exc_info=True)
        raise
    # Pick up updated_at as set by the trigger.
    db.refresh(employee)
    logger.info("Updated employee with ID: %s", employee_id)
    return employee


def raise_employee_salary(db: Session, employee_id: int) -> Employee | None:
    """Give a single employee a 10% raise, rounded to cents."""
    stmt = (
        update(Employee)
        .where(Employee.employee_id == employee_id)
        .values(salary=func.round(Employee.salary * LEGACY_RAISE_FACTOR, 2))
        .returning(Employee)
        .execution_options(populate_existing=True, synchronize_session=False)
    )
    try:
        employee = db.execute(stmt).scalar_one_or_none()
    except SQLAlchemyError:
        logger.error("Failed to raise salary for employee with ID: %s", employee_id, exc_info=True)
        raise
    if employee is None:
        logger.warning("No employee found with ID: %s for update", employee_id)
        return None
    logger.info("Updated employee with ID: %s, new salary: %s", employee_id, employee.salary)
    return employee


def delete_employee(db: Session, employee_id: int) -> bool:
    employee = db.get(Employee, employee_id)
    if employee is None:
        logger.warning("No employee found with ID: %s for deletion", employee_id)
        return False
    db.delete(employee)
    db.flush()
    logger.info("Deleted employee with ID: %s", employee_id)
    return True


def increment_salaries(db: Session, percentage: Decimal | int | None) -> list[dict[str, Any]]:
    """
    Apply a percentage change to every positive salary via
    hr.increment_salary_by_percentage().

    Returns one mapping per affected employee with old_salary and new_salary,
    ordered by employee_id. A null percentage is passed through so the
    function's own guard rejects it.
    """
    try:
        result = db.execute(
            text("SELECT * FROM hr.increment_salary_by_percentage(CAST(:pct AS NUMERIC))"),
            {"pct": percentage},
        )
        rows = [dict(row) for row in result.mappings().all()]
    except SQLAlchemyError:
        logger.error("Salary increment of %s%% failed", percentage, exc_info=True)
        raise
    # Loaded Employee objects now hold stale salaries.
    db.expire_all()
    logger.info("Applied %s%% salary increment to %d employees", percentage, len(rows))
    return rows


def update_all_salaries(db: Session, percentage: Decimal | int | None) -> int:
    """
    Same adjustment as increment_salaries() through
    hr.update_all_salaries_by_percentage(), which also rejects changes beyond
    +/-100%. Returns the number of rows updated.
    """
    try:
        affected = db.execute(
            text("SELECT hr.update_all_salaries_by_percentage(CAST(:pct AS NUMERIC))"),
            {"pct": percentage},
        ).scalar_one()
    except SQLAlchemyError:
        logger.error("Bulk salary update of %s%% failed", percentage, exc_info=True)
        raise
    db.expire_all()
    logger.info("Updated %d employee salaries by %s percent", affected, percentage)
    return affected


def get_job_summary(db: Session) -> list[dict[str, Any]]:
    rows = db.execute(text("SELECT * FROM hr.employee_summary")).mappings().all()
    return [dict(row) for row in rows]


def is_database_healthy(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database health check failed", exc_info=True)
        return False
    return True


def get_database_info(db: Session) -> dict[str, Any]:
    """Name and server version of the connected database."""
    row = db.execute(
        text("SELECT current_database() AS database, current_setting('server_version') AS server_version")
    ).mappings().one()
    return dict(row)
