"""
Tests for the read and single-row write helpers in hrapp.crud.employees.
"""

from decimal import Decimal

from sqlalchemy import text

from hrapp.crud import employees as crud
from hrapp.schemas.employee import EmployeeCreate, EmployeeUpdate
from tests.helpers import create_employee, seed_employees


def test_get_employees_empty(db_session):
    assert crud.get_employees(db_session) == []


def test_get_employees_ordered_by_id(db_session):
    # Insert out of alphabetical order to make sure ordering is by id
    seeded = seed_employees(db_session)

    employees = crud.get_employees(db_session)

    assert [e.employee_id for e in employees] == [e.employee_id for e in seeded]
    assert [e.employee_id for e in employees] == sorted(e.employee_id for e in employees)
    assert employees[0].first_name == "John"
    assert employees[0].salary == Decimal("75000.00")


def test_get_employees_is_read_only(db_session):
    seed_employees(db_session)

    def snapshot():
        rows = db_session.execute(text("SELECT * FROM hr.get_all_employees()")).all()
        return [tuple(r) for r in rows]

    first = snapshot()
    second = snapshot()
    assert first == second
    assert len(first) == 5


def test_get_employee(db_session):
    emp = create_employee(db_session, "Ada", "Lovelace", "ada@anyco.com")

    found = crud.get_employee(db_session, emp.employee_id)

    assert found is not None
    assert found.email == "ada@anyco.com"
    assert crud.get_employee(db_session, emp.employee_id + 1000) is None


def test_get_employees_by_first_name_prefix(db_session):
    seed_employees(db_session)
    create_employee(db_session, "Johanna", "Adams", "johanna.adams@anyco.com")

    matches = crud.get_employees_by_first_name(db_session, "jo")

    assert [e.first_name for e in matches] == ["Johanna", "John"]
    assert crud.get_employees_by_first_name(db_session, "Zed") == []


def test_create_employee(db_session):
    data = EmployeeCreate(
        first_name="Grace",
        last_name="Hopper",
        email="grace.hopper@anyco.com",
        phone_number="555-0200",
        job_id="AD_VP",
        salary=Decimal("120000.50"),
    )

    emp = crud.create_employee(db_session, data)

    assert emp.employee_id > 0
    assert emp.salary == Decimal("120000.50")
    assert emp.created_at is not None


def test_update_employee(db_session):
    emp = create_employee(db_session, "Old", "Name", "old.name@anyco.com")
    data = EmployeeUpdate(
        first_name="New",
        last_name="Name",
        email="new.name@anyco.com",
        phone_number=None,
        job_id="FI_MGR",
        salary=Decimal("61000"),
    )

    updated = crud.update_employee(db_session, emp.employee_id, data)

    assert updated is not None
    assert updated.first_name == "New"
    assert updated.email == "new.name@anyco.com"
    assert updated.job_id == "FI_MGR"
    assert updated.updated_at > updated.created_at


def test_update_missing_employee(db_session):
    data = EmployeeUpdate(
        first_name="No", last_name="One", email="no.one@anyco.com", job_id="IT_PROG", salary=Decimal("1")
    )
    assert crud.update_employee(db_session, 999999, data) is None


def test_raise_employee_salary(db_session):
    emp = create_employee(db_session, salary="70000")
    other = create_employee(db_session, "Other", "Person", "other@anyco.com", salary="50000")

    raised = crud.raise_employee_salary(db_session, emp.employee_id)

    assert raised.salary == Decimal("77000.00")
    db_session.refresh(other)
    assert other.salary == Decimal("50000.00")


def test_raise_employee_salary_rounds_to_cents(db_session):
    emp = create_employee(db_session, salary="333.33")

    raised = crud.raise_employee_salary(db_session, emp.employee_id)

    assert raised.salary == Decimal("366.66")


def test_raise_missing_employee(db_session):
    assert crud.raise_employee_salary(db_session, 999999) is None


def test_delete_employee(db_session):
    emp = create_employee(db_session)

    assert crud.delete_employee(db_session, emp.employee_id) is True
    assert crud.get_employee(db_session, emp.employee_id) is None
    assert crud.delete_employee(db_session, emp.employee_id) is False


def test_job_summary(db_session):
    seed_employees(db_session)

    summary = {row["job_id"]: row for row in crud.get_job_summary(db_session)}

    assert list(summary) == ["HR_REP", "IT_PROG", "SA_MAN"]
    assert summary["IT_PROG"]["employee_count"] == 2
    assert summary["IT_PROG"]["average_salary"] == Decimal("72500")
    assert summary["IT_PROG"]["min_salary"] == Decimal("70000.00")
    assert summary["IT_PROG"]["max_salary"] == Decimal("75000.00")
    assert summary["HR_REP"]["total_salary"] == Decimal("125000.00")


def test_database_healthy(db_session):
    assert crud.is_database_healthy(db_session) is True


def test_database_info(db_session):
    info = crud.get_database_info(db_session)

    assert set(info) == {"database", "server_version"}
    assert info["database"] == db_session.execute(text("SELECT current_database()")).scalar_one()
