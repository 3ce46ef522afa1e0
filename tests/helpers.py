from decimal import Decimal
from pathlib import Path

from alembic.config import Config
from sqlalchemy import text
from sqlalchemy.orm import Session

from hrapp.models.employee import Employee

BASE_DIR = Path(__file__).resolve().parents[1]

MANAGER = {"X-User-Role": "manager"}
STAFF = {"X-User-Role": "staff"}

# (first_name, last_name, email, phone_number, job_id, salary)
STANDARD_EMPLOYEES = [
    ("John", "Doe", "john.doe@anyco.com", "555-0101", "IT_PROG", "75000"),
    ("Jane", "Smith", "jane.smith@anyco.com", "555-0102", "HR_REP", "65000"),
    ("Bob", "Johnson", "bob.johnson@anyco.com", "555-0103", "SA_MAN", "85000"),
    ("Alice", "Brown", "alice.brown@anyco.com", "555-0104", "IT_PROG", "70000"),
    ("Charlie", "Wilson", "charlie.wilson@anyco.com", "555-0105", "HR_REP", "60000"),
]


def create_employee(
    db: Session,
    first_name: str = "Test",
    last_name: str = "User",
    email: str = "test.user@anyco.com",
    *,
    job_id: str = "IT_PROG",
    salary: Decimal | str | int = "50000",
    phone_number: str | None = None,
) -> Employee:
    e = Employee(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone_number=phone_number,
        job_id=job_id,
        salary=Decimal(str(salary)),
    )
    db.add(e)
    db.commit()
    db.refresh(e)
    return e


def seed_employees(db: Session) -> list[Employee]:
    return [
        create_employee(db, first, last, email, phone_number=phone, job_id=job, salary=salary)
        for first, last, email, phone, job, salary in STANDARD_EMPLOYEES
    ]


def salaries_by_email(db: Session) -> dict[str, Decimal]:
    rows = db.execute(text("SELECT email, salary FROM hr.employees")).all()
    return {email: salary for email, salary in rows}


def alembic_config(database_url: str) -> Config:
    cfg = Config(str(BASE_DIR / "alembic.ini"))
    cfg.set_main_option("script_location", str(BASE_DIR / "alembic"))
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    # Keep pytest's log capture in charge.
    cfg.attributes["configure_logger"] = False
    return cfg


def clear_employees(engine) -> None:
    with engine.begin() as conn:
        conn.execute(text("TRUNCATE hr.employees RESTART IDENTITY"))
