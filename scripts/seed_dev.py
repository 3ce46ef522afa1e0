# seed_dev.py
"""
Bring a development database up to date and show what is in it.

Runs every Alembic revision (schema, sample employees, salary functions,
constraints and the summary view) and prints the resulting employee list.
"""
from pathlib import Path

from alembic import command
from alembic.config import Config

from hrapp.core.logging_config import setup_logging
from hrapp.crud import employees as crud
from hrapp.db.session import SessionLocal

BASE_DIR = Path(__file__).resolve().parents[1]


def main():
    setup_logging(service_name="hrapp-seed")
    cfg = Config(str(BASE_DIR / "alembic.ini"))
    # Logging is already configured above.
    cfg.attributes["configure_logger"] = False
    command.upgrade(cfg, "head")

    db = SessionLocal()
    try:
        employees = crud.get_employees(db)
        print(f"{len(employees)} employees:")
        for e in employees:
            print(e.employee_id, e.full_name, e.email, e.job_id, e.salary)
    finally:
        db.close()


if __name__ == "__main__":
    main()
