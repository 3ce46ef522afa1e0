# salary_adjust.py
"""
Apply a percentage salary change to every employee from the command line.

    python scripts/salary_adjust.py 10          # show old and new salaries
    python scripts/salary_adjust.py -5 --bulk   # only report the row count
"""
import argparse
from decimal import Decimal

from hrapp.core.logging_config import setup_logging
from hrapp.crud import employees as crud
from hrapp.db.session import SessionLocal


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Adjust all positive salaries by a percentage.")
    parser.add_argument("percentage", type=Decimal, help="e.g. 10 for +10%%, -5 for -5%%")
    parser.add_argument(
        "--bulk",
        action="store_true",
        help="use hr.update_all_salaries_by_percentage (limited to +/-100%%, returns a count only)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(service_name="hrapp-salary-adjust")

    db = SessionLocal()
    try:
        if args.bulk:
            affected = crud.update_all_salaries(db, args.percentage)
            db.commit()
            print(f"Updated {affected} employee salaries by {args.percentage}%")
            return

        rows = crud.increment_salaries(db, args.percentage)
        db.commit()
        print(f"Updated {len(rows)} employees:")
        for r in rows:
            print(r["employee_id"], r["first_name"], r["last_name"], r["old_salary"], "->", r["new_salary"])
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
