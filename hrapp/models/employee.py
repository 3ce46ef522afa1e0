from datetime import datetime
from decimal import Decimal

import sqlalchemy as sa
from sqlalchemy import CheckConstraint, DateTime, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from hrapp.db.base import Base

JOB_IDS = (
    "IT_PROG",
    "HR_REP",
    "HR_MAN",
    "SA_REP",
    "SA_MAN",
    "FI_ACCOUNT",
    "FI_MGR",
    "AD_ASST",
    "AD_VP",
    "AD_PRES",
)

EMAIL_PATTERN = r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"

MAX_SALARY = Decimal("1000000")


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="employees_salary_check"),
        CheckConstraint("LENGTH(TRIM(first_name)) > 0", name="chk_employees_first_name_not_empty"),
        CheckConstraint("LENGTH(TRIM(last_name)) > 0", name="chk_employees_last_name_not_empty"),
        CheckConstraint(f"email ~* '{EMAIL_PATTERN}'", name="chk_employees_email_format"),
        CheckConstraint("salary BETWEEN 0 AND 1000000", name="chk_employees_salary_reasonable"),
        CheckConstraint(
            "job_id IN (" + ", ".join(f"'{j}'" for j in JOB_IDS) + ")",
            name="chk_employees_job_id_valid",
        ),
        Index("idx_employees_email", "email"),
        Index("idx_employees_job_id", "job_id"),
        Index("idx_employees_name", "last_name", "first_name"),
    )

    employee_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    job_id: Mapped[str] = mapped_column(String(10), nullable=False)
    salary: Mapped[Decimal] = mapped_column(Numeric(8, 2), nullable=False)

    # Maintained by the tr_employees_updated_at trigger, never written by the app.
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True
    )

    @property
    def full_name(self) -> str | None:
        if self.first_name is None and self.last_name is None:
            return None
        if self.first_name is None:
            return self.last_name
        if self.last_name is None:
            return self.first_name
        return f"{self.first_name} {self.last_name}"

    def is_valid(self) -> bool:
        """True when the record carries an id and non-blank name and email."""
        return (
            self.employee_id is not None
            and self.employee_id > 0
            and bool(self.first_name and self.first_name.strip())
            and bool(self.last_name and self.last_name.strip())
            and bool(self.email and self.email.strip())
        )

    def apply_salary_increment(self, percentage: Decimal | int | None) -> Decimal | None:
        """
        Raise this record's salary in memory by `percentage` percent.

        Unlike the stored function this does not round; it is meant for
        previews. Returns the (possibly unchanged) salary.
        """
        if self.salary is None or percentage is None:
            return self.salary
        self.salary = self.salary + self.salary * Decimal(percentage) / Decimal(100)
        return self.salary

    def __repr__(self) -> str:
        return (
            f"Employee(employee_id={self.employee_id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, email={self.email!r}, job_id={self.job_id!r}, "
            f"salary={self.salary!r})"
        )
