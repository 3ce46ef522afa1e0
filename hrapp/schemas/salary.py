from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class SalaryChangeRequest(BaseModel):
    # Validated by the stored functions, not here: a null or out-of-range
    # percentage must reach the database guard.
    percentage: Decimal | None = Field(description="Relative change, e.g. 10 for +10%")


class SalaryChangeOut(BaseModel):
    """One employee touched by a salary increment, with before and after values"""
    model_config = ConfigDict(from_attributes=True)

    employee_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str | None
    job_id: str
    old_salary: Decimal
    new_salary: Decimal


class SalaryUpdateResult(BaseModel):
    affected_rows: int
