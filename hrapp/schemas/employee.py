from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hrapp.models.employee import EMAIL_PATTERN

JobId = Literal[
    "IT_PROG", "HR_REP", "HR_MAN", "SA_REP", "SA_MAN",
    "FI_ACCOUNT", "FI_MGR", "AD_ASST", "AD_VP", "AD_PRES",
]


class EmployeeBase(BaseModel):
    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    email: str = Field(max_length=100, pattern=EMAIL_PATTERN)
    phone_number: str | None = Field(default=None, max_length=20)
    job_id: JobId
    salary: Decimal = Field(ge=0, le=1_000_000, max_digits=8, decimal_places=2)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(EmployeeBase):
    """Full replacement of an employee's editable fields."""


class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    employee_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str | None
    job_id: str
    salary: Decimal


class EmployeeDetailOut(EmployeeOut):
    created_at: datetime | None = None
    updated_at: datetime | None = None
