from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class JobSummaryOut(BaseModel):
    """One row of hr.employee_summary"""
    model_config = ConfigDict(from_attributes=True)

    job_id: str
    employee_count: int
    average_salary: Decimal
    min_salary: Decimal
    max_salary: Decimal
    total_salary: Decimal
