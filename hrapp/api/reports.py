from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hrapp.core.security import MANAGER, STAFF, require_roles
from hrapp.crud import employees as crud
from hrapp.db.session import get_db
from hrapp.schemas.report import JobSummaryOut

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/job-summary", response_model=list[JobSummaryOut])
def job_summary(
    db: Session = Depends(get_db),
    _: str = Depends(require_roles(MANAGER, STAFF)),
):
    """Headcount and salary statistics per job code"""
    return [JobSummaryOut.model_validate(r) for r in crud.get_job_summary(db)]
