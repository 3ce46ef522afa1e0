from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hrapp.core.security import MANAGER, require_roles
from hrapp.crud import employees as crud
from hrapp.db.session import get_db
from hrapp.schemas.salary import SalaryChangeOut, SalaryChangeRequest, SalaryUpdateResult

router = APIRouter(prefix="/salaries", tags=["salaries"])


@router.post("/increment", response_model=list[SalaryChangeOut])
def increment_salaries(
    payload: SalaryChangeRequest,
    db: Session = Depends(get_db),
    _: str = Depends(require_roles(MANAGER)),
):
    """
    Apply a percentage change to every employee with a positive salary.

    Returns each affected employee with old and new salary. A null
    percentage is rejected by the database with 400.
    """
    rows = crud.increment_salaries(db, payload.percentage)
    return [SalaryChangeOut.model_validate(r) for r in rows]


@router.post("/bulk-update", response_model=SalaryUpdateResult)
def bulk_update_salaries(
    payload: SalaryChangeRequest,
    db: Session = Depends(get_db),
    _: str = Depends(require_roles(MANAGER)),
):
    """Like /increment but only reports a count; changes beyond +/-100% are rejected."""
    affected = crud.update_all_salaries(db, payload.percentage)
    return SalaryUpdateResult(affected_rows=affected)
