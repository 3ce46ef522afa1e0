from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from hrapp.core.security import MANAGER, STAFF, require_roles
from hrapp.crud import employees as crud
from hrapp.db.session import get_db
from hrapp.models.employee import Employee
from hrapp.schemas.employee import EmployeeCreate, EmployeeDetailOut, EmployeeOut, EmployeeUpdate

router = APIRouter(prefix="/employees", tags=["employees"])

read_access = require_roles(MANAGER, STAFF)
write_access = require_roles(MANAGER)


def employee_to_out(e: Employee, detail: bool = False) -> EmployeeOut | EmployeeDetailOut:
    if detail:
        return EmployeeDetailOut.model_validate(e)
    return EmployeeOut.model_validate(e)


@router.get("", response_model=list[EmployeeOut])
def list_employees(
    first_name: str | None = Query(default=None, min_length=1, description="Filter by first-name prefix"),
    db: Session = Depends(get_db),
    _: str = Depends(read_access),
):
    """
    List all employees ordered by employee ID.

    Use ?first_name=Jo to get employees whose first name starts with "Jo"
    (case-insensitive), ordered by name instead.
    """
    if first_name:
        employees = crud.get_employees_by_first_name(db, first_name)
    else:
        employees = crud.get_employees(db)
    return [employee_to_out(e) for e in employees]


@router.get("/{employee_id}", response_model=EmployeeDetailOut)
def get_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    _: str = Depends(read_access),
):
    employee = crud.get_employee(db, employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee_to_out(employee, detail=True)


@router.post("", response_model=EmployeeDetailOut, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeCreate,
    db: Session = Depends(get_db),
    _: str = Depends(write_access),
):
    employee = crud.create_employee(db, payload)
    return employee_to_out(employee, detail=True)


@router.put("/{employee_id}", response_model=EmployeeDetailOut)
def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    db: Session = Depends(get_db),
    _: str = Depends(write_access),
):
    employee = crud.update_employee(db, employee_id, payload)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee_to_out(employee, detail=True)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    _: str = Depends(write_access),
):
    if not crud.delete_employee(db, employee_id):
        raise HTTPException(status_code=404, detail="Employee not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{employee_id}/raise", response_model=EmployeeOut)
def raise_salary(
    employee_id: int,
    db: Session = Depends(get_db),
    _: str = Depends(write_access),
):
    """Give one employee a flat 10% raise."""
    employee = crud.raise_employee_salary(db, employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee_to_out(employee)
