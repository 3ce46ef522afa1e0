from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hrapp.crud.employees import get_database_info, is_database_healthy
from hrapp.db.session import engine, get_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    # Simple DB ping
    if not is_database_healthy(db):
        raise HTTPException(status_code=503, detail="Database unavailable")
    return {
        "status": "ok",
        **get_database_info(db),
        "pool": engine.pool.status(),
    }
