from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "HR Web Application",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
