from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import DBAPIError

from hrapp.api.auth import router as auth_router
from hrapp.api.employees import router as employees_router
from hrapp.api.health import router as health_router
from hrapp.api.reports import router as reports_router
from hrapp.api.root import router as root_router
from hrapp.api.salaries import router as salaries_router
from hrapp.core.config import settings
from hrapp.core.errors import database_error_handler
from hrapp.core.logging_config import setup_logging

setup_logging()

app = FastAPI(title="HR Web Application")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# IntegrityError, DataError and RAISE EXCEPTION from the stored functions
# all arrive as DBAPIError subclasses.
app.add_exception_handler(DBAPIError, database_error_handler)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(employees_router)
app.include_router(salaries_router)
app.include_router(reports_router)
