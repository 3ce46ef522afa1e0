import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
CHECK_VIOLATION = "23514"
NOT_NULL_VIOLATION = "23502"
RAISE_EXCEPTION = "P0001"


def sqlstate_of(exc: DBAPIError) -> str | None:
    return getattr(exc.orig, "sqlstate", None)


def database_message(exc: DBAPIError) -> str:
    """Primary message reported by PostgreSQL, without driver decoration."""
    diag = getattr(exc.orig, "diag", None)
    message = getattr(diag, "message_primary", None)
    return message or str(exc.orig).strip()


def constraint_name(exc: DBAPIError) -> str | None:
    diag = getattr(exc.orig, "diag", None)
    return getattr(diag, "constraint_name", None)


def status_for_sqlstate(sqlstate: str | None) -> int:
    if sqlstate == UNIQUE_VIOLATION:
        return 409
    if sqlstate in (CHECK_VIOLATION, NOT_NULL_VIOLATION):
        return 422
    if sqlstate == RAISE_EXCEPTION:
        return 400
    # Class 22: data exceptions such as numeric overflow
    if sqlstate and sqlstate.startswith("22"):
        return 422
    return 500


async def database_error_handler(request: Request, exc: DBAPIError) -> JSONResponse:
    sqlstate = sqlstate_of(exc)
    status_code = status_for_sqlstate(sqlstate)

    if status_code == 500:
        logger.error(
            "Unhandled database error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=status_code, content={"detail": "Database error"})

    logger.warning(
        "Database rejected %s %s: sqlstate=%s %s",
        request.method,
        request.url.path,
        sqlstate,
        database_message(exc),
    )
    content = {"detail": database_message(exc), "sqlstate": sqlstate}
    constraint = constraint_name(exc)
    if constraint:
        content["constraint"] = constraint
    return JSONResponse(status_code=status_code, content=content)
