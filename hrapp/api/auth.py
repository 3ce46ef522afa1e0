from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from hrapp.core.security import get_current_role

router = APIRouter(tags=["auth"])


@router.get("/getrole", response_class=PlainTextResponse)
def get_role(role: str = Depends(get_current_role)):
    """Role of the caller: manager, staff or anonymous."""
    return role


@router.api_route("/logout", methods=["GET", "POST"])
def logout(request: Request, response: Response):
    """
    Expire every cookie the client sent and tell caches not to keep the
    response.
    """
    for name in request.cookies:
        response.delete_cookie(name, path="/")

    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
    response.headers["Pragma"] = "no-cache"
    response.headers["Expires"] = "0"
    return {"status": "logged_out"}
