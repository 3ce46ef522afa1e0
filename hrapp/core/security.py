from fastapi import Header, HTTPException, status

MANAGER = "manager"
STAFF = "staff"
ANONYMOUS = "anonymous"

# Checked in order; the first one the caller holds wins.
ROLES = (MANAGER, STAFF)


def get_current_role(x_user_role: str | None = Header(default=None)) -> str:
    """
    DEV AUTH: pass X-User-Role header to simulate the container-assigned role.
    Example: X-User-Role: manager

    Anything that is not a known role resolves to "anonymous".
    """
    if not x_user_role:
        return ANONYMOUS
    held = {r.strip().lower() for r in x_user_role.split(",")}
    for role in ROLES:
        if role in held:
            return role
    return ANONYMOUS


def require_roles(*required: str):
    """
    Usage:
      Depends(require_roles("manager"))
      Depends(require_roles("manager", "staff"))  # any-of
    """
    required_set = set(required)

    def _dep(x_user_role: str | None = Header(default=None)) -> str:
        role = get_current_role(x_user_role)
        if role == ANONYMOUS:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Missing or unknown X-User-Role header (dev auth)",
            )
        if role not in required_set:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Forbidden. Requires one of: {sorted(required_set)}",
            )
        return role

    return _dep
