"""
Common Dependencies for FastAPI Routes

There is no login: the caller states its session on every request through
headers (role and branches) and query parameters (date window).
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, Query, status

from caffissimo.config import settings
from caffissimo.models import Role
from caffissimo.schemas.scope import DateInterval, DatePreset, SalesScope, SessionContext
from caffissimo.services.access_policy import can_access_all_branches, has_permission
from caffissimo.services.scope_resolver import resolve_scope

logger = logging.getLogger(__name__)


def _parse_role(value: str):
    """Known roles become Role members; anything else stays a raw string and is denied later."""
    try:
        return Role(value)
    except ValueError:
        return value


async def get_session_context(
    x_role: Optional[str] = Header(None),
    x_assigned_branch_id: Optional[str] = Header(None),
    x_selected_branch_id: Optional[str] = Header(None),
    x_user_id: Optional[str] = Header(None),
    x_user_name: Optional[str] = Header(None),
    preset: Optional[str] = Query(None, description="today | 7d | 30d | custom"),
    date_from: Optional[datetime] = Query(None),
    date_to: Optional[datetime] = Query(None),
) -> SessionContext:
    """
    Dependency building the per-request session.
    Branch-pinned roles must say which branch they are pinned to.
    """
    if not x_role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Role header is required",
        )
    role = _parse_role(x_role)

    if not can_access_all_branches(role) and not x_assigned_branch_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="X-Assigned-Branch-Id header is required for this role",
        )

    if preset is None:
        preset = DatePreset.CUSTOM.value if (date_from and date_to) else settings.DEFAULT_DATE_PRESET
    try:
        date_preset = DatePreset(preset)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown date preset: {preset}")

    custom_range = None
    if date_preset == DatePreset.CUSTOM:
        if date_from is None or date_to is None:
            raise HTTPException(status_code=400, detail="custom preset requires date_from and date_to")
        custom_range = DateInterval(date_from=date_from, date_to=date_to)

    return SessionContext(
        role=role,
        assigned_branch_id=x_assigned_branch_id,
        selected_branch_id=x_selected_branch_id,
        preset=date_preset,
        custom_range=custom_range,
        user_id=x_user_id,
        user_name=x_user_name,
    )


async def get_scope(session: SessionContext = Depends(get_session_context)) -> SalesScope:
    """Resolved branch + date interval for the session."""
    try:
        return resolve_scope(session)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def require_permission(*keys: str) -> Callable:
    """
    Dependency factory to require specific permission(s).

    Usage:
        session: SessionContext = Depends(require_permission("page:reports"))
        or
        @router.get("/", dependencies=[Depends(require_permission("page:admin"))])
    """
    async def permission_checker(
        session: SessionContext = Depends(get_session_context),
    ) -> SessionContext:
        for key in keys:
            if not has_permission(session.role, key):
                logger.debug("Denied %s to role %r", key, session.role)
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Permission required: {key}",
                )
        return session

    return permission_checker
