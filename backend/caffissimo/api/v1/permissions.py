"""
Role Permission API
The grant table is fixed in config.permissions; these endpoints only read it.
"""
from fastapi import APIRouter, Depends

from caffissimo.config.permissions import ALL_PERMISSIONS
from caffissimo.dependencies import get_session_context, require_permission
from caffissimo.schemas.permission import MyPermissionsResponse, PermissionKeyInfo, PermissionMatrixResponse
from caffissimo.schemas.scope import SessionContext
from caffissimo.services.access_policy import granted_permissions, permission_matrix

router = APIRouter()


@router.get("/matrix", response_model=PermissionMatrixResponse)
async def get_permission_matrix(
    session: SessionContext = Depends(require_permission("page:admin")),
):
    """Get the full permission matrix for all roles."""
    permissions = [
        PermissionKeyInfo(key=key, label=info["label"], category=info["category"])
        for key, info in ALL_PERMISSIONS.items()
    ]
    return PermissionMatrixResponse(permissions=permissions, matrix=permission_matrix())


@router.get("/me", response_model=MyPermissionsResponse)
async def get_my_permissions(
    session: SessionContext = Depends(get_session_context),
):
    """Flat list of keys granted to the session role (empty for unknown roles)."""
    return MyPermissionsResponse(
        role=str(getattr(session.role, "value", session.role)),
        permissions=granted_permissions(session.role),
    )
