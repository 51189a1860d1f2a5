"""
Store Settings API Endpoints
"""
from fastapi import APIRouter, Depends, HTTPException

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import require_permission
from caffissimo.models import StoreSettings
from caffissimo.schemas.operations import SettingsUpdate
from caffissimo.schemas.scope import SessionContext
from caffissimo.services.errors import PermissionDeniedError
from caffissimo.services.settings_service import settings_service

router = APIRouter()


@router.get("/", response_model=StoreSettings)
async def get_store_settings(
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    return settings_service.get(store)


@router.put("/", response_model=StoreSettings)
async def update_store_settings(
    data: SettingsUpdate,
    session: SessionContext = Depends(require_permission("feature:manage_settings")),
    store: DataStore = Depends(get_store),
):
    try:
        return settings_service.update(store, session, data)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
