"""
Audit Logs API Endpoints (read-only)
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import get_scope, require_permission
from caffissimo.models import AuditAction, AuditLog
from caffissimo.schemas.scope import SalesScope, SessionContext
from caffissimo.services.audit_service import audit_service

router = APIRouter()


@router.get("/", response_model=List[AuditLog])
async def list_audit_logs(
    session: SessionContext = Depends(require_permission("page:audit_logs")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
    action: Optional[AuditAction] = Query(None),
    search: Optional[str] = Query(None),
):
    return audit_service.list_logs(store, scope.branch_id, scope.interval, action=action, search=search)
