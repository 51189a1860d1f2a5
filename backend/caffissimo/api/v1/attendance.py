"""
Attendance / POS Login Report API Endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import get_scope, require_permission
from caffissimo.models import AttendanceEntry, PosDayRecord
from caffissimo.schemas.scope import SalesScope, SessionContext
from caffissimo.services.attendance_service import attendance_service

router = APIRouter()


@router.get("/pos-records", response_model=List[PosDayRecord])
async def list_pos_day_records(
    session: SessionContext = Depends(require_permission("page:attendance")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
    search: Optional[str] = Query(None),
):
    """First login and last logout per user per day"""
    return attendance_service.pos_day_records(store, scope.branch_id, scope.interval, search=search)


@router.get("/", response_model=List[AttendanceEntry])
async def list_attendance(
    session: SessionContext = Depends(require_permission("page:attendance")),
    scope: SalesScope = Depends(get_scope),
    store: DataStore = Depends(get_store),
    search: Optional[str] = Query(None),
):
    return attendance_service.list_attendance(store, scope.branch_id, scope.interval, search=search)
