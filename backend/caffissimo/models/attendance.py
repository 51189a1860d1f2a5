"""
Attendance and POS session models.
PosSession rows are raw login/logout pairs; per-day views are derived in
services.attendance_service.
"""
from datetime import date
from typing import List, Optional
import enum

from pydantic import BaseModel

from caffissimo.models.common import UtcDateTime


class AttendanceStatus(str, enum.Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half_day"


class AttendanceEntry(BaseModel):
    id: str
    branch_id: str
    user_id: str
    user_name: str
    date: date
    status: AttendanceStatus
    check_in: Optional[str] = None  # HH:MM
    check_out: Optional[str] = None
    notes: Optional[str] = None
    created_at: UtcDateTime

    class Config:
        frozen = True


class PosSession(BaseModel):
    id: str
    branch_id: str
    user_id: str
    user_name: str
    login_at: UtcDateTime
    logout_at: UtcDateTime
    last_activity_at: UtcDateTime

    class Config:
        frozen = True


class PosSessionView(BaseModel):
    login_at: UtcDateTime
    logout_at: UtcDateTime
    auto_logout: bool = False

    class Config:
        frozen = True


class PosDayRecord(BaseModel):
    """One user's POS activity on one day, derived from their sessions."""
    branch_id: str
    user_id: str
    user_name: str
    date: date
    first_login: UtcDateTime
    last_logout: UtcDateTime
    sessions: List[PosSessionView]

    class Config:
        frozen = True
