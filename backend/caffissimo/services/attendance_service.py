"""
Attendance Service
Attendance entries and the POS login report.

POS day records are derived at read time from raw login/logout pairs: one
record per user per day, with the first login, the last logout and every
session of that day. A session counts as an auto-logout when the terminal
closed it after the idle timeout rather than the user logging out.
"""
from datetime import timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from caffissimo.config import settings
from caffissimo.database import DataStore
from caffissimo.models import AttendanceEntry, PosDayRecord, PosSession, PosSessionView
from caffissimo.schemas.scope import DateInterval


def is_auto_logout(session: PosSession, idle_minutes: Optional[int] = None) -> bool:
    idle = timedelta(minutes=settings.POS_IDLE_TIMEOUT_MINUTES if idle_minutes is None else idle_minutes)
    return session.logout_at - session.last_activity_at >= idle


def build_day_records(sessions: Iterable[PosSession], idle_minutes: Optional[int] = None) -> List[PosDayRecord]:
    """Group sessions by (user, login day). Newest day first, then by name."""
    groups: Dict[Tuple[str, object], List[PosSession]] = {}
    for s in sessions:
        groups.setdefault((s.user_id, s.login_at.date()), []).append(s)

    records = []
    for (user_id, day), day_sessions in groups.items():
        day_sessions.sort(key=lambda s: s.login_at)
        first = day_sessions[0]
        records.append(PosDayRecord(
            branch_id=first.branch_id,
            user_id=user_id,
            user_name=first.user_name,
            date=day,
            first_login=first.login_at,
            last_logout=max(s.logout_at for s in day_sessions),
            sessions=[
                PosSessionView(
                    login_at=s.login_at,
                    logout_at=s.logout_at,
                    auto_logout=is_auto_logout(s, idle_minutes),
                )
                for s in day_sessions
            ],
        ))
    records.sort(key=lambda r: r.user_name)
    records.sort(key=lambda r: r.date, reverse=True)
    return records


class AttendanceService:

    def pos_day_records(
        self,
        store: DataStore,
        branch_id: Optional[str],
        interval: Optional[DateInterval] = None,
        search: Optional[str] = None,
    ) -> List[PosDayRecord]:
        sessions = store.list_pos_sessions(branch_id=branch_id, interval=interval)
        if search:
            q = search.strip().lower()
            sessions = [s for s in sessions if q in s.user_name.lower()]
        return build_day_records(sessions)

    def list_attendance(
        self,
        store: DataStore,
        branch_id: Optional[str],
        interval: Optional[DateInterval] = None,
        search: Optional[str] = None,
    ) -> List[AttendanceEntry]:
        entries = store.list_attendance(branch_id=branch_id, interval=interval)
        if search:
            q = search.strip().lower()
            entries = [e for e in entries if q in e.user_name.lower()]
        return sorted(entries, key=lambda e: e.date, reverse=True)


# Singleton
attendance_service = AttendanceService()
