"""
Scope Schemas - session context, date intervals and resolved scopes
"""
from datetime import date, datetime, timedelta
from typing import Any, Iterator, List, Optional
import enum

from pydantic import BaseModel

from caffissimo.models.common import UtcDateTime
from caffissimo.utils.timezone_helpers import day_start


class DatePreset(str, enum.Enum):
    TODAY = "today"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    CUSTOM = "custom"


class DateInterval(BaseModel):
    """Closed interval [date_from, date_to]. Empty when date_from > date_to."""
    date_from: UtcDateTime
    date_to: UtcDateTime

    class Config:
        frozen = True

    @property
    def is_empty(self) -> bool:
        return self.date_from > self.date_to

    def contains(self, ts: datetime) -> bool:
        return self.date_from <= ts <= self.date_to

    def contains_day(self, day: date) -> bool:
        """Day-granularity records are tested at their midnight instant."""
        return self.contains(day_start(day))

    def days(self) -> Iterator[date]:
        """Each calendar day touched by the interval, in order."""
        if self.is_empty:
            return
        current = self.date_from.date()
        last = self.date_to.date()
        while current <= last:
            yield current
            current += timedelta(days=1)


class SessionContext(BaseModel):
    """Per-request session state supplied by the caller.

    `role` is kept as given (a Role value or any other string) so that
    an unrecognised role reaches the access policy and is denied there.
    """
    role: Any
    assigned_branch_id: Optional[str] = None
    selected_branch_id: Optional[str] = None
    preset: DatePreset = DatePreset.LAST_7_DAYS
    custom_range: Optional[DateInterval] = None
    user_id: Optional[str] = None
    user_name: Optional[str] = None

    class Config:
        frozen = True


class SalesScope(BaseModel):
    """Resolved scope: branch_id None means every branch."""
    branch_id: Optional[str] = None
    interval: DateInterval

    class Config:
        frozen = True


class ScopeResponse(BaseModel):
    role: str
    branch_id: Optional[str] = None
    date_from: datetime
    date_to: datetime
    days: List[date]
