"""
Scope resolver - effective branch scope and date interval for a session.

Branch precedence: roles without all-branch access are pinned to their
assigned branch and any selection is ignored; roles with all-branch access
get their selection, or None (every branch) when nothing is selected.
"""
from datetime import datetime, timedelta
from typing import Any, Optional, Union

from caffissimo.schemas.scope import DateInterval, DatePreset, SalesScope, SessionContext
from caffissimo.services.access_policy import can_access_all_branches
from caffissimo.utils.timezone_helpers import end_of_day, start_of_day, utcnow

# Preset -> number of calendar days covered, today included.
PRESET_DAYS = {
    DatePreset.TODAY: 1,
    DatePreset.LAST_7_DAYS: 7,
    DatePreset.LAST_30_DAYS: 30,
}


def resolve_branch_scope(
    role: Any,
    assigned_branch_id: Optional[str],
    selected_branch_id: Optional[str],
) -> Optional[str]:
    if not can_access_all_branches(role):
        return assigned_branch_id
    return selected_branch_id or None


def resolve_date_interval(
    preset: Union[DatePreset, str],
    custom_range: Optional[DateInterval] = None,
    reference: Optional[datetime] = None,
) -> DateInterval:
    """Resolve a preset (or a custom range) into a closed interval.

    Raises ValueError for an unknown preset, or for `custom` without a range.
    """
    preset = DatePreset(preset)

    if preset == DatePreset.CUSTOM:
        if custom_range is None:
            raise ValueError("custom date preset requires a date range")
        # Picking a date picks the whole day; date_to is the caller's responsibility.
        return DateInterval(
            date_from=start_of_day(custom_range.date_from),
            date_to=custom_range.date_to,
        )

    today = reference or utcnow()
    days_back = PRESET_DAYS[preset] - 1
    return DateInterval(
        date_from=start_of_day(today - timedelta(days=days_back)),
        date_to=end_of_day(today),
    )


def resolve_session_branch(session: SessionContext) -> Optional[str]:
    return resolve_branch_scope(session.role, session.assigned_branch_id, session.selected_branch_id)


def resolve_scope(session: SessionContext, reference: Optional[datetime] = None) -> SalesScope:
    """Combine branch and date resolution for a session."""
    return SalesScope(
        branch_id=resolve_session_branch(session),
        interval=resolve_date_interval(session.preset, session.custom_range, reference),
    )
