"""
Scope resolver tests: branch precedence and date window resolution.
"""

from datetime import datetime, timedelta

import pytest

from caffissimo.models import Role
from caffissimo.schemas.scope import DateInterval, DatePreset
from caffissimo.services.scope_resolver import (
    resolve_branch_scope,
    resolve_date_interval,
    resolve_scope,
)


class TestBranchScope:

    @pytest.mark.parametrize("selected", ["branch-1", "branch-2", None])
    def test_all_branch_role_gets_selection(self, selected):
        assert resolve_branch_scope(Role.SUPER_ADMIN, "branch-3", selected) == selected

    def test_all_branch_role_empty_selection_means_everything(self):
        assert resolve_branch_scope(Role.SUPER_ADMIN, None, "") is None

    @pytest.mark.parametrize("role", [Role.BRANCH_OWNER, Role.SUPERVISOR, Role.CASHIER])
    @pytest.mark.parametrize("hostile", ["branch-2", "branch-999", None, ""])
    def test_pinned_role_ignores_hostile_selection(self, role, hostile):
        assert resolve_branch_scope(role, "branch-1", hostile) == "branch-1"

    def test_unknown_role_is_pinned(self):
        assert resolve_branch_scope("regional_manager", "branch-1", "branch-2") == "branch-1"


class TestDateInterval:

    def test_today(self, reference):
        interval = resolve_date_interval("today", reference=reference)
        assert interval.date_from == datetime(2026, 2, 5, 0, 0, 0)
        assert interval.date_to.date() == reference.date()
        assert interval.date_to.hour == 23 and interval.date_to.minute == 59

    def test_7d_spans_seven_calendar_days(self, reference):
        interval = resolve_date_interval(DatePreset.LAST_7_DAYS, reference=reference)
        assert interval.date_from == datetime(2026, 1, 30, 0, 0, 0)
        assert len(list(interval.days())) == 7

    def test_30d_spans_thirty_calendar_days(self, reference):
        interval = resolve_date_interval("30d", reference=reference)
        assert interval.date_from == datetime(2026, 1, 7, 0, 0, 0)
        assert len(list(interval.days())) == 30

    @pytest.mark.parametrize("ref", [
        datetime(2026, 2, 5, 0, 0, 0),
        datetime(2026, 3, 1, 23, 59, 59),
        datetime(2024, 2, 29, 12, 30, 0),
    ])
    def test_7d_is_seven_days_whatever_the_reference(self, ref):
        assert len(list(resolve_date_interval("7d", reference=ref).days())) == 7

    def test_custom_floors_from_and_keeps_to(self):
        custom = DateInterval(
            date_from=datetime(2026, 1, 10, 15, 45),
            date_to=datetime(2026, 1, 12, 9, 30),
        )
        interval = resolve_date_interval("custom", custom)
        assert interval.date_from == datetime(2026, 1, 10, 0, 0, 0)
        assert interval.date_to == datetime(2026, 1, 12, 9, 30)

    def test_custom_without_range_raises(self):
        with pytest.raises(ValueError):
            resolve_date_interval("custom")

    def test_unknown_preset_raises(self):
        with pytest.raises(ValueError):
            resolve_date_interval("90d")

    def test_inverted_custom_range_is_empty(self):
        custom = DateInterval(date_from=datetime(2026, 2, 5), date_to=datetime(2026, 2, 1))
        interval = resolve_date_interval("custom", custom)
        assert interval.is_empty
        assert list(interval.days()) == []
        assert not interval.contains(datetime(2026, 2, 3))


class TestMembership:

    def test_inclusive_on_both_ends(self, week_interval):
        assert week_interval.contains(week_interval.date_from)
        assert week_interval.contains(week_interval.date_to)
        assert not week_interval.contains(week_interval.date_to + timedelta(microseconds=1))
        assert not week_interval.contains(week_interval.date_from - timedelta(microseconds=1))

    def test_day_membership_uses_midnight(self):
        interval = DateInterval(date_from=datetime(2026, 2, 1, 8), date_to=datetime(2026, 2, 3, 8))
        assert not interval.contains_day(datetime(2026, 2, 1).date())
        assert interval.contains_day(datetime(2026, 2, 2).date())
        assert interval.contains_day(datetime(2026, 2, 3).date())

    def test_aware_datetimes_are_normalised(self):
        interval = DateInterval(
            date_from="2026-02-01T00:00:00Z",
            date_to="2026-02-01T10:00:00+02:00",
        )
        assert interval.date_from == datetime(2026, 2, 1, 0, 0)
        assert interval.date_to == datetime(2026, 2, 1, 8, 0)


class TestResolveScope:

    def test_composes_branch_and_dates(self, session_for, reference):
        session = session_for(Role.BRANCH_OWNER, assigned="branch-2", selected="branch-1",
                              preset=DatePreset.LAST_7_DAYS)
        scope = resolve_scope(session, reference=reference)
        assert scope.branch_id == "branch-2"
        assert scope.interval.date_from == datetime(2026, 1, 30)

    def test_super_admin_without_selection_sees_everything(self, super_admin, reference):
        assert resolve_scope(super_admin, reference=reference).branch_id is None
