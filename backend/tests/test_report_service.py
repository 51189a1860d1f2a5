"""
Report service tests: source and payment filters on the daily report,
and the dashboard's recent-activity feed.
"""

from datetime import date, datetime

import pytest

from caffissimo.database import DataStore
from caffissimo.models import AuditAction, AuditLog, OrderSource, PaymentMethod, Platform, Role
from caffissimo.schemas.scope import SalesScope
from caffissimo.seed import SeedData, build_branches, build_users
from caffissimo.services.report_service import report_service

DAY = datetime(2026, 2, 3, 10, 0, 0)


def _log(log_id, created_at, branch_id="branch-1"):
    return AuditLog(
        id=log_id,
        action=AuditAction.PRICE_CHANGE,
        entity_type="BranchProduct",
        entity_id="bp-1",
        user_id="user-2",
        user_name="Maria Garcia",
        branch_id=branch_id,
        created_at=created_at,
    )


@pytest.fixture
def report_store(make_order, make_entry):
    orders = [
        make_order("o-pos", 10.0, DAY),
        make_order("o-web", 20.0, DAY, source=OrderSource.ECOMMERCE),
        make_order("o-uber", 30.0, DAY, source=OrderSource.UBER_EATS),
    ]
    entries = [make_entry("e-dd", Platform.DOORDASH, DAY.date(), 40.0, order_count=5)]
    return DataStore(SeedData(branches=build_branches(), users=build_users(), orders=orders, external_sales=entries))


class TestDailyReportFilters:

    def test_unfiltered(self, report_store, all_branches_scope):
        report = report_service.daily_report(report_store, all_branches_scope)
        assert report.summary.total_revenue == pytest.approx(100.0)

    def test_source_filter(self, report_store, all_branches_scope):
        pos = report_service.daily_report(report_store, all_branches_scope, source=OrderSource.POS)
        assert pos.summary.total_revenue == pytest.approx(10.0)
        assert pos.summary.by_source.doordash == 0

        doordash = report_service.daily_report(report_store, all_branches_scope, source=OrderSource.DOORDASH)
        assert doordash.summary.total_revenue == pytest.approx(40.0)
        assert doordash.summary.order_count == 0

    def test_payment_filter(self, report_store, all_branches_scope):
        card = report_service.daily_report(report_store, all_branches_scope, payment_method=PaymentMethod.CARD)
        assert card.summary.total_revenue == pytest.approx(30.0)
        assert card.summary.by_source.doordash == 0

        external = report_service.daily_report(
            report_store, all_branches_scope, payment_method=PaymentMethod.EXTERNAL
        )
        assert external.summary.total_revenue == pytest.approx(70.0)

    def test_series_matches_report(self, report_store, all_branches_scope):
        daily = report_service.daily_series(report_store, all_branches_scope, source=OrderSource.ECOMMERCE)
        bucket = next(b for b in daily if b.date == date(2026, 2, 3))
        assert bucket.total == pytest.approx(20.0)
        assert sum(b.total for b in daily) == pytest.approx(20.0)


class TestRecentActivity:

    @pytest.fixture
    def activity_store(self, make_order):
        orders = [make_order(f"o{i}", 5.0, datetime(2026, 2, 1 + i, 9)) for i in range(4)]
        orders.append(make_order("o-west", 5.0, datetime(2026, 2, 5, 9), branch_id="branch-2"))
        logs = [
            _log("log-new", datetime(2026, 2, 4, 12)),
            _log("log-old", datetime(2026, 1, 20, 12)),
            _log("log-west", datetime(2026, 2, 5, 12), branch_id="branch-2"),
        ]
        return DataStore(SeedData(branches=build_branches(), users=build_users(), orders=orders, audit_logs=logs))

    def test_orders_and_logs_merged_newest_first(self, activity_store):
        feed = report_service.recent_activity(activity_store, "branch-1", Role.BRANCH_OWNER)
        assert [i.id for i in feed] == ["log-new", "o3", "o2", "o1", "o0", "log-old"]
        assert feed[0].type == "log"
        assert feed[0].title == "Price Change"
        assert feed[0].subtitle == "by Maria Garcia"
        assert feed[1].title == "Order ORD-o3"
        assert feed[1].subtitle == "$5.00 • 1 item"

    def test_logs_hidden_without_audit_permission(self, activity_store):
        feed = report_service.recent_activity(activity_store, "branch-1", Role.SUPERVISOR)
        assert feed and all(i.type == "order" for i in feed)

    def test_all_branch_view_and_limit(self, activity_store):
        feed = report_service.recent_activity(activity_store, None, Role.SUPER_ADMIN, limit=3)
        assert [i.id for i in feed] == ["log-west", "o-west", "log-new"]
