"""
Tests for the operational services: offers, fridge reports, POS sessions,
external platform imports, catalog, audit log, search and settings.
"""

from datetime import date, datetime, timedelta

import pytest
from pydantic import ValidationError

from caffissimo.models import (
    AuditAction,
    DiscountType,
    EntrySource,
    FridgeTemperatureEntry,
    Offer,
    Platform,
    PosSession,
    Role,
)
from caffissimo.schemas.operations import FridgeReportCreate, SettingsUpdate
from caffissimo.schemas.platforms import ExternalSalesCreate
from caffissimo.schemas.scope import DateInterval
from caffissimo.services.attendance_service import attendance_service, build_day_records, is_auto_logout
from caffissimo.services.audit_service import audit_service
from caffissimo.services.catalog_service import catalog_service
from caffissimo.services.errors import ExternalSalesImportError, FridgeReportError, PermissionDeniedError
from caffissimo.services.fridge_service import fridge_service
from caffissimo.services.offer_service import offer_applies_to_branch, offer_service, offer_status
from caffissimo.services.platform_service import parse_sales_csv, platform_service
from caffissimo.services.search_service import search_service
from caffissimo.services.settings_service import settings_service

NOW = datetime(2026, 2, 5, 12, 0, 0)


def _offer(**overrides):
    fields = dict(
        id="offer-x",
        name="Test Offer",
        discount_type=DiscountType.PERCENT,
        discount_value=10,
        start_date=NOW - timedelta(days=1),
        end_date=NOW + timedelta(days=1),
        created_at=NOW,
        updated_at=NOW,
    )
    fields.update(overrides)
    return Offer(**fields)


class TestOffers:

    @pytest.mark.parametrize("overrides,expected", [
        ({}, "active"),
        ({"is_active": False}, "inactive"),
        ({"start_date": NOW + timedelta(hours=1)}, "scheduled"),
        ({"end_date": NOW - timedelta(hours=1)}, "expired"),
        ({"is_active": False, "end_date": NOW - timedelta(hours=1)}, "inactive"),
        ({"end_date": NOW}, "active"),
    ])
    def test_status_is_derived(self, overrides, expected):
        assert offer_status(_offer(**overrides), NOW) == expected

    def test_no_branch_list_means_every_branch(self):
        assert offer_applies_to_branch(_offer(), "branch-9")
        assert offer_applies_to_branch(_offer(branch_ids=[]), "branch-9")
        assert not offer_applies_to_branch(_offer(branch_ids=["branch-1"]), "branch-9")

    def test_branch_filter_on_seed(self, store):
        ids = [r.offer.id for r in offer_service.list_offers(store, "branch-3", now=NOW)]
        assert ids == ["offer-1", "offer-3"]

    def test_summaries(self, store):
        by_id = {r.offer.id: r for r in offer_service.list_offers(store, None, now=NOW)}
        assert by_id["offer-1"].applies_to.startswith("Categories: ")
        assert by_id["offer-3"].applies_to == "All products"
        assert by_id["offer-2"].branches == "Downtown"
        assert all(r.status == "active" for r in by_id.values())


class TestFridgeReports:

    def _payload(self, temps, branch_id=None):
        return FridgeReportCreate(
            date=date(2026, 2, 5),
            temperatures=[FridgeTemperatureEntry(name=f"Unit {i}", temperature=t) for i, t in enumerate(temps)],
            notes="evening check",
            branch_id=branch_id,
        )

    def test_submit_flags_warm_units(self, store, owner):
        result = fridge_service.submit(store, owner, self._payload([38.0, 41.0, 42.5]))
        assert result.compliant is False
        assert [t.temperature for t in result.out_of_range] == [42.5]
        assert result.report.branch_id == "branch-1"
        assert store.list_fridge_reports()[0].id == result.report.id

    def test_exactly_41_is_compliant(self, store, owner):
        assert fridge_service.submit(store, owner, self._payload([41.0])).compliant

    def test_pinned_role_cannot_report_for_another_branch(self, store, supervisor):
        result = fridge_service.submit(store, supervisor, self._payload([36.0], branch_id="branch-2"))
        assert result.report.branch_id == "branch-1"

    def test_super_admin_must_name_a_branch(self, store, super_admin):
        with pytest.raises(FridgeReportError):
            fridge_service.submit(store, super_admin, self._payload([36.0]))
        result = fridge_service.submit(store, super_admin, self._payload([36.0], branch_id="branch-3"))
        assert result.report.branch_id == "branch-3"

    def test_cashier_cannot_submit(self, store, cashier):
        with pytest.raises(PermissionDeniedError):
            fridge_service.submit(store, cashier, self._payload([36.0]))

    def test_submission_is_audited(self, store, owner):
        result = fridge_service.submit(store, owner, self._payload([36.0]))
        log = store.list_audit_logs()[0]
        assert log.action == AuditAction.STOCK_REPORT
        assert log.entity_id == result.report.id

    def test_list_search_and_scope(self, store):
        window = DateInterval(date_from=datetime(2026, 1, 1), date_to=datetime(2026, 2, 5, 23, 59))
        reports = fridge_service.list_reports(store, "branch-2", window)
        assert len(reports) == 14
        assert all(r.report.branch_id == "branch-2" for r in reports)
        assert all(r.compliant for r in reports)
        warm = fridge_service.list_reports(store, "branch-2", window, search="WALK-IN")
        assert 0 < len(warm) < 14


class TestPosSessions:

    def _session(self, sid, login, logout, last_activity, user="user-7", name="David Lee"):
        return PosSession(
            id=sid, branch_id="branch-1", user_id=user, user_name=name,
            login_at=login, logout_at=logout, last_activity_at=last_activity,
        )

    def test_auto_logout_after_idle_timeout(self):
        login = datetime(2026, 2, 5, 7, 0)
        manual = self._session("s1", login, login + timedelta(hours=2, minutes=1), login + timedelta(hours=2))
        auto = self._session("s2", login, login + timedelta(hours=2, minutes=10), login + timedelta(hours=2))
        assert not is_auto_logout(manual)
        assert is_auto_logout(auto)

    def test_day_record_first_login_last_logout(self):
        day = datetime(2026, 2, 5)
        sessions = [
            self._session("s2", day.replace(hour=13), day.replace(hour=17), day.replace(hour=16, minute=50)),
            self._session("s1", day.replace(hour=7), day.replace(hour=11), day.replace(hour=11)),
            self._session("s3", day.replace(hour=8), day.replace(hour=9), day.replace(hour=9),
                          user="user-8", name="Jessica Martinez"),
        ]
        records = build_day_records(sessions)
        assert [r.user_name for r in records] == ["David Lee", "Jessica Martinez"]
        david = records[0]
        assert david.first_login == day.replace(hour=7)
        assert david.last_logout == day.replace(hour=17)
        assert [s.auto_logout for s in david.sessions] == [False, True]

    def test_seed_records_scoped_to_branch(self, store):
        window = DateInterval(date_from=datetime(2026, 2, 1), date_to=datetime(2026, 2, 5, 23, 59))
        records = attendance_service.pos_day_records(store, "branch-1", window)
        assert records
        assert all(r.branch_id == "branch-1" for r in records)
        dates = [r.date for r in records]
        assert dates == sorted(dates, reverse=True)
        assert any(s.auto_logout for r in records for s in r.sessions)


class TestExternalSales:

    def test_parse_csv_skips_bad_rows(self):
        text = "\ufeffDate,Total_Sales,Order_Count\n2026-02-01,120.50,8\nnot-a-date,5,1\n03/02/2026,80,\n2026-02-04,abc,2\n"
        rows, skipped = parse_sales_csv(text)
        assert rows == [(date(2026, 2, 1), 120.5, 8), (date(2026, 2, 3), 80.0, 0)]
        assert skipped == 2

    def test_parse_csv_skips_non_finite_totals(self):
        text = "date,total_sales,order_count\n2026-02-01,inf,3\n2026-02-02,nan,1\n2026-02-03,-Infinity,1\n2026-02-04,42.00,2\n"
        rows, skipped = parse_sales_csv(text)
        assert rows == [(date(2026, 2, 4), 42.0, 2)]
        assert skipped == 3

    @pytest.mark.parametrize("total", [float("inf"), float("nan")])
    def test_manual_entry_rejects_non_finite_total(self, total):
        with pytest.raises(ValidationError):
            ExternalSalesCreate(platform=Platform.UBER_EATS, date=date(2026, 2, 6), total_sales=total)

    @pytest.mark.parametrize("text", ["", "date,total_sales\n2026-02-01,10\n"])
    def test_parse_csv_rejects_bad_header(self, text):
        with pytest.raises(ExternalSalesImportError):
            parse_sales_csv(text)

    def test_import_adds_entries_to_revenue(self, store, owner):
        before = len(store.list_external_sales_entries(branch_id="branch-1"))
        result = platform_service.import_csv(
            store, owner, Platform.DOORDASH, "date,total_sales,order_count\n2026-02-06,300,12\n"
        )
        assert result.imported == 1 and result.skipped == 0
        entry = result.entries[0]
        assert entry.source == EntrySource.IMPORT
        assert entry.imported_at is not None
        assert entry.branch_id == "branch-1"
        assert len(store.list_external_sales_entries(branch_id="branch-1")) == before + 1

    def test_manual_entry(self, store, super_admin):
        entry = platform_service.add_entry(store, super_admin, ExternalSalesCreate(
            platform=Platform.UBER_EATS, date=date(2026, 2, 6), total_sales=55.0, order_count=3, branch_id="branch-2",
        ))
        assert entry.source == EntrySource.MANUAL
        assert store.list_external_sales_entries(platform="uber_eats")[-1].id == entry.id

    def test_unknown_branch_rejected(self, store, super_admin):
        with pytest.raises(ExternalSalesImportError):
            platform_service.import_csv(store, super_admin, Platform.UBER_EATS,
                                        "date,total_sales,order_count\n", branch_id="branch-404")


class TestCatalog:

    def test_branch_prices_applied(self, store):
        items = catalog_service.list_products(store, "branch-2", include_unavailable=True)
        prices = {bp.product_id: bp.price for bp in store.list_branch_products("branch-2")}
        assert len(items) == len(prices)
        assert all(i.price == prices[i.id] for i in items)

    def test_unavailable_hidden_by_default(self, store):
        unavailable = {bp.product_id for bp in store.list_branch_products("branch-1") if not bp.is_available}
        assert unavailable
        ids = {i.id for i in catalog_service.list_products(store, "branch-1")}
        assert not ids & unavailable

    def test_all_branch_view_has_no_price(self, store):
        items = catalog_service.list_products(store, None)
        assert len(items) == len(store.list_products())
        assert all(i.price is None for i in items)

    def test_category_filter(self, store):
        items = catalog_service.list_products(store, None, category_id="cat-1")
        assert items and all(i.category_id == "cat-1" for i in items)


class TestAuditLog:

    def test_filters(self, store):
        cancels = audit_service.list_logs(store, None, action=AuditAction.ORDER_CANCELLED)
        assert cancels and all(log.action == AuditAction.ORDER_CANCELLED for log in cancels)
        stamps = [log.created_at for log in cancels]
        assert stamps == sorted(stamps, reverse=True)

    def test_search_matches_action_label(self, store):
        logs = audit_service.list_logs(store, None, search="price change")
        assert logs and all(log.action == AuditAction.PRICE_CHANGE for log in logs)

    def test_branch_scope(self, store):
        logs = audit_service.list_logs(store, "branch-2")
        assert logs and all(log.branch_id == "branch-2" for log in logs)


class TestSearch:

    def test_empty_query(self, store):
        results = search_service.search(store, "   ", None)
        assert results.total == 0

    def test_finds_branches_by_name_or_address(self, store):
        results = search_service.search(store, "DOWNTOWN", None)
        assert [b.id for b in results.branches] == ["branch-1"]

    def test_results_limited_and_scoped(self, store):
        results = search_service.search(store, "ord-", "branch-2")
        assert 0 < len(results.orders) <= 5
        assert all(o.branch_id == "branch-2" for o in results.orders)
        assert results.total >= len(results.orders)

    def test_audit_logs_need_audit_permission(self, store):
        owner_results = search_service.search(store, "maria", "branch-1", role=Role.BRANCH_OWNER)
        assert owner_results.audit_logs
        for role in (Role.SUPERVISOR, Role.CASHIER, "franchisee", None):
            results = search_service.search(store, "maria", "branch-1", role=role)
            assert results.audit_logs == []
            assert [u.id for u in results.users] == ["user-2"]


class TestSettings:

    def test_defaults(self, store):
        current = settings_service.get(store)
        assert current.tax_rate == pytest.approx(0.0875)
        assert current.service_fee_rate == 0

    def test_update_requires_permission(self, store, owner):
        with pytest.raises(PermissionDeniedError):
            settings_service.update(store, owner, SettingsUpdate(tax_rate=0.1))

    def test_partial_update(self, store, super_admin):
        updated = settings_service.update(store, super_admin, SettingsUpdate(service_fee_rate=0.02))
        assert updated.service_fee_rate == pytest.approx(0.02)
        assert updated.tax_rate == pytest.approx(0.0875)
        assert store.list_audit_logs()[0].action == AuditAction.SETTINGS_UPDATED

    def test_unknown_role_cannot_update(self, store, session_for):
        with pytest.raises(PermissionDeniedError):
            settings_service.update(store, session_for("root"), SettingsUpdate(tax_rate=0.2))


class TestRoleEnum:

    def test_values(self):
        assert [r.value for r in Role] == ["super_admin", "branch_owner", "supervisor", "cashier"]
