"""
Fridge Service
Daily fridge temperature reports. Anything above the configured maximum
(41°F by default) is out of compliance.
"""
import logging
from typing import List, Optional

from caffissimo.config import settings
from caffissimo.database import DataStore
from caffissimo.models import AuditAction, FridgeStockReport, FridgeTemperatureEntry
from caffissimo.schemas.operations import FridgeReportCreate, FridgeReportResponse
from caffissimo.schemas.scope import DateInterval, SessionContext
from caffissimo.services.access_policy import can_submit_fridge_report
from caffissimo.services.audit_service import audit_service
from caffissimo.services.errors import FridgeReportError, PermissionDeniedError
from caffissimo.services.scope_resolver import resolve_session_branch
from caffissimo.utils.timezone_helpers import utcnow

logger = logging.getLogger(__name__)


def out_of_range(report: FridgeStockReport, max_temperature: Optional[float] = None) -> List[FridgeTemperatureEntry]:
    limit = settings.FRIDGE_MAX_TEMPERATURE if max_temperature is None else max_temperature
    return [t for t in report.temperatures if t.temperature > limit]


def to_response(report: FridgeStockReport) -> FridgeReportResponse:
    bad = out_of_range(report)
    return FridgeReportResponse(report=report, compliant=not bad, out_of_range=bad)


class FridgeService:

    def list_reports(
        self,
        store: DataStore,
        branch_id: Optional[str],
        interval: Optional[DateInterval] = None,
        search: Optional[str] = None,
    ) -> List[FridgeReportResponse]:
        reports = store.list_fridge_reports(branch_id=branch_id, interval=interval)
        if search:
            q = search.strip().lower()
            reports = [
                r for r in reports
                if q in r.submitted_by.lower() or (r.notes is not None and q in r.notes.lower())
            ]
        reports = sorted(reports, key=lambda r: (r.date, r.created_at), reverse=True)
        return [to_response(r) for r in reports]

    def submit(self, store: DataStore, session: SessionContext, data: FridgeReportCreate) -> FridgeReportResponse:
        if not can_submit_fridge_report(session.role):
            raise PermissionDeniedError("feature:submit_fridge_report")

        # Branch-pinned roles always report for their own branch.
        branch_id = resolve_session_branch(session) or data.branch_id
        if not branch_id:
            raise FridgeReportError("A branch is required to submit a fridge report")
        if store.get_branch(branch_id) is None:
            raise FridgeReportError(f"Unknown branch {branch_id}")

        report = FridgeStockReport(
            id=store.next_id("fridge"),
            branch_id=branch_id,
            date=data.date,
            temperatures=data.temperatures,
            notes=data.notes,
            submitted_by=session.user_name or str(getattr(session.role, "value", session.role)),
            created_at=utcnow(),
        )
        store.add_fridge_report(report)
        response = to_response(report)

        audit_service.record(
            store,
            session,
            AuditAction.STOCK_REPORT,
            entity_type="FridgeStockReport",
            entity_id=report.id,
            branch_id=branch_id,
            details={"date": report.date.isoformat(), "compliant": response.compliant},
        )
        if response.compliant:
            logger.info("Fridge report %s submitted for %s", report.id, branch_id)
        else:
            logger.warning(
                "Fridge report %s for %s has %d unit(s) above %.1fF",
                report.id, branch_id, len(response.out_of_range), settings.FRIDGE_MAX_TEMPERATURE,
            )
        return response


# Singleton
fridge_service = FridgeService()
