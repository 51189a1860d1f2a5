"""
Platform Service
External sales entries for delivery platforms: manual entry and CSV import.

Import format: a header row `date,total_sales,order_count`, one row per day.
Dates are YYYY-MM-DD (DD/MM/YYYY also accepted). Rows that cannot be parsed
are skipped and counted; a missing header rejects the whole file.
"""
import csv
import io
import logging
import math
from datetime import date, datetime
from typing import List, Optional, Tuple

from caffissimo.database import DataStore
from caffissimo.models import EntrySource, ExternalSalesEntry, Platform
from caffissimo.schemas.platforms import ExternalSalesCreate, ExternalSalesImportResult
from caffissimo.schemas.scope import SessionContext
from caffissimo.services.errors import ExternalSalesImportError
from caffissimo.services.scope_resolver import resolve_session_branch
from caffissimo.utils.timezone_helpers import utcnow

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("date", "total_sales", "order_count")
DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


def _parse_date(value: str) -> Optional[date]:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


def parse_sales_csv(text: str) -> Tuple[List[Tuple[date, float, int]], int]:
    """Return ([(date, total_sales, order_count)], skipped_rows)."""
    text = text.lstrip("\ufeff")  # BOM from Excel
    reader = csv.DictReader(io.StringIO(text))
    if not reader.fieldnames:
        raise ExternalSalesImportError("CSV has no headers")

    reader.fieldnames = [h.strip().lower() for h in reader.fieldnames]
    missing = [c for c in REQUIRED_COLUMNS if c not in reader.fieldnames]
    if missing:
        raise ExternalSalesImportError(f"CSV is missing column(s): {', '.join(missing)}")

    rows = []
    skipped = 0
    for line_no, row in enumerate(reader, start=2):
        day = _parse_date((row.get("date") or "").strip())
        try:
            total_sales = float((row.get("total_sales") or "").strip().replace(",", ""))
            order_count = int((row.get("order_count") or "").strip() or 0)
        except ValueError:
            total_sales, order_count = -1.0, -1
        if day is None or not math.isfinite(total_sales) or total_sales < 0 or order_count < 0:
            logger.warning("Skipping unparseable sales CSV line %d: %r", line_no, row)
            skipped += 1
            continue
        rows.append((day, total_sales, order_count))
    return rows, skipped


class PlatformService:

    def _target_branch(self, store: DataStore, session: SessionContext, requested: Optional[str]) -> str:
        branch_id = resolve_session_branch(session) or requested
        if not branch_id:
            raise ExternalSalesImportError("A branch is required for external sales entries")
        if store.get_branch(branch_id) is None:
            raise ExternalSalesImportError(f"Unknown branch {branch_id}")
        return branch_id

    def add_entry(self, store: DataStore, session: SessionContext, data: ExternalSalesCreate) -> ExternalSalesEntry:
        branch_id = self._target_branch(store, session, data.branch_id)
        entry = ExternalSalesEntry(
            id=store.next_id("ext"),
            branch_id=branch_id,
            platform=data.platform,
            date=data.date,
            total_sales=data.total_sales,
            order_count=data.order_count,
            source=EntrySource.MANUAL,
            created_at=utcnow(),
        )
        store.add_external_sales_entries([entry])
        logger.info("Manual %s entry %s for %s on %s", entry.platform.value, entry.id, branch_id, entry.date)
        return entry

    def import_csv(
        self,
        store: DataStore,
        session: SessionContext,
        platform: Platform,
        csv_text: str,
        branch_id: Optional[str] = None,
    ) -> ExternalSalesImportResult:
        target = self._target_branch(store, session, branch_id)
        rows, skipped = parse_sales_csv(csv_text)

        now = utcnow()
        entries = [
            ExternalSalesEntry(
                id=store.next_id("ext"),
                branch_id=target,
                platform=platform,
                date=day,
                total_sales=total_sales,
                order_count=order_count,
                source=EntrySource.IMPORT,
                imported_at=now,
                created_at=now,
            )
            for day, total_sales, order_count in rows
        ]
        store.add_external_sales_entries(entries)
        logger.info(
            "Imported %d %s entries for %s (%d rows skipped)",
            len(entries), platform.value, target, skipped,
        )
        return ExternalSalesImportResult(imported=len(entries), skipped=skipped, entries=entries)


# Singleton
platform_service = PlatformService()
