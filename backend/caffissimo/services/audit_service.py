"""
Audit Service
Append-only log of admin actions. There is no update or delete path.
"""
import logging
from typing import Any, Dict, List, Optional

from caffissimo.database import DataStore
from caffissimo.models import ACTION_LABELS, AuditAction, AuditLog
from caffissimo.schemas.scope import DateInterval, SessionContext
from caffissimo.utils.timezone_helpers import utcnow

logger = logging.getLogger(__name__)


def _matches(log: AuditLog, q: str) -> bool:
    label = ACTION_LABELS.get(log.action, log.action.value)
    return (
        q in log.user_name.lower()
        or q in log.entity_type.lower()
        or q in log.entity_id.lower()
        or q in label.lower()
    )


class AuditService:

    def record(
        self,
        store: DataStore,
        session: SessionContext,
        action: AuditAction,
        entity_type: str,
        entity_id: str,
        branch_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> AuditLog:
        log = AuditLog(
            id=store.next_id("log"),
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=session.user_id or "unknown",
            user_name=session.user_name or str(getattr(session.role, "value", session.role)),
            branch_id=branch_id,
            details=details or {},
            created_at=utcnow(),
        )
        store.append_audit_log(log)
        logger.info("Audit %s on %s %s by %s", action.value, entity_type, entity_id, log.user_id)
        return log

    def list_logs(
        self,
        store: DataStore,
        branch_id: Optional[str],
        interval: Optional[DateInterval] = None,
        action: Optional[AuditAction] = None,
        search: Optional[str] = None,
    ) -> List[AuditLog]:
        """Newest first."""
        logs = store.list_audit_logs(branch_id=branch_id, interval=interval)
        if action is not None:
            logs = [log for log in logs if log.action == action]
        if search:
            q = search.strip().lower()
            logs = [log for log in logs if _matches(log, q)]
        return sorted(logs, key=lambda log: log.created_at, reverse=True)


# Singleton
audit_service = AuditService()
