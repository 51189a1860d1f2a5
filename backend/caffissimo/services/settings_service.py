"""
Settings Service
Store-wide tax and service fee rates.
"""
import logging

from caffissimo.config import settings
from caffissimo.database import DataStore
from caffissimo.models import AuditAction, StoreSettings
from caffissimo.schemas.operations import SettingsUpdate
from caffissimo.schemas.scope import SessionContext
from caffissimo.services.access_policy import can_manage_settings
from caffissimo.services.audit_service import audit_service
from caffissimo.services.errors import PermissionDeniedError
from caffissimo.utils.timezone_helpers import utcnow

logger = logging.getLogger(__name__)


class SettingsService:

    def get(self, store: DataStore) -> StoreSettings:
        current = store.get_settings()
        if current is None:
            current = StoreSettings(
                tax_rate=settings.TAX_RATE,
                service_fee_rate=settings.SERVICE_FEE_RATE,
                updated_at=utcnow(),
            )
        return current

    def update(self, store: DataStore, session: SessionContext, data: SettingsUpdate) -> StoreSettings:
        if not can_manage_settings(session.role):
            raise PermissionDeniedError("feature:manage_settings")

        current = self.get(store)
        changes = data.model_dump(exclude_none=True)
        updated = StoreSettings(
            id=current.id,
            tax_rate=changes.get("tax_rate", current.tax_rate),
            service_fee_rate=changes.get("service_fee_rate", current.service_fee_rate),
            updated_at=utcnow(),
        )
        store.replace_settings(updated)
        audit_service.record(
            store,
            session,
            AuditAction.SETTINGS_UPDATED,
            entity_type="Settings",
            entity_id=updated.id,
            details={
                "old": {"tax_rate": current.tax_rate, "service_fee_rate": current.service_fee_rate},
                "new": {"tax_rate": updated.tax_rate, "service_fee_rate": updated.service_fee_rate},
            },
        )
        logger.info("Settings updated: tax_rate=%s service_fee_rate=%s", updated.tax_rate, updated.service_fee_rate)
        return updated


# Singleton
settings_service = SettingsService()
