"""
Access policy - one predicate per gated action, each a pure function of the role.

Every predicate is a lookup in the flat ROLE_PERMISSIONS table. Unknown roles
(or values that are not roles at all) are denied; nothing here raises.
Branch scoping is not decided here, see services.scope_resolver.
"""
import logging
from typing import Any, Dict, List, Optional

from caffissimo.config.permissions import ALL_PERMISSIONS, ROLE_PERMISSIONS, ROLES
from caffissimo.models.user import Role

logger = logging.getLogger(__name__)


def _role_key(role: Any) -> Optional[str]:
    if isinstance(role, Role):
        return role.value
    if isinstance(role, str):
        return role
    return None


def has_permission(role: Any, key: str) -> bool:
    """True only if `key` is explicitly granted to `role`."""
    role_key = _role_key(role)
    granted = ROLE_PERMISSIONS.get(role_key) if role_key is not None else None
    if granted is None:
        logger.debug("Denying %s to unrecognised role %r", key, role)
        return False
    return key in granted


def granted_permissions(role: Any) -> List[str]:
    """Sorted permission keys granted to `role` (empty for unknown roles)."""
    return sorted(key for key in ALL_PERMISSIONS if has_permission(role, key))


def permission_matrix() -> Dict[str, Dict[str, bool]]:
    """Return {role: {permission_key: granted}} for every role."""
    return {
        role: {key: has_permission(role, key) for key in ALL_PERMISSIONS}
        for role in ROLES
    }


def can_access_all_branches(role: Any) -> bool:
    return has_permission(role, "scope:all_branches")


def can_manage_users(role: Any) -> bool:
    return has_permission(role, "feature:manage_users")


def can_manage_offers(role: Any) -> bool:
    return has_permission(role, "feature:manage_offers")


def can_manage_products(role: Any) -> bool:
    return has_permission(role, "feature:manage_products")


def can_manage_branch(role: Any) -> bool:
    return has_permission(role, "feature:manage_branch")


def can_view_reports(role: Any) -> bool:
    return has_permission(role, "page:reports")


def can_cancel_orders(role: Any) -> bool:
    return has_permission(role, "feature:cancel_orders")


def can_submit_fridge_report(role: Any) -> bool:
    return has_permission(role, "feature:submit_fridge_report")


def can_view_attendance(role: Any) -> bool:
    return has_permission(role, "page:attendance")


def can_view_audit_logs(role: Any) -> bool:
    return has_permission(role, "page:audit_logs")


def can_manage_settings(role: Any) -> bool:
    return has_permission(role, "feature:manage_settings")


def can_create_branch(role: Any) -> bool:
    return has_permission(role, "feature:create_branch")


def can_access_admin(role: Any) -> bool:
    return has_permission(role, "page:admin")


def can_compare_branches(role: Any) -> bool:
    return has_permission(role, "report:branch_comparison")
