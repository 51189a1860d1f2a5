"""
Search Service
Case-insensitive substring search across the main admin collections,
limited to what the session's branch scope can see.
"""
from typing import Any, Optional

from caffissimo.database import DataStore
from caffissimo.models import ACTION_LABELS
from caffissimo.schemas.search import SearchResults
from caffissimo.services.access_policy import can_view_audit_logs

RESULTS_PER_KIND = 5


class SearchService:

    def search(
        self,
        store: DataStore,
        query: str,
        branch_id: Optional[str],
        role: Any = None,
        limit: int = RESULTS_PER_KIND,
    ) -> SearchResults:
        """Audit logs are only searched for roles allowed to view them."""
        q = (query or "").strip().lower()
        if not q:
            return SearchResults(query=query or "")

        orders = [
            o for o in store.list_orders(branch_id=branch_id)
            if q in o.order_number.lower() or q in o.id.lower()
        ]
        products = [
            p for p in store.list_products()
            if q in p.name.lower() or q in p.description.lower()
        ]
        users = [
            u for u in store.list_users(branch_id=branch_id)
            if q in u.name.lower() or q in u.email.lower()
        ]
        branches = [
            b for b in store.list_branches()
            if (branch_id is None or b.id == branch_id)
            and (q in b.name.lower() or q in b.address.lower())
        ]
        logs = [] if not can_view_audit_logs(role) else [
            log for log in store.list_audit_logs(branch_id=branch_id)
            if q in log.user_name.lower()
            or q in log.entity_type.lower()
            or q in ACTION_LABELS.get(log.action, "").lower()
        ]

        results = SearchResults(
            query=query,
            orders=orders[:limit],
            products=products[:limit],
            users=users[:limit],
            branches=branches[:limit],
            audit_logs=logs[:limit],
        )
        total = (
            len(results.orders) + len(results.products) + len(results.users)
            + len(results.branches) + len(results.audit_logs)
        )
        return results.model_copy(update={"total": total})


# Singleton
search_service = SearchService()
