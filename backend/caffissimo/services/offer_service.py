"""
Offer Service
Offer status is never stored; it is derived from the clock and the offer window.
"""
from datetime import datetime
from typing import List, Optional

from caffissimo.database import DataStore
from caffissimo.models import Offer
from caffissimo.schemas.operations import OfferResponse
from caffissimo.utils.timezone_helpers import utcnow


def offer_status(offer: Offer, now: datetime) -> str:
    if not offer.is_active:
        return "inactive"
    if now < offer.start_date:
        return "scheduled"
    if now > offer.end_date:
        return "expired"
    return "active"


def offer_applies_to_branch(offer: Offer, branch_id: str) -> bool:
    return not offer.branch_ids or branch_id in offer.branch_ids


class OfferService:

    def applies_to(self, store: DataStore, offer: Offer) -> str:
        """Human summary of the categories/products an offer covers."""
        parts = []
        if offer.category_ids:
            names = [c.name for c in store.list_categories() if c.id in offer.category_ids]
            parts.append(f"Categories: {', '.join(names)}")
        if offer.product_ids:
            names = []
            for product_id in offer.product_ids[:3]:
                product = store.get_product(product_id)
                if product is not None:
                    names.append(product.name)
            suffix = "..." if len(offer.product_ids) > 3 else ""
            parts.append(f"Products: {', '.join(names)}{suffix}")
        if not parts:
            return "All products"
        return " | ".join(parts)

    def branch_summary(self, store: DataStore, offer: Offer) -> str:
        if not offer.branch_ids:
            return "All branches"
        names = [b.short_name for b in store.list_branches() if b.id in offer.branch_ids]
        return ", ".join(names)

    def list_offers(
        self,
        store: DataStore,
        branch_id: Optional[str] = None,
        status: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> List[OfferResponse]:
        now = now or utcnow()
        result = []
        for offer in store.list_offers():
            if branch_id is not None and not offer_applies_to_branch(offer, branch_id):
                continue
            derived = offer_status(offer, now)
            if status is not None and derived != status:
                continue
            result.append(OfferResponse(
                offer=offer,
                status=derived,
                applies_to=self.applies_to(store, offer),
                branches=self.branch_summary(store, offer),
            ))
        return result


# Singleton
offer_service = OfferService()
