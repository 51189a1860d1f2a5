"""
Catalog Service
Product listing enriched with the price and availability of one branch.
"""
from typing import List, Optional

from caffissimo.database import DataStore
from caffissimo.schemas.catalog import ProductListItem


class CatalogService:

    def list_products(
        self,
        store: DataStore,
        branch_id: Optional[str],
        category_id: Optional[str] = None,
        include_unavailable: bool = False,
        search: Optional[str] = None,
    ) -> List[ProductListItem]:
        """
        With a branch in scope, each product carries that branch's price and
        availability, and products the branch does not stock are left out.
        Without a branch (all-branch view) prices are omitted.
        """
        categories = {c.id: c.name for c in store.list_categories()}
        pricing = {}
        if branch_id is not None:
            pricing = {bp.product_id: bp for bp in store.list_branch_products(branch_id)}

        q = search.strip().lower() if search else None
        items = []
        for product in store.list_products(category_id=category_id):
            if q and q not in product.name.lower() and q not in product.description.lower():
                continue

            item = ProductListItem(
                id=product.id,
                name=product.name,
                description=product.description,
                category_id=product.category_id,
                category_name=categories.get(product.category_id),
                tags=product.tags,
            )
            if branch_id is not None:
                bp = pricing.get(product.id)
                if bp is None:
                    continue
                if not bp.is_available and not include_unavailable:
                    continue
                item = item.model_copy(update={
                    "price": bp.price,
                    "is_available": bp.is_available,
                    "is_visible": bp.is_visible,
                })
            items.append(item)
        return items


# Singleton
catalog_service = CatalogService()
