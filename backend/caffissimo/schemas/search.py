"""Global search results."""
from typing import List

from pydantic import BaseModel

from caffissimo.models import AuditLog, Branch, Order, Product, User


class SearchResults(BaseModel):
    query: str
    total: int = 0
    orders: List[Order] = []
    products: List[Product] = []
    users: List[User] = []
    branches: List[Branch] = []
    audit_logs: List[AuditLog] = []
