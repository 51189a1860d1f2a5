"""
User Model with Role-Based Access Control
"""
from typing import Optional
import enum

from pydantic import BaseModel, EmailStr

from caffissimo.models.common import UtcDateTime


class Role(str, enum.Enum):
    """User roles for RBAC. Privilege is not ranked; see config.permissions."""
    SUPER_ADMIN = "super_admin"
    BRANCH_OWNER = "branch_owner"
    SUPERVISOR = "supervisor"
    CASHIER = "cashier"


class User(BaseModel):
    id: str
    name: str
    email: EmailStr
    role: Role
    branch_id: Optional[str] = None  # None for super admins (not pinned to a branch)
    avatar: str = ""
    is_active: bool = True
    created_at: UtcDateTime
    updated_at: UtcDateTime

    class Config:
        frozen = True

    def __repr__(self):
        return f"<User {self.email} ({self.role.value})>"
