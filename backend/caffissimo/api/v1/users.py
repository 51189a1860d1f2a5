"""
Users API Endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import require_permission
from caffissimo.models import Role, User
from caffissimo.schemas.scope import SessionContext
from caffissimo.services.scope_resolver import resolve_session_branch

router = APIRouter()


@router.get("/", response_model=List[User])
async def list_users(
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
    role: Optional[Role] = Query(None),
    search: Optional[str] = Query(None),
):
    """Users in the session's branch scope (every user for an all-branch view)"""
    users = store.list_users(
        branch_id=resolve_session_branch(session),
        role=role.value if role else None,
    )
    if search:
        q = search.strip().lower()
        users = [u for u in users if q in u.name.lower() or q in u.email.lower()]
    return users
