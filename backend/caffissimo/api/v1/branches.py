"""
Branches API Endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from caffissimo.database import DataStore, get_store
from caffissimo.dependencies import require_permission
from caffissimo.models import Branch
from caffissimo.schemas.scope import SessionContext
from caffissimo.services.access_policy import can_access_all_branches

router = APIRouter()


def _visible_branches(store: DataStore, session: SessionContext) -> List[Branch]:
    """All branches for all-branch roles, otherwise just the assigned one."""
    if can_access_all_branches(session.role):
        return store.list_branches()
    return [b for b in store.list_branches() if b.id == session.assigned_branch_id]


@router.get("/", response_model=List[Branch])
async def list_branches(
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    return _visible_branches(store, session)


@router.get("/{branch_id}", response_model=Branch)
async def get_branch(
    branch_id: str,
    session: SessionContext = Depends(require_permission("page:admin")),
    store: DataStore = Depends(get_store),
):
    branch = next((b for b in _visible_branches(store, session) if b.id == branch_id), None)
    if branch is None:
        raise HTTPException(status_code=404, detail="Branch not found")
    return branch
