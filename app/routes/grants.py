from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.auth import SessionUser, require_session_user
from app.services.grants import use_grants

router = APIRouter(prefix="/api/grants", tags=["grants"])


class ObjectData(BaseModel):
    """Integram object fields relevant to access checks."""
    ownerId: Optional[Any] = None
    owner_id: Optional[Any] = None
    grants: Optional[Dict[str, Any]] = None


class GrantCheckRequest(BaseModel):
    object: Optional[ObjectData] = Field(default=None)


@router.post("/check")
async def check_grants(
    payload: GrantCheckRequest,
    user: SessionUser = Depends(require_session_user),
):
    """Return view/edit/delete permissions of the session user for an object."""
    object_data = payload.object.model_dump(exclude_unset=True) if payload.object else None
    return use_grants(user).summary(object_data)
