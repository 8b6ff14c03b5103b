# app/routes/profile.py
"""
Rasoi API - Profile Routes (MongoDB).

Save, load and delete the per-user application state document.
"""

from fastapi import APIRouter, Body, Depends, Query
from typing import Any, Optional

from app.dependencies import get_user_profile_service
from app.services.user_profiles import UserProfileService

router = APIRouter()


@router.post("/save")
async def save_profile(
    payload: Any = Body(default=None),
    profiles: UserProfileService = Depends(get_user_profile_service)
):
    """
    Save user data.

    Body: { userId, pantry, meals, shop, dishes, approved, tgTok, tgCid, avoid, ... }
    Fields not sent are left as they were.
    """
    if not isinstance(payload, dict):
        payload = {}
    result = await profiles.save(payload.get("userId"), payload)
    return {"success": True, **result}


@router.get("/load")
async def load_profile(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    profiles: UserProfileService = Depends(get_user_profile_service)
):
    """Load user data."""
    return await profiles.load(user_id)


@router.delete("/delete")
async def delete_profile(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    profiles: UserProfileService = Depends(get_user_profile_service)
):
    """Delete user data and all of the user's saved menus."""
    return await profiles.delete(user_id)
