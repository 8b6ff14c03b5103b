# app/routes/admin.py
"""Rasoi API - Admin Routes."""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.dependencies import get_admin_service
from app.services.admin import AdminService

router = APIRouter()


@router.get("/users")
async def list_users(
    secret: Optional[str] = Query(default=None),
    admin: AdminService = Depends(get_admin_service)
):
    """List all users (protected by ADMIN_SECRET)."""
    return await admin.list_users(secret)
