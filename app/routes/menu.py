# app/routes/menu.py
"""Rasoi API - Weekly Menu Routes (MongoDB)."""

from fastapi import APIRouter, Body, Depends, Query
from typing import Any, Optional

from app.dependencies import get_menu_history_service
from app.schemas.menu import MenuSaveRequest
from app.services.menu_history import MenuHistoryService

router = APIRouter()


@router.post("/save")
async def save_menu(
    body: Any = Body(default=None),
    menus: MenuHistoryService = Depends(get_menu_history_service)
):
    """
    Save the menu and shopping list for one week.

    Body: { userId, weekStart, meals, shop }
    """
    request = MenuSaveRequest.from_body(body)
    return await menus.save_menu(
        request.userId,
        request.weekStart,
        meals=request.meals,
        shop=request.shop,
    )


@router.get("/current")
async def get_current_menu(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    week_start: Optional[str] = Query(default=None, alias="weekStart"),
    menus: MenuHistoryService = Depends(get_menu_history_service)
):
    """Get the menu saved for a given week."""
    return await menus.current_menu(user_id, week_start)


@router.get("/history")
async def get_menu_history(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    weeks: Optional[str] = Query(default=None),
    menus: MenuHistoryService = Depends(get_menu_history_service)
):
    """
    Get the most recent weekly menus and the dishes used in them.

    weeks defaults to 4; invalid values fall back to the default.
    """
    return await menus.history(user_id, weeks)
