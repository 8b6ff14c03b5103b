"""
Rasoi API - Menu History Service.

Weekly menus keyed by (userId, weekStart). weekStart is an ISO date
string, so sorting it lexically sorts it chronologically.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from database import Database
from app.utils.validation import require

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_WEEKS = 4
MAX_HISTORY_WEEKS = 520


def parse_weeks(value: Any) -> int:
    """
    Coerce a history window to a positive week count.

    Non-numeric and non-positive values fall back to the default; absurdly
    large ones are clamped to ten years.

    Example:
        >>> parse_weeks("2")
        2
        >>> parse_weeks("abc")
        4
        >>> parse_weeks(0)
        4
    """
    if isinstance(value, bool):
        return DEFAULT_HISTORY_WEEKS
    try:
        weeks = int(value)
    except (TypeError, ValueError):
        return DEFAULT_HISTORY_WEEKS

    if weeks <= 0:
        return DEFAULT_HISTORY_WEEKS
    return min(weeks, MAX_HISTORY_WEEKS)


def recent_dishes(records: List[Dict[str, Any]]) -> List[str]:
    """Distinct meal names across records, in first-seen order."""
    seen: Dict[str, None] = {}
    for record in records:
        meals = record.get("meals")
        if not isinstance(meals, list):
            continue
        for meal in meals:
            name = meal.get("name") if isinstance(meal, dict) else None
            if isinstance(name, str) and name:
                seen.setdefault(name, None)
    return list(seen)


class MenuHistoryService:
    """Save and query weekly menus."""

    def __init__(self, database: Database):
        self.database = database

    async def save_menu(
        self,
        user_id: Any,
        week_start: Any,
        meals: Any = None,
        shop: Any = None,
    ) -> Dict[str, Any]:
        """
        Upsert the menu for one user and week.

        Args:
            user_id: Owner of the menu.
            week_start: ISO date of the first day of the week.
            meals: Meal entries, each expected to carry a "name". Stored as
                sent; None becomes an empty list.
            shop: Shopping list payload, stored as given.

        Returns:
            dict: {"success": True}

        Raises:
            ValidationError: If user_id or week_start is missing.
        """
        require(user_id, "userId")
        require(week_start, "weekStart")

        menus = await self.database.menus()
        await menus.update_one(
            {"userId": user_id, "weekStart": week_start},
            {"$set": {
                "meals": meals if meals is not None else [],
                "shop": shop,
                "savedAt": datetime.now(timezone.utc),
            }},
            upsert=True,
        )
        return {"success": True}

    async def current_menu(self, user_id: Optional[str], week_start: Optional[str]) -> Dict[str, Any]:
        """Exact lookup of one week's menu."""
        require(user_id, "userId")
        require(week_start, "weekStart")

        menus = await self.database.menus()
        record = await menus.find_one(
            {"userId": user_id, "weekStart": week_start},
            projection={"_id": 0},
        )

        if record is None:
            return {"found": False}
        return {"found": True, **record}

    async def history(self, user_id: Optional[str], weeks: Any = DEFAULT_HISTORY_WEEKS) -> Dict[str, Any]:
        """
        Most recent menus for a user plus the dishes they used.

        Args:
            user_id: Owner of the menus.
            weeks: How many records to return, newest weekStart first.

        Returns:
            dict: {"found": bool, "weeks": [...], "recentDishes": [...]}
        """
        require(user_id, "userId")
        limit = parse_weeks(weeks)

        menus = await self.database.menus()
        cursor = (
            menus.find({"userId": user_id}, projection={"_id": 0})
            .sort("weekStart", DESCENDING)
            .limit(limit)
        )
        records = await cursor.to_list(length=limit)

        return {
            "found": len(records) > 0,
            "weeks": records,
            "recentDishes": recent_dishes(records),
        }
