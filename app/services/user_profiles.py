"""
Rasoi API - User Profile Service.

One MongoDB document per userId holding caller-defined application state
(pantry, meals, shop, approved dishes, avoid-list, messaging settings...).
The field set is open and never validated here.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from database import Database
from app.utils.validation import require

logger = logging.getLogger(__name__)

# Keys a caller may not overwrite through save()
RESERVED_FIELDS = ("_id", "userId")


def _list_length(value: Any) -> int:
    return len(value) if isinstance(value, list) else 0


class UserProfileService:
    """Upsert, load and delete user profile documents."""

    def __init__(self, database: Database):
        self.database = database

    async def save(self, user_id: Any, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge fields into the user's profile, creating it if absent.

        Every top-level key in fields overwrites the stored key; stored keys
        not present in fields are left untouched. savedAt is always set
        here, never taken from the caller.

        Args:
            user_id: Profile key.
            fields: Caller-defined fields to store.

        Returns:
            dict: {"savedAt": datetime}

        Raises:
            ValidationError: If user_id is missing.
        """
        require(user_id, "userId")

        doc = {key: value for key, value in fields.items() if key not in RESERVED_FIELDS}
        doc["savedAt"] = datetime.now(timezone.utc)

        users = await self.database.users()
        await users.update_one({"userId": user_id}, {"$set": doc}, upsert=True)

        return {"savedAt": doc["savedAt"]}

    async def load(self, user_id: Optional[str]) -> Dict[str, Any]:
        """Fetch a profile; {"found": False} if it was never saved."""
        require(user_id, "userId")

        users = await self.database.users()
        user = await users.find_one({"userId": user_id}, projection={"_id": 0})

        if user is None:
            return {"found": False}
        return {"found": True, **user}

    async def delete(self, user_id: Optional[str]) -> Dict[str, Any]:
        """
        Delete a profile and every weekly menu saved for it.

        The two deletes are independent: if the second fails, the profile
        stays deleted and its menus remain.
        """
        require(user_id, "userId")

        users = await self.database.users()
        await users.delete_one({"userId": user_id})

        menus = await self.database.menus()
        result = await menus.delete_many({"userId": user_id})
        logger.info(f"Deleted user {user_id} and {result.deleted_count} menus")

        return {"success": True}

    async def list_summaries(self) -> List[Dict[str, Any]]:
        """One summary row per stored profile."""
        users = await self.database.users()
        cursor = users.find(
            {},
            projection={"_id": 0, "userId": 1, "savedAt": 1, "pantry": 1, "meals": 1},
        )

        docs = await cursor.to_list(length=None)

        return [
            {
                "userId": user.get("userId"),
                "savedAt": user.get("savedAt"),
                "pantryCount": _list_length(user.get("pantry")),
                "mealsCount": _list_length(user.get("meals")),
            }
            for user in docs
        ]
