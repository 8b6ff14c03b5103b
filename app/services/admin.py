"""
Rasoi API - Admin Service.

Read-only listing of stored profiles, gated by ADMIN_SECRET.
"""

import logging
from typing import Any, Dict, Optional

from app.services.user_profiles import UserProfileService
from app.utils.errors import AuthorizationError
from app.utils.security import secrets_match

logger = logging.getLogger(__name__)


class AdminService:
    """Aggregate views over user profiles."""

    def __init__(self, profiles: UserProfileService, admin_secret: Optional[str]):
        self.profiles = profiles
        self.admin_secret = admin_secret

    async def list_users(self, supplied_secret: Optional[str]) -> Dict[str, Any]:
        """
        Summarize every stored profile.

        Args:
            supplied_secret: Secret sent by the caller.

        Returns:
            dict: {"users": count, "data": [{userId, savedAt, pantryCount, mealsCount}]}

        Raises:
            AuthorizationError: If no secret is configured or it does not match.
        """
        if not secrets_match(supplied_secret, self.admin_secret):
            logger.warning("Rejected admin listing request")
            raise AuthorizationError("Forbidden")

        rows = await self.profiles.list_summaries()
        return {"users": len(rows), "data": rows}
