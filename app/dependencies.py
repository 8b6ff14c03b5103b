"""
Rasoi API - FastAPI Dependencies.

Dependency injection helpers for routes.
"""

from fastapi import Depends

from database import Database, get_database
from settings import Settings, settings
from app.services import (
    AdminService,
    AnthropicRelay,
    MenuHistoryService,
    UserProfileService,
)


def get_settings() -> Settings:
    """Application settings (overridable in tests)."""
    return settings


async def get_user_profile_service(
    database: Database = Depends(get_database)
) -> UserProfileService:
    return UserProfileService(database)


async def get_menu_history_service(
    database: Database = Depends(get_database)
) -> MenuHistoryService:
    return MenuHistoryService(database)


async def get_admin_service(
    profiles: UserProfileService = Depends(get_user_profile_service),
    app_settings: Settings = Depends(get_settings),
) -> AdminService:
    """
    Admin service bound to the configured ADMIN_SECRET.

    Returns:
        AdminService: Service that rejects callers without the secret.
    """
    return AdminService(profiles, app_settings.ADMIN_SECRET)


async def get_anthropic_relay(
    app_settings: Settings = Depends(get_settings)
) -> AnthropicRelay:
    return AnthropicRelay(
        api_key=app_settings.ANTHROPIC_API_KEY,
        api_url=app_settings.ANTHROPIC_API_URL,
        api_version=app_settings.ANTHROPIC_VERSION,
    )
