"""Rasoi API - Services Package."""

from .user_profiles import UserProfileService
from .menu_history import MenuHistoryService, parse_weeks, recent_dishes
from .admin import AdminService
from .anthropic_relay import AnthropicRelay

__all__ = [
    "UserProfileService",
    "MenuHistoryService",
    "parse_weeks",
    "recent_dishes",
    "AdminService",
    "AnthropicRelay",
]
