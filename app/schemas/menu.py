"""
Rasoi API - Menu Schemas.

Pydantic schemas for weekly menu persistence.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MenuSaveRequest(BaseModel):
    """
    Schema for saving one week's menu.

    Only presence of userId and weekStart is checked, by the service. Every
    field accepts any JSON value so malformed payloads are stored as sent
    rather than rejected with a 422.

    Attributes:
        userId: Owner of the menu.
        weekStart: ISO date of the first day of the week.
        meals: Meal entries, each expected to carry a "name".
        shop: Shopping list payload.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "userId": "u_8f3a2c",
                "weekStart": "2026-01-05",
                "meals": [{"day": "Mon", "name": "Dal"}, {"day": "Tue", "name": "Aloo Gobi"}],
                "shop": [{"item": "Toor dal", "qty": "500g"}],
            }
        },
    )

    userId: Any = Field(default=None, description="Owner of the menu")
    weekStart: Any = Field(default=None, description="ISO week start date")
    meals: Any = Field(default=None, description="Meal entries")
    shop: Any = Field(default=None, description="Shopping list payload")

    @classmethod
    def from_body(cls, body: Any) -> "MenuSaveRequest":
        """Build from a raw JSON body; anything but an object counts as empty."""
        return cls.model_validate(body if isinstance(body, dict) else {})
