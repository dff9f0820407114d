"""Data models for the Restaurant Week selector."""

from restaurant_selector.models.filters import (
    MENU_TYPE_LABELS,
    FilterConfig,
    MealOption,
)
from restaurant_selector.models.registration import (
    MenuType,
    Period,
    Registration,
    Restaurant,
)

__all__ = [
    "MENU_TYPE_LABELS",
    "FilterConfig",
    "MealOption",
    "MenuType",
    "Period",
    "Registration",
    "Restaurant",
]
