"""Filter configuration built from command-line input."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

MENU_TYPE_LABELS: dict[int, str] = {
    1: "Menu RW",
    2: "Menu +Plus",
    3: "Menu Premium",
    4: "Menu Diamond",
}

VALID_MENU_TYPES = tuple(MENU_TYPE_LABELS)

LUNCH_PERIOD_ID = 1
DINNER_PERIOD_ID = 2


class MealOption(str, Enum):
    """Meal selector accepted on the command line."""

    LUNCH = "lunch"
    DINNER = "dinner"
    BOTH = "both"

    @property
    def period_ids(self) -> frozenset[int]:
        """Period ids accepted for this meal."""
        if self is MealOption.LUNCH:
            return frozenset({LUNCH_PERIOD_ID})
        if self is MealOption.DINNER:
            return frozenset({DINNER_PERIOD_ID})
        return frozenset({LUNCH_PERIOD_ID, DINNER_PERIOD_ID})


class FilterConfig(BaseModel):
    """Validated user selection for one invocation."""

    model_config = ConfigDict(frozen=True)

    meal: MealOption = Field(default=MealOption.BOTH, description="Meal selector")
    menu_types: tuple[int, ...] = Field(
        default=VALID_MENU_TYPES, description="Accepted menu type ids"
    )
    count: int = Field(default=5, ge=1, description="Number of suggestions")
    force_refresh: bool = Field(
        default=False, description="Ignore the cache and query the API"
    )

    @field_validator("menu_types")
    @classmethod
    def check_menu_types(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if not value:
            raise ValueError("at least one menu type is required")
        invalid = [menu_type for menu_type in value if menu_type not in MENU_TYPE_LABELS]
        if invalid:
            raise ValueError(f"menu types out of range 1-4: {invalid}")
        return value
