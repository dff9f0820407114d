"""Data models for Restaurant Week registrations."""

from pydantic import BaseModel, ConfigDict, Field


class Restaurant(BaseModel):
    """Restaurant taking part in the event."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Restaurant display name")


class MenuType(BaseModel):
    """Menu tier offered by a restaurant."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Menu type id (1-4)")
    label: str = Field(..., description="Menu type display label")


class Period(BaseModel):
    """Meal period a registration is served in."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Period id (1 = lunch, 2 = dinner)")


class Registration(BaseModel):
    """One restaurant's participation record in the event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | str = Field(..., description="Registration id")
    restaurant: Restaurant = Field(..., description="Restaurant details")
    menu_type: MenuType = Field(..., alias="menuType", description="Menu tier")
    periods: tuple[Period, ...] = Field(
        default=(), description="Meal periods offered"
    )

    def period_ids(self) -> set[int]:
        """Return the ids of the meal periods offered."""
        return {period.id for period in self.periods}

    def render(self, base_url: str) -> str:
        """Format the registration as a single suggestion line."""
        return (
            f"{self.restaurant.name} - {self.menu_type.label} "
            f"[{base_url.rstrip('/')}/{self.id}]"
        )
