"""Filtering and random sampling of registrations."""

import logging
import random
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from restaurant_selector.config import get_config
from restaurant_selector.models import FilterConfig, Registration

logger = logging.getLogger(__name__)


def parse_registrations(raw: Iterable[Any]) -> list[Registration]:
    """Validate raw JSON entries into Registration models.

    Entries that fail validation (for example a missing ``menuType.id``) are
    skipped and logged; the rest are returned in their original order.
    """
    registrations = []
    skipped = 0
    for index, entry in enumerate(raw):
        if isinstance(entry, Registration):
            registrations.append(entry)
            continue
        try:
            registrations.append(Registration.model_validate(entry))
        except ValidationError as e:
            skipped += 1
            logger.warning(
                f"Skipping malformed registration at index {index}: "
                f"{e.error_count()} validation error(s)"
            )
            logger.debug(f"Validation details: {e}")

    if skipped:
        logger.warning(f"Skipped {skipped} malformed registration(s)")
    return registrations


def matches(registration: Registration, config: FilterConfig) -> bool:
    """Check a registration against the meal and menu type selection."""
    if registration.menu_type.id not in config.menu_types:
        return False
    return not registration.period_ids().isdisjoint(config.meal.period_ids)


def select(
    data: Any,
    config: FilterConfig,
    rng: random.Random | None = None,
    base_url: str | None = None,
) -> list[str]:
    """Pick up to ``config.count`` random registrations matching the filters.

    Args:
        data: Raw registration entries or Registration models
        config: Validated filter selection
        rng: Random source for the shuffle; defaults to the OS random source
        base_url: Base URL for registration links; defaults to the configured one

    Returns:
        Formatted suggestion lines, in random order
    """
    if not isinstance(data, list) or not data:
        return []

    if rng is None:
        rng = random.SystemRandom()
    if base_url is None:
        base_url = get_config().restaurant_base_url

    candidates = [
        registration
        for registration in parse_registrations(data)
        if matches(registration, config)
    ]
    logger.info(f"{len(candidates)} of {len(data)} registrations match the filters")

    # random.shuffle is an in-place Fisher-Yates shuffle
    rng.shuffle(candidates)

    return [registration.render(base_url) for registration in candidates[: config.count]]
