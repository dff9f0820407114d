"""Chooses between the cache file and the remote API."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from restaurant_selector.services.cache_store import CacheStore
from restaurant_selector.services.registration_client import RegistrationClient

logger = logging.getLogger(__name__)


class DataSource(str, Enum):
    """Where the registrations for this run came from."""

    REMOTE = "remote"
    CACHE = "cache"


@dataclass(frozen=True)
class LoadResult:
    """Raw registration entries and their source."""

    registrations: list[Any]
    source: DataSource


class DataSourceSelector:
    """Loads registrations from the cache, or from the API when needed."""

    def __init__(
        self,
        cache: CacheStore | None = None,
        client: RegistrationClient | None = None,
    ) -> None:
        self.cache = cache or CacheStore()
        self.client = client or RegistrationClient()

    def load(self, force_refresh: bool = False) -> LoadResult:
        """Load registrations for this run.

        Fetches from the API when the cache file is missing or a refresh is
        forced, saving the response to the cache. Otherwise reads the cache.

        Args:
            force_refresh: Ignore an existing cache file

        Returns:
            LoadResult with the raw entries and the source used
        """
        if force_refresh or not self.cache.exists():
            if force_refresh:
                logger.info("Refresh forced, querying the registrations API")
            else:
                logger.info(f"No cache at {self.cache.path}, querying the API")

            registrations = self.client.fetch()
            try:
                self.cache.write(registrations)
            except OSError as e:
                logger.error(f"Could not save cache file {self.cache.path}: {e}")
            return LoadResult(registrations=registrations, source=DataSource.REMOTE)

        return LoadResult(registrations=self.cache.read(), source=DataSource.CACHE)
