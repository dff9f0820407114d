"""Data access services for the Restaurant Week selector."""

from restaurant_selector.services.cache_store import CacheStore
from restaurant_selector.services.data_source import (
    DataSource,
    DataSourceSelector,
    LoadResult,
)
from restaurant_selector.services.registration_client import RegistrationClient

__all__ = [
    "CacheStore",
    "DataSource",
    "DataSourceSelector",
    "LoadResult",
    "RegistrationClient",
]
