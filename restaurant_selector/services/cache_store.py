"""Local JSON snapshot of the registrations listing."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from restaurant_selector.config import get_config

logger = logging.getLogger(__name__)


class CacheStore:
    """Reads and writes the single cache file holding the last fetch.

    The file mirrors the API response shape, ``{"result": [...]}``, and is
    overwritten entirely on every write.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        """Initialize the store.

        Args:
            path: Cache file location; defaults to the configured cache file
        """
        self.path = Path(path) if path is not None else get_config().cache_file

    def exists(self) -> bool:
        """Check whether the cache file is present and readable."""
        try:
            return self.path.is_file() and os.access(self.path, os.R_OK)
        except OSError:
            return False

    def read(self) -> list[Any]:
        """Load the cached registration entries.

        Returns:
            The ``result`` list from the cache file, or an empty list if the
            file cannot be read or parsed
        """
        try:
            with self.path.open(encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading cache file {self.path}: {e}")
            return []

        result = document.get("result") if isinstance(document, dict) else None
        if not isinstance(result, list):
            logger.error(f"Cache file {self.path} has no 'result' list")
            return []

        logger.info(f"Loaded {len(result)} registrations from {self.path}")
        return result

    def write(self, data: list[Any]) -> None:
        """Overwrite the cache file with the given registration entries.

        Raises:
            OSError: If the file cannot be written
        """
        with self.path.open("w", encoding="utf-8") as f:
            json.dump({"result": data}, f, ensure_ascii=False)
        logger.info(f"Saved {len(data)} registrations to {self.path}")
