"""Base repository class."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ValidationError

from settings import DATA_DIR


class DataNotFoundError(Exception):
    """Dataset file is missing from the data directory."""

    def __init__(self, path: Path):
        self.path = path
        self.message = f"Dataset not found: {path}"
        super().__init__(self.message)


class BaseRepository:
    """Base repository over JSON datasets with an in-memory cache."""

    def __init__(self, data_dir: Path | str = DATA_DIR):
        self._data_dir = Path(data_dir)
        self._cache: dict[str, Any] = {}
        logger.debug("{} initialized ({})", self.__class__.__name__, self._data_dir)

    def clear_cache(self) -> None:
        """Clear in-memory cache."""
        self._cache.clear()
        logger.debug("Cache cleared")

    def refresh(self) -> None:
        """Drop cached datasets so the next access rereads them from disk."""
        self.clear_cache()
        logger.info("Repository refreshed")

    def _cached(self, key: str, fn: Callable[[], Any]) -> Any:
        """Get from cache or compute."""
        if key not in self._cache:
            self._cache[key] = fn()
            logger.debug("Cache miss: {}", key)
        return self._cache[key]

    def read_json(self, filename: str) -> Any:
        """Read a dataset file."""
        path = self._data_dir / filename
        if not path.exists():
            raise DataNotFoundError(path)
        return json.loads(path.read_text(encoding="utf-8"))

    def load_entities(self, filename: str, schema: type[BaseModel]) -> list:
        """Parse a dataset into entities, skipping records that fail the schema."""
        entities = []
        for i, record in enumerate(self.read_json(filename)):
            try:
                entities.append(schema.model_validate(record).to_entity())
            except ValidationError as e:
                logger.warning("{}[{}] skipped: {} validation errors", filename, i, e.error_count())
        logger.debug("{}: {} entities", filename, len(entities))
        return entities
