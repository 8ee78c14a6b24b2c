"""
Read-only access to answers given in previous runs of the deployment wizard
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, Union

from galileocli.commands.exceptions import CacheFileError

LOG = logging.getLogger(__name__)


class Cache(Protocol):
    def get_item(self, key: str) -> Optional[Any]:
        ...  # pragma: no cover


class MappingCache:
    """
    Cache backed by an in-memory mapping of answer key to answer
    """

    def __init__(self, items: Optional[Mapping[str, Any]] = None) -> None:
        self._items: Dict[str, Any] = dict(items or {})

    def get_item(self, key: str) -> Optional[Any]:
        return self._items.get(key)


class JsonFileCache(MappingCache):
    """
    Cache loaded from a JSON object file, keyed by answer key.

    A missing file means nothing was answered before and results in an empty cache.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        super().__init__(self._load())

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, Any]:
        if not self._path.exists():
            LOG.debug("No cached answers found at %s", self._path)
            return {}

        try:
            content = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as ex:
            raise CacheFileError(f"Unable to read cached answers from {self._path}: {ex}", wrapped_from=ex) from ex

        if not isinstance(content, dict):
            raise CacheFileError(f"Cached answers in {self._path} must be a JSON object")

        LOG.debug("Loaded %d cached answers from %s", len(content), self._path)
        return content
