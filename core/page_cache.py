"""
Rendered-page cache backed by Valkey.

Pages are cached under "<prefix><path>". Revalidating a path drops the
cached render so the next request recomputes it.
"""

import logging

from clients.valkey_client import ValkeyClient
from core.config import DashboardConfig

logger = logging.getLogger(__name__)


class PageCache:
    """Marks cached page renders stale."""

    def __init__(self, valkey: ValkeyClient, config: DashboardConfig):
        self._valkey = valkey
        self._prefix = config.page_cache_prefix

    def _key(self, path: str) -> str:
        return f"{self._prefix}{path}"

    def revalidate_path(self, path: str) -> None:
        """Invalidate the cached render of path. Safe if nothing is cached."""
        existed = self._valkey.delete(self._key(path))
        logger.debug("Revalidated %s (cached=%s)", path, existed)
