"""
Cache-Fill Coordinator

Ties the local store to the origin:
- fetch: local hit, or origin fetch + fill on miss
- put: unconditional whole-entry replacement
- delete: explicit removal

Every operation returns a CacheResult. Storage and transport errors are
handled here and never reach the HTTP layer.

No locking is done. A fill racing a put or delete on the same key ends
with whichever write lands last on disk.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .origin import OriginClient
from .storage import FileImageStore

logger = logging.getLogger(__name__)


class CacheOutcome(str, Enum):
    """Terminal state of one cache operation."""
    HIT = "hit"
    FILLED = "filled"
    NOT_FOUND = "not_found"
    WRITTEN = "written"
    WRITE_FAILED = "write_failed"
    DELETED = "deleted"


@dataclass
class CacheResult:
    """Result of a coordinator operation."""
    outcome: CacheOutcome
    data: Optional[bytes] = None
    error: Optional[str] = None


class CacheCoordinator:
    """Read-through image cache over a FileImageStore and an OriginClient."""

    def __init__(self, store: FileImageStore, origin: OriginClient):
        self.store = store
        self.origin = origin

    async def fetch(self, key: str) -> CacheResult:
        """
        Get the entry for `key`.

        This method:
        1. Returns the local entry if there is one
        2. Otherwise fetches it from the origin
        3. Stores the fetched entry before returning it

        A failed fill write is logged and the fetched bytes are still
        returned. Origin failures are not cached.
        """
        cached = await self.store.read(key)
        if cached is not None:
            logger.info(f"[StatusCache] GET {key} - cache hit")
            return CacheResult(CacheOutcome.HIT, data=cached)

        logger.info(f"[StatusCache] GET {key} - cache miss")
        data = await self.origin.fetch(key)
        if data is None:
            logger.info(f"[StatusCache] GET {key} - not found at origin")
            return CacheResult(CacheOutcome.NOT_FOUND)

        try:
            await self.store.write(key, data)
            logger.info(f"[StatusCache] GET {key} - filled from origin ({len(data)} bytes)")
        except OSError as e:
            logger.error(f"[StatusCache] GET {key} - fill failed: {e}")

        return CacheResult(CacheOutcome.FILLED, data=data)

    async def put(self, key: str, data: bytes) -> CacheResult:
        """Store `data` as the entry for `key`, replacing any existing one."""
        try:
            await self.store.write(key, data)
        except OSError as e:
            logger.error(f"[StatusCache] PUT {key} - write failed: {e}")
            return CacheResult(CacheOutcome.WRITE_FAILED, error=str(e))

        logger.info(f"[StatusCache] PUT {key} - stored ({len(data)} bytes)")
        return CacheResult(CacheOutcome.WRITTEN)

    async def delete(self, key: str) -> CacheResult:
        """Remove the entry for `key`."""
        if await self.store.delete(key):
            logger.info(f"[StatusCache] DELETE {key} - removed")
            return CacheResult(CacheOutcome.DELETED)

        logger.info(f"[StatusCache] DELETE {key} - not found")
        return CacheResult(CacheOutcome.NOT_FOUND)
