"""
File Image Store

One file per key under the cache root:

cache_dir/
├── 200.jpg
├── 404.jpg
└── ...

The extension is always .jpg, whatever the payload actually is.
Blocking file calls run in a worker thread so the event loop stays free.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class FileImageStore:
    """Flat key -> bytes mapping backed by a directory."""

    def __init__(self, cache_dir: Union[str, Path]):
        self.cache_dir = Path(cache_dir)

    def ensure_root(self) -> bool:
        """
        Create the cache directory (and parents) if missing.

        Returns:
            True if the directory was created, False if it already existed.

        Raises:
            OSError: if the directory cannot be created.
        """
        if self.cache_dir.is_dir():
            return False
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"[CacheStore] Created cache directory: {self.cache_dir}")
        return True

    def path_for(self, key: str) -> Path:
        """Get the file path for a cached entry."""
        return self.cache_dir / f"{key}.jpg"

    async def read(self, key: str) -> Optional[bytes]:
        """
        Read the entry for `key`.

        Returns:
            The stored bytes, or None when the entry is absent or unreadable.
        """
        path = self.path_for(key)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            return None
        except OSError as e:
            # Unreadable entries behave like misses
            logger.warning(f"[CacheStore] Failed to read {path}: {e}")
            return None

    async def write(self, key: str, data: bytes) -> None:
        """
        Replace the entry for `key` with `data`.

        Raises:
            OSError: if the file cannot be written.
        """
        path = self.path_for(key)
        await asyncio.to_thread(path.write_bytes, data)
        logger.debug(f"[CacheStore] Wrote {path} ({len(data)} bytes)")

    async def delete(self, key: str) -> bool:
        """
        Remove the entry for `key`.

        Returns:
            True if removed, False if it was absent or could not be removed.
        """
        path = self.path_for(key)
        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error(f"[CacheStore] Failed to remove {path}: {e}")
            return False
        logger.debug(f"[CacheStore] Removed {path}")
        return True
