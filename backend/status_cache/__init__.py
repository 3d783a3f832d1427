"""
Status Image Cache

Caches HTTP status code images on local disk and fills misses from a remote
origin.

Features:
- Three-digit key validation before any I/O
- Read-through fetch with fill on miss
- Explicit put and delete of cached images
- No negative caching of origin failures
"""

from .app import create_app
from .config import CacheServerConfig
from .coordinator import CacheCoordinator, CacheOutcome, CacheResult
from .keys import validate_key
from .origin import OriginClient
from .storage import FileImageStore

__all__ = [
    "create_app",
    "CacheServerConfig",
    "CacheCoordinator",
    "CacheOutcome",
    "CacheResult",
    "validate_key",
    "OriginClient",
    "FileImageStore",
]
