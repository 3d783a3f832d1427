"""
Status Cache Configuration

Host, port and cache directory come from the command line and have no
defaults. Origin settings can be overridden through the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# ============================================
# Environment
# ============================================

ORIGIN_BASE_URL = os.getenv("STATUS_CACHE_ORIGIN_URL", "https://http.cat")
ORIGIN_TIMEOUT_SECONDS = float(os.getenv("STATUS_CACHE_ORIGIN_TIMEOUT", "30"))
LOG_LEVEL = os.getenv("STATUS_CACHE_LOG_LEVEL", "INFO")


@dataclass
class CacheServerConfig:
    """Everything needed to build and serve the cache."""
    host: str
    port: int
    cache_dir: Path
    origin_base_url: str = ORIGIN_BASE_URL
    origin_timeout: float = ORIGIN_TIMEOUT_SECONDS
