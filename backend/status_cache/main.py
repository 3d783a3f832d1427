"""
Command line entry point.

    status-cache -h 127.0.0.1 -p 3000 -c ./cache
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import uvicorn

from .app import create_app
from .config import LOG_LEVEL, CacheServerConfig
from .storage import FileImageStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    # -h is the host, so help moves to --help only
    parser = argparse.ArgumentParser(
        prog="status-cache",
        description="Caching proxy for HTTP status code images.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("-h", "--host", required=True, help="Server address")
    parser.add_argument("-p", "--port", required=True, type=int, help="Server port")
    parser.add_argument("-c", "--cache", required=True, type=Path, help="Cache directory path")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> CacheServerConfig:
    args = build_parser().parse_args(argv)
    return CacheServerConfig(host=args.host, port=args.port, cache_dir=args.cache)


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_config(argv)

    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        FileImageStore(config.cache_dir).ensure_root()
    except OSError as e:
        logger.error(f"[StatusCache] Failed to start server: {e}")
        return 1

    app = create_app(config)
    logger.info(f"[StatusCache] Serving on http://{config.host}:{config.port}")
    logger.info(f"[StatusCache] Cache directory: {config.cache_dir}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
