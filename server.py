"""Run the match stats HTTP server.

Usage:
  python server.py
  python server.py --host 127.0.0.1 --port 3000 --data-dir ./data --log-dir ./log

Environment (read by config.py at import):
  STATS_DATA_DIR, STATS_LOG_DIR, STATS_DATA_PREFIX, STATS_HOST, STATS_PORT, STATS_LOG_LEVEL
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

import uvicorn

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Match stats tracker server")
    p.add_argument("--host", default=None, help="bind address (default: STATS_HOST or 0.0.0.0)")
    p.add_argument("--port", type=int, default=None, help="port (default: STATS_PORT or 3000)")
    p.add_argument("--data-dir", default=None, help="season JSON directory")
    p.add_argument("--log-dir", default=None, help="match log directory")
    p.add_argument("--reload", action="store_true", help="auto-reload on code changes (dev)")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    # Directory overrides must land in the environment before config is imported.
    if args.data_dir:
        os.environ["STATS_DATA_DIR"] = os.path.abspath(args.data_dir)
    if args.log_dir:
        os.environ["STATS_LOG_DIR"] = os.path.abspath(args.log_dir)

    import config

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    host = args.host or config.HOST
    port = args.port or config.PORT
    logger.info("Server running at http://%s:%d", host, port)
    logger.info("Season data: %s", config.DATA_DIR)
    logger.info("Logs will be saved to: %s", config.LOG_DIR)

    uvicorn.run("app.main:app", host=host, port=port, reload=bool(args.reload), log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
