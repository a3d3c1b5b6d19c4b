#!/usr/bin/env python3
"""PetAdopt: Single entry point.

Builds the pet store (restoring a snapshot and seeding from CSV when
configured) and serves the JSON API with uvicorn.

Usage:
    python main.py
    python main.py --seed data/pets.csv
    python main.py --snapshot data/store.json
    python main.py --port 8000 --no-browser
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import threading
import time
import webbrowser
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger("petadopt")


def _open_browser(url: str, delay: float = 2.0) -> None:
    """Open browser after a delay to give the server time to start.

    Args:
        url: URL to open in the browser.
        delay: Seconds to wait before opening.
    """
    def _delayed_open():
        time.sleep(delay)
        logger.info("Opening browser at %s", url)
        webbrowser.open(url)

    thread = threading.Thread(target=_delayed_open, daemon=True)
    thread.start()


def main() -> None:
    """Parse arguments, build the app and serve it."""
    parser = argparse.ArgumentParser(description="PetAdopt pet adoption manager")
    parser.add_argument("--port", type=int, default=None, help="Server port")
    parser.add_argument("--host", type=str, default=None, help="Server host")
    parser.add_argument(
        "--seed", type=Path, default=None, help="CSV file to import into an empty store"
    )
    parser.add_argument(
        "--snapshot", type=Path, default=None, help="JSON file to persist the store in"
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open the API docs in a browser",
    )
    args = parser.parse_args()

    from petadopt.config import get_config

    overrides = {
        "host": args.host,
        "port": args.port,
        "seed_csv": args.seed,
        "snapshot_path": args.snapshot,
    }
    config = dataclasses.replace(
        get_config(), **{k: v for k, v in overrides.items() if v is not None}
    )

    if config.seed_csv is not None and not config.seed_csv.exists():
        logger.warning("Seed file %s not found, starting without it", config.seed_csv)
        config = dataclasses.replace(config, seed_csv=None)

    logger.info("Launching PetAdopt on %s:%d", config.host, config.port)
    import uvicorn

    from petadopt.api.app import create_app

    app = create_app(config)

    if not args.no_browser:
        _open_browser(f"http://localhost:{config.port}/docs")

    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
