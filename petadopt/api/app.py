"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from petadopt.config import Config, get_config
from petadopt.data.processor import load_pets_csv
from petadopt.store.pet_store import PetStore

logger = logging.getLogger(__name__)


def build_store(config: Config) -> PetStore:
    """Create the store, restoring the snapshot and seeding if configured.

    The seed CSV is only imported into an empty store, so restarting with
    a snapshot does not duplicate the seeded pets.
    """
    store = PetStore(snapshot_path=config.snapshot_path)

    if config.seed_csv is not None and not store.pets:
        for fields in load_pets_csv(config.seed_csv):
            store.add_pet(fields)
        logger.info("Seeded store with %d pets from %s", len(store.pets), config.seed_csv)

    return store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared pet store on startup.

    The store lives on ``app.state`` for the lifetime of the process and
    is the only mutable state shared between requests.
    """
    config: Config = app.state.config
    app.state.store = build_store(config)

    yield

    logger.info(
        "Shutting down with %d pets and %d adoption requests",
        len(app.state.store.pets),
        len(app.state.store.adoption_requests),
    )


def create_app(config: Config | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Application configuration; read from the environment if None.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="PetAdopt",
        description="Browse, manage and adopt pets",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config or get_config()

    from petadopt.api.routes import router

    app.include_router(router)

    return app
