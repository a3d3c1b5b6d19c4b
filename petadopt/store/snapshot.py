"""JSON snapshot file backing the pet store between runs."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from petadopt.data.schemas import AdoptionRequest, Pet, StoreSnapshot

logger = logging.getLogger(__name__)


class SnapshotError(RuntimeError):
    """Raised when a snapshot file exists but cannot be read."""


def load_snapshot(path: Path) -> StoreSnapshot:
    """Load store contents from *path*.

    A missing file is treated as an empty store.

    Args:
        path: Snapshot JSON file.

    Returns:
        The decoded snapshot.

    Raises:
        SnapshotError: If the file is unreadable or not a valid snapshot.
    """
    if not path.exists():
        logger.info("No snapshot at %s, starting empty", path)
        return StoreSnapshot()

    try:
        snapshot = StoreSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        raise SnapshotError(f"Cannot load snapshot from {path}: {exc}") from exc

    logger.info(
        "Loaded snapshot from %s: %d pets, %d adoption requests",
        path,
        len(snapshot.pets),
        len(snapshot.adoption_requests),
    )
    return snapshot


def save_snapshot(
    path: Path,
    pets: Iterable[Pet],
    adoption_requests: Iterable[AdoptionRequest],
) -> None:
    """Write store contents to *path*.

    The file is written next to the target and then swapped in, so a
    reader never sees a half-written snapshot.

    Args:
        path: Snapshot JSON file.
        pets: Pets to persist, in store order.
        adoption_requests: Adoption requests to persist, in store order.
    """
    snapshot = StoreSnapshot(pets=list(pets), adoption_requests=list(adoption_requests))
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
    os.replace(tmp_path, path)
    logger.debug("Saved snapshot to %s", path)
