"""In-memory owner of the pet and adoption-request collections."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from petadopt.data.schemas import (
    AdoptionApplication,
    AdoptionRequest,
    Pet,
    PetFields,
    PetUpdate,
    RequestStatus,
)
from petadopt.store.snapshot import load_snapshot, save_snapshot

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PetStore:
    """Exclusive owner of the ``Pet`` and ``AdoptionRequest`` collections.

    Collections are exposed as tuples of frozen models. Every mutation
    builds a new tuple and swaps it in, so a snapshot taken by a reader
    is never modified afterwards.

    Unknown ids on update/delete leave the store untouched; the outcome
    is reported through the return value only.

    Args:
        id_factory: Produces a fresh identifier per record.
        clock: Produces creation timestamps.
        snapshot_path: If set, contents are loaded from this JSON file on
            construction and written back after every mutation. A failed
            write is logged and the in-memory collections stay current.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utcnow,
        snapshot_path: Path | None = None,
    ) -> None:
        self._id_factory = id_factory
        self._clock = clock
        self._snapshot_path = snapshot_path
        self._pets: tuple[Pet, ...] = ()
        self._requests: tuple[AdoptionRequest, ...] = ()

        if snapshot_path is not None:
            snapshot = load_snapshot(snapshot_path)
            self._pets = tuple(snapshot.pets)
            self._requests = tuple(snapshot.adoption_requests)

    @property
    def pets(self) -> tuple[Pet, ...]:
        """Current pets in insertion order."""
        return self._pets

    @property
    def adoption_requests(self) -> tuple[AdoptionRequest, ...]:
        """Current adoption requests in insertion order."""
        return self._requests

    def get_pet(self, pet_id: str) -> Pet | None:
        for pet in self._pets:
            if pet.id == pet_id:
                return pet
        return None

    def add_pet(self, data: PetFields) -> Pet:
        """Create a pet with a fresh id and the current timestamp.

        Args:
            data: User-entered pet fields.

        Returns:
            The stored Pet.
        """
        pet = Pet(
            **data.model_dump(include=set(PetFields.model_fields)),
            id=self._fresh_id(self._pets),
            date_added=self._clock(),
        )
        self._pets = (*self._pets, pet)
        logger.info("Added pet %s (%s)", pet.id, pet.name)
        self._persist()
        return pet

    def update_pet(self, pet_id: str, data: PetFields | PetUpdate) -> Pet | None:
        """Apply the fields set on *data* to the pet with *pet_id*.

        ``id`` and ``date_added`` are always preserved.

        Args:
            pet_id: Target pet.
            data: Full form fields or a partial update.

        Returns:
            The updated Pet, or None if no pet has *pet_id*.
        """
        changes = data.model_dump(exclude_unset=True)
        updated: Pet | None = None
        pets = []
        for pet in self._pets:
            if pet.id == pet_id:
                merged = {**pet.model_dump(), **changes}
                merged["id"] = pet.id
                merged["date_added"] = pet.date_added
                updated = Pet.model_validate(merged)
                pets.append(updated)
            else:
                pets.append(pet)

        if updated is None:
            logger.warning("update_pet: no pet with id %s, ignoring", pet_id)
            return None

        self._pets = tuple(pets)
        logger.info("Updated pet %s (%s)", pet_id, ", ".join(sorted(changes)) or "no fields")
        self._persist()
        return updated

    def delete_pet(self, pet_id: str) -> bool:
        """Remove the pet with *pet_id*.

        Adoption requests referencing the pet are kept as they are.

        Returns:
            True if a pet was removed.
        """
        remaining = tuple(pet for pet in self._pets if pet.id != pet_id)
        if len(remaining) == len(self._pets):
            logger.warning("delete_pet: no pet with id %s, ignoring", pet_id)
            return False

        self._pets = remaining
        logger.info("Deleted pet %s", pet_id)
        self._persist()
        return True

    def add_adoption_request(
        self,
        pet_id: str,
        pet_name: str,
        application: AdoptionApplication,
        status: RequestStatus = "pending",
    ) -> AdoptionRequest:
        """Record an adoption request for a pet.

        Args:
            pet_id: Requested pet.
            pet_name: Pet name at request time.
            application: Requester-supplied fields.
            status: Initial request status.

        Returns:
            The stored AdoptionRequest.
        """
        request = AdoptionRequest(
            **application.model_dump(include=set(AdoptionApplication.model_fields)),
            id=self._fresh_id(self._requests),
            pet_id=pet_id,
            pet_name=pet_name,
            status=status,
            request_date=self._clock(),
        )
        self._requests = (*self._requests, request)
        logger.info("Added adoption request %s for pet %s", request.id, pet_id)
        self._persist()
        return request

    def _fresh_id(self, existing: tuple[Pet, ...] | tuple[AdoptionRequest, ...]) -> str:
        taken = {record.id for record in existing}
        new_id = self._id_factory()
        while new_id in taken:
            new_id = self._id_factory()
        return new_id

    def _persist(self) -> None:
        if self._snapshot_path is None:
            return
        try:
            save_snapshot(self._snapshot_path, self._pets, self._requests)
        except OSError as exc:
            logger.error("Could not write snapshot to %s: %s", self._snapshot_path, exc)
