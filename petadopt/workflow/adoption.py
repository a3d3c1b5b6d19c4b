"""Adoption-request submission and pet form actions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from petadopt.data.schemas import (
    AdoptionApplication,
    AdoptionRequest,
    Pet,
    PetFields,
    PetUpdate,
)
from petadopt.store.pet_store import PetStore

logger = logging.getLogger(__name__)


class AdoptionWorkflow:
    """Binds an adoption application to the currently selected pet.

    Args:
        store: Store that receives the created requests.
    """

    def __init__(self, store: PetStore) -> None:
        self.store = store
        self._selected: Pet | None = None

    @property
    def selected(self) -> Pet | None:
        return self._selected

    def select(self, pet: Pet) -> None:
        self._selected = pet

    def cancel(self) -> None:
        self._selected = None

    def submit(
        self, application: AdoptionApplication | Mapping[str, Any]
    ) -> AdoptionRequest | None:
        """Create a pending adoption request for the selected pet.

        Submissions without a selected pet are dropped. The selection is
        cleared after a successful submission.

        Args:
            application: Requester fields, validated as AdoptionApplication.

        Returns:
            The created request, or None if no pet was selected.

        Raises:
            pydantic.ValidationError: If *application* is malformed.
        """
        pet = self._selected
        if pet is None:
            logger.warning("Adoption request submitted with no pet selected, dropping")
            return None

        if not isinstance(application, AdoptionApplication):
            application = AdoptionApplication.model_validate(application)

        request = self.store.add_adoption_request(
            pet_id=pet.id,
            pet_name=pet.name,
            application=application,
            status="pending",
        )
        self._selected = None
        return request


def save_pet(
    store: PetStore,
    data: PetFields | PetUpdate,
    editing_id: str | None = None,
) -> Pet | None:
    """Submit handler of the pet form: edit when *editing_id* is given, else add.

    A partial ``PetUpdate`` is only accepted for edits.
    """
    if editing_id is not None:
        return store.update_pet(editing_id, data)
    if not isinstance(data, PetFields):
        raise TypeError("adding a pet requires full PetFields")
    return store.add_pet(data)


def delete_with_confirmation(
    store: PetStore,
    pet_id: str,
    confirm: Callable[[Pet], bool],
) -> bool:
    """Delete a pet once the UI-supplied *confirm* callback approves it.

    Returns:
        True if the pet was deleted.
    """
    pet = store.get_pet(pet_id)
    if pet is None:
        logger.warning("delete requested for unknown pet %s", pet_id)
        return False
    if not confirm(pet):
        logger.info("Deletion of pet %s declined", pet_id)
        return False
    return store.delete_pet(pet_id)
