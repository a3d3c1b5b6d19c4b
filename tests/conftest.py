"""Shared test fixtures for the PetAdopt test suite."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from petadopt.data.schemas import AdoptionApplication, PetFields
from petadopt.store.pet_store import PetStore

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Produce ids p1, p2, p3, ..."""
    counter = itertools.count(1)
    return lambda: f"p{next(counter)}"


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Produce timestamps one day apart, starting 2024-01-01."""
    ticks = itertools.count()
    return lambda: START + timedelta(days=next(ticks))


@pytest.fixture
def store(id_factory: Callable[[], str], clock: Callable[[], datetime]) -> PetStore:
    """Create an empty store with deterministic ids and timestamps."""
    return PetStore(id_factory=id_factory, clock=clock)


@pytest.fixture
def rex_fields() -> PetFields:
    """Create form fields for a dog named Rex."""
    return PetFields(
        name="Rex",
        breed="Labrador",
        species="dog",
        status="available",
        age=3,
        gender="male",
        size="large",
    )


@pytest.fixture
def populated_store(store: PetStore, rex_fields: PetFields) -> PetStore:
    """Create a store holding four pets with ids p1..p4."""
    store.add_pet(rex_fields)
    store.add_pet(PetFields(name="Misu", breed="Siamese", species="cat", status="pending"))
    store.add_pet(
        PetFields(name="Max", breed="Labrador Mix", species="dog", status="adopted")
    )
    store.add_pet(PetFields(name="Kiwi", breed="Parakeet", species="other"))
    return store


@pytest.fixture
def application() -> AdoptionApplication:
    """Create a valid adoption application."""
    return AdoptionApplication(
        applicant_name="Ana Torres",
        email="ana@example.com",
        phone="555-0101",
        address="Calle 1",
        experience="Two dogs before",
        message="We have a big garden.",
    )
