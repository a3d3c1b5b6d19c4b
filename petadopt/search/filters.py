"""Search and filter pets for the browse view."""

from __future__ import annotations

from collections.abc import Sequence

from petadopt.data.schemas import ALL, Pet, PetFilter, PetListing


def filter_pets(
    pets: Sequence[Pet],
    search_term: str = "",
    species: str = ALL,
    status: str = ALL,
) -> list[Pet]:
    """Return the pets matching every criterion, in their original order.

    A pet matches when the search term is a case-insensitive substring of
    its name or breed, and its species and status equal the requested
    ones (``"all"`` matches any value).

    Args:
        pets: Pets to filter.
        search_term: Free text; empty matches everything.
        species: Species value or ``"all"``.
        status: Status value or ``"all"``.

    Returns:
        Matching pets.
    """
    term = search_term.lower()
    return [
        pet
        for pet in pets
        if _matches_text(pet, term)
        and (species == ALL or pet.species == species)
        and (status == ALL or pet.status == status)
    ]


def query_pets(pets: Sequence[Pet], criteria: PetFilter) -> PetListing:
    """Filter *pets* by *criteria* and report shown/total counts."""
    matched = filter_pets(pets, criteria.search_term, criteria.species, criteria.status)
    return PetListing(pets=matched, shown=len(matched), total=len(pets))


def _matches_text(pet: Pet, term: str) -> bool:
    return term in pet.name.lower() or term in pet.breed.lower()
