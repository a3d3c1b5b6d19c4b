"""Aggregate figures over the store for the reports view."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from petadopt.data.schemas import (
    PET_STATUSES,
    REQUEST_STATUSES,
    SPECIES,
    AdoptionRequest,
    Pet,
    PetReport,
)


def build_report(
    pets: Sequence[Pet],
    adoption_requests: Sequence[AdoptionRequest],
    recent_limit: int = 5,
) -> PetReport:
    """Compute counts and summaries over the current collections.

    Every known species and status appears in the breakdowns, with zero
    when no record has it, so per-key counts always sum to the totals.

    Args:
        pets: Current pets.
        adoption_requests: Current adoption requests.
        recent_limit: Number of newest pets to include.

    Returns:
        PetReport for display.
    """
    species_counts = Counter(pet.species for pet in pets)
    status_counts = Counter(pet.status for pet in pets)
    request_counts = Counter(request.status for request in adoption_requests)

    total = len(pets)
    adopted = status_counts["adopted"]
    adoption_rate = round(adopted / total * 100, 1) if total else 0.0

    recent = sorted(pets, key=lambda pet: pet.date_added, reverse=True)[:recent_limit]

    return PetReport(
        total_pets=total,
        pets_by_species={species: species_counts[species] for species in SPECIES},
        pets_by_status={status: status_counts[status] for status in PET_STATUSES},
        total_requests=len(adoption_requests),
        requests_by_status={
            status: request_counts[status] for status in REQUEST_STATUSES
        },
        adoption_rate=adoption_rate,
        recent_pets=recent,
    )
