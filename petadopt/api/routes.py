"""FastAPI routes for browsing, managing and adopting pets."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Request, Response

from petadopt.data.processor import export_pets_csv
from petadopt.data.schemas import (
    ALL,
    AdoptionApplication,
    AdoptionRequest,
    Pet,
    PetFields,
    PetFilter,
    PetListing,
    PetReport,
    PetStatus,
    PetUpdate,
    Species,
)
from petadopt.reports.aggregator import build_report
from petadopt.search.filters import query_pets
from petadopt.store.pet_store import PetStore
from petadopt.workflow.adoption import AdoptionWorkflow

logger = logging.getLogger(__name__)

router = APIRouter()


def _store(request: Request) -> PetStore:
    return request.app.state.store


def _pet_not_found(pet_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Pet {pet_id} not found")


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Health check endpoint for monitoring.

    Returns:
        Dict with status and collection sizes.
    """
    store = _store(request)
    return {
        "status": "healthy",
        "pets": len(store.pets),
        "adoption_requests": len(store.adoption_requests),
    }


@router.get("/api/pets", response_model=PetListing)
async def list_pets(
    request: Request,
    q: str = "",
    species: Species | Literal["all"] = ALL,
    status: PetStatus | Literal["all"] = ALL,
) -> PetListing:
    """Browse view: pets matching the search text and filters.

    Args:
        request: FastAPI request object.
        q: Text matched against name or breed.
        species: Species filter or 'all'.
        status: Status filter or 'all'.

    Returns:
        PetListing with matched pets and counts.
    """
    criteria = PetFilter(search_term=q, species=species, status=status)
    return query_pets(_store(request).pets, criteria)


@router.get("/api/pets/export")
async def export_pets(request: Request) -> Response:
    """Download every pet as CSV."""
    text = export_pets_csv(_store(request).pets)
    return Response(
        content=text,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="pets.csv"'},
    )


@router.get("/api/pets/{pet_id}", response_model=Pet)
async def get_pet(request: Request, pet_id: str) -> Pet:
    pet = _store(request).get_pet(pet_id)
    if pet is None:
        raise _pet_not_found(pet_id)
    return pet


@router.post("/api/pets", response_model=Pet, status_code=201)
async def create_pet(request: Request, fields: PetFields) -> Pet:
    return _store(request).add_pet(fields)


@router.put("/api/pets/{pet_id}", response_model=Pet)
async def update_pet(request: Request, pet_id: str, fields: PetUpdate) -> Pet:
    """Apply the submitted fields to an existing pet.

    Returns:
        The updated pet.

    Raises:
        HTTPException: 404 if the pet does not exist.
    """
    pet = _store(request).update_pet(pet_id, fields)
    if pet is None:
        raise _pet_not_found(pet_id)
    return pet


@router.delete("/api/pets/{pet_id}", status_code=204)
async def delete_pet(request: Request, pet_id: str) -> Response:
    """Remove a pet. Confirmation is up to the client before calling this."""
    if not _store(request).delete_pet(pet_id):
        raise _pet_not_found(pet_id)
    return Response(status_code=204)


@router.post(
    "/api/pets/{pet_id}/adoption-requests",
    response_model=AdoptionRequest,
    status_code=201,
)
async def submit_adoption_request(
    request: Request, pet_id: str, application: AdoptionApplication
) -> AdoptionRequest:
    """Submit an adoption application for a pet.

    Args:
        request: FastAPI request object.
        pet_id: Pet being requested.
        application: Requester details.

    Returns:
        The pending AdoptionRequest.

    Raises:
        HTTPException: 404 if the pet does not exist.
    """
    store = _store(request)
    pet = store.get_pet(pet_id)
    if pet is None:
        raise _pet_not_found(pet_id)

    workflow = AdoptionWorkflow(store)
    workflow.select(pet)
    adoption_request = workflow.submit(application)
    if adoption_request is None:
        raise HTTPException(status_code=409, detail="No pet selected")
    return adoption_request


@router.get("/api/adoption-requests", response_model=list[AdoptionRequest])
async def list_adoption_requests(
    request: Request, pet_id: str | None = None
) -> list[AdoptionRequest]:
    requests = _store(request).adoption_requests
    if pet_id is not None:
        return [r for r in requests if r.pet_id == pet_id]
    return list(requests)


@router.get("/api/reports", response_model=PetReport)
async def reports(request: Request) -> PetReport:
    """Reports view: totals and breakdowns over the current store."""
    store = _store(request)
    config = request.app.state.config
    return build_report(
        store.pets,
        store.adoption_requests,
        recent_limit=config.recent_pets_limit,
    )
