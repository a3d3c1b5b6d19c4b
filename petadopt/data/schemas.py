"""Pydantic models for data validation and serialization."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

Species = Literal["dog", "cat", "other"]
PetStatus = Literal["available", "pending", "adopted"]
RequestStatus = Literal["pending", "approved", "rejected"]
Gender = Literal["male", "female"]
PetSize = Literal["small", "medium", "large"]

SPECIES: tuple[str, ...] = get_args(Species)
PET_STATUSES: tuple[str, ...] = get_args(PetStatus)
REQUEST_STATUSES: tuple[str, ...] = get_args(RequestStatus)

ALL = "all"


class PetFields(BaseModel):
    """Everything a user can enter for a pet.

    This is the payload of the pet form: a full ``Pet`` minus the
    store-generated ``id`` and ``date_added``.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, description="Pet name, duplicates allowed")
    species: Species = Field(description="'dog', 'cat' or 'other'")
    breed: str = Field(default="", description="Breed as free text")
    status: PetStatus = Field(default="available", description="Adoption status")
    age: int | None = Field(default=None, ge=0, description="Age in years")
    gender: Gender | None = Field(default=None)
    size: PetSize | None = Field(default=None)
    description: str = Field(default="")
    image_url: str = Field(default="")
    vaccinated: bool = Field(default=False)
    sterilized: bool = Field(default=False)


class PetUpdate(BaseModel):
    """Partial pet edit. Only fields explicitly set are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1)
    species: Species | None = None
    breed: str | None = None
    status: PetStatus | None = None
    age: int | None = Field(default=None, ge=0)
    gender: Gender | None = None
    size: PetSize | None = None
    description: str | None = None
    image_url: str | None = None
    vaccinated: bool | None = None
    sterilized: bool | None = None

    @field_validator(
        "name",
        "species",
        "breed",
        "status",
        "description",
        "image_url",
        "vaccinated",
        "sterilized",
    )
    @classmethod
    def _not_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field cannot be cleared")
        return value


class Pet(PetFields):
    """A pet record owned by the store."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Store-generated unique identifier")
    date_added: datetime = Field(description="Creation timestamp, never edited")


class AdoptionApplication(BaseModel):
    """Requester-supplied part of an adoption request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    applicant_name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: str = Field(min_length=1)
    address: str = Field(default="")
    experience: str = Field(default="", description="Previous pet experience")
    message: str = Field(default="")

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("email must contain '@'")
        return value


class AdoptionRequest(AdoptionApplication):
    """An adoption request bound to a pet."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Store-generated unique identifier")
    pet_id: str = Field(description="Id of the requested pet (weak reference)")
    pet_name: str = Field(description="Pet name at request time")
    status: RequestStatus = Field(default="pending")
    request_date: datetime


class PetFilter(BaseModel):
    """Search criteria for the browse view."""

    model_config = ConfigDict(frozen=True)

    search_term: str = Field(default="", description="Matched against name or breed")
    species: Species | Literal["all"] = ALL
    status: PetStatus | Literal["all"] = ALL


class PetListing(BaseModel):
    """Filtered pets plus the counts shown above the listing."""

    pets: list[Pet] = Field(default_factory=list)
    shown: int = Field(default=0)
    total: int = Field(default=0)


class PetReport(BaseModel):
    """Aggregate figures for the reports view."""

    total_pets: int = 0
    pets_by_species: dict[str, int] = Field(default_factory=dict)
    pets_by_status: dict[str, int] = Field(default_factory=dict)
    total_requests: int = 0
    requests_by_status: dict[str, int] = Field(default_factory=dict)
    adoption_rate: float = Field(default=0.0, description="Adopted pets, percent")
    recent_pets: list[Pet] = Field(default_factory=list)


class StoreSnapshot(BaseModel):
    """Serialized store contents."""

    pets: list[Pet] = Field(default_factory=list)
    adoption_requests: list[AdoptionRequest] = Field(default_factory=list)
