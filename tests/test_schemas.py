"""Tests for petadopt/data/schemas.py."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from petadopt.data.schemas import (
    AdoptionApplication,
    Pet,
    PetFields,
    PetFilter,
    PetUpdate,
)


class TestPetFields:
    """Tests for PetFields model."""

    def test_defaults(self) -> None:
        """Optional payload fields should have proper defaults."""
        fields = PetFields(name="Rex", species="dog")
        assert fields.status == "available"
        assert fields.breed == ""
        assert fields.age is None
        assert fields.vaccinated is False

    def test_unknown_species_rejected(self) -> None:
        """Species outside dog/cat/other should fail validation."""
        with pytest.raises(ValidationError):
            PetFields(name="Rex", species="dragon")  # type: ignore[arg-type]

    def test_unknown_status_rejected(self) -> None:
        """Status outside available/pending/adopted should fail validation."""
        with pytest.raises(ValidationError):
            PetFields(name="Rex", species="dog", status="lost")  # type: ignore[arg-type]

    def test_negative_age_rejected(self) -> None:
        """Age should not be negative."""
        with pytest.raises(ValidationError):
            PetFields(name="Rex", species="dog", age=-1)

    def test_empty_name_rejected(self) -> None:
        """Name is required."""
        with pytest.raises(ValidationError):
            PetFields(name="", species="dog")

    def test_blank_name_rejected(self) -> None:
        """A whitespace-only name is empty after stripping."""
        with pytest.raises(ValidationError):
            PetFields(name="   ", species="dog")

    def test_text_is_stripped(self) -> None:
        """Surrounding whitespace should be removed from text fields."""
        fields = PetFields(name="  Rex ", species="dog", breed=" Labrador ")
        assert fields.name == "Rex"
        assert fields.breed == "Labrador"


class TestPet:
    """Tests for Pet model."""

    def test_pet_is_frozen(self) -> None:
        """Stored pets should not be editable in place."""
        pet = Pet(
            id="p1",
            name="Rex",
            species="dog",
            date_added=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        with pytest.raises(ValidationError):
            pet.name = "Max"  # type: ignore[misc]


class TestPetUpdate:
    """Tests for PetUpdate model."""

    def test_only_set_fields_are_dumped(self) -> None:
        """exclude_unset should keep just the edited fields."""
        update = PetUpdate(status="adopted")
        assert update.model_dump(exclude_unset=True) == {"status": "adopted"}

    def test_optional_payload_can_be_cleared(self) -> None:
        """Age may be explicitly cleared."""
        update = PetUpdate(age=None)
        assert update.model_dump(exclude_unset=True) == {"age": None}

    def test_required_field_cannot_be_cleared(self) -> None:
        """Name cannot be set to None."""
        with pytest.raises(ValidationError):
            PetUpdate(name=None)

    @pytest.mark.parametrize("field", ["vaccinated", "sterilized"])
    def test_flags_cannot_be_cleared(self, field: str) -> None:
        """Health flags are booleans and cannot be set to None."""
        with pytest.raises(ValidationError):
            PetUpdate(**{field: None})

    def test_blank_name_rejected(self) -> None:
        """A whitespace-only name should not pass an edit."""
        with pytest.raises(ValidationError):
            PetUpdate(name="  ")


class TestAdoptionApplication:
    """Tests for AdoptionApplication model."""

    def test_whitespace_stripped(self) -> None:
        """String fields should be stripped."""
        app = AdoptionApplication(
            applicant_name="  Ana ", email=" ana@example.com ", phone=" 1 "
        )
        assert app.applicant_name == "Ana"
        assert app.email == "ana@example.com"

    def test_invalid_email_rejected(self) -> None:
        """Email must contain '@'."""
        with pytest.raises(ValidationError):
            AdoptionApplication(applicant_name="Ana", email="ana.example.com", phone="1")

    def test_blank_name_rejected(self) -> None:
        """A whitespace-only name is empty after stripping."""
        with pytest.raises(ValidationError):
            AdoptionApplication(applicant_name="   ", email="a@b.c", phone="1")


class TestPetFilter:
    """Tests for PetFilter model."""

    def test_defaults_are_all(self) -> None:
        """Default criteria should match everything."""
        criteria = PetFilter()
        assert criteria.search_term == ""
        assert criteria.species == "all"
        assert criteria.status == "all"

    def test_unknown_species_rejected(self) -> None:
        """Species filter must be a species or 'all'."""
        with pytest.raises(ValidationError):
            PetFilter(species="fish")  # type: ignore[arg-type]
