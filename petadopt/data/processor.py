"""Import pets from CSV and export the store's pets to CSV."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from petadopt.data.schemas import PET_STATUSES, SPECIES, Pet, PetFields

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "species")

PET_COLUMNS = [
    "id",
    "name",
    "species",
    "breed",
    "status",
    "age",
    "gender",
    "size",
    "description",
    "image_url",
    "vaccinated",
    "sterilized",
    "date_added",
]

_TEXT_FIELDS = ("breed", "description", "image_url")
_CHOICE_FIELDS = ("gender", "size")
_FLAG_FIELDS = ("vaccinated", "sterilized")
_TRUTHY = {"1", "true", "yes", "y", "si", "sí"}


def load_pets_csv(csv_path: Path) -> list[PetFields]:
    """Read pet form fields from a CSV file.

    Column names are case-insensitive. ``species`` and ``status`` are
    normalized to lower case; a missing status means ``available``.
    Rows without a name, with an unknown species or status, or that fail
    validation are skipped.

    Args:
        csv_path: CSV file with at least ``name`` and ``species`` columns.

    Returns:
        List of PetFields, in file order.

    Raises:
        FileNotFoundError: If *csv_path* does not exist.
        ValueError: If the ``name`` or ``species`` column is missing.
    """
    logger.info("Loading pets from %s", csv_path)

    df = pd.read_csv(csv_path)
    df.columns = [str(col).strip().lower() for col in df.columns]

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        logger.error("%s is missing required columns: %s", csv_path, ", ".join(missing))
        raise ValueError(f"{csv_path} is missing required columns: {', '.join(missing)}")

    if "status" not in df.columns:
        df["status"] = "available"
    df["species"] = df["species"].astype(str).str.strip().str.lower()
    df["status"] = df["status"].fillna("available").astype(str).str.strip().str.lower()

    has_name = df["name"].notna() & (df["name"].astype(str).str.strip() != "")
    known_species = df["species"].isin(SPECIES)
    known_status = df["status"].isin(PET_STATUSES)
    valid_df = df[has_name & known_species & known_status]

    skipped = len(df) - len(valid_df)
    if skipped:
        logger.warning(
            "Skipping %d rows with missing name or unknown species/status", skipped
        )

    records = []
    for index, row in valid_df.iterrows():
        try:
            records.append(PetFields(**_row_to_fields(row)))
        except ValidationError as exc:
            logger.warning("Skipping row %s: %s", index, exc.errors()[0]["msg"])
        except ValueError as exc:
            logger.warning("Skipping row %s: %s", index, exc)

    logger.info("Loaded %d pets from %s", len(records), csv_path)
    return records


def pets_to_frame(pets: Sequence[Pet]) -> pd.DataFrame:
    """Convert pets to a DataFrame with one row per pet."""
    rows = [pet.model_dump(mode="json") for pet in pets]
    return pd.DataFrame(rows, columns=PET_COLUMNS)


def export_pets_csv(pets: Sequence[Pet], csv_path: Path | None = None) -> str:
    """Serialize pets to CSV.

    Args:
        pets: Pets to export, in order.
        csv_path: If given, the CSV is also written to this file.

    Returns:
        The CSV text.
    """
    text = pets_to_frame(pets).to_csv(index=False)
    if csv_path is not None:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        csv_path.write_text(text, encoding="utf-8")
        logger.info("Exported %d pets to %s", len(pets), csv_path)
    return text


def _row_to_fields(row: pd.Series) -> dict:
    """Build PetFields keyword arguments from a CSV row, dropping blanks."""
    fields: dict = {
        "name": str(row["name"]).strip(),
        "species": row["species"],
        "status": row["status"],
    }

    for column in _TEXT_FIELDS:
        value = row.get(column)
        if value is not None and pd.notna(value):
            fields[column] = str(value).strip()

    for column in _CHOICE_FIELDS:
        value = row.get(column)
        if value is not None and pd.notna(value):
            fields[column] = str(value).strip().lower()

    for column in _FLAG_FIELDS:
        value = row.get(column)
        if value is not None and pd.notna(value):
            if isinstance(value, str):
                fields[column] = value.strip().lower() in _TRUTHY
            else:
                fields[column] = bool(value)

    age = row.get("age")
    if age is not None and pd.notna(age):
        fields["age"] = int(age)

    return fields
