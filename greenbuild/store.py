"""
Material store: the only place that talks to the database.

The API and scorers use camelCase names (embodiedCarbon, hasEPD, ...);
the construction_materials table uses snake_case columns. FIELD_MAP is the
single translation table between the two, applied in both directions here
and nowhere else.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from . import models, schemas

logger = logging.getLogger(__name__)

# in-memory (API) name -> storage column
FIELD_MAP = {
    "id": "id",
    "name": "name",
    "category": "category",
    "cost": "cost",
    "weight": "weight",
    "embodiedCarbon": "embodied_carbon",
    "transportDistance": "transport_distance",
    "recycledContentPre": "recycled_content_pre",
    "recycledContentPost": "recycled_content_post",
    "isLocallySourced": "is_locally_sourced",
    "hasEPD": "has_epd",
    "supplier": "supplier",
}
REVERSE_FIELD_MAP = {column: name for name, column in FIELD_MAP.items()}

# Keys inside the supplier JSON column
SUPPLIER_FIELD_MAP = {
    "name": "name",
    "location": "location",
    "icvScore": "icv_score",
}
REVERSE_SUPPLIER_FIELD_MAP = {column: name for name, column in SUPPLIER_FIELD_MAP.items()}


class StoreError(Exception):
    """A database request failed. Carries a message fit for the client."""


def to_record(material: schemas.Material) -> dict:
    """In-memory material -> column dict for construction_materials."""
    payload = material.model_dump(by_alias=True, mode="json")
    record = {FIELD_MAP[key]: value for key, value in payload.items() if key in FIELD_MAP}
    supplier = payload.get("supplier") or {}
    record["supplier"] = {
        SUPPLIER_FIELD_MAP[key]: value for key, value in supplier.items()
        if key in SUPPLIER_FIELD_MAP
    }
    return record


def from_record(row) -> schemas.Material:
    """construction_materials row (ORM object or mapping) -> in-memory material."""
    if isinstance(row, dict):
        columns = row
    else:
        columns = {column: getattr(row, column) for column in REVERSE_FIELD_MAP}
    payload = {
        REVERSE_FIELD_MAP[column]: value for column, value in columns.items()
        if column in REVERSE_FIELD_MAP
    }
    supplier = columns.get("supplier") or {}
    payload["supplier"] = {
        REVERSE_SUPPLIER_FIELD_MAP[key]: value for key, value in supplier.items()
        if key in REVERSE_SUPPLIER_FIELD_MAP
    }
    return schemas.Material.model_validate(payload)


class MaterialStore:
    """
    Flat collection of materials keyed by id.

    Each operation opens its own session and makes a single request.
    No retries; a failed request raises StoreError and leaves nothing
    half-written.
    """

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def list_all(self) -> list[schemas.Material]:
        """All materials, newest first."""
        db = self.session_factory()
        try:
            rows = db.query(models.ConstructionMaterial).order_by(
                models.ConstructionMaterial.created_at.desc()
            ).all()
            return [from_record(row) for row in rows]
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to fetch materials: {e}") from e
        finally:
            db.close()

    def insert(self, material: schemas.Material) -> schemas.Material:
        """Insert one material, return it as stored."""
        db = self.session_factory()
        try:
            row = models.ConstructionMaterial(**to_record(material))
            db.add(row)
            db.commit()
            db.refresh(row)
            return from_record(row)
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError(f"Failed to save material: {e}") from e
        finally:
            db.close()

    def delete(self, material_id: str) -> bool:
        """Delete one material. Returns False if no such id."""
        db = self.session_factory()
        try:
            deleted = db.query(models.ConstructionMaterial).filter(
                models.ConstructionMaterial.id == material_id
            ).delete()
            db.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError(f"Failed to delete material: {e}") from e
        finally:
            db.close()

    def delete_all(self) -> int:
        """Delete every material. Returns the number of rows removed."""
        db = self.session_factory()
        try:
            deleted = db.query(models.ConstructionMaterial).delete()
            db.commit()
            logger.info("Cleared %d materials from the store", deleted)
            return deleted
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError(f"Failed to clear materials: {e}") from e
        finally:
            db.close()
