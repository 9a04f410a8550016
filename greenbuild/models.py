from sqlalchemy import Column, String, Float, DateTime, Boolean, JSON
from datetime import datetime
from .database import Base
import enum


class MaterialCategory(str, enum.Enum):
    STRUCTURAL = "structural"
    ENCLOSURE = "enclosure"
    MECHANICAL = "mechanical"
    FINISHES = "finishes"


class ConstructionMaterial(Base):
    """One row per material entered on the project ledger.

    Column names are the storage-side names; see store.FIELD_MAP for the
    translation to the API/in-memory names.
    """
    __tablename__ = "construction_materials"

    id = Column(String, primary_key=True)  # UUID, generated by the client
    name = Column(String, nullable=False)
    # Stored as VARCHAR so unknown/legacy categories still load
    category = Column(String, nullable=True)
    cost = Column(Float, default=0.0)
    weight = Column(Float, default=0.0)  # kg
    embodied_carbon = Column(Float, default=0.0)  # kg CO2e per kg
    transport_distance = Column(Float, default=0.0)  # km
    recycled_content_pre = Column(Float, default=0.0)
    recycled_content_post = Column(Float, default=0.0)
    is_locally_sourced = Column(Boolean, default=False)
    has_epd = Column(Boolean, default=False)
    supplier = Column(JSON, nullable=True)  # {name, location, icv_score}
    created_at = Column(DateTime, default=datetime.utcnow, index=True)


class SyncStatus(str, enum.Enum):
    """Three-state badge shown next to the ledger table."""
    SYNCED = "synced"
    SYNCING = "syncing"
    ERROR = "error"
