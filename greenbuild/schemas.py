from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from .models import MaterialCategory, SyncStatus
from .scoring.base import parse_number, parse_flag

NUMERIC_FIELDS = (
    "cost",
    "weight",
    "embodied_carbon",
    "transport_distance",
    "recycled_content_pre",
    "recycled_content_post",
)


class CamelModel(BaseModel):
    """API payloads use camelCase; Python code uses the field names."""
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class Supplier(CamelModel):
    name: str = "Direct"
    location: str = "UAE"
    icv_score: float = 0.0  # in-country value score, not used in scoring

    @field_validator("icv_score", mode="before")
    @classmethod
    def coerce_score(cls, value):
        return parse_number(value)


class MaterialBase(CamelModel):
    name: str = "Unnamed Material"
    category: Optional[str] = None
    cost: float = 0.0
    weight: float = 0.0
    embodied_carbon: float = 0.0
    transport_distance: float = 0.0
    recycled_content_pre: float = 0.0
    recycled_content_post: float = 0.0
    is_locally_sourced: bool = False
    has_epd: bool = Field(False, alias="hasEPD")
    supplier: Supplier = Field(default_factory=Supplier)

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def coerce_numeric(cls, value):
        # Blank or garbage form input counts as zero, never a validation error
        return parse_number(value)

    @field_validator("is_locally_sourced", "has_epd", mode="before")
    @classmethod
    def coerce_flag(cls, value):
        return parse_flag(value)

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, value):
        if value is None or not str(value).strip():
            return "Unnamed Material"
        return value

    @field_validator("supplier", mode="before")
    @classmethod
    def default_supplier(cls, value):
        return value if value is not None else {}


class MaterialCreate(MaterialBase):
    id: Optional[str] = None  # generated when the client doesn't send one
    category: MaterialCategory = MaterialCategory.STRUCTURAL


class Material(MaterialBase):
    id: str


# --- Scoring outputs ---

class CreditScore(CamelModel):
    total_cost: float
    epd_count: int
    epd_points: int
    local_percentage: float
    local_points: int
    recycled_percentage: float
    recycled_points: int
    total_points: int
    cert_level: str


class ItemCarbon(CamelModel):
    id: Optional[str] = None
    name: Optional[str] = None
    carbon: float
    recycled_percentage: float = 0.0  # post + 0.5 * pre


class CarbonEstimate(CamelModel):
    total_embodied_carbon: float
    carbon_intensity: float
    is_below_national_avg: bool
    per_item: List[ItemCarbon] = []


class CategoryCarbon(CamelModel):
    category: str
    value: float


class NetZeroGauge(CamelModel):
    target: float
    total_carbon: float
    percentage: float
    remaining: float


class DashboardSummary(CamelModel):
    material_count: int
    credits: CreditScore
    carbon: CarbonEstimate
    categories: List[CategoryCarbon]
    gauge: NetZeroGauge


class SyncState(CamelModel):
    status: SyncStatus
