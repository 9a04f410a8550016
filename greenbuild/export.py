"""
CSV audit export of the current ledger.

Column order is fixed. Fields containing commas, quotes or newlines are
quoted by the csv module.
"""

import csv
import io
from datetime import date

CSV_HEADERS = [
    "ID",
    "Name",
    "Category",
    "Cost",
    "Weight",
    "Embodied Carbon",
    "Transport Distance",
    "Local Sourced",
    "Has EPD",
    "Supplier Name",
    "Supplier Location",
]


class EmptyExportError(ValueError):
    """Nothing in the ledger to export."""


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def material_row(material) -> list:
    supplier = material.supplier
    return [
        material.id,
        material.name,
        material.category or "",
        material.cost,
        material.weight,
        material.embodied_carbon,
        material.transport_distance,
        _yes_no(material.is_locally_sourced),
        _yes_no(material.has_epd),
        (supplier.name if supplier else "") or "N/A",
        (supplier.location if supplier else "") or "UAE",
    ]


def materials_to_csv(materials) -> str:
    materials = list(materials)
    if not materials:
        raise EmptyExportError("No data available to export.")

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for m in materials:
        writer.writerow(material_row(m))
    return buffer.getvalue()


def export_filename(today: date = None) -> str:
    today = today or date.today()
    return f"GreenBuild_Audit_{today.isoformat()}.csv"
