"""
CSV audit export tests.
"""

import csv
import io
from datetime import date

import pytest

from greenbuild.export import CSV_HEADERS, EmptyExportError, export_filename, materials_to_csv
from greenbuild.schemas import Material


def _material(**overrides):
    data = {
        "id": "m-1",
        "name": "Steel Beam",
        "category": "structural",
        "cost": 1200.5,
        "weight": 800,
        "embodiedCarbon": 1.55,
        "transportDistance": 120,
        "isLocallySourced": True,
        "hasEPD": False,
        "supplier": {"name": "Emirates Steel", "location": "Abu Dhabi"},
    }
    data.update(overrides)
    return Material.model_validate(data)


def _rows(content):
    return list(csv.reader(io.StringIO(content)))


def test_header_order():
    rows = _rows(materials_to_csv([_material()]))
    assert rows[0] == [
        "ID", "Name", "Category", "Cost", "Weight", "Embodied Carbon",
        "Transport Distance", "Local Sourced", "Has EPD",
        "Supplier Name", "Supplier Location",
    ]
    assert rows[0] == CSV_HEADERS


def test_row_values():
    rows = _rows(materials_to_csv([_material()]))
    assert rows[1] == [
        "m-1", "Steel Beam", "structural", "1200.5", "800.0", "1.55",
        "120.0", "Yes", "No", "Emirates Steel", "Abu Dhabi",
    ]


def test_values_with_commas_are_quoted():
    content = materials_to_csv([_material(name="Concrete, C40", supplier={"name": "Acme, LLC"})])
    assert '"Concrete, C40"' in content
    assert '"Acme, LLC"' in content
    row = _rows(content)[1]
    assert row[1] == "Concrete, C40"
    assert row[9] == "Acme, LLC"


def test_blank_supplier_falls_back_to_defaults():
    row = _rows(materials_to_csv([_material(supplier={"name": "", "location": ""})]))[1]
    assert row[9] == "N/A"
    assert row[10] == "UAE"


def test_rows_follow_ledger_order():
    content = materials_to_csv([_material(id="new"), _material(id="old")])
    assert [r[0] for r in _rows(content)[1:]] == ["new", "old"]


def test_empty_export_refused():
    with pytest.raises(EmptyExportError, match="No data available"):
        materials_to_csv([])


def test_export_filename():
    assert export_filename(date(2026, 3, 14)) == "GreenBuild_Audit_2026-03-14.csv"
