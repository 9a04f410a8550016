#!/usr/bin/env python3
"""
Seed a demo project ledger with typical UAE construction materials.

Usage:
    python data/seed_materials.py            # add demo materials
    python data/seed_materials.py --reset    # clear the ledger first

Embodied carbon figures are rough ICE-database style averages (kg CO2e/kg),
good enough for exercising the dashboard, not for real submittals.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from greenbuild.database import Base, SessionLocal, engine  # noqa: E402
from greenbuild.ledger import MaterialLedger  # noqa: E402
from greenbuild.logging_config import setup_logging  # noqa: E402
from greenbuild.schemas import MaterialCreate  # noqa: E402
from greenbuild.store import MaterialStore  # noqa: E402

logger = logging.getLogger("greenbuild.seed")

DEMO_MATERIALS = [
    {
        "name": "Low-Carbon Concrete C40 (GGBS 50%)",
        "category": "structural",
        "cost": 182500, "weight": 420000, "embodiedCarbon": 0.095,
        "transportDistance": 35, "recycledContentPre": 25, "recycledContentPost": 0,
        "isLocallySourced": True, "hasEPD": True,
        "supplier": {"name": "Emirates Readymix", "location": "Dubai"},
    },
    {
        "name": "Reinforcing Steel Bar B500B",
        "category": "structural",
        "cost": 96000, "weight": 38000, "embodiedCarbon": 1.99,
        "transportDistance": 140, "recycledContentPre": 10, "recycledContentPost": 70,
        "isLocallySourced": True, "hasEPD": True,
        "supplier": {"name": "Emirates Steel", "location": "Abu Dhabi"},
    },
    {
        "name": "Double-Glazed Low-E Curtain Wall",
        "category": "enclosure",
        "cost": 240000, "weight": 18500, "embodiedCarbon": 1.6,
        "transportDistance": 5400, "recycledContentPre": 0, "recycledContentPost": 5,
        "isLocallySourced": False, "hasEPD": True,
        "supplier": {"name": "Guardian Glass", "location": "Luxembourg"},
    },
    {
        "name": "Aluminium Cladding Panels, PVDF coated",
        "category": "enclosure",
        "cost": 74000, "weight": 6200, "embodiedCarbon": 8.24,
        "transportDistance": 60, "recycledContentPre": 20, "recycledContentPost": 30,
        "isLocallySourced": True, "hasEPD": False,
        "supplier": {"name": "Alubond", "location": "Dubai"},
    },
    {
        "name": "Chilled Water Piping (Steel, Sch 40)",
        "category": "mechanical",
        "cost": 51000, "weight": 9400, "embodiedCarbon": 2.03,
        "transportDistance": 2600, "recycledContentPre": 0, "recycledContentPost": 25,
        "isLocallySourced": False, "hasEPD": False,
        "supplier": {"name": "Tata Steel", "location": "Mumbai"},
    },
    {
        "name": "Gypsum Board 12.5mm",
        "category": "finishes",
        "cost": 18500, "weight": 11000, "embodiedCarbon": 0.39,
        "transportDistance": 90, "recycledContentPre": 15, "recycledContentPost": 5,
        "isLocallySourced": True, "hasEPD": True,
        "supplier": {"name": "Gypsemna", "location": "Abu Dhabi"},
    },
]


def main():
    parser = argparse.ArgumentParser(description="Seed demo materials into the ledger")
    parser.add_argument("--reset", action="store_true", help="clear existing materials first")
    args = parser.parse_args()

    setup_logging()
    Base.metadata.create_all(bind=engine)

    ledger = MaterialLedger(MaterialStore(SessionLocal))
    ledger.load()
    if args.reset:
        ledger.clear()

    for data in DEMO_MATERIALS:
        material = ledger.add(MaterialCreate.model_validate(data))
        logger.info("Seeded %s (%s)", material.name, material.id)

    summary = ledger.summary()
    logger.info(
        "Ledger now has %d materials: %d points (%s), %.2f kg CO2e",
        summary["material_count"],
        summary["credits"]["total_points"],
        summary["credits"]["cert_level"],
        summary["carbon"]["total_embodied_carbon"],
    )


if __name__ == "__main__":
    main()
