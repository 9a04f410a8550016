"""
Dashboard endpoints: read-only metrics over the current ledger.

GET /api/dashboard/           : everything in one payload
GET /api/dashboard/credits    : credit points + certification tier
GET /api/dashboard/carbon     : embodied carbon totals
GET /api/dashboard/categories : carbon per category (chart data)
"""

from fastapi import APIRouter, Depends
from typing import List

from .. import schemas
from ..ledger import MaterialLedger, get_ledger
from ..scoring import CarbonEstimator, CategoryAggregator, CreditScorer

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/", response_model=schemas.DashboardSummary)
def dashboard(ledger: MaterialLedger = Depends(get_ledger)):
    return ledger.summary()


@router.get("/credits", response_model=schemas.CreditScore)
def credits(ledger: MaterialLedger = Depends(get_ledger)):
    return CreditScorer().calculate(ledger.materials)


@router.get("/carbon", response_model=schemas.CarbonEstimate)
def carbon(ledger: MaterialLedger = Depends(get_ledger)):
    return CarbonEstimator().calculate(ledger.materials)


@router.get("/categories", response_model=List[schemas.CategoryCarbon])
def categories(ledger: MaterialLedger = Depends(get_ledger)):
    return CategoryAggregator().calculate(ledger.materials)["categories"]
