"""
Project cart endpoints.

POST /api/cart            - measurement rows → calculation request body
POST /api/cart/calculate  - same, then submit it to the calculation engine
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..builder import build_specifications
from ..calculation_client import CalculationClient, CalculationServiceError
from ..cart import to_calculation_request
from ..schemas import CalculationSettings, CategoryHints, RawMeasurementEntry
from ..units import Unit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


class CartRequest(BaseModel):
    hints: CategoryHints = CategoryHints()
    entries: List[RawMeasurementEntry] = []
    unit: Unit = Unit.MM
    settings: Optional[CalculationSettings] = None


def _build_request(body: CartRequest) -> dict:
    specs = build_specifications(body.entries, body.hints, body.unit)
    return to_calculation_request(specs, body.settings)


@router.post("")
def build_cart(body: CartRequest):
    return _build_request(body)


@router.post("/calculate")
def calculate_cart(body: CartRequest):
    request = _build_request(body)
    try:
        result = CalculationClient().calculate(request)
    except CalculationServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"request": request, "result": result}
