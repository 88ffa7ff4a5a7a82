"""
Quote transcoding endpoints.

POST /api/quotes/request             - quote configuration → create-quote body
POST /api/quotes/standalone-request  - standalone quote flow → create-quote body
POST /api/quotes/preview             - quote service response → preview view model
POST /api/quotes/items               - seed quote rows from measurements or a calculation result
"""

from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from .. import quotes
from ..schemas import (
    CamelModel,
    QuoteConfiguration,
    QuoteExtras,
    QuoteItemList,
    QuoteOverview,
    QuoteResponse,
    RawMeasurementEntry,
)

router = APIRouter(prefix="/quotes", tags=["quotes"])


class QuoteRequestBody(CamelModel):
    config: QuoteConfiguration
    project_id: Optional[int] = None


class StandaloneQuoteBody(CamelModel):
    overview: QuoteOverview
    item_list: QuoteItemList
    extras: QuoteExtras
    project_id: Optional[int] = None


class QuotePreviewBody(CamelModel):
    quote: QuoteResponse
    config: Optional[QuoteConfiguration] = None


class QuoteItemsBody(CamelModel):
    list_type: str = "material"
    entries: List[RawMeasurementEntry] = []
    result: Optional[dict] = None


@router.post("/request")
def quote_request(body: QuoteRequestBody):
    return quotes.to_quote_request(body.config, body.project_id)


@router.post("/standalone-request")
def standalone_quote_request(body: StandaloneQuoteBody):
    return quotes.to_standalone_quote_request(body.overview, body.item_list, body.extras, body.project_id)


@router.post("/preview")
def quote_preview(body: QuotePreviewBody):
    return quotes.to_quote_preview(body.quote, body.config)


@router.post("/items")
def quote_items(body: QuoteItemsBody):
    return quotes.initial_quote_items(body.list_type, body.entries, body.result)
