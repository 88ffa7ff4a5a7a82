"""
Quote transcoding between the UI's view models and the quote service.

Outbound: quote configuration (or the standalone quote flow) -> create-quote
request body. Inbound: quote service response -> preview view model.
Also seeds quote rows from measurements or from a calculation result.

No pricing happens here. Totals come from the UI and tax is inferred from
them, so the UI's grand total stays authoritative.
"""

import logging
import re
from datetime import date
from typing import Iterable, List, Optional

from .config import settings
from .schemas import (
    QuoteConfiguration,
    QuoteExtras,
    QuoteItemList,
    QuoteOverview,
    QuoteResponse,
    RawMeasurementEntry,
)
from .units import parse_number

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

TAX_LABEL = "Tax (VAT)"
DEFAULT_PROJECT_NAME = "Project"

# (view-model field, line description), in the order they appear on the quote
COST_COMPONENTS = [
    ("material_cost", "Material Cost"),
    ("labour_cost", "Labor Cost"),
    ("transportation_cost", "Transportation & Delivery"),
    ("miscellaneous", "Miscellaneous Charges"),
]


def _coerce(model_cls, value):
    if value is None or isinstance(value, model_cls):
        return value
    return model_cls.model_validate(value)


def is_valid_email(value: Optional[str]) -> bool:
    return bool(value) and EMAIL_PATTERN.match(value) is not None


def make_cost_item(description: str, amount: float, quantity: float = 1) -> dict:
    """Build a request CostItem dict for a single lump-sum charge."""
    return {
        "description": description,
        "quantity": quantity,
        "unitPrice": amount,
        "totalPrice": amount,
    }


def _quote_type(project_id) -> str:
    return "from_project" if project_id else "standalone"


def to_quote_request(config, project_id: Optional[int] = None) -> dict:
    """
    Create-quote request body from the quote configuration screen.

    One item per cost component above zero. tax = max(0, total - subtotal + discount).
    The contact is forwarded as customerEmail only if it looks like an email.
    """
    config = _coerce(QuoteConfiguration, config)

    items = [
        make_cost_item(description, getattr(config, field))
        for field, description in COST_COMPONENTS
        if getattr(config, field) > 0
    ]
    subtotal = sum(item["totalPrice"] for item in items)
    tax = max(0.0, config.total_quote - subtotal + (config.discount or 0.0))

    body = {
        "quoteType": _quote_type(project_id),
        "customerName": config.customer_name,
        "customerAddress": config.site_address,
        "items": items,
        "subtotal": subtotal,
        "tax": tax,
        "total": config.total_quote,
        "status": "draft",
    }
    if project_id:
        body["projectId"] = project_id
    if is_valid_email(config.customer_contact):
        body["customerEmail"] = config.customer_contact
    elif config.customer_contact:
        logger.debug("Customer contact %r is not an email, not forwarded", config.customer_contact)
    return body


def to_standalone_quote_request(overview, item_list, extras,
                                project_id: Optional[int] = None) -> dict:
    """
    Create-quote request body from the standalone quote flow (overview,
    item list, extras). Added charges win over the comma-separated
    extra-charges text, which splits its amount evenly.
    """
    overview = _coerce(QuoteOverview, overview)
    item_list = _coerce(QuoteItemList, item_list)
    extras = _coerce(QuoteExtras, extras)

    items = [
        {
            "description": row.description,
            "quantity": row.quantity,
            "unitPrice": row.unit_price,
            "totalPrice": row.total,
        }
        for row in item_list.items
    ]

    if extras.added_charges:
        for charge in extras.added_charges:
            if charge.description and charge.amount > 0:
                items.append(make_cost_item(charge.description, charge.amount))
    elif extras.extra_charges and extras.amount > 0:
        descriptions = [c.strip() for c in extras.extra_charges.split(",") if c.strip()]
        share = extras.amount / len(descriptions) if descriptions else extras.amount
        for description in descriptions:
            items.append(make_cost_item(description, share))

    subtotal = sum(item["totalPrice"] for item in items)

    body = {
        "quoteType": _quote_type(project_id),
        "customerName": overview.customer_name,
        "customerAddress": overview.site_address,
        "items": items,
        "subtotal": subtotal,
        "tax": max(0.0, extras.total - subtotal),
        "total": extras.total,
        "status": "draft",
    }
    if project_id:
        body["projectId"] = project_id
    return body


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_issue_date(day: date) -> str:
    """'19 October 2026', whatever the process locale."""
    return f"{day.day} {MONTH_NAMES[day.month - 1]} {day.year}"


def payment_info() -> dict:
    return {
        "accountName": settings.PAYMENT_ACCOUNT_NAME,
        "accountNumber": settings.PAYMENT_ACCOUNT_NUMBER,
        "bankName": settings.PAYMENT_BANK_NAME,
    }


def to_quote_preview(response, config=None, issue_date: Optional[date] = None) -> dict:
    """
    Preview view model from a quote service response.

    Items get a local id and a display type; a nonzero tax becomes one
    "Tax (VAT)" charge. Project name and site address fall back from the
    linked project to the original configuration to a generic default.
    """
    response = _coerce(QuoteResponse, response)
    config = _coerce(QuoteConfiguration, config) or QuoteConfiguration()
    project = response.project

    items = [
        {
            "id": f"item-{index}",
            "description": item.description,
            "quantity": item.quantity,
            "unitPrice": item.unit_price,
            "total": item.total_price,
            "type": "material",  # everything the quote service returns is a material line
        }
        for index, item in enumerate(response.items)
    ]

    charges = []
    if response.tax:
        charges.append({"label": TAX_LABEL, "amount": response.tax})

    project_name = (project and project.project_name) or config.quote_name or DEFAULT_PROJECT_NAME
    site_address = ((project and project.site_address) or response.customer_address
                    or config.site_address or "")

    return {
        "projectName": project_name,
        "siteAddress": site_address,
        "customerName": response.customer_name,
        "customerEmail": response.customer_email or config.customer_contact or "",
        "quoteId": response.quote_number or f"Q-{response.id}",
        "issueDate": format_issue_date(issue_date or date.today()),
        "items": items,
        "summary": {
            "subtotal": response.subtotal,
            "charges": charges,
            "grandTotal": response.total,
        },
        "paymentInfo": payment_info(),
    }


# --- Seeding quote rows ---

def _quote_row(index: int, description: str, quantity: float) -> dict:
    # Prices are entered by the user afterwards
    return {
        "id": str(index),
        "description": description,
        "quantity": quantity,
        "unitPrice": 0,
        "total": 0,
    }


def _describe_entry(entry: RawMeasurementEntry) -> str:
    description = f"{entry.width} x {entry.height}"
    if entry.type:
        description += f" ({entry.type})"
    if entry.panel_count and entry.panel_count != "1":
        plural = "s" if parse_number(entry.panel_count, default=0) > 1 else ""
        description += f" - {entry.panel_count} Panel{plural}"
    if entry.opening_panel_count:
        description += f" - {entry.opening_panel_count} Opening"
    if entry.vertical_panel_count and entry.horizontal_panel_count:
        description += f" - {entry.vertical_panel_count}×{entry.horizontal_panel_count} Grid"
    return description


def dimension_quote_items(entries: Iterable) -> List[dict]:
    """One quote row per measurement row, described as 'W x H (type) - ...'."""
    return [
        _quote_row(index, _describe_entry(entry), parse_number(entry.quantity, default=1.0))
        for index, entry in enumerate((_coerce(RawMeasurementEntry, e) for e in entries), start=1)
    ]


def material_quote_items(result: Optional[dict]) -> List[dict]:
    """Quote rows from a calculation result: profiles, then accessories, then rubbers."""
    result = result or {}
    rows = []
    for item in result.get("materialList") or []:
        if item.get("type") == "Profile":
            rows.append((item.get("item", ""), item.get("units", 0)))
    for item in result.get("accessoryTotals") or []:
        rows.append((item.get("name", ""), item.get("qty", 0)))
    for item in result.get("rubberTotals") or []:
        rows.append((f"{item.get('name', '')} ({parse_number(item.get('total_meters')):.2f}m)", 1))
    return [_quote_row(index, description, quantity)
            for index, (description, quantity) in enumerate(rows, start=1)]


def initial_quote_items(list_type: str, entries: Optional[Iterable] = None,
                        result: Optional[dict] = None) -> List[dict]:
    """Starting rows for the quote item list: 'dimension' or 'material'. Empty when there is nothing to seed from."""
    if list_type == "dimension":
        rows = dimension_quote_items(entries or [])
    elif list_type == "material":
        rows = material_quote_items(result)
    else:
        rows = []
    if not rows:
        logger.debug("No %s rows to seed the quote with", list_type)
    return rows
