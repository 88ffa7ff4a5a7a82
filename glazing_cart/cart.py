"""
Cart assembler: normalized specifications to the calculation engine's
request body.

    {"projectCart": [{"module_id": ..., "qty": ..., "W": ...}, ...],
     "settings": {"stockLength": ..., "bladeKerf": ..., "wasteThreshold": ...}}

Pure structural flattening: one cart item per specification, in order,
never merged or deduplicated.
"""

from typing import Iterable, List, Optional, Union

from .builder import build_specifications
from .config import settings as app_settings
from .schemas import (
    CalculationSettings,
    CategoryHints,
    NormalizedSpecification,
    ProjectData,
    ProjectDescription,
    RawMeasurementEntry,
)
from .units import Unit


def default_settings() -> CalculationSettings:
    """Cutting settings from configuration (6 m stock, 5 mm kerf, 200 mm waste threshold)."""
    return CalculationSettings(
        stock_length=app_settings.DEFAULT_STOCK_LENGTH,
        blade_kerf=app_settings.DEFAULT_BLADE_KERF,
        waste_threshold=app_settings.DEFAULT_WASTE_THRESHOLD,
    )


def to_cart_item(spec: NormalizedSpecification) -> dict:
    return {"module_id": spec.module_id, **spec.parameters.model_dump()}


def to_cart(specs: Iterable[NormalizedSpecification]) -> List[dict]:
    """Flatten specifications into project cart items."""
    return [to_cart_item(spec) for spec in specs]


def to_calculation_request(specs: Iterable[NormalizedSpecification],
                           settings: Optional[CalculationSettings] = None) -> dict:
    """Request body for the engine's calculate/verify endpoints. Settings pass through as given."""
    settings = settings or default_settings()
    return {
        "projectCart": to_cart(specs),
        "settings": settings.model_dump(by_alias=True),
    }


def create_project_data(description: ProjectDescription,
                        hints: CategoryHints,
                        entries: Iterable[RawMeasurementEntry],
                        unit: Union[Unit, str] = Unit.MM,
                        settings: Optional[CalculationSettings] = None) -> ProjectData:
    """Collect the project flow's three steps into one ProjectData."""
    return ProjectData(
        project_name=description.project_name,
        customer_name=description.customer_name,
        site_address=description.site_address,
        description=description.description,
        specifications=build_specifications(entries, hints, unit),
        settings=settings or default_settings(),
    )


def project_data_to_request(project: ProjectData) -> dict:
    return to_calculation_request(project.specifications, project.settings)
