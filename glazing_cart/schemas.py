import enum
from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Category(str, enum.Enum):
    WINDOW = "Window"
    DOOR = "Door"
    NET = "Net"
    PARTITION = "Partition"
    CURTAIN_WALL = "Curtain Wall"


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase keys; dumps camelCase with by_alias=True."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Module registry ---

class TypeDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool
    module_id: Optional[str] = None  # None = not implemented yet
    label: str
    value: str

    @model_validator(mode="after")
    def _enabled_needs_module(self):
        if self.enabled and self.module_id is None:
            raise ValueError(f"Type '{self.value}' is enabled but has no module id")
        return self


class CategoryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool
    name: str
    types: tuple[TypeDescriptor, ...] = ()

    @model_validator(mode="after")
    def _disabled_category_has_no_enabled_types(self):
        if not self.enabled and any(t.enabled for t in self.types):
            raise ValueError(f"Category '{self.name}' is disabled but exposes enabled types")
        return self


class FieldRequirements(BaseModel):
    model_config = ConfigDict(frozen=True)

    requires_width: bool = True
    requires_height: bool = True
    requires_panel: bool = False
    requires_opening_panels: bool = False
    requires_vertical_panels: bool = False
    requires_horizontal_panels: bool = False
    requires_inside_to_inside: bool = False
    width_label: str = "Width"
    height_label: str = "Height"
    panel_label: str = "Panel"


# --- Measurement input ---

class RawMeasurementEntry(BaseModel):
    """One measurement row as typed into the form. Every value stays text."""

    type: str = ""
    width: str = ""
    height: str = ""
    quantity: str = ""
    panel_count: str = Field("", validation_alias=AliasChoices("panel_count", "panelCount", "panel"))
    opening_panel_count: str = Field(
        "", validation_alias=AliasChoices("opening_panel_count", "openingPanelCount", "openingPanels"))
    vertical_panel_count: str = Field(
        "", validation_alias=AliasChoices("vertical_panel_count", "verticalPanelCount", "verticalPanels"))
    horizontal_panel_count: str = Field(
        "", validation_alias=AliasChoices("horizontal_panel_count", "horizontalPanelCount", "horizontalPanels"))

    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, bool):
            raise ValueError("expected text or a number, not a boolean")
        if isinstance(value, (int, float)):
            return str(value)
        return value


class CategoryHints(CamelModel):
    """Free-text labels picked on the project-selection step, grouped by the UI's keys."""

    windows: List[str] = []
    doors: List[str] = []
    skylights: List[str] = []      # nets
    glass_panels: List[str] = []   # curtain walls


# --- Module parameters (one closed variant per module family) ---

class ModuleParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    qty: float = 1.0


class FrameParameters(ModuleParameters):
    W: float = 0.0
    H: float = 0.0


class CasementParameters(FrameParameters):
    N: float = 1.0
    O: float = 1.0


class CurtainWallParameters(FrameParameters):
    N_v: float = 1.0
    N_h: float = 1.0


class NetParameters(ModuleParameters):
    in_to_in_width: float = 0.0
    in_to_in_height: float = 0.0


AnyModuleParameters = Union[CasementParameters, CurtainWallParameters, FrameParameters, NetParameters]


class NormalizedSpecification(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: Category
    glazing_type_label: str
    module_id: str
    parameters: AnyModuleParameters

    @model_validator(mode="before")
    @classmethod
    def _parameters_for_module(cls, data):
        # A bare dict would validate as whichever union member fits first,
        # so reloaded parameters go through the family that serves module_id
        if isinstance(data, dict) and isinstance(data.get("parameters"), dict):
            from .modules.registry import get_module
            parameters = get_module(data.get("module_id")).PARAMETERS.model_validate(data["parameters"])
            data = {**data, "parameters": parameters}
        return data


class CalculationSettings(CamelModel):
    """Cutting settings forwarded untouched to the calculation engine."""

    stock_length: float
    blade_kerf: float
    waste_threshold: float


class ProjectDescription(CamelModel):
    project_name: str = ""
    customer_name: str = ""
    site_address: str = ""
    description: str = ""


class ProjectData(CamelModel):
    project_name: str = ""
    customer_name: str = ""
    site_address: str = ""
    description: str = ""
    specifications: List[NormalizedSpecification] = []
    settings: CalculationSettings


# --- Quotes ---

class CostItem(CamelModel):
    description: str
    quantity: float = 1.0
    unit_price: float = 0.0
    total_price: float = 0.0


class QuoteConfiguration(CamelModel):
    quote_name: str = ""
    customer_name: str = ""
    site_address: str = ""
    customer_contact: str = ""
    quote_validity: int = 30  # days
    project_status: str = ""
    material_cost: float = 0.0
    labour_cost: float = 0.0
    transportation_cost: float = 0.0
    miscellaneous: float = 0.0
    discount: float = 0.0
    total_quote: float = 0.0


class LinkedProject(CamelModel):
    project_name: Optional[str] = None
    site_address: Optional[str] = None


class QuoteResponse(CamelModel):
    id: Optional[int] = None
    quote_number: Optional[str] = None
    customer_name: str = ""
    customer_address: Optional[str] = None
    customer_email: Optional[str] = None
    items: List[CostItem] = []
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    project: Optional[LinkedProject] = None


class QuoteOverview(CamelModel):
    customer_name: str = ""
    project_name: str = ""
    site_address: str = ""
    quote_id: str = ""
    issue_date: str = ""
    payment_terms: str = ""


class QuoteItemRow(CamelModel):
    id: str = ""
    description: str = ""
    quantity: float = 1.0
    unit_price: float = 0.0
    total: float = 0.0


class QuoteItemList(CamelModel):
    list_type: str = "material"  # "material" | "dimension"
    items: List[QuoteItemRow] = []
    subtotal: float = 0.0


class AddedCharge(CamelModel):
    description: str = ""
    amount: float = 0.0


class QuoteExtras(CamelModel):
    extra_charges: str = ""
    amount: float = 0.0
    additional_notes: str = ""
    account_name: str = ""
    account_number: str = ""
    bank_name: str = ""
    total: float = 0.0
    added_charges: List[AddedCharge] = []
