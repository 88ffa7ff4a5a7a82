from fastapi import APIRouter, HTTPException
from typing import List

from ..modules import registry
from ..schemas import Category, FieldRequirements, TypeDescriptor

router = APIRouter(prefix="/modules", tags=["modules"])


def _category_or_404(category: str) -> Category:
    try:
        return Category(category)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown glazing category: {category}")


@router.get("/categories")
def list_categories():
    """Enabled categories with their enabled types: what the project wizard may offer."""
    return [
        {
            "name": category.value,
            "types": [t.model_dump() for t in registry.enabled_types(category)],
        }
        for category in registry.enabled_categories()
    ]


@router.get("/requirements/{module_id}", response_model=FieldRequirements)
def get_requirements(module_id: str):
    return registry.requirements_for(module_id)


@router.get("/{category}/types", response_model=List[TypeDescriptor])
def list_types(category: str):
    return registry.enabled_types(_category_or_404(category))
