"""
Shared test fixtures: test client, sample measurement rows.
"""

import os
import pytest

# Point the engine client somewhere harmless before importing app modules
os.environ["CALCULATION_API_URL"] = "http://calc.test"
os.environ["CALCULATION_API_TOKEN"] = ""

from fastapi.testclient import TestClient

from glazing_cart.main import app
from glazing_cart.schemas import CategoryHints, RawMeasurementEntry


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def casement_entry():
    """Scenario A row: 2-panel casement in mm."""
    return RawMeasurementEntry(
        type="Casement Window (D/Curve)",
        width="1200",
        height="1500",
        quantity="2",
        panel_count="2",
    )


@pytest.fixture
def net_entry():
    """Scenario B row: 1125/26 net in cm."""
    return RawMeasurementEntry(
        type="1125/26 Net (1132-panel)",
        width="90",
        height="120",
        quantity="1",
    )


@pytest.fixture
def curtain_wall_entry():
    return RawMeasurementEntry(
        type="Curtain Wall Window (Advanced Grid)",
        width="3000",
        height="2400",
        quantity="1",
        vertical_panel_count="3",
        horizontal_panel_count="2",
    )


@pytest.fixture
def selection_hints():
    """Selection-step labels that don't match registry values exactly."""
    return CategoryHints(
        windows=["casement"],
        doors=["french"],
        skylights=["ebm"],
        glass_panels=["grid"],
    )
