"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from mealplanner.config import Settings, get_settings
from mealplanner.main import app

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# Ingredient Line Fixtures
# =============================================================================


@pytest.fixture
def recipe_ingredient_lines():
    """Ingredient lines as typed into the meal form for a biryani."""
    return [
        "2 cups Basmati Rice",
        "1-1/2 tsp turmeric powder",
        "4 Onions",
        "Salt - to taste",
        "500 g chicken",
        "1/2 cup yogurt",
        "2.5 tbsp ghee",
        "Fresh coriander",
    ]


@pytest.fixture
def csv_ingredients_cell():
    """Ingredients column from a meal CSV import row."""
    return "2 cups Basmati Rice; 1 tsp salt | 3 cloves garlic,\n4 Onions, ,"


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def small_request_limit():
    """Override settings so only three ingredients are accepted per request."""
    app.dependency_overrides[get_settings] = lambda: Settings(max_ingredients_per_request=3)
    yield
    app.dependency_overrides.pop(get_settings, None)
