"""API routers for the mealplanner application."""

from mealplanner.routers.ingredients import router as ingredients_router

__all__ = [
    "ingredients_router",
]
