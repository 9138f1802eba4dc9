"""Ingredient text parsing: units, fractions, parser and formatter."""

from mealplanner.ingredients.parser import (
    ParsedIngredient,
    format_parsed_ingredient,
    has_quantity_pattern,
    parse_ingredient,
    parse_ingredients_array,
)
from mealplanner.ingredients.splitting import parse_ingredient_text, split_ingredient_text
from mealplanner.ingredients.units import FRACTIONS, UNITS, fraction_to_decimal, is_unit

__all__ = [
    "FRACTIONS",
    "UNITS",
    "ParsedIngredient",
    "format_parsed_ingredient",
    "fraction_to_decimal",
    "has_quantity_pattern",
    "is_unit",
    "parse_ingredient",
    "parse_ingredient_text",
    "parse_ingredients_array",
    "split_ingredient_text",
]
