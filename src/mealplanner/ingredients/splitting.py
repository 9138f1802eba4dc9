"""Split raw ingredient text (form textareas, CSV cells) into lines."""

import re

from mealplanner.ingredients.parser import ParsedIngredient, parse_ingredients_array

# Separators used in ingredient textareas and CSV "Ingredients" columns
INGREDIENT_SEPARATORS_RE = re.compile(r"[,;|\n]")


def split_ingredient_text(text: str | None) -> list[str]:
    """
    Split a block of ingredient text into individual lines.

    Splits on comma, semicolon, pipe and newline, trims each piece and
    drops empty ones.

    Examples:
        "2 cups rice, 1 tsp salt" -> ["2 cups rice", "1 tsp salt"]
        "Salt | Pepper\\n" -> ["Salt", "Pepper"]
    """
    if not text or not text.strip():
        return []

    pieces = (piece.strip() for piece in INGREDIENT_SEPARATORS_RE.split(text))
    return [piece for piece in pieces if piece]


def parse_ingredient_text(text: str | None) -> list[ParsedIngredient]:
    """Split a block of ingredient text and parse each line."""
    return parse_ingredients_array(split_ingredient_text(text))
