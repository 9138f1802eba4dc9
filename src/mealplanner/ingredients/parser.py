"""Parse free-text ingredient lines into quantity, unit and name."""

import re
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any

from mealplanner.ingredients.units import is_unit
from mealplanner.logging_config import get_logger

logger = get_logger(__name__)

# Lines shorter than this are never parsed
MIN_PARSE_LENGTH = 3

# Lines longer than this read as descriptions, not measurements
MAX_STRUCTURED_LENGTH = 50

# Integer, decimal, simple fraction or hyphenated mixed fraction ("1-1/2")
_QUANTITY = r"[0-9]+(?:-[0-9]+/[0-9]+|\.[0-9]+|/[0-9]+)?"

_LEADING_QUANTITY_RE = re.compile(rf"^{_QUANTITY}")

# quantity, optional single word (candidate unit), remainder
_INGREDIENT_RE = re.compile(rf"^({_QUANTITY})\s*([a-zA-Z]+)?\s+(.*?)$")

_TO_TASTE_RE = re.compile(r"\bto taste\b", re.IGNORECASE)
_NARRATIVE_RE = re.compile(r"\b(?:with|aromatic)\b", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedIngredient:
    """Structured view of a single ingredient line."""

    name: str
    quantity: str | None
    unit: str | None
    original: str

    @property
    def is_parsed(self) -> bool:
        """True when a leading quantity was found."""
        return self.quantity is not None

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary for JSON storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParsedIngredient":
        """Rebuild a record from stored JSON, tolerating missing keys."""
        original = data.get("original") or ""
        return cls(
            name=data.get("name") or original,
            quantity=data.get("quantity") or None,
            unit=data.get("unit") or None,
            original=original,
        )


def _unparsed(original: str) -> ParsedIngredient:
    return ParsedIngredient(name=original, quantity=None, unit=None, original=original)


def _descriptive_reason(text: str) -> str | None:
    """Return why a line should be kept as free text, or None."""
    if " - " in text or _TO_TASTE_RE.search(text):
        return "note"
    if len(text) > MAX_STRUCTURED_LENGTH or _NARRATIVE_RE.search(text):
        return "description"
    return None


def has_quantity_pattern(text: str) -> bool:
    """Check if the text starts with a number, decimal or fraction."""
    return bool(_LEADING_QUANTITY_RE.match(text))


def parse_ingredient(line: str) -> ParsedIngredient:
    """
    Parse one ingredient line.

    Never raises. Lines without a leading quantity, and lines that read
    like notes or descriptions, come back unparsed with name == original.

    Examples:
        "2 cups Basmati Rice" -> quantity="2", unit="cups", name="Basmati Rice"
        "1-1/2 tsp turmeric powder" -> quantity="1-1/2", unit="tsp"
        "4 Onions" -> quantity="4", unit=None, name="Onions"
        "Salt - to taste" -> unparsed
    """
    if not isinstance(line, str):
        line = "" if line is None else str(line)

    original = line.strip()

    if len(original) < MIN_PARSE_LENGTH or not has_quantity_pattern(original):
        return _unparsed(original)

    if reason := _descriptive_reason(original):
        logger.debug(f"Keeping ingredient as {reason}: {original!r}")
        return _unparsed(original)

    match = _INGREDIENT_RE.match(original)
    if not match:
        logger.debug(f"No quantity/name split for ingredient: {original!r}")
        return _unparsed(original)

    quantity, candidate_unit, rest = match.groups()

    if is_unit(candidate_unit):
        unit = candidate_unit.lower()
        name = rest.strip()
    else:
        # Unknown word after the quantity belongs to the name
        unit = None
        name = f"{candidate_unit or ''} {rest}".strip()

    return ParsedIngredient(
        name=name or original,
        quantity=quantity,
        unit=unit,
        original=original,
    )


def parse_ingredients_array(lines: Iterable[str]) -> list[ParsedIngredient]:
    """Parse a list of ingredient lines, keeping order and length."""
    parsed = [parse_ingredient(line) for line in lines]
    logger.debug(f"Parsed {len(parsed)} ingredient lines")
    return parsed


def format_parsed_ingredient(parsed: ParsedIngredient) -> str:
    """
    Format a parsed ingredient back into a display string.

    The result is "quantity [unit] name". It is not guaranteed to equal
    the original line (unit casing and spacing are not restored).
    """
    if not parsed.quantity:
        return parsed.name

    parts = [parsed.quantity]
    if parsed.unit:
        parts.append(parsed.unit)
    parts.append(parsed.name)

    return " ".join(parts)
