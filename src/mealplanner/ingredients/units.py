"""Unit vocabulary and fraction lookup for ingredient parsing."""

import re

# =============================================================================
# Unit Vocabulary
# =============================================================================

# Singular and plural forms are listed explicitly, there is no stemming.
VOLUME_UNITS: frozenset[str] = frozenset(
    {
        "cup",
        "cups",
        "tablespoon",
        "tablespoons",
        "tbsp",
        "teaspoon",
        "teaspoons",
        "tsp",
        "liter",
        "liters",
        "litre",
        "litres",
        "ml",
        "milliliter",
        "milliliters",
        "pint",
        "pints",
        "quart",
        "quarts",
        "gallon",
        "gallons",
        "fl oz",
        "fluid ounce",
        "fluid ounces",
    }
)

WEIGHT_UNITS: frozenset[str] = frozenset(
    {
        "kg",
        "kilogram",
        "kilograms",
        "g",
        "gram",
        "grams",
        "lb",
        "lbs",
        "pound",
        "pounds",
        "oz",
        "ounce",
        "ounces",
        "ton",
        "tons",
    }
)

COUNT_UNITS: frozenset[str] = frozenset(
    {
        "piece",
        "pieces",
        "pc",
        "pcs",
        "slice",
        "slices",
        "clove",
        "cloves",
        "bunch",
        "bunches",
        "sprig",
        "sprigs",
        "inch",
        "inches",
        "pinch",
        "pinches",
        "handful",
        "handfuls",
        "dash",
        "dashes",
        "drop",
        "drops",
    }
)

# Indian household measures
REGIONAL_UNITS: frozenset[str] = frozenset({"katori", "bowl", "bowls"})

UNITS: frozenset[str] = VOLUME_UNITS | WEIGHT_UNITS | COUNT_UNITS | REGIONAL_UNITS


def is_unit(token: str | None) -> bool:
    """Check whether a token is a known unit (case-insensitive)."""
    if not token:
        return False
    return token.lower() in UNITS


# =============================================================================
# Fraction Table
# =============================================================================

FRACTIONS: dict[str, str] = {
    "1/2": "0.5",
    "1/3": "0.33",
    "2/3": "0.67",
    "1/4": "0.25",
    "3/4": "0.75",
    "1/8": "0.125",
    "3/8": "0.375",
    "5/8": "0.625",
    "7/8": "0.875",
}

_MIXED_FRACTION_RE = re.compile(r"^([0-9]+)-([0-9]+/[0-9]+)$")


def fraction_to_decimal(quantity: str | None) -> str | None:
    """
    Convert a fractional quantity to its decimal string.

    Only fractions present in FRACTIONS are converted. Anything else is
    returned unchanged, so this is safe to call on any parsed quantity.

    Examples:
        "1/2" -> "0.5"
        "1-3/4" -> "1.75"
        "2" -> "2"
        "5/16" -> "5/16"
    """
    if quantity is None:
        return None

    stripped = quantity.strip()
    if stripped in FRACTIONS:
        return FRACTIONS[stripped]

    mixed_match = _MIXED_FRACTION_RE.match(stripped)
    if mixed_match:
        whole, fraction = mixed_match.groups()
        if fraction in FRACTIONS:
            # Table values all start with "0."
            return f"{int(whole)}{FRACTIONS[fraction][1:]}"

    return quantity
