"""Request and response schemas for the ingredient API."""

from pydantic import BaseModel, Field

from mealplanner.ingredients import ParsedIngredient


class ParsedIngredientSchema(BaseModel):
    """Parsed ingredient as stored in a meal's parsed_ingredients column."""

    name: str
    quantity: str | None = None
    unit: str | None = None
    original: str = ""

    @classmethod
    def from_parsed(cls, parsed: ParsedIngredient) -> "ParsedIngredientSchema":
        return cls(**parsed.to_dict())

    def to_parsed(self) -> ParsedIngredient:
        return ParsedIngredient.from_dict(self.model_dump())


class ParseLinesRequest(BaseModel):
    """Ingredient lines already split by the caller."""

    lines: list[str] = Field(description="One ingredient per entry, in recipe order")


class ParseTextRequest(BaseModel):
    """Raw ingredient text from a textarea or CSV cell."""

    text: str = Field(description="Ingredients separated by comma, semicolon, pipe or newline")


class ParseResponse(BaseModel):
    """Parsed ingredients in input order."""

    ingredients: list[ParsedIngredientSchema]
    total: int
    parsed: int = Field(description="Number of lines with a detected quantity")


class FormatRequest(BaseModel):
    """Parsed ingredients to turn back into display strings."""

    ingredients: list[ParsedIngredientSchema]


class FormatResponse(BaseModel):
    """Display strings in input order."""

    lines: list[str]


class QuantityRequest(BaseModel):
    """Quantity to normalize with the fraction table."""

    quantity: str | None = None


class QuantityResponse(BaseModel):
    """Quantity and its decimal form."""

    quantity: str | None
    decimal: str | None
