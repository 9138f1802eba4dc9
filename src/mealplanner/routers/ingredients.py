"""API routes for parsing and formatting ingredient lines."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from mealplanner.config import Settings, get_settings
from mealplanner.ingredients import (
    ParsedIngredient,
    format_parsed_ingredient,
    fraction_to_decimal,
    parse_ingredients_array,
    split_ingredient_text,
)
from mealplanner.logging_config import get_logger
from mealplanner.schemas import (
    FormatRequest,
    FormatResponse,
    ParsedIngredientSchema,
    ParseLinesRequest,
    ParseResponse,
    ParseTextRequest,
    QuantityRequest,
    QuantityResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


def _check_size(count: int, settings: Settings) -> None:
    if count > settings.max_ingredients_per_request:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=(
                f"Too many ingredients: {count} "
                f"(maximum {settings.max_ingredients_per_request} per request)"
            ),
        )


def _to_response(parsed: list[ParsedIngredient]) -> ParseResponse:
    return ParseResponse(
        ingredients=[ParsedIngredientSchema.from_parsed(item) for item in parsed],
        total=len(parsed),
        parsed=sum(1 for item in parsed if item.is_parsed),
    )


# =============================================================================
# Parsing Endpoints
# =============================================================================


@router.post("/parse", response_model=ParseResponse)
async def parse_lines(
    request: ParseLinesRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ParseResponse:
    """Parse ingredient lines that were already split by the caller."""
    _check_size(len(request.lines), settings)

    response = _to_response(parse_ingredients_array(request.lines))
    logger.info(f"Parsed {response.total} ingredient lines ({response.parsed} with quantity)")
    return response


@router.post("/parse-text", response_model=ParseResponse)
async def parse_text(
    request: ParseTextRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ParseResponse:
    """Split raw ingredient text into lines and parse each one."""
    lines = split_ingredient_text(request.text)
    _check_size(len(lines), settings)

    response = _to_response(parse_ingredients_array(lines))
    logger.info(
        f"Parsed {response.total} ingredient lines from text ({response.parsed} with quantity)"
    )
    return response


# =============================================================================
# Formatting Endpoints
# =============================================================================


@router.post("/format", response_model=FormatResponse)
async def format_ingredients(
    request: FormatRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> FormatResponse:
    """Turn parsed ingredients back into display strings."""
    _check_size(len(request.ingredients), settings)

    return FormatResponse(
        lines=[format_parsed_ingredient(item.to_parsed()) for item in request.ingredients]
    )


@router.post("/normalize-quantity", response_model=QuantityResponse)
async def normalize_quantity(request: QuantityRequest) -> QuantityResponse:
    """Convert a fractional quantity to a decimal string using the fraction table."""
    return QuantityResponse(
        quantity=request.quantity,
        decimal=fraction_to_decimal(request.quantity),
    )
