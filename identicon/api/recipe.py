"""GET /api/recipe/{identifier} — decoded recipe for an identifier."""

from __future__ import annotations

from fastapi import APIRouter

from identicon.engine.code import derive_code
from identicon.engine.recipe import decode, encode_recipe
from identicon.models.responses import RecipeResponse

router = APIRouter(prefix="/recipe")


@router.get("/{identifier}", response_model=RecipeResponse)
def get_recipe(identifier: str) -> RecipeResponse:
    code = derive_code(identifier)
    recipe = decode(code)
    return RecipeResponse(
        identifier=identifier,
        code=code,
        code_hex=f"{code:016x}",
        recipe_bits=f"{encode_recipe(recipe):012x}",
        middle_type=recipe.middle_type,
        middle_invert=recipe.middle_invert,
        corner_type=recipe.corner_type,
        corner_invert=recipe.corner_invert,
        corner_turn=recipe.corner_turn,
        side_type=recipe.side_type,
        side_invert=recipe.side_invert,
        side_turn=recipe.side_turn,
        primary_color=list(recipe.primary_rgba()[:3]),
        secondary_color=list(recipe.secondary_rgba()[:3]),
        swap_cross=recipe.swap_cross,
    )
