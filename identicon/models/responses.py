"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shapes: int = 0


class RecipeResponse(BaseModel):
    identifier: str
    code: int
    code_hex: str = Field(..., description="64-bit code, 16 hex digits")
    recipe_bits: str = Field(..., description="Low 48 bits re-encoded from the recipe, 12 hex digits")
    middle_type: int
    middle_invert: bool
    corner_type: int
    corner_invert: bool
    corner_turn: int
    side_type: int
    side_invert: bool
    side_turn: int
    primary_color: list[int] = Field(default_factory=list, description="8-bit RGB")
    secondary_color: list[int] = Field(default_factory=list, description="8-bit RGB")
    swap_cross: bool = False
