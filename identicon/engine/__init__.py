"""Identicon rendering engine."""

from identicon.engine.code import derive_code
from identicon.engine.recipe import Recipe, decode, encode_recipe
from identicon.engine.renderer import RenderSettings, default_settings, render, render_identicon

__all__ = [
    "derive_code",
    "Recipe",
    "decode",
    "encode_recipe",
    "RenderSettings",
    "default_settings",
    "render",
    "render_identicon",
]
