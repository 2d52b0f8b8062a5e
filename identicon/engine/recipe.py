"""Code decoding — unpack a 64-bit code into a visual recipe.

Bit layout (bit 0 = least significant):

    0-1   middle type (index into MIDDLE_PATCH_SET)
    2     middle invert
    3-6   corner type          7   corner invert     8-9   corner turn
    10-13 side type            14  side invert       15-16 side turn
    17-21 blue   22-26 green   27-31 red             (primary, 5 bits each)
    32-36 red    37-41 green   42-46 blue            (secondary, 5 bits each)
    47    swap cross
    48-63 unused
"""

from __future__ import annotations

from dataclasses import dataclass

from identicon.engine.shapes import MIDDLE_PATCH_SET

_CODE_MASK = (1 << 64) - 1
# Bits 0-47 carry the recipe; the top 16 bits are ignored.
RECIPE_MASK = (1 << 48) - 1

# Channels are 5 bits wide and scaled to 8 bits by a left shift.
_CHANNEL_BITS = 5
_CHANNEL_MASK = (1 << _CHANNEL_BITS) - 1
_CHANNEL_SHIFT = 3

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]


def scale_channel(value: int) -> int:
    """Scale a 5-bit channel (0-31) to 8 bits: 0-248 in steps of 8."""
    return (value & _CHANNEL_MASK) << _CHANNEL_SHIFT


@dataclass(frozen=True)
class Recipe:
    """Decoded shape/rotation/color parameters for one identicon."""

    middle_type_raw: int
    middle_invert: bool
    corner_type: int
    corner_invert: bool
    corner_turn: int
    side_type: int
    side_invert: bool
    side_turn: int
    # Raw 5-bit channels, (red, green, blue)
    primary: RGB
    secondary: RGB
    swap_cross: bool

    @property
    def middle_type(self) -> int:
        """Catalog index of the center tile: one of 0, 4, 8, 15."""
        return MIDDLE_PATCH_SET[self.middle_type_raw]

    def primary_rgba(self, alpha: int = 255) -> RGBA:
        r, g, b = self.primary
        return (scale_channel(r), scale_channel(g), scale_channel(b), alpha)

    def secondary_rgba(self, alpha: int = 255) -> RGBA:
        r, g, b = self.secondary
        return (scale_channel(r), scale_channel(g), scale_channel(b), alpha)


def _bits(code: int, offset: int, width: int) -> int:
    return (code >> offset) & ((1 << width) - 1)


def decode(code: int) -> Recipe:
    """Decode a code into a Recipe. Total: any integer decodes."""
    code &= _CODE_MASK
    return Recipe(
        middle_type_raw=_bits(code, 0, 2),
        middle_invert=bool(_bits(code, 2, 1)),
        corner_type=_bits(code, 3, 4),
        corner_invert=bool(_bits(code, 7, 1)),
        corner_turn=_bits(code, 8, 2),
        side_type=_bits(code, 10, 4),
        side_invert=bool(_bits(code, 14, 1)),
        side_turn=_bits(code, 15, 2),
        primary=(
            _bits(code, 27, _CHANNEL_BITS),
            _bits(code, 22, _CHANNEL_BITS),
            _bits(code, 17, _CHANNEL_BITS),
        ),
        secondary=(
            _bits(code, 32, _CHANNEL_BITS),
            _bits(code, 37, _CHANNEL_BITS),
            _bits(code, 42, _CHANNEL_BITS),
        ),
        swap_cross=bool(_bits(code, 47, 1)),
    )


def encode_recipe(recipe: Recipe) -> int:
    """Pack a Recipe back into the low 48 bits of a code.

    Inverse of decode() over RECIPE_MASK: encode_recipe(decode(c)) == c & RECIPE_MASK.
    """
    red, green, blue = recipe.primary
    second_red, second_green, second_blue = recipe.secondary
    fields = (
        (recipe.middle_type_raw, 0, 2),
        (int(recipe.middle_invert), 2, 1),
        (recipe.corner_type, 3, 4),
        (int(recipe.corner_invert), 7, 1),
        (recipe.corner_turn, 8, 2),
        (recipe.side_type, 10, 4),
        (int(recipe.side_invert), 14, 1),
        (recipe.side_turn, 15, 2),
        (blue, 17, _CHANNEL_BITS),
        (green, 22, _CHANNEL_BITS),
        (red, 27, _CHANNEL_BITS),
        (second_red, 32, _CHANNEL_BITS),
        (second_green, 37, _CHANNEL_BITS),
        (second_blue, 42, _CHANNEL_BITS),
        (int(recipe.swap_cross), 47, 1),
    )
    code = 0
    for value, offset, width in fields:
        code |= (value & ((1 << width) - 1)) << offset
    return code
