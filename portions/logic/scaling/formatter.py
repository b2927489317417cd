"""Display formatting for quantities and scale factors."""
import math
from typing import Optional, Union

from portions.utilities.constants import TO_TASTE

Number = Union[int, float]

__all__ = ["format_quantity", "format_number", "format_scale_factor"]

# Fractional remainders (rounded to 2 places) that have a common glyph
FRACTION_GLYPHS = {
    0.25: '¼',
    0.33: '⅓',
    0.5: '½',
    0.67: '⅔',
    0.75: '¾',
}


def format_number(quantity: Number) -> str:
    """'2', '½', '1 ¾' or a one-decimal fallback such as '1.2'."""
    whole = math.floor(quantity)
    if quantity == whole:
        return str(int(whole))
    glyph = FRACTION_GLYPHS.get(round(quantity - whole, 2))
    if glyph and whole == 0:
        return glyph
    if glyph:
        return f"{int(whole)} {glyph}"
    text = f"{quantity:.1f}"
    return text[:-2] if text.endswith('.0') else text


def format_quantity(quantity: Optional[Number], unit: Optional[str]) -> str:
    if quantity is None:
        return TO_TASTE
    formatted = format_number(quantity)
    return f"{formatted} {unit}" if unit else formatted


def format_scale_factor(scale_factor: float) -> str:
    """Short multiplier label used by serving selectors, e.g. '½×' or '1.5×'."""
    if scale_factor == 0.5:
        return '½×'
    if scale_factor == math.floor(scale_factor):
        return f"{int(scale_factor)}×"
    return f"{scale_factor:.1f}×"
