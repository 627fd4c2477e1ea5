"""Colour-string parsing, backed by Pillow's ImageColor.

Accepts everything ImageColor.getrgb understands (#rgb, #rgba, #rrggbb,
#rrggbbaa, rgb(), hsl(), hsv(), CSS colour names) plus:

- CSS rgba() with a fractional alpha, e.g. rgba(244, 67, 54, 0.5).
  ImageColor only reads an integer 0-255 alpha there.
- bare hex digits without the leading '#', e.g. f44336.

Never raises: unparseable input gives None.
"""

import re

from PIL import ImageColor

from material_colors.core.palette import rgb_to_hex
from material_colors.core.types import ColorQuery

_RGBA_FRACTION = re.compile(
    r'^rgba\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d*\.\d+|[01])\s*\)$',
    re.IGNORECASE,
)
_BARE_HEX = re.compile(r'^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def _parse_rgba_fraction(text: str) -> ColorQuery | None:
    m = _RGBA_FRACTION.match(text)
    if not m:
        return None
    r, g, b = (int(m.group(i)) for i in (1, 2, 3))
    alpha = float(m.group(4))
    if max(r, g, b) > 255 or alpha > 1:
        return None
    return ColorQuery(hex=rgb_to_hex(r, g, b), alpha=alpha)


def parse_color(text: str | None) -> ColorQuery | None:
    """Parse arbitrary user text into a ColorQuery, or None if it is not a colour."""
    if not text:
        return None
    text = text.strip()
    if not text:
        return None

    query = _parse_rgba_fraction(text)
    if query is not None:
        return query

    if _BARE_HEX.match(text):
        text = '#' + text

    try:
        rgb = ImageColor.getrgb(text)
    except ValueError:
        return None

    r, g, b = rgb[0], rgb[1], rgb[2]
    if max(r, g, b) > 255:
        return None
    alpha = rgb[3] / 255 if len(rgb) == 4 else 1.0
    return ColorQuery(hex=rgb_to_hex(r, g, b), alpha=alpha)


def is_valid_color(text: str | None) -> bool:
    return parse_color(text) is not None
