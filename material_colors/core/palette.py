"""Hex helpers and display helpers shared by the index and the UI helpers."""

import re

RGB = tuple[int, int, int]

_HEX6 = re.compile(r'^#?([0-9a-fA-F]{6})$')
_HEX3 = re.compile(r'^#?([0-9a-fA-F]{3})$')


def is_hex6(value: str) -> bool:
    """True for '#rrggbb' or 'rrggbb' in any case."""
    return isinstance(value, str) and _HEX6.match(value) is not None


def normalize_hex(value: str) -> str:
    """Lower-case a hex colour and make sure it starts with '#'.

    Three-digit shorthand is expanded. Anything else is returned lower-cased
    and otherwise untouched, so it simply never compares equal to a catalog hex.
    """
    value = value.strip()
    m = _HEX6.match(value)
    if m:
        return '#' + m.group(1).lower()
    m = _HEX3.match(value)
    if m:
        return '#' + ''.join(c * 2 for c in m.group(1).lower())
    return value.lower()


def hex_to_rgb(value: str) -> RGB:
    """'#2563eb' -> (37, 99, 235). Invalid input maps to black."""
    h = normalize_hex(value)
    if not is_hex6(h):
        return (0, 0, 0)
    return (int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02x}{g:02x}{b:02x}'


def brightness(value: str) -> float:
    """Perceived brightness 0-255 (YIQ weights)."""
    r, g, b = hex_to_rgb(value)
    return (r * 299 + g * 587 + b * 114) / 1000


def is_dark(value: str) -> bool:
    return brightness(value) < 128


def hue_label(hue_name: str) -> str:
    """'light-blue' -> 'Light Blue'."""
    return ' '.join(s[:1].upper() + s[1:] for s in hue_name.split('-'))


def alpha_percent(alpha: float) -> int:
    """0.5 -> 50. Halves round up."""
    return int(alpha * 100 + 0.5)


def hex_formats(value: str, alpha: float | None = None) -> list[str]:
    """Copy formats for a hex colour: with hash, without hash, rgb() and, for translucent colours, rgba()."""
    h = normalize_hex(value)
    r, g, b = hex_to_rgb(h)
    formats = [h, h.lstrip('#'), f'rgb({r}, {g}, {b})']
    if alpha and alpha < 1:
        formats.append(f'rgba({r}, {g}, {b}, .{alpha_percent(alpha):02d})')
    return formats
