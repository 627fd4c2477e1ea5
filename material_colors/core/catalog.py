"""The named-colour catalog: load, validate and merge the nested catalog format.

External format (the bundled palette and the user's extraColors share it):

    {
      "red": {
        "500": {"hex": "#f44336"},
        "_groups": [{"title": "accent", "colors": [{"name": "a100", "hex": "#ff8a80"}]}],
        "_selectorLight": "#f44336",
        "_selectorDark": "#e57373"
      }
    }

Keys starting with '_' are metadata, every other key is a direct value.
A ColorCatalog is immutable once built; hue order is display order.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import replace
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

from material_colors.core.palette import is_hex6, normalize_hex
from material_colors.core.types import ColorGroup, ColorValue, HueEntry

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = 'material.json'


class CatalogError(ValueError):
    """Raised when catalog data does not have the expected shape."""


class ColorCatalog(Mapping[str, HueEntry]):
    """Ordered, read-only mapping hue-name -> HueEntry."""

    def __init__(self, hues: Mapping[str, HueEntry] | None = None):
        self._hues = MappingProxyType(dict(hues or {}))

    def __getitem__(self, hue_name: str) -> HueEntry:
        return self._hues[hue_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._hues)

    def __len__(self) -> int:
        return len(self._hues)

    def __repr__(self) -> str:
        return f'ColorCatalog({list(self._hues)!r})'

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> ColorCatalog:
        """Build a catalog from the nested external format."""
        if not isinstance(raw, Mapping):
            raise CatalogError(f'catalog must be an object, got {type(raw).__name__}')
        return cls({hue_name: _parse_hue(hue_name, hue) for hue_name, hue in raw.items()})

    def with_extra(self, extra: ColorCatalog) -> ColorCatalog:
        """Put extra hues in front of this catalog.

        The first hue of this catalog gets start_group so the UI can draw a
        separator. A hue name present in both keeps the extra hue's position
        but this catalog's content.
        """
        if not extra:
            return self
        own = dict(self._hues)
        if own:
            first = next(iter(own))
            own[first] = replace(own[first], start_group=True)
        return ColorCatalog({**extra, **own})


def _parse_text(where: str, value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogError(f'{where}: expected a string, got {value!r}')
    return value or None


def _parse_value(where: str, raw: Any) -> ColorValue:
    if not isinstance(raw, Mapping):
        raise CatalogError(f'{where}: colour must be an object, got {raw!r}')
    hex_value = raw.get('hex')
    if not is_hex6(hex_value):
        raise CatalogError(f'{where}: invalid hex {hex_value!r}')
    return ColorValue(hex=normalize_hex(hex_value), name=_parse_text(f'{where}.name', raw.get('name')))


def _parse_group(where: str, raw: Any) -> ColorGroup:
    if not isinstance(raw, Mapping):
        raise CatalogError(f'{where}: group must be an object')
    colors = []
    for i, color in enumerate(raw.get('colors') or []):
        value = _parse_value(f'{where}.colors[{i}]', color)
        if not value.name:
            raise CatalogError(f'{where}.colors[{i}]: grouped colour needs a name')
        colors.append(value)
    return ColorGroup(title=_parse_text(f'{where}.title', raw.get('title')), colors=tuple(colors))


def _parse_selector(where: str, value: Any) -> str | None:
    if value is None:
        return None
    if not is_hex6(value):
        raise CatalogError(f'{where}: invalid selector hex {value!r}')
    return normalize_hex(value)


def _parse_hue(hue_name: str, raw: Any) -> HueEntry:
    if not hue_name:
        raise CatalogError('hue name must not be empty')
    if not isinstance(raw, Mapping):
        raise CatalogError(f'{hue_name}: hue must be an object')

    values = {
        key: _parse_value(f'{hue_name}.{key}', value)
        for key, value in raw.items()
        if not key.startswith('_')
    }
    groups = tuple(_parse_group(f'{hue_name}._groups[{i}]', g) for i, g in enumerate(raw.get('_groups') or []))
    return HueEntry(
        values=MappingProxyType(values),
        groups=groups,
        selector_light=_parse_selector(f'{hue_name}._selectorLight', raw.get('_selectorLight')),
        selector_dark=_parse_selector(f'{hue_name}._selectorDark', raw.get('_selectorDark')),
        start_group=bool(raw.get('_startGroup', False)),
    )


def load_catalog_file(path: str | Path) -> ColorCatalog:
    """Load a catalog from a JSON file on disk."""
    with open(path, encoding='utf-8') as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f'{path}: {e}') from e
    return ColorCatalog.from_dict(raw)


def load_bundled_catalog() -> ColorCatalog:
    """The Material Design palette shipped with the package."""
    text = resources.files('material_colors.data').joinpath(BUNDLED_CATALOG).read_text(encoding='utf-8')
    catalog = ColorCatalog.from_dict(json.loads(text))
    logger.debug('Loaded bundled catalog with %d hues', len(catalog))
    return catalog


def selector_color(entry: HueEntry, dark_mode: bool = False) -> str | None:
    """Sidebar icon colour for a hue.

    The selector hint for the mode if present, else value 300 (dark) or
    500 (light), else the first colour of the hue.
    """
    hint = entry.selector_dark if dark_mode else entry.selector_light
    if hint:
        return hint
    key = '300' if dark_mode else '500'
    if key in entry.values:
        return entry.values[key].hex
    for value in entry.values.values():
        return value.hex
    for group in entry.groups:
        for value in group.colors:
            return value.hex
    return None
