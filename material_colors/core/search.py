"""Search outcome, colour tiles, copy options and clipboard change detection.

These are the decisions the UI layers make around the index and the
formatter, kept free of any UI so they can be tested and reused by the CLI.

Search outcomes:

    empty    blank input, show help text
    match    the colour is in the catalog, one tile per matching record
    similar  valid colour not in the catalog, its own tile plus the
             three closest catalog colours
    unknown  input is not a colour
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from material_colors.core.formatter import DEFAULT_COPY_FORMAT, render, render_all
from material_colors.core.index import DEFAULT_NEAREST, CatalogIndex
from material_colors.core.palette import alpha_percent, hex_formats, hue_label, is_dark
from material_colors.core.parser import parse_color
from material_colors.core.types import ColorQuery, FormatData, FormatTemplate, SearchableRecord

HELP_TEXT = (
    'Search by material color name or hex value. '
    'Copy any color code format to the clipboard to detect the color name.'
)


class SearchStatus(Enum):
    EMPTY = 'empty'
    MATCH = 'match'
    SIMILAR = 'similar'
    UNKNOWN = 'unknown'


@dataclass(frozen=True)
class ColorHit:
    """A colour to show: a catalog record, or a raw query colour when record is None."""

    hex: str
    record: SearchableRecord | None = None
    alpha: float | None = None
    distance: float | None = None

    @property
    def format_data(self) -> FormatData:
        if self.record is None:
            return FormatData(alpha=self.alpha)
        return FormatData.from_record(self.record, alpha=self.alpha)


@dataclass
class SearchResult:
    text: str
    status: SearchStatus
    query: ColorQuery | None = None
    matches: list[ColorHit] = field(default_factory=list)
    similar: list[ColorHit] = field(default_factory=list)


def search(index: CatalogIndex, text: str | None, k: int = DEFAULT_NEAREST) -> SearchResult:
    """Resolve free text against the catalog."""
    text = text or ''
    if not text.strip():
        return SearchResult(text=text, status=SearchStatus.EMPTY)

    query = parse_color(text)
    if query is None:
        return SearchResult(text=text, status=SearchStatus.UNKNOWN)

    # Only a translucent query tints the catalog tiles.
    alpha = query.alpha if query.alpha else None
    records = index.find_by_hex(query.hex)
    if records:
        return SearchResult(
            text=text,
            status=SearchStatus.MATCH,
            query=query,
            matches=[ColorHit(hex=r.hex, record=r, alpha=alpha) for r in records],
        )

    return SearchResult(
        text=text,
        status=SearchStatus.SIMILAR,
        query=query,
        matches=[ColorHit(hex=query.hex, alpha=query.alpha)],
        similar=[ColorHit(hex=r.hex, record=r, distance=d) for r, d in index.find_nearest_with_distance(query, k)],
    )


@dataclass(frozen=True)
class Tile:
    """Everything a colour tile shows."""

    hex: str
    hex_label: str
    value_label: str | None = None
    hue_label: str | None = None
    alpha_label: str | None = None
    light_text: bool = False  # white text on a dark background


def build_tile(hit: ColorHit, large: bool = False, hide_hash: bool = False) -> Tile:
    """Labels for one tile. Large tiles (search results) also show hue and alpha."""
    record = hit.record
    alpha = hit.alpha

    hex_label = hit.hex.upper()
    if hide_hash:
        hex_label = hex_label.lstrip('#')

    value_label = None
    if record is not None:
        value_label = record.name or record.value_name.upper()

    label = None
    if record is not None and large:
        label = hue_label(record.hue_name)
        if record.group_name:
            label += f' – {record.group_name}'

    alpha_label = None
    if alpha and alpha < 1 and large:
        alpha_label = f'Alpha {alpha_percent(alpha)}%'

    if alpha and alpha < 0.5:
        light_text = False
    else:
        light_text = is_dark(hit.hex)

    return Tile(
        hex=hit.hex,
        hex_label=hex_label,
        value_label=value_label,
        hue_label=label,
        alpha_label=alpha_label,
        light_text=light_text,
    )


@dataclass(frozen=True)
class CopyOptions:
    """Context-menu entries: hex formats, then the rendered value formats."""

    hex_formats: list[str]
    value_formats: list[str]

    @property
    def all(self) -> list[str]:
        return self.hex_formats + self.value_formats


def copy_options(hit: ColorHit, copy_formats: Sequence[FormatTemplate] = ()) -> CopyOptions:
    templates = list(copy_formats) or [DEFAULT_COPY_FORMAT]
    return CopyOptions(
        hex_formats=hex_formats(hit.hex, hit.alpha),
        value_formats=render_all(templates, hit.format_data),
    )


def click_copy_text(hit: ColorHit, copy_formats: Sequence[FormatTemplate] = ()) -> str:
    """What a click on the value name copies: the first configured format."""
    template = copy_formats[0] if copy_formats else DEFAULT_COPY_FORMAT
    return render(template, hit.format_data)


class ClipboardMonitor:
    """Decides whether clipboard text should trigger a search.

    Text the app copied itself never triggers one, and the same text is
    only looked at once.
    """

    def __init__(self) -> None:
        self.last_seen: str | None = None

    def on_copied(self, text: str) -> None:
        """Record text the app just put on the clipboard."""
        self.last_seen = text

    def check(self, text: str | None) -> ColorQuery | None:
        """Return the colour to search for, or None."""
        if text is None or text == self.last_seen:
            return None
        self.last_seen = text
        return parse_color(text)
