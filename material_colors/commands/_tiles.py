"""Helpers turning search hits into report entries."""

from dataclasses import asdict
from typing import Any

from material_colors.core.search import ColorHit, build_tile, click_copy_text
from material_colors.core.types import FormatTemplate


def tile_entry(
    hit: ColorHit,
    large: bool = True,
    hide_hash: bool = False,
    copy_formats: list[FormatTemplate] | None = None,
) -> dict[str, Any]:
    entry = asdict(build_tile(hit, large=large, hide_hash=hide_hash))
    if hit.distance is not None:
        entry['distance'] = round(hit.distance, 1)
    if hit.record is not None:
        entry['hue'] = hit.record.hue_name
        entry['value'] = hit.record.value_name
        entry['group'] = hit.record.group_name
        if copy_formats is not None:
            entry['copy'] = click_copy_text(hit, copy_formats)
    return entry
