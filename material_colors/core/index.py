"""Flattened, searchable view of a ColorCatalog.

build_index() walks every hue in catalog order: first its direct values in
key order, then every group and every colour inside it in declared order.
The resulting record order is the tie-breaker for nearest-match ranking.

Exact match is case-insensitive hex equality. Nearest match is straight
Euclidean distance in raw 0-255 RGB (alpha ignored), sorted with a stable
sort so equal distances keep catalog order.

The index is built once and never mutated, so it can be shared freely.
"""

from __future__ import annotations

import logging

import numpy as np

from material_colors.core.catalog import ColorCatalog
from material_colors.core.palette import hex_to_rgb, normalize_hex
from material_colors.core.types import ColorQuery, SearchableRecord

logger = logging.getLogger(__name__)

DEFAULT_NEAREST = 3


def flatten_catalog(catalog: ColorCatalog) -> list[SearchableRecord]:
    """One SearchableRecord per leaf colour, in catalog order."""
    records = []
    for hue_name, entry in catalog.items():
        for key, value in entry.values.items():
            records.append(
                SearchableRecord(
                    hue_name=hue_name,
                    value_name=value.name or key,
                    hex=value.hex,
                    name=value.name,
                )
            )
        for group in entry.groups:
            for value in group.colors:
                records.append(
                    SearchableRecord(
                        hue_name=hue_name,
                        value_name=value.name,
                        hex=value.hex,
                        group_name=group.title,
                        name=value.name,
                    )
                )
    return records


class CatalogIndex:
    """Exact and nearest-match lookups over the flattened catalog."""

    def __init__(self, records: list[SearchableRecord]):
        self._records = tuple(records)
        self._by_hex: dict[str, list[SearchableRecord]] = {}
        for record in self._records:
            self._by_hex.setdefault(normalize_hex(record.hex), []).append(record)
        # int64 so channel differences cannot wrap around
        self._rgb = np.array([hex_to_rgb(r.hex) for r in self._records], dtype=np.int64).reshape(-1, 3)
        self._rgb.setflags(write=False)

    @property
    def records(self) -> tuple[SearchableRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def find_by_hex(self, hex_value: str) -> list[SearchableRecord]:
        """All records with this hex, in build order. Empty list when none."""
        return list(self._by_hex.get(normalize_hex(hex_value), ()))

    def distances(self, query: ColorQuery | str) -> np.ndarray:
        """Distance from the query to every record, aligned with self.records."""
        hex_value = query.hex if isinstance(query, ColorQuery) else query
        target = np.array(hex_to_rgb(hex_value), dtype=np.int64)
        diff = self._rgb - target
        return np.sqrt((diff * diff).sum(axis=1))

    def find_nearest(self, query: ColorQuery | str, k: int = DEFAULT_NEAREST) -> list[SearchableRecord]:
        """The k records closest to the query, closest first."""
        return [record for record, _dist in self.find_nearest_with_distance(query, k)]

    def find_nearest_with_distance(
        self, query: ColorQuery | str, k: int = DEFAULT_NEAREST
    ) -> list[tuple[SearchableRecord, float]]:
        if k <= 0 or not self._records:
            return []
        dist = self.distances(query)
        order = np.argsort(dist, kind='stable')[:k]
        return [(self._records[int(i)], float(dist[i])) for i in order]


def build_index(catalog: ColorCatalog) -> CatalogIndex:
    records = flatten_catalog(catalog)
    logger.debug('Indexed %d colours across %d hues', len(records), len(catalog))
    return CatalogIndex(records)
