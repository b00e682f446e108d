"""
Aggregation Engine for ClosetStats v1
Counts types, contextual coverage, occasion x weather pairs and material weights
"""

import numpy as np
from types import MappingProxyType
from typing import Dict, Mapping, Sequence, Tuple
from dataclasses import dataclass
import logging

from closet_stats.models.data_structures import Garment
from closet_stats.models.normalizer import label_set, normalize
from closet_stats.models.option_universe import Label, OptionUniverse

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class LabelCounter:
    """Counts per option of one universe; labels outside the universe are refused"""

    def __init__(self, universe: OptionUniverse):
        self.universe = universe
        self._counts: Dict[Label, int] = {label: 0 for label in universe}

    def add(self, label: str) -> bool:
        """Increment label if it is a recognized option"""
        valid = self.universe.validate(label)
        if valid is None:
            return False
        self._counts[valid] += 1
        return True

    def __getitem__(self, label: str) -> int:
        return self._counts[label]

    def freeze(self) -> Mapping[Label, int]:
        """Read-only snapshot in universe order"""
        return MappingProxyType(dict(self._counts))


@dataclass(frozen=True)
class WardrobeAggregate:
    """Raw counts for one garment collection"""
    total_garments: int
    favorite_garments: int
    type_counts: Mapping[str, int]
    coverage_counts: Mapping[str, Mapping[Label, int]]
    heatmap: Tuple[Tuple[int, ...], ...]
    material_totals: Mapping[str, float]
    material_garment_counts: Mapping[str, int]


def count_types(garments: Sequence[Garment]) -> Dict[str, int]:
    """Garments per normalized type; blank types are left out"""
    counts: Dict[str, int] = {}
    for garment in garments:
        key = normalize(garment.type)
        if not key:
            continue
        counts[key] = counts.get(key, 0) + 1
    return counts


def count_coverage(garments: Sequence[Garment], universe: OptionUniverse) -> Mapping[Label, int]:
    """
    Count garments per option of one dimension

    A garment contributes at most once per option, however often the raw
    label repeats on it.
    """
    counter = LabelCounter(universe)
    field_name = universe.dimension.garment_field
    for garment in garments:
        for label in label_set(garment.labels_for(field_name)):
            counter.add(label)
    return counter.freeze()


def count_heatmap(garments: Sequence[Garment],
                  occasions: OptionUniverse,
                  weathers: OptionUniverse) -> np.ndarray:
    """
    Build the occasion x weather count matrix

    Every (occasion, weather) pair of a garment's de-duplicated labels is
    incremented once.
    """
    matrix = np.zeros((len(occasions), len(weathers)), dtype=np.int64)
    occasion_index = {label: i for i, label in enumerate(occasions)}
    weather_index = {label: j for j, label in enumerate(weathers)}

    for garment in garments:
        rows = [occasion_index[label] for label in label_set(garment.suitable_occasions)
                if label in occasion_index]
        cols = [weather_index[label] for label in label_set(garment.suitable_weather)
                if label in weather_index]
        if rows and cols:
            matrix[np.ix_(rows, cols)] += 1

    return matrix


def total_materials(garments: Sequence[Garment]) -> Tuple[Dict[str, float], Dict[str, int]]:
    """
    Sum composition percentages per material

    Returns:
        (percentage-point totals, number of garments listing each material)
    """
    totals: Dict[str, float] = {}
    garment_counts: Dict[str, int] = {}

    for garment in garments:
        for entry in garment.material_composition:
            material = normalize(entry.material)
            if not material or entry.percentage <= 0:
                continue
            totals[material] = totals.get(material, 0.0) + entry.percentage

        listed = {normalize(entry.material) for entry in garment.material_composition}
        listed.discard("")
        for material in listed:
            garment_counts[material] = garment_counts.get(material, 0) + 1

    return totals, garment_counts


def aggregate_wardrobe(garments: Sequence[Garment],
                       universes: Mapping[str, OptionUniverse]) -> WardrobeAggregate:
    """Run every counter over the collection and return an immutable aggregate"""
    coverage_counts = {
        key: count_coverage(garments, universe) for key, universe in universes.items()
    }
    heatmap = count_heatmap(garments, universes['occasion'], universes['weather'])
    material_totals, material_garment_counts = total_materials(garments)

    return WardrobeAggregate(
        total_garments=len(garments),
        favorite_garments=sum(1 for garment in garments if garment.favorite),
        type_counts=MappingProxyType(count_types(garments)),
        coverage_counts=MappingProxyType(coverage_counts),
        heatmap=tuple(tuple(int(value) for value in row) for row in heatmap.tolist()),
        material_totals=MappingProxyType(material_totals),
        material_garment_counts=MappingProxyType(material_garment_counts),
    )
