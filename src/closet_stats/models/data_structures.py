"""
Core Data Structures for ClosetStats v1
Garment input records and the immutable analytics report
"""

import math
import numpy as np
from typing import Any, Dict, List, Mapping, Optional, Tuple
from dataclasses import dataclass, field

from closet_stats.models.normalizer import as_list


class InvalidInput(ValueError):
    """Raised when the engine input cannot be coerced to garment records at all"""


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    """Return the first key present in record (snake_case or camelCase)"""
    for key in keys:
        if key in record:
            return record[key]
    return None


def _to_percentage(value: Any) -> float:
    """Coerce a composition percentage to a finite float (0.0 if unusable)"""
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


@dataclass(frozen=True)
class MaterialEntry:
    """One {material, percentage} pair from a garment's composition"""
    material: str
    percentage: float = 0.0

    @classmethod
    def from_any(cls, entry: Any) -> 'MaterialEntry':
        """Create from a mapping, a (material, percentage) pair or an entry"""
        if isinstance(entry, MaterialEntry):
            return entry
        if isinstance(entry, Mapping):
            return cls(entry.get('material'), _to_percentage(entry.get('percentage')))
        if isinstance(entry, (tuple, list)) and len(entry) == 2:
            return cls(entry[0], _to_percentage(entry[1]))
        return cls(None, 0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {'material': self.material, 'percentage': self.percentage}


@dataclass
class Garment:
    """Represents a garment record as read from the wardrobe"""
    garment_id: Any
    type: Optional[str] = None
    favorite: bool = False
    material_composition: Tuple[MaterialEntry, ...] = ()
    color_palette: Tuple[Any, ...] = ()
    suitable_weather: Tuple[Any, ...] = ()
    suitable_occasions: Tuple[Any, ...] = ()
    suitable_places: Tuple[Any, ...] = ()
    suitable_time_of_day: Tuple[Any, ...] = ()
    brand: Optional[str] = None
    model: Optional[str] = None
    style: Optional[str] = None
    formality: Optional[str] = None

    def __post_init__(self):
        """Coerce list fields to tuples; label cleanup is left to the normalizer"""
        self.favorite = bool(self.favorite)
        self.material_composition = tuple(
            MaterialEntry.from_any(entry) for entry in as_list(self.material_composition)
        )
        self.color_palette = tuple(as_list(self.color_palette))
        self.suitable_weather = tuple(as_list(self.suitable_weather))
        self.suitable_occasions = tuple(as_list(self.suitable_occasions))
        self.suitable_places = tuple(as_list(self.suitable_places))
        self.suitable_time_of_day = tuple(as_list(self.suitable_time_of_day))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Garment':
        """Create Garment from a database row or JSON export (snake_case or camelCase)"""
        return cls(
            garment_id=_first_present(data, 'id', 'garment_id', 'garmentId'),
            type=data.get('type'),
            favorite=data.get('favorite', False),
            material_composition=_first_present(data, 'material_composition', 'materialComposition'),
            color_palette=_first_present(data, 'color_palette', 'colorPalette'),
            suitable_weather=_first_present(data, 'suitable_weather', 'suitableWeather'),
            suitable_occasions=_first_present(data, 'suitable_occasions', 'suitableOccasions'),
            suitable_places=_first_present(data, 'suitable_places', 'suitablePlaces'),
            suitable_time_of_day=_first_present(data, 'suitable_time_of_day', 'suitableTimeOfDay'),
            brand=data.get('brand'),
            model=data.get('model'),
            style=data.get('style'),
            formality=data.get('formality'),
        )

    @classmethod
    def from_record(cls, record: Any) -> 'Garment':
        """Accept a Garment or a mapping; anything else is not a garment record"""
        if isinstance(record, Garment):
            return record
        if isinstance(record, Mapping):
            return cls.from_dict(record)
        raise InvalidInput(f"Garment record must be a mapping, got {type(record).__name__}")

    def labels_for(self, field_name: str) -> Tuple[Any, ...]:
        """Raw labels of one contextual field (e.g. 'suitable_weather')"""
        return getattr(self, field_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary in the wardrobe export shape"""
        return {
            'id': self.garment_id,
            'type': self.type,
            'favorite': self.favorite,
            'material_composition': [entry.to_dict() for entry in self.material_composition],
            'color_palette': list(self.color_palette),
            'suitable_weather': list(self.suitable_weather),
            'suitable_occasions': list(self.suitable_occasions),
            'suitable_places': list(self.suitable_places),
            'suitable_time_of_day': list(self.suitable_time_of_day),
            'brand': self.brand,
            'model': self.model,
            'style': self.style,
            'formality': self.formality,
        }

    def __str__(self) -> str:
        parts = [str(self.garment_id)]
        if self.brand:
            parts.append(self.brand)
        if self.model:
            parts.append(self.model)
        parts.append(f"({self.type or 'untyped'})")
        return " ".join(parts)


#
# Report value types
#

@dataclass(frozen=True)
class TypeShare:
    """Share of the wardrobe held by one garment type"""
    name: str
    count: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'count': self.count, 'percentage': self.percentage}


@dataclass(frozen=True)
class CoverageRow:
    """One option's count and share within a contextual dimension"""
    name: str
    count: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'count': self.count, 'percentage': self.percentage}


@dataclass(frozen=True)
class CoverageSection:
    """Coverage of every option in one dimension, weakest first"""
    dimension: str
    label: str
    covered_count: int
    total_options: int
    options: Tuple[CoverageRow, ...]
    universe_source: str = "observed"

    def get_row(self, name: str) -> Optional[CoverageRow]:
        for row in self.options:
            if row.name == name:
                return row
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'label': self.label,
            'coveredCount': self.covered_count,
            'totalOptions': self.total_options,
            'options': [row.to_dict() for row in self.options],
        }


@dataclass(frozen=True)
class GapAlert:
    """An under-represented option with its severity"""
    area: str
    option: str
    count: int
    percentage: float
    severity: str  # "missing", "critical-low", "low"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'area': self.area,
            'option': self.option,
            'count': self.count,
            'percentage': self.percentage,
            'severity': self.severity,
        }


@dataclass(frozen=True)
class Heatmap:
    """Occasion x weather garment counts (rows follow occasions, columns weathers)"""
    occasions: Tuple[str, ...]
    weathers: Tuple[str, ...]
    counts: Tuple[Tuple[int, ...], ...]

    def count(self, occasion: str, weather: str) -> int:
        """Count for one cell (0 for labels outside the universes)"""
        if occasion not in self.occasions or weather not in self.weathers:
            return 0
        return self.counts[self.occasions.index(occasion)][self.weathers.index(weather)]

    def cells(self) -> List[Tuple[str, str, int]]:
        """All cells in occasion-major universe order"""
        return [
            (occasion, weather, self.counts[i][j])
            for i, occasion in enumerate(self.occasions)
            for j, weather in enumerate(self.weathers)
        ]

    def as_array(self):
        """Counts as a fresh numpy matrix"""
        return np.array(self.counts, dtype=np.int64).reshape(len(self.occasions), len(self.weathers))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'weathers': list(self.weathers),
            'occasions': list(self.occasions),
            'counts': {
                occasion: {weather: self.counts[i][j] for j, weather in enumerate(self.weathers)}
                for i, occasion in enumerate(self.occasions)
            },
        }


@dataclass(frozen=True)
class SparseCombo:
    """A weak occasion/weather pairing"""
    occasion: str
    weather: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'occasion': self.occasion, 'weather': self.weather, 'count': self.count}


@dataclass(frozen=True)
class MaterialExposure:
    """Percentage-weighted share of one material across the wardrobe"""
    name: str
    weighted_share: float
    garment_count: int
    total_points: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'weightedShare': self.weighted_share,
            'garmentCount': self.garment_count,
        }


@dataclass(frozen=True)
class AnalyticsReport:
    """Complete wardrobe coverage report returned by the engine"""
    total_garments: int
    favorite_garments: int
    type_breakdown: Tuple[TypeShare, ...] = ()
    coverage: Tuple[CoverageSection, ...] = ()
    gap_alerts: Tuple[GapAlert, ...] = ()
    heatmap: Heatmap = field(default_factory=lambda: Heatmap((), (), ()))
    sparse_combos: Tuple[SparseCombo, ...] = ()
    material_exposure: Tuple[MaterialExposure, ...] = ()

    @property
    def favorite_ratio(self) -> float:
        """Favorites as a percentage of all garments"""
        if self.total_garments <= 0:
            return 0.0
        return self.favorite_garments / self.total_garments * 100

    def coverage_for(self, dimension: str) -> Optional[CoverageSection]:
        """Coverage section by dimension key ('weather', 'occasion', 'place', 'timeOfDay')"""
        for section in self.coverage:
            if section.dimension == dimension:
                return section
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the shape consumed by the stats page"""
        return {
            'totalGarments': self.total_garments,
            'favoriteGarments': self.favorite_garments,
            'favoriteRatio': self.favorite_ratio,
            'garmentTypeBreakdown': [row.to_dict() for row in self.type_breakdown],
            'coverage': [section.to_dict() for section in self.coverage],
            'gapAlerts': [alert.to_dict() for alert in self.gap_alerts],
            'heatmap': self.heatmap.to_dict(),
            'sparseCombos': [combo.to_dict() for combo in self.sparse_combos],
            'materialExposure': [row.to_dict() for row in self.material_exposure],
        }

    def __str__(self) -> str:
        return (f"AnalyticsReport: {self.total_garments} garments, "
                f"{len(self.gap_alerts)} gap alerts, {len(self.sparse_combos)} sparse combos")
