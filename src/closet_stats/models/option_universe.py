"""
Option-Universe Resolver for ClosetStats v1
Decides which labels are recognized options for each contextual dimension
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, NewType, Optional, Sequence, Tuple
from dataclasses import dataclass
import logging

from closet_stats.models.data_structures import Garment, InvalidInput
from closet_stats.models.normalizer import dedupe_non_empty

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# A label that has been validated against an option universe
Label = NewType('Label', str)

SOURCE_SCHEMA = "schema"
SOURCE_OBSERVED = "observed"


@dataclass(frozen=True)
class Dimension:
    """A contextual dimension of garment suitability"""
    key: str             # public key, e.g. "timeOfDay"
    label: str           # display label, e.g. "Time of Day"
    garment_field: str   # Garment attribute / schema property, e.g. "suitable_time_of_day"
    alias: str           # snake_case key accepted for overrides


WEATHER = Dimension("weather", "Weather", "suitable_weather", "weather")
OCCASION = Dimension("occasion", "Occasion", "suitable_occasions", "occasion")
PLACE = Dimension("place", "Place", "suitable_places", "place")
TIME_OF_DAY = Dimension("timeOfDay", "Time of Day", "suitable_time_of_day", "time_of_day")

# Report order
DIMENSIONS: Tuple[Dimension, ...] = (WEATHER, OCCASION, PLACE, TIME_OF_DAY)


@dataclass(frozen=True)
class OptionUniverse:
    """The recognized options of one dimension, in insertion order"""
    dimension: Dimension
    options: Tuple[Label, ...]
    source: str = SOURCE_OBSERVED

    def __contains__(self, label: Any) -> bool:
        return label in self.options

    def __iter__(self) -> Iterator[Label]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def index(self, label: str) -> int:
        return self.options.index(label)

    def validate(self, label: str) -> Optional[Label]:
        """Return label as a Label if it is a recognized option, else None"""
        if label in self.options:
            return Label(label)
        return None


def _lookup_dimension(key: str) -> Optional[Dimension]:
    for dimension in DIMENSIONS:
        if key in (dimension.key, dimension.alias, dimension.garment_field):
            return dimension
    return None


def _check_overrides(overrides: Any) -> Dict[Dimension, Sequence[Any]]:
    """Map override keys to dimensions, rejecting shapes that are not label lists"""
    if overrides is None:
        return {}
    if not isinstance(overrides, Mapping):
        raise InvalidInput(f"Option universes must be a mapping, got {type(overrides).__name__}")

    resolved = {}
    for key, values in overrides.items():
        dimension = _lookup_dimension(str(key))
        if dimension is None:
            logger.warning(f"Ignoring option universe for unknown dimension '{key}'")
            continue
        if values is None:
            continue
        if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Iterable):
            raise InvalidInput(f"Option universe for '{key}' must be a list of labels")
        resolved[dimension] = list(values)
    return resolved


def resolve_universe(dimension: Dimension,
                     garments: Sequence[Garment],
                     enum_values: Optional[Iterable[Any]] = None) -> OptionUniverse:
    """
    Resolve the option universe for one dimension

    Args:
        dimension: Dimension to resolve
        garments: Full garment collection
        enum_values: Schema-supplied options, or None to derive from observation

    Returns:
        OptionUniverse with blank labels removed and duplicates collapsed
    """
    if enum_values is not None:
        options = dedupe_non_empty(enum_values)
        source = SOURCE_SCHEMA
    else:
        observed = [label for garment in garments for label in garment.labels_for(dimension.garment_field)]
        options = dedupe_non_empty(observed)
        source = SOURCE_OBSERVED

    logger.debug(f"{dimension.label} universe: {len(options)} options ({source})")
    return OptionUniverse(dimension, tuple(Label(option) for option in options), source)


def resolve_option_universes(garments: Sequence[Garment],
                             overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, OptionUniverse]:
    """
    Resolve every dimension independently (partial overrides allowed)

    Returns:
        Mapping of dimension key to OptionUniverse, in report order
    """
    checked = _check_overrides(overrides)
    return {
        dimension.key: resolve_universe(dimension, garments, checked.get(dimension))
        for dimension in DIMENSIONS
    }


def universes_from_schema(schema: Any) -> Dict[str, List[str]]:
    """
    Extract enumerated options from the garment JSON schema

    Reads ``items.properties.<suitable_*>.items.enum``. Dimensions without an
    enum are left out so they fall back to observed labels.
    """
    if not isinstance(schema, Mapping):
        return {}
    items = schema.get('items') or {}
    properties = items.get('properties') if isinstance(items, Mapping) else None
    if not isinstance(properties, Mapping):
        return {}

    universes = {}
    for dimension in DIMENSIONS:
        prop = properties.get(dimension.garment_field)
        if not isinstance(prop, Mapping):
            continue
        prop_items = prop.get('items')
        enum_values = prop_items.get('enum') if isinstance(prop_items, Mapping) else None
        if isinstance(enum_values, list):
            universes[dimension.key] = list(enum_values)
    return universes
