"""
Label Normalizer for ClosetStats v1
Trims and de-duplicates raw field values before they are counted
"""

from typing import Any, FrozenSet, Iterable, List, Optional


def normalize(value: Any) -> str:
    """Coerce a raw field value to a trimmed string ("" for None)"""
    if value is None:
        return ""
    return str(value).strip()


def as_list(value: Any) -> List[Any]:
    """
    Coerce a raw list field to a list

    Missing fields become empty lists and a bare string is a single label,
    so a record with ``suitable_weather: "cold"`` still counts.
    """
    if value is None:
        return []
    if isinstance(value, (str, bytes)):
        return [value]
    try:
        return list(value)
    except TypeError:
        return [value]


def dedupe_non_empty(values: Optional[Iterable[Any]]) -> List[str]:
    """
    Normalize values, drop blanks and remove duplicates

    Args:
        values: Raw labels (may be None)

    Returns:
        Labels in first-seen order, compared case-sensitively
    """
    seen = set()
    result = []
    for raw in as_list(values):
        label = normalize(raw)
        if label and label not in seen:
            seen.add(label)
            result.append(label)
    return result


def label_set(values: Optional[Iterable[Any]]) -> FrozenSet[str]:
    """Normalized, non-blank labels of a single garment as a set"""
    return frozenset(dedupe_non_empty(values))
