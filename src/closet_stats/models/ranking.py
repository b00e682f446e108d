"""
Percentage & Ranking Engine for ClosetStats v1
Turns raw counts into sorted, percentage-annotated report rows
"""

from typing import Mapping, Tuple

from closet_stats.models.data_structures import CoverageRow, CoverageSection, MaterialExposure, TypeShare
from closet_stats.models.option_universe import Label, OptionUniverse


def percentage(part: float, whole: float) -> float:
    """part as a percentage of whole; a zero (or negative) whole gives 0.0"""
    if whole > 0:
        return part / whole * 100
    return 0.0


def rank_type_breakdown(type_counts: Mapping[str, int], total: int) -> Tuple[TypeShare, ...]:
    """Type rows by count descending, then name ascending"""
    rows = [TypeShare(name, count, percentage(count, total)) for name, count in type_counts.items()]
    rows.sort(key=lambda row: (-row.count, row.name))
    return tuple(rows)


def rank_coverage(universe: OptionUniverse,
                  counts: Mapping[Label, int],
                  total: int) -> CoverageSection:
    """
    Build one coverage section, weakest options first

    Args:
        universe: Options of the dimension (one row per option)
        counts: Garments per option
        total: Total garments (percentage denominator)

    Returns:
        CoverageSection sorted by count ascending, then name ascending
    """
    rows = [CoverageRow(label, counts.get(label, 0), percentage(counts.get(label, 0), total))
            for label in universe]
    rows.sort(key=lambda row: (row.count, row.name))

    return CoverageSection(
        dimension=universe.dimension.key,
        label=universe.dimension.label,
        covered_count=sum(1 for row in rows if row.count > 0),
        total_options=len(universe),
        options=tuple(rows),
        universe_source=universe.source,
    )


def rank_material_exposure(material_totals: Mapping[str, float],
                           garment_counts: Mapping[str, int],
                           limit: int = 12) -> Tuple[MaterialExposure, ...]:
    """
    Weighted material shares, largest first

    Shares are normalized against the grand total of percentage points over
    all materials and garments, not per garment.
    """
    grand_total = sum(material_totals.values())
    rows = [
        MaterialExposure(
            name=name,
            weighted_share=percentage(points, grand_total),
            garment_count=garment_counts.get(name, 0),
            total_points=points,
        )
        for name, points in material_totals.items()
    ]
    rows.sort(key=lambda row: (-row.weighted_share, row.name))
    return tuple(rows[:limit])
