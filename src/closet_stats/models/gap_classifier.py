"""
Gap & Sparsity Classifier for ClosetStats v1
Flags under-covered options and weak occasion/weather pairings
"""

from typing import Iterable, Tuple

from closet_stats.models.data_structures import CoverageSection, GapAlert, Heatmap, SparseCombo

SEVERITY_MISSING = "missing"
SEVERITY_CRITICAL_LOW = "critical-low"
SEVERITY_LOW = "low"


def classify_severity(count: int) -> str:
    """Severity of a gap by garment count"""
    if count == 0:
        return SEVERITY_MISSING
    if count == 1:
        return SEVERITY_CRITICAL_LOW
    return SEVERITY_LOW


def find_gap_alerts(sections: Iterable[CoverageSection],
                    limit: int = 8,
                    low_percentage: float = 15.0) -> Tuple[GapAlert, ...]:
    """
    Collect the most severe coverage gaps across all dimensions

    Args:
        sections: Coverage sections in report order
        limit: Maximum number of alerts
        low_percentage: Options below this share are flagged even with 2+ garments

    Returns:
        Alerts sorted by count, then percentage, then option name
    """
    alerts = [
        GapAlert(
            area=section.label,
            option=row.name,
            count=row.count,
            percentage=row.percentage,
            severity=classify_severity(row.count),
        )
        for section in sections
        for row in section.options
    ]
    alerts = [alert for alert in alerts if alert.count <= 1 or alert.percentage < low_percentage]
    alerts.sort(key=lambda alert: (alert.count, alert.percentage, alert.option))
    return tuple(alerts[:limit])


def find_sparse_combinations(heatmap: Heatmap,
                             max_count: int = 1,
                             limit: int = 10) -> Tuple[SparseCombo, ...]:
    """
    Occasion/weather pairs with at most max_count garments

    Sorted by count then occasion; pairs tied on both keep heatmap order.
    """
    combos = [SparseCombo(occasion, weather, count)
              for occasion, weather, count in heatmap.cells()
              if count <= max_count]
    combos.sort(key=lambda combo: (combo.count, combo.occasion))
    return tuple(combos[:limit])


def coverage_band(percentage: float) -> str:
    """Display band for an option's share of the wardrobe"""
    if percentage == 0:
        return "missing"
    if percentage < 15:
        return "low"
    if percentage < 30:
        return "fair"
    return "healthy"


def heat_band(count: int) -> str:
    """Display band for a heatmap cell"""
    if count == 0:
        return "empty"
    if count == 1:
        return "thin"
    if count <= 3:
        return "limited"
    return "ready"
