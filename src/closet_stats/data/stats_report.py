"""
Wardrobe Stats Report. Console view of the coverage report.
Run as: closet-stats [data_dir] [--json]
"""

import json
import sys
from typing import List, Optional

from closet_stats.data.wardrobe_loader import WardrobeLoader
from closet_stats.models.data_structures import AnalyticsReport
from closet_stats.models.gap_classifier import coverage_band, heat_band
from closet_stats.models.settings import EngineSettings

SEPARATOR = "=" * 50


def format_percent(value: float) -> str:
    """One decimal place with a percent sign"""
    return f"{value:.1f}%"


def print_report(report: AnalyticsReport, stream=None):
    """Print every report section"""
    out = stream or sys.stdout

    def emit(line: str = ""):
        print(line, file=out)

    emit("WARDROBE STATS:")
    emit(f"  Total garments: {report.total_garments:,}")
    emit(f"  Favorites: {report.favorite_garments:,}")
    emit(f"  Favorite ratio: {format_percent(report.favorite_ratio)}")

    emit("\n" + SEPARATOR)
    emit("GARMENT TYPE SHARE:")
    if not report.type_breakdown:
        emit("  No garment types recorded")
    for row in report.type_breakdown:
        emit(f"  {row.name}: {row.count:,} ({format_percent(row.percentage)})")

    emit("\n" + SEPARATOR)
    emit("CONTEXT COVERAGE:")
    for section in report.coverage:
        emit(f"  {section.label}: {section.covered_count}/{section.total_options} options covered")
        for row in section.options:
            emit(f"    {row.name}: {row.count} ({format_percent(row.percentage)}) [{coverage_band(row.percentage)}]")

    emit("\n" + SEPARATOR)
    emit("GAP ALERTS:")
    if not report.gap_alerts:
        emit("  No gaps found")
    for alert in report.gap_alerts:
        emit(f"  [{alert.severity}] {alert.area} / {alert.option}: "
             f"{alert.count} item(s), {format_percent(alert.percentage)}")

    emit("\n" + SEPARATOR)
    emit("OCCASION x WEATHER READINESS:")
    heatmap = report.heatmap
    if not heatmap.occasions or not heatmap.weathers:
        emit("  Not enough context data for a heatmap")
    for occasion in heatmap.occasions:
        cells = ", ".join(
            f"{weather}={heatmap.count(occasion, weather)} ({heat_band(heatmap.count(occasion, weather))})"
            for weather in heatmap.weathers
        )
        emit(f"  {occasion}: {cells}")

    emit("\n" + SEPARATOR)
    emit("SPARSEST COMBINATIONS:")
    if not report.sparse_combos:
        emit("  No sparse combinations found")
    for combo in report.sparse_combos:
        emit(f"  {combo.occasion} x {combo.weather}: {combo.count} item(s)")

    emit("\n" + SEPARATOR)
    emit("MATERIAL-WEIGHTED COMPOSITION:")
    if not report.material_exposure:
        emit("  No material composition data available")
    for row in report.material_exposure:
        emit(f"  {row.name}: {format_percent(row.weighted_share)} ({row.garment_count} garments)")


def analyze_wardrobe(data_dir: str = "data", as_json: bool = False, stream=None) -> AnalyticsReport:
    """Load the wardrobe from data_dir and print its report"""
    out = stream or sys.stdout
    loader = WardrobeLoader(data_dir)
    report = loader.build_report(EngineSettings.from_env())

    if as_json:
        print(json.dumps(report.to_dict(), indent=2), file=out)
    else:
        print_report(report, out)
    return report


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point"""
    args = list(sys.argv[1:] if argv is None else argv)
    as_json = "--json" in args
    positional = [arg for arg in args if not arg.startswith("--")]
    data_dir = positional[0] if positional else "data"

    analyze_wardrobe(data_dir, as_json=as_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
