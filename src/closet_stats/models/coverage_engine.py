"""
Coverage Engine for ClosetStats v1
Builds the wardrobe coverage & gap analytics report
"""

from typing import Any, Iterable, List, Mapping, Optional
import logging

from closet_stats.models.data_structures import AnalyticsReport, Garment, Heatmap, InvalidInput
from closet_stats.models.option_universe import DIMENSIONS, resolve_option_universes
from closet_stats.models.aggregation import aggregate_wardrobe
from closet_stats.models.ranking import rank_coverage, rank_material_exposure, rank_type_breakdown
from closet_stats.models.gap_classifier import find_gap_alerts, find_sparse_combinations
from closet_stats.models.settings import EngineSettings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def coerce_garments(garments: Any) -> List[Garment]:
    """
    Validate the garment collection before any counting starts

    Raises:
        InvalidInput: if garments is not a collection of garment records
    """
    if garments is None or isinstance(garments, (str, bytes, Mapping)) or not isinstance(garments, Iterable):
        raise InvalidInput(f"Garments must be a list of garment records, got {type(garments).__name__}")
    return [Garment.from_record(record) for record in garments]


class CoverageEngine:
    """Engine for wardrobe coverage, gap and material analytics"""

    def __init__(self, settings: Optional[EngineSettings] = None):
        """
        Initialize coverage engine

        Args:
            settings: Report caps and thresholds (defaults if None)
        """
        self.settings = settings or EngineSettings()
        logger.debug(f"CoverageEngine initialized with {self.settings}")

    def compute_report(self,
                       garments: Any,
                       option_universes: Optional[Mapping[str, Any]] = None) -> AnalyticsReport:
        """
        Compute the analytics report for a garment collection

        Args:
            garments: Garment records (mappings or Garment objects); never mutated
            option_universes: Optional schema options per dimension
                ('weather', 'occasion', 'place', 'timeOfDay'); omitted
                dimensions fall back to the labels observed on garments

        Returns:
            Immutable AnalyticsReport

        Raises:
            InvalidInput: if the input cannot be read as garment records
        """
        records = coerce_garments(garments)
        universes = resolve_option_universes(records, option_universes)
        aggregate = aggregate_wardrobe(records, universes)
        total = aggregate.total_garments

        coverage = tuple(
            rank_coverage(universes[dimension.key], aggregate.coverage_counts[dimension.key], total)
            for dimension in DIMENSIONS
        )
        heatmap = Heatmap(
            occasions=universes['occasion'].options,
            weathers=universes['weather'].options,
            counts=aggregate.heatmap,
        )

        report = AnalyticsReport(
            total_garments=total,
            favorite_garments=aggregate.favorite_garments,
            type_breakdown=rank_type_breakdown(aggregate.type_counts, total),
            coverage=coverage,
            gap_alerts=find_gap_alerts(
                coverage,
                limit=self.settings.gap_alert_limit,
                low_percentage=self.settings.gap_alert_low_percentage,
            ),
            heatmap=heatmap,
            sparse_combos=find_sparse_combinations(
                heatmap,
                max_count=self.settings.sparse_combo_max_count,
                limit=self.settings.sparse_combo_limit,
            ),
            material_exposure=rank_material_exposure(
                aggregate.material_totals,
                aggregate.material_garment_counts,
                limit=self.settings.material_exposure_limit,
            ),
        )

        logger.info(f"Computed coverage report for {total} garments "
                    f"({len(report.gap_alerts)} gap alerts)")
        return report


def compute_coverage_report(garments: Any,
                            option_universes: Optional[Mapping[str, Any]] = None,
                            settings: Optional[EngineSettings] = None) -> AnalyticsReport:
    """Compute the analytics report with a one-off engine"""
    return CoverageEngine(settings).compute_report(garments, option_universes)
