"""
ClosetStats v1
Wardrobe coverage & gap analytics
"""

__version__ = "1.0.0"

from closet_stats.models.data_structures import AnalyticsReport, Garment, InvalidInput
from closet_stats.models.coverage_engine import CoverageEngine, compute_coverage_report
from closet_stats.models.settings import EngineSettings

__all__ = [
    'AnalyticsReport',
    'CoverageEngine',
    'EngineSettings',
    'Garment',
    'InvalidInput',
    'compute_coverage_report',
]
