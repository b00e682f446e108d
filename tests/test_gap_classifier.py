"""
Test cases for the gap & sparsity classifier
"""

import unittest
from pathlib import Path
import sys

# Add src to path for imports
sys.path.append(str(Path(__file__).parent.parent / "src"))

from closet_stats.models.data_structures import CoverageRow, CoverageSection, Heatmap
from closet_stats.models.gap_classifier import (
    classify_severity, find_gap_alerts, find_sparse_combinations, coverage_band, heat_band,
)


def _section(label, rows):
    return CoverageSection(
        dimension=label.lower(),
        label=label,
        covered_count=sum(1 for row in rows if row.count > 0),
        total_options=len(rows),
        options=tuple(rows),
    )


class TestGapClassifier(unittest.TestCase):
    """Test cases for gap alerts and sparse combinations"""

    def test_classify_severity(self):
        """Test severity thresholds"""
        self.assertEqual(classify_severity(0), "missing")
        self.assertEqual(classify_severity(1), "critical-low")
        self.assertEqual(classify_severity(2), "low")
        self.assertEqual(classify_severity(9), "low")

        print("✅ Severity: missing / critical-low / low")

    def test_gap_alert_ordering(self):
        """Test count first, then percentage, then option name"""
        weather = _section("Weather", [
            CoverageRow("mild", 1, 10.0),
            CoverageRow("hot", 2, 20.0),
        ])
        occasion = _section("Occasion", [
            CoverageRow("work", 1, 5.0),
            CoverageRow("gala", 0, 0.0),
        ])

        alerts = find_gap_alerts([weather, occasion])

        self.assertEqual([alert.option for alert in alerts], ["gala", "work", "mild"])
        self.assertEqual([alert.severity for alert in alerts], ["missing", "critical-low", "critical-low"])
        self.assertEqual(alerts[1].area, "Occasion")

        print("✅ Gap alerts: zero count first, then lower percentage")

    def test_gap_alert_low_percentage_filter(self):
        """Test options with 2+ garments are flagged only under 15%"""
        section = _section("Place", [
            CoverageRow("office", 2, 14.9),
            CoverageRow("home", 3, 15.0),
            CoverageRow("gym", 5, 50.0),
        ])

        alerts = find_gap_alerts([section])

        self.assertEqual(len(alerts), 1)
        self.assertEqual(alerts[0].option, "office")
        self.assertEqual(alerts[0].severity, "low")

        print("✅ Gap alerts: 15% threshold applied to 2+ garment options")

    def test_gap_alert_cap(self):
        """Test at most 8 alerts are returned"""
        section = _section("Weather", [CoverageRow(f"w{i:02d}", 0, 0.0) for i in range(12)])
        alerts = find_gap_alerts([section])

        self.assertEqual(len(alerts), 8)
        self.assertEqual(alerts[-1].option, "w07")

        print("✅ Gap alerts: capped at 8")

    def test_sparse_combinations(self):
        """Test sparse pairs sorted by count then occasion"""
        heatmap = Heatmap(
            occasions=("work", "date"),
            weathers=("cold", "hot"),
            counts=((1, 3), (0, 2)),
        )

        combos = find_sparse_combinations(heatmap)

        self.assertEqual([(c.occasion, c.weather, c.count) for c in combos],
                         [("date", "cold", 0), ("work", "cold", 1)])

        print("✅ Sparse combos: count <= 1, ordered by count then occasion")

    def test_sparse_combinations_cap_and_stable_ties(self):
        """Test cap of 10 and universe order among full ties"""
        occasions = ("b", "a")
        weathers = tuple(f"w{i}" for i in range(8))
        heatmap = Heatmap(occasions, weathers, tuple(tuple(0 for _ in weathers) for _ in occasions))

        combos = find_sparse_combinations(heatmap)

        self.assertEqual(len(combos), 10)
        self.assertEqual([c.weather for c in combos[:8]], list(weathers))
        self.assertTrue(all(c.occasion == "a" for c in combos[:8]))
        self.assertEqual(combos[8].occasion, "b")

        print("✅ Sparse combos: capped at 10, ties keep heatmap order")

    def test_display_bands(self):
        """Test coverage and heatmap display bands"""
        self.assertEqual(coverage_band(0), "missing")
        self.assertEqual(coverage_band(14.9), "low")
        self.assertEqual(coverage_band(15), "fair")
        self.assertEqual(coverage_band(30), "healthy")

        self.assertEqual(heat_band(0), "empty")
        self.assertEqual(heat_band(1), "thin")
        self.assertEqual(heat_band(3), "limited")
        self.assertEqual(heat_band(4), "ready")

        print("✅ Display bands: thresholds correct")


if __name__ == '__main__':
    unittest.main()
