"""
Test cases for data structures
"""

import unittest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
sys.path.append(str(Path(__file__).parent.parent / "src"))

from closet_stats.models.data_structures import (
    Garment, MaterialEntry, InvalidInput, Heatmap, AnalyticsReport, TypeShare,
)


class TestGarment(unittest.TestCase):
    """Test cases for Garment class"""

    def test_garment_creation(self):
        """Test basic garment creation and defaults"""
        garment = Garment(garment_id=1, type="Jacket")

        self.assertEqual(garment.garment_id, 1)
        self.assertEqual(garment.type, "Jacket")
        self.assertFalse(garment.favorite)
        self.assertEqual(garment.material_composition, ())
        self.assertEqual(garment.suitable_weather, ())

        print("✅ Garment creation: defaults applied")

    def test_list_fields_coerced(self):
        """Test list fields become tuples and bare strings become one label"""
        garment = Garment(2, "Shirt", favorite=1, suitable_weather="hot",
                          suitable_occasions=["work", "date"], color_palette=None)

        self.assertTrue(garment.favorite)
        self.assertEqual(garment.suitable_weather, ("hot",))
        self.assertEqual(garment.suitable_occasions, ("work", "date"))
        self.assertEqual(garment.color_palette, ())

        print("✅ Garment coercion: list fields normalized to tuples")

    def test_from_dict_snake_and_camel_case(self):
        """Test both export shapes are accepted"""
        snake = Garment.from_dict({
            "id": 7, "type": "Coat", "favorite": True,
            "material_composition": [{"material": "wool", "percentage": 90}],
            "suitable_time_of_day": ["evening"],
        })
        camel = Garment.from_dict({
            "id": 7, "type": "Coat", "favorite": True,
            "materialComposition": [{"material": "wool", "percentage": 90}],
            "suitableTimeOfDay": ["evening"],
        })

        self.assertEqual(snake, camel)
        self.assertEqual(snake.material_composition, (MaterialEntry("wool", 90.0),))
        self.assertEqual(snake.suitable_time_of_day, ("evening",))

        print("✅ Garment from_dict: snake_case and camelCase records match")

    def test_from_record(self):
        """Test from_record accepts Garments and mappings only"""
        garment = Garment(3, "Boots")
        self.assertIs(Garment.from_record(garment), garment)
        self.assertEqual(Garment.from_record({"id": 3, "type": "Boots"}).type, "Boots")
        with self.assertRaises(InvalidInput):
            Garment.from_record("boots")

        print("✅ Garment from_record: invalid records rejected")

    def test_garment_serialization(self):
        """Test to_dict / from_dict round trip"""
        original = Garment(4, "Blazer", favorite=True,
                           material_composition=[("wool", 100)],
                           suitable_places=["office"], brand="Acme")

        recreated = Garment.from_dict(original.to_dict())
        self.assertEqual(recreated, original)

        print("✅ Garment serialization: to_dict and from_dict consistent")

    def test_garment_string_representation(self):
        """Test garment string representation"""
        text = str(Garment(5, "Scarf", brand="Acme", model="Loop"))

        self.assertIn("5", text)
        self.assertIn("Acme", text)
        self.assertIn("(Scarf)", text)
        self.assertIn("(untyped)", str(Garment(6)))

        print("✅ Garment string representation: format correct")


class TestMaterialEntry(unittest.TestCase):
    """Test cases for MaterialEntry"""

    def test_percentage_coercion(self):
        """Test unusable percentages become 0"""
        self.assertEqual(MaterialEntry.from_any({"material": "silk", "percentage": "40"}).percentage, 40.0)
        self.assertEqual(MaterialEntry.from_any({"material": "silk", "percentage": None}).percentage, 0.0)
        self.assertEqual(MaterialEntry.from_any({"material": "silk", "percentage": "n/a"}).percentage, 0.0)
        self.assertEqual(MaterialEntry.from_any({"material": "silk", "percentage": float("nan")}).percentage, 0.0)
        self.assertEqual(MaterialEntry.from_any(("silk", 25)).percentage, 25.0)
        self.assertIsNone(MaterialEntry.from_any(42).material)

        print("✅ MaterialEntry: percentages coerced to finite floats")


class TestReportTypes(unittest.TestCase):
    """Test cases for report value types"""

    def test_heatmap_lookup(self):
        """Test heatmap cell access and array view"""
        heatmap = Heatmap(("work", "date"), ("cold", "hot"), ((2, 0), (1, 4)))

        self.assertEqual(heatmap.count("date", "hot"), 4)
        self.assertEqual(heatmap.count("gala", "hot"), 0)
        self.assertEqual(heatmap.cells()[1], ("work", "hot", 0))
        np.testing.assert_array_equal(heatmap.as_array(), np.array([[2, 0], [1, 4]]))
        self.assertEqual(heatmap.to_dict()["counts"]["date"]["cold"], 1)

        print("✅ Heatmap: lookups and conversions correct")

    def test_report_is_immutable(self):
        """Test the report cannot be modified after assembly"""
        report = AnalyticsReport(total_garments=2, favorite_garments=1,
                                 type_breakdown=(TypeShare("Coat", 2, 100.0),))

        with self.assertRaises(AttributeError):
            report.total_garments = 5
        self.assertAlmostEqual(report.favorite_ratio, 50.0)
        self.assertIsNone(report.coverage_for("weather"))

        print("✅ AnalyticsReport: frozen after assembly")


if __name__ == '__main__':
    unittest.main()
