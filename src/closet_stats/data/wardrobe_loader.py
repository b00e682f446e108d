"""
Wardrobe Loader for ClosetStats v1
Reads a wardrobe JSON export and the garment schema for the coverage engine
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

from closet_stats.models.coverage_engine import CoverageEngine
from closet_stats.models.data_structures import AnalyticsReport
from closet_stats.models.option_universe import universes_from_schema
from closet_stats.models.settings import EngineSettings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class WardrobeLoader:
    def __init__(self,
                 data_dir: Union[str, Path] = "data",
                 wardrobe_file: Optional[Union[str, Path]] = None,
                 schema_file: Optional[Union[str, Path]] = None):
        """
        Initialize wardrobe loader

        Args:
            data_dir: Directory holding wardrobe.json and schema.json
            wardrobe_file: Explicit wardrobe export path
            schema_file: Explicit garment schema path
        """
        self.data_dir = Path(data_dir)
        self.wardrobe_file = Path(wardrobe_file) if wardrobe_file else self.data_dir / "wardrobe.json"
        self.schema_file = Path(schema_file) if schema_file else self.data_dir / "schema.json"
        logger.debug(f"WardrobeLoader initialized. Data dir: {self.data_dir}")

    def _read_json(self, path: Path) -> Optional[Any]:
        """Parse a JSON file, logging (not raising) when it is missing or broken"""
        if not path.exists():
            logger.warning(f"File not found: {path}")
            return None
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
            return None

    def load_garments(self) -> List[Dict]:
        """
        Load raw garment records from the wardrobe export

        Returns:
            List of garment dictionaries (empty if the file is missing or invalid)
        """
        data = self._read_json(self.wardrobe_file)
        if data is None:
            return []

        if isinstance(data, dict) and isinstance(data.get('garments'), list):
            data = data['garments']

        if not isinstance(data, list):
            logger.error(f"Expected a list of garments in {self.wardrobe_file}, got {type(data).__name__}")
            return []

        garments = [record for record in data if isinstance(record, dict)]
        skipped = len(data) - len(garments)
        if skipped:
            logger.warning(f"Skipped {skipped} non-object entries in {self.wardrobe_file}")

        logger.info(f"Loaded {len(garments)} garments from {self.wardrobe_file}")
        return garments

    def load_option_universes(self) -> Dict[str, List[str]]:
        """
        Load enumerated options per dimension from the garment schema

        Returns:
            Mapping of dimension key to options; dimensions without an enum
            are absent and fall back to observed labels
        """
        schema = self._read_json(self.schema_file)
        if schema is None:
            return {}

        universes = universes_from_schema(schema)
        logger.info(f"Loaded option universes for {sorted(universes)} from {self.schema_file}")
        return universes

    def build_report(self, settings: Optional[EngineSettings] = None) -> AnalyticsReport:
        """Load wardrobe and schema, then compute the coverage report"""
        engine = CoverageEngine(settings)
        return engine.compute_report(self.load_garments(), self.load_option_universes())
