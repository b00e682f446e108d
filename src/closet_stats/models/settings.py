"""
Engine settings for ClosetStats v1
Caps and thresholds used when building the analytics report
"""

import os
from typing import Any, Dict, Mapping, Optional
from dataclasses import dataclass, fields
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ENV_PREFIX = "CLOSET_STATS_"

# setting name -> environment variable (without prefix)
ENV_VARIABLES = {
    'gap_alert_limit': "GAP_ALERT_LIMIT",
    'gap_alert_low_percentage': "GAP_LOW_PERCENTAGE",
    'sparse_combo_limit': "SPARSE_COMBO_LIMIT",
    'sparse_combo_max_count': "SPARSE_MAX_COUNT",
    'material_exposure_limit': "MATERIAL_LIMIT",
}


@dataclass(frozen=True)
class EngineSettings:
    """Report caps and classification thresholds"""
    gap_alert_limit: int = 8
    gap_alert_low_percentage: float = 15.0
    sparse_combo_limit: int = 10
    sparse_combo_max_count: int = 1
    material_exposure_limit: int = 12

    def __post_init__(self):
        """Clamp limits to non-negative values"""
        for name in ('gap_alert_limit', 'sparse_combo_limit', 'material_exposure_limit'):
            object.__setattr__(self, name, max(0, int(getattr(self, name))))
        object.__setattr__(self, 'sparse_combo_max_count', int(self.sparse_combo_max_count))
        object.__setattr__(self, 'gap_alert_low_percentage', float(self.gap_alert_low_percentage))

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'EngineSettings':
        """Create settings from a mapping; unknown keys are ignored"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown engine settings: {sorted(unknown)}")
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'EngineSettings':
        """Read CLOSET_STATS_* overrides, falling back to the defaults"""
        environ = os.environ if environ is None else environ
        values = {}
        for name, variable in ENV_VARIABLES.items():
            raw = environ.get(ENV_PREFIX + variable)
            if raw is None or not raw.strip():
                continue
            try:
                values[name] = float(raw) if name == 'gap_alert_low_percentage' else int(raw)
            except ValueError:
                logger.warning(f"Ignoring invalid value for {ENV_PREFIX + variable}: {raw!r}")
        return cls(**values)
