"""
Test package for ClosetStats v1
"""

# Version info
__version__ = "1.0.0"

# Import main test classes for easy access
from .test_coverage_engine import TestCoverageEngine
from .test_option_universe import TestOptionUniverse
from .test_wardrobe_loader import TestWardrobeLoader

__all__ = [
    'TestCoverageEngine',
    'TestOptionUniverse',
    'TestWardrobeLoader'
]
