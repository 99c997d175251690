"""SuperMemo-2 review engine."""

from .srs import InvalidQuality, Item, Quality, review

__version__ = "1.0.0"

__all__ = ["InvalidQuality", "Item", "Quality", "review", "__version__"]
