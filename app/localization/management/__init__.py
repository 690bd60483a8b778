"""Translation administration: validation, quality scoring, import/export."""

from localization.management.manager import (
    BatchUpdateResult,
    BundleValidation,
    ImportResult,
    SimilarTranslation,
    TranslationManager,
    TranslationProgress,
)
from localization.management.quality import QualityMetrics, quality_tier
from localization.management.validation import DEFAULT_RULES, TranslationValidation

__all__ = [
    "BatchUpdateResult",
    "BundleValidation",
    "ImportResult",
    "SimilarTranslation",
    "TranslationManager",
    "TranslationProgress",
    "QualityMetrics",
    "quality_tier",
    "DEFAULT_RULES",
    "TranslationValidation",
]
