"""Feature settings __init__ - exports all feature settings."""

from localization.configuration.features.localization import LocalizationSettings

__all__ = ["LocalizationSettings"]
