"""Localization feature settings."""

from pydantic import Field

from localization.configuration.base import FeatureSettings


class LocalizationSettings(FeatureSettings):
    """Initial runtime configuration for the localization service.

    These values seed the mutable LocalizationConfig held by the service at
    startup; later language or market switches do not write them back.

    Environment Variables:
        LOCALIZATION_DEFAULT_LANGUAGE: Language active at startup (default: fr)
        LOCALIZATION_DEFAULT_MARKET: Market active at startup (default: FR)
        LOCALIZATION_FALLBACK_LANGUAGE: Language consulted for missing keys (default: fr)
        LOCALIZATION_CACHE_TRANSLATIONS: Front the store with the bundle cache (default: True)
        LOCALIZATION_ENABLE_RTL: Let the direction adaptor switch to RTL (default: True)
        LOCALIZATION_MIRROR_ICONS: Mirror non-directional icons in RTL (default: True)
        LOCALIZATION_MIRROR_NUMBERS: Mirror numeric content in RTL (default: False)

    Example:
        ```python
        from localization.configuration import get_settings

        settings = get_settings()
        language = settings.localization.default_language
        ```
    """

    default_language: str = Field(
        default="fr",
        alias="LOCALIZATION_DEFAULT_LANGUAGE",
        description="Language code active when the service starts",
    )
    default_market: str = Field(
        default="FR",
        alias="LOCALIZATION_DEFAULT_MARKET",
        description="Market code active when the service starts",
    )
    fallback_language: str = Field(
        default="fr",
        alias="LOCALIZATION_FALLBACK_LANGUAGE",
        description="Language whose bundle is consulted when a key is missing",
    )
    cache_translations: bool = Field(
        default=True,
        alias="LOCALIZATION_CACHE_TRANSLATIONS",
        description="Serve bundles from the in-memory cache when fresh",
    )
    enable_rtl: bool = Field(
        default=True,
        alias="LOCALIZATION_ENABLE_RTL",
        description="Allow right-to-left layout adaptation",
    )
    mirror_icons: bool = Field(
        default=True,
        alias="LOCALIZATION_MIRROR_ICONS",
        description="Mirror icons that carry no directional meaning in RTL",
    )
    mirror_numbers: bool = Field(
        default=False,
        alias="LOCALIZATION_MIRROR_NUMBERS",
        description="Mirror numeric content in RTL",
    )
