"""Custom exceptions for the localization engine.

Locale selection errors are raised loudly; translation resolution never
raises (see Translator.translate).
"""

from typing import Optional


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            await service.set_locale("xx", "FR")
        except LocalizationError as e:
            logger.error("locale_switch_failed", error=str(e))
    """

    pass


class UnsupportedLanguageError(LocalizationError):
    """Raised when a language code is not in the registry.

    Example:
        >>> registry.resolve_locale("de", "FR")
        Traceback (most recent call last):
        ...
        UnsupportedLanguageError: Unsupported language: de
    """

    def __init__(self, language_code: str):
        self.language_code = language_code
        super().__init__(f"Unsupported language: {language_code}")


class UnsupportedMarketError(LocalizationError):
    """Raised when a market code is not in the registry.

    Example:
        >>> registry.resolve_locale("fr", "DE")
        Traceback (most recent call last):
        ...
        UnsupportedMarketError: Unsupported market: DE
    """

    def __init__(self, market_code: str):
        self.market_code = market_code
        super().__init__(f"Unsupported market: {market_code}")


class LanguageNotOfferedInMarketError(LocalizationError):
    """Raised when a known market does not offer a known language.

    Example:
        >>> registry.resolve_locale("fr", "US")
        Traceback (most recent call last):
        ...
        LanguageNotOfferedInMarketError: Language fr is not offered in market US
    """

    def __init__(self, language_code: str, market_code: str):
        self.language_code = language_code
        self.market_code = market_code
        super().__init__(
            f"Language {language_code} is not offered in market {market_code}"
        )


class TranslationStoreError(LocalizationError):
    """Raised by store adapters when the backend cannot serve a request.

    The resolver absorbs this error and serves built-in bundles instead.
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.error_code = error_code
        super().__init__(message)


class UnsupportedFormatError(LocalizationError):
    """Raised when importing or exporting an unknown file format.

    Example:
        >>> await manager.export_translations("fr", "FR", "yaml")
        Traceback (most recent call last):
        ...
        UnsupportedFormatError: Unsupported format: yaml
    """

    def __init__(self, fmt: str):
        self.format = fmt
        super().__init__(f"Unsupported format: {fmt}")
