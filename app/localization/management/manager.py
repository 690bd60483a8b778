"""Translation manager: admin tooling over the translation store.

Validates and scores translations, reports progress per (language, market),
imports and exports translation files, and writes rows through the store.
Every write invalidates the cached bundle of the affected pair so the
resolver picks up the change on its next load.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Union

from localization.i18n.cache import TranslationCache
from localization.i18n.defaults import EXPECTED_TRANSLATION_KEYS
from localization.i18n.exceptions import TranslationStoreError
from localization.i18n.models import TranslationBundle, TranslationValue
from localization.i18n.store import TranslationRecord, TranslationStore
from localization.logging import get_module_logger
from localization.management import interchange
from localization.management.quality import QualityMetrics, compute_metrics, quality_tier
from localization.management.similarity import similarity
from localization.management.validation import (
    DEFAULT_RULES,
    TranslationValidation,
    ValidationRule,
    validate,
)
from localization.operations import OperationResult

logger = get_module_logger()

Translations = Dict[str, TranslationValue]

SIMILAR_RESULTS_LIMIT = 10


@dataclass
class BundleValidation:
    is_valid: bool
    validations: List[TranslationValidation]
    summary: Dict[str, int]


@dataclass
class TranslationProgress:
    """Coverage of one (language, market) pair against the expected keys."""

    language: str
    market: str
    total_keys: int
    translated_keys: int
    percentage: float
    quality: str
    missing_keys: List[str] = field(default_factory=list)
    invalid_keys: List[str] = field(default_factory=list)
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class ImportResult:
    """Outcome of an import.

    Attributes:
        success: False if parsing failed, or if errors occurred and nothing
            was imported.
        imported: Rows written.
        skipped: Existing rows left untouched (overwrite=False).
        errors: One message per rejected key.
        warnings: One message per key with validation warnings.
    """

    success: bool = True
    imported: int = 0
    skipped: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass
class BatchUpdateResult:
    """Per-row outcome counts of a batch update."""

    succeeded: int = 0
    failed: int = 0
    errors: List[str] = field(default_factory=list)


@dataclass
class SimilarTranslation:
    key: str
    value: str
    similarity: float


class TranslationManager:
    """Admin operations on translations.

    Attributes:
        store: Translation store written to and read from.
        cache: Bundle cache invalidated after writes (optional).
        rules: Validation rules by name.
        expected_keys: Keys every pair is expected to translate.
    """

    def __init__(
        self,
        store: TranslationStore,
        cache: Optional[TranslationCache] = None,
        rules: Optional[Dict[str, ValidationRule]] = None,
        expected_keys: Optional[List[str]] = None,
    ):
        self.store = store
        self.cache = cache
        self.rules = dict(DEFAULT_RULES if rules is None else rules)
        self.expected_keys = list(expected_keys or EXPECTED_TRANSLATION_KEYS)

    def add_rule(self, name: str, rule: ValidationRule) -> None:
        self.rules[name] = rule

    def validate_translation(self, key: str, value: TranslationValue) -> TranslationValidation:
        return validate(key, value, self.rules)

    def validate_bundle(
        self, translations: Union[TranslationBundle, Mapping[str, TranslationValue]]
    ) -> BundleValidation:
        """Validate every translation of a bundle and summarize."""
        if isinstance(translations, TranslationBundle):
            translations = translations.translations

        validations = [
            self.validate_translation(key, value) for key, value in translations.items()
        ]
        total_errors = sum(len(item.errors) for item in validations)
        valid_keys = sum(1 for item in validations if item.is_valid)
        return BundleValidation(
            is_valid=total_errors == 0,
            validations=validations,
            summary={
                "total_keys": len(validations),
                "valid_keys": valid_keys,
                "invalid_keys": len(validations) - valid_keys,
                "total_errors": total_errors,
                "total_warnings": sum(len(item.warnings) for item in validations),
            },
        )

    def quality_metrics(
        self,
        translations: Mapping[str, TranslationValue],
        reference: Optional[Mapping[str, TranslationValue]] = None,
    ) -> QualityMetrics:
        return compute_metrics(translations, self.rules, reference)

    async def load_translations(self, language: str, market: str) -> Translations:
        """Active translations of a pair, keyed by translation key.

        Raises:
            TranslationStoreError: If the store cannot be read.
        """
        records = await self.store.fetch_translations(language, market)
        return {record.key: record.to_value() for record in records}

    async def progress_report(
        self, languages: List[str], markets: List[str]
    ) -> List[TranslationProgress]:
        """Coverage and quality tier for every language x market combination."""
        reports = []
        total = len(self.expected_keys)
        for language in languages:
            for market in markets:
                existing = await self.load_translations(language, market)
                percentage = len(existing) / total * 100 if total else 0.0
                reports.append(
                    TranslationProgress(
                        language=language,
                        market=market,
                        total_keys=total,
                        translated_keys=len(existing),
                        percentage=percentage,
                        quality=quality_tier(percentage),
                        missing_keys=[key for key in self.expected_keys if key not in existing],
                        invalid_keys=[
                            key
                            for key, value in existing.items()
                            if not self.validate_translation(key, value).is_valid
                        ],
                    )
                )
        return reports

    async def export_translations(self, language: str, market: str, fmt: str = "json") -> str:
        """Export the active translations of a pair.

        Raises:
            UnsupportedFormatError: If fmt is not json, po, xlf or csv.
            TranslationStoreError: If the store cannot be read.
        """
        fmt = interchange.check_format(fmt)
        translations = await self.load_translations(language, market)
        content = interchange.export_translations(translations, fmt, language, market)
        logger.info(
            "translations_exported",
            language=language,
            market=market,
            format=fmt,
            count=len(translations),
        )
        return content

    async def import_translations(
        self,
        content: str,
        fmt: str,
        language: str,
        market: str,
        overwrite: bool = False,
        validate_before_import: bool = True,
        author: str = "System Import",
    ) -> ImportResult:
        """Import a translation file into the store.

        Args:
            content: File content.
            fmt: json, po, xlf or csv.
            language: Target language code.
            market: Target market code.
            overwrite: Replace rows that already exist.
            validate_before_import: Reject keys that fail validation.
            author: Recorded on every written row.

        Returns:
            ImportResult. Unparseable content yields success=False with the
            parse error as the only error.

        Raises:
            UnsupportedFormatError: If fmt is not supported.
        """
        fmt = interchange.check_format(fmt)
        try:
            translations = interchange.parse_translations(content, fmt)
        except ValueError as e:
            logger.warning("translation_import_parse_failed", format=fmt, error=str(e))
            return ImportResult(success=False, errors=[str(e)])

        result = ImportResult()
        for key, value in translations.items():
            if validate_before_import:
                validation = self.validate_translation(key, value)
                if not validation.is_valid:
                    result.errors.append(f"Key {key}: {', '.join(validation.errors)}")
                    continue
                if validation.warnings:
                    result.warnings.append(f"Key {key}: {', '.join(validation.warnings)}")

            try:
                existing = await self.store.get_translation(key, language, market)
                if existing is not None and not overwrite:
                    result.skipped += 1
                    continue
                saved = await self.store.upsert_translation(
                    TranslationRecord.from_value(value, language, market, author=author)
                )
            except TranslationStoreError as e:
                result.errors.append(f"Key {key}: {e}")
                continue

            if saved.is_success:
                result.imported += 1
            else:
                result.errors.append(f"Key {key}: {saved.message}")

        if result.errors:
            result.success = result.imported > 0
        if result.imported:
            self._invalidate(language, market)

        logger.info(
            "translations_imported",
            language=language,
            market=market,
            format=fmt,
            imported=result.imported,
            skipped=result.skipped,
            error_count=len(result.errors),
        )
        return result

    async def save_translation(
        self,
        key: str,
        value: TranslationValue,
        language: str,
        market: str,
        author: str = "system",
    ) -> OperationResult:
        """Upsert one translation and invalidate the pair's cached bundle."""
        result = await self.store.upsert_translation(
            TranslationRecord.from_value(value, language, market, author=author)
        )
        if result.is_success:
            self._invalidate(language, market)
        else:
            logger.warning(
                "translation_save_failed",
                key=key,
                language=language,
                market=market,
                error_code=result.error_code,
                retryable=result.is_retryable,
            )
        return result

    async def delete_translation(self, key: str, language: str, market: str) -> OperationResult:
        result = await self.store.delete_translation(key, language, market)
        if result.is_success:
            self._invalidate(language, market)
        return result

    async def batch_update(
        self,
        translations: List[TranslationValue],
        language: str,
        market: str,
        author: str = "system",
    ) -> OperationResult:
        """Validate and upsert many translations of one pair.

        Rows are written independently; a rejected or failed row does not
        stop the others.

        Args:
            translations: Values to write, each carrying its key.
            language: Target language code.
            market: Target market code.
            author: Recorded on every written row.

        Returns:
            A success whose data is a BatchUpdateResult.
        """
        outcome = BatchUpdateResult()
        for value in translations:
            validation = self.validate_translation(value.key, value)
            if not validation.is_valid:
                outcome.failed += 1
                outcome.errors.append(f"Key {value.key}: {', '.join(validation.errors)}")
                continue

            try:
                saved = await self.store.upsert_translation(
                    TranslationRecord.from_value(value, language, market, author=author)
                )
            except TranslationStoreError as e:
                outcome.failed += 1
                outcome.errors.append(f"Key {value.key}: {e}")
                continue

            if saved.is_success:
                outcome.succeeded += 1
            else:
                outcome.failed += 1
                outcome.errors.append(f"Key {value.key}: {saved.message}")

        if outcome.succeeded:
            self._invalidate(language, market)

        logger.info(
            "translations_batch_updated",
            language=language,
            market=market,
            succeeded=outcome.succeeded,
            failed=outcome.failed,
        )
        return OperationResult.success(
            data=outcome,
            message=(
                f"Batch update finished: {outcome.succeeded} succeeded, "
                f"{outcome.failed} failed"
            ),
        )

    async def search_similar(
        self, key: str, language: str, market: str, threshold: float = 0.8
    ) -> List[SimilarTranslation]:
        """Translations of a pair whose key is close to the given one.

        Only keys containing ``key`` (case-insensitive) are scored.

        Raises:
            TranslationStoreError: If the store cannot be read.
        """
        needle = key.lower()
        translations = await self.load_translations(language, market)
        matches = []
        for candidate, value in translations.items():
            if needle not in candidate.lower():
                continue
            score = similarity(needle, candidate.lower())
            if score >= threshold:
                matches.append(
                    SimilarTranslation(key=candidate, value=value.value, similarity=score)
                )
        matches.sort(key=lambda match: match.similarity, reverse=True)
        return matches[:SIMILAR_RESULTS_LIMIT]

    async def statistics(self) -> Dict[str, Any]:
        """Active row counts per language and per market."""
        language_breakdown: Dict[str, int] = {}
        market_breakdown: Dict[str, int] = {}
        total = 0
        for language, market in await self.store.list_pairs():
            count = len(await self.store.fetch_translations(language, market))
            if not count:
                continue
            total += count
            language_breakdown[language] = language_breakdown.get(language, 0) + count
            market_breakdown[market] = market_breakdown.get(market, 0) + count

        return {
            "total_languages": len(language_breakdown),
            "total_markets": len(market_breakdown),
            "total_translations": total,
            "language_breakdown": language_breakdown,
            "market_breakdown": market_breakdown,
            "quality_score": min(100, total * 2),
        }

    def _invalidate(self, language: str, market: str) -> None:
        if self.cache is not None:
            self.cache.invalidate(language, market)
            logger.debug("translation_cache_invalidated", language=language, market=market)
