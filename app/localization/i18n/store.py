"""Persistent translation store contract and in-memory implementation.

Stores hold rows keyed by (key, language, market). The resolver only reads
active rows through fetch_translations(); the admin tooling writes through
upsert_translation() and delete_translation().
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from localization.i18n.models import Gender, PluralCategory, TranslationValue
from localization.logging import get_module_logger
from localization.operations import OperationResult

logger = get_module_logger()

RowKey = Tuple[str, str, str]


class TranslationRecord(BaseModel):
    """One stored translation row.

    Attributes:
        key: Dot-namespaced translation key.
        language: Language code.
        market: Market code.
        value: Translated text.
        context: Optional UI context.
        gender: Optional grammatical gender.
        plural_category: Optional plural form of the stored value.
        variables_json: JSON object of default placeholder values.
        is_active: Inactive rows are ignored by fetch_translations().
        author: Who last wrote the row.
        updated_at: ISO 8601 timestamp of the last write (UTC).
    """

    key: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
    market: str = Field(..., min_length=1)
    value: str
    context: Optional[str] = None
    gender: Optional[Gender] = None
    plural_category: Optional[PluralCategory] = None
    variables_json: Optional[str] = None
    is_active: bool = True
    author: str = "system"
    updated_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @property
    def row_key(self) -> RowKey:
        return (self.key, self.language, self.market)

    @property
    def variables(self) -> Dict[str, Any]:
        """Decoded placeholder defaults; malformed JSON yields an empty dict."""
        if not self.variables_json:
            return {}
        try:
            decoded = json.loads(self.variables_json)
        except ValueError:
            logger.warning(
                "translation_variables_invalid",
                key=self.key,
                language=self.language,
                market=self.market,
            )
            return {}
        return decoded if isinstance(decoded, dict) else {}

    def to_value(self) -> TranslationValue:
        return TranslationValue(
            key=self.key,
            value=self.value,
            context=self.context,
            gender=self.gender,
            plural_category=self.plural_category,
            variables=self.variables,
        )

    @classmethod
    def from_value(
        cls,
        value: TranslationValue,
        language: str,
        market: str,
        author: str = "system",
    ) -> "TranslationRecord":
        return cls(
            key=value.key,
            language=language,
            market=market,
            value=value.value,
            context=value.context,
            gender=value.gender,
            plural_category=value.plural_category,
            variables_json=json.dumps(value.variables, ensure_ascii=False)
            if value.variables
            else None,
            author=author,
        )


class TranslationStore(ABC):
    """Abstract base class for persistent translation stores.

    Read failures raise TranslationStoreError. Writes report their outcome
    as an OperationResult.
    """

    @abstractmethod
    async def fetch_translations(
        self, language: str, market: str
    ) -> List[TranslationRecord]:
        """Fetch every active row for a pair.

        Args:
            language: Language code.
            market: Market code.

        Returns:
            Active rows (possibly empty).

        Raises:
            TranslationStoreError: If the backend cannot be read.
        """
        pass

    @abstractmethod
    async def get_translation(
        self, key: str, language: str, market: str
    ) -> Optional[TranslationRecord]:
        """Fetch a single row (active or not), or None."""
        pass

    @abstractmethod
    async def upsert_translation(self, record: TranslationRecord) -> OperationResult:
        """Insert or replace the row identified by (key, language, market)."""
        pass

    @abstractmethod
    async def delete_translation(
        self, key: str, language: str, market: str
    ) -> OperationResult:
        """Delete a row; NOT_FOUND when it does not exist."""
        pass

    async def list_pairs(self) -> List[Tuple[str, str]]:
        """(language, market) pairs that have at least one row.

        Stores that cannot enumerate cheaply return an empty list.
        """
        return []


class InMemoryTranslationStore(TranslationStore):
    """Dictionary-backed store for tests and local development."""

    def __init__(self, records: Optional[List[TranslationRecord]] = None):
        self._rows: Dict[RowKey, TranslationRecord] = {}
        for record in records or []:
            self._rows[record.row_key] = record
        logger.info("initialized_memory_translation_store", row_count=len(self._rows))

    async def fetch_translations(
        self, language: str, market: str
    ) -> List[TranslationRecord]:
        return [
            record
            for record in self._rows.values()
            if record.language == language
            and record.market == market
            and record.is_active
        ]

    async def get_translation(
        self, key: str, language: str, market: str
    ) -> Optional[TranslationRecord]:
        return self._rows.get((key, language, market))

    async def upsert_translation(self, record: TranslationRecord) -> OperationResult:
        self._rows[record.row_key] = record
        return OperationResult.success(data=record, message="translation_saved")

    async def delete_translation(
        self, key: str, language: str, market: str
    ) -> OperationResult:
        if self._rows.pop((key, language, market), None) is None:
            return OperationResult.not_found(
                f"Translation {key} not found for {language}-{market}"
            )
        return OperationResult.success(message="translation_deleted")

    async def list_pairs(self) -> List[Tuple[str, str]]:
        pairs: Dict[Tuple[str, str], None] = {}
        for record in self._rows.values():
            pairs[(record.language, record.market)] = None
        return list(pairs)
