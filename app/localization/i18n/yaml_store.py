"""Read-only translation store backed by a directory of YAML files.

Expects files named ``<namespace>.<language>-<MARKET>.yml``:

    # nav.fr-FR.yml
    nav:
      home: Accueil
      orders: Commandes

Nested mappings are flattened into dot-namespaced keys. A mapping that has
a ``value`` entry is read as one translation with its metadata:

    product:
      add_to_cart:
        value: Ajouter au panier
        context: button
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from localization.i18n.exceptions import TranslationStoreError
from localization.i18n.store import TranslationRecord, TranslationStore
from localization.logging import get_module_logger
from localization.operations import OperationResult

logger = get_module_logger()

METADATA_FIELDS = ("context", "gender", "plural_category")


class YAMLTranslationStore(TranslationStore):
    """Loads translations from YAML files; writes are rejected.

    Attributes:
        translations_dir: Directory containing the YAML files.
    """

    def __init__(self, translations_dir: Path):
        """Initialize the YAML store.

        Args:
            translations_dir: Directory with YAML translation files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        if not self.translations_dir.exists():
            raise ValueError(f"Translations directory not found: {self.translations_dir}")

        logger.info("initialized_yaml_store", translations_dir=str(self.translations_dir))

    async def fetch_translations(
        self, language: str, market: str
    ) -> List[TranslationRecord]:
        return await asyncio.to_thread(self._load, language, market)

    async def get_translation(
        self, key: str, language: str, market: str
    ) -> Optional[TranslationRecord]:
        for record in await self.fetch_translations(language, market):
            if record.key == key:
                return record
        return None

    async def upsert_translation(self, record: TranslationRecord) -> OperationResult:
        return OperationResult.permanent_error(
            "YAML translation store is read-only", error_code="read_only_store"
        )

    async def delete_translation(
        self, key: str, language: str, market: str
    ) -> OperationResult:
        return OperationResult.permanent_error(
            "YAML translation store is read-only", error_code="read_only_store"
        )

    async def list_pairs(self) -> List[Tuple[str, str]]:
        pairs: Dict[Tuple[str, str], None] = {}
        for yaml_file in sorted(self.translations_dir.glob("*.yml")):
            # "nav.fr-FR.yml" -> "fr-FR"
            parts = yaml_file.stem.split(".")
            if len(parts) < 2 or "-" not in parts[-1]:
                continue
            language, market = parts[-1].split("-", 1)
            pairs[(language, market)] = None
        return list(pairs)

    def _load(self, language: str, market: str) -> List[TranslationRecord]:
        """Read every file for the pair; later files override earlier keys.

        Raises:
            TranslationStoreError: If a file cannot be read or parsed.
        """
        suffix = f"{language}-{market}"
        yaml_files = sorted(self.translations_dir.glob(f"*.{suffix}.yml"))
        records: Dict[str, TranslationRecord] = {}

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise TranslationStoreError(
                    f"Failed to read {yaml_file}: {e}", error_code="yaml_parse_error"
                ) from e

            if not data:
                continue
            if not isinstance(data, dict):
                logger.warning("invalid_yaml_format", file=str(yaml_file), expected="dict")
                continue

            for key, entry in self._flatten(data).items():
                records[key] = self._to_record(key, entry, language, market)

        logger.info(
            "loaded_translations",
            language=language,
            market=market,
            file_count=len(yaml_files),
            key_count=len(records),
        )
        return [record for record in records.values() if record.is_active]

    def _flatten(self, data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
        flat: Dict[str, Any] = {}
        for name, entry in data.items():
            key = f"{prefix}.{name}" if prefix else str(name)
            if isinstance(entry, dict) and "value" not in entry:
                flat.update(self._flatten(entry, key))
            elif isinstance(entry, (dict, str, int, float)):
                flat[key] = entry
            else:
                logger.warning("invalid_translation_entry", key=key)
        return flat

    @staticmethod
    def _to_record(
        key: str, entry: Any, language: str, market: str
    ) -> TranslationRecord:
        if not isinstance(entry, dict):
            return TranslationRecord(
                key=key, language=language, market=market, value=str(entry)
            )

        variables = entry.get("variables")
        variables_json = (
            json.dumps(variables, ensure_ascii=False, default=str) if variables else None
        )
        return TranslationRecord(
            key=key,
            language=language,
            market=market,
            value=str(entry["value"]),
            variables_json=variables_json,
            is_active=bool(entry.get("is_active", True)),
            **{name: entry[name] for name in METADATA_FIELDS if entry.get(name)},
        )

