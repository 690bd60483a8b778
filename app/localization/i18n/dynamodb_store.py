"""DynamoDB-backed translation store.

Table layout:
    - PK: locale (string, "<language>-<MARKET>", e.g. "fr-FR")
    - SK: key (string, e.g. "nav.home")
    - Attributes: value, context, gender, plural_category, variables_json,
      is_active, author, updated_at

boto3 is blocking, so every call runs in a worker thread.
"""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

from botocore.client import BaseClient  # type: ignore

from localization.i18n.exceptions import TranslationStoreError
from localization.i18n.store import TranslationRecord, TranslationStore
from localization.integrations.dynamodb import execute_dynamodb_call
from localization.logging import get_module_logger
from localization.operations import OperationResult, OperationStatus

logger = get_module_logger()

PARTITION_KEY = "locale"
SORT_KEY = "key"
OPTIONAL_STRING_FIELDS = ("context", "gender", "plural_category", "variables_json")


def _raise_for_result(result: OperationResult, description: str) -> None:
    if not result.is_success:
        raise TranslationStoreError(
            f"{description}: {result.message}", error_code=result.error_code
        )


def _locale_id(language: str, market: str) -> str:
    return f"{language}-{market}"


def record_to_item(record: TranslationRecord) -> Dict[str, Dict[str, Any]]:
    """Convert a record to a DynamoDB typed item."""
    item: Dict[str, Dict[str, Any]] = {
        PARTITION_KEY: {"S": _locale_id(record.language, record.market)},
        SORT_KEY: {"S": record.key},
        "value": {"S": record.value},
        "is_active": {"BOOL": record.is_active},
        "author": {"S": record.author},
        "updated_at": {"S": record.updated_at},
    }
    for name in OPTIONAL_STRING_FIELDS:
        attr = getattr(record, name)
        if attr is not None:
            item[name] = {"S": attr.value if hasattr(attr, "value") else str(attr)}
    return item


def item_to_record(item: Dict[str, Dict[str, Any]]) -> TranslationRecord:
    """Convert a DynamoDB typed item to a record.

    Raises:
        KeyError: If the partition key, sort key or value is missing.
    """
    language, market = item[PARTITION_KEY]["S"].split("-", 1)
    fields: Dict[str, Any] = {
        name: item[name]["S"] for name in OPTIONAL_STRING_FIELDS if name in item
    }
    if "is_active" in item:
        fields["is_active"] = item["is_active"]["BOOL"]
    if "author" in item:
        fields["author"] = item["author"]["S"]
    if "updated_at" in item:
        fields["updated_at"] = item["updated_at"]["S"]

    return TranslationRecord(
        key=item[SORT_KEY]["S"],
        language=language,
        market=market,
        value=item["value"]["S"],
        **fields,
    )


class DynamoDBTranslationStore(TranslationStore):
    """Translation store on a DynamoDB table.

    Attributes:
        client: boto3 DynamoDB client.
        table_name: Table holding the translations.
        max_retries: Retries for throttled calls.
    """

    def __init__(self, client: BaseClient, table_name: str, max_retries: int = 3):
        self.client = client
        self.table_name = table_name
        self.max_retries = max_retries
        logger.info(
            "initialized_dynamodb_translation_store",
            table_name=table_name,
            max_retries=max_retries,
        )

    async def _call(self, method: str, **kwargs: Any) -> OperationResult:
        return await asyncio.to_thread(
            execute_dynamodb_call,
            self.client,
            method,
            max_retries=self.max_retries,
            **kwargs,
        )

    async def fetch_translations(
        self, language: str, market: str
    ) -> List[TranslationRecord]:
        result = await self._call(
            "query",
            paginate_key="Items",
            TableName=self.table_name,
            KeyConditionExpression="#pk = :locale",
            ExpressionAttributeNames={"#pk": PARTITION_KEY},
            ExpressionAttributeValues={":locale": {"S": _locale_id(language, market)}},
        )
        _raise_for_result(result, f"Failed to fetch translations for {language}-{market}")

        records: List[TranslationRecord] = []
        for item in result.data or []:
            try:
                record = item_to_record(item)
            except (KeyError, ValueError) as e:
                logger.warning(
                    "dynamodb_translation_item_invalid",
                    language=language,
                    market=market,
                    error=str(e),
                )
                continue
            if record.is_active:
                records.append(record)

        logger.debug(
            "dynamodb_translations_fetched",
            language=language,
            market=market,
            count=len(records),
        )
        return records

    async def get_translation(
        self, key: str, language: str, market: str
    ) -> Optional[TranslationRecord]:
        result = await self._call(
            "get_item",
            TableName=self.table_name,
            Key={
                PARTITION_KEY: {"S": _locale_id(language, market)},
                SORT_KEY: {"S": key},
            },
        )
        _raise_for_result(result, f"Failed to get translation {key} for {language}-{market}")
        if not result.data or "Item" not in result.data:
            return None
        return item_to_record(result.data["Item"])

    async def upsert_translation(self, record: TranslationRecord) -> OperationResult:
        result = await self._call(
            "put_item", TableName=self.table_name, Item=record_to_item(record)
        )
        if not result.is_success:
            return result
        return OperationResult.success(data=record, message="translation_saved")

    async def delete_translation(
        self, key: str, language: str, market: str
    ) -> OperationResult:
        result = await self._call(
            "delete_item",
            TableName=self.table_name,
            Key={
                PARTITION_KEY: {"S": _locale_id(language, market)},
                SORT_KEY: {"S": key},
            },
            ConditionExpression="attribute_exists(#sk)",
            ExpressionAttributeNames={"#sk": SORT_KEY},
        )
        if result.error_code == "ConditionalCheckFailedException":
            return OperationResult.not_found(
                f"Translation {key} not found for {language}-{market}"
            )
        if result.status != OperationStatus.SUCCESS:
            return result
        return OperationResult.success(message="translation_deleted")

    async def list_pairs(self) -> List[Tuple[str, str]]:
        result = await self._call(
            "scan",
            paginate_key="Items",
            TableName=self.table_name,
            ProjectionExpression="#pk",
            ExpressionAttributeNames={"#pk": PARTITION_KEY},
        )
        _raise_for_result(result, "Failed to list locales")
        pairs: Dict[Tuple[str, str], None] = {}
        for item in result.data or []:
            language, _, market = item[PARTITION_KEY]["S"].partition("-")
            pairs[(language, market)] = None
        return list(pairs)
