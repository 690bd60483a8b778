"""Unit tests for the translation store backends."""


import pytest
from botocore.exceptions import ClientError

from localization.i18n.dynamodb_store import (
    DynamoDBTranslationStore,
    item_to_record,
    record_to_item,
)
from localization.i18n.exceptions import TranslationStoreError
from localization.i18n.models import Gender
from localization.i18n.store import InMemoryTranslationStore, TranslationRecord
from localization.i18n.yaml_store import YAMLTranslationStore
from localization.operations import OperationStatus
from tests.factories.localization import make_record, make_value

pytestmark = pytest.mark.unit


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "operation")


class TestTranslationRecord:
    def test_variables_decoded(self):
        record = make_record(variables_json='{"name": "Ali"}')
        assert record.variables == {"name": "Ali"}

    def test_malformed_variables_yield_empty_dict(self):
        record = make_record(variables_json="{not json")
        assert record.variables == {}

    def test_from_value_round_trips_metadata(self):
        value = make_value(
            key="msg.welcome",
            value="Bienvenue {name}",
            context="title",
            gender=Gender.FEMININE,
            variables={"name": "Sara"},
        )

        record = TranslationRecord.from_value(value, "fr", "MA", author="admin")

        assert record.row_key == ("msg.welcome", "fr", "MA")
        assert record.author == "admin"
        assert record.to_value() == value

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            make_record(key="")


class TestInMemoryTranslationStore:
    """Tests for the dictionary-backed store."""

    async def test_fetch_returns_active_rows_of_pair(self):
        store = InMemoryTranslationStore(
            [
                make_record("nav.home"),
                make_record("nav.cart", "Panier", is_active=False),
                make_record("nav.home", "Home", language="en", market="US"),
            ]
        )

        records = await store.fetch_translations("fr", "FR")

        assert [record.key for record in records] == ["nav.home"]

    async def test_upsert_and_get(self):
        store = InMemoryTranslationStore()

        result = await store.upsert_translation(make_record())

        assert result.is_success
        assert result.message == "translation_saved"
        fetched = await store.get_translation("nav.home", "fr", "FR")
        assert fetched.value == "Accueil"

    async def test_delete_missing_row_is_not_found(self):
        store = InMemoryTranslationStore()

        result = await store.delete_translation("nav.home", "fr", "FR")

        assert result.status == OperationStatus.NOT_FOUND

    async def test_list_pairs(self):
        store = InMemoryTranslationStore(
            [make_record(), make_record("nav.cart"), make_record(language="ar", market="MA")]
        )
        assert await store.list_pairs() == [("fr", "FR"), ("ar", "MA")]


class TestYAMLTranslationStore:
    """Tests for the YAML directory store."""

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(ValueError):
            YAMLTranslationStore(tmp_path / "missing")

    async def test_flattens_nested_keys(self, temp_translations_dir):
        store = YAMLTranslationStore(temp_translations_dir)

        records = {r.key: r for r in await store.fetch_translations("fr", "FR")}

        assert records["nav.home"].value == "Accueil"
        assert records["product.add_to_cart"].context == "button"
        assert records["product.price"].variables == {"amount": "0"}

    async def test_inactive_entries_skipped(self, temp_translations_dir):
        store = YAMLTranslationStore(temp_translations_dir)

        keys = {r.key for r in await store.fetch_translations("fr", "FR")}

        assert "product.retired" not in keys

    async def test_unknown_pair_is_empty(self, temp_translations_dir):
        store = YAMLTranslationStore(temp_translations_dir)
        assert await store.fetch_translations("es", "ES") == []

    async def test_parse_error_raises_store_error(self, tmp_path):
        (tmp_path / "broken.fr-FR.yml").write_text("nav: [unclosed", encoding="utf-8")
        store = YAMLTranslationStore(tmp_path)

        with pytest.raises(TranslationStoreError) as exc_info:
            await store.fetch_translations("fr", "FR")

        assert exc_info.value.error_code == "yaml_parse_error"

    async def test_writes_are_rejected(self, temp_translations_dir):
        store = YAMLTranslationStore(temp_translations_dir)

        result = await store.upsert_translation(make_record())

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "read_only_store"

    async def test_list_pairs_from_filenames(self, temp_translations_dir):
        store = YAMLTranslationStore(temp_translations_dir)
        assert set(await store.list_pairs()) == {("fr", "FR"), ("ar", "MA")}


class TestDynamoDBItemConversion:
    def test_record_item_round_trip(self):
        record = make_record(context="button", gender=Gender.MASCULINE, is_active=False)

        item = record_to_item(record)

        assert item["locale"] == {"S": "fr-FR"}
        assert item["gender"] == {"S": "masculine"}
        assert item_to_record(item) == record

    def test_item_missing_value_raises(self):
        with pytest.raises(KeyError):
            item_to_record({"locale": {"S": "fr-FR"}, "key": {"S": "nav.home"}})


class TestDynamoDBTranslationStore:
    """Tests for the DynamoDB store with a mocked client."""

    async def test_fetch_queries_partition(self, dynamodb_client):
        dynamodb_client.get_paginator.return_value.paginate.return_value = [
            {"Items": [record_to_item(make_record())]},
            {"Items": [record_to_item(make_record("nav.cart", "Panier", is_active=False))]},
        ]
        store = DynamoDBTranslationStore(dynamodb_client, "translations")

        records = await store.fetch_translations("fr", "FR")

        assert [record.key for record in records] == ["nav.home"]
        kwargs = dynamodb_client.get_paginator.return_value.paginate.call_args.kwargs
        assert kwargs["TableName"] == "translations"
        assert kwargs["ExpressionAttributeValues"] == {":locale": {"S": "fr-FR"}}

    async def test_fetch_skips_invalid_items(self, dynamodb_client):
        dynamodb_client.get_paginator.return_value.paginate.return_value = [
            {"Items": [{"locale": {"S": "fr-FR"}}, record_to_item(make_record())]}
        ]
        store = DynamoDBTranslationStore(dynamodb_client, "translations")

        records = await store.fetch_translations("fr", "FR")

        assert len(records) == 1

    async def test_fetch_failure_raises_store_error(self, dynamodb_client):
        dynamodb_client.get_paginator.return_value.paginate.side_effect = _client_error(
            "ResourceNotFoundException"
        )
        store = DynamoDBTranslationStore(dynamodb_client, "translations")

        with pytest.raises(TranslationStoreError) as exc_info:
            await store.fetch_translations("fr", "FR")

        assert exc_info.value.error_code == "ResourceNotFoundException"

    async def test_get_translation_missing_item(self, dynamodb_client):
        dynamodb_client.get_item.return_value = {}
        store = DynamoDBTranslationStore(dynamodb_client, "translations")

        assert await store.get_translation("nav.home", "fr", "FR") is None

    async def test_upsert_puts_item(self, dynamodb_client):
        dynamodb_client.put_item.return_value = {}
        store = DynamoDBTranslationStore(dynamodb_client, "translations")
        record = make_record()

        result = await store.upsert_translation(record)

        assert result.is_success
        dynamodb_client.put_item.assert_called_once_with(
            TableName="translations", Item=record_to_item(record)
        )

    async def test_delete_missing_row_is_not_found(self, dynamodb_client):
        dynamodb_client.delete_item.side_effect = _client_error(
            "ConditionalCheckFailedException"
        )
        store = DynamoDBTranslationStore(dynamodb_client, "translations")

        result = await store.delete_translation("nav.home", "fr", "FR")

        assert result.status == OperationStatus.NOT_FOUND

    async def test_list_pairs_scans_partition_keys(self, dynamodb_client):
        dynamodb_client.get_paginator.return_value.paginate.return_value = [
            {"Items": [{"locale": {"S": "fr-FR"}}, {"locale": {"S": "ar-MA"}}]},
            {"Items": [{"locale": {"S": "fr-FR"}}]},
        ]
        store = DynamoDBTranslationStore(dynamodb_client, "translations")

        assert await store.list_pairs() == [("fr", "FR"), ("ar", "MA")]
