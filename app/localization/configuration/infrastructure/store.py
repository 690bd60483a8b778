"""Persistent translation store settings."""

from typing import Optional

from pydantic import Field

from localization.configuration.base import InfrastructureSettings


class TranslationStoreSettings(InfrastructureSettings):
    """Persistent translation store configuration.

    Environment Variables:
        TRANSLATION_STORE_BACKEND: Backend type - 'memory', 'yaml', or 'dynamodb'
        TRANSLATIONS_DIR: Directory of YAML bundles (yaml backend)
        TRANSLATIONS_TABLE: DynamoDB table name (default: localization_translations)
        AWS_REGION: AWS region for the DynamoDB client (default: ca-central-1)
        DYNAMODB_MAX_RETRIES: Retries for throttled DynamoDB calls (default: 3)
        DYNAMODB_ENDPOINT_URL: Endpoint override, e.g. a local DynamoDB (default: None)

    Store Backends:
        - memory: In-process dictionary (development, testing)
        - yaml: Read-only directory of ``<namespace>.<lang>-<MARKET>.yml`` files
        - dynamodb: DynamoDB table shared by every instance (production)
    """

    backend: str = Field(
        default="memory",
        alias="TRANSLATION_STORE_BACKEND",
        description="Store backend: 'memory', 'yaml', or 'dynamodb'",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="TRANSLATIONS_DIR",
        description="Directory containing YAML translation files",
    )
    table_name: str = Field(
        default="localization_translations",
        alias="TRANSLATIONS_TABLE",
        description="DynamoDB table holding translation rows",
    )
    aws_region: str = Field(
        default="ca-central-1",
        alias="AWS_REGION",
        description="AWS region used by the DynamoDB client",
    )
    max_retries: int = Field(
        default=3,
        alias="DYNAMODB_MAX_RETRIES",
        description="Retry attempts for throttled DynamoDB calls",
    )
    endpoint_url: Optional[str] = Field(
        default=None,
        alias="DYNAMODB_ENDPOINT_URL",
        description="Override endpoint (local DynamoDB)",
    )
