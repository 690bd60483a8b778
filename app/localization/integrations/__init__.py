"""External service integrations."""

from localization.integrations.dynamodb import execute_dynamodb_call, get_dynamodb_client

__all__ = ["execute_dynamodb_call", "get_dynamodb_client"]
