"""DynamoDB client helpers.

Thin wrappers around boto3 giving every DynamoDB call the same error
handling: throttling errors are retried with exponential backoff, every
outcome is reported as an OperationResult, and paginated operations are
collected into a single list.

Usage:
    client = get_dynamodb_client(region_name="ca-central-1")
    result = execute_dynamodb_call(
        client,
        "get_item",
        TableName="localization_translations",
        Key={"locale": {"S": "fr-FR"}, "key": {"S": "nav.home"}},
    )
    if result.is_success:
        item = result.data.get("Item")
"""

import time
from typing import Any, Callable, List, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from localization.logging import get_module_logger
from localization.operations import OperationResult

logger = get_module_logger()

RETRY_ERRORS = (
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "ProvisionedThroughputExceededException",
)
BACKOFF_FACTOR = 0.5


def get_dynamodb_client(
    region_name: str,
    endpoint_url: Optional[str] = None,
) -> BaseClient:
    """Create a boto3 DynamoDB client.

    Args:
        region_name: AWS region.
        endpoint_url: Optional endpoint override (local DynamoDB).

    Returns:
        DynamoDB client.
    """
    session = boto3.Session(region_name=region_name)
    client_config = {"endpoint_url": endpoint_url} if endpoint_url else {}
    return session.client("dynamodb", **client_config)


def _error_code(error: Exception) -> Optional[str]:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code")
    return None


def _calculate_retry_delay(attempt: int) -> float:
    return BACKOFF_FACTOR * (2**attempt)


def _paginate_all_results(
    client: BaseClient, method: str, result_key: str, **kwargs
) -> List[dict]:
    paginator = client.get_paginator(method)
    results: List[dict] = []
    for page in paginator.paginate(**kwargs):
        results.extend(page.get(result_key, []))
    return results


def execute_dynamodb_call(
    client: BaseClient,
    method: str,
    max_retries: int = 3,
    paginate_key: Optional[str] = None,
    sleep: Callable[[float], None] = time.sleep,
    **kwargs: Any,
) -> OperationResult:
    """Execute a DynamoDB client method with retries.

    Args:
        client: boto3 DynamoDB client.
        method: Client method name (``query``, ``put_item``...).
        max_retries: Retries for throttling errors.
        paginate_key: When set and the method can paginate, every page is
            read and the values under this key are concatenated.
        sleep: Delay function between retries.
        **kwargs: Arguments for the client method.

    Returns:
        OperationResult with the raw response (or the concatenated items
        when paginating) as data. Throttling that outlasts the retries and
        connection failures are TRANSIENT_ERROR; any other client error is
        PERMANENT_ERROR with the AWS error code.
    """
    func_name = f"dynamodb_{method}"

    for attempt in range(max_retries + 1):
        try:
            if paginate_key and client.can_paginate(method):
                data: Any = _paginate_all_results(client, method, paginate_key, **kwargs)
            else:
                data = getattr(client, method)(**kwargs)

            if attempt > 0:
                logger.info("dynamodb_retry_success", function=func_name, attempt=attempt + 1)
            return OperationResult.success(data=data)

        except ClientError as e:
            error_code = _error_code(e)
            if error_code in RETRY_ERRORS and attempt < max_retries:
                delay = _calculate_retry_delay(attempt)
                logger.warning(
                    "dynamodb_retrying",
                    function=func_name,
                    attempt=attempt + 1,
                    error_code=error_code,
                    delay=delay,
                )
                sleep(delay)
                continue

            logger.error(
                "dynamodb_call_failed",
                function=func_name,
                error=str(e),
                error_code=error_code,
            )
            if error_code in RETRY_ERRORS:
                return OperationResult.transient_error(str(e), error_code=error_code)
            return OperationResult.permanent_error(str(e), error_code=error_code)

        except BotoCoreError as e:
            logger.error("dynamodb_connection_failed", function=func_name, error=str(e))
            return OperationResult.transient_error(str(e), error_code="connection_error")

    return OperationResult.transient_error(f"{func_name} exhausted retries")
