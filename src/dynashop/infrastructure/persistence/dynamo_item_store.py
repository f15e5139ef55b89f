"""DynamoDB implementation of ItemStore.

Uses the boto3 resource API. Table handles are created once, when the
store is built, from the configured table names.

Transient faults (throttling, timeouts, dropped connections) are retried
by botocore according to the client ``Config`` built in ``from_settings``;
whatever still fails is translated into the storage exception hierarchy.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import boto3
import structlog
from boto3.dynamodb.conditions import Attr, Key
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from dynashop.domain.exceptions import (
    ConditionCheckFailedError,
    StorageError,
    StorageUnavailableError,
)
from dynashop.infrastructure.config import Settings, TableConfig
from dynashop.infrastructure.persistence.item_store import Item, ItemStore

logger = structlog.get_logger(__name__)

TRANSIENT_ERROR_CODES = frozenset(
    {
        "ProvisionedThroughputExceededException",
        "ThrottlingException",
        "RequestLimitExceeded",
        "InternalServerError",
        "ServiceUnavailable",
    }
)

_CONNECTION_ERRORS = (
    EndpointConnectionError,
    ConnectTimeoutError,
    ReadTimeoutError,
    ConnectionClosedError,
)


class DynamoItemStore(ItemStore):

    def __init__(self, resource: Any, tables: TableConfig) -> None:
        self._tables = {name: resource.Table(name) for name in tables.all_tables}

    @classmethod
    def from_settings(cls, settings: Settings) -> DynamoItemStore:
        client_config = Config(
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            retries={"max_attempts": settings.max_store_attempts, "mode": "standard"},
        )
        resource = boto3.resource(
            "dynamodb",
            region_name=settings.region,
            endpoint_url=settings.endpoint_url or None,
            aws_access_key_id=settings.access_key_id or None,
            aws_secret_access_key=settings.secret_access_key or None,
            config=client_config,
        )
        logger.info(
            "DynamoDB store initialised",
            region=settings.region,
            endpoint_url=settings.endpoint_url,
        )
        return cls(resource, settings.table_config())

    # --- ItemStore interface --------------------------------------------------

    def get(self, table: str, key: Item) -> Item | None:
        with _translate_errors("get", table):
            response = self._table(table).get_item(Key=key)
        return response.get("Item")

    def put(self, table: str, item: Item) -> None:
        with _translate_errors("put", table):
            self._table(table).put_item(Item=item)

    def delete(self, table: str, key: Item) -> None:
        with _translate_errors("delete", table):
            self._table(table).delete_item(Key=key)

    def scan(self, table: str) -> list[Item]:
        return self._collect_pages("scan", table, self._table(table).scan)

    def query(self, table: str, index: str, key: Item) -> list[Item]:
        if len(key) != 1:
            raise ValueError("query expects exactly one index key attribute")
        ((name, value),) = key.items()
        return self._collect_pages(
            "query",
            table,
            self._table(table).query,
            IndexName=index,
            KeyConditionExpression=Key(name).eq(value),
        )

    def update_if(
        self,
        table: str,
        key: Item,
        changes: Item,
        expected: Item,
    ) -> Item:
        if not changes:
            raise ValueError("update_if needs at least one attribute to change")

        # Explicit placeholders: several attribute names (status, name) are
        # reserved words in DynamoDB expressions.
        names: dict[str, str] = {}
        values: dict[str, Any] = {}
        assignments: list[str] = []
        for i, (attr, value) in enumerate(changes.items()):
            names[f"#c{i}"] = attr
            values[f":c{i}"] = value
            assignments.append(f"#c{i} = :c{i}")

        condition = None
        for attr in key:
            clause = Attr(attr).exists()
            condition = clause if condition is None else condition & clause
        for attr, value in expected.items():
            condition = condition & Attr(attr).eq(value)

        with _translate_errors("update_if", table):
            response = self._table(table).update_item(
                Key=key,
                UpdateExpression="SET " + ", ".join(assignments),
                ConditionExpression=condition,
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues="ALL_NEW",
            )
        return response["Attributes"]

    # --- Helpers --------------------------------------------------------------

    def _table(self, name: str) -> Any:
        try:
            return self._tables[name]
        except KeyError:
            raise StorageError(f"Table '{name}' is not configured") from None

    @staticmethod
    def _collect_pages(operation: str, table: str, call: Any, **kwargs: Any) -> list[Item]:
        items: list[Item] = []
        pages = 0
        with _translate_errors(operation, table):
            while True:
                response = call(**kwargs)
                pages += 1
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        logger.debug(
            "Collected result pages",
            operation=operation,
            table=table,
            pages=pages,
            items=len(items),
        )
        return items


@contextmanager
def _translate_errors(operation: str, table: str) -> Iterator[None]:
    try:
        yield
    except ClientError as exc:
        code = exc.response.get("Error", {}).get("Code", "")
        if code == "ConditionalCheckFailedException":
            raise ConditionCheckFailedError(
                f"Condition failed on {operation} in '{table}'"
            ) from exc
        if code in TRANSIENT_ERROR_CODES:
            logger.warning("Store temporarily unavailable", operation=operation, table=table, code=code)
            raise StorageUnavailableError(
                f"Store unavailable during {operation} on '{table}': {code}"
            ) from exc
        logger.error("Store call failed", operation=operation, table=table, code=code)
        raise StorageError(f"Store error during {operation} on '{table}': {code}") from exc
    except _CONNECTION_ERRORS as exc:
        logger.warning("Store unreachable", operation=operation, table=table, error=str(exc))
        raise StorageUnavailableError(
            f"Store unreachable during {operation} on '{table}'"
        ) from exc
    except BotoCoreError as exc:
        logger.error("Store client error", operation=operation, table=table, error=str(exc))
        raise StorageError(f"Store client error during {operation} on '{table}'") from exc
