# dynamo_local_import.py
from __future__ import annotations
import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

from local_tools.default_config import BATCH_WRITE_MAX
from local_tools.errors import RemoteTableNotFoundError

logger = logging.getLogger(__name__)

# DescribeTable fields that CreateTable accepts unchanged
_INDEX_FIELDS = ("IndexName", "KeySchema", "Projection")


def chunk_items(items: Sequence[Any], stride: int = 1) -> Iterator[Sequence[Any]]:
    """Yield contiguous slices of `items`, each `stride` long except possibly the last."""
    if stride < 1:
        raise ValueError("stride must be >= 1")
    for i in range(0, len(items), stride):
        yield items[i:i + stride]


def get_table_description(client, table_name: str) -> Optional[Dict[str, Any]]:
    """Return the table descriptor, or None when the table does not exist."""
    try:
        return client.describe_table(TableName=table_name)["Table"]
    except client.exceptions.ResourceNotFoundException:
        return None


def _throughput(source: Optional[Dict[str, Any]]) -> Dict[str, int]:
    source = source or {}
    return {
        "ReadCapacityUnits": source.get("ReadCapacityUnits") or 1,
        "WriteCapacityUnits": source.get("WriteCapacityUnits") or 1,
    }


def build_create_table_request(description: Dict[str, Any]) -> Dict[str, Any]:
    """
    Turn a DescribeTable `Table` object into CreateTable parameters.

    Key schema, attribute definitions and index definitions are copied as-is.
    Status, counters, ARNs and timestamps are dropped since CreateTable rejects them.
    """
    billing_mode = description.get("BillingModeSummary", {}).get("BillingMode", "PROVISIONED")
    provisioned = billing_mode == "PROVISIONED"

    params: Dict[str, Any] = {
        "TableName": description["TableName"],
        "KeySchema": description["KeySchema"],
        "AttributeDefinitions": description["AttributeDefinitions"],
        "BillingMode": billing_mode,
    }
    if provisioned:
        params["ProvisionedThroughput"] = _throughput(description.get("ProvisionedThroughput"))

    if description.get("LocalSecondaryIndexes"):
        params["LocalSecondaryIndexes"] = [
            {k: lsi[k] for k in _INDEX_FIELDS if k in lsi}
            for lsi in description["LocalSecondaryIndexes"]
        ]

    if description.get("GlobalSecondaryIndexes"):
        gsis = []
        for gsi in description["GlobalSecondaryIndexes"]:
            index = {k: gsi[k] for k in _INDEX_FIELDS if k in gsi}
            if provisioned:
                index["ProvisionedThroughput"] = _throughput(gsi.get("ProvisionedThroughput"))
            gsis.append(index)
        params["GlobalSecondaryIndexes"] = gsis

    if description.get("StreamSpecification"):
        params["StreamSpecification"] = description["StreamSpecification"]

    return params


def import_items(client, table_name: str, items: List[Dict[str, Any]], limit: int = 0) -> int:
    """
    Write `items` to `table_name` with one BatchWriteItem call per chunk of <= 25 items.

    Stops after the chunk that makes the running count reach `limit` (0 = no limit).
    Chunks are written whole, so up to 24 items past `limit` can be written.
    Returns the number of items written.
    """
    stride = BATCH_WRITE_MAX if limit <= 0 else min(limit, BATCH_WRITE_MAX)
    written = 0

    for chunk in chunk_items(items, stride):
        put_requests = [{"PutRequest": {"Item": item}} for item in chunk]
        resp = client.batch_write_item(RequestItems={table_name: put_requests})
        unprocessed = resp.get("UnprocessedItems", {}).get(table_name, [])
        if unprocessed:
            logger.warning(f"{len(unprocessed)} items were not processed by the local table '{table_name}'")
        written += len(chunk)
        logger.debug(f"[import] Wrote {written} items...")

        if limit > 0 and written >= limit:
            break

    return written


class DynamoLocalImporter:
    """
    Copy a remote DynamoDB table (schema + a bounded sample of items) into a local DynamoDB.

    - The remote table must exist; the local one is created from the remote schema if absent.
    - Items are read with a single Scan unless `all_pages` is set.
    - Items stay in DynamoDB JSON (AttributeValue) form end to end, so no type conversion happens.
    """

    def __init__(self, remote_client, local_client, table_name: str, limit: int = 500,
                 all_pages: bool = False):
        self._remote = remote_client
        self._local = local_client
        self.table_name = table_name
        self.limit = limit
        self.all_pages = all_pages

    # -------------------------
    # Helpers
    # -------------------------
    def _ensure_local_table(self, remote_description: Dict[str, Any]) -> bool:
        """Create the local table from the remote schema. Returns True if it was created."""
        if get_table_description(self._local, self.table_name) is not None:
            logger.info(f"Table '{self.table_name}' already exists locally. Skipping creation.")
            return False

        logger.info(f"Creating local table: {self.table_name}...")
        self._local.create_table(**build_create_table_request(remote_description))
        return True

    def _scan_remote(self) -> List[Dict[str, Any]]:
        if not self.all_pages:
            return self._remote.scan(TableName=self.table_name).get("Items", [])

        items: List[Dict[str, Any]] = []
        kwargs: Dict[str, Any] = {"TableName": self.table_name}
        while True:
            resp = self._remote.scan(**kwargs)
            items.extend(resp.get("Items", []))
            if self.limit and len(items) >= self.limit:
                return items

            last_evaluated_key = resp.get("LastEvaluatedKey")
            if not last_evaluated_key:
                return items
            kwargs["ExclusiveStartKey"] = last_evaluated_key

    # -------------------------
    # Public
    # -------------------------
    def export_and_import(self) -> int:
        """Run describe -> create-if-absent -> scan -> batch write. Returns items written."""
        logger.info("Exporting and importing DynamoDB table from remote DynamoDB to local DynamoDB...")

        remote_description = get_table_description(self._remote, self.table_name)
        if remote_description is None:
            raise RemoteTableNotFoundError(self.table_name)

        self._ensure_local_table(remote_description)

        items = self._scan_remote()
        if not items:
            logger.info(f"Table {self.table_name} is empty, no data to export and import to local DynamoDB")
            return 0

        written = import_items(self._local, self.table_name, items, limit=self.limit)
        logger.info(
            f'Table "{self.table_name}" exported from remote DynamoDB and imported to local DynamoDB '
            f"successfully! ({written} items)"
        )
        return written
