"""DynamoDB repository for assistant interaction logs."""

from decimal import Decimal
from typing import Any, Dict, List, Optional

import boto3

from models.analysis import InteractionRecord

SECONDS_PER_DAY = 86400


class InteractionLogRepository:
    """Append and read chat interactions used by assistant analytics."""

    def __init__(self, table_name: str, ttl_days: Optional[int] = None):
        self.table = boto3.resource("dynamodb").Table(table_name)
        self.ttl_days = ttl_days

    def put(self, record: InteractionRecord) -> None:
        """Insert one interaction (expires after ``ttl_days`` when set)."""
        item: Dict[str, Any] = record.model_dump(mode="json", exclude_none=True)
        if record.score is not None:
            # DynamoDB rejects floats.
            item["score"] = Decimal(str(round(record.score, 4)))
        if self.ttl_days:
            item["ttl"] = int(record.timestamp.timestamp()) + self.ttl_days * SECONDS_PER_DAY
        self.table.put_item(Item=item)

    def scan_recent(self, limit: int = 500) -> List[InteractionRecord]:
        """
        The ``limit`` newest interactions, newest first.

        Scan order is arbitrary, so every page is read before sorting.
        """
        items: List[Dict[str, Any]] = []
        kwargs: Dict[str, Any] = {}
        while True:
            resp = self.table.scan(**kwargs)
            items.extend(resp.get("Items", []))
            if "LastEvaluatedKey" not in resp:
                break
            kwargs["ExclusiveStartKey"] = resp["LastEvaluatedKey"]

        records = [InteractionRecord.model_validate(_from_dynamo(item)) for item in items]
        records.sort(key=lambda record: record.timestamp, reverse=True)
        return records[:limit]


def _from_dynamo(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: float(value) if isinstance(value, Decimal) else value
        for key, value in item.items()
        if key != "ttl"
    }
