import logging
from contextlib import contextmanager
from botocore.exceptions import BotoCoreError, ClientError
from Models.Errors import DuplicateError, InsufficientStockError, NotFoundError, UnexpectedError

logger = logging.getLogger(__name__)

CONDITION_FAILED = "ConditionalCheckFailedException"


class ConditionFailed(Exception):
    pass


@contextmanager
def translate_errors(action: str):
    try:
        yield
    except ClientError as e:
        if e.response.get("Error", {}).get("Code") == CONDITION_FAILED:
            raise ConditionFailed() from e
        raise UnexpectedError(action) from e
    except BotoCoreError as e:
        raise UnexpectedError(action) from e


class SweetStore:
    """Catalog store backed by one DynamoDB table keyed on ``sweet_id``."""

    def __init__(self, table):
        self.table = table

    def put_new(self, item: dict) -> dict:
        try:
            with translate_errors("creating sweet"):
                self.table.put_item(Item=item, ConditionExpression="attribute_not_exists(sweet_id)")
        except ConditionFailed:
            raise DuplicateError("id")
        return item

    def get(self, sweet_id: str) -> dict | None:
        with translate_errors("fetching sweet"):
            return self.table.get_item(Key={"sweet_id": sweet_id}).get("Item")

    def scan(self, filter_expression=None) -> list[dict]:
        scan_kwargs = {}
        if filter_expression is not None:
            scan_kwargs["FilterExpression"] = filter_expression
        items = []
        with translate_errors("fetching sweets"):
            while True:
                response = self.table.scan(**scan_kwargs)
                items.extend(response.get("Items", []))
                if "LastEvaluatedKey" not in response:
                    break
                scan_kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]
        return items

    def replace(self, item: dict) -> dict:
        try:
            with translate_errors("updating sweet"):
                self.table.put_item(Item=item, ConditionExpression="attribute_exists(sweet_id)")
        except ConditionFailed:
            raise NotFoundError(item["sweet_id"])
        return item

    def delete(self, sweet_id: str) -> dict:
        try:
            with translate_errors("deleting sweet"):
                return self.table.delete_item(
                    Key={"sweet_id": sweet_id},
                    ConditionExpression="attribute_exists(sweet_id)",
                    ReturnValues="ALL_OLD"
                ).get("Attributes")
        except ConditionFailed:
            raise NotFoundError(sweet_id)

    def adjust_quantity(self, sweet_id: str, delta: int, updated_at: str) -> dict:
        """Add ``delta`` to the stored quantity in a single conditional update.

        A decrement only applies while the stored quantity still covers it.
        """
        condition = "attribute_exists(sweet_id)"
        values = {":delta": delta, ":updated_at": updated_at}
        if delta < 0:
            condition += " AND #quantity >= :required"
            values[":required"] = -delta
        try:
            with translate_errors("updating stock"):
                return self.table.update_item(
                    Key={"sweet_id": sweet_id},
                    UpdateExpression="SET #quantity = #quantity + :delta, #updated_at = :updated_at",
                    ConditionExpression=condition,
                    ExpressionAttributeNames={"#quantity": "quantity", "#updated_at": "updated_at"},
                    ExpressionAttributeValues=values,
                    ReturnValues="ALL_NEW"
                ).get("Attributes")
        except ConditionFailed:
            logger.info("Stock update for sweet %s rejected by store condition (delta=%s)", sweet_id, delta)
            if delta < 0:
                raise InsufficientStockError()
            raise NotFoundError(sweet_id)
