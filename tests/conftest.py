import pytest
from botocore.exceptions import ClientError


class ResourceNotFoundException(ClientError):
    pass


def client_error(code, operation="DescribeTable", cls=ClientError):
    return cls({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


class FakeDynamoClient:
    """In-memory stand-in for a boto3 DynamoDB client."""

    class exceptions:
        ResourceNotFoundException = ResourceNotFoundException

    def __init__(self, table=None, pages=None, describe_error=None):
        self.table = table
        self.pages = list(pages or [])
        self.describe_error = describe_error
        self.create_calls = []
        self.scan_calls = []
        self.batch_calls = []

    def describe_table(self, **kwargs):
        if self.describe_error is not None:
            raise self.describe_error
        if self.table is None:
            raise client_error("ResourceNotFoundException", cls=ResourceNotFoundException)
        return {"Table": self.table}

    def create_table(self, **kwargs):
        self.create_calls.append(kwargs)
        self.table = dict(kwargs, TableStatus="ACTIVE")
        return {"TableDescription": self.table}

    def scan(self, **kwargs):
        self.scan_calls.append(kwargs)
        if not self.pages:
            return {"Items": [], "Count": 0}
        return self.pages.pop(0)

    def batch_write_item(self, **kwargs):
        self.batch_calls.append(kwargs)
        return {"UnprocessedItems": {}}


def make_items(n):
    return [{"pk": {"S": f"item-{i}"}, "n": {"N": str(i)}} for i in range(n)]


@pytest.fixture
def remote_table():
    return {
        "TableName": "orders",
        "TableStatus": "ACTIVE",
        "TableArn": "arn:aws:dynamodb:us-east-1:123456789012:table/orders",
        "ItemCount": 3,
        "TableSizeBytes": 120,
        "CreationDateTime": "2024-01-01T00:00:00Z",
        "KeySchema": [
            {"AttributeName": "pk", "KeyType": "HASH"},
            {"AttributeName": "sk", "KeyType": "RANGE"},
        ],
        "AttributeDefinitions": [
            {"AttributeName": "pk", "AttributeType": "S"},
            {"AttributeName": "sk", "AttributeType": "S"},
            {"AttributeName": "status", "AttributeType": "S"},
        ],
        "BillingModeSummary": {"BillingMode": "PAY_PER_REQUEST"},
        "ProvisionedThroughput": {
            "NumberOfDecreasesToday": 0,
            "ReadCapacityUnits": 0,
            "WriteCapacityUnits": 0,
        },
        "GlobalSecondaryIndexes": [
            {
                "IndexName": "by-status",
                "KeySchema": [{"AttributeName": "status", "KeyType": "HASH"}],
                "Projection": {"ProjectionType": "ALL"},
                "IndexStatus": "ACTIVE",
                "IndexArn": "arn:aws:dynamodb:us-east-1:123456789012:table/orders/index/by-status",
                "ItemCount": 3,
                "ProvisionedThroughput": {
                    "NumberOfDecreasesToday": 0,
                    "ReadCapacityUnits": 0,
                    "WriteCapacityUnits": 0,
                },
            }
        ],
    }
