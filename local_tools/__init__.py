"""Local development helpers for AWS: mirror DynamoDB tables locally and pull Lambda env vars."""

__version__ = "0.1.0"
