import os

# Region used for both the remote DynamoDB client and the CloudFormation/Lambda clients
DEFAULT_REGION = os.getenv("LOCAL_TOOLS_REGION", "us-east-1")

# DynamoDB Local / LocalStack endpoint
DEFAULT_LOCAL_ENDPOINT = os.getenv("LOCAL_TOOLS_LOCAL_ENDPOINT", "http://localhost:8000")

# Max items copied from the remote table. 0 copies everything.
DEFAULT_LIMIT = int(os.getenv("LOCAL_TOOLS_LIMIT", "500"))

# BatchWriteItem accepts at most 25 put/delete requests
BATCH_WRITE_MAX = 25

DEFAULT_AWS_PROFILE = os.getenv("AWS_PROFILE", "default")

NESTED_STACK_TYPE = "AWS::CloudFormation::Stack"
LAMBDA_FUNCTION_TYPE = "AWS::Lambda::Function"
