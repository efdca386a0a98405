"""
This module defines the closed set of IAM policy kinds a bucket component can
be granted, together with the fixed AWS identifiers the component wires up.
"""

from enum import Enum


class PolicyKind(str, Enum):
    """Capability attached to a component's Lambda execution role."""

    DYNAMODB = "dynamodb"  # Read/write access to DynamoDB tables
    SAGEMAKER = "sagemaker"  # Data quality job definitions only


POLICY_VERSION = "2012-10-17"

LAMBDA_SERVICE_PRINCIPAL = "lambda.amazonaws.com"
S3_SERVICE_PRINCIPAL = "s3.amazonaws.com"

OBJECT_CREATED_EVENTS = ["s3:ObjectCreated:*"]

# The handler module is always shipped under this file name
HANDLER_FILE_NAME = "lambda_function.py"
HANDLER_ENTRYPOINT = "lambda_function.lambda_handler"

COMPONENT_TYPE = "pkg:index:BucketComponent"
