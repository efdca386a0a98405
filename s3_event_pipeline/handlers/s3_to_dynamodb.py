"""Lambda handler recording S3 object-created events in DynamoDB.

Triggered by the bucket notification of a bucket component. The first
record's request id, object key and event time are written as one item to
the table named by the ``table`` environment variable.

The write is unconditional: a redelivered event overwrites the item stored
under the same request id.
"""

import logging
import os
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
logger = logging.getLogger(__name__)
logger.setLevel(getattr(logging, log_level, logging.INFO))

TABLE_ENV_VAR = "table"


def lambda_handler(event: dict[str, Any], _context: Any) -> dict[str, Any]:
    """Store the S3 event in DynamoDB.

    Args:
        event: S3 notification event containing a Records list.
        _context: Lambda context object.

    Returns:
        The DynamoDB PutItem response.

    Raises:
        KeyError: If the event is malformed or ``table`` is not set.
        ClientError: If DynamoDB rejects the write.
    """
    record = event["Records"][0]
    request_id = record["responseElements"]["x-amz-request-id"]
    key = record["s3"]["object"]["key"]
    event_time = record["eventTime"]

    table = os.environ.get(TABLE_ENV_VAR)
    if not table:
        logger.error(
            "Environment variable %r is not set; cannot store S3 request id "
            "%s with key %s at %s",
            TABLE_ENV_VAR,
            request_id,
            key,
            event_time,
        )
        raise KeyError(TABLE_ENV_VAR)

    dynamodb = boto3.client("dynamodb")
    try:
        response = dynamodb.put_item(
            TableName=table,
            Item={
                "x-amz-request-id": {"S": request_id},
                "key": {"S": key},
                "eventTime": {"S": event_time},
            },
        )
    except (BotoCoreError, ClientError) as e:
        logger.error(
            "Error putting S3 request id %s with key %s at %s into DynamoDB "
            "table %s. It may have been sent twice. Make sure this item "
            "exists in your table: %s",
            request_id,
            key,
            event_time,
            table,
            e,
        )
        raise

    logger.info(
        "Stored S3 request id %s with key %s at %s in %s",
        request_id,
        key,
        event_time,
        table,
    )
    return response
