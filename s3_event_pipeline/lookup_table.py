"""DynamoDB table indexing S3 object-created events by request id."""

from typing import Optional

import pulumi
import pulumi_aws as aws

REQUEST_ID_ATTRIBUTE = "x-amz-request-id"
KEY_ATTRIBUTE = "key"
EVENT_TIME_ATTRIBUTE = "eventTime"
KEY_EVENT_TIME_INDEX = "key-eventTime-index"


def create_lookup_table(
    name: str = "s3EventsToDynamoDb-DynamoDBTable",
    environment: str = "dev",
    opts: Optional[pulumi.ResourceOptions] = None,
) -> aws.dynamodb.Table:
    """Declare the table the DynamoDB-writing handler stores events in.

    Items are keyed by the S3 request id. The ``key-eventTime-index`` GSI
    answers "when was this object written" queries and carries the request
    id so a lookup never needs to go back to the base table.
    """
    return aws.dynamodb.Table(
        name,
        attributes=[
            aws.dynamodb.TableAttributeArgs(
                name=REQUEST_ID_ATTRIBUTE,
                type="S",
            ),
            aws.dynamodb.TableAttributeArgs(
                name=KEY_ATTRIBUTE,
                type="S",
            ),
            aws.dynamodb.TableAttributeArgs(
                name=EVENT_TIME_ATTRIBUTE,
                type="S",
            ),
        ],
        hash_key=REQUEST_ID_ATTRIBUTE,
        billing_mode="PAY_PER_REQUEST",
        global_secondary_indexes=[
            aws.dynamodb.TableGlobalSecondaryIndexArgs(
                name=KEY_EVENT_TIME_INDEX,
                hash_key=KEY_ATTRIBUTE,
                range_key=EVENT_TIME_ATTRIBUTE,
                projection_type="INCLUDE",
                non_key_attributes=[REQUEST_ID_ATTRIBUTE],
            ),
        ],
        tags={
            "Pulumi_Stack": pulumi.get_stack(),
            "Environment": environment,
            "Name": "obj-index-table",
        },
        opts=opts,
    )
