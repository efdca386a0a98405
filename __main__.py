"""Main Pulumi program for the S3 event pipeline."""

import os

import pulumi

from s3_event_pipeline import (
    BucketComponent,
    PolicyKind,
    create_lookup_table,
    load_settings,
)
from s3_event_pipeline.handlers import HELLO_THERE, S3_TO_DYNAMODB

settings = load_settings()

# Upload this program to each bucket once its notification is wired
PROGRAM_FILE = os.path.abspath(__file__)

# The DynamoDB-writing handler needs its own table; the other one does not
dynamodb_table = create_lookup_table(environment=settings.environment)

bucket = BucketComponent(
    "s3EventsToDynamoDb",
    policy_kind=PolicyKind.DYNAMODB,
    code=S3_TO_DYNAMODB,
    environment_variables={"table": dynamodb_table.name},
    seed_object=PROGRAM_FILE,
    settings=settings,
)

bucket2 = BucketComponent(
    "theOtherOne",
    policy_kind=PolicyKind.SAGEMAKER,
    code=HELLO_THERE,
    environment_variables={"foo": "bar"},
    seed_object=PROGRAM_FILE,
    settings=settings,
)

pulumi.export("bucketName", bucket.bucket.id)
pulumi.export("bucket2Name", bucket2.bucket.id)
pulumi.export("dynamoDbTableName", dynamodb_table.name)
