"""pytest configuration and fixtures for the S3 event pipeline."""

import os
from typing import Any, Dict, List
from unittest.mock import MagicMock

import pulumi
import pytest


class PipelineMocks(pulumi.runtime.Mocks):
    """Pulumi mocks recording every resource the program registers.

    MockResourceArgs carries no dependency list, so explicit depends_on
    edges are checked by spying on the resource constructors instead.
    """

    def __init__(self):
        self.resources: List[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs: Dict[str, Any] = dict(args.inputs)
        outputs.setdefault(
            "arn", f"arn:aws:mock:us-east-1:123456789012:{args.name}"
        )
        if args.typ == "aws:dynamodb/table:Table":
            outputs.setdefault("name", f"{args.name}-table")
        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}

    def named(self, prefix: str) -> List[pulumi.runtime.MockResourceArgs]:
        return [r for r in self.resources if r.name.startswith(prefix)]


MOCKS = PipelineMocks()

# Must be installed before any resource is constructed
pulumi.runtime.set_mocks(MOCKS, preview=False)


@pytest.fixture
def pulumi_mocks() -> PipelineMocks:
    """The installed Pulumi mocks, emptied for each test."""
    MOCKS.resources.clear()
    return MOCKS


# --- Environment Setup ---
@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


# --- Sample Data Fixtures ---
@pytest.fixture
def s3_event():
    """Build an S3 object-created notification event."""

    def _build(
        key: str = "foo.txt",
        request_id: str = "req-1",
        event_time: str = "2024-01-01T00:00:00Z",
    ) -> Dict[str, Any]:
        return {
            "Records": [
                {
                    "eventVersion": "2.1",
                    "eventSource": "aws:s3",
                    "awsRegion": "us-east-1",
                    "eventTime": event_time,
                    "eventName": "ObjectCreated:Put",
                    "responseElements": {
                        "x-amz-request-id": request_id,
                        "x-amz-id-2": "EXAMPLE123/abcdefghijklmno",
                    },
                    "s3": {
                        "s3SchemaVersion": "1.0",
                        "bucket": {
                            "name": "alpha-s3bucket",
                            "arn": "arn:aws:s3:::alpha-s3bucket",
                        },
                        "object": {
                            "key": key,
                            "size": 1024,
                            "eTag": "0123456789abcdef0123456789abcdef",
                        },
                    },
                }
            ]
        }

    return _build


# --- Lambda Context Mock ---
@pytest.fixture
def lambda_context():
    """Create a mock Lambda context."""
    context = MagicMock()
    context.function_name = "test-function"
    context.function_version = "$LATEST"
    context.invoked_function_arn = (
        "arn:aws:lambda:us-east-1:123456789012:function:test-function"
    )
    context.memory_limit_in_mb = "128"
    context.aws_request_id = "test-request-id"
    context.log_group_name = "/aws/lambda/test-function"
    context.get_remaining_time_in_millis = lambda: 30000
    return context


@pytest.fixture
def repo_root() -> str:
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
