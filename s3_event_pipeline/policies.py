"""IAM policy documents for bucket component Lambda roles.

Every role gets one capability statement, picked by ``PolicyKind``, followed
by the CloudWatch Logs statements every Lambda needs to be diagnosable.
"""

import copy
import json
from types import MappingProxyType
from typing import Any, Dict, List, Union

from s3_event_pipeline.constants import (
    LAMBDA_SERVICE_PRINCIPAL,
    POLICY_VERSION,
    PolicyKind,
)
from s3_event_pipeline.errors import InvalidPolicyKindError

POLICY_STATEMENTS = MappingProxyType(
    {
        PolicyKind.DYNAMODB: {
            "Sid": "dynamodbTable",
            "Effect": "Allow",
            "Resource": "*",
            "Action": [
                "dynamodb:BatchGet*",
                "dynamodb:DescribeStream",
                "dynamodb:DescribeTable",
                "dynamodb:Get*",
                "dynamodb:Query",
                "dynamodb:Scan",
                "dynamodb:BatchWrite*",
                "dynamodb:CreateTable",
                "dynamodb:Delete*",
                "dynamodb:Update*",
                "dynamodb:PutItem",
            ],
        },
        PolicyKind.SAGEMAKER: {
            "Sid": "sagemakerRuntime",
            "Effect": "Allow",
            "Resource": "*",
            "Action": [
                "sagemaker:CreateDataQualityJobDefinition",
            ],
        },
    }
)

LOGGING_STATEMENTS = (
    {
        "Effect": "Allow",
        "Action": "logs:CreateLogGroup",
        "Resource": "arn:aws:logs:*:*:*",
    },
    {
        "Effect": "Allow",
        "Action": [
            "logs:CreateLogStream",
            "logs:PutLogEvents",
        ],
        "Resource": [
            "arn:aws:logs:*:*:log-group:/aws/lambda/*:*",
        ],
    },
)


def to_policy_kind(value: Union[PolicyKind, str]) -> PolicyKind:
    """Coerce ``value`` to a PolicyKind, failing with the field name."""
    if isinstance(value, PolicyKind):
        return value
    try:
        return PolicyKind(value)
    except ValueError as e:
        allowed = ", ".join(kind.value for kind in PolicyKind)
        raise InvalidPolicyKindError(
            f"{value!r} is not one of: {allowed}"
        ) from e


def resolve_policy(policy_kind: Union[PolicyKind, str]) -> Dict[str, Any]:
    """Build the role policy document for ``policy_kind``.

    Args:
        policy_kind: The capability to grant, as a PolicyKind or its value.

    Returns:
        A new policy document: the capability statement first, then the two
        logging statements.

    Raises:
        InvalidPolicyKindError: If ``policy_kind`` is not a PolicyKind.
    """
    kind = to_policy_kind(policy_kind)
    statements: List[Dict[str, Any]] = [copy.deepcopy(POLICY_STATEMENTS[kind])]
    statements.extend(copy.deepcopy(s) for s in LOGGING_STATEMENTS)
    return {
        "Version": POLICY_VERSION,
        "Statement": statements,
    }


def policy_json(policy_kind: Union[PolicyKind, str]) -> str:
    """Serialized form of ``resolve_policy`` for ``aws.iam.RolePolicy``."""
    return json.dumps(resolve_policy(policy_kind))


def lambda_assume_role_policy() -> str:
    """Trust policy letting the Lambda service assume a role."""
    return json.dumps(
        {
            "Version": POLICY_VERSION,
            "Statement": [
                {
                    "Action": "sts:AssumeRole",
                    "Principal": {
                        "Service": LAMBDA_SERVICE_PRINCIPAL,
                    },
                    "Effect": "Allow",
                    "Sid": "",
                }
            ],
        }
    )
