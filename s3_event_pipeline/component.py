"""Pulumi component wiring an S3 bucket to a Lambda function on object
creation."""

import os
from typing import Callable, Dict, Mapping, Optional, Union

import pulumi
import pulumi_aws as aws
from pulumi import ComponentResource, Output, ResourceOptions

from s3_event_pipeline.constants import (
    COMPONENT_TYPE,
    HANDLER_ENTRYPOINT,
    HANDLER_FILE_NAME,
    OBJECT_CREATED_EVENTS,
    S3_SERVICE_PRINCIPAL,
    PolicyKind,
)
from s3_event_pipeline.errors import InvalidComponentNameError
from s3_event_pipeline.graph import DeclarationGraph
from s3_event_pipeline.policies import (
    lambda_assume_role_policy,
    policy_json,
    to_policy_kind,
)
from s3_event_pipeline.settings import PipelineSettings, load_settings

BUCKET = "S3Bucket"
ROLE = "LambdaIamRole"
ROLE_POLICY = "LambdaIamPolicy"
FUNCTION = "LambdaFunction"
INVOKE_PERMISSION = "LambdaFunctionResourcePolicy"
NOTIFICATION = "S3BucketNotification"
SEED_OBJECT = "S3BucketObject"

CodeSource = Union[str, "os.PathLike[str]", pulumi.Asset]


def plan_component(name: str) -> DeclarationGraph:
    """Declare the seven children of a bucket component and their edges.

    The invoke permission has to exist before S3 will accept a notification
    targeting the function, and the seed object is only uploaded once the
    notification is in place so that its write triggers the function.
    """
    graph = DeclarationGraph(name)
    graph.add(BUCKET, "aws:s3/bucket:Bucket")
    graph.add(ROLE, "aws:iam/role:Role")
    graph.add(ROLE_POLICY, "aws:iam/rolePolicy:RolePolicy", references=[ROLE])
    graph.add(FUNCTION, "aws:lambda/function:Function", references=[ROLE])
    graph.add(
        INVOKE_PERMISSION,
        "aws:lambda/permission:Permission",
        references=[FUNCTION, BUCKET],
    )
    graph.add(
        NOTIFICATION,
        "aws:s3/bucketNotification:BucketNotification",
        references=[BUCKET, FUNCTION],
        depends_on=[INVOKE_PERMISSION],
    )
    graph.add(
        SEED_OBJECT,
        "aws:s3/bucketObject:BucketObject",
        references=[BUCKET],
        depends_on=[NOTIFICATION],
    )
    return graph


def _validate_name(name: object) -> str:
    if not isinstance(name, str):
        raise InvalidComponentNameError(
            f"expected a string, got {type(name).__name__}"
        )
    if not name.strip():
        raise InvalidComponentNameError("must not be empty")
    if name != name.strip():
        raise InvalidComponentNameError(
            f"{name!r} has leading or trailing whitespace"
        )
    return name


class BucketComponent(ComponentResource):
    """S3 bucket whose object-created events invoke a Lambda function.

    Every child resource is parented to the component, so destroying the
    component destroys the whole bundle.
    """

    bucket: aws.s3.Bucket
    iam_role: aws.iam.Role
    iam_policy: aws.iam.RolePolicy
    lambda_function: aws.lambda_.Function
    allow_bucket: aws.lambda_.Permission
    bucket_notification: aws.s3.BucketNotification
    s3_object: aws.s3.BucketObject

    def __init__(
        self,
        name: str,
        policy_kind: Union[PolicyKind, str],
        code: CodeSource,
        environment_variables: Optional[Mapping[str, pulumi.Input[str]]] = None,
        seed_object: Optional[str] = None,
        settings: Optional[PipelineSettings] = None,
        tags: Optional[Dict[str, str]] = None,
        opts: Optional[ResourceOptions] = None,
    ):
        """
        Create the bucket, role, policy, function, permission, notification
        and seed object for one event pipeline.

        Args:
            name: Unique name; every child is named ``{name}-<Child>``
            policy_kind: Capability granted to the function's role
            code: Path to the handler module, or an asset holding it. It is
                shipped as ``lambda_function.py`` without being inspected.
            environment_variables: Passed to the function as-is
            seed_object: File uploaded once the notification is wired.
                Defaults to the Pulumi program's ``__main__.py``.
            settings: Lambda settings; read from stack config when omitted
            tags: Additional tags for taggable children
            opts: Pulumi resource options

        Raises:
            InvalidComponentNameError: If ``name`` is empty or not a string.
            InvalidPolicyKindError: If ``policy_kind`` is not a PolicyKind.
        """
        # Reject bad arguments before anything reaches the engine
        name = _validate_name(name)
        self.policy_kind = to_policy_kind(policy_kind)

        super().__init__(COMPONENT_TYPE, name, None, opts)

        self.settings = settings or load_settings()
        self.code = code
        self.environment_variables = dict(environment_variables or {})
        self.seed_object_path = seed_object or "__main__.py"
        self.tags = {
            "Component": name,
            "Environment": self.settings.environment,
            "ManagedBy": "Pulumi",
        }
        self.tags.update(tags or {})

        self.graph = plan_component(name)
        self.children: Dict[str, pulumi.Resource] = {}

        builders: Dict[str, Callable[[str, ResourceOptions], pulumi.Resource]] = {
            BUCKET: self._declare_bucket,
            ROLE: self._declare_role,
            ROLE_POLICY: self._declare_role_policy,
            FUNCTION: self._declare_function,
            INVOKE_PERMISSION: self._declare_invoke_permission,
            NOTIFICATION: self._declare_notification,
            SEED_OBJECT: self._declare_seed_object,
        }
        for declaration in self.graph.realization_order():
            resource_name = f"{name}-{declaration.name}"
            child_opts = ResourceOptions(
                parent=self,
                depends_on=[
                    self.children[d] for d in declaration.depends_on
                ],
            )
            self.children[declaration.name] = builders[declaration.name](
                resource_name, child_opts
            )
            pulumi.log.info(
                f"Declared {declaration.resource_type} {resource_name}",
                resource=self,
            )

        self.bucket = self.children[BUCKET]
        self.iam_role = self.children[ROLE]
        self.iam_policy = self.children[ROLE_POLICY]
        self.lambda_function = self.children[FUNCTION]
        self.allow_bucket = self.children[INVOKE_PERMISSION]
        self.bucket_notification = self.children[NOTIFICATION]
        self.s3_object = self.children[SEED_OBJECT]

        self.outputs: Dict[str, Output] = {
            "bucketName": self.bucket.id,
            "iamPolicy": self.iam_policy.id,
            "iamRole": self.iam_role.id,
            "allowBucket": self.allow_bucket.source_arn,
            "bucketNotification": self.bucket_notification.id,
            "lambdaFunction": self.lambda_function.id,
            "s3Object": self.s3_object.key,
        }
        self.register_outputs(self.outputs)

    def _declare_bucket(
        self, resource_name: str, opts: ResourceOptions
    ) -> aws.s3.Bucket:
        return aws.s3.Bucket(resource_name, tags=self.tags, opts=opts)

    def _declare_role(
        self, resource_name: str, opts: ResourceOptions
    ) -> aws.iam.Role:
        return aws.iam.Role(
            resource_name,
            assume_role_policy=lambda_assume_role_policy(),
            tags=self.tags,
            opts=opts,
        )

    def _declare_role_policy(
        self, resource_name: str, opts: ResourceOptions
    ) -> aws.iam.RolePolicy:
        return aws.iam.RolePolicy(
            resource_name,
            role=self.children[ROLE].id,
            policy=policy_json(self.policy_kind),
            opts=opts,
        )

    def _declare_function(
        self, resource_name: str, opts: ResourceOptions
    ) -> aws.lambda_.Function:
        source = (
            self.code
            if isinstance(self.code, pulumi.Asset)
            else pulumi.FileAsset(os.fspath(self.code))
        )
        return aws.lambda_.Function(
            resource_name,
            role=self.children[ROLE].arn,
            handler=HANDLER_ENTRYPOINT,
            runtime=self.settings.lambda_runtime,
            architectures=[self.settings.lambda_architecture],
            memory_size=self.settings.lambda_memory_size,
            timeout=self.settings.lambda_timeout,
            environment=aws.lambda_.FunctionEnvironmentArgs(
                variables=self.environment_variables,
            ),
            code=pulumi.AssetArchive({HANDLER_FILE_NAME: source}),
            tags=self.tags,
            opts=opts,
        )

    def _declare_invoke_permission(
        self, resource_name: str, opts: ResourceOptions
    ) -> aws.lambda_.Permission:
        return aws.lambda_.Permission(
            resource_name,
            action="lambda:InvokeFunction",
            function=self.children[FUNCTION].arn,
            principal=S3_SERVICE_PRINCIPAL,
            source_arn=self.children[BUCKET].arn,
            opts=opts,
        )

    def _declare_notification(
        self, resource_name: str, opts: ResourceOptions
    ) -> aws.s3.BucketNotification:
        return aws.s3.BucketNotification(
            resource_name,
            bucket=self.children[BUCKET].id,
            lambda_functions=[
                aws.s3.BucketNotificationLambdaFunctionArgs(
                    lambda_function_arn=self.children[FUNCTION].arn,
                    events=OBJECT_CREATED_EVENTS,
                )
            ],
            opts=opts,
        )

    def _declare_seed_object(
        self, resource_name: str, opts: ResourceOptions
    ) -> aws.s3.BucketObject:
        return aws.s3.BucketObject(
            resource_name,
            key=os.path.basename(self.seed_object_path),
            bucket=self.children[BUCKET].id,
            source=pulumi.FileAsset(self.seed_object_path),
            opts=opts,
        )
