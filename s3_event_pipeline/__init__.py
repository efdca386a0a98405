"""Reusable Pulumi component for S3-triggered Lambda pipelines."""

from s3_event_pipeline.component import BucketComponent, plan_component
from s3_event_pipeline.constants import PolicyKind
from s3_event_pipeline.errors import (
    BucketComponentError,
    ConfigurationError,
    DeclarationGraphError,
    DependencyCycleError,
    DuplicateDeclarationError,
    InvalidComponentNameError,
    InvalidPolicyKindError,
    UnknownDependencyError,
)
from s3_event_pipeline.graph import Declaration, DeclarationGraph
from s3_event_pipeline.lookup_table import create_lookup_table
from s3_event_pipeline.policies import resolve_policy
from s3_event_pipeline.settings import PipelineSettings, load_settings

__all__ = [
    "BucketComponent",
    "BucketComponentError",
    "ConfigurationError",
    "Declaration",
    "DeclarationGraph",
    "DeclarationGraphError",
    "DependencyCycleError",
    "DuplicateDeclarationError",
    "InvalidComponentNameError",
    "InvalidPolicyKindError",
    "PipelineSettings",
    "PolicyKind",
    "UnknownDependencyError",
    "create_lookup_table",
    "load_settings",
    "plan_component",
    "resolve_policy",
]
