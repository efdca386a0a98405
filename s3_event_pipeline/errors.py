"""Custom exceptions for the S3 event pipeline component."""


class BucketComponentError(Exception):
    """Base exception for all s3_event_pipeline errors."""


# Configuration exceptions
class ConfigurationError(BucketComponentError, ValueError):
    """
    Raised when a component argument or stack setting is invalid.

    These are detected before anything is registered with the Pulumi engine,
    so a failing program never leaves a half-declared component behind.
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"Invalid {field}: {message}")
        self.field = field


class InvalidComponentNameError(ConfigurationError):
    """Raised when a component name is empty or not a string."""

    def __init__(self, message: str):
        super().__init__("name", message)


class InvalidPolicyKindError(ConfigurationError):
    """Raised when a policy kind is not one of the PolicyKind members."""

    def __init__(self, message: str):
        super().__init__("policy_kind", message)


# Declaration graph exceptions
class DeclarationGraphError(BucketComponentError):
    """Base exception for declaration graph problems."""


class DuplicateDeclarationError(DeclarationGraphError):
    """Raised when two declarations share a name within one owner."""


class UnknownDependencyError(DeclarationGraphError):
    """Raised when a declaration references a name that was never added."""


class DependencyCycleError(DeclarationGraphError):
    """Raised when the declarations cannot be put in a realization order."""
