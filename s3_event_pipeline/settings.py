"""Stack configuration for the S3 event pipeline."""

from dataclasses import dataclass
from typing import Optional

import pulumi

from s3_event_pipeline.errors import ConfigurationError

ARCHITECTURES = ("x86_64", "arm64")


@dataclass(frozen=True)
class PipelineSettings:
    """Lambda and tagging settings shared by every bucket component."""

    lambda_runtime: str = "python3.12"
    lambda_memory_size: int = 128
    lambda_timeout: int = 30
    lambda_architecture: str = "x86_64"
    environment: str = "dev"

    def __post_init__(self):
        if not 128 <= self.lambda_memory_size <= 10240:
            raise ConfigurationError(
                "lambdaMemorySize",
                f"{self.lambda_memory_size} MB is outside 128-10240",
            )
        if not 1 <= self.lambda_timeout <= 900:
            raise ConfigurationError(
                "lambdaTimeout",
                f"{self.lambda_timeout} seconds is outside 1-900",
            )
        if self.lambda_architecture not in ARCHITECTURES:
            raise ConfigurationError(
                "lambdaArchitecture",
                f"{self.lambda_architecture!r} is not one of "
                f"{', '.join(ARCHITECTURES)}",
            )


def _get_int(config: pulumi.Config, key: str, default: int) -> int:
    try:
        value = config.get_int(key)
    except pulumi.ConfigTypeError as e:
        raise ConfigurationError(key, "expected an integer") from e
    return default if value is None else value


def load_settings(config: Optional[pulumi.Config] = None) -> PipelineSettings:
    """Read pipeline settings from the project's Pulumi config.

    Unset keys fall back to the PipelineSettings defaults.

    Raises:
        ConfigurationError: If a value is set but invalid.
    """
    config = config or pulumi.Config()
    defaults = PipelineSettings()
    return PipelineSettings(
        lambda_runtime=config.get("lambdaRuntime") or defaults.lambda_runtime,
        lambda_memory_size=_get_int(
            config, "lambdaMemorySize", defaults.lambda_memory_size
        ),
        lambda_timeout=_get_int(
            config, "lambdaTimeout", defaults.lambda_timeout
        ),
        lambda_architecture=config.get("lambdaArchitecture")
        or defaults.lambda_architecture,
        environment=config.get("environment") or defaults.environment,
    )
