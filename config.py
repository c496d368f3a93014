"""
Configuration module for environment variable validation and type-safe config.

This module validates the environment the job runs in and provides a
type-safe configuration object.
"""
import os
from dataclasses import dataclass
from typing import Optional
from utils.exceptions import ConfigurationError

DEFAULT_TABLE_NAME = "dynamodb_table"

FAILURE_POLICY_RAISE = "raise"
FAILURE_POLICY_LOG = "log"
FAILURE_POLICY_EXIT_CODE = "exit-code"
FAILURE_POLICIES = {FAILURE_POLICY_RAISE, FAILURE_POLICY_LOG, FAILURE_POLICY_EXIT_CODE}


@dataclass(frozen=True)
class Config:
    """Type-safe configuration object with validated environment variables."""

    stream_name: str
    bucket_name: str
    queue_url: str
    table_name: str = DEFAULT_TABLE_NAME
    topic_arn: Optional[str] = None
    aws_region: Optional[str] = None
    log_level: str = "INFO"
    failure_policy: str = FAILURE_POLICY_EXIT_CODE

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ConfigurationError: If required environment variables are missing or invalid.
        """
        stream_name = _required("KINESIS_STREAM_NAME")
        bucket_name = _required("S3_BUCKET")
        queue_url = _required("SQS_URL")

        table_name = os.environ.get("DYNAMODB_TABLE") or DEFAULT_TABLE_NAME
        topic_arn = os.environ.get("SNS_TOPIC_ARN") or None
        # Left unset so the SDK's own region discovery applies
        aws_region = os.environ.get("AWS_REGION") or None
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_log_levels:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}",
                setting="LOG_LEVEL"
            )

        failure_policy = os.environ.get(
            "FAILURE_POLICY", FAILURE_POLICY_EXIT_CODE
        ).lower()
        if failure_policy not in FAILURE_POLICIES:
            raise ConfigurationError(
                f"FAILURE_POLICY must be one of {FAILURE_POLICIES}, got: {failure_policy}",
                setting="FAILURE_POLICY"
            )

        return cls(
            stream_name=stream_name,
            bucket_name=bucket_name,
            queue_url=queue_url,
            table_name=table_name,
            topic_arn=topic_arn,
            aws_region=aws_region,
            log_level=log_level,
            failure_policy=failure_policy,
        )


def _required(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ConfigurationError(
            f"{name} environment variable is required",
            setting=name
        )
    return value


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ConfigurationError: If required environment variables are missing or invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
