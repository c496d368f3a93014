"""
Credential and region discovery.

The wrapper never reads the environment itself; it asks a resolver for a
ready boto3 session. Tests pass their own resolver.
"""
import os
import boto3
from typing import Callable, Optional
from botocore.exceptions import BotoCoreError
from logger_config import get_logger
from utils.exceptions import ConfigurationError

logger = get_logger(__name__)

SessionResolver = Callable[[Optional[str]], boto3.Session]


def resolve_session(region_name: Optional[str] = None) -> boto3.Session:
    """
    Build a boto3 session from the default credential provider chain.

    Args:
        region_name: Explicit region; None defers to AWS_REGION,
            AWS_DEFAULT_REGION and the shared config file

    Returns:
        A session with resolvable credentials and region

    Raises:
        ConfigurationError: If credentials or region cannot be resolved
    """
    # boto3 itself only reads AWS_DEFAULT_REGION
    region_name = region_name or os.environ.get('AWS_REGION') or None

    try:
        session = boto3.Session(region_name=region_name)
        credentials = session.get_credentials()
    except BotoCoreError as e:
        logger.error(f'AWS credential discovery failed: {str(e)}')
        raise ConfigurationError(
            f'AWS credential discovery failed: {str(e)}',
            setting='credentials'
        ) from e

    if credentials is None:
        raise ConfigurationError(
            'No AWS credentials found in the environment, shared files or instance metadata',
            setting='credentials'
        )

    if not session.region_name:
        raise ConfigurationError(
            'No AWS region configured; set AWS_REGION or AWS_DEFAULT_REGION',
            setting='region'
        )

    logger.debug(f'Resolved AWS session for region {session.region_name}')
    return session
