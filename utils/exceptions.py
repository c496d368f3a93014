"""
Custom exception classes for the AWS wrapper and the job driver.
"""
from typing import Optional


class ConfigurationError(ValueError):
    """Exception raised for missing or invalid configuration."""

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None
    ):
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting if available
        """
        super().__init__(message)
        self.message = message
        self.setting = setting


class TransmissionError(Exception):
    """Exception raised when an AWS SDK call fails."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        original: Optional[Exception] = None
    ):
        """
        Initialize transmission error.

        Args:
            message: Error message
            service: AWS service name (e.g. 'kinesis')
            operation: SDK operation name (e.g. 'PutRecord')
            original: The botocore exception, unchanged
        """
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.original = original


class NotFoundError(Exception):
    """Exception raised when a required DynamoDB item is absent."""

    def __init__(
        self,
        message: str,
        table: Optional[str] = None,
        key: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.table = table
        self.key = key
