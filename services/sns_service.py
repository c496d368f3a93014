"""
SNS service for topic operations.
"""
from typing import Any, Optional, TYPE_CHECKING
from logger_config import get_logger
from utils.decorators import translate_aws_errors

if TYPE_CHECKING:
    from mypy_boto3_sns import SNSClient
else:
    SNSClient = Any

logger = get_logger(__name__)


class SNSService:
    """Service for SNS operations."""

    def __init__(self, client: SNSClient) -> None:
        self.client = client

    @translate_aws_errors('sns', 'Publish')
    def publish(self, topic_arn: str, message: str) -> Optional[str]:
        """
        Publish a message to a topic.

        Returns:
            The MessageId SNS assigned

        Raises:
            TransmissionError: If the SNS call fails
        """
        response = self.client.publish(TopicArn=topic_arn, Message=message)
        message_id = response.get('MessageId')
        logger.info(f'Published message {message_id} to {topic_arn}')
        return message_id
