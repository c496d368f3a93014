"""
SQS service for queue operations.
"""
from typing import Any, Dict, List, Sequence, TYPE_CHECKING
from logger_config import get_logger
from utils.decorators import translate_aws_errors

if TYPE_CHECKING:
    from mypy_boto3_sqs import SQSClient
else:
    SQSClient = Any

logger = get_logger(__name__)


class SQSService:
    """Service for SQS operations."""

    def __init__(self, client: SQSClient, queue_url: str) -> None:
        self.client = client
        self.queue_url = queue_url

    @translate_aws_errors('sqs', 'ReceiveMessage')
    def receive_messages(
        self,
        max_messages: int,
        message_attribute_names: Sequence[str],
        visibility_timeout: int,
        wait_time_seconds: int,
        attribute_names: Sequence[str] = ('All',)
    ) -> List[Dict[str, Any]]:
        """
        Receive messages from the configured queue. Blocks for up to
        wait_time_seconds.

        Raises:
            TransmissionError: If the SQS call fails
        """
        response = self.client.receive_message(
            QueueUrl=self.queue_url,
            AttributeNames=list(attribute_names),
            MaxNumberOfMessages=max_messages,
            MessageAttributeNames=list(message_attribute_names),
            VisibilityTimeout=visibility_timeout,
            WaitTimeSeconds=wait_time_seconds
        )
        messages = response.get('Messages', [])
        logger.info(f'Received {len(messages)} messages from {self.queue_url}')
        return messages
