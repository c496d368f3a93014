"""
Kinesis service for stream operations.
"""
from typing import Any, Dict, List, TYPE_CHECKING
from logger_config import get_logger
from utils.decorators import translate_aws_errors

if TYPE_CHECKING:
    from mypy_boto3_kinesis import KinesisClient
else:
    KinesisClient = Any

logger = get_logger(__name__)


class KinesisService:
    """Service for Kinesis operations."""

    def __init__(self, client: KinesisClient, stream_name: str) -> None:
        """
        Initialize Kinesis service.

        Args:
            client: boto3 Kinesis client
            stream_name: Name of the stream records are written to
        """
        self.client = client
        self.stream_name = stream_name

    @translate_aws_errors('kinesis', 'PutRecord')
    def put_record(self, data: bytes, partition_key: str) -> Dict[str, Any]:
        """
        Put a single record onto the configured stream.

        Args:
            data: Record payload
            partition_key: Partition key deciding the target shard

        Returns:
            Dict with ShardId and SequenceNumber

        Raises:
            TransmissionError: If the Kinesis call fails
        """
        response = self.client.put_record(
            StreamName=self.stream_name,
            Data=data,
            PartitionKey=partition_key
        )
        logger.info(
            f'Successfully put record to stream {self.stream_name} '
            f'(shard {response.get("ShardId")})'
        )
        return {
            'ShardId': response.get('ShardId'),
            'SequenceNumber': response.get('SequenceNumber')
        }

    @translate_aws_errors('kinesis', 'ListShards')
    def list_shards(self, stream_name: str) -> List[Dict[str, Any]]:
        """
        List shards of a stream. Only the first page is returned.

        Raises:
            TransmissionError: If the Kinesis call fails
        """
        response = self.client.list_shards(StreamName=stream_name)
        shards = response.get('Shards', [])
        logger.info(f'Stream {stream_name} has {len(shards)} shards')
        return shards
