"""
Façade over the Kinesis, DynamoDB, S3, SQS and SNS services.

One session is resolved at construction and one client per service is
created from it. Every public method issues exactly one SDK call; SDK
failures surface as TransmissionError with the botocore error attached.
"""
from typing import Any, Dict, List, Optional
from config import Config
from logger_config import get_logger
from models import KinesisRecord, S3Object
from utils.exceptions import ConfigurationError, NotFoundError
from .session import SessionResolver, resolve_session
from .kinesis_service import KinesisService
from .dynamodb_service import DynamoDBService
from .s3_service import S3Service
from .sqs_service import SQSService
from .sns_service import SNSService

logger = get_logger(__name__)

# All records land on a single shard
PARTITION_KEY = "1"

TABLE_PARTITION_KEY = "PK"
QUERY_INDEX_NAME = "GSI1"
QUERY_PARTITION_ATTRIBUTE = "SK"
QUERY_SORT_ATTRIBUTE = "GSI1SK"
QUERY_KEY_CONDITION = "#pk = :pk AND begins_with(#sk, :sk)"

RECEIVE_MAX_MESSAGES = 10
RECEIVE_MESSAGE_ATTRIBUTES = ("ID", "COUNTRY")
RECEIVE_VISIBILITY_TIMEOUT = 20
RECEIVE_WAIT_SECONDS = 30

DEFAULT_MESSAGE = "message"


class AWSWrapper:
    """Holds one client per service plus the resource names they act on."""

    def __init__(
        self,
        stream_name: str,
        table_name: str,
        bucket_name: str,
        queue_url: str,
        topic_arn: Optional[str] = None,
        region_name: Optional[str] = None,
        session_resolver: SessionResolver = resolve_session
    ) -> None:
        """
        Resolve credentials and create the five service clients.

        Args:
            stream_name: Kinesis stream records are put to
            table_name: DynamoDB table read by get_item and query_table
            bucket_name: S3 bucket objects are uploaded to
            queue_url: SQS queue polled by receive_message
            topic_arn: Default SNS topic for publish_message
            region_name: Explicit region, None for SDK discovery
            session_resolver: Callable returning a ready boto3 session

        Raises:
            ConfigurationError: If credential or region discovery fails
        """
        session = session_resolver(region_name)

        self.stream_name = stream_name
        self.table_name = table_name
        self.bucket_name = bucket_name
        self.queue_url = queue_url
        self.topic_arn = topic_arn

        self.kinesis = KinesisService(session.client('kinesis'), stream_name)
        self.dynamodb = DynamoDBService(session.client('dynamodb'), table_name)
        self.s3 = S3Service(session.client('s3'), bucket_name)
        self.sqs = SQSService(session.client('sqs'), queue_url)
        self.sns = SNSService(session.client('sns'))

        logger.info(
            f'AWS wrapper ready (stream={stream_name}, table={table_name}, '
            f'bucket={bucket_name}, queue={queue_url})'
        )

    @classmethod
    def from_config(
        cls,
        config: Config,
        session_resolver: SessionResolver = resolve_session
    ) -> "AWSWrapper":
        return cls(
            stream_name=config.stream_name,
            table_name=config.table_name,
            bucket_name=config.bucket_name,
            queue_url=config.queue_url,
            topic_arn=config.topic_arn,
            region_name=config.aws_region,
            session_resolver=session_resolver,
        )

    @property
    def kinesis_client(self):
        return self.kinesis.client

    @property
    def dynamodb_client(self):
        return self.dynamodb.client

    @property
    def s3_client(self):
        return self.s3.client

    @property
    def sqs_client(self):
        return self.sqs.client

    @property
    def sns_client(self):
        return self.sns.client

    def put_kinesis_record(self, record: KinesisRecord) -> Dict[str, Any]:
        """Serialize the record and put it on the configured stream."""
        return self.kinesis.put_record(record.to_json_bytes(), PARTITION_KEY)

    def list_shards(self, stream_name: str) -> List[Dict[str, Any]]:
        return self.kinesis.list_shards(stream_name)

    def get_item(self, key: str, required: bool = False) -> Optional[Dict[str, Any]]:
        """
        Point lookup by partition key.

        Args:
            key: Partition key value
            required: Raise NotFoundError instead of returning None

        Returns:
            The item in DynamoDB attribute-value format, or None if absent

        Raises:
            TransmissionError: If the DynamoDB call fails
            NotFoundError: If required and no item has this key
        """
        item = self.dynamodb.get_item({TABLE_PARTITION_KEY: {'S': key}})
        if item is None and required:
            raise NotFoundError(
                f'No item with {TABLE_PARTITION_KEY}={key} in table {self.table_name}',
                table=self.table_name,
                key=key
            )
        return item

    def query_table(self, key: str, prefix: str) -> Dict[str, Any]:
        """
        Query the secondary index by exact partition key and sort-key prefix.

        Strongly consistent; total consumed capacity is reported.
        """
        return self.dynamodb.query(
            index_name=QUERY_INDEX_NAME,
            key_condition=QUERY_KEY_CONDITION,
            attribute_names={
                '#pk': QUERY_PARTITION_ATTRIBUTE,
                '#sk': QUERY_SORT_ATTRIBUTE,
            },
            attribute_values={
                ':pk': {'S': key},
                ':sk': {'S': prefix},
            },
            consistent_read=True,
            return_consumed_capacity='TOTAL'
        )

    def put_object(self, key: str, obj: S3Object) -> Optional[str]:
        """Serialize the object and upload it under key in the configured bucket."""
        return self.s3.put_object(key, obj.to_json_bytes())

    def receive_message(self) -> List[Dict[str, Any]]:
        """Long-poll the configured queue once."""
        return self.sqs.receive_messages(
            max_messages=RECEIVE_MAX_MESSAGES,
            message_attribute_names=RECEIVE_MESSAGE_ATTRIBUTES,
            visibility_timeout=RECEIVE_VISIBILITY_TIMEOUT,
            wait_time_seconds=RECEIVE_WAIT_SECONDS
        )

    def publish_message(
        self,
        message: str = DEFAULT_MESSAGE,
        topic_arn: Optional[str] = None
    ) -> Optional[str]:
        """
        Publish a message to topic_arn, or to the configured topic.

        Raises:
            ConfigurationError: If no topic is given or configured
            TransmissionError: If the SNS call fails
        """
        target = topic_arn or self.topic_arn
        if not target:
            raise ConfigurationError(
                'No SNS topic ARN given and SNS_TOPIC_ARN is not configured',
                setting='SNS_TOPIC_ARN'
            )
        return self.sns.publish(target, message)
