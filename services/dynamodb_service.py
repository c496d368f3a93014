"""
DynamoDB service for table operations.
"""
from typing import Dict, Any, Optional, TYPE_CHECKING
from logger_config import get_logger
from utils.decorators import translate_aws_errors

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBClient
else:
    DynamoDBClient = Any

logger = get_logger(__name__)


class DynamoDBService:
    """Service for DynamoDB operations."""

    def __init__(self, client: DynamoDBClient, table_name: str) -> None:
        """
        Initialize DynamoDB service.

        Args:
            client: boto3 DynamoDB client
            table_name: Name of the DynamoDB table
        """
        self.client = client
        self.table_name = table_name

    @translate_aws_errors('dynamodb', 'GetItem')
    def get_item(
        self,
        key: Dict[str, Dict[str, str]]
    ) -> Optional[Dict[str, Any]]:
        """
        Get an item from the table.

        Args:
            key: Dictionary with attribute names and values in DynamoDB format

        Returns:
            Item dictionary if found, None otherwise

        Raises:
            TransmissionError: If DynamoDB operation fails
        """
        response = self.client.get_item(
            TableName=self.table_name,
            Key=key
        )
        item = response.get('Item')
        logger.info(
            f'DynamoDB get_item on table {self.table_name}: '
            f'{"found" if item else "not found"}'
        )
        return item

    @translate_aws_errors('dynamodb', 'Query')
    def query(
        self,
        index_name: str,
        key_condition: str,
        attribute_names: Dict[str, str],
        attribute_values: Dict[str, Dict[str, str]],
        consistent_read: bool = False,
        return_consumed_capacity: str = 'NONE'
    ) -> Dict[str, Any]:
        """
        Query an index of the table. Only the first page is returned.

        Returns:
            Dict with Items, Count and ConsumedCapacity (when requested)

        Raises:
            TransmissionError: If DynamoDB operation fails
        """
        response = self.client.query(
            TableName=self.table_name,
            IndexName=index_name,
            KeyConditionExpression=key_condition,
            ExpressionAttributeNames=attribute_names,
            ExpressionAttributeValues=attribute_values,
            ConsistentRead=consistent_read,
            ReturnConsumedCapacity=return_consumed_capacity
        )
        items = response.get('Items', [])
        consumed = response.get('ConsumedCapacity')
        logger.info(
            f'DynamoDB query on {self.table_name}/{index_name} returned '
            f'{len(items)} items'
        )
        if consumed:
            logger.debug(f'Consumed capacity: {consumed}')
        return {
            'Items': items,
            'Count': response.get('Count', len(items)),
            'ConsumedCapacity': consumed
        }
