"""
S3 service for object storage operations.
"""
from typing import Dict, Any, Optional, TYPE_CHECKING
from logger_config import get_logger
from utils.decorators import translate_aws_errors

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client
else:
    S3Client = Any

logger = get_logger(__name__)


def build_put_object_request(bucket: str, key: str, body: bytes) -> Dict[str, Any]:
    """Build PutObject keyword arguments for a single, non-multipart upload."""
    return {
        'Bucket': bucket,
        'Key': key,
        'Body': body,
    }


class S3Service:
    """Service for S3 operations."""

    def __init__(self, client: S3Client, bucket_name: str) -> None:
        """
        Initialize S3 service.

        Args:
            client: boto3 S3 client
            bucket_name: Name of the S3 bucket
        """
        self.client = client
        self.bucket_name = bucket_name

    @translate_aws_errors('s3', 'PutObject')
    def put_object(self, key: str, body: bytes | str) -> Optional[str]:
        """
        Put an object into the S3 bucket.

        Args:
            key: S3 object key
            body: Object body (bytes or string)

        Returns:
            The ETag S3 assigned to the object

        Raises:
            TransmissionError: If S3 operation fails
        """
        if isinstance(body, str):
            body = body.encode('UTF-8')

        response = self.client.put_object(
            **build_put_object_request(self.bucket_name, key, body)
        )
        logger.info(f'Successfully put object to s3://{self.bucket_name}/{key}')
        return response.get('ETag')
