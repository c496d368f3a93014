"""
Shared fixtures: fake credentials, moto-backed AWS, and wrappers built
against either moto or mock clients.
"""
import pytest
import boto3
from unittest.mock import Mock
from moto import mock_aws
from services.aws_wrapper import AWSWrapper

REGION = 'us-east-1'
STREAM_NAME = 'test-stream'
TABLE_NAME = 'test-table'
BUCKET_NAME = 'test-bucket'
QUEUE_NAME = 'test-queue'
TOPIC_NAME = 'test-topic'


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mock AWS credentials for moto."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', REGION)
    monkeypatch.delenv('AWS_REGION', raising=False)
    monkeypatch.delenv('AWS_PROFILE', raising=False)
    monkeypatch.delenv('AWS_ENDPOINT_URL', raising=False)


@pytest.fixture
def aws(aws_credentials):
    """Run the test inside moto's in-process AWS."""
    with mock_aws():
        yield


@pytest.fixture
def aws_resources(aws):
    """Create one of each resource the wrapper talks to."""
    kinesis = boto3.client('kinesis', region_name=REGION)
    kinesis.create_stream(StreamName=STREAM_NAME, ShardCount=1)

    dynamodb = boto3.client('dynamodb', region_name=REGION)
    dynamodb.create_table(
        TableName=TABLE_NAME,
        AttributeDefinitions=[
            {'AttributeName': 'PK', 'AttributeType': 'S'}
        ],
        KeySchema=[
            {'AttributeName': 'PK', 'KeyType': 'HASH'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )

    s3 = boto3.client('s3', region_name=REGION)
    s3.create_bucket(Bucket=BUCKET_NAME)

    sqs = boto3.client('sqs', region_name=REGION)
    queue_url = sqs.create_queue(QueueName=QUEUE_NAME)['QueueUrl']

    sns = boto3.client('sns', region_name=REGION)
    topic_arn = sns.create_topic(Name=TOPIC_NAME)['TopicArn']

    return {
        'kinesis': kinesis,
        'dynamodb': dynamodb,
        's3': s3,
        'sqs': sqs,
        'sns': sns,
        'queue_url': queue_url,
        'topic_arn': topic_arn,
    }


@pytest.fixture
def moto_wrapper(aws_resources):
    """Wrapper using the default session resolver against moto."""
    return AWSWrapper(
        stream_name=STREAM_NAME,
        table_name=TABLE_NAME,
        bucket_name=BUCKET_NAME,
        queue_url=aws_resources['queue_url'],
        topic_arn=aws_resources['topic_arn'],
    )


@pytest.fixture
def mock_session():
    """boto3 session stand-in handing out one Mock client per service."""
    session = Mock()
    clients = {}

    def client(service_name):
        clients.setdefault(service_name, Mock(name=f'{service_name}-client'))
        return clients[service_name]

    session.client.side_effect = client
    return session


@pytest.fixture
def mock_wrapper(mock_session):
    """Wrapper whose five clients are Mocks."""
    return AWSWrapper(
        stream_name='S',
        table_name='T',
        bucket_name='B',
        queue_url='Q',
        topic_arn='arn:aws:sns:us-east-1:123456789012:T',
        session_resolver=lambda region_name: mock_session,
    )
