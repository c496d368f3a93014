"""
Unit tests for service layer.

Each service gets a Mock client; these tests pin the exact SDK request
and the error translation.
"""
import pytest
from unittest.mock import Mock
from botocore.exceptions import ClientError, EndpointConnectionError
from services.kinesis_service import KinesisService
from services.dynamodb_service import DynamoDBService
from services.s3_service import S3Service, build_put_object_request
from services.sqs_service import SQSService
from services.sns_service import SNSService
from utils.exceptions import TransmissionError


def client_error(code, operation):
    return ClientError({'Error': {'Code': code, 'Message': code}}, operation)


class TestKinesisService:
    """Tests for KinesisService."""

    def test_put_record(self):
        client = Mock()
        client.put_record.return_value = {'ShardId': 'shardId-000000000000', 'SequenceNumber': '1'}

        service = KinesisService(client, 'stream')
        result = service.put_record(b'{}', '1')

        assert result == {'ShardId': 'shardId-000000000000', 'SequenceNumber': '1'}
        client.put_record.assert_called_once_with(
            StreamName='stream',
            Data=b'{}',
            PartitionKey='1'
        )

    def test_list_shards(self):
        client = Mock()
        client.list_shards.return_value = {'Shards': [{'ShardId': 'a'}, {'ShardId': 'b'}]}

        shards = KinesisService(client, 'stream').list_shards('other')

        assert [s['ShardId'] for s in shards] == ['a', 'b']
        client.list_shards.assert_called_once_with(StreamName='other')

    def test_put_record_error_translated_once(self):
        client = Mock()
        error = client_error('ProvisionedThroughputExceededException', 'PutRecord')
        client.put_record.side_effect = error

        with pytest.raises(TransmissionError) as exc_info:
            KinesisService(client, 'stream').put_record(b'{}', '1')

        assert exc_info.value.original is error
        assert exc_info.value.__cause__ is error
        assert exc_info.value.service == 'kinesis'
        assert exc_info.value.operation == 'PutRecord'
        assert client.put_record.call_count == 1


class TestDynamoDBService:
    """Tests for DynamoDBService."""

    def test_get_item_found(self):
        client = Mock()
        client.get_item.return_value = {'Item': {'PK': {'S': 'k'}}}

        service = DynamoDBService(client, 'table')
        item = service.get_item({'PK': {'S': 'k'}})

        assert item == {'PK': {'S': 'k'}}
        client.get_item.assert_called_once_with(
            TableName='table',
            Key={'PK': {'S': 'k'}}
        )

    def test_get_item_missing_returns_none(self):
        client = Mock()
        client.get_item.return_value = {}

        assert DynamoDBService(client, 'table').get_item({'PK': {'S': 'k'}}) is None

    def test_query_passes_through(self):
        client = Mock()
        client.query.return_value = {
            'Items': [{'SK': {'S': 'ID'}}],
            'Count': 1,
            'ConsumedCapacity': {'TableName': 'table', 'CapacityUnits': 1.0},
        }

        result = DynamoDBService(client, 'table').query(
            index_name='GSI1',
            key_condition='#pk = :pk',
            attribute_names={'#pk': 'SK'},
            attribute_values={':pk': {'S': 'ID'}},
            consistent_read=True,
            return_consumed_capacity='TOTAL'
        )

        assert result['Count'] == 1
        assert result['ConsumedCapacity']['CapacityUnits'] == 1.0
        client.query.assert_called_once_with(
            TableName='table',
            IndexName='GSI1',
            KeyConditionExpression='#pk = :pk',
            ExpressionAttributeNames={'#pk': 'SK'},
            ExpressionAttributeValues={':pk': {'S': 'ID'}},
            ConsistentRead=True,
            ReturnConsumedCapacity='TOTAL'
        )

    def test_get_item_error(self):
        client = Mock()
        client.get_item.side_effect = client_error('ResourceNotFoundException', 'GetItem')

        with pytest.raises(TransmissionError) as exc_info:
            DynamoDBService(client, 'table').get_item({'PK': {'S': 'k'}})

        assert exc_info.value.operation == 'GetItem'


class TestS3Service:
    """Tests for S3Service."""

    def test_build_put_object_request(self):
        assert build_put_object_request('bucket', 'key.json', b'{}') == {
            'Bucket': 'bucket',
            'Key': 'key.json',
            'Body': b'{}',
        }

    def test_put_object(self):
        client = Mock()
        client.put_object.return_value = {'ETag': '"abc"'}

        etag = S3Service(client, 'bucket').put_object('key.json', b'{}')

        assert etag == '"abc"'
        client.put_object.assert_called_once_with(Bucket='bucket', Key='key.json', Body=b'{}')

    def test_put_object_encodes_strings(self):
        client = Mock()
        client.put_object.return_value = {}

        S3Service(client, 'bucket').put_object('key.txt', 'héllo')

        assert client.put_object.call_args.kwargs['Body'] == 'héllo'.encode('utf-8')

    def test_transport_error_translated(self):
        client = Mock()
        error = EndpointConnectionError(endpoint_url='https://s3.amazonaws.com')
        client.put_object.side_effect = error

        with pytest.raises(TransmissionError) as exc_info:
            S3Service(client, 'bucket').put_object('key', b'')

        assert exc_info.value.original is error


class TestSQSService:
    """Tests for SQSService."""

    def test_receive_messages(self):
        client = Mock()
        client.receive_message.return_value = {'Messages': [{'MessageId': '1'}]}

        messages = SQSService(client, 'https://queue').receive_messages(
            max_messages=5,
            message_attribute_names=('A',),
            visibility_timeout=1,
            wait_time_seconds=2
        )

        assert messages == [{'MessageId': '1'}]
        client.receive_message.assert_called_once_with(
            QueueUrl='https://queue',
            AttributeNames=['All'],
            MaxNumberOfMessages=5,
            MessageAttributeNames=['A'],
            VisibilityTimeout=1,
            WaitTimeSeconds=2
        )

    def test_receive_no_messages(self):
        client = Mock()
        client.receive_message.return_value = {}

        assert SQSService(client, 'q').receive_messages(1, (), 0, 0) == []


class TestSNSService:
    """Tests for SNSService."""

    def test_publish(self):
        client = Mock()
        client.publish.return_value = {'MessageId': 'm-1'}

        assert SNSService(client).publish('arn:topic', 'hi') == 'm-1'
        client.publish.assert_called_once_with(TopicArn='arn:topic', Message='hi')

    def test_publish_error(self):
        client = Mock()
        client.publish.side_effect = client_error('NotFound', 'Publish')

        with pytest.raises(TransmissionError) as exc_info:
            SNSService(client).publish('arn:topic', 'hi')

        assert exc_info.value.service == 'sns'
