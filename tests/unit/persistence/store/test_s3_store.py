"""Unit tests for S3ObjectStore against a stubbed boto3 client."""

import io

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.response import StreamingBody
from botocore.stub import Stubber

from remark.config import StorageSettings
from remark.persistence.store import (
    PreconditionFailedError,
    S3ObjectStore,
    create_s3_client,
)

BUCKET = "thesis-comments"
KEY = "thesis/alice/data.json"


@pytest.fixture
def client():
    """Offline S3 client; all calls are answered by a Stubber."""
    return boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )


@pytest.fixture
def stubber(client):
    with Stubber(client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def store(client):
    return S3ObjectStore(client, BUCKET)


class TestHeadAndGet:
    """Tests for presence probes and reads."""

    @pytest.mark.asyncio
    async def test_head_returns_etag(self, store, stubber):
        stubber.add_response("head_object", {"ETag": '"v1"'}, {"Bucket": BUCKET, "Key": KEY})

        assert await store.head(KEY) == '"v1"'

    @pytest.mark.asyncio
    async def test_head_missing_returns_none(self, store, stubber):
        stubber.add_client_error("head_object", service_error_code="404", http_status_code=404)

        assert await store.head(KEY) is None

    @pytest.mark.asyncio
    async def test_get_returns_body_and_etag(self, store, stubber):
        body = b'{"username":"alice","comments":[]}'
        stubber.add_response(
            "get_object",
            {"Body": StreamingBody(io.BytesIO(body), len(body)), "ETag": '"v1"'},
            {"Bucket": BUCKET, "Key": KEY},
        )

        obj = await store.get(KEY)

        assert obj.body == body
        assert obj.etag == '"v1"'

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, store, stubber):
        stubber.add_client_error("get_object", service_error_code="NoSuchKey", http_status_code=404)

        assert await store.get(KEY) is None

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, store, stubber):
        stubber.add_client_error("get_object", service_error_code="AccessDenied", http_status_code=403)

        with pytest.raises(ClientError):
            await store.get(KEY)


class TestPut:
    """Tests for conditional writes."""

    @pytest.mark.asyncio
    async def test_create_only_sends_if_none_match(self, store, stubber):
        stubber.add_response(
            "put_object",
            {"ETag": '"v1"'},
            {
                "Bucket": BUCKET,
                "Key": KEY,
                "Body": b"{}",
                "ContentType": "application/json; charset=utf-8",
                "IfNoneMatch": "*",
            },
        )

        assert await store.put(KEY, b"{}", if_none_match=True) == '"v1"'

    @pytest.mark.asyncio
    async def test_update_sends_if_match(self, store, stubber):
        stubber.add_response(
            "put_object",
            {"ETag": '"v2"'},
            {
                "Bucket": BUCKET,
                "Key": KEY,
                "Body": b"{}",
                "ContentType": "application/json; charset=utf-8",
                "IfMatch": '"v1"',
            },
        )

        assert await store.put(KEY, b"{}", if_match='"v1"') == '"v2"'

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "code,status",
        [("PreconditionFailed", 412), ("ConditionalRequestConflict", 409)],
    )
    async def test_failed_condition_raises(self, store, stubber, code, status):
        stubber.add_client_error("put_object", service_error_code=code, http_status_code=status)

        with pytest.raises(PreconditionFailedError):
            await store.put(KEY, b"{}", if_match='"v1"')


class TestList:
    """Tests for paginated listing."""

    @pytest.mark.asyncio
    async def test_list_passes_continuation(self, store, stubber):
        stubber.add_response(
            "list_objects_v2",
            {
                "Contents": [{"Key": "thesis/alice/data.json"}],
                "IsTruncated": True,
                "NextContinuationToken": "next-page",
            },
            {"Bucket": BUCKET, "Prefix": "thesis/", "MaxKeys": 1},
        )
        stubber.add_response(
            "list_objects_v2",
            {"Contents": [{"Key": "thesis/bob/data.json"}], "IsTruncated": False},
            {
                "Bucket": BUCKET,
                "Prefix": "thesis/",
                "MaxKeys": 1,
                "ContinuationToken": "next-page",
            },
        )

        first = await store.list("thesis/", limit=1)
        second = await store.list("thesis/", cursor=first.cursor, limit=1)

        assert first.keys == ["thesis/alice/data.json"]
        assert first.cursor == "next-page"
        assert second.keys == ["thesis/bob/data.json"]
        assert second.cursor is None

    @pytest.mark.asyncio
    async def test_empty_bucket(self, store, stubber):
        stubber.add_response("list_objects_v2", {"IsTruncated": False})

        page = await store.list("thesis/")

        assert page.keys == []
        assert page.cursor is None


def test_create_s3_client_uses_endpoint():
    """Custom endpoints (R2, MinIO) are passed through to boto3."""
    settings = StorageSettings(
        endpoint_url="http://localhost:9000",
        region="us-east-1",
        access_key_id="minio",
        secret_access_key="minio123",
    )

    client = create_s3_client(settings)

    assert client.meta.endpoint_url == "http://localhost:9000"
