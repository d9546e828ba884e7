"""S3-compatible object store (AWS S3, Cloudflare R2, MinIO).

boto3 is synchronous; every call runs in a worker thread so request
handlers never block the event loop.
"""

import asyncio
from typing import Any

import boto3
import logfire
from botocore.config import Config
from botocore.exceptions import ClientError

from remark.config import StorageSettings
from remark.persistence.store.base import (
    ObjectPage,
    ObjectStore,
    PreconditionFailedError,
    StoredObject,
)

_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}
_CONFLICT_CODES = {"PreconditionFailed", "ConditionalRequestConflict", "412", "409"}


def create_s3_client(settings: StorageSettings) -> Any:
    """Create a boto3 S3 client.

    Args:
        settings: Storage settings

    Returns:
        Configured S3 client
    """
    return boto3.client(
        "s3",
        endpoint_url=settings.endpoint_url,
        region_name=settings.region,
        aws_access_key_id=settings.access_key_id,
        aws_secret_access_key=settings.secret_access_key,
        config=Config(
            retries={"max_attempts": settings.max_attempts, "mode": "standard"},
        ),
    )


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


class S3ObjectStore(ObjectStore):
    """ObjectStore backed by an S3-compatible bucket."""

    def __init__(self, client: Any, bucket: str) -> None:
        """Initialize store.

        Args:
            client: boto3 S3 client
            bucket: Bucket name
        """
        self.client = client
        self.bucket = bucket

    def _head(self, key: str) -> str | None:
        try:
            response = self.client.head_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if _error_code(e) in _MISSING_CODES:
                return None
            raise
        return response["ETag"]

    def _get(self, key: str) -> StoredObject | None:
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if _error_code(e) in _MISSING_CODES:
                return None
            raise
        body = response["Body"].read()
        return StoredObject(key=key, body=body, etag=response["ETag"])

    def _put(
        self,
        key: str,
        body: bytes,
        content_type: str,
        if_match: str | None,
        if_none_match: bool,
    ) -> str:
        params: dict[str, Any] = {
            "Bucket": self.bucket,
            "Key": key,
            "Body": body,
            "ContentType": content_type,
        }
        if if_match is not None:
            params["IfMatch"] = if_match
        if if_none_match:
            params["IfNoneMatch"] = "*"

        try:
            response = self.client.put_object(**params)
        except ClientError as e:
            if _error_code(e) in _CONFLICT_CODES:
                raise PreconditionFailedError(key) from e
            raise
        return response["ETag"]

    def _list(self, prefix: str, cursor: str | None, limit: int) -> ObjectPage:
        params: dict[str, Any] = {
            "Bucket": self.bucket,
            "Prefix": prefix,
            "MaxKeys": limit,
        }
        if cursor:
            params["ContinuationToken"] = cursor

        response = self.client.list_objects_v2(**params)
        keys = [obj["Key"] for obj in response.get("Contents", [])]
        next_cursor = (
            response.get("NextContinuationToken") if response.get("IsTruncated") else None
        )
        return ObjectPage(keys=keys, cursor=next_cursor)

    async def head(self, key: str) -> str | None:
        """Probe an object with HEAD."""
        return await asyncio.to_thread(self._head, key)

    async def get(self, key: str) -> StoredObject | None:
        """Read an object."""
        return await asyncio.to_thread(self._get, key)

    async def put(
        self,
        key: str,
        body: bytes,
        *,
        content_type: str = "application/json; charset=utf-8",
        if_match: str | None = None,
        if_none_match: bool = False,
    ) -> str:
        """Write an object, optionally conditional."""
        return await asyncio.to_thread(
            self._put, key, body, content_type, if_match, if_none_match
        )

    async def list(
        self, prefix: str, cursor: str | None = None, limit: int = 100
    ) -> ObjectPage:
        """List one page of keys under a prefix."""
        with logfire.span("s3.list_objects", bucket=self.bucket, prefix=prefix):
            return await asyncio.to_thread(self._list, prefix, cursor, limit)
