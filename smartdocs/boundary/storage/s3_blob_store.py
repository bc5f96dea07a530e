"""
S3 blob store for chunk artifacts.

Read-only access to the chunk artifact bucket. Each synchronous boto3 call
runs in a worker thread while the retry loop stays on the event loop, so
cancelling a request also cancels pending backoff and further attempts.
Throttling and connection failures are retried with bounded exponential
backoff before being surfaced as AccessError.

Dependencies: boto3, botocore, tenacity
System role: Production Blob Access Layer implementation
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from smartdocs.core.exceptions import AccessError, BlobNotFoundError

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")

NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})
TRANSIENT_CODES = frozenset(
    {
        "500",
        "503",
        "InternalError",
        "RequestTimeout",
        "ServiceUnavailable",
        "SlowDown",
        "Throttling",
        "ThrottlingException",
    }
)
TRANSIENT_ERRORS = (
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", "Unknown"))


def is_transient(error: BaseException) -> bool:
    """True for errors worth retrying: throttling, 5xx and connection failures."""
    if isinstance(error, TRANSIENT_ERRORS):
        return True
    return isinstance(error, ClientError) and _error_code(error) in TRANSIENT_CODES


class S3BlobStore:
    """S3-backed Blob Access Layer."""

    name = "s3"

    def __init__(
        self,
        bucket: str,
        region: str = "ap-southeast-2",
        endpoint_url: str | None = None,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        max_attempts: int = 3,
        backoff_seconds: float = 0.5,
        s3_client: Any | None = None,
    ) -> None:
        """
        Initialize S3 blob store.

        Args:
            bucket: S3 bucket holding chunk artifacts
            region: AWS region for the bucket
            endpoint_url: Optional endpoint override (S3-compatible stores, LocalStack)
            connect_timeout: Socket connect timeout in seconds
            read_timeout: Socket read timeout in seconds
            max_attempts: Attempts per call for transient failures
            backoff_seconds: Initial backoff between attempts (0 disables waiting)
            s3_client: Pre-built boto3 S3 client (built from the arguments when None)
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = s3_client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            config=Config(
                connect_timeout=connect_timeout,
                read_timeout=read_timeout,
                retries={"max_attempts": 1, "mode": "standard"},
            ),
        )

        self._retry_policy = dict(
            retry=retry_if_exception(is_transient),
            stop=stop_after_attempt(max(1, max_attempts)),
            wait=wait_exponential_jitter(
                initial=backoff_seconds, max=8, jitter=backoff_seconds * 2
            ),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:S3BlobStore - Retry {retry_state.attempt_number}/{max_attempts} "
                f"after transient S3 error"
            ),
            reraise=True,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    def _head_object(self, key: str) -> None:
        self._s3_client.head_object(Bucket=self._bucket, Key=key)

    def _get_object_bytes(self, key: str) -> bytes:
        response = self._s3_client.get_object(Bucket=self._bucket, Key=key)
        return response["Body"].read()

    async def _call(self, operation: Callable[[str], ResultT], key: str) -> ResultT:
        """Run one boto3 operation per attempt in a worker thread, retrying transient errors."""
        async for attempt in AsyncRetrying(**self._retry_policy):
            with attempt:
                return await asyncio.to_thread(operation, key)

    async def exists(self, path: str) -> bool:
        """
        Check if an object exists in S3.

        Args:
            path: S3 object key

        Returns:
            bool: True if object exists, False on 404

        Raises:
            AccessError: On denied access or exhausted transient retries
        """
        try:
            await self._call(self._head_object, path)
            return True
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                return False
            raise self._access_error(e, path, "head_object") from e
        except BotoCoreError as e:
            raise self._access_error(e, path, "head_object") from e

    async def read(self, path: str) -> bytes:
        """
        Download an object's bytes.

        Args:
            path: S3 object key

        Returns:
            bytes: Object content

        Raises:
            BlobNotFoundError: If the key does not exist
            AccessError: On denied access or exhausted transient retries
        """
        try:
            return await self._call(self._get_object_bytes, path)
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                raise BlobNotFoundError(path, {"bucket": self._bucket}) from e
            raise self._access_error(e, path, "get_object") from e
        except BotoCoreError as e:
            raise self._access_error(e, path, "get_object") from e

    def _access_error(self, error: Exception, path: str, operation: str) -> AccessError:
        code = _error_code(error) if isinstance(error, ClientError) else type(error).__name__
        logger.error(
            f"{__name__}:{operation} - S3 access failed for s3://{self._bucket}/{path}: {code}"
        )
        return AccessError(
            f"S3 {operation} failed: {code}",
            path,
            {"bucket": self._bucket, "code": code, "transient": is_transient(error)},
        )
