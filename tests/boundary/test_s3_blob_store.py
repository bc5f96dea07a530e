"""
Test suite for S3BlobStore.

Uses a mocked boto3 client; no network access.

System role: Verification of S3 error mapping and transient retry
"""

import asyncio
import io
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, NoCredentialsError

from smartdocs.boundary.storage.s3_blob_store import S3BlobStore, is_transient
from smartdocs.core.exceptions import AccessError, BlobNotFoundError


def _client_error(code: str, operation: str = "HeadObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def mock_s3_client() -> MagicMock:
    """Provide mock boto3 S3 client."""
    return MagicMock()


@pytest.fixture
def store(mock_s3_client: MagicMock) -> S3BlobStore:
    """Provide S3BlobStore with no backoff delay."""
    return S3BlobStore(
        bucket="smartdocsaicontainer",
        s3_client=mock_s3_client,
        max_attempts=3,
        backoff_seconds=0,
    )


class TestS3BlobStoreInit:
    """Test suite for client construction."""

    def test_builds_client_with_timeouts_when_none_given(self) -> None:
        # Act
        with patch("smartdocs.boundary.storage.s3_blob_store.boto3") as mock_boto3:
            S3BlobStore(bucket="b", region="us-east-1", connect_timeout=2, read_timeout=9)

        # Assert
        _, kwargs = mock_boto3.client.call_args
        assert kwargs["region_name"] == "us-east-1"
        assert kwargs["config"].connect_timeout == 2
        assert kwargs["config"].read_timeout == 9


class TestExists:
    """Test suite for S3BlobStore.exists."""

    @pytest.mark.asyncio
    async def test_true_when_head_succeeds(self, store, mock_s3_client) -> None:
        assert await store.exists("short_chunks/a.json") is True
        mock_s3_client.head_object.assert_called_once_with(
            Bucket="smartdocsaicontainer", Key="short_chunks/a.json"
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["404", "NoSuchKey", "NotFound"])
    async def test_false_on_not_found(self, store, mock_s3_client, code: str) -> None:
        mock_s3_client.head_object.side_effect = _client_error(code)

        assert await store.exists("missing.json") is False

    @pytest.mark.asyncio
    async def test_access_denied_raises_without_retry(self, store, mock_s3_client) -> None:
        """Test 403 is an AccessError, distinct from not found, and not retried."""
        # Arrange
        mock_s3_client.head_object.side_effect = _client_error("403")

        # Act
        with pytest.raises(AccessError) as exc_info:
            await store.exists("secret.json")

        # Assert
        assert exc_info.value.path == "secret.json"
        assert exc_info.value.details["transient"] is False
        assert mock_s3_client.head_object.call_count == 1

    @pytest.mark.asyncio
    async def test_throttling_is_retried_then_succeeds(self, store, mock_s3_client) -> None:
        mock_s3_client.head_object.side_effect = [_client_error("SlowDown"), {}]

        assert await store.exists("a.json") is True
        assert mock_s3_client.head_object.call_count == 2

    @pytest.mark.asyncio
    async def test_connection_errors_exhaust_attempts(self, store, mock_s3_client) -> None:
        mock_s3_client.head_object.side_effect = EndpointConnectionError(
            endpoint_url="https://s3.example"
        )

        with pytest.raises(AccessError) as exc_info:
            await store.exists("a.json")

        assert mock_s3_client.head_object.call_count == 3
        assert exc_info.value.details["transient"] is True

    @pytest.mark.asyncio
    async def test_missing_credentials_is_access_error(self, store, mock_s3_client) -> None:
        mock_s3_client.head_object.side_effect = NoCredentialsError()

        with pytest.raises(AccessError):
            await store.exists("a.json")


class TestRead:
    """Test suite for S3BlobStore.read."""

    @pytest.mark.asyncio
    async def test_returns_body_bytes(self, store, mock_s3_client) -> None:
        mock_s3_client.get_object.return_value = {"Body": io.BytesIO(b'{"chunks": []}')}

        assert await store.read("a.json") == b'{"chunks": []}'

    @pytest.mark.asyncio
    async def test_no_such_key_raises_blob_not_found(self, store, mock_s3_client) -> None:
        mock_s3_client.get_object.side_effect = _client_error("NoSuchKey", "GetObject")

        with pytest.raises(BlobNotFoundError) as exc_info:
            await store.read("gone.json")

        assert exc_info.value.path == "gone.json"

    @pytest.mark.asyncio
    async def test_access_denied_raises_access_error(self, store, mock_s3_client) -> None:
        mock_s3_client.get_object.side_effect = _client_error("AccessDenied", "GetObject")

        with pytest.raises(AccessError):
            await store.read("secret.json")


class TestIsTransient:
    """Test suite for the retry predicate."""

    @pytest.mark.parametrize("code", ["500", "503", "SlowDown", "ThrottlingException"])
    def test_transient_codes(self, code: str) -> None:
        assert is_transient(_client_error(code)) is True

    @pytest.mark.parametrize("code", ["403", "AccessDenied", "404"])
    def test_permanent_codes(self, code: str) -> None:
        assert is_transient(_client_error(code)) is False


class TestCancellation:
    """Test suite for cancelling a call that is backing off between retries."""

    @pytest.mark.asyncio
    async def test_cancel_during_backoff_stops_further_attempts(self, mock_s3_client) -> None:
        # Arrange
        store = S3BlobStore(
            bucket="smartdocsaicontainer",
            s3_client=mock_s3_client,
            max_attempts=5,
            backoff_seconds=5,
        )
        mock_s3_client.head_object.side_effect = _client_error("SlowDown")
        task = asyncio.create_task(store.exists("a.json"))
        for _ in range(200):
            if mock_s3_client.head_object.call_count:
                break
            await asyncio.sleep(0.01)

        # Act
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        await asyncio.sleep(0.05)

        # Assert
        assert mock_s3_client.head_object.call_count == 1
