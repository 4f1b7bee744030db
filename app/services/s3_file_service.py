"""S3FileService provides S3-backed storage for JSON collections."""

import boto3
from botocore.exceptions import ClientError

from app.core.settings import Settings

from .base import BaseFileBackend

MISSING_KEY_CODES = {"NoSuchKey", "404", "NotFound"}


class S3FileService(BaseFileBackend):
    """Service for S3 document operations: read, write, existence check, ensure bucket."""

    def __init__(self, settings: Settings, client: object | None = None) -> None:
        """Initialize S3FileService and ensure the bucket exists."""
        self.s3 = client or boto3.client(
            "s3",
            endpoint_url=settings.s3_endpoint_url,
            aws_access_key_id=settings.s3_access_key,
            aws_secret_access_key=settings.s3_secret_key,
        )
        self.bucket = settings.s3_bucket
        self.prefix = settings.s3_prefix
        self.ensure_bucket()

    def ensure_bucket(self) -> None:
        """Ensure the S3 bucket exists, create if not present."""
        try:
            self.s3.head_bucket(Bucket=self.bucket)
        except ClientError:
            self.s3.create_bucket(Bucket=self.bucket)

    def object_key(self, key: str) -> str:
        """Prefix a collection key with the configured object prefix."""
        return f"{self.prefix}{key}"

    def read_bytes(self, key: str) -> bytes:
        """Download a document from S3 by key."""
        try:
            obj = self.s3.get_object(Bucket=self.bucket, Key=self.object_key(key))
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in MISSING_KEY_CODES:
                raise FileNotFoundError(key) from exc
            raise
        return obj["Body"].read()

    def write_bytes(self, key: str, data: bytes) -> None:
        """Upload a document to S3 under the given key."""
        self.s3.put_object(Bucket=self.bucket, Key=self.object_key(key), Body=data)

    def exists(self, key: str) -> bool:
        """Check if a document exists in S3 by key."""
        try:
            self.s3.head_object(Bucket=self.bucket, Key=self.object_key(key))
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in MISSING_KEY_CODES:
                return False
            raise
        return True
