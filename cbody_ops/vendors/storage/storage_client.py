"""
Object Storage Client

Handles:
    - Download / upload / delete objects
    - Delete entire folder (prefix), paginated past 1000 objects
    - Presigned GET URLs

Talks S3 protocol to the hosted storage endpoint; bucket names are passed
per call because media moves between buckets.
"""

# Python Packages
import logging

import boto3
from botocore.client import Config

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ExternalServiceException

logger = logging.getLogger(__name__)





class StorageClient:
    """
    S3-compatible storage operations
    """

    def __init__(self):
        """
        Initialize client using environment constants
        """

        self.client = boto3.client(
            "s3",
            endpoint_url = constants.STORAGE_ENDPOINT_URL or None,
            aws_access_key_id = constants.STORAGE_ACCESS_KEY_ID,
            aws_secret_access_key = constants.STORAGE_SECRET_ACCESS_KEY,
            region_name = constants.STORAGE_REGION,
            config = Config(signature_version = "s3v4")
        )


    # ---------------------------------------------------------
    # 🔹 Single Objects
    # ---------------------------------------------------------
    def download(self, bucket: str, key: str) -> bytes:
        """
        Read an object into memory

        Returns:
            bytes
        """

        try:
            response = self.client.get_object(Bucket = bucket, Key = key)
            return response["Body"].read()

        except Exception as e:
            raise ExternalServiceException(
                error_code = "STORAGE_DOWNLOAD_FAILED",
                message = f"Download failed: {bucket}/{key}",
                details = str(e)
            )


    def upload(self, bucket: str, key: str, body: bytes, content_type: str = None):
        """
        Write an object, replacing any existing one
        """

        extra = {"ContentType": content_type} if content_type else {}

        try:
            self.client.put_object(Bucket = bucket, Key = key, Body = body, **extra)

        except Exception as e:
            raise ExternalServiceException(
                error_code = "STORAGE_UPLOAD_FAILED",
                message = f"Upload failed: {bucket}/{key}",
                details = str(e)
            )


    def delete_files(self, bucket: str, keys: list):
        """
        Delete a list of objects in one call
        """

        keys = [key for key in keys if key]
        if not keys:
            return

        try:
            self.client.delete_objects(
                Bucket = bucket,
                Delete = {"Objects": [{"Key": key} for key in keys]}
            )

        except Exception as e:
            raise ExternalServiceException(
                error_code = "STORAGE_DELETE_FAILED",
                message = f"Delete failed in {bucket}",
                details = str(e)
            )


    def create_signed_url(self, bucket: str, key: str, expires_in: int) -> str:
        """
        Presigned GET URL valid for expires_in seconds
        """

        try:
            return self.client.generate_presigned_url(
                "get_object",
                Params = {"Bucket": bucket, "Key": key},
                ExpiresIn = expires_in
            )

        except Exception as e:
            raise ExternalServiceException(
                error_code = "STORAGE_SIGN_FAILED",
                message = "Unable to create signed URL",
                details = str(e)
            )


    # ---------------------------------------------------------
    # 🔹 Folders (Prefix)
    # ---------------------------------------------------------
    def _iter_pages(self, bucket: str, prefix: str):
        continuation_token = None

        while True:
            # List objects
            if continuation_token:
                response = self.client.list_objects_v2(
                    Bucket = bucket,
                    Prefix = prefix,
                    ContinuationToken = continuation_token
                )
            else:
                response = self.client.list_objects_v2(
                    Bucket = bucket,
                    Prefix = prefix
                )

            yield response.get("Contents", [])

            # Check if more objects exist
            if response.get("IsTruncated"):
                continuation_token = response.get("NextContinuationToken")
            else:
                break


    def delete_folder(self, bucket: str, prefix: str) -> int:
        """
        Delete all objects under a given prefix (folder)

        Args:
            prefix (str): e.g. <thread_id>/

        Returns:
            int: number of deleted objects
        """

        deleted = 0

        try:
            for contents in self._iter_pages(bucket, prefix):
                if not contents:
                    break

                # Delete batch
                self.client.delete_objects(
                    Bucket = bucket,
                    Delete = {"Objects": [{"Key": obj["Key"]} for obj in contents]}
                )
                deleted += len(contents)

        except Exception as e:
            raise ExternalServiceException(
                error_code = "STORAGE_DELETE_FAILED",
                message = f"Folder delete failed: {bucket}/{prefix}",
                details = str(e)
            )

        logger.info("🗑️ Deleted %s objects under %s/%s", deleted, bucket, prefix)
        return deleted
