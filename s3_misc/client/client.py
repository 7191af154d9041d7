# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Client Module.

This module provides :class:`S3Client`, a thin typed wrapper over the boto3 S3
client. Every method issues exactly one request and returns a dataclass from
:mod:`s3_misc.client.types`; botocore errors are converted to
:class:`~s3_misc.client.exceptions.ServiceError` or
:class:`~s3_misc.client.exceptions.RequestFailure`.

Classes:
    S3Client: Put, list, head, copy and delete objects.
"""
from typing import IO, Optional, Union

from .errors import translate_errors
from .session import Session
from .types import (
    CopyObjectOutput,
    CopyObjectResult,
    DeleteObjectOutput,
    HeadObjectOutput,
    ListObjectsOptions,
    ListObjectsOutput,
    ObjectSummary,
    Owner,
    PutObjectOutput,
)

class S3Client:
    """
    Typed S3 client.

    Args:
        session (Session, optional): Region, endpoint and credentials.
            Defaults to ``Session()``.
        client (optional): A prebuilt boto3 S3 client. When given, ``session``
            is only kept for reference and no new client is built.
    """

    def __init__(self, session: Optional[Session] = None, client=None):
        self.session = session or Session()
        self._client = client if client is not None else self.session.client()

    @property
    def raw(self):
        """The underlying boto3 client."""
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        close = getattr(self._client, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "S3Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @translate_errors
    def put_object(self, bucket: str, key: str, body: Union[bytes, IO[bytes]]) -> PutObjectOutput:
        """
        Create or overwrite an object.

        Args:
            bucket (str): Bucket name.
            key (str): Object key.
            body (bytes | IO[bytes]): Object content, as bytes or an open binary file.

        Returns:
            PutObjectOutput: Carries the ETag of the stored object.
        """
        resp = self._client.put_object(Bucket=bucket, Key=key, Body=body)
        return PutObjectOutput(
            etag=resp.get("ETag", ""),
            version_id=resp.get("VersionId"),
            server_side_encryption=resp.get("ServerSideEncryption"),
        )

    @translate_errors
    def list_objects(self, bucket: str, options: Optional[ListObjectsOptions] = None) -> ListObjectsOutput:
        """
        List one page of objects.

        Only a single request is made. When ``is_truncated`` is set on the
        result, pass ``next_marker`` (or the last key) back as
        ``options.marker`` to fetch the following page.

        Args:
            bucket (str): Bucket name.
            options (ListObjectsOptions, optional): Prefix, marker and page size.

        Returns:
            ListObjectsOutput: The page, in key order.
        """
        params = {"Bucket": bucket}
        if options is not None:
            if options.prefix is not None:
                params["Prefix"] = options.prefix
            if options.marker is not None:
                params["Marker"] = options.marker
            if options.max_keys is not None:
                params["MaxKeys"] = options.max_keys

        resp = self._client.list_objects(**params)
        contents = [
            ObjectSummary(
                key=item["Key"],
                size=item.get("Size", 0),
                etag=item.get("ETag", ""),
                last_modified=item.get("LastModified"),
                storage_class=item.get("StorageClass", ""),
                owner=Owner(
                    id=item["Owner"].get("ID", ""),
                    display_name=item["Owner"].get("DisplayName"),
                ) if "Owner" in item else None,
            )
            for item in resp.get("Contents", [])
        ]
        return ListObjectsOutput(
            name=resp.get("Name", bucket),
            prefix=resp.get("Prefix", ""),
            marker=resp.get("Marker", ""),
            max_keys=resp.get("MaxKeys", 0),
            is_truncated=resp.get("IsTruncated", False),
            contents=contents,
            next_marker=resp.get("NextMarker"),
        )

    @translate_errors
    def head_object(self, bucket: str, key: str) -> HeadObjectOutput:
        """
        Fetch object metadata without the body.

        Args:
            bucket (str): Bucket name.
            key (str): Object key.

        Returns:
            HeadObjectOutput: Length, type, ETag, timestamp and user metadata.
        """
        resp = self._client.head_object(Bucket=bucket, Key=key)
        return HeadObjectOutput(
            content_length=resp.get("ContentLength", 0),
            content_type=resp.get("ContentType", ""),
            etag=resp.get("ETag", ""),
            last_modified=resp.get("LastModified"),
            metadata=dict(resp.get("Metadata", {})),
            accept_ranges=resp.get("AcceptRanges"),
            content_encoding=resp.get("ContentEncoding"),
            content_language=resp.get("ContentLanguage"),
            server_side_encryption=resp.get("ServerSideEncryption"),
            version_id=resp.get("VersionId"),
        )

    @translate_errors
    def copy_object(self, bucket: str, copy_source: str, key: str) -> CopyObjectOutput:
        """
        Copy an object server-side.

        Args:
            bucket (str): Destination bucket.
            copy_source (str): Source as ``<bucket>/<key>``.
            key (str): Destination key.

        Returns:
            CopyObjectOutput: ETag and timestamp of the new copy.
        """
        resp = self._client.copy_object(Bucket=bucket, CopySource=copy_source, Key=key)
        result = resp.get("CopyObjectResult", {})
        return CopyObjectOutput(
            copy_object_result=CopyObjectResult(
                etag=result.get("ETag", ""),
                last_modified=result.get("LastModified"),
            ),
            version_id=resp.get("VersionId"),
            copy_source_version_id=resp.get("CopySourceVersionId"),
        )

    @translate_errors
    def delete_object(self, bucket: str, key: str) -> DeleteObjectOutput:
        """
        Delete an object.

        Args:
            bucket (str): Bucket name.
            key (str): Object key.

        Returns:
            DeleteObjectOutput: Usually empty; set only on versioned buckets.
        """
        resp = self._client.delete_object(Bucket=bucket, Key=key)
        return DeleteObjectOutput(
            delete_marker=resp.get("DeleteMarker"),
            version_id=resp.get("VersionId"),
        )
