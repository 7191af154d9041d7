import os
from datetime import datetime, timezone

import boto3
import pytest
from botocore.stub import ANY, Stubber

from s3_misc.client import S3Client, Session

README_BODY = b"# s3-misc\n\nexample file for uploads.\n"
ETAG = '"bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"'
COPY_ETAG = '"cccccccccccccccccccccccccccccccc"'
LAST_MODIFIED = datetime(2015, 5, 18, 10, 59, 14, tzinfo=timezone.utc)

def pytest_configure(config):
    """Configure test environment."""
    # Never reach real credentials or a real region from tests
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ.pop("AWS_PROFILE", None)
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")

@pytest.fixture
def readme(tmp_path, monkeypatch):
    """A 37-byte README.md in the working directory."""
    assert len(README_BODY) == 37
    path = tmp_path / "README.md"
    path.write_bytes(README_BODY)
    monkeypatch.chdir(tmp_path)
    return path

@pytest.fixture
def stubbed():
    """S3Client backed by a stubbed boto3 client."""
    raw = boto3.client("s3", region_name="ap-northeast-1")
    stubber = Stubber(raw)
    client = S3Client(session=Session(region="ap-northeast-1"), client=raw)
    with stubber:
        yield client, stubber

def add_happy_path(stubber, bucket="b", prefix="k", size=37, errors=None):
    """
    Queue responses for all five steps.

    ``errors`` maps a method name to keyword arguments for
    ``Stubber.add_client_error``; that step fails instead of succeeding.
    """
    errors = errors or {}

    def add(method, response, expected):
        if method in errors:
            stubber.add_client_error(method, expected_params=expected, **errors[method])
        else:
            stubber.add_response(method, response, expected)

    add(
        "put_object",
        {"ETag": ETAG},
        {"Bucket": bucket, "Key": f"{prefix}/path-to-readme.md", "Body": ANY},
    )
    add(
        "list_objects",
        {
            "Contents": [{
                "Key": f"{prefix}/path-to-readme.md",
                "Size": size,
                "ETag": ETAG,
                "LastModified": LAST_MODIFIED,
                "Owner": {"DisplayName": "hogehoge", "ID": "a" * 64},
                "StorageClass": "STANDARD",
            }],
            "IsTruncated": False,
            "Marker": "",
            "MaxKeys": 1000,
            "Name": bucket,
            "Prefix": prefix,
        },
        {"Bucket": bucket, "Prefix": prefix},
    )
    add(
        "head_object",
        {
            "AcceptRanges": "bytes",
            "ContentLength": size,
            "ContentType": "binary/octet-stream",
            "ETag": ETAG,
            "LastModified": LAST_MODIFIED,
            "Metadata": {},
        },
        {"Bucket": bucket, "Key": f"{prefix}/path-to-readme.md"},
    )
    add(
        "copy_object",
        {"CopyObjectResult": {"ETag": COPY_ETAG, "LastModified": LAST_MODIFIED}},
        {
            "Bucket": bucket,
            "CopySource": f"{bucket}/{prefix}/path-to-readme.md",
            "Key": f"{prefix}/path-to-readme-copy.md",
        },
    )
    add(
        "delete_object",
        {},
        {"Bucket": bucket, "Key": f"{prefix}/path-to-readme-copy.md"},
    )
