from datetime import datetime, timezone

from s3_misc.client.render import string_value
from s3_misc.client.types import (
    CopyObjectOutput,
    CopyObjectResult,
    DeleteObjectOutput,
    HeadObjectOutput,
    ListObjectsOutput,
    ObjectSummary,
    Owner,
    PutObjectOutput,
)

WHEN = datetime(2015, 5, 21, 7, 53, 20, tzinfo=timezone.utc)

def test_put_output():
    text = string_value(PutObjectOutput(etag='"abc"'))
    assert text == '{\n  ETag: "\\"abc\\""\n}'

def test_empty_output_renders_empty_block():
    assert string_value(DeleteObjectOutput()) == "{\n\n}"

def test_head_output():
    text = string_value(HeadObjectOutput(
        content_length=37,
        content_type="binary/octet-stream",
        etag='"abc"',
        last_modified=WHEN,
        accept_ranges="bytes",
    ))
    assert "ContentLength: 37" in text
    assert 'ContentType: "binary/octet-stream"' in text
    assert "LastModified: 2015-05-21 07:53:20 +0000 UTC" in text
    assert 'AcceptRanges: "bytes"' in text
    assert "Metadata: {\n\n  }" in text
    # Unset optional fields are left out
    assert "VersionId" not in text

def test_list_output_nests_summaries():
    listing = ListObjectsOutput(
        name="example-bucket",
        prefix="example-key",
        marker="",
        max_keys=1000,
        is_truncated=False,
        contents=[ObjectSummary(
            key="example-key/path-to-readme.md",
            size=37,
            etag='"abc"',
            last_modified=WHEN,
            storage_class="STANDARD",
            owner=Owner(id="a" * 64, display_name="hogehoge"),
        )],
    )
    text = string_value(listing)
    assert text.startswith("{\n  Name: \"example-bucket\"")
    assert "IsTruncated: false" in text
    assert "Contents: [{\n      Key: \"example-key/path-to-readme.md\"" in text
    assert "        DisplayName: \"hogehoge\"" in text
    assert text.endswith("}")

def test_naive_timestamps_are_treated_as_utc():
    result = CopyObjectOutput(copy_object_result=CopyObjectResult(
        etag='"abc"', last_modified=datetime(2015, 5, 21, 7, 55, 7),
    ))
    assert "LastModified: 2015-05-21 07:55:07 +0000 UTC" in string_value(result)
