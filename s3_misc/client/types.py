from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

# Every field carries the service's own name so results print the way the
# service documents them.
def _s3(name: str, **kwargs):
    return field(metadata={"s3": name}, **kwargs)

@dataclass
class PutObjectOutput:
    """Result of uploading an object."""
    etag: str = _s3("ETag")
    version_id: Optional[str] = _s3("VersionId", default=None)
    server_side_encryption: Optional[str] = _s3("ServerSideEncryption", default=None)

@dataclass
class Owner:
    """Owner of a listed object."""
    id: str = _s3("ID")
    display_name: Optional[str] = _s3("DisplayName", default=None)

@dataclass
class ObjectSummary:
    """One entry of a listing."""
    key: str = _s3("Key")
    size: int = _s3("Size")
    etag: str = _s3("ETag")
    last_modified: datetime = _s3("LastModified")
    storage_class: str = _s3("StorageClass")
    owner: Optional[Owner] = _s3("Owner", default=None)

@dataclass
class ListObjectsOutput:
    """A single page of objects under a prefix."""
    name: str = _s3("Name")
    prefix: str = _s3("Prefix")
    marker: str = _s3("Marker")
    max_keys: int = _s3("MaxKeys")
    is_truncated: bool = _s3("IsTruncated")
    contents: List[ObjectSummary] = _s3("Contents", default_factory=list)
    next_marker: Optional[str] = _s3("NextMarker", default=None)

    @property
    def count(self) -> int:
        return len(self.contents)

@dataclass
class ListObjectsOptions:
    """Options for listing objects."""
    prefix: Optional[str] = None
    marker: Optional[str] = None
    max_keys: Optional[int] = None

@dataclass
class HeadObjectOutput:
    """Metadata for an object."""
    content_length: int = _s3("ContentLength")
    content_type: str = _s3("ContentType")
    etag: str = _s3("ETag")
    last_modified: datetime = _s3("LastModified")
    metadata: Dict[str, str] = _s3("Metadata", default_factory=dict)
    accept_ranges: Optional[str] = _s3("AcceptRanges", default=None)
    content_encoding: Optional[str] = _s3("ContentEncoding", default=None)
    content_language: Optional[str] = _s3("ContentLanguage", default=None)
    server_side_encryption: Optional[str] = _s3("ServerSideEncryption", default=None)
    version_id: Optional[str] = _s3("VersionId", default=None)

@dataclass
class CopyObjectResult:
    """ETag and timestamp of a freshly written copy."""
    etag: str = _s3("ETag")
    last_modified: datetime = _s3("LastModified")

@dataclass
class CopyObjectOutput:
    """Result of copying an object."""
    copy_object_result: CopyObjectResult = _s3("CopyObjectResult")
    version_id: Optional[str] = _s3("VersionId", default=None)
    copy_source_version_id: Optional[str] = _s3("CopySourceVersionId", default=None)

@dataclass
class DeleteObjectOutput:
    """Acknowledgement of a delete. Usually empty."""
    delete_marker: Optional[bool] = _s3("DeleteMarker", default=None)
    version_id: Optional[str] = _s3("VersionId", default=None)
