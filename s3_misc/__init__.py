# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from .client import S3Client, Session

__version__ = "0.1.0"

__all__ = ["S3Client", "Session"]
