# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""Typed S3 client used by the s3-misc demo."""
from .client import S3Client
from .session import (
    AmbientCredentialProvider,
    CredentialProvider,
    Credentials,
    EnvironmentCredentialProvider,
    Session,
    StaticCredentialProvider,
)

__all__ = [
    "S3Client",
    "Session",
    "Credentials",
    "CredentialProvider",
    "AmbientCredentialProvider",
    "StaticCredentialProvider",
    "EnvironmentCredentialProvider",
]
