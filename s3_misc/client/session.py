# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Session Module.

This module resolves credentials and builds the boto3 S3 client used by
:class:`s3_misc.client.S3Client`. Credentials come from a pluggable provider
handed to the session at construction time rather than from a hidden global
lookup.

Classes:
    Credentials: Access key pair plus optional session token.
    CredentialProvider: Protocol for anything that can supply credentials.
    AmbientCredentialProvider: Defers to the boto3 default credential chain.
    StaticCredentialProvider: Always returns the same credentials.
    EnvironmentCredentialProvider: Reads S3_MISC_* environment variables.
    Session: Region, endpoint and credential provider for one client.
"""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from .exceptions import ConfigurationError

DEFAULT_REGION = "ap-northeast-1"

@dataclass(frozen=True)
class Credentials:
    """Static credentials for the object store."""
    access_key_id: str
    secret_access_key: str
    session_token: Optional[str] = None

    def __repr__(self) -> str:
        return f"Credentials(access_key_id={self.access_key_id!r}, secret_access_key='***')"

class CredentialProvider(Protocol):
    def load(self) -> Optional[Credentials]:
        """Return credentials, or None to use the ambient boto3 chain."""
        ...

class AmbientCredentialProvider:
    """
    Use whatever boto3 finds on its own: environment variables,
    ``~/.aws/credentials``, the shared config file or an instance role.

    Args:
        profile (str, optional): Named profile from the shared config files.
    """
    def __init__(self, profile: Optional[str] = None):
        self.profile = profile

    def load(self) -> Optional[Credentials]:
        return None

class StaticCredentialProvider:
    """Return a fixed set of credentials."""
    def __init__(self, credentials: Credentials):
        self._credentials = credentials

    def load(self) -> Optional[Credentials]:
        return self._credentials

class EnvironmentCredentialProvider:
    """
    Read credentials from ``S3_MISC_ACCESS_KEY_ID``, ``S3_MISC_SECRET_ACCESS_KEY``
    and ``S3_MISC_SESSION_TOKEN``.

    Returns None when neither key is set so the ambient chain applies.

    Raises:
        ConfigurationError: If only one half of the key pair is set.
    """
    PREFIX = "S3_MISC_"

    def __init__(self, environ=None):
        self._environ = os.environ if environ is None else environ

    def load(self) -> Optional[Credentials]:
        access_key = self._environ.get(f"{self.PREFIX}ACCESS_KEY_ID")
        secret_key = self._environ.get(f"{self.PREFIX}SECRET_ACCESS_KEY")
        if not access_key and not secret_key:
            return None
        if not access_key or not secret_key:
            raise ConfigurationError(
                f"both {self.PREFIX}ACCESS_KEY_ID and {self.PREFIX}SECRET_ACCESS_KEY must be set"
            )
        return Credentials(
            access_key_id=access_key,
            secret_access_key=secret_key,
            session_token=self._environ.get(f"{self.PREFIX}SESSION_TOKEN"),
        )

class Session:
    """
    Connection settings for one S3 client.

    Args:
        region (str): Service region. Defaults to ``ap-northeast-1``.
        credential_provider (CredentialProvider, optional): Source of credentials.
            Defaults to :class:`AmbientCredentialProvider`.
        endpoint_url (str, optional): Endpoint of an S3-compatible store such as MinIO.
    """
    def __init__(
        self,
        region: str = DEFAULT_REGION,
        credential_provider: Optional[CredentialProvider] = None,
        endpoint_url: Optional[str] = None,
    ):
        self.region = region
        self.credential_provider = credential_provider or AmbientCredentialProvider()
        self.endpoint_url = endpoint_url

    def _boto_session(self) -> boto3.session.Session:
        credentials = self.credential_provider.load()
        if credentials is not None:
            return boto3.session.Session(
                aws_access_key_id=credentials.access_key_id,
                aws_secret_access_key=credentials.secret_access_key,
                aws_session_token=credentials.session_token,
                region_name=self.region,
            )
        profile = getattr(self.credential_provider, "profile", None)
        return boto3.session.Session(profile_name=profile, region_name=self.region)

    def client(self):
        """
        Build a boto3 S3 client.

        The SDK's own retries are switched off; every request is issued once.

        Raises:
            ConfigurationError: If the credential provider or profile is invalid.
        """
        try:
            session = self._boto_session()
            return session.client(
                "s3",
                endpoint_url=self.endpoint_url,
                config=Config(retries={"total_max_attempts": 1, "mode": "standard"}),
            )
        except BotoCoreError as e:
            raise ConfigurationError(str(e)) from e
