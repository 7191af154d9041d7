# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Command-line entry point for the s3-misc demo.

Puts ./README.md, lists, heads, copies and deletes it.

Usage:
    s3-misc --bucket path-to-your-bucket --key example-key
    python -m s3_misc.demo --bucket path-to-your-bucket --key example-key

Credentials are resolved by boto3 (environment, ~/.aws/credentials, instance
role) unless S3_MISC_ACCESS_KEY_ID and S3_MISC_SECRET_ACCESS_KEY are set or a
profile is given with --profile.
"""
import argparse
import os
from dataclasses import dataclass
from typing import List, Optional

from ..client import (
    AmbientCredentialProvider,
    EnvironmentCredentialProvider,
    S3Client,
    Session,
)
from ..client.exceptions import ConfigurationError, SourceFileError
from ..client.session import DEFAULT_REGION
from .runner import DemoRunner, ErrorPolicy
from .utils import configure_logging, default_log_level, logger

DEFAULT_BUCKET = "your-example-bucket-name"
DEFAULT_KEY = "your-example-s3-key-name"

@dataclass
class DemoConfig:
    bucket: str = DEFAULT_BUCKET
    region: str = DEFAULT_REGION
    key: str = DEFAULT_KEY
    endpoint_url: Optional[str] = None
    profile: Optional[str] = None
    policy: ErrorPolicy = ErrorPolicy.CONTINUE
    log_level: str = "INFO"

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s3-misc",
        description="Put README.md, list, head, copy and delete it on S3",
    )
    parser.add_argument("--bucket", default=DEFAULT_BUCKET, help="your example bucket name")
    parser.add_argument("--region", default=DEFAULT_REGION, help="s3 region")
    parser.add_argument("--key", default=DEFAULT_KEY, help="key of s3 path")
    parser.add_argument(
        "--endpoint-url",
        default=os.environ.get("S3_MISC_ENDPOINT_URL"),
        help="endpoint of an S3-compatible store (e.g. MinIO)",
    )
    parser.add_argument("--profile", default=None, help="shared config profile to use")
    parser.add_argument(
        "--on-error",
        choices=[p.value for p in ErrorPolicy],
        default=ErrorPolicy.CONTINUE.value,
        help="keep going or stop after a service error has been logged",
    )
    parser.add_argument("--log-level", default=default_log_level(), help="logging level")
    return parser

def parse_args(argv: Optional[List[str]] = None) -> DemoConfig:
    args = build_parser().parse_args(argv)
    return DemoConfig(
        bucket=args.bucket,
        region=args.region,
        key=args.key,
        endpoint_url=args.endpoint_url,
        profile=args.profile,
        policy=ErrorPolicy(args.on_error),
        log_level=args.log_level.upper(),
    )

def build_client(config: DemoConfig) -> S3Client:
    """
    Build the client for a configuration.

    Raises:
        ConfigurationError: If credentials or the profile cannot be resolved.
    """
    if config.profile:
        provider = AmbientCredentialProvider(profile=config.profile)
    else:
        provider = EnvironmentCredentialProvider()
    session = Session(
        region=config.region,
        credential_provider=provider,
        endpoint_url=config.endpoint_url,
    )
    return S3Client(session=session)

def main(argv: Optional[List[str]] = None, client: Optional[S3Client] = None) -> int:
    """
    Run the demo.

    Returns:
        int: 0 if all five steps succeeded, 1 otherwise. Unclassified errors
        are not caught and end the process with a traceback.
    """
    config = parse_args(argv)
    configure_logging(config.log_level)

    if client is None:
        try:
            client = build_client(config)
        except ConfigurationError as e:
            logger.error(f"[err] {e}")
            return 1

    with client:
        runner = DemoRunner(client, config.bucket, config.key, policy=config.policy)
        try:
            result = runner.run()
        except SourceFileError as e:
            logger.critical(f"[err] {e}")
            return 1

    if not result.ok:
        failed = [o.name for o in result.outcomes if not o.ok]
        logger.error(f"Steps not completed: {', '.join(failed)}")
        return 1
    return 0
