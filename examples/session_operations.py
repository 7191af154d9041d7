# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
'''
This example runs the put/list/head/copy/delete demo against an S3-compatible
store (for instance a local MinIO) with explicit credentials.

Setup:
    # Start MinIO
    docker run -p 9000:9000 minio/minio server /data

    # Create the bucket and export credentials
    export S3_MISC_ACCESS_KEY_ID=minioadmin
    export S3_MISC_SECRET_ACCESS_KEY=minioadmin

Usage:
    python session_operations.py <bucket> <key-prefix>
'''
import sys

from s3_misc import S3Client, Session
from s3_misc.client import EnvironmentCredentialProvider
from s3_misc.demo import DemoRunner, ErrorPolicy

def main():
    if len(sys.argv) != 3:
        print("Usage: python session_operations.py <bucket> <key-prefix>")
        sys.exit(1)

    bucket, prefix = sys.argv[1:]

    # Create a session pointing at the local endpoint
    session = Session(
        region="us-east-1",
        credential_provider=EnvironmentCredentialProvider(),
        endpoint_url="http://localhost:9000",
    )

    with S3Client(session=session) as client:
        result = DemoRunner(client, bucket, prefix, policy=ErrorPolicy.ABORT).run()

    for outcome in result.outcomes:
        status = "ok" if outcome.ok else ("skipped" if outcome.skipped else f"failed ({outcome.error.code})")
        print(f"{outcome.name}: {status}")
    sys.exit(0 if result.ok else 1)

if __name__ == '__main__':
    main()
