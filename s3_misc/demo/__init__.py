# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""Put/list/head/copy/delete demo built on :class:`s3_misc.client.S3Client`."""
from .runner import DemoRunner, ErrorPolicy, RunResult, StepOutcome

__all__ = ["DemoRunner", "ErrorPolicy", "RunResult", "StepOutcome"]
