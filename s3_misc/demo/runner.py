# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Demo runner.

Runs the fixed put, list, head, copy and delete sequence against one bucket
and prints every response as it arrives. Each step issues a single request;
nothing is retried and nothing is rolled back.
"""
import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from ..client.errors import classify
from ..client.exceptions import Fault, RequestFailure, ServiceError, SourceFileError
from ..client.render import string_value
from ..client.types import (
    CopyObjectOutput,
    DeleteObjectOutput,
    HeadObjectOutput,
    ListObjectsOptions,
    ListObjectsOutput,
    PutObjectOutput,
)
from .utils import logger, time_function, trace_op

SOURCE_FILE = "./README.md"
UPLOAD_NAME = "path-to-readme.md"
COPY_NAME = "path-to-readme-copy.md"

class ErrorPolicy(Enum):
    """What to do after a service error has been logged."""
    CONTINUE = "continue"
    ABORT = "abort"

@dataclass
class StepOutcome:
    name: str
    result: Any = None
    error: Optional[ServiceError] = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.skipped

@dataclass
class RunResult:
    outcomes: List[StepOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    def outcome(self, name: str) -> StepOutcome:
        return next(o for o in self.outcomes if o.name == name)

def upload_key(prefix: str) -> str:
    return f"{prefix}/{UPLOAD_NAME}"

def copy_key(prefix: str) -> str:
    return f"{prefix}/{COPY_NAME}"

def copy_source(bucket: str, prefix: str) -> str:
    return f"{bucket}/{upload_key(prefix)}"

class DemoRunner:
    """
    Object storage demo runner.

    Args:
        client (S3Client): Client the requests go through.
        bucket (str): Target bucket.
        key_prefix (str): Prefix both object keys are built from.
        source_path (str): File to upload. Defaults to ``./README.md``.
        policy (ErrorPolicy): Whether a logged service error stops the run.
        out (IO[str], optional): Where responses are printed. Defaults to stdout.
    """

    STEPS = ("upload", "list", "describe", "duplicate", "remove")

    def __init__(
        self,
        client,
        bucket: str,
        key_prefix: str,
        source_path: str = SOURCE_FILE,
        policy: ErrorPolicy = ErrorPolicy.CONTINUE,
        out=None,
    ):
        self.client = client
        self.bucket = bucket
        self.key_prefix = key_prefix
        self.source_path = source_path
        self.policy = policy
        self._out = out

    @property
    def out(self):
        return self._out or sys.stdout

    @property
    def upload_key(self) -> str:
        return upload_key(self.key_prefix)

    @property
    def copy_key(self) -> str:
        return copy_key(self.key_prefix)

    def upload(self) -> PutObjectOutput:
        """
        Upload the source file.

        The file is opened before any request is made and closed as soon as
        the upload returns, whether it succeeded or not.

        Raises:
            SourceFileError: If the source file cannot be opened.
        """
        try:
            f = open(self.source_path, "rb")
        except OSError as e:
            raise SourceFileError(self.source_path, e) from e
        with f:
            trace_op("PUT", self.upload_key, bucket=self.bucket, source=self.source_path)
            return self.client.put_object(self.bucket, self.upload_key, f)

    def list_prefix(self) -> ListObjectsOutput:
        # First page only, even when the listing is truncated.
        trace_op("LIST", self.key_prefix, bucket=self.bucket)
        return self.client.list_objects(self.bucket, ListObjectsOptions(prefix=self.key_prefix))

    def describe(self) -> HeadObjectOutput:
        trace_op("HEAD", self.upload_key, bucket=self.bucket)
        return self.client.head_object(self.bucket, self.upload_key)

    def duplicate(self) -> CopyObjectOutput:
        source = copy_source(self.bucket, self.key_prefix)
        trace_op("COPY", self.copy_key, bucket=self.bucket, source=source)
        return self.client.copy_object(self.bucket, source, self.copy_key)

    def remove(self) -> DeleteObjectOutput:
        trace_op("DELETE", self.copy_key, bucket=self.bucket)
        return self.client.delete_object(self.bucket, self.copy_key)

    def handle_error(self, step: str, error: Optional[BaseException]) -> Optional[ServiceError]:
        """
        Log a classified error, or raise it if it cannot be classified.

        Args:
            step (str): Name of the step that failed.
            error (BaseException, optional): What the step raised.

        Returns:
            ServiceError: The logged error, or None if there was none.

        Raises:
            Fault: If the error carries no service code.
        """
        classified = classify(error)
        if classified is None:
            return None
        if isinstance(classified, Fault):
            logger.critical(f"{step}: {classified.error!r}")
            raise classified from classified.error

        logger.error(f"{step}: {classified.code} {classified.message} {classified} {classified.orig_err}")
        if isinstance(classified, RequestFailure):
            logger.error(f"{step}: {classified.status_code} {classified.request_id}")
        return classified

    def run(self) -> RunResult:
        """
        Run all five steps in order.

        Returns:
            RunResult: One outcome per step.

        Raises:
            SourceFileError: If the source file cannot be opened.
            Fault: On the first unclassified error.
        """
        actions = {
            "upload": self.upload,
            "list": self.list_prefix,
            "describe": self.describe,
            "duplicate": self.duplicate,
            "remove": self.remove,
        }
        result = RunResult()
        aborted = False

        for name in self.STEPS:
            if aborted:
                result.outcomes.append(StepOutcome(name, skipped=True))
                continue

            start_time = time.time()
            try:
                response = actions[name]()
            except SourceFileError:
                raise
            except Exception as e:
                error = self.handle_error(name, e)
                result.outcomes.append(StepOutcome(name, error=error))
                if self.policy is ErrorPolicy.ABORT:
                    logger.warning(f"Stopping after failed {name} step")
                    aborted = True
                continue
            time_function(name, start_time)

            print(string_value(response), file=self.out, flush=True)
            result.outcomes.append(StepOutcome(name, result=response))

        return result
