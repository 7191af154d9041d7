# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Errors Module.

This module turns botocore exceptions into s3-misc exceptions and classifies
errors for callers that handle every operation the same way.

Functions:
    convert_error: Convert a botocore exception to a ServiceError or RequestFailure.
    translate_errors: Decorator applying convert_error to a client method.
    classify: Sort an error into nothing, a service error, or a fault.
"""
from functools import wraps
from typing import Any, Callable, Optional, Union

from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import Fault, RequestFailure, ServiceError

def _convert_client_error(e: ClientError, operation: str = None) -> RequestFailure:
    """
    Convert a service-side ClientError to a RequestFailure.

    HEAD requests carry no body, so the service only reports the bare status
    ("404", "Not Found"); the operation name fills in the message then.
    """
    error = e.response.get("Error", {})
    meta = e.response.get("ResponseMetadata", {})
    code = str(error.get("Code") or "ERR_UNKNOWN")
    message = error.get("Message") or ""
    if not message and operation:
        message = f"{operation} failed"
    return RequestFailure(
        code=code,
        message=message,
        status_code=int(meta.get("HTTPStatusCode", 0)),
        request_id=meta.get("RequestId", ""),
        orig_err=e,
    )

def convert_error(
    e: Union[ClientError, BotoCoreError], operation: str = None
) -> Union[RequestFailure, ServiceError]:
    """
    Convert botocore errors to s3-misc errors.

    Args:
        e (ClientError | BotoCoreError): The botocore error to convert.
        operation (str, optional): The operation being performed. Defaults to None.

    Returns:
        RequestFailure for errors the service answered with, ServiceError for
        client-side SDK errors such as a refused connection or missing
        credentials.
    """
    if isinstance(e, ClientError):
        return _convert_client_error(e, operation)
    return ServiceError(type(e).__name__, str(e), orig_err=e)

def classify(
    error: Optional[BaseException],
) -> Optional[Union[RequestFailure, ServiceError, Fault]]:
    """
    Classify the outcome of one operation.

    Args:
        error (BaseException, optional): The error raised, or None on success.

    Returns:
        None if there was no error, a ServiceError (RequestFailure when the
        error is request-scoped) if it carries a service code, otherwise a
        Fault wrapping the error.
    """
    if error is None:
        return None
    if isinstance(error, ServiceError):
        return error
    if isinstance(error, (ClientError, BotoCoreError)):
        return convert_error(error)
    if isinstance(error, Fault):
        return error
    return Fault(error)

def translate_errors(func: Callable) -> Callable:
    """
    Decorator converting botocore errors raised by a client method.

    The operation name is derived from the method name, so ``head_object``
    reports as ``HEAD``. Errors that are not botocore errors pass through
    unchanged.
    """
    operation = func.__name__.split("_")[0].upper()

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (ClientError, BotoCoreError) as e:
            raise convert_error(e, operation) from e

    return wrapper
