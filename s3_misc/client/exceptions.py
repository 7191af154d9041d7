from typing import Optional


class S3MiscError(Exception):
    """Base exception for s3-misc errors."""
    def __init__(self, message: str, code: str = "ERR_UNKNOWN"):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")

class ConfigurationError(S3MiscError):
    """Configuration or credential error."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_CONFIG")

class SourceFileError(S3MiscError):
    """The local source file could not be opened."""
    def __init__(self, path: str, orig_err: OSError):
        self.path = path
        self.orig_err = orig_err
        super().__init__(f"{path}: {orig_err}", code="ERR_SOURCE")

class ServiceError(S3MiscError):
    """Error reported by the SDK or the service, carrying a machine-readable code."""
    def __init__(self, code: str, message: str, orig_err: Optional[BaseException] = None):
        self.orig_err = orig_err
        super().__init__(message, code=code)

class RequestFailure(ServiceError):
    """Request-scoped service error with an HTTP status code and request id."""
    def __init__(
        self,
        code: str,
        message: str,
        status_code: int,
        request_id: str,
        orig_err: Optional[BaseException] = None,
    ):
        self.status_code = status_code
        self.request_id = request_id
        super().__init__(code, message, orig_err=orig_err)

class Fault(Exception):
    """Unclassified error. Raising it ends the run."""
    def __init__(self, error: BaseException):
        self.error = error
        super().__init__(f"unclassified error: {error!r}")
