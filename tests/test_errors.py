import pytest
from botocore.exceptions import ClientError, NoCredentialsError

from s3_misc.client.errors import classify, translate_errors
from s3_misc.client.exceptions import (
    ConfigurationError,
    Fault,
    RequestFailure,
    S3MiscError,
    ServiceError,
)

def client_error(code="AccessDenied", message="Access Denied", status=403, request_id="req-1"):
    return ClientError(
        {
            "Error": {"Code": code, "Message": message},
            "ResponseMetadata": {"HTTPStatusCode": status, "RequestId": request_id},
        },
        "PutObject",
    )

def test_no_error_classifies_as_none():
    assert classify(None) is None

def test_request_failure_is_returned_as_is():
    err = RequestFailure("NoSuchKey", "gone", 404, "req-2")
    assert classify(err) is err

def test_service_error_is_returned_as_is():
    err = ServiceError("EndpointConnectionError", "could not connect")
    assert classify(err) is err

def test_raw_client_error_is_converted():
    classified = classify(client_error())
    assert isinstance(classified, RequestFailure)
    assert (classified.code, classified.message) == ("AccessDenied", "Access Denied")
    assert (classified.status_code, classified.request_id) == (403, "req-1")

def test_raw_botocore_error_is_converted():
    classified = classify(NoCredentialsError())
    assert isinstance(classified, ServiceError)
    assert not isinstance(classified, RequestFailure)
    assert classified.code == "NoCredentialsError"

@pytest.mark.parametrize("error", [
    RuntimeError("boom"),
    ValueError("bad value"),
    ConfigurationError("no region"),
])
def test_everything_else_is_a_fault(error):
    classified = classify(error)
    assert isinstance(classified, Fault)
    assert classified.error is error

def test_error_codes():
    assert S3MiscError("x").code == "ERR_UNKNOWN"
    assert ConfigurationError("x").code == "ERR_CONFIG"
    assert str(ServiceError("NoSuchBucket", "missing")) == "NoSuchBucket: missing"

def test_translate_errors_names_the_operation():
    @translate_errors
    def head_object():
        raise ClientError({"Error": {"Code": "404", "Message": ""}}, "HeadObject")

    with pytest.raises(RequestFailure) as excinfo:
        head_object()
    assert excinfo.value.message == "HEAD failed"
    assert isinstance(excinfo.value.__cause__, ClientError)

def test_translate_errors_leaves_other_errors_alone():
    @translate_errors
    def put_object():
        raise KeyError("ETag")

    with pytest.raises(KeyError):
        put_object()
