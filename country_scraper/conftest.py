"""Shared fixtures: recording stand-ins for the boto3 S3 and SNS clients."""

from __future__ import annotations

import pytest
from botocore.exceptions import ClientError


def client_error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}},
        operation,
    )


class RecordingS3:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def put_object(self, **kwargs):
        self.calls.append(kwargs)
        if self.fail:
            raise client_error("PutObject")
        return {"ETag": '"abc"'}


class RecordingSNS:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def publish(self, **kwargs):
        self.calls.append(kwargs)
        if self.fail:
            raise client_error("Publish")
        return {"MessageId": "1"}


@pytest.fixture
def s3_client():
    return RecordingS3()


@pytest.fixture
def failing_s3_client():
    return RecordingS3(fail=True)


@pytest.fixture
def sns_client():
    return RecordingSNS()


@pytest.fixture
def failing_sns_client():
    return RecordingSNS(fail=True)
