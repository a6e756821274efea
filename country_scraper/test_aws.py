"""Tests for the fail-soft S3 uploader and SNS notifier."""

from __future__ import annotations

from country_scraper.aws import s3_upload, sns_notify


def test_upload_sends_whole_file(tmp_path, s3_client):
    path = tmp_path / "countries.csv"
    path.write_bytes(b"Country\nPeru\n")

    outcome = s3_upload.upload_to_s3("raw/2024/01/02/countries.csv", path, "bucket", client=s3_client)

    assert outcome
    assert s3_client.calls == [
        {"Bucket": "bucket", "Key": "raw/2024/01/02/countries.csv", "Body": b"Country\nPeru\n"}
    ]


def test_upload_client_error_returns_failure(tmp_path, failing_s3_client):
    path = tmp_path / "countries.csv"
    path.write_bytes(b"Country\n")

    outcome = s3_upload.upload_to_s3("k", path, "bucket", client=failing_s3_client)

    assert not outcome
    assert "ClientError" in outcome.error


def test_upload_missing_file_returns_failure(tmp_path, s3_client):
    outcome = s3_upload.upload_to_s3("k", tmp_path / "absent.csv", "bucket", client=s3_client)

    assert not outcome
    assert s3_client.calls == []


def test_publish_sends_message(sns_client):
    outcome = sns_notify.publish_to_sns("Job Failed: {}", "arn:topic", client=sns_client)

    assert outcome
    assert sns_client.calls == [{"TopicArn": "arn:topic", "Message": "Job Failed: {}"}]


def test_publish_client_error_returns_failure(failing_sns_client):
    outcome = sns_notify.publish_to_sns("text", "arn:topic", client=failing_sns_client)

    assert not outcome
    assert "AccessDenied" in outcome.error


def test_publish_client_construction_error_returns_failure(monkeypatch):
    def broken_client(*args, **kwargs):
        raise RuntimeError("no credentials")

    monkeypatch.setattr(sns_notify, "make_client", broken_client)

    outcome = sns_notify.publish_to_sns("text", "arn:topic")

    assert not outcome
    assert "no credentials" in outcome.error
