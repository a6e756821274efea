"""Thin boto3 wrappers for the S3 upload and SNS failure alert."""
