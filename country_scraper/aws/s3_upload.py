"""Upload locally stored files to an S3 bucket."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from country_scraper.aws.clients import make_client
from country_scraper.scraper.models import Outcome

logger = logging.getLogger(__name__)


def upload_to_s3(
    key: str,
    file_location: Path,
    bucket_name: str,
    client: Optional[Any] = None,
    region: Optional[str] = None,
    profile: Optional[str] = None,
) -> Outcome:
    """
    Upload the file at ``file_location`` to ``s3://bucket_name/key``.

    The whole file is read into memory and sent with a single ``put_object``.
    Never raises: any failure is logged and returned as ``Outcome.failure``.

    Args:
        key: Object key inside the bucket
        file_location: Local path of the file to upload
        bucket_name: Target bucket
        client: Optional pre-built S3 client
        region: Region for a client built here
        profile: Named AWS profile for a client built here

    Returns:
        Outcome describing whether the upload succeeded
    """
    try:
        body = Path(file_location).read_bytes()
        s3 = client if client is not None else make_client("s3", region, profile)
        s3.put_object(Bucket=bucket_name, Key=key, Body=body)
    except Exception as e:  # noqa: BLE001
        logger.error("Error in uploading file to S3: %s", e)
        return Outcome.failure(f"{type(e).__name__}: {e}")

    logger.info("Uploaded %s to s3://%s/%s", file_location, bucket_name, key)
    return Outcome.success()
