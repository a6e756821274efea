"""CLI orchestrator for the country list scraper job."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Awaitable, Callable, Iterable, Optional

import pytz

PROJECT_ROOT = Path(__file__).resolve().parent
PARENT_ROOT = PROJECT_ROOT.parent

if str(PARENT_ROOT) not in sys.path:
    sys.path.insert(0, str(PARENT_ROOT))

from country_scraper import config  # noqa: E402
from country_scraper.aws import s3_upload, sns_notify  # noqa: E402
from country_scraper.errors import ConfigError, JobError  # noqa: E402
from country_scraper.io import save_csv  # noqa: E402
from country_scraper.scraper import country_dom  # noqa: E402
from country_scraper.scraper.models import ScrapedData, UploadTarget  # noqa: E402

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_JOB_FAILED = 1
EXIT_CONFIG_ERROR = 2

Fetcher = Callable[[config.JobConfig], Awaitable[ScrapedData]]


@dataclass
class JobResult:
    ok: bool
    filename: Optional[str] = None
    object_key: Optional[str] = None
    error: Optional[str] = None


def format_failure_message(exc: BaseException) -> str:
    """Return ``Job Failed: {"error": ..., "message": ...}`` for ``exc``."""
    payload = {"error": type(exc).__name__, "message": str(exc)}
    return config.FAILURE_MESSAGE_PREFIX + json.dumps(payload)


def upload_time(job_config: config.JobConfig, now: Optional[datetime] = None) -> datetime:
    """Current time in the configured key timezone, used to date the object key."""
    tz = pytz.timezone(job_config.key_timezone)
    if now is None:
        return datetime.now(tz)
    if now.tzinfo is None:
        return now
    return now.astimezone(tz)


async def run_job(
    job_config: config.JobConfig,
    *,
    fetcher: Fetcher = country_dom.scrape_countries,
    s3_client: Optional[Any] = None,
    sns_client: Optional[Any] = None,
    now: Optional[datetime] = None,
    filename: Optional[str] = None,
) -> JobResult:
    """Scrape, export to CSV and upload once. Notifies SNS if any step fails.

    Disk and boto3 calls block, so they run in a worker thread one at a time.
    """
    csv_filename: Optional[str] = None
    try:
        data = await fetcher(job_config)

        csv_filename = await asyncio.to_thread(
            save_csv.save_country_csv,
            data,
            filename=filename,
            output_dir=job_config.data_dir,
        )
        target = UploadTarget.for_file(
            job_config.s3_bucket_name,
            Path(job_config.data_dir) / csv_filename,
            upload_time(job_config, now),
        )
        logger.info("File key: %s, local file: %s", target.key, target.local_path)

        outcome = await asyncio.to_thread(
            s3_upload.upload_to_s3,
            target.key,
            target.local_path,
            target.bucket,
            client=s3_client,
            region=job_config.aws_region,
            profile=job_config.aws_profile,
        )
        if not outcome:
            raise JobError(f"Upload to s3://{target.bucket}/{target.key} failed: {outcome.error}")
    except Exception as e:  # noqa: BLE001
        logger.exception("Job failed")
        notified = await asyncio.to_thread(
            sns_notify.publish_to_sns,
            format_failure_message(e),
            job_config.sns_topic_arn,
            client=sns_client,
            region=job_config.aws_region,
            profile=job_config.aws_profile,
        )
        if not notified:
            logger.warning("Failure notification was not delivered: %s", notified.error)
        return JobResult(ok=False, filename=csv_filename, error=str(e))

    return JobResult(ok=True, filename=csv_filename, object_key=target.key)


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", default=None, help="Page to scrape (overrides ENTRY_URL).")
    parser.add_argument("--bucket", default=None, help="S3 bucket (overrides S3_BUCKET_NAME).")
    parser.add_argument("--topic", default=None, help="SNS topic ARN (overrides SNS_TOPIC_ARN).")
    parser.add_argument("--filename", default=None, help="CSV filename; random if omitted.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file used when environment variables are unset.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        job_config = load_config_from_args(args)
    except ConfigError as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    result = asyncio.run(run_job(job_config, filename=args.filename))
    if not result.ok:
        return EXIT_JOB_FAILED

    logger.info("Job finished: %s", result.object_key)
    return EXIT_OK


def load_config_from_args(args: argparse.Namespace) -> config.JobConfig:
    return config.load_job_config(
        config_path=args.config,
        entry_url=args.url,
        s3_bucket_name=args.bucket,
        sns_topic_arn=args.topic,
    )


if __name__ == "__main__":
    sys.exit(main())
