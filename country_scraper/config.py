"""Configuration constants and job settings for the country scraper."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import pytz
from dotenv import load_dotenv

from country_scraper.errors import ConfigError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Project metadata
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config.json"

# ---------------------------------------------------------------------------
# Default Playwright settings
# ---------------------------------------------------------------------------

PLAYWRIGHT_HEADLESS = True
# Chrome refuses to start as root inside most containers without these.
PLAYWRIGHT_LAUNCH_ARGS = (
    "--disable-gpu",
    "--disable-dev-shm-usage",
    "--disable-setuid-sandbox",
    "--no-sandbox",
)
PLAYWRIGHT_VIEWPORT = {"width": 1440, "height": 900}
PLAYWRIGHT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/123.0.0.0 Safari/537.36"
)
PLAYWRIGHT_LOCALE = "en-US"
PLAYWRIGHT_DEFAULT_TIMEOUT_MS = 60_000
PLAYWRIGHT_NAVIGATION_TIMEOUT_MS = 90_000

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

DATA_DIR = Path("data")
COUNTRY_COLUMN = "Country"
OBJECT_KEY_PREFIX = "raw"
OBJECT_KEY_DATE_FORMAT = "%Y/%m/%d"
DEFAULT_KEY_TIMEZONE = "UTC"

FAILURE_MESSAGE_PREFIX = "Job Failed: "


@dataclass
class JobConfig:
    """Settings resolved once at startup and handed to every step."""

    entry_url: str
    sns_topic_arn: str
    s3_bucket_name: str
    aws_region: Optional[str] = None
    aws_profile: Optional[str] = None
    browser_executable_path: Optional[str] = None
    data_dir: Path = field(default_factory=lambda: DATA_DIR)
    key_timezone: str = DEFAULT_KEY_TIMEZONE


def read_config_file(config_path: Optional[Path] = None) -> dict:
    """Load the JSON fallback configuration. A missing file yields ``{}``."""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        if config_path:
            raise ConfigError(f"Config file not found: {path}")
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name) or {}
    return section if isinstance(section, Mapping) else {}


def load_job_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> JobConfig:
    """
    Build a ``JobConfig`` from overrides, environment variables and the JSON file.

    Precedence: explicit keyword overrides, then environment variables, then
    the config file. A ``.env`` file in the working directory is loaded into
    ``os.environ`` first unless a custom ``environ`` mapping is supplied.

    Raises:
        ConfigError: if the entry URL, bucket or topic cannot be resolved, or
            the key timezone is not a known IANA zone.
    """
    if environ is None:
        load_dotenv(Path.cwd() / ".env", override=False)
        environ = os.environ

    file_data = read_config_file(config_path)
    scraper_section = _section(file_data, "SCRAPER")
    aws_section = _section(file_data, "AWS")

    def pick(override_key: str, env_key: str, fallback: Any = None) -> Any:
        value = overrides.get(override_key)
        if value is not None:
            return value
        value = environ.get(env_key)
        if value:
            return value
        return fallback

    values = {
        "entry_url": pick("entry_url", "ENTRY_URL", scraper_section.get("ENTRY_URL")),
        "sns_topic_arn": pick("sns_topic_arn", "SNS_TOPIC_ARN", aws_section.get("SNS_TOPIC_ARN")),
        "s3_bucket_name": pick("s3_bucket_name", "S3_BUCKET_NAME", aws_section.get("S3_BUCKET_NAME")),
    }
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")

    job_config = JobConfig(
        **values,
        aws_region=pick("aws_region", "AWS_REGION", aws_section.get("REGION")),
        aws_profile=pick("aws_profile", "AWS_PROFILE"),
        browser_executable_path=pick(
            "browser_executable_path",
            "CHROME_EXECUTABLE_PATH",
            scraper_section.get("EXECUTABLE_PATH"),
        ),
        data_dir=Path(pick("data_dir", "DATA_DIR", DATA_DIR)),
        key_timezone=pick("key_timezone", "KEY_TIMEZONE", DEFAULT_KEY_TIMEZONE),
    )

    try:
        pytz.timezone(job_config.key_timezone)
    except pytz.UnknownTimeZoneError as e:
        raise ConfigError(f"Unknown key timezone: {job_config.key_timezone}") from e

    logger.info("Entry URL: %s", job_config.entry_url)
    logger.info("SNS Topic ARN: %s", job_config.sns_topic_arn)
    logger.info("S3 Bucket Name: %s", job_config.s3_bucket_name)
    return job_config
