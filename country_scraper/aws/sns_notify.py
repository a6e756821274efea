"""Publish failure notifications to an SNS topic."""

from __future__ import annotations

import logging
from typing import Any, Optional

from country_scraper.aws.clients import make_client
from country_scraper.scraper.models import Outcome

logger = logging.getLogger(__name__)


def publish_to_sns(
    text: str,
    topic_arn: str,
    client: Optional[Any] = None,
    region: Optional[str] = None,
    profile: Optional[str] = None,
) -> Outcome:
    """Publish ``text`` to ``topic_arn``. Failures are logged, never raised."""
    try:
        sns = client if client is not None else make_client("sns", region, profile)
        sns.publish(TopicArn=topic_arn, Message=text)
    except Exception as e:  # noqa: BLE001
        logger.error("Failed to publish message to SNS Topic: %s", e)
        return Outcome.failure(f"{type(e).__name__}: {e}")

    logger.info("Published notification to %s", topic_arn)
    return Outcome.success()
