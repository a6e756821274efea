"""boto3 client construction."""

from __future__ import annotations

import logging
from typing import Any, Optional

import boto3

logger = logging.getLogger(__name__)


def make_client(service: str, region: Optional[str] = None, profile: Optional[str] = None) -> Any:
    """Create a boto3 client, honouring an optional named profile and region."""
    logger.debug("Creating %s client (region=%s, profile=%s)", service, region, profile)
    session = boto3.Session(profile_name=profile) if profile else boto3.Session()
    return session.client(service, region_name=region)
