"""boto3 client factory for the order service (DynamoDB + S3).

Clients are created once per process and shared; boto3 clients are safe to
use from multiple threads.
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError

from config.settings import Settings
from src.sf_common.errors import ConfigurationError

logger = logging.getLogger(__name__)


def create_aws_clients(settings: Settings) -> tuple[Any, Any]:
    """Return (dynamodb_client, s3_client). Raises ConfigurationError if no region resolves."""
    session = boto3.Session(region_name=settings.AWS_REGION)
    if session.region_name is None:
        raise ConfigurationError(
            "unable to load SDK config: no AWS region (set AWS_REGION)"
        )
    try:
        dynamodb = session.client("dynamodb", endpoint_url=settings.AWS_ENDPOINT_URL)
        s3 = session.client("s3", endpoint_url=settings.AWS_ENDPOINT_URL)
    except BotoCoreError as exc:
        raise ConfigurationError(f"unable to load SDK config: {exc}") from exc
    logger.info("AWS clients ready (region=%s)", session.region_name)
    return dynamodb, s3
