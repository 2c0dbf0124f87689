import json
import logging

import boto3
from botocore.config import Config

from cluster_dashboards.discovery import ResourceDiscovery
from cluster_dashboards.errors import DiscoveryError
from cluster_dashboards.publisher import DashboardPublisher
from cluster_dashboards.settings import Settings
from cluster_dashboards.synchronizer import DashboardSynchronizer

retry_config = Config(retries={"max_attempts": 5, "mode": "standard"})

logger = logging.getLogger()
if not logger.handlers:
    logging.basicConfig()


def configure_logging(settings):
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))


def build_synchronizer(settings):
    tagging_client = boto3.client(
        "resourcegroupstaggingapi", region_name=settings.region, config=retry_config
    )
    cloudwatch_client = boto3.client(
        "cloudwatch", region_name=settings.region, config=retry_config
    )
    return DashboardSynchronizer(
        ResourceDiscovery(tagging_client),
        DashboardPublisher(cloudwatch_client),
        settings,
    )


def lambda_handler(event, context):
    settings = Settings()
    configure_logging(settings)
    logger.info(
        "Syncing dashboards for resources tagged %s=%s (cluster tag: %s)",
        settings.tag_key,
        settings.tag_value,
        settings.cluster_tag_key,
    )
    try:
        summary = build_synchronizer(settings).run()
    except DiscoveryError as e:
        logger.error("FATAL: %s", e)
        raise
    return {"statusCode": 200, "body": json.dumps(summary.to_dict())}
