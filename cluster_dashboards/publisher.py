import json
import logging

from botocore.exceptions import BotoCoreError, ClientError

from cluster_dashboards.errors import PublishError

logger = logging.getLogger(__name__)


class DashboardPublisher:
    def __init__(self, cloudwatch_client):
        self.cloudwatch_client = cloudwatch_client

    def publish(self, dashboard_name, widgets):
        """Create or fully replace ``dashboard_name`` with ``widgets``."""
        try:
            response = self.cloudwatch_client.put_dashboard(
                DashboardName=dashboard_name,
                DashboardBody=json.dumps({"widgets": widgets}),
            )
        except (ClientError, BotoCoreError) as e:
            raise PublishError(dashboard_name, e) from e

        for message in response.get("DashboardValidationMessages") or []:
            logger.warning(
                "Dashboard '%s' validation: %s (%s)",
                dashboard_name,
                message.get("Message"),
                message.get("DataPath"),
            )
        logger.info("Updated dashboard: %s (%d widgets)", dashboard_name, len(widgets))
