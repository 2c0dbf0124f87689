import logging
from dataclasses import asdict, dataclass, field
from typing import List

from cluster_dashboards.errors import PublishError
from cluster_dashboards.grouping import group_by_cluster
from cluster_dashboards.widgets import build_developer_widgets, build_executive_widgets

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    clusters: List[str] = field(default_factory=list)
    succeeded: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    def to_dict(self):
        return asdict(self)


class DashboardSynchronizer:
    """
    One discovery-to-dashboard run.

    Discovery runs once and any DiscoveryError propagates before a single
    dashboard is written. Publishing is isolated per dashboard: a
    PublishError is logged and recorded in the summary, and the remaining
    dashboards and clusters are still processed.
    """

    def __init__(self, discovery, publisher, settings):
        self.discovery = discovery
        self.publisher = publisher
        self.settings = settings

    def run(self):
        s = self.settings
        mappings = self.discovery.discover(s.tag_key, s.tag_value)
        clusters = group_by_cluster(mappings, s.cluster_tag_key)

        summary = RunSummary()
        for cluster_name, group in clusters.items():
            summary.clusters.append(cluster_name)
            dashboards = [
                (
                    s.exec_dashboard_name(cluster_name),
                    build_executive_widgets(group, s.region),
                ),
                (
                    s.dev_dashboard_name(cluster_name),
                    build_developer_widgets(group, s.region),
                ),
            ]
            ok = True
            for name, widgets in dashboards:
                try:
                    self.publisher.publish(name, widgets)
                except PublishError as e:
                    logger.error("%s", e)
                    summary.failed.append(name)
                    ok = False
            if ok:
                summary.succeeded.append(cluster_name)
                logger.info("Dashboards updated for cluster: %s", cluster_name)

        logger.info(
            "Processed %d cluster(s); succeeded: %s; failed dashboards: %s",
            len(summary.clusters),
            summary.succeeded,
            summary.failed,
        )
        return summary
