import logging
from dataclasses import dataclass, field
from typing import Dict, List

from cluster_dashboards.arns import ResourceKind, classify

logger = logging.getLogger(__name__)

UNKNOWN_CLUSTER_NAME = "unknown"


@dataclass
class ClusterGroup:
    """The load balancers and ECS services that share one cluster tag value."""

    cluster_name: str
    load_balancers: List[str] = field(default_factory=list)
    services: List[str] = field(default_factory=list)


def cluster_name_of(tags, cluster_tag_key):
    # An empty-string tag value is kept as-is; only a missing tag is "unknown".
    for tag in tags or []:
        if tag.get("Key") == cluster_tag_key:
            return tag.get("Value", UNKNOWN_CLUSTER_NAME)
    return UNKNOWN_CLUSTER_NAME


def group_by_cluster(mappings, cluster_tag_key) -> Dict[str, ClusterGroup]:
    """
    Partition ResourceTagMappings into ClusterGroups keyed by cluster name.

    Buckets are created the first time a cluster name is seen, so the
    returned dict is in first-occurrence order. Resources that are neither
    ECS services nor load balancers still create their bucket but are not
    added to it.
    """
    clusters: Dict[str, ClusterGroup] = {}
    for mapping in mappings:
        arn = mapping.get("ResourceARN")
        if not arn:
            logger.warning("Skipping resource mapping without an ARN: %s", mapping)
            continue

        name = cluster_name_of(mapping.get("Tags"), cluster_tag_key)
        if name not in clusters:
            clusters[name] = ClusterGroup(cluster_name=name)

        kind = classify(arn)
        if kind is ResourceKind.ECS_SERVICE:
            clusters[name].services.append(arn)
        elif kind is ResourceKind.LOAD_BALANCER:
            clusters[name].load_balancers.append(arn)
        else:
            logger.debug("Ignoring unsupported resource %s", arn)

    for group in clusters.values():
        logger.info(
            "Cluster '%s': %d load balancer(s), %d service(s)",
            group.cluster_name,
            len(group.load_balancers),
            len(group.services),
        )
    return clusters
