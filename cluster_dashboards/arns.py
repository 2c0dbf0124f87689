"""Lightweight ARN parsing for load balancers and ECS services.

None of these helpers raise on malformed input. Missing pieces come back
as visible sentinel values so a bad ARN ends up in a labelled bucket
instead of aborting the run.
"""
import enum
from typing import NamedTuple

LOAD_BALANCER_MARKER = "loadbalancer/"
UNKNOWN_CLUSTER = "unknown-cluster"
UNKNOWN_SERVICE = "unknown-service"


class ResourceKind(enum.Enum):
    ECS_SERVICE = "ecs_service"
    LOAD_BALANCER = "load_balancer"
    OTHER = "other"


class ServiceRef(NamedTuple):
    cluster: str
    service: str


def dimension_of(load_balancer_arn: str) -> str:
    """Return the `LoadBalancer` dimension value, e.g. ``app/web/abc``."""
    idx = load_balancer_arn.find(LOAD_BALANCER_MARKER)
    if idx == -1:
        return load_balancer_arn
    return load_balancer_arn[idx + len(LOAD_BALANCER_MARKER):]


def cluster_and_service_of(service_arn: str) -> ServiceRef:
    # arn:aws:ecs:region:account:service/<cluster>/<service>
    parts = service_arn.split("/")
    cluster = parts[1] if len(parts) > 1 and parts[1] else UNKNOWN_CLUSTER
    service = parts[2] if len(parts) > 2 and parts[2] else UNKNOWN_SERVICE
    return ServiceRef(cluster, service)


def classify(arn: str) -> ResourceKind:
    if ":ecs:" in arn and "service/" in arn:
        return ResourceKind.ECS_SERVICE
    if ":elasticloadbalancing:" in arn and LOAD_BALANCER_MARKER in arn:
        return ResourceKind.LOAD_BALANCER
    return ResourceKind.OTHER
