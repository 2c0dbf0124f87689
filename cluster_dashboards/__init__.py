"""Per-cluster CloudWatch dashboards for tagged ALBs and ECS services."""

__version__ = "0.1.0"
