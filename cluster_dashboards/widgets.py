"""
Widget layout for the executive and developer dashboards.

Both builders are pure functions of a single ClusterGroup. Positions come
from an immutable LayoutCursor that is threaded through each block, so a
widget's origin is fixed at the moment it is created and no two widgets
in a dashboard can share one.
"""
from dataclasses import dataclass

from cluster_dashboards.arns import cluster_and_service_of, dimension_of

PERIOD = 60
ROW_HEIGHT = 6
FULL_WIDTH = 12
GRID_WIDTH = 8
GRID_COLUMNS = 3


@dataclass(frozen=True)
class LayoutCursor:
    x: int = 0
    y: int = 0
    col: int = 0

    def next_row(self, height=ROW_HEIGHT):
        """Start of the next free row; a cursor already at a row start stays put."""
        if self.col == 0 and self.x == 0:
            return self
        return LayoutCursor(0, self.y + height, 0)

    def below(self, height=ROW_HEIGHT):
        return LayoutCursor(0, self.y + height, 0)

    def advance(self, width=GRID_WIDTH, height=ROW_HEIGHT, columns=GRID_COLUMNS):
        if self.col + 1 == columns:
            return LayoutCursor(0, self.y + height, 0)
        return LayoutCursor(self.x + width, self.y, self.col + 1)


def metric_widget(x, y, width, height, region, title, metrics, stat=None, **extra):
    properties = {
        "region": region,
        "view": "timeSeries",
        "period": PERIOD,
    }
    if stat:
        properties["stat"] = stat
    properties.update(extra)
    properties["title"] = title
    properties["metrics"] = metrics
    return {
        "type": "metric",
        "x": x,
        "y": y,
        "width": width,
        "height": height,
        "properties": properties,
    }


def search_sum(metric_name, cluster_name):
    return (
        "SUM(SEARCH('{AWS/ECS,ClusterName,ServiceName} "
        f'MetricName="{metric_name}" ClusterName="{cluster_name}"\', \'Sum\', {PERIOD}))'
    )


# --- metric query rows ---


def alb_traffic_metrics(load_balancers):
    metrics = []
    for arn in load_balancers:
        lb = dimension_of(arn)
        metrics.append(["AWS/ApplicationELB", "RequestCount", "LoadBalancer", lb])
        metrics.append([".", "HTTPCode_Target_4XX_Count", ".", "."])
        metrics.append([".", "HTTPCode_Target_5XX_Count", ".", "."])
    return metrics


def alb_error_metrics(load_balancers):
    metrics = []
    for arn in load_balancers:
        lb = dimension_of(arn)
        metrics.append(
            ["AWS/ApplicationELB", "HTTPCode_Target_4XX_Count", "LoadBalancer", lb]
        )
        metrics.append([".", "HTTPCode_Target_5XX_Count", ".", "."])
    return metrics


def alb_latency_metrics(load_balancers):
    return [
        [
            "AWS/ApplicationELB",
            "TargetResponseTime",
            "LoadBalancer",
            dimension_of(arn),
            {"stat": "p95"},
        ]
        for arn in load_balancers
    ]


def alb_tls_error_metrics(load_balancers):
    return [
        [
            "AWS/ApplicationELB",
            "ClientTLSNegotiationErrorCount",
            "LoadBalancer",
            dimension_of(arn),
        ]
        for arn in load_balancers
    ]


def ecs_cluster_metrics(ecs_cluster):
    return [
        ["AWS/ECS", "CPUUtilization", "ClusterName", ecs_cluster],
        [".", "MemoryUtilization", ".", "."],
        [".", "RunningTaskCount", ".", "."],
        [".", "DesiredTaskCount", ".", "."],
    ]


def ecs_cluster_tasks_metrics(ecs_cluster):
    return [
        [
            {
                "id": "run",
                "label": "Running (sum across services)",
                "expression": search_sum("RunningTaskCount", ecs_cluster),
            }
        ],
        [
            {
                "id": "des",
                "label": "Desired (sum across services)",
                "expression": search_sum("DesiredTaskCount", ecs_cluster),
            }
        ],
    ]


def service_utilization_metrics(ref):
    return [
        [
            "AWS/ECS",
            "CPUUtilization",
            "ClusterName",
            ref.cluster,
            "ServiceName",
            ref.service,
        ],
        [".", "MemoryUtilization", ".", ".", ".", "."],
    ]


def service_tasks_metrics(ref):
    return [
        [
            "AWS/ECS",
            "RunningTaskCount",
            "ClusterName",
            ref.cluster,
            "ServiceName",
            ref.service,
        ],
        [".", "DesiredTaskCount", ".", ".", ".", "."],
    ]


# --- builders ---


def build_executive_widgets(group, region):
    """Stacked full-width rollup: ALB traffic, ALB p95 latency, ECS utilization."""
    widgets = []
    cursor = LayoutCursor()

    if group.load_balancers:
        widgets.append(
            metric_widget(
                cursor.x,
                cursor.y,
                FULL_WIDTH,
                ROW_HEIGHT,
                region,
                f"{group.cluster_name} – ALB Traffic & Errors",
                alb_traffic_metrics(group.load_balancers),
                stat="Sum",
                stacked=False,
            )
        )
        cursor = cursor.below()

        widgets.append(
            metric_widget(
                cursor.x,
                cursor.y,
                FULL_WIDTH,
                ROW_HEIGHT,
                region,
                f"{group.cluster_name} – Latency (p95)",
                alb_latency_metrics(group.load_balancers),
            )
        )
        cursor = cursor.below()

    if group.services:
        ecs_cluster = cluster_and_service_of(group.services[0]).cluster
        widgets.append(
            metric_widget(
                cursor.x,
                cursor.y,
                FULL_WIDTH,
                ROW_HEIGHT,
                region,
                f"{group.cluster_name} – ECS Utilization & Tasks",
                ecs_cluster_metrics(ecs_cluster),
            )
        )

    return widgets


def _service_grid(services, cursor, region, title_suffix, metrics_for):
    widgets = []
    for arn in services:
        ref = cluster_and_service_of(arn)
        widgets.append(
            metric_widget(
                cursor.x,
                cursor.y,
                GRID_WIDTH,
                ROW_HEIGHT,
                region,
                f"Service – {ref.service} {title_suffix}",
                metrics_for(ref),
            )
        )
        cursor = cursor.advance()
    return widgets, cursor.next_row()


def build_developer_widgets(group, region):
    """
    Detailed per-service view.

    Rows, top to bottom: ALB TLS errors (only with load balancers), ECS
    running vs desired tasks summed by a SEARCH expression, a 3-column grid
    of per-service CPU/memory, a 3-column grid of per-service tasks, and a
    trailing pair of ALB errors / p95 latency (only with load balancers).
    """
    widgets = []
    cursor = LayoutCursor()

    if group.load_balancers:
        widgets.append(
            metric_widget(
                cursor.x,
                cursor.y,
                FULL_WIDTH,
                ROW_HEIGHT,
                region,
                "ALB Client TLS Negotiation Errors",
                alb_tls_error_metrics(group.load_balancers),
                stat="Sum",
            )
        )
        cursor = cursor.below()

    if group.services:
        ecs_cluster = cluster_and_service_of(group.services[0]).cluster
    else:
        ecs_cluster = group.cluster_name
    widgets.append(
        metric_widget(
            cursor.x,
            cursor.y,
            FULL_WIDTH,
            ROW_HEIGHT,
            region,
            f"{ecs_cluster} – ECS Tasks (Running vs Desired)",
            ecs_cluster_tasks_metrics(ecs_cluster),
            stat="Sum",
        )
    )
    cursor = cursor.below()

    block, cursor = _service_grid(
        group.services, cursor, region, "CPU & Memory", service_utilization_metrics
    )
    widgets.extend(block)
    block, cursor = _service_grid(
        group.services, cursor, region, "Tasks", service_tasks_metrics
    )
    widgets.extend(block)

    if group.load_balancers:
        widgets.append(
            metric_widget(
                0,
                cursor.y,
                FULL_WIDTH,
                ROW_HEIGHT,
                region,
                f"{group.cluster_name} – ALB Errors",
                alb_error_metrics(group.load_balancers),
            )
        )
        widgets.append(
            metric_widget(
                FULL_WIDTH,
                cursor.y,
                FULL_WIDTH,
                ROW_HEIGHT,
                region,
                f"{group.cluster_name} – ALB Latency (p95)",
                alb_latency_metrics(group.load_balancers),
            )
        )

    return widgets
