class DashboardError(Exception):
    """Base class for errors raised while syncing dashboards."""


class DiscoveryError(DashboardError):
    """Tagged resource discovery failed; nothing from the run is published."""


class PublishError(DashboardError):
    """A single dashboard could not be written."""

    def __init__(self, dashboard_name, message):
        super().__init__(f"Could not update dashboard '{dashboard_name}': {message}")
        self.dashboard_name = dashboard_name
