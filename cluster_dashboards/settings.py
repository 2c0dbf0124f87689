import os


class Settings:
    """
    Runtime configuration read from environment variables, with defaults
    suitable for local runs.
    """

    def __init__(self, environ=None):
        env = os.environ if environ is None else environ
        self.region: str = env.get("AWS_REGION", "us-east-1")
        self.tag_key: str = env.get("TAG_KEY", "Team")
        self.tag_value: str = env.get("TAG_VALUE", "NodeJS")
        # Grouping uses the discovery tag unless a separate cluster tag is set.
        self.cluster_tag_key: str = env.get("CLUSTER_TAG_KEY", self.tag_key)
        self.exec_prefix: str = env.get("DASHBOARD_EXEC_PREFIX", "Exec-")
        self.dev_prefix: str = env.get("DASHBOARD_DEV_PREFIX", "Dev-")
        self.log_level: str = env.get("LOG_LEVEL", "INFO").upper()

    def exec_dashboard_name(self, cluster_name):
        return f"{self.exec_prefix}{cluster_name}"

    def dev_dashboard_name(self, cluster_name):
        return f"{self.dev_prefix}{cluster_name}"
