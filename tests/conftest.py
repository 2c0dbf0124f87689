import os

import pytest


@pytest.fixture
def aws_env(monkeypatch):
    """Mock AWS credentials and the Lambda's common environment variables."""
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    for name in ("TAG_KEY", "TAG_VALUE", "CLUSTER_TAG_KEY", "DASHBOARD_EXEC_PREFIX", "DASHBOARD_DEV_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    return os.environ
