import json

import boto3
import pytest
from moto import mock_aws

from cluster_dashboards import index
from cluster_dashboards.errors import DiscoveryError

from stubs import client_error


def create_alb(name, tags):
    ec2_client = boto3.client("ec2", region_name="us-east-1")
    elbv2_client = boto3.client("elbv2", region_name="us-east-1")
    vpc = ec2_client.create_vpc(CidrBlock="10.0.0.0/16")["Vpc"]["VpcId"]
    subnets = [
        ec2_client.create_subnet(VpcId=vpc, CidrBlock=cidr, AvailabilityZone=az)["Subnet"]["SubnetId"]
        for cidr, az in (("10.0.1.0/24", "us-east-1a"), ("10.0.2.0/24", "us-east-1b"))
    ]
    lb = elbv2_client.create_load_balancer(
        Name=name,
        Subnets=subnets,
        Scheme="internal",
        Type="application",
        Tags=[{"Key": k, "Value": v} for k, v in tags.items()],
    )
    return lb["LoadBalancers"][0]["LoadBalancerArn"]


@mock_aws
def test_handler_builds_dashboards_for_tagged_alb(aws_env, monkeypatch):
    """
    Tests that the Lambda handler discovers a tagged ALB and writes the
    executive and developer dashboards for its cluster.
    """
    # 1. Setup Mock Environment
    monkeypatch.setenv("TAG_KEY", "Team")
    monkeypatch.setenv("TAG_VALUE", "NodeJS")
    monkeypatch.setenv("CLUSTER_TAG_KEY", "Cluster")
    lb_arn = create_alb("web", {"Team": "NodeJS", "Cluster": "prod"})
    lb_dimension = lb_arn.split("loadbalancer/", 1)[1]

    # 2. Execute the Lambda Handler
    response = index.lambda_handler({}, {})

    # 3. Assert the Results
    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {
        "clusters": ["prod"],
        "succeeded": ["prod"],
        "failed": [],
    }

    # 4. Verify the Dashboard Content
    cloudwatch_client = boto3.client("cloudwatch", region_name="us-east-1")
    exec_body = json.loads(cloudwatch_client.get_dashboard(DashboardName="Exec-prod")["DashboardBody"])
    dev_body = json.loads(cloudwatch_client.get_dashboard(DashboardName="Dev-prod")["DashboardBody"])

    assert [w["properties"]["title"] for w in exec_body["widgets"]] == [
        "prod – ALB Traffic & Errors",
        "prod – Latency (p95)",
    ]
    assert ["AWS/ApplicationELB", "RequestCount", "LoadBalancer", lb_dimension] in exec_body["widgets"][0]["properties"]["metrics"]
    assert len(dev_body["widgets"]) == 4


def test_handler_surfaces_discovery_failure(aws_env, monkeypatch):
    class FailingTagging:
        def get_resources(self, **kwargs):
            raise client_error("GetResources")

    class NeverCalledCloudWatch:
        def put_dashboard(self, **kwargs):
            raise AssertionError("nothing should be published")

    def fake_client(service_name, **kwargs):
        if service_name == "resourcegroupstaggingapi":
            return FailingTagging()
        return NeverCalledCloudWatch()

    monkeypatch.setattr(index.boto3, "client", fake_client)

    with pytest.raises(DiscoveryError):
        index.lambda_handler({}, {})
