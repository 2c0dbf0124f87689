"""Run one sync locally: ``python -m cluster_dashboards``."""
import json
import sys

from cluster_dashboards.errors import DiscoveryError
from cluster_dashboards.index import lambda_handler


def main():
    try:
        result = lambda_handler({}, None)
    except DiscoveryError:
        return 1
    print(json.dumps(json.loads(result["body"]), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
