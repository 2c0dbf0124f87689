import logging

from botocore.exceptions import BotoCoreError, ClientError

from cluster_dashboards.errors import DiscoveryError

logger = logging.getLogger(__name__)

RESOURCES_PER_PAGE = 50


class ResourceDiscovery:
    """Crawls the Resource Groups Tagging API for resources with a given tag."""

    def __init__(self, tagging_client, page_size=RESOURCES_PER_PAGE):
        self.tagging_client = tagging_client
        self.page_size = page_size

    def discover(self, tag_key, tag_value):
        """
        Return every ResourceTagMapping carrying ``tag_key=tag_value``.

        Pages are concatenated in the order they arrive. Any API failure,
        on any page, raises DiscoveryError; a partial list is never returned.
        """
        resources, token, pages = [], "", 0
        while True:
            request = {
                "TagFilters": [{"Key": tag_key, "Values": [tag_value]}],
                "ResourcesPerPage": self.page_size,
            }
            if token:
                request["PaginationToken"] = token
            try:
                response = self.tagging_client.get_resources(**request)
            except (ClientError, BotoCoreError) as e:
                raise DiscoveryError(
                    f"get_resources failed on page {pages + 1} for tag {tag_key}={tag_value}: {e}"
                ) from e
            pages += 1
            page = response.get("ResourceTagMappingList") or []
            logger.debug("Page %d returned %d resource(s)", pages, len(page))
            resources.extend(page)
            token = response.get("PaginationToken", "")
            if not token:
                break
        logger.info(
            "Discovered %d resource(s) tagged %s=%s across %d page(s)",
            len(resources),
            tag_key,
            tag_value,
            pages,
        )
        return resources
