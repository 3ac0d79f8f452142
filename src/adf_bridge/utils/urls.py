"""URL-related utility functions for the ADF bridge."""

import re
from urllib.parse import urlparse

# Hostname fragments that identify Atlassian Cloud, including US Gov clouds
CLOUD_HOST_MARKERS = (
    ".atlassian.net",
    ".jira.com",
    ".jira-dev.com",
    "api.atlassian.com",
    ".atlassian-us-gov-mod.net",
    ".atlassian-us-gov.net",
)

PRIVATE_HOST_RE = re.compile(
    r"^(127\.|192\.168\.|10\.|172\.(1[6-9]|2[0-9]|3[0-1])\.)"
)


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Cloud instances accept ADF comment bodies on REST v3; Server and Data
    Center only take wiki markup on REST v2.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False for Server/Data Center
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    # Localhost and private network addresses are always Server/Data Center
    if hostname == "localhost" or PRIVATE_HOST_RE.match(hostname):
        return False

    return any(marker in hostname for marker in CLOUD_HOST_MARKERS)
