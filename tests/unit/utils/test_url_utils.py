"""Tests for the URL utilities module."""

import pytest

from adf_bridge.utils.urls import is_atlassian_cloud_url


class TestIsAtlassianCloudUrl:
    """Test cases for is_atlassian_cloud_url function."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.atlassian.net",
            "https://example.atlassian.net/browse/PROJ-1",
            "https://example.jira.com",
            "https://example.jira-dev.com",
            "https://api.atlassian.com/ex/jira/abc-123",
            "https://example.atlassian-us-gov-mod.net",
        ],
    )
    def test_cloud_urls(self, url):
        """Test that Atlassian Cloud hosts are detected."""
        assert is_atlassian_cloud_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "https://jira.example.com",
            "http://localhost:8080",
            "http://127.0.0.1:8080",
            "http://192.168.1.10/jira",
            "http://10.0.0.5",
            "http://172.16.0.1",
        ],
    )
    def test_server_urls(self, url):
        """Test that Server/Data Center and private hosts are not Cloud."""
        assert is_atlassian_cloud_url(url) is False
