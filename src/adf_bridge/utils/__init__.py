"""
Utility functions for the ADF bridge.
"""

from .env import getenv, is_env_truthy
from .urls import is_atlassian_cloud_url

__all__ = [
    "getenv",
    "is_atlassian_cloud_url",
    "is_env_truthy",
]
