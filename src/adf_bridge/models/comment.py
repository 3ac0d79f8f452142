"""
Issue comment model.

This module provides a Pydantic model for comments returned by the Jira REST
API, with the body already flattened to display text.
"""

import logging
from typing import Any

from .base import ApiModel
from .constants import COMMENT_DEFAULT_ID, EMPTY_STRING, UNKNOWN_AUTHOR

logger = logging.getLogger("adf-bridge.models")


class IssueComment(ApiModel):
    """
    Model representing a Jira issue comment.
    """

    id: str = COMMENT_DEFAULT_ID
    body: str = EMPTY_STRING
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    author: str = UNKNOWN_AUTHOR

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "IssueComment":
        """
        Create an IssueComment from a Jira API response.

        The body may be wiki text (REST v2) or an ADF document (REST v3);
        both are decoded to flat text.

        Args:
            data: The comment data from the Jira API

        Returns:
            An IssueComment instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        # Imported here to keep the models package free of converter imports
        from ..adf.selector import decode_field

        comment_id = data.get("id", COMMENT_DEFAULT_ID)
        if comment_id is not None:
            comment_id = str(comment_id)

        author_data = data.get("author")
        author = UNKNOWN_AUTHOR
        if isinstance(author_data, dict):
            author = author_data.get("displayName") or UNKNOWN_AUTHOR

        return cls(
            id=comment_id or COMMENT_DEFAULT_ID,
            body=decode_field(data.get("body")),
            created=str(data.get("created") or EMPTY_STRING),
            updated=str(data.get("updated") or EMPTY_STRING),
            author=author,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result = {
            "id": self.id,
            "body": self.body,
            "author": self.author,
        }

        if self.created:
            result["created"] = self.created

        if self.updated:
            result["updated"] = self.updated

        return result
