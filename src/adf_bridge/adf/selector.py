"""Format selection between the REST collaborator and the converters.

Incoming field values are classified once here and dispatched to the
decoder. Outgoing comment text is routed either to the legacy REST v2
endpoint as a raw wiki string, or encoded as ADF for the REST v3 endpoint.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any

from ..models.constants import ATTRIBUTION_PHRASES, ROBOT_GLYPH, ROBOT_MARKER
from ..models.field import classify_field
from .decoder import render_field
from .encoder import wiki_to_adf

if TYPE_CHECKING:
    from ..config import AdfBridgeConfig

logger = logging.getLogger("adf-bridge.selector")

# Fingerprints of text produced by the analysis comment generator
ANALYSIS_INDICATORS = (
    re.compile(r"(?:^|\n)" + re.escape(ROBOT_MARKER)),
    re.compile(r"(?:^|\n)h4\.\s+\w+"),
    re.compile(
        re.escape(ROBOT_GLYPH)
        + r"\s+(?:"
        + "|".join(re.escape(phrase) for phrase in ATTRIBUTION_PHRASES)
        + ")"
    ),
)


class CommentApiVersion(IntEnum):
    """Jira REST API version used to post a comment."""

    LEGACY = 2
    MODERN = 3


class OutgoingEncoding(str, Enum):
    WIKI = "wiki"
    ADF = "adf"


@dataclass(frozen=True)
class OutgoingComment:
    """A comment body ready for the REST client, with the endpoint it targets."""

    api_version: CommentApiVersion
    encoding: OutgoingEncoding
    body: str | dict[str, Any]

    def to_payload(self) -> dict[str, Any]:
        return {"body": self.body}


def decode_field(raw: Any) -> str:
    """
    Classify an incoming field value and render it as flat text.

    Args:
        raw: None, a string, or an ADF document dict

    Returns:
        Flat text, never raising
    """
    field = classify_field(raw)
    logger.debug(f"Decoding field of kind {field.kind.value}")
    return render_field(field)


def is_generated_analysis(text: str) -> bool:
    """Check whether text carries the fingerprints of generated analysis output."""
    return any(indicator.search(text) for indicator in ANALYSIS_INDICATORS)


def prepare_comment(
    text: str,
    api_version: CommentApiVersion = CommentApiVersion.MODERN,
    allow_legacy: bool = True,
) -> OutgoingComment:
    """
    Choose the outgoing encoding for a comment and produce its body.

    Generated analysis text goes to the legacy endpoint untouched apart from
    the ``:robot:`` marker, and the server renders it as wiki markup. Other
    text is ADF encoded when the target is the modern endpoint and passed
    through as-is otherwise.

    Args:
        text: Comment text
        api_version: The endpoint the caller targets
        allow_legacy: False when the caller can only reach the modern
            endpoint; analysis text is then ADF encoded as well

    Returns:
        An OutgoingComment describing endpoint, encoding and body
    """
    text = text or ""
    if allow_legacy and is_generated_analysis(text):
        logger.debug("Generated analysis comment, using wiki passthrough")
        return OutgoingComment(
            api_version=CommentApiVersion.LEGACY,
            encoding=OutgoingEncoding.WIKI,
            body=text.replace(ROBOT_MARKER, ROBOT_GLYPH),
        )

    if api_version is CommentApiVersion.MODERN or not allow_legacy:
        return OutgoingComment(
            api_version=CommentApiVersion.MODERN,
            encoding=OutgoingEncoding.ADF,
            body=wiki_to_adf(text),
        )

    return OutgoingComment(
        api_version=CommentApiVersion.LEGACY,
        encoding=OutgoingEncoding.WIKI,
        body=text,
    )


def comment_api_version_for(config: "AdfBridgeConfig") -> CommentApiVersion:
    """
    Pick the comment endpoint for a configured Jira instance.

    An explicit ``comment_api_version`` wins; otherwise Cloud gets the ADF
    endpoint and Server/Data Center the wiki endpoint.
    """
    if config.comment_api_version is not None:
        return CommentApiVersion(config.comment_api_version)
    return CommentApiVersion.MODERN if config.is_cloud else CommentApiVersion.LEGACY
