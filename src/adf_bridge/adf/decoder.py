"""ADF to flat text decoder.

Renders an ADF tree depth-first into the flat text shown in the terminal and
in XML output. Each rule emits exactly the separators listed for it and
nothing else.

Reference: https://developer.atlassian.com/cloud/jira/platform/apis/document/structure/
"""

import logging
from collections.abc import Iterable
from typing import Any

from ..models.adf import AdfNode, NodeType
from ..models.constants import (
    BULLET_PREFIX,
    CODE_FENCE,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_LINK_HREF,
    DEFAULT_MENTION_TEXT,
    EMPTY_STRING,
    MAX_HEADING_LEVEL,
    NO_DESCRIPTION,
    RULE_TEXT,
)
from ..models.field import DocumentField, FieldValue, TextField, classify_field

logger = logging.getLogger("adf-bridge.decoder")


def adf_to_text(value: Any) -> str:
    """
    Convert a description or comment field value to flat text.

    Accepts None, a plain string, or an ADF document dict. Never raises.

    Args:
        value: Raw field value as returned by the REST API

    Returns:
        The rendered text, the trimmed string, or ``NO_DESCRIPTION`` when
        there is nothing to show

    Example:
        >>> adf_to_text({"type": "doc", "content": [
        ...     {"type": "paragraph", "content": [{"type": "text", "text": "X"}]}
        ... ]})
        '\\nX\\n'
    """
    return render_field(classify_field(value))


def render_field(field: FieldValue) -> str:
    """Render an already classified field value."""
    match field:
        case TextField(text=text):
            return text
        case DocumentField(document=document):
            return render_nodes(document.content)
        case _:
            return NO_DESCRIPTION


def render_nodes(nodes: Iterable[AdfNode] | None) -> str:
    """Render a node sequence, concatenating with no separator."""
    if not nodes:
        return EMPTY_STRING
    return "".join(render_node(node) for node in nodes)


def render_node(node: AdfNode) -> str:
    """Render a single node according to its kind."""
    match node.kind:
        case NodeType.TEXT:
            return node.text or EMPTY_STRING
        case NodeType.PARAGRAPH:
            return f"\n{render_nodes(node.content)}\n"
        case NodeType.HARD_BREAK:
            return "\n"
        case NodeType.MENTION:
            return f"@{_string_attr(node, 'text') or DEFAULT_MENTION_TEXT}"
        case NodeType.EMOJI:
            return _string_attr(node, "shortName")
        case NodeType.BULLET_LIST | NodeType.ORDERED_LIST:
            # One leading newline, items back to back, no trailing newline
            items = "".join(_render_list_entry(child) for child in node.content or [])
            return f"\n{items}"
        case NodeType.LIST_ITEM:
            return render_nodes(node.content)
        case NodeType.CODE_BLOCK:
            return f"\n{CODE_FENCE}\n{render_nodes(node.content)}\n{CODE_FENCE}\n"
        case NodeType.HEADING:
            prefix = "#" * _heading_level(node)
            return f"\n{prefix} {render_nodes(node.content)}\n"
        case NodeType.BLOCKQUOTE:
            return f"\n> {render_nodes(node.content)}\n"
        case NodeType.RULE:
            return RULE_TEXT
        case NodeType.LINK:
            href = _string_attr(node, "href") or DEFAULT_LINK_HREF
            visible = render_nodes(node.content) if node.content is not None else href
            return f"[{visible}]({href})"
        case NodeType.DOC:
            return render_nodes(node.content)
        case _:
            # Unknown kinds pass their children through
            logger.debug(
                f"Unrecognized ADF node type {node.type!r}, "
                f"has_content={node.content is not None}"
            )
            return render_nodes(node.content)


def adf_to_search_text(value: Any) -> str:
    """
    Extract plain text for search indexing.

    Lighter than ``adf_to_text``: only paragraphs get newlines, every other
    container is flattened, and a rendered document is trimmed. Plain strings
    are indexed verbatim. Missing or unusable values yield an empty string
    rather than the display placeholder.

    Args:
        value: Raw field value as returned by the REST API

    Returns:
        Plain text suitable for a full text index
    """
    if isinstance(value, str):
        return value
    match classify_field(value):
        case DocumentField(document=document):
            return "".join(_search_text(node) for node in document.content).strip()
        case _:
            return EMPTY_STRING


def _search_text(node: AdfNode) -> str:
    if node.kind is NodeType.TEXT:
        return node.text or EMPTY_STRING
    if node.content is None:
        return EMPTY_STRING
    inner = "".join(_search_text(child) for child in node.content)
    if node.kind is NodeType.PARAGRAPH:
        return f"\n{inner}\n"
    return inner


def _render_list_entry(node: AdfNode) -> str:
    if node.kind is NodeType.LIST_ITEM:
        return f"{BULLET_PREFIX}{render_nodes(node.content)}"
    # Invalid list child, render it as it stands
    return render_node(node)


def _string_attr(node: AdfNode, name: str) -> str:
    value = node.attrs.get(name)
    return value if isinstance(value, str) else EMPTY_STRING


def _heading_level(node: AdfNode) -> int:
    level = node.attrs.get("level")
    if isinstance(level, bool):
        return DEFAULT_HEADING_LEVEL
    if isinstance(level, float) and level.is_integer():
        level = int(level)
    if isinstance(level, int) and 1 <= level <= MAX_HEADING_LEVEL:
        return level
    return DEFAULT_HEADING_LEVEL
