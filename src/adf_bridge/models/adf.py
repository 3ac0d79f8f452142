"""
Atlassian Document Format (ADF) models.

ADF is the JSON tree Jira Cloud uses for rich text fields such as issue
descriptions and comment bodies. This module provides a typed view of that
tree: a closed ``NodeType`` enum for the node kinds the converters know about,
and pydantic models that can be built defensively from REST payloads and
serialised back to plain dicts for submission.

Reference: https://developer.atlassian.com/cloud/jira/platform/apis/document/structure/
"""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any, Literal

from pydantic import Field

from .base import ApiModel
from .constants import ADF_DOC_TYPE, ADF_VERSION

logger = logging.getLogger("adf-bridge.models")

# Nesting beyond this depth is dropped when parsing raw payloads
MAX_DEPTH = 100


class NodeType(str, Enum):
    """Node kinds understood by the converters."""

    DOC = "doc"
    TEXT = "text"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    HARD_BREAK = "hardBreak"
    MENTION = "mention"
    EMOJI = "emoji"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    CODE_BLOCK = "codeBlock"
    BLOCKQUOTE = "blockquote"
    RULE = "rule"
    LINK = "link"

    @classmethod
    def resolve(cls, name: str) -> "NodeType | None":
        """Return the matching kind, or None for kinds this module does not know."""
        try:
            return cls(name)
        except ValueError:
            return None


class MarkType(str, Enum):
    """Text marks produced by the encoder."""

    CODE = "code"


class AdfMark(ApiModel):
    """A mark attached to a text node (e.g. ``code``)."""

    type: str
    attrs: dict[str, Any] | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "AdfMark":
        """
        Create an AdfMark from a raw mark payload.

        Raises:
            ValueError: If the payload has no string ``type``
        """
        if not isinstance(data, dict) or not isinstance(data.get("type"), str):
            raise ValueError(f"Not an ADF mark: {data!r}")
        attrs = data.get("attrs")
        return cls(type=data["type"], attrs=attrs if isinstance(attrs, dict) else None)

    def to_adf(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type}
        if self.attrs:
            result["attrs"] = dict(self.attrs)
        return result


class AdfNode(ApiModel):
    """
    One node of an ADF tree.

    ``content`` distinguishes "no children field" (None) from "an empty
    children list" ([]); several rendering rules depend on that difference.
    """

    type: str
    text: str | None = None
    attrs: dict[str, Any] = Field(default_factory=dict)
    content: list["AdfNode"] | None = None
    marks: list[AdfMark] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "AdfNode":
        """
        Create an AdfNode tree from a raw payload without ever raising.

        Malformed pieces are dropped rather than rejected: non-dict children
        are skipped, a non-list ``content`` is treated as absent, non-dict
        ``attrs`` become empty and a non-string ``text`` is ignored.

        Args:
            data: The raw node dict
            depth: (keyword) Current nesting depth, used internally

        Returns:
            An AdfNode instance (type ``""`` if the payload was not a dict)
        """
        depth: int = kwargs.get("depth", 0)
        if not isinstance(data, dict):
            return cls(type="")

        node_type = data.get("type")
        text = data.get("text")
        attrs = data.get("attrs")

        content = None
        raw_content = data.get("content")
        if isinstance(raw_content, list):
            if depth >= MAX_DEPTH:
                logger.warning(
                    f"ADF nesting deeper than {MAX_DEPTH} levels, dropping subtree"
                )
                content = []
            else:
                content = [
                    cls.from_api_response(child, depth=depth + 1)
                    for child in raw_content
                    if isinstance(child, dict)
                ]

        marks = []
        raw_marks = data.get("marks")
        if isinstance(raw_marks, list):
            for raw_mark in raw_marks:
                try:
                    marks.append(AdfMark.from_api_response(raw_mark))
                except ValueError:
                    logger.debug(f"Skipping malformed mark: {raw_mark!r}")

        return cls(
            type=node_type if isinstance(node_type, str) else "",
            text=text if isinstance(text, str) else None,
            attrs=attrs if isinstance(attrs, dict) else {},
            content=content,
            marks=marks,
        )

    @property
    def kind(self) -> NodeType | None:
        """The known node kind, or None for unrecognized ones."""
        return NodeType.resolve(self.type)

    def has_mark(self, mark: MarkType) -> bool:
        return any(m.type == mark.value for m in self.marks)

    def to_adf(self) -> dict[str, Any]:
        """Serialise to a JSON-ready dict, omitting empty optional fields."""
        result: dict[str, Any] = {"type": self.type}
        if self.text is not None:
            result["text"] = self.text
        if self.marks:
            result["marks"] = [mark.to_adf() for mark in self.marks]
        if self.attrs:
            result["attrs"] = dict(self.attrs)
        if self.content is not None:
            result["content"] = [child.to_adf() for child in self.content]
        return result


class AdfDocument(ApiModel):
    """Root of an ADF tree: ``{type: "doc", version: 1, content: [...]}``."""

    type: Literal["doc"] = ADF_DOC_TYPE
    version: int = ADF_VERSION
    content: list[AdfNode] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "AdfDocument | None":
        """
        Create an AdfDocument from a raw payload.

        Returns:
            The document, or None when the payload has no usable ``content`` list
        """
        if not isinstance(data, dict) or not isinstance(data.get("content"), list):
            return None
        return cls(
            content=[
                AdfNode.from_api_response(child, depth=1)
                for child in data["content"]
                if isinstance(child, dict)
            ]
        )

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": ADF_DOC_TYPE,
            "version": ADF_VERSION,
            "content": [node.to_adf() for node in self.content],
        }


# Builders used by the encoder


def text_node(text: str, code: bool = False) -> AdfNode:
    marks = [AdfMark(type=MarkType.CODE.value)] if code else []
    return AdfNode(type=NodeType.TEXT.value, text=text, marks=marks)


def paragraph(children: Iterable[AdfNode]) -> AdfNode:
    return AdfNode(type=NodeType.PARAGRAPH.value, content=list(children))


def heading(level: int, children: Iterable[AdfNode]) -> AdfNode:
    return AdfNode(
        type=NodeType.HEADING.value, attrs={"level": level}, content=list(children)
    )


def list_item(children: Iterable[AdfNode]) -> AdfNode:
    return AdfNode(type=NodeType.LIST_ITEM.value, content=list(children))


def bullet_list(items: Iterable[AdfNode]) -> AdfNode:
    return AdfNode(type=NodeType.BULLET_LIST.value, content=list(items))
