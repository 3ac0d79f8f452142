"""Wiki-style text to ADF encoder.

Handles only the subset of wiki markup the comment generator emits:

* ``:robot: ...``       -> ``heading`` (level 3) with the robot glyph
* ``h4. ...``           -> ``heading`` (level 4)
* ``* ...``             -> ``listItem``, consecutive items coalesced into one ``bulletList``
* ``* {{path}}: desc``  -> ``listItem`` with a code-marked path
* anything else         -> ``paragraph`` with ``{{monospace}}`` spans

Blank lines only separate blocks. The returned document is never empty,
because Jira rejects documents without content.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

from ..models.adf import (
    AdfDocument,
    AdfNode,
    bullet_list,
    heading,
    list_item,
    paragraph,
    text_node,
)
from ..models.constants import (
    H4_HEADING_LEVEL,
    HEADING_4_PREFIX,
    LIST_ITEM_PREFIX,
    NO_CONTENT,
    ROBOT_GLYPH,
    ROBOT_HEADING_LEVEL,
    ROBOT_MARKER,
)
from .inline import split_inline_spans

logger = logging.getLogger("adf-bridge.encoder")

PATH_DESCRIPTION_RE = re.compile(r"^\{\{([^{}]+)\}\}: (.*)$")


class LineKind(Enum):
    ROBOT_HEADING = "robot_heading"
    H4_HEADING = "h4_heading"
    LIST_ITEM = "list_item"
    PARAGRAPH = "paragraph"


class ScanState(Enum):
    DEFAULT = "default"
    IN_LIST = "in_list"


class ClassifiedLine(NamedTuple):
    kind: LineKind
    node: AdfNode


@dataclass
class _ScanContext:
    """State of the line scan: emitted blocks plus the list being collected."""

    state: ScanState = ScanState.DEFAULT
    pending_items: list[AdfNode] = field(default_factory=list)
    blocks: list[AdfNode] = field(default_factory=list)

    def feed(self, line: ClassifiedLine) -> None:
        match (self.state, line.kind):
            case (_, LineKind.LIST_ITEM):
                self.pending_items.append(line.node)
                self.state = ScanState.IN_LIST
            case (ScanState.IN_LIST, _):
                self.flush()
                self.blocks.append(line.node)
            case (ScanState.DEFAULT, _):
                self.blocks.append(line.node)

    def flush(self) -> None:
        if self.state is ScanState.IN_LIST:
            self.blocks.append(bullet_list(self.pending_items))
            self.pending_items = []
            self.state = ScanState.DEFAULT


def wiki_to_adf(text: str | None) -> dict[str, Any]:
    """
    Convert generated wiki-style text to an ADF document dict.

    Args:
        text: Comment text; None is treated as empty

    Returns:
        ``{"type": "doc", "version": 1, "content": [...]}`` with at least one node
    """
    return build_document(text).to_adf()


def build_document(text: str | None) -> AdfDocument:
    """Scan the text line by line and build a typed ADF document."""
    context = _ScanContext()
    for raw_line in (text or "").split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        context.feed(classify_line(line))
    context.flush()

    if not context.blocks:
        logger.debug("No content produced, using placeholder paragraph")
        return AdfDocument(content=[paragraph([text_node(NO_CONTENT)])])
    return AdfDocument(content=context.blocks)


def classify_line(line: str) -> ClassifiedLine:
    """
    Classify one trimmed, non-blank line and build its node.

    Rules are checked in order; the first match wins.
    """
    if line.startswith(ROBOT_MARKER):
        title = ROBOT_GLYPH + line[len(ROBOT_MARKER) :]
        return ClassifiedLine(
            LineKind.ROBOT_HEADING, heading(ROBOT_HEADING_LEVEL, [text_node(title)])
        )

    if line.startswith(HEADING_4_PREFIX):
        title = line[len(HEADING_4_PREFIX) :].strip()
        children = [text_node(title)] if title else []
        return ClassifiedLine(
            LineKind.H4_HEADING, heading(H4_HEADING_LEVEL, children)
        )

    if line.startswith(LIST_ITEM_PREFIX):
        item = line[len(LIST_ITEM_PREFIX) :].strip()
        return ClassifiedLine(LineKind.LIST_ITEM, list_item(_list_item_spans(item)))

    return ClassifiedLine(LineKind.PARAGRAPH, paragraph(split_inline_spans(line)))


def _list_item_spans(item: str) -> list[AdfNode]:
    match = PATH_DESCRIPTION_RE.match(item)
    if match:
        path, description = match.groups()
        return [text_node(path, code=True), text_node(f": {description}")]
    return split_inline_spans(item)
