"""Inline span splitting for wiki-style ``{{monospace}}`` markup."""

import re

from ..models.adf import AdfNode, text_node
from ..models.constants import INLINE_CODE_CLOSE, INLINE_CODE_OPEN

# An empty span ({{}}) is not a span and stays plain text
INLINE_CODE_RE = re.compile(
    re.escape(INLINE_CODE_OPEN)
    + "(?!" + re.escape(INLINE_CODE_CLOSE) + ")"
    + r"(.*?)"
    + re.escape(INLINE_CODE_CLOSE)
)


def split_inline_spans(line: str) -> list[AdfNode]:
    """
    Split a line into plain and code-marked text nodes.

    Text between ``{{`` and ``}}`` becomes a text node with a ``code`` mark,
    everything else a plain text node, in original order. Empty segments are
    skipped; an empty ``{{}}`` and an unterminated ``{{`` stay plain text.

    Args:
        line: One line of wiki-style text

    Returns:
        At least one text node; a line without spans yields a single plain
        node holding the whole line
    """
    nodes: list[AdfNode] = []
    # re.split with one capture group alternates plain, code, plain, ...
    for index, segment in enumerate(INLINE_CODE_RE.split(line)):
        if not segment:
            continue
        nodes.append(text_node(segment, code=index % 2 == 1))
    return nodes or [text_node(line)]
