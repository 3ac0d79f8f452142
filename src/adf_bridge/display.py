"""Presentation of decoded flat text for the terminal and for XML output."""

import re
from enum import Enum
from typing import Any

import click

from .adf.selector import decode_field
from .models.constants import NO_DESCRIPTION

WHITESPACE_RE = re.compile(r"\s+")

XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


class DisplayStyle(str, Enum):
    TERMINAL = "terminal"
    XML = "xml"
    PLAIN = "plain"


def format_description(
    value: Any,
    style: DisplayStyle | str = DisplayStyle.TERMINAL,
    color: bool = True,
) -> str:
    """
    Decode a description or comment field and present it.

    Args:
        value: Raw field value (None, string or ADF document)
        style: TERMINAL dims the placeholder, XML escapes, PLAIN leaves as-is
        color: Whether terminal styling is applied

    Returns:
        Text ready to print
    """
    style = DisplayStyle(style)
    text = decode_field(value)

    if style is DisplayStyle.XML:
        return escape_xml(text)
    if style is DisplayStyle.TERMINAL and color and text == NO_DESCRIPTION:
        return click.style(text, fg="bright_black")
    return text


def escape_xml(text: str, escape_newlines: bool = False) -> str:
    """
    Escape XML special characters.

    Args:
        text: Text to escape
        escape_newlines: Also encode newlines as ``&#10;`` (for attribute values)

    Returns:
        Escaped text
    """
    for char, entity in XML_ESCAPES:
        text = text.replace(char, entity)
    if escape_newlines:
        text = text.replace("\n", "&#10;")
    return text


def normalize_comment_body(text: str) -> str:
    """
    Tidy a comment body for compact display.

    Whitespace runs inside a line collapse to one space, lines are trimmed
    and empty lines dropped; line breaks themselves are kept.
    """
    lines = (WHITESPACE_RE.sub(" ", line).strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)
