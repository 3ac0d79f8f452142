"""
Tagged variants for rich text field values.

Jira returns description and comment fields either as a plain string (Server
and Data Center, REST v2), as an ADF document (Cloud, REST v3), or not at all.
``classify_field`` resolves which one was supplied, once, so downstream code
only ever sees one concrete variant.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .adf import AdfDocument


class FieldKind(str, Enum):
    ABSENT = "absent"
    TEXT = "text"
    DOCUMENT = "document"


@dataclass(frozen=True)
class AbsentField:
    """No value, an empty string, or an object without usable content."""

    kind: FieldKind = FieldKind.ABSENT


@dataclass(frozen=True)
class TextField:
    """A non-blank plain string, stored trimmed."""

    text: str
    kind: FieldKind = FieldKind.TEXT


@dataclass(frozen=True)
class DocumentField:
    """An ADF document with a ``content`` list."""

    document: AdfDocument
    kind: FieldKind = FieldKind.DOCUMENT


FieldValue = AbsentField | TextField | DocumentField


def classify_field(raw: Any) -> FieldValue:
    """
    Resolve a raw REST field value into exactly one variant.

    Args:
        raw: Whatever the REST collaborator returned for the field

    Returns:
        AbsentField, TextField or DocumentField
    """
    if raw is None:
        return AbsentField()

    if isinstance(raw, str):
        stripped = raw.strip()
        return TextField(stripped) if stripped else AbsentField()

    if isinstance(raw, dict):
        document = AdfDocument.from_api_response(raw)
        if document is not None:
            return DocumentField(document)

    return AbsentField()
