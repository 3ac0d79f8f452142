"""
Data models for the ADF bridge.

This package provides Pydantic models for ADF documents and Jira comments,
and the tagged variants used for incoming field values.
"""

from .adf import AdfDocument, AdfMark, AdfNode, MarkType, NodeType
from .base import ApiModel
from .comment import IssueComment
from .field import (
    AbsentField,
    DocumentField,
    FieldKind,
    FieldValue,
    TextField,
    classify_field,
)

__all__ = [
    # Base
    "ApiModel",
    # ADF tree
    "AdfDocument",
    "AdfMark",
    "AdfNode",
    "MarkType",
    "NodeType",
    # Field variants
    "AbsentField",
    "DocumentField",
    "FieldKind",
    "FieldValue",
    "TextField",
    "classify_field",
    # Entities
    "IssueComment",
]
