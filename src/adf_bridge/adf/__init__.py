"""Conversion between ADF documents, generated wiki text and flat text."""

from .decoder import adf_to_search_text, adf_to_text, render_field, render_nodes
from .encoder import build_document, wiki_to_adf
from .inline import split_inline_spans
from .selector import (
    CommentApiVersion,
    OutgoingComment,
    OutgoingEncoding,
    comment_api_version_for,
    decode_field,
    is_generated_analysis,
    prepare_comment,
)

__all__ = [
    "CommentApiVersion",
    "OutgoingComment",
    "OutgoingEncoding",
    "adf_to_search_text",
    "adf_to_text",
    "build_document",
    "comment_api_version_for",
    "decode_field",
    "is_generated_analysis",
    "prepare_comment",
    "render_field",
    "render_nodes",
    "split_inline_spans",
    "wiki_to_adf",
]
