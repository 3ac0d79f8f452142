"""
Tests for the ADF node and document models.
"""

import pytest

from adf_bridge.logging_config import setup_logger
from adf_bridge.models.adf import (
    MAX_DEPTH,
    AdfDocument,
    AdfMark,
    AdfNode,
    MarkType,
    NodeType,
    bullet_list,
    heading,
    list_item,
    paragraph,
    text_node,
)


def nested(depth):
    node = {"type": "text", "text": "leaf"}
    for _ in range(depth):
        node = {"type": "blockquote", "content": [node]}
    return node


class TestAdfNode:
    """Tests for the AdfNode model."""

    def test_from_api_response_with_valid_data(self):
        """Test creating an AdfNode from a well-formed payload."""
        node = AdfNode.from_api_response(
            {
                "type": "paragraph",
                "content": [
                    {"type": "text", "text": "x", "marks": [{"type": "code"}]}
                ],
            }
        )
        assert node.kind is NodeType.PARAGRAPH
        assert len(node.content) == 1
        assert node.content[0].text == "x"
        assert node.content[0].has_mark(MarkType.CODE)

    def test_from_api_response_with_non_dict(self):
        """Test that non-dict input becomes a node with no kind."""
        node = AdfNode.from_api_response("not a node")
        assert node.type == ""
        assert node.kind is None

    def test_malformed_fields_are_dropped(self):
        """Test that wrong field types are discarded instead of rejected."""
        node = AdfNode.from_api_response(
            {
                "type": 7,
                "text": ["x"],
                "attrs": "level=2",
                "content": "nope",
                "marks": [{"type": "code"}, {"attrs": {}}, "strong"],
            }
        )
        assert node.type == ""
        assert node.text is None
        assert node.attrs == {}
        assert node.content is None
        assert [mark.type for mark in node.marks] == ["code"]

    def test_non_dict_children_are_skipped(self):
        """Test that only dict children are kept."""
        node = AdfNode.from_api_response(
            {"type": "paragraph", "content": [None, 1, {"type": "text", "text": "a"}]}
        )
        assert [child.text for child in node.content] == ["a"]

    def test_empty_content_differs_from_missing_content(self):
        """Test that [] and an absent content field stay distinguishable."""
        assert AdfNode.from_api_response({"type": "link"}).content is None
        assert AdfNode.from_api_response({"type": "link", "content": []}).content == []

    def test_unknown_kind(self):
        """Test that unknown node types are kept but have no kind."""
        node = AdfNode.from_api_response({"type": "panel", "content": []})
        assert node.type == "panel"
        assert node.kind is None

    def test_nesting_beyond_limit_is_dropped(self):
        """Test that subtrees deeper than MAX_DEPTH are cut off."""
        node = AdfNode.from_api_response(nested(MAX_DEPTH + 10))
        depth = 0
        while node.content:
            node = node.content[0]
            depth += 1
        assert depth == MAX_DEPTH
        assert node.content == []

    def test_depth_warning_reaches_bridge_logger(self, capsys):
        """Test that the depth warning goes through the configured handlers."""
        setup_logger("adf-bridge", level="WARNING")
        AdfNode.from_api_response(nested(MAX_DEPTH + 1))
        err = capsys.readouterr().err
        assert "[WARNING] [adf-bridge.models]" in err
        assert "dropping subtree" in err

    def test_to_adf_omits_empty_fields(self):
        """Test serialisation of a bare node."""
        assert AdfNode(type="hardBreak").to_adf() == {"type": "hardBreak"}

    def test_to_adf_with_attrs_and_marks(self):
        """Test serialisation of a node with every field set."""
        node = AdfNode(
            type="heading",
            attrs={"level": 2},
            content=[text_node("t", code=True)],
        )
        assert node.to_adf() == {
            "type": "heading",
            "attrs": {"level": 2},
            "content": [{"type": "text", "text": "t", "marks": [{"type": "code"}]}],
        }


class TestAdfMark:
    """Tests for the AdfMark model."""

    def test_from_api_response_with_attrs(self):
        """Test that mark attributes are kept."""
        mark = AdfMark.from_api_response({"type": "link", "attrs": {"href": "/x"}})
        assert mark.to_adf() == {"type": "link", "attrs": {"href": "/x"}}

    def test_from_api_response_rejects_missing_type(self):
        """Test that a mark without a type is an error."""
        with pytest.raises(ValueError, match="Not an ADF mark"):
            AdfMark.from_api_response({"attrs": {}})


class TestAdfDocument:
    """Tests for the AdfDocument model."""

    def test_from_api_response_with_valid_data(self):
        """Test creating a document from a REST v3 payload."""
        document = AdfDocument.from_api_response(
            {"type": "doc", "version": 1, "content": [{"type": "rule"}]}
        )
        assert document is not None
        assert [node.kind for node in document.content] == [NodeType.RULE]

    def test_from_api_response_without_content_list(self):
        """Test that payloads without a content list are not documents."""
        assert AdfDocument.from_api_response({"type": "doc"}) is None
        assert AdfDocument.from_api_response({"content": "text"}) is None
        assert AdfDocument.from_api_response([]) is None

    def test_to_adf(self):
        """Test the serialised document header."""
        document = AdfDocument(content=[paragraph([text_node("a")])])
        assert document.to_adf() == {
            "type": "doc",
            "version": 1,
            "content": [
                {"type": "paragraph", "content": [{"type": "text", "text": "a"}]}
            ],
        }


class TestBuilders:
    """Tests for the node builder helpers."""

    def test_heading(self):
        """Test the heading builder."""
        node = heading(4, [])
        assert node.to_adf() == {"type": "heading", "attrs": {"level": 4}, "content": []}

    def test_bullet_list(self):
        """Test that list builders nest as expected."""
        node = bullet_list([list_item([text_node("a")])])
        assert node.to_adf() == {
            "type": "bulletList",
            "content": [
                {"type": "listItem", "content": [{"type": "text", "text": "a"}]}
            ],
        }

    def test_text_node_without_code(self):
        """Test that plain text nodes carry no marks."""
        assert text_node("a").marks == []
