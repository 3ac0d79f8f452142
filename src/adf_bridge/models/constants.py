"""
Constants shared by the ADF models and converters.

Values here are part of the output contract.
"""

# Placeholder returned by the decoder when a field carries nothing to show
NO_DESCRIPTION = "No description"

# Text of the single paragraph emitted when the encoder produced no nodes
NO_CONTENT = "No content"

EMPTY_STRING = ""
UNKNOWN_AUTHOR = "Unknown"
COMMENT_DEFAULT_ID = "0"

# ADF document header
ADF_DOC_TYPE = "doc"
ADF_VERSION = 1

# Decoder rendering
BULLET_PREFIX = "  • "
CODE_FENCE = "```"
RULE_TEXT = "\n---\n"
DEFAULT_MENTION_TEXT = "user"
DEFAULT_LINK_HREF = "#"
DEFAULT_HEADING_LEVEL = 1
# Levels above this render as DEFAULT_HEADING_LEVEL
MAX_HEADING_LEVEL = 100

# Wiki markup produced by the comment generator
ROBOT_MARKER = ":robot:"
ROBOT_GLYPH = "\U0001f916"
HEADING_4_PREFIX = "h4."
LIST_ITEM_PREFIX = "* "
ROBOT_HEADING_LEVEL = 3
H4_HEADING_LEVEL = 4
INLINE_CODE_OPEN = "{{"
INLINE_CODE_CLOSE = "}}"

# Attribution lines the generator appends after the robot glyph
ATTRIBUTION_PHRASES = ("Claude Code",)
