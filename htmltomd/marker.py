"""Private marker characters used while rendering markdown."""

# A character that is rarely used outside of terminals: the bell character.
# It is one byte wide in UTF-8, which the escaping logic relies upon.
MARKER_ESCAPING = "\a"

# A private-use character that stands in for newlines inside code blocks,
# so that the newline trimming does not touch the code block content.
MARKER_CODE_BLOCK_NEWLINE = "\uf002"

BYTES_MARKER_ESCAPING = MARKER_ESCAPING.encode("utf-8")
BYTES_MARKER_CODE_BLOCK_NEWLINE = MARKER_CODE_BLOCK_NEWLINE.encode("utf-8")

if BYTES_MARKER_ESCAPING != bytes([7]):
    raise RuntimeError("the escaping marker must be a single byte")
if BYTES_MARKER_CODE_BLOCK_NEWLINE != bytes([239, 128, 130]):
    raise RuntimeError("the code block newline marker has an unexpected encoding")