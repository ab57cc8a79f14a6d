from __future__ import annotations

# Same set as C isspace() in the "C" locale.
ASCII_WHITESPACE = " \t\n\r\v\f"

COMMENT_MARKER = ";"
ASSIGNMENT = "="
SECTION_OPEN = "["
SECTION_CLOSE = "]"


def trim(text: str) -> str:
    """
    Strip leading/trailing ASCII whitespace only.

    `str.strip()` without arguments would also eat Unicode spaces
    (NBSP, ideographic space, ...) which are legitimate value content here.
    """
    return (text or "").strip(ASCII_WHITESPACE)
