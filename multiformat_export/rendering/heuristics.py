"""
Structural heuristics applied to the Markdown AST.

Bold-first-line promotion: a paragraph that opens with a Strong node on its
own line reads as a subheading in most generated reports, e.g.

    **Attendees**
    Alice, Bob

The word-processor renderer turns such a paragraph into a heading paragraph
plus an optional body paragraph. The Typst renderer keeps it as a paragraph.
"""

from dataclasses import dataclass
from typing import Optional

from multiformat_export.rendering.markdown_ast import Paragraph, Strong, Text


@dataclass(frozen=True)
class HeadingSplit:
    """A promoted paragraph: the Strong heading node and the body remainder."""
    heading: Strong
    remainder: Optional[str] = None


def is_strong_line_heading(paragraph: Paragraph) -> bool:
    """True when the paragraph is a lone Strong, or Strong + Text starting with '\\n'."""
    children = paragraph.children
    if len(children) == 1:
        return isinstance(children[0], Strong)
    if len(children) == 2:
        first, second = children
        return (
            isinstance(first, Strong)
            and isinstance(second, Text)
            and second.value.startswith("\n")
        )
    return False


def split_strong_line_heading(paragraph: Paragraph) -> Optional[HeadingSplit]:
    """
    Split a bold-led paragraph into heading and body remainder.

    Returns None when the paragraph does not qualify. The remainder has its
    leading line breaks stripped and is None when nothing is left.
    """
    if not is_strong_line_heading(paragraph):
        return None

    heading = paragraph.children[0]
    if len(paragraph.children) == 1:
        return HeadingSplit(heading=heading)

    rest = paragraph.children[1].value.lstrip("\n")
    return HeadingSplit(heading=heading, remainder=rest or None)
