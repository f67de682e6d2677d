"""Split a .jcss document into literal CSS and script segments."""

from __future__ import annotations

import re

from chaincss.model.segment import Segment, SegmentKind

__all__ = ["OPEN_MARKER", "CLOSE_MARKER", "split"]

OPEN_MARKER = "<@"
CLOSE_MARKER = "@>"

# Non-greedy: the first close marker ends the block. Nesting is unsupported.
_SCRIPT_RE = re.compile(re.escape(OPEN_MARKER) + r"([\s\S]*?)" + re.escape(CLOSE_MARKER))


def split(document: str) -> list[Segment]:
    """Partition *document* into alternating literal and script segments.

    The result always starts and ends with a literal segment (possibly
    empty), so there is exactly one more literal than script segment.
    Literal text is preserved byte-for-byte.
    """
    return [
        Segment(
            kind=SegmentKind.SCRIPT if i % 2 else SegmentKind.LITERAL,
            text=text,
            index=i,
        )
        for i, text in enumerate(_SCRIPT_RE.split(document))
    ]
