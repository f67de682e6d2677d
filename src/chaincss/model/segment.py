"""Document segments: literal CSS text and embedded script blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    LITERAL = "literal"
    SCRIPT = "script"


@dataclass(frozen=True)
class Segment:
    """One piece of a split document.

    ``index`` is the position in the split sequence; literal segments sit at
    even indexes and script segments at odd ones.
    """

    kind: SegmentKind
    text: str
    index: int = 0

    @property
    def is_script(self) -> bool:
        return self.kind is SegmentKind.SCRIPT
