"""chaincss model layer -- public type re-exports."""

from chaincss.model.diagnostic import Diagnostic, Severity
from chaincss.model.result import ProcessResult
from chaincss.model.segment import Segment, SegmentKind
from chaincss.model.style import PropertyBag, StyleBlock

__all__ = [
    # segment
    "SegmentKind",
    "Segment",
    # style
    "PropertyBag",
    "StyleBlock",
    # result
    "ProcessResult",
    # diagnostic
    "Severity",
    "Diagnostic",
]
