"""Style model: property bags and finalized style blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

# Ordered camelCase property identifier -> value. Insertion order is the
# serialization order.
PropertyBag = dict[str, str]


@dataclass(frozen=True)
class StyleBlock:
    """A finalized property bag with the selectors it applies to.

    A block without selectors is a raw bag, usable for composition.
    """

    selectors: tuple[str, ...] = ()
    properties: PropertyBag = field(default_factory=dict)

    @property
    def is_raw(self) -> bool:
        return not self.selectors

    @property
    def selector_text(self) -> str:
        return ",".join(self.selectors)
