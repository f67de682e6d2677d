"""Fluent style builder: chained property setters that finalize into blocks."""

from __future__ import annotations

import re
from typing import Any, Callable

from chaincss.model.style import PropertyBag, StyleBlock
from chaincss.model.values import UNDEFINED, stringify

__all__ = ["PROPERTY_SETTERS", "StyleBuilder"]

# Setter name -> property identifier stored in the bag.
PROPERTY_SETTERS: dict[str, str] = {
    # backgrounds
    "bg": "background",
    "bgColor": "backgroundColor",
    "bgImage": "backgroundImage",
    "bgRepeat": "backgroundRepeat",
    "bgAttachment": "backgroundAttachment",
    "bgPosition": "backgroundPosition",
    "backgroundClip": "backgroundClip",
    # border
    "border": "border",
    "borderStyle": "borderStyle",
    "borderWidth": "borderWidth",
    "borderColor": "borderColor",
    "borderRadius": "borderRadius",
    # margin
    "margin": "margin",
    "marginTop": "marginTop",
    "marginRight": "marginRight",
    "marginBottom": "marginBottom",
    "marginLeft": "marginLeft",
    # padding
    "padding": "padding",
    "paddingTop": "paddingTop",
    "paddingRight": "paddingRight",
    "paddingBottom": "paddingBottom",
    "paddingLeft": "paddingLeft",
    # sizing
    "width": "width",
    "minWidth": "minWidth",
    "maxWidth": "maxWidth",
    "height": "height",
    "minHeight": "minHeight",
    "maxHeight": "maxHeight",
    # outline
    "outline": "outline",
    "outlineColor": "outlineColor",
    "outlineStyle": "outlineStyle",
    "outlineWidth": "outlineWidth",
    "outlineOffset": "outlineOffset",
    # text
    "color": "color",
    "direction": "direction",
    "unicodeBidi": "unicodeBidi",
    "verticalAlign": "verticalAlign",
    "textTransform": "textTransform",
    "textShadow": "textShadow",
    "textAlign": "textAlign",
    "textAlignLast": "textAlignLast",
    "textIndent": "textIndent",
    "letterSpacing": "letterSpacing",
    "lineHeight": "lineHeight",
    "wordSpacing": "wordSpacing",
    "whiteSpace": "whiteSpace",
    "textFillColor": "textFillColor",
    # font
    "font": "font",
    "fontFamily": "fontFamily",
    "fontStyle": "fontStyle",
    "fontWeight": "fontWeight",
    "fontVariant": "fontVariant",
    "fontSize": "fontSize",
    # list style
    "listStyle": "listStyle",
    "listStyleType": "listStyleType",
    "listStyleImage": "listStyleImage",
    "listStylePosition": "listStylePosition",
    # display / flex / grid
    "display": "display",
    "flex": "flex",
    "alignContent": "alignContent",
    "alignSelf": "alignSelf",
    "alignItems": "alignItems",
    "justifyContent": "justifyContent",
    "flexWrap": "flexWrap",
    "flexGrow": "flexGrow",
    "flexDirection": "flexDirection",
    "order": "order",
    "visibility": "visibility",
    "gap": "gap",
    "gridTemplateColumns": "gridTemplateColumns",
    # position
    "position": "position",
    "top": "top",
    "right": "right",
    "bottom": "bottom",
    "left": "left",
    "zIndex": "zIndex",
    "float": "float",
    "clear": "clear",
    # overflow
    "overflow": "overflow",
    "overflowX": "overflowX",
    "overflowY": "overflowY",
    "overflowWrap": "overflowWrap",
    # effects and misc
    "transform": "transform",
    "boxShadow": "boxShadow",
    "backdropFilter": "backdropFilter",
    "boxSizing": "boxSizing",
    "opacity": "opacity",
    "transition": "transition",
    "cursor": "cursor",
    "content": "content",
    "accentColor": "accentColor",
    "all": "all",
}

# Script-visible operation name -> Python method name.
_OPERATIONS: dict[str, str] = {
    "block": "block",
    "navBar": "nav_bar",
    "borderSideStyle": "border_side_style",
    "textDecoration": "text_decoration",
    "mixin": "mixin",
}

_SIDES = {"top": "Top", "right": "Right", "bottom": "Bottom", "left": "Left"}

_SNAKE_RE = re.compile(r"_([a-z])")


def _camel(name: str) -> str:
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), name)


class StyleBuilder:
    """Accumulates property assignments into a bag until ``block()`` is called.

    Every setter returns the builder so calls chain::

        builder.color("red").fontSize("12px").block(".title")

    Setters are available as camelCase (``fontSize``) and snake_case
    (``font_size``) attributes. One builder belongs to one pipeline run.
    """

    def __init__(self) -> None:
        self._bag: PropertyBag = {}
        self.css_output: Any = None

    # --- bag ------------------------------------------------------------------

    @property
    def bag(self) -> PropertyBag:
        """A copy of the properties set since the last ``block()``."""
        return dict(self._bag)

    def set(self, prop: str, value: Any) -> StyleBuilder:
        """Set *prop* (a camelCase identifier) to *value*."""
        self._bag[prop] = stringify(value)
        return self

    def __getattr__(self, name: str) -> Callable[[Any], StyleBuilder]:
        prop = PROPERTY_SETTERS.get(name) or PROPERTY_SETTERS.get(_camel(name))
        if prop is None:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return self._setter(prop)

    def _setter(self, prop: str) -> Callable[[Any], StyleBuilder]:
        def setter(value: Any = UNDEFINED) -> StyleBuilder:
            return self.set(prop, value)

        setter.__name__ = prop
        return setter

    # --- special setters ------------------------------------------------------

    def border_side_style(self, side: Any, value: Any = UNDEFINED) -> StyleBuilder:
        """Set ``border-<side>-style``. Unknown sides are ignored."""
        suffix = _SIDES.get(side) if isinstance(side, str) else None
        if suffix is not None:
            self.set(f"border{suffix}Style", value)
        return self

    def text_decoration(self, value: Any, style: Any = UNDEFINED) -> StyleBuilder:
        """Set ``text-decoration``; with a second argument sets
        ``text-decoration-style`` to *value* instead."""
        if style is UNDEFINED:
            return self.set("textDecoration", value)
        return self.set("textDecorationStyle", value)

    def mixin(self, *bags: StyleBlock) -> StyleBuilder:
        """Copy the properties of raw bags (or blocks) into the current bag."""
        for bag in bags:
            if not isinstance(bag, StyleBlock):
                raise TypeError(f"mixin() expects style blocks, got {type(bag).__name__}")
            for prop, value in bag.properties.items():
                self._bag[prop] = value
        return self

    # --- finalization ---------------------------------------------------------

    def block(self, *selectors: Any) -> StyleBlock:
        """Finalize the bag into a style block and reset it.

        Without selectors the result is a raw bag.
        """
        result = StyleBlock(
            selectors=tuple(stringify(s) for s in selectors),
            properties=self._bag,
        )
        self._bag = {}
        return result

    def nav_bar(self, *selectors: Any) -> dict[str, StyleBlock]:
        """Build the four blocks of a horizontal navigation bar.

        Positional arguments are the container, list, item and link
        selectors; the last three default to ``ul``, ``li`` and ``a``.
        """
        if not selectors:
            raise ValueError("navBar() requires selector argument.")
        parts = [stringify(s) for s in selectors[:4]]
        parts += ["ul", "li", "a"][len(parts) - 1:]
        nav, ul, li, a = parts
        return {
            "navUl": self.display("flex").listStyle("none").margin("0").padding("0")
            .block(f"{nav} {ul}"),
            "navLi": self.margin("0 10px").block(f"{nav} {ul} {li}"),
            "navA": self.color("#fff").text_decoration("none").fontWeight("bold")
            .borderRadius("3px").block(f"{nav} {ul} {li} {a}"),
            "navAhover": self.text_decoration("underline").bgColor("#555")
            .block(f"{nav} {ul} {li} {a}:hover"),
        }

    # --- script exposure ------------------------------------------------------

    def script_member(self, name: str) -> Any:
        """Resolve ``chain.<name>`` for the script interpreter."""
        if name == "cssOutput":
            return UNDEFINED if self.css_output is None else self.css_output
        if name in _OPERATIONS:
            return getattr(self, _OPERATIONS[name])
        if name in PROPERTY_SETTERS:
            return self._setter(PROPERTY_SETTERS[name])
        raise AttributeError(f"chain has no member {name!r}")

    def set_script_member(self, name: str, value: Any) -> None:
        if name != "cssOutput":
            raise AttributeError(f"chain.{name} cannot be assigned")
        self.css_output = value
