"""The table of known CSS property names and the member names derived from them."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

CSS_PROPERTY_NAMES: tuple[str, ...] = (
    "line-height", "azimuth", "max-inline-size", "outline", "z-index",
    "offset-distance", "scroll-margin-inline", "border-inline-style",
    "overflow-anchor", "grid-template", "background-origin",
    "border-inline-end-color", "-moz-border-bottom-colors", "-ms-scroll-snap-y",
    "offset-anchor", "overflow-inline", "inset-block", "-ms-content-zoom-limit-max",
    "line-clamp", "margin-inline-start", "mask-composite", "box-orient",
    "word-break", "border-bottom-width", "border-end-start-radius",
    "scroll-margin-inline-start", "-moz-outline-radius", "-moz-stack-sizing",
    "-ms-scrollbar-darkshadow-color", "grid-auto-columns", "border-image-width",
    "min-block-size", "scroll-snap-type-x", "touch-action", "-ms-block-progression",
    "float", "-moz-user-focus", "translate", "offset-path",
    "border-bottom-left-radius", "border-top-color", "-ms-scroll-limit-x-max",
    "ime-mode", "ruby-merge", "text-decoration", "transition-duration",
    "box-flex-group", "-ms-scroll-snap-x", "-ms-content-zooming",
    "-webkit-mask-origin", "background-position-y", "bottom", "margin-block",
    "min-inline-size", "column-rule-style", "background-clip", "object-fit",
    "animation", "-moz-outline-radius-bottomright", "-ms-content-zoom-snap-points",
    "border-end-end-radius", "font-variation-settings", "-ms-hyphenate-limit-chars",
    "-ms-scrollbar-highlight-color", "scroll-padding-block-end", "grid-column-gap",
    "animation-play-state", "mask-border-width", "perspective-origin",
    "-webkit-text-stroke-color", "padding-block-start", "word-wrap", "font-size",
    "scroll-padding-bottom", "border-inline-end", "overflow-y", "filter",
    "line-break", "scroll-padding-right", "font-variant", "grid-column",
    "scroll-snap-destination", "scrollbar-color", "scroll-snap-points-x",
    "overflow-block", "page-break-inside", "-ms-content-zoom-chaining",
    "-webkit-mask-position-y", "will-change", "mix-blend-mode", "overflow-x",
    "quotes", "border-inline-end-width", "contain", "outline-offset",
    "scroll-margin-inline-end", "box-lines", "margin", "box-align",
    "inset-inline-start", "-moz-binding", "font-variant-position", "min-width",
    "-moz-border-top-colors", "font-stretch", "scroll-snap-type",
    "-moz-window-shadow", "-ms-flow-into", "scroll-padding-inline",
    "column-rule-width", "margin-left", "border-image-source", "inset-inline",
    "offset-rotate", "place-items", "-ms-wrap-through", "font-feature-settings",
    "border-bottom-color", "line-height-step", "border-top-right-radius",
    "overflow-clip-box", "color-adjust", "mask", "border-style",
    "page-break-before", "counter-increment", "height", "mask-repeat",
    "border-block", "border", "border-block-width", "border-inline-color",
    "scroll-margin-bottom", "break-before", "border-inline-width",
    "-webkit-mask-image", "font-style", "grid-column-end", "border-block-end-width",
    "list-style-position", "-ms-flow-from", "-moz-float-edge",
    "-moz-window-dragging", "-ms-scrollbar-3dlight-color", "-webkit-mask-composite",
    "border-top-width", "scroll-margin-right", "-ms-scrollbar-base-color",
    "column-gap", "user-select", "zoom", "column-rule", "align-content",
    "-webkit-text-stroke", "max-block-size", "-ms-scroll-chaining",
    "border-right-color", "align-items", "border-bottom-style",
    "-moz-outline-radius-bottomleft", "border-image-slice", "column-rule-color",
    "-ms-scroll-limit", "-moz-user-input", "border-image-outset",
    "font-size-adjust", "grid-auto-flow", "text-emphasis", "border-block-start",
    "tab-size", "transition-delay", "-moz-context-properties",
    "background-attachment", "scroll-padding-inline-end", "padding-top",
    "column-fill", "border-block-end", "hanging-punctuation", "border-left-width",
    "justify-items", "max-height", "scroll-margin-block-end", "border-left-style",
    "text-transform", "-moz-image-region", "padding-inline-end", "justify-self",
    "break-after", "font-family", "scroll-snap-points-y", "grid-template-columns",
    "-ms-user-select", "mask-origin", "visibility", "text-align-last",
    "box-decoration-break", "animation-delay", "-ms-content-zoom-snap",
    "-webkit-mask", "grid-column-start", "border-spacing", "-moz-user-modify",
    "text-justify", "border-block-end-color", "flex-flow",
    "-ms-high-contrast-adjust", "-ms-overflow-style", "-webkit-appearance",
    "flex-shrink", "grid-auto-rows", "scroll-margin-left", "grid", "border-color",
    "column-span", "display", "font-variant-numeric", "padding-inline",
    "object-position", "ruby-align", "-webkit-mask-repeat", "grid-gap",
    "grid-template-areas", "border-block-start-color", "list-style", "transition",
    "unicode-bidi", "mask-clip", "-webkit-border-before-color", "mask-type",
    "overscroll-behavior", "min-height", "background-position",
    "background-position-x", "scroll-snap-align", "all", "border-left",
    "font-variant-alternates", "animation-iteration-count", "border-width",
    "transform-origin", "shape-outside", "-ms-filter", "shape-image-threshold",
    "-moz-outline-radius-topleft", "text-size-adjust", "border-bottom",
    "mask-border-slice", "padding-left", "rotate", "word-spacing",
    "image-rendering", "cursor", "-ms-scroll-translation", "top", "text-align",
    "page-break-after", "-ms-wrap-margin", "grid-row-end", "border-top-left-radius",
    "-ms-scroll-limit-y-max", "padding-right", "animation-timing-function",
    "-moz-orient", "border-right-style", "text-overflow", "scroll-snap-stop",
    "-ms-scroll-snap-points-x", "margin-bottom", "-webkit-border-before-style",
    "overscroll-behavior-x", "box-ordinal-group", "mask-mode",
    "border-right-width", "text-emphasis-position", "content", "orphans",
    "caption-side", "-webkit-overflow-scrolling", "text-orientation",
    "-ms-scrollbar-shadow-color", "grid-row-gap", "overflow-wrap", "inline-size",
    "-webkit-user-modify", "appearance", "-webkit-box-reflect", "padding",
    "-ms-hyphenate-limit-zone", "border-inline", "-ms-scroll-limit-x-min",
    "block-overflow", "-ms-wrap-flow", "writing-mode", "gap",
    "text-combine-upright", "mask-border", "isolation", "border-right",
    "margin-top", "background", "flex-wrap", "perspective", "border-image",
    "offset-position", "text-underline-position", "-ms-scroll-snap-points-y",
    "-ms-touch-select", "scroll-snap-type-y", "border-block-color",
    "mask-border-outset", "backface-visibility", "padding-block-end",
    "box-direction", "empty-cells", "font-variant-ligatures",
    "-webkit-mask-repeat-x", "text-decoration-line", "border-block-end-style",
    "flex-basis", "text-decoration-color", "color", "-moz-appearance",
    "animation-name", "scroll-margin-block", "background-image", "vertical-align",
    "position", "border-block-style", "mask-border-repeat",
    "border-inline-start-color", "inset-block-start", "-webkit-touch-callout",
    "overflow", "-ms-content-zoom-snap-type", "-ms-content-zoom-limit-min",
    "scroll-margin", "scroll-padding-block-start", "-webkit-mask-size",
    "overscroll-behavior-y", "transition-property", "-webkit-line-clamp",
    "-webkit-mask-position-x", "animation-duration", "scrollbar-width",
    "-ms-hyphenate-limit-lines", "order", "padding-block",
    "scroll-margin-block-start", "margin-right", "padding-inline-start",
    "max-width", "background-size", "border-left-color", "widows",
    "scroll-padding-top", "backdrop-filter", "scroll-snap-coordinate",
    "outline-width", "border-block-start-style", "text-rendering",
    "-moz-text-blink", "clip-path", "-webkit-text-fill-color", "width",
    "-webkit-border-before", "-moz-outline-radius-topright",
    "background-blend-mode", "-webkit-border-before-width", "text-emphasis-color",
    "grid-row", "transition-timing-function", "box-sizing",
    "font-variant-east-asian", "text-decoration-skip", "-ms-scroll-snap-type",
    "pointer-events", "-ms-scroll-limit-y-min", "column-count", "direction",
    "place-content", "initial-letter-align", "scroll-padding-block", "mask-size",
    "border-radius", "list-style-type", "border-start-start-radius",
    "border-top-style", "inset-inline-end", "transform", "shape-margin",
    "grid-row-start", "scroll-padding", "-moz-force-broken-image-icon",
    "scroll-behavior", "paint-order", "scroll-padding-inline-start",
    "-webkit-mask-clip", "text-indent", "box-flex", "offset",
    "border-bottom-right-radius", "-ms-content-zoom-limit", "flex-grow",
    "transform-box", "resize", "box-shadow", "clear", "grid-template-rows",
    "animation-fill-mode", "-moz-border-right-colors", "flex",
    "margin-inline-end", "border-collapse", "font-weight", "max-lines",
    "outline-color", "align-self", "font-language-override", "font-synthesis",
    "opacity", "-webkit-mask-position", "outline-style", "padding-bottom",
    "-webkit-mask-attachment", "mask-image", "-ms-scroll-rails",
    "border-inline-start-style", "border-inline-start-width", "hyphens", "font",
    "place-self", "mask-border-source", "scale", "text-decoration-style",
    "-ms-accelerator", "-ms-scrollbar-arrow-color", "border-top",
    "-ms-text-autospace", "block-size", "list-style-image",
    "border-start-end-radius", "font-optical-sizing", "counter-set",
    "initial-letter", "text-emphasis-style", "grid-area", "ruby-position",
    "justify-content", "caret-color", "-ms-scrollbar-face-color",
    "-webkit-mask-repeat-y", "column-width", "animation-direction", "row-gap",
    "scroll-padding-left", "letter-spacing", "border-inline-end-style",
    "text-shadow", "background-repeat", "box-pack", "white-space",
    "-webkit-text-stroke-width", "inset", "clip", "left",
    "border-block-start-width", "mask-border-mode", "margin-block-start",
    "-ms-ime-align", "image-orientation", "break-inside", "counter-reset",
    "-moz-border-left-colors", "mask-position", "right", "font-kerning",
    "scroll-margin-top", "border-inline-start", "border-image-repeat", "columns",
    "flex-direction", "-ms-scrollbar-track-color", "-webkit-tap-highlight-color",
    "text-decoration-skip-ink", "transform-style", "font-variant-caps",
    "inset-block-end", "background-color", "image-resolution", "table-layout",
    "margin-block-end", "margin-inline",
)


def _member_name(css_name: str) -> str:
    return css_name.lstrip("-").replace("-", "_").upper()


MEMBER_BY_CSS_NAME: Mapping[str, str] = MappingProxyType(
    {css: _member_name(css) for css in CSS_PROPERTY_NAMES}
)
CSS_NAME_BY_MEMBER: Mapping[str, str] = MappingProxyType(
    {member: css for css, member in MEMBER_BY_CSS_NAME.items()}
)


def style_member_name(css_name: str) -> str:
    """Return the member name for a known CSS property; raise KeyError if unknown."""
    try:
        return MEMBER_BY_CSS_NAME[css_name]
    except KeyError:
        raise KeyError(f"unknown CSS property: {css_name!r}") from None


def css_name_of(member_name: str) -> str:
    """Return the CSS property name for a member name; raise KeyError if unknown."""
    try:
        return CSS_NAME_BY_MEMBER[member_name]
    except KeyError:
        raise KeyError(f"unknown style member: {member_name!r}") from None