"""Element tag names used when building virtual DOM elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_KNOWN_TAGS: tuple[tuple[str, str], ...] = (
    # Standard HTML tags
    ("ADDRESS", "address"), ("ARTICLE", "article"), ("ASIDE", "aside"),
    ("FOOTER", "footer"), ("HEADER", "header"), ("H1", "h1"), ("H2", "h2"),
    ("H3", "h3"), ("H4", "h4"), ("H5", "h5"), ("H6", "h6"),
    ("HGROUP", "hgroup"), ("MAIN", "main"), ("NAV", "nav"), ("SECTION", "section"),
    ("BLOCK_QUOTE", "blockquote"), ("DD", "dd"), ("DIR", "dir"), ("DIV", "div"),
    ("DL", "dl"), ("DT", "dt"), ("FIG_CAPTION", "figcaption"), ("FIGURE", "figure"),
    ("HR", "hr"), ("LI", "li"), ("OL", "ol"), ("P", "p"), ("PRE", "pre"), ("UL", "ul"),
    ("A", "a"), ("ABBR", "abbr"), ("B", "b"), ("BDI", "bdi"), ("BDO", "bdo"),
    ("BR", "br"), ("CITE", "cite"), ("CODE", "code"), ("DATA", "data"),
    ("DFN", "dfn"), ("EM", "em"), ("I", "i"), ("KBD", "kbd"), ("MARK", "mark"),
    ("Q", "q"), ("RB", "rb"), ("RP", "rp"), ("RT", "rt"), ("RTC", "rtc"),
    ("RUBY", "ruby"), ("S", "s"), ("SAMP", "samp"), ("SMALL", "small"),
    ("SPAN", "span"), ("STRONG", "strong"), ("SUB", "sub"), ("SUP", "sup"),
    ("TIME", "time"), ("TT", "tt"), ("U", "u"), ("VAR", "var"), ("WBR", "wbr"),
    ("AREA", "area"), ("AUDIO", "audio"), ("IMG", "img"), ("MAP", "map"),
    ("TRACK", "track"), ("VIDEO", "video"),
    ("APPLET", "applet"), ("EMBED", "embed"), ("IFRAME", "iframe"),
    ("NO_EMBED", "noembed"), ("OBJECT", "object"), ("PARAM", "param"),
    ("PICTURE", "picture"), ("SOURCE", "source"),
    ("CANVAS", "canvas"), ("NO_SCRIPT", "noscript"), ("SCRIPT", "Script"),
    ("DEL", "del"), ("INS", "ins"),
    ("CAPTION", "caption"), ("COL", "col"), ("COL_GROUP", "colgroup"),
    ("TABLE", "table"), ("TBODY", "tbody"), ("TD", "td"), ("TFOOT", "tfoot"),
    ("TH", "th"), ("THEAD", "thead"), ("TR", "tr"),
    ("BUTTON", "button"), ("DATA_LIST", "datalist"), ("FIELD_SET", "fieldset"),
    ("FORM", "form"), ("INPUT", "input"), ("LABEL", "label"), ("LEGEND", "legend"),
    ("METER", "meter"), ("OPT_GROUP", "optgroup"), ("OPTION", "option"),
    ("OUTPUT", "output"), ("PROGRESS", "progress"), ("SELECT", "select"),
    ("TEXT_AREA", "textarea"),
    ("DETAILS", "details"), ("DIALOG", "dialog"), ("MENU", "menu"),
    ("MENU_ITEM", "menuitem"), ("SUMMARY", "summary"),
    ("CONTENT", "content"), ("ELEMENT", "element"), ("SHADOW", "shadow"),
    ("SLOT", "slot"), ("TEMPLATE", "template"),
    # SVG animation elements
    ("ANIMATE", "animate"), ("ANIMATE_COLOR", "animateColor"),
    ("ANIMATE_MOTION", "animateMotion"), ("ANIMATE_TRANSFORM", "animateTransform"),
    ("DISCARD", "discard"), ("MPATH", "mpath"), ("SET", "set"),
    # SVG shape elements
    ("CIRCLE", "circle"), ("ELLIPSE", "ellipse"), ("LINE", "line"),
    ("POLYGON", "polygon"), ("POLYLINE", "polyline"), ("RECT", "rect"),
    ("MESH", "mesh"), ("PATH", "path"),
    # SVG container elements
    ("DEFS", "defs"), ("G", "g"), ("MARKER", "marker"), ("MASK", "mask"),
    ("MISSING_GLYPH", "missing-glyph"), ("PATTERN", "pattern"), ("SVG", "svg"),
    ("SWITCH", "switch"), ("SYMBOL", "symbol"), ("UNKNOWN", "unknown"),
    # SVG descriptive elements
    ("DESC", "desc"), ("METADATA", "metadata"), ("TITLE", "title"),
    # SVG filter primitive elements
    ("FE_BLEND", "feBlend"), ("FE_COLOR_MATRIX", "feColorMatrix"),
    ("FE_COMPONENT_TRANSFER", "feComponentTransfer"), ("FE_COMPOSITE", "feComposite"),
    ("FE_CONVOLVE_MATRIX", "feConvolveMatrix"),
    ("FE_DIFFUSE_LIGHTING", "feDiffuseLighting"),
    ("FE_DISPLACEMENT_MAP", "feDisplacementMap"), ("FE_DROP_SHADOW", "feDropShadow"),
    ("FE_FLOOD", "feFlood"), ("FE_FUNC_A", "feFuncA"), ("FE_FUNC_B", "feFuncB"),
    ("FE_FUNC_G", "feFuncG"), ("FE_FUNC_R", "feFuncR"),
    ("FE_GAUSSIAN_BLUR", "feGaussianBlur"), ("FE_IMAGE", "feImage"),
    ("FE_MERGE", "feMerge"), ("FE_MERGE_NODE", "feMergeNode"),
    ("FE_MORPHOLOGY", "feMorphology"), ("FE_OFFSET", "feOffset"),
    ("FE_SPECULAR_LIGHTING", "feSpecularLighting"), ("FE_TILE", "feTile"),
    ("FE_TURBULENCE", "feTurbulence"),
    # SVG light source elements
    ("FE_DISTANT_LIGHT", "feDistantLight"), ("FE_POINT_LIGHT", "fePointLight"),
    ("FE_SPOT_LIGHT", "feSpotLight"),
    # SVG font elements
    ("FONT", "font"), ("FONT_FACE", "font-face"),
    ("FONT_FACE_FORMAT", "font-face-format"), ("FONT_FACE_NAME", "font-face-name"),
    ("FONT_FACE_SRC", "font-face-src"), ("FONT_FACE_URI", "font-face-uri"),
    ("H_KERN", "hkern"), ("V_KERN", "vkern"),
    # SVG gradient elements
    ("LINEAR_GRADIENT", "linearGradient"), ("MESH_GRADIENT", "meshGradient"),
    ("RADIAL_GRADIENT", "radialGradient"), ("STOP", "stop"),
    # SVG graphics and referencing elements
    ("IMAGE", "image"), ("USE", "use"),
    # SVG paint server elements
    ("HATCH", "hatch"), ("SOLID_COLOR", "solidcolor"),
    # SVG text content elements
    ("ALT_GLYPH", "altGlyph"), ("ALT_GLYPH_DEF", "altGlyphDef"),
    ("ALT_GLYPH_ITEM", "altGlyphItem"), ("GLYPH", "glyph"), ("GLYPH_REF", "glyphRef"),
    ("TEXT_PATH", "textPath"), ("TEXT", "text"), ("T_REF", "tref"), ("T_SPAN", "tspan"),
    # SVG uncategorized elements
    ("CLIP_PATH", "clipPath"), ("COLOR_PROFILE", "color-profile"),
    ("CURSOR", "cursor"), ("FILTER", "filter"), ("FOREIGN_OBJECT", "foreignObject"),
    ("HATCH_PATH", "hatchpath"), ("MESH_PATCH", "meshpatch"), ("MESH_ROW", "meshrow"),
    ("STYLE", "style"), ("VIEW", "view"),
    # Placeholder tag for internal use
    ("PLACEHOLDER", "placeholder"),
)


@dataclass(frozen=True)
class Tag:
    """An element tag: one of the known HTML/SVG tags, or a custom one."""

    name: str
    custom: bool = False

    _by_name: ClassVar[dict[str, Tag]] = {}

    def as_str(self) -> str:
        """Return the tag name as it appears in markup."""
        return self.name

    @classmethod
    def from_str(cls, name: str) -> Tag:
        """Return the known tag with this exact name, or a custom tag otherwise."""
        known = cls._by_name.get(name)
        if known is not None:
            return known
        return cls(name, custom=True)

    def is_custom(self) -> bool:
        """Whether this tag is not one of the known tags."""
        return self.custom

    def __str__(self) -> str:
        return self.name


for _attr, _value in _KNOWN_TAGS:
    _tag = Tag(_value)
    setattr(Tag, _attr, _tag)
    Tag._by_name[_value] = _tag