"""Display labels and help comments for style keys."""

from typing import List, NamedTuple, Optional, Sequence, Tuple


class LabelRule(NamedTuple):
    """Substring rule: a key name containing ``pattern`` gets this label/comment.

    A rule with label None only contributes a comment; the label then falls
    back to the title-cased key name.
    """
    pattern: str
    label: Optional[str]
    comment: Optional[str]


# Checked in order; first match wins, so specific patterns come first.
LABEL_RULES: List[LabelRule] = [
    LabelRule("background_color", "Background Color", "Sets the background color of this element"),
    LabelRule("text_color", "Text Color", "Sets the color of the text"),
    LabelRule("border_color", "Border Color", "Sets the color of the border"),
    LabelRule("border_radius", "Border Radius", "Sets how rounded the corners are"),
    LabelRule("border_width", "Border Width", "Sets the thickness of the border"),
    LabelRule("font_family", "Font Family", "Sets the typeface used for text"),
    LabelRule("font_size", "Font Size", "Sets the size of the text"),
    LabelRule("font_weight", "Font Weight", "Sets how bold the text is"),
    LabelRule("line_height", "Line Height", "Sets the vertical spacing between lines of text"),
    LabelRule("box_shadow", "Box Shadow", "Sets the shadow drawn around this element"),
    LabelRule("shadow", "Shadow", "Sets the shadow drawn around this element"),
    LabelRule("opacity", "Opacity", "Sets how transparent this element is"),
    LabelRule("padding", "Padding", "Sets the space between the content and the border"),
    LabelRule("margin", "Margin", "Sets the space around the outside of this element"),
    LabelRule("max_width", "Max Width", "Sets the largest width this element can grow to"),
    LabelRule("min_width", "Min Width", "Sets the smallest width this element can shrink to"),
    LabelRule("width", "Width", "Sets the width of this element"),
    LabelRule("height", "Height", "Sets the height of this element"),
    LabelRule("gap", "Gap", "Sets the space between child elements"),
    LabelRule("accent", "Accent Color", "Sets the highlight color used for emphasis"),
    LabelRule("color", "Color", "Sets the color of this element"),
    LabelRule("visible", None, "Controls whether this element is shown"),
    LabelRule("enabled", None, "Controls whether this feature is turned on"),
    LabelRule("hover", None, "Style applied when hovering over this element"),
    LabelRule("active", None, "Style applied while this element is pressed"),
    LabelRule("disabled", None, "Style applied when this element is disabled"),
    LabelRule("focused", None, "Style applied when this element has keyboard focus"),
    LabelRule("selected", None, "Style applied when this element is selected"),
]

_STATE_PATTERNS = ("hover", "active", "disabled", "focused", "selected")


def title_case(name: str) -> str:
    """'background_color' -> 'Background Color'."""
    words = name.replace("_", " ").split()
    return " ".join(word.capitalize() for word in words)


def _match(name: str) -> Optional[LabelRule]:
    lowered = name.lower()
    for rule in LABEL_RULES:
        if rule.pattern in lowered:
            return rule
    return None


def label_for_name(name: str) -> Tuple[str, Optional[str]]:
    """Label and comment for a single key name."""
    rule = _match(name)
    if rule is None:
        return title_case(name), None
    return rule.label or title_case(name), rule.comment


def describe_key(path: Sequence[str]) -> Tuple[str, Optional[str]]:
    """Label and comment for a key addressed by its (possibly flattened) path.

    Prefix segments of a flattened key are title-cased into the label
    ("hover.text_color" -> "Hover / Text Color"). When the leaf name has no
    comment, a state prefix such as "hover" supplies one.
    """
    *prefix, leaf = path
    label, comment = label_for_name(leaf)
    if not prefix:
        return label, comment

    label = " / ".join([title_case(segment) for segment in prefix] + [label])
    if comment is None:
        for segment in reversed(prefix):
            if segment.lower() in _STATE_PATTERNS:
                comment = _match(segment).comment
                break
    return label, comment
