"""
Side-panel editor for the selected component.

The fields shown for each component type come from a fixed schema table.
Edits are converted to their stored form here (tags, dates, images) and
applied straight away; there is no draft state.
"""
import base64
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from markupsafe import Markup, escape

from .components import ComponentType
from .dates import DateFormatter
from .renderers import env

MAX_IMAGE_BYTES = 5 * 1024 * 1024


class FieldKind(str, Enum):
    RICH_TEXT = "rich_text"
    INPUT = "input"
    TAGS = "tags"
    SELECT = "select"
    CHECKBOX = "checkbox"
    DATE = "date"
    IMAGE = "image"
    IMAGE_LIST = "image_list"
    COLOR = "color"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: FieldKind
    options: Tuple[Tuple[str, str], ...] = ()
    # hide this field while the named checkbox is ticked
    hidden_when: Optional[str] = None


def _rich(name, label):
    return FieldSpec(name, label, FieldKind.RICH_TEXT)


def _date(name, label, hidden_when=None):
    return FieldSpec(name, label, FieldKind.DATE, hidden_when=hidden_when)


WIDTH_OPTIONS = (("small", "Small (33%)"), ("medium", "Medium (50%)"),
                 ("large", "Large (75%)"), ("full", "Full (100%)"))
ALIGNMENT_OPTIONS = (("left", "Left"), ("center", "Center"), ("right", "Right"))
STYLE_OPTIONS = (("solid", "Solid"), ("dashed", "Dashed"), ("dotted", "Dotted"))
THICKNESS_OPTIONS = (("thin", "Thin"), ("medium", "Medium"), ("thick", "Thick"))

EDITOR_SCHEMAS = {
    ComponentType.HERO: (
        _rich("name", "Name"),
        _rich("title", "Title"),
        _rich("bio", "Bio"),
    ),
    ComponentType.HEADER: (
        _rich("text", "Heading Text"),
    ),
    ComponentType.TEXT: (
        _rich("text", "Text Content"),
    ),
    ComponentType.ABOUT: (
        _rich("heading", "Heading"),
        _rich("text", "Text"),
    ),
    ComponentType.PROJECT: (
        _rich("title", "Title"),
        _rich("description", "Description"),
        FieldSpec("image", "Project Image", FieldKind.IMAGE),
        FieldSpec("tags", "Tags (comma-separated)", FieldKind.TAGS),
        FieldSpec("detailsLink", "Project Link (optional)", FieldKind.INPUT),
        FieldSpec("additionalImages", "Additional Images (Gallery)", FieldKind.IMAGE_LIST),
    ),
    ComponentType.EXPERIENCE: (
        _rich("company", "Company"),
        _rich("position", "Position"),
        FieldSpec("current", "I currently work here", FieldKind.CHECKBOX),
        _date("startDate", "Start Date"),
        _date("endDate", "End Date", hidden_when="current"),
        _rich("description", "Description"),
    ),
    ComponentType.EDUCATION: (
        _rich("school", "School/University"),
        _rich("degree", "Degree"),
        FieldSpec("current", "I currently study here", FieldKind.CHECKBOX),
        _date("startDate", "Start Date"),
        _date("endDate", "End Date", hidden_when="current"),
        _rich("description", "Description (optional)"),
    ),
    ComponentType.CERTIFICATION: (
        _rich("name", "Certification Name"),
        _rich("issuer", "Issuing Organization"),
        _date("date", "Issue Date"),
        _date("expirationDate", "Expiration Date (optional)"),
        FieldSpec("credentialLink", "Credential Link (optional)", FieldKind.INPUT),
        FieldSpec("image", "Badge Image (optional)", FieldKind.IMAGE),
    ),
    ComponentType.IMAGE: (
        FieldSpec("url", "Image", FieldKind.IMAGE),
        _rich("caption", "Caption (optional)"),
        FieldSpec("width", "Width", FieldKind.SELECT, options=WIDTH_OPTIONS),
        FieldSpec("alignment", "Alignment", FieldKind.SELECT, options=ALIGNMENT_OPTIONS),
    ),
    ComponentType.DIVIDER: (
        FieldSpec("style", "Style", FieldKind.SELECT, options=STYLE_OPTIONS),
        FieldSpec("thickness", "Thickness", FieldKind.SELECT, options=THICKNESS_OPTIONS),
        FieldSpec("color", "Color", FieldKind.COLOR),
    ),
}

if set(EDITOR_SCHEMAS) != set(ComponentType):
    raise RuntimeError("every component type needs an editor schema")


def schema_for(component_type):
    return EDITOR_SCHEMAS[ComponentType(component_type)]


def field_spec(component_type, field_name) -> FieldSpec:
    for spec in schema_for(component_type):
        if spec.name == field_name:
            return spec
    raise KeyError(f"{component_type} has no field {field_name!r}")


def visible_fields(component_type, content: dict):
    return [spec for spec in schema_for(component_type)
            if not (spec.hidden_when and content.get(spec.hidden_when))]


# ---------------------------------------------------------------------------
# Value conversion
# ---------------------------------------------------------------------------

def tags_from_text(text):
    return [tag.strip() for tag in (text or "").split(",") if tag.strip()]


def tags_to_text(tags):
    return ", ".join(tags or [])


def convert_value(spec: FieldSpec, raw):
    """Turn what the panel hands over into the value stored on the component."""
    if spec.kind == FieldKind.TAGS:
        if isinstance(raw, (list, tuple)):
            return [str(tag).strip() for tag in raw if str(tag).strip()]
        return tags_from_text(raw)
    if spec.kind == FieldKind.CHECKBOX:
        if isinstance(raw, str):
            return raw.lower() in ("1", "true", "on", "yes")
        return bool(raw)
    if spec.kind == FieldKind.SELECT:
        allowed = [value for value, _ in spec.options]
        if raw not in allowed:
            raise ValueError(f"{spec.name} must be one of {allowed}")
        return raw
    if spec.kind == FieldKind.IMAGE_LIST:
        return list(raw or [])
    return "" if raw is None else str(raw)


# ---------------------------------------------------------------------------
# Composite date input
# ---------------------------------------------------------------------------

class DateInput:
    """
    Three numeric boxes (MM / DD / YYYY) bound to one stored date string.

    Each keystroke rebuilds the stored value; a box that reaches its digit
    limit moves focus to the next one.
    """

    PARTS = (("month", 2), ("day", 2), ("year", 4))

    def __init__(self, value=""):
        self.parts = DateFormatter.parse(value)
        self.focus = "month"

    @property
    def value(self):
        return DateFormatter.build(self.parts["year"], self.parts["month"], self.parts["day"])

    def max_length(self, part):
        return dict(self.PARTS)[part]

    def type_into(self, part, text):
        """Set one box from raw input; returns the rebuilt stored date."""
        max_len = self.max_length(part)
        digits = re.sub(r"\D", "", text or "")[:max_len]
        self.parts[part] = digits
        self.focus = part
        if len(digits) == max_len:
            names = [name for name, _ in self.PARTS]
            position = names.index(part)
            if position + 1 < len(names):
                self.focus = names[position + 1]
        return self.value


# ---------------------------------------------------------------------------
# Image picker
# ---------------------------------------------------------------------------

class ImageUploadError(ValueError):
    pass


def read_image_as_data_url(data: bytes, mimetype: str) -> str:
    if not mimetype or not mimetype.startswith("image/"):
        raise ImageUploadError("Please select an image file")
    if len(data) > MAX_IMAGE_BYTES:
        raise ImageUploadError("Image size must be less than 5MB")
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mimetype};base64,{encoded}"


# ---------------------------------------------------------------------------
# Rich text toolbar
# ---------------------------------------------------------------------------

TOOLBAR_COMMANDS = (
    ("bold", "Bold", "bold"),
    ("italic", "Italic", "italic"),
    ("underline", "Underline", "underline"),
    ("insertUnorderedList", "Bullet List", "list"),
    ("insertOrderedList", "Numbered List", "list-ordered"),
    ("link", "Insert Link", "link"),
)

_INLINE_TAGS = {"bold": "b", "italic": "i", "underline": "u"}
_LIST_TAGS = {"insertUnorderedList": "ul", "insertOrderedList": "ol"}


def apply_command(fragment, command, url=None):
    """Apply a toolbar command to the selected fragment of rich text."""
    if command in _INLINE_TAGS:
        tag = _INLINE_TAGS[command]
        return f"<{tag}>{fragment}</{tag}>"
    if command in _LIST_TAGS:
        tag = _LIST_TAGS[command]
        items = "".join(f"<li>{line}</li>" for line in fragment.splitlines() if line.strip())
        return f"<{tag}>{items}</{tag}>"
    if command == "link":
        if not url:
            return fragment
        return f'<a href="{escape(url)}">{fragment}</a>'
    raise ValueError(f"unknown toolbar command: {command}")


# ---------------------------------------------------------------------------
# Panel markup
# ---------------------------------------------------------------------------

def render_editor(component):
    content = component.content.to_dict()
    fields = []
    for spec in schema_for(component.type):
        value = content.get(spec.name)
        field = {
            "spec": spec,
            "value": value,
            "hidden": bool(spec.hidden_when and content.get(spec.hidden_when)),
        }
        if spec.kind == FieldKind.TAGS:
            field["value"] = tags_to_text(value)
        elif spec.kind == FieldKind.DATE:
            field["parts"] = DateFormatter.parse(value)
        fields.append(field)
    return Markup(env.get_template("editor.html").render(
        component_id=component.id,
        fields=fields,
        toolbar=TOOLBAR_COMMANDS,
        kinds=FieldKind,
    ))
