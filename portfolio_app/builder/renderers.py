"""
Markup for the builder preview.

One Jinja2 template per component type. Rich-text fields are written by the
logged-in owner through the editor and are inserted as-is; plain-text fields
(tags, URLs, image sources, alt text) are HTML-escaped. Missing fields render
nothing.
"""
import re
from urllib.parse import urlsplit

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from .components import PALETTE, ComponentType
from .dates import format_date

env = Environment(
    loader=PackageLoader("portfolio_app.builder", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["format_date"] = format_date

LINK_SCHEMES = ("http", "https", "mailto")


def safe_url(url):
    """``url`` when it is relative or uses an allowed link scheme, else ``""``."""
    # browsers ignore whitespace and control characters inside a scheme
    cleaned = re.sub(r"[\x00-\x20\x7f]", "", url or "")
    if not cleaned:
        return ""
    try:
        scheme = urlsplit(cleaned).scheme.lower()
    except ValueError:
        return ""
    if scheme and scheme not in LINK_SCHEMES:
        return ""
    return url.strip()


env.filters["safe_url"] = safe_url

RENDERERS = {component_type: f"components/{component_type.value}.html" for component_type in ComponentType}

_missing = set(RENDERERS.values()) - set(env.list_templates())
if _missing:
    raise RuntimeError(f"missing component templates: {sorted(_missing)}")


def _content_of(component):
    if hasattr(component, "content"):
        return component.content.to_dict()
    return component.get("content") or {}


def _type_of(component):
    return component.type if hasattr(component, "type") else component.get("type")


def _id_of(component):
    return component.id if hasattr(component, "id") else component.get("id")


def render_component(component, edit_mode=False, index=0, total=1, selected=False):
    """Markup for a single component, wrapped with drag/move controls in edit mode."""
    try:
        template_name = RENDERERS[ComponentType(_type_of(component))]
    except ValueError:
        body = Markup("<div>Unknown component type</div>")
    else:
        body = Markup(env.get_template(template_name).render(c=_content_of(component)))

    if not edit_mode:
        return body

    return Markup(env.get_template("wrapper.html").render(
        component={"id": _id_of(component), "type": _type_of(component)},
        body=body,
        index=index,
        is_first=index == 0,
        is_last=index == total - 1,
        selected=selected,
    ))


def render_portfolio(components, template, edit_mode=False, selected_id=None):
    """The whole preview pane, re-rendered from scratch on every change."""
    components = list(components)
    total = len(components)
    blocks = [
        render_component(component, edit_mode=edit_mode, index=index, total=total,
                         selected=edit_mode and _id_of(component) == selected_id)
        for index, component in enumerate(components)
    ]
    return Markup(env.get_template("portfolio.html").render(template=template, blocks=blocks))


def render_palette():
    return Markup(env.get_template("palette.html").render(palette=PALETTE))


def render_project_detail(component):
    """Expanded view of a project: gallery, role/timeline and long-form sections."""
    content = _content_of(component)
    images = [img for img in [content.get("image")] + list(content.get("additionalImages") or []) if img]
    return Markup(env.get_template("project_modal.html").render(c=content, images=images))
