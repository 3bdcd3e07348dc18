"""
The builder's single owner of state.

Event handlers (clicks, drags, inputs, fetch completions) call methods on
``BuilderController`` and nothing else; every change to the component list
goes through its ``ComponentStore``, which triggers a full re-render.
"""
import logging
import uuid

from markupsafe import Markup

from .client import ApiError, AuthRequired
from .components import PALETTE_BY_TYPE, ComponentType, PortfolioDocument, build_component
from .dragdrop import ComponentDrag, DragDropManager, PaletteDrag
from .editor import (
    DateInput,
    FieldKind,
    ImageUploadError,
    convert_value,
    field_spec,
    read_image_as_data_url,
    render_editor,
)
from .renderers import render_palette, render_portfolio
from .starters import default_components
from .store import BuilderError, ComponentStore

logger = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load portfolio. Please try again or create a new one."
SAVE_ERROR = "An error occurred while saving. Please try again."


class BuilderController:
    def __init__(self, client=None, alert=None, auto_scroller=None, id_factory=None):
        self.client = client
        self.alert = alert or (lambda message: logger.warning(f"⚠️ {message}"))
        self.id_factory = id_factory or (lambda: uuid.uuid4().hex)

        self.store = ComponentStore(on_change=self.render)
        self.drag = DragDropManager(auto_scroller)

        self.portfolio_id = None
        self.name = ""
        self.template = None

        self.preview_mode = False
        self.show_palette = False
        self.selected_component_id = None
        self.editor_open = False
        self.error = None
        self.notification = None

        self._date_inputs = {}
        self.preview_html = Markup("")
        self.editor_html = Markup("")
        self.palette_html = Markup("")
        self.render_count = 0

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------

    @property
    def has_document(self):
        return self.template is not None

    def document(self):
        return {
            "id": self.portfolio_id,
            "name": self.name,
            "template": self.template,
            "components": self.store.to_list(),
        }

    def select_template(self, template):
        """Start from a template's starter components (an id being edited is kept)."""
        self.template = template
        self._date_inputs.clear()
        self.selected_component_id = None
        self.editor_open = False
        self.error = None
        self.show_palette = True
        self.palette_html = render_palette()
        self.store.replace_all(default_components(template))

    def load_existing(self, portfolio_id):
        """Fetch a saved portfolio. Failures leave an inline error and return False."""
        try:
            data = self.client.get_portfolio(portfolio_id)
            document = PortfolioDocument.model_validate(data)
        except AuthRequired:
            raise
        except (ApiError, ValueError) as e:
            logger.error(f"❌ Error loading portfolio {portfolio_id}: {e}")
            self.error = LOAD_ERROR
            return False

        self._date_inputs.clear()
        self.portfolio_id = document.id
        self.name = document.name
        self.template = document.template
        self.selected_component_id = None
        self.editor_open = False
        self.error = None
        self.palette_html = render_palette()
        self.store.replace_all(document.components)
        return True

    def go_back(self):
        """Leave the builder and return to template selection."""
        self.template = None
        self.portfolio_id = None
        self.name = ""
        self.selected_component_id = None
        self._date_inputs.clear()
        self.editor_open = False
        self.drag.end()
        self.store.replace_all([])

    # ------------------------------------------------------------------
    # Component management
    # ------------------------------------------------------------------

    def _new_component(self, component_type):
        if not self.has_document:
            raise BuilderError("select a template first")
        entry = PALETTE_BY_TYPE[ComponentType(component_type)]
        return build_component(self.id_factory(), entry.type, entry.new_content())

    def add_component(self, component_type):
        return self.store.append(self._new_component(component_type))

    def add_component_at(self, component_type, index):
        return self.store.insert(index, self._new_component(component_type))

    def update_component(self, component_id, content):
        return self.store.update_content(component_id, content)

    def move_component(self, from_index, to_index):
        if from_index == to_index:
            return
        self.store.move(from_index, to_index)

    def move_up(self, index):
        if index > 0:
            self.move_component(index, index - 1)

    def move_down(self, index):
        if index < len(self.store) - 1:
            self.move_component(index, index + 1)

    def delete_component(self, component_id):
        if component_id == self.selected_component_id:
            self.selected_component_id = None
            self.editor_open = False
        self._forget_date_inputs(component_id)
        return self.store.delete(component_id)

    def delete_selected_component(self):
        if not self.selected_component_id:
            return None
        return self.delete_component(self.selected_component_id)

    # ------------------------------------------------------------------
    # Selection / panels
    # ------------------------------------------------------------------

    @property
    def selected_component(self):
        if not self.selected_component_id:
            return None
        return self.store.get(self.selected_component_id)

    def select_component(self, component_id):
        if self.preview_mode:
            return
        self.selected_component_id = component_id
        self.editor_open = self.store.get(component_id) is not None
        self.render()

    def close_editor(self):
        self.selected_component_id = None
        self.editor_open = False
        self.render()

    def toggle_palette(self):
        self.show_palette = not self.show_palette

    def toggle_preview(self):
        self.preview_mode = not self.preview_mode
        if self.preview_mode:
            self.show_palette = False
            self.editor_open = False
            self.selected_component_id = None
            self.drag.end()
        self.render()

    # ------------------------------------------------------------------
    # Drag and drop
    # ------------------------------------------------------------------

    def start_palette_drag(self, component_type):
        return self.drag.start_palette_drag(ComponentType(component_type).value)

    def start_component_drag(self, component_id):
        index = self.store.index_of(component_id)
        if index < 0:
            raise BuilderError(f"unknown component id: {component_id}")
        return self.drag.start_component_drag(component_id, index)

    def drag_over(self, boxes, pointer_y):
        if self.preview_mode:
            return None
        return self.drag.drag_over(boxes, pointer_y)

    def drop(self):
        result = self.drag.drop()
        if result is None:
            return None
        payload, index = result
        if isinstance(payload, PaletteDrag):
            if index < 0:
                return self.add_component(payload.component_type)
            return self.add_component_at(payload.component_type, index)
        if isinstance(payload, ComponentDrag):
            self.move_component(payload.index, index)
            return self.store.get(payload.component_id)
        return None

    def drag_end(self):
        self.drag.end()

    # ------------------------------------------------------------------
    # Field editing (selected component)
    # ------------------------------------------------------------------

    def _require_selected(self):
        component = self.selected_component
        if component is None:
            raise BuilderError("no component selected")
        return component

    def edit_field(self, field, raw_value):
        component = self._require_selected()
        spec = field_spec(component.type, field)
        content = component.content.to_dict()
        content[field] = convert_value(spec, raw_value)
        return self.store.update_content(component.id, content)

    def date_input(self, field):
        """The three-box input for ``field``, rebuilt whenever the stored date moved on without it."""
        component = self._require_selected()
        stored = component.content.to_dict().get(field) or ""
        key = (component.id, field)
        date_input = self._date_inputs.get(key)
        if date_input is None or date_input.value != stored:
            date_input = self._date_inputs[key] = DateInput(stored)
        return date_input

    def type_date(self, field, part, text):
        """One keystroke in a date box; returns the box that should hold focus."""
        date_input = self.date_input(field)
        self.edit_field(field, date_input.type_into(part, text))
        return date_input.focus

    def set_image(self, field, data, mimetype):
        try:
            data_url = read_image_as_data_url(data, mimetype)
        except ImageUploadError as e:
            self.alert(str(e))
            return None
        component = self._require_selected()
        if field_spec(component.type, field).kind == FieldKind.IMAGE_LIST:
            images = list(component.content.to_dict().get(field) or [])
            images.append(data_url)
            return self.edit_field(field, images)
        return self.edit_field(field, data_url)

    def clear_image(self, field):
        return self.edit_field(field, "")

    def remove_additional_image(self, index, field="additionalImages"):
        component = self._require_selected()
        images = list(component.content.to_dict().get(field) or [])
        if 0 <= index < len(images):
            del images[index]
        return self.edit_field(field, images)

    def assist_field(self, field, mode):
        """Ask the AI text assist to rewrite a field of the selected component."""
        component = self._require_selected()
        text = component.content.to_dict().get(field) or ""
        if not text.strip():
            return None
        try:
            rewritten = self.client.text_assist(text, mode, component.type, field)
        except ApiError as e:
            logger.error(f"❌ Text assist failed: {e}")
            self.alert(str(e))
            return None
        return self.edit_field(field, rewritten)

    def _forget_date_inputs(self, component_id):
        for key in [k for k in self._date_inputs if k[0] == component_id]:
            del self._date_inputs[key]

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self, name):
        name = (name or "").strip()
        if not name:
            self.alert("Please enter a portfolio name.")
            return False

        self.name = name
        try:
            result = self.client.save_portfolio(self.document())
        except ApiError as e:
            logger.error(f"❌ Error saving portfolio: {e}")
            self.alert(str(e) or SAVE_ERROR)
            return False

        if result.get("id") and not self.portfolio_id:
            self.portfolio_id = result["id"]
        self.notification = "Portfolio saved successfully!"
        logger.info(f"✅ Portfolio saved: {self.portfolio_id}")
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self):
        self.render_count += 1
        self.preview_html = render_portfolio(
            self.store.components,
            self.template,
            edit_mode=not self.preview_mode,
            selected_id=self.selected_component_id,
        )
        component = self.selected_component if self.editor_open else None
        self.editor_html = render_editor(component) if component is not None else Markup("")
