"""The in-memory list of components being edited."""
import logging

from .components import CONTENT_MODELS, build_component

logger = logging.getLogger(__name__)


class BuilderError(ValueError):
    """Raised for mutations that would break the component list."""


class ComponentStore:
    """
    Authoritative, ordered list of components for one portfolio.

    Every mutation goes through one of ``append``, ``insert``, ``delete``,
    ``move`` and ``update_content`` and notifies the change listener right away
    (the controller re-renders the whole preview from it).
    """

    def __init__(self, components=None, on_change=None):
        self._components = []
        self._on_change = on_change
        for component in components or []:
            self._check_new_id(component.id)
            self._components.append(component)

    def __len__(self):
        return len(self._components)

    def __iter__(self):
        return iter(list(self._components))

    @property
    def components(self):
        return list(self._components)

    def set_listener(self, on_change):
        self._on_change = on_change

    def ids(self):
        return [c.id for c in self._components]

    def get(self, component_id):
        for component in self._components:
            if component.id == component_id:
                return component
        return None

    def index_of(self, component_id):
        for index, component in enumerate(self._components):
            if component.id == component_id:
                return index
        return -1

    # -- mutations -------------------------------------------------------

    def append(self, component):
        self._check_new_id(component.id)
        self._components.append(component)
        self._changed()
        return component

    def insert(self, index, component):
        self._check_new_id(component.id)
        index = max(0, min(index, len(self._components)))
        self._components.insert(index, component)
        self._changed()
        return component

    def delete(self, component_id):
        index = self.index_of(component_id)
        if index < 0:
            return None
        removed = self._components.pop(index)
        self._changed()
        return removed

    def move(self, from_index, to_index):
        """
        Extract the component at ``from_index`` and reinsert it at ``to_index``.

        ``to_index`` is read against the list with the component already
        removed, so ``move(0, 2)`` on ``[A, B, C]`` gives ``[B, C, A]``.
        """
        if not 0 <= from_index < len(self._components):
            raise BuilderError(f"no component at index {from_index}")
        moved = self._components.pop(from_index)
        to_index = max(0, min(to_index, len(self._components)))
        self._components.insert(to_index, moved)
        self._changed()
        return moved

    def update_content(self, component_id, content):
        """Replace a component's content; the id and type never change."""
        index = self.index_of(component_id)
        if index < 0:
            raise BuilderError(f"unknown component id: {component_id}")
        current = self._components[index]
        content_model = CONTENT_MODELS[current.component_type]
        if not isinstance(content, content_model):
            content = content_model.model_validate(content)
        self._components[index] = build_component(current.id, current.component_type, content)
        self._changed()
        return self._components[index]

    def replace_all(self, components):
        seen = set()
        for component in components:
            if component.id in seen:
                raise BuilderError(f"duplicate component id: {component.id}")
            seen.add(component.id)
        self._components = list(components)
        self._changed()

    def to_list(self):
        return [c.to_dict() for c in self._components]

    def _check_new_id(self, component_id):
        if self.get(component_id) is not None:
            raise BuilderError(f"duplicate component id: {component_id}")

    def _changed(self):
        if self._on_change is not None:
            self._on_change()
