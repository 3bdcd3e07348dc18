"""
Drag and drop for the builder preview.

Two things can be dragged: a palette item (drop inserts a new component of that
type) and an existing component (drop moves it). While dragging, the drop
position is recomputed on every pointer move from the vertical midpoints of the
sibling components; a placeholder sits at that position until the drop or the
drag is cancelled. Near the top or bottom edge of the preview an auto-scroll
timer runs until the pointer leaves the edge zone or the drag ends.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

SCROLL_ZONE = 50     # px from the container edge
SCROLL_SPEED = 5     # px per tick
SCROLL_INTERVAL = 0.016  # seconds per tick


@dataclass(frozen=True)
class PaletteDrag:
    component_type: str
    effect: str = "copy"


@dataclass(frozen=True)
class ComponentDrag:
    component_id: str
    index: int
    effect: str = "move"


@dataclass(frozen=True)
class Box:
    """Vertical extent of a rendered component."""
    top: float
    height: float

    @property
    def midpoint(self):
        return self.top + self.height / 2


def compute_drop_index(boxes: Sequence[Box], pointer_y: float) -> int:
    """
    Index to insert at: just before the first sibling (top to bottom) whose
    midpoint lies below the pointer, or the end of the list when none does.
    """
    for index, box in enumerate(boxes):
        if pointer_y - box.midpoint < 0:
            return index
    return len(boxes)


class RepeatingTimer:
    """Calls ``callback`` every ``interval`` seconds on a daemon thread until cancelled."""

    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)

    def start(self):
        self._thread.start()
        return self

    def _run(self):
        while not self._stopped.wait(self.interval):
            self.callback()

    def cancel(self):
        self._stopped.set()

    @property
    def active(self):
        return not self._stopped.is_set()


class ScrollContainer:
    """Scroll position of the preview pane, clamped to its content."""

    def __init__(self, top=0.0, height=0.0, scroll_top=0.0, scroll_height=None):
        self.top = top
        self.height = height
        self.scroll_top = scroll_top
        self.scroll_height = scroll_height

    @property
    def bottom(self):
        return self.top + self.height

    def scroll_by(self, delta):
        value = self.scroll_top + delta
        if self.scroll_height is not None:
            value = min(value, max(0.0, self.scroll_height - self.height))
        self.scroll_top = max(0.0, value)


class AutoScroller:
    """Scrolls ``container`` while the pointer sits within ``zone`` px of an edge."""

    def __init__(self, container, timer_factory: Optional[Callable] = None,
                 zone=SCROLL_ZONE, speed=SCROLL_SPEED, interval=SCROLL_INTERVAL):
        self.container = container
        self.zone = zone
        self.speed = speed
        self.interval = interval
        self._timer_factory = timer_factory or (lambda interval, cb: RepeatingTimer(interval, cb).start())
        self._timer = None
        self.direction = 0

    @property
    def active(self):
        return self._timer is not None

    def update(self, pointer_y):
        """Re-evaluate on a pointer move; returns -1 (up), 1 (down) or 0."""
        self.cancel()
        if pointer_y < self.container.top + self.zone:
            self.direction = -1
        elif pointer_y > self.container.bottom - self.zone:
            self.direction = 1
        else:
            return 0
        self._timer = self._timer_factory(self.interval, self.tick)
        return self.direction

    def tick(self):
        if self.direction:
            self.container.scroll_by(self.direction * self.speed)

    def cancel(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self.direction = 0


class DragDropManager:
    """Tracks one drag at a time: its payload, the placeholder and auto-scroll."""

    def __init__(self, auto_scroller: Optional[AutoScroller] = None):
        self.payload = None
        self.placeholder_index: Optional[int] = None
        self.auto_scroller = auto_scroller

    @property
    def dragging(self):
        return self.payload is not None

    def start_palette_drag(self, component_type):
        self.payload = PaletteDrag(component_type=str(component_type))
        self.placeholder_index = None
        return self.payload

    def start_component_drag(self, component_id, index):
        self.payload = ComponentDrag(component_id=component_id, index=index)
        self.placeholder_index = None
        return self.payload

    def drag_over(self, boxes: Sequence[Box], pointer_y: float) -> Optional[int]:
        """
        ``boxes`` are the rendered components top to bottom. The component being
        dragged is left out of the scan, so for a move the index is already
        expressed against the list with the source removed.
        """
        if self.payload is None:
            return None
        siblings = list(boxes)
        if isinstance(self.payload, ComponentDrag) and 0 <= self.payload.index < len(siblings):
            del siblings[self.payload.index]
        self.placeholder_index = compute_drop_index(siblings, pointer_y)
        if self.auto_scroller is not None:
            self.auto_scroller.update(pointer_y)
        return self.placeholder_index

    def drop(self) -> Optional[Tuple[object, int]]:
        """Returns ``(payload, index)``, or None when nothing is being dragged."""
        payload, index = self.payload, self.placeholder_index
        self.end()
        if payload is None:
            return None
        if index is None:
            # dropped without a drag-over; a moved component stays put
            index = payload.index if isinstance(payload, ComponentDrag) else -1
        return payload, index

    def end(self):
        """Drag finished or cancelled: drop the placeholder and stop scrolling."""
        self.payload = None
        self.placeholder_index = None
        if self.auto_scroller is not None:
            self.auto_scroller.cancel()
