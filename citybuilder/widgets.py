"""Layout constraints, mouse events and the basic widgets of the user interface.

A widget lays itself out inside its parent, or inside the screen when it
has no parent. The screen is given by the ``gui`` object every widget
holds: it must offer ``box()`` returning a :class:`Rectangle`, and for
labels a ``text_renderer`` with ``width(text, size)`` and
``height(text, size)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Generic, List, Optional, Protocol, Tuple, TypeVar

Color = Tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0, 1.0)
TRANSPARENT: Color = (0.0, 0.0, 0.0, 0.0)
ANTHRAZITE_GREY: Color = (0.16, 0.16, 0.16, 1.0)
WARNING: Color = (1.0, 0.3, 0.2, 1.0)

#: Mouse button and action codes as delivered by the windowing layer.
MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1
RELEASE = 0
PRESS = 1


class ConstraintType(Enum):
    """How a constraint value is interpreted."""

    ABSOLUTE = auto()
    RELATIVE = auto()
    CENTER = auto()
    ASPECT = auto()
    FIT_TO_CONTENT = auto()


@dataclass(frozen=True)
class Constraint:
    """One layout rule for a position or a size."""

    type: ConstraintType
    value: float = 0.0

    @classmethod
    def absolute(cls, value: float) -> "Constraint":
        """A value in pixels."""
        return cls(ConstraintType.ABSOLUTE, float(value))

    @classmethod
    def relative(cls, value: float) -> "Constraint":
        """A fraction of the parent's extent."""
        return cls(ConstraintType.RELATIVE, float(value))

    @classmethod
    def center(cls) -> "Constraint":
        """Centered in the parent (positions only)."""
        return cls(ConstraintType.CENTER)

    @classmethod
    def aspect(cls, value: float) -> "Constraint":
        """Derived from the other size by an aspect ratio (sizes only)."""
        return cls(ConstraintType.ASPECT, float(value))

    @classmethod
    def fit_to_content(cls) -> "Constraint":
        """Sized by the widget's content."""
        return cls(ConstraintType.FIT_TO_CONTENT)


@dataclass
class Constraints:
    """Position and size rules of a widget."""

    x: Constraint = field(default_factory=Constraint.center)
    y: Constraint = field(default_factory=Constraint.center)
    width: Constraint = field(default_factory=lambda: Constraint.relative(1.0))
    height: Constraint = field(default_factory=lambda: Constraint.relative(1.0))

    def valid(self) -> bool:
        """Whether the rules can be resolved into a box."""
        if ConstraintType.ASPECT in (self.x.type, self.y.type):
            return False
        if self.width.type is ConstraintType.ASPECT and self.height.type is ConstraintType.ASPECT:
            return False
        if ConstraintType.CENTER in (self.width.type, self.height.type):
            return False
        return True


@dataclass
class Rectangle:
    """Screen area given by its top left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the rectangle, edges included."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@dataclass
class MouseMoveEvent:
    """Cursor moved from ``(last_x, last_y)`` to ``(x, y)``."""

    x: float
    y: float
    last_x: float
    last_y: float
    handled: bool = False


@dataclass
class MouseButtonEvent:
    """A mouse button was pressed or released at ``(x, y)``."""

    x: float
    y: float
    button: int
    action: int
    mods: int = 0
    handled: bool = False


E = TypeVar("E")


class EventDispatcher(Generic[E]):
    """Calls its subscribers in the order they subscribed."""

    def __init__(self) -> None:
        self._subscribers: List[Callable[[E], object]] = []

    def subscribe(self, handler: Callable[[E], object]) -> None:
        self._subscribers.append(handler)

    def __iadd__(self, handler: Callable[[E], object]) -> "EventDispatcher[E]":
        self.subscribe(handler)
        return self

    def invoke(self, event: E) -> None:
        for handler in self._subscribers:
            handler(event)

    def __len__(self) -> int:
        return len(self._subscribers)


class TextMeasure(Protocol):
    def width(self, text: str, size: int) -> float: ...

    def height(self, text: str, size: int) -> float: ...


class Screen(Protocol):
    def box(self) -> Rectangle: ...


class Widget:
    """A rectangular element laid out by its constraints."""

    def __init__(self, widget_id: str, gui: Screen, background_color: Color = TRANSPARENT) -> None:
        self.id = widget_id
        self.gui = gui
        self.background_color = background_color
        self.constraints = Constraints()
        self.parent: Optional["Container"] = None
        self.visible = True
        self.corner_radius = 0.0
        self.on_mouse_enter: EventDispatcher[MouseMoveEvent] = EventDispatcher()
        self.on_mouse_leave: EventDispatcher[MouseMoveEvent] = EventDispatcher()

    def handle_mouse_button(self, event: MouseButtonEvent) -> None:
        """Plain widgets ignore mouse buttons."""

    def handle_mouse_move(self, event: MouseMoveEvent) -> None:
        """Fire the enter and leave events for a cursor movement."""
        if not self.visible:
            return
        area = self.box()
        was_inside = area.contains(event.last_x, event.last_y)
        is_inside = area.contains(event.x, event.y)
        if was_inside and is_inside:
            self.on_mouse_enter.invoke(event)
        if was_inside and not is_inside:
            self.on_mouse_leave.invoke(event)

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def update(self) -> None:
        """Per-frame update; nothing to do for a plain widget."""

    def box(self) -> Rectangle:
        """Resolve the constraints against the parent's box."""
        parent_box = self.gui.box() if self.parent is None else self.parent.box()
        c = self.constraints

        width = height = 0.0
        if c.height.type is ConstraintType.ABSOLUTE:
            height = c.height.value
        elif c.height.type is ConstraintType.RELATIVE:
            height = c.height.value * parent_box.height
        if c.width.type is ConstraintType.ABSOLUTE:
            width = c.width.value
        elif c.width.type is ConstraintType.RELATIVE:
            width = c.width.value * parent_box.width

        if c.height.type is ConstraintType.ASPECT:
            height = width / c.height.value
        elif c.width.type is ConstraintType.ASPECT:
            width = height * c.width.value

        x, y = parent_box.x, parent_box.y
        if c.x.type is ConstraintType.ABSOLUTE:
            x += c.x.value
        elif c.x.type is ConstraintType.RELATIVE:
            x += c.x.value * parent_box.width
        elif c.x.type is ConstraintType.CENTER:
            x += (parent_box.width - width) * 0.5

        if c.y.type is ConstraintType.ABSOLUTE:
            y += c.y.value
        elif c.y.type is ConstraintType.RELATIVE:
            y += c.y.value * parent_box.height
        elif c.y.type is ConstraintType.CENTER:
            y += (parent_box.height - height) * 0.5

        return Rectangle(x, y, width, height)


class Container(Widget):
    """A widget that holds child widgets and passes events on to them."""

    def __init__(self, widget_id: str, gui: Screen, background_color: Color = TRANSPARENT) -> None:
        super().__init__(widget_id, gui, background_color)
        self.children: List[Widget] = []

    def handle_mouse_button(self, event: MouseButtonEvent) -> None:
        if not self.visible:
            return
        for child in self.children:
            child.handle_mouse_button(event)

    def handle_mouse_move(self, event: MouseMoveEvent) -> None:
        if not self.visible:
            return
        for child in self.children:
            child.handle_mouse_move(event)

    def add_child(self, child: Widget) -> None:
        """Append a child, make this its parent and lay the children out again."""
        self.children.append(child)
        child.parent = self
        self.set_child_constraints()

    def child(self, widget_id: str) -> Optional[Widget]:
        """The first direct child with the given id, or None."""
        return next((c for c in self.children if c.id == widget_id), None)

    def set_child_constraints(self) -> None:
        """Lay out the children; the plain container only refreshes nested containers."""
        for child in self.children:
            if isinstance(child, Container):
                child.set_child_constraints()

    def show(self) -> None:
        super().show()
        for child in self.children:
            child.show()

    def hide(self) -> None:
        super().hide()
        for child in self.children:
            child.hide()

    def update(self) -> None:
        for child in self.children:
            child.update()


class Button(Widget):
    """A clickable widget that lights up while the cursor is over it."""

    def __init__(self, widget_id: str, gui: Screen, background_color: Color = ANTHRAZITE_GREY) -> None:
        super().__init__(widget_id, gui, background_color)
        self._init_button()

    def _init_button(self) -> None:
        self.on_click: EventDispatcher[MouseButtonEvent] = EventDispatcher()
        self.on_mouse_enter += self._highlight
        self.on_mouse_leave += self._unhighlight

    def _highlight(self, event: MouseMoveEvent) -> None:
        self.background_color = WHITE

    def _unhighlight(self, event: MouseMoveEvent) -> None:
        self.background_color = ANTHRAZITE_GREY

    def handle_mouse_button(self, event: MouseButtonEvent) -> None:
        """Fire ``on_click`` when the left button is released inside the button."""
        if not self.visible:
            return
        if not self.box().contains(event.x, event.y):
            return
        if event.action == RELEASE and event.button == MOUSE_BUTTON_LEFT:
            self.on_click.invoke(event)


class TextAlign(Enum):
    BEGIN = auto()
    CENTER = auto()
    END = auto()


class Label(Widget):
    """A widget showing a line of text."""

    def __init__(
        self,
        widget_id: str,
        gui: Screen,
        background_color: Color = TRANSPARENT,
        text: str = "",
        text_size: int = 16,
        text_color: Color = WHITE,
    ) -> None:
        super().__init__(widget_id, gui, background_color)
        self.text = text
        self.text_size = text_size
        self.text_color = text_color
        self.text_align = TextAlign.CENTER

    def box(self) -> Rectangle:
        """The widget box, with sizes that fit the content taken from the text."""
        c = self.constraints
        fit_height = c.height.type is ConstraintType.FIT_TO_CONTENT
        fit_width = c.width.type is ConstraintType.FIT_TO_CONTENT
        area = super().box()
        if not (fit_height or fit_width):
            return area
        renderer: TextMeasure = self.gui.text_renderer  # type: ignore[attr-defined]
        if fit_height:
            area.height = renderer.height(self.text, self.text_size)
        if fit_width:
            area.width = renderer.width(self.text, self.text_size)
        return area


class TextButton(Label, Button):
    """A button with a text label whose text darkens while hovered."""

    def __init__(
        self,
        widget_id: str,
        gui: Screen,
        background_color: Color = ANTHRAZITE_GREY,
        text: str = "",
        text_size: int = 16,
        text_color: Color = WHITE,
    ) -> None:
        Label.__init__(self, widget_id, gui, background_color, text, text_size, text_color)
        self._init_button()
        self.on_mouse_enter += self._darken_text
        self.on_mouse_leave += self._lighten_text

    def _darken_text(self, event: MouseMoveEvent) -> None:
        self.text_color = BLACK

    def _lighten_text(self, event: MouseMoveEvent) -> None:
        self.text_color = WHITE