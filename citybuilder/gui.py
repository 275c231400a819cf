"""The user interface root: menu navigation, warnings and event routing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Protocol

from .stack_panel import ItemAlignment, StackOrientation, StackPanel
from .widgets import (
    ANTHRAZITE_GREY,
    PRESS,
    TRANSPARENT,
    WARNING,
    Container,
    Label,
    MouseButtonEvent,
    MouseMoveEvent,
    Rectangle,
    Widget,
)

#: Key codes as delivered by the windowing layer.
KEY_ESCAPE = 256
KEY_F1 = 290


class GameState(Enum):
    RUNNING = auto()
    PAUSED = auto()
    BUILD_MODE = auto()


class GameMenu(Enum):
    NONE = auto()
    PAUSE_MENU = auto()
    OPTIONS_MENU = auto()


@dataclass
class KeyEvent:
    """A key was pressed, repeated or released."""

    key: int
    scancode: int = 0
    action: int = PRESS
    mods: int = 0
    handled: bool = False


class Application(Protocol):
    game_state: GameState


class _FixedTextMeasure:
    """Text metrics for a fixed-width font scaled by the text size."""

    def __init__(self) -> None:
        self.screen_width = 0.0
        self.screen_height = 0.0

    def width(self, text: str, size: int) -> float:
        return len(text) * size * 0.6

    def height(self, text: str, size: int) -> float:
        return float(size)

    def set_screen_size(self, width: float, height: float) -> None:
        self.screen_width = width
        self.screen_height = height


class Gui:
    """Holds the menus, tracks the menu navigation stack and routes input."""

    def __init__(
        self,
        app: Application,
        width: float = 800.0,
        height: float = 600.0,
        *,
        pause_menu: Optional[Widget] = None,
        options_menu: Optional[Widget] = None,
        build_menu: Optional[Widget] = None,
        debug_panel: Optional[Widget] = None,
        text_renderer=None,
    ) -> None:
        self.app = app
        self.width = width
        self.height = height
        self.text_renderer = text_renderer if text_renderer is not None else _FixedTextMeasure()

        self.pause_menu = pause_menu or StackPanel("game_menu", self)
        self.options_menu = options_menu or StackPanel("options_menu", self)
        self.build_menu = build_menu or StackPanel(
            "build_menu", self, background_color=ANTHRAZITE_GREY, item_alignment=ItemAlignment.BEGIN
        )
        self.debug_panel = debug_panel or StackPanel(
            "debug_menu",
            self,
            StackOrientation.COLUMN,
            ANTHRAZITE_GREY,
            ItemAlignment.BEGIN,
        )
        self.warning = Label("warning_label", self, TRANSPARENT, "", 12, WARNING)
        self.warning.hide()

        self.widgets: List[Widget] = [
            self.pause_menu,
            self.options_menu,
            self.build_menu,
            self.debug_panel,
        ]
        self._navigation: List[Widget] = []

    @property
    def top_menu(self) -> Optional[Widget]:
        """The menu currently shown, or None."""
        return self._navigation[-1] if self._navigation else None

    def show_menu(self, menu: GameMenu) -> None:
        """Open a menu on top of the navigation stack; NONE closes all menus."""
        if self._navigation:
            self._navigation[-1].hide()

        if menu is GameMenu.NONE:
            self._navigation.clear()
            self.app.game_state = GameState.RUNNING
            return
        if menu is GameMenu.PAUSE_MENU:
            self._navigation.append(self.pause_menu)
        elif menu is GameMenu.OPTIONS_MENU:
            self._navigation.append(self.options_menu)
        else:
            return

        self._navigation[-1].show()
        self.app.game_state = GameState.PAUSED

    def pop_menu(self) -> None:
        """Close the top menu and go back to the previous one, or to the game."""
        if not self._navigation:
            return
        self._navigation.pop().hide()
        if self._navigation:
            self._navigation[-1].show()
        else:
            self.app.game_state = GameState.RUNNING

    def show_warning(self, text: str) -> None:
        self.warning.text = text
        self.warning.show()

    def hide_warning(self) -> None:
        self.warning.hide()

    def set_screen_size(self, width: float, height: float) -> None:
        """Resize the screen and lay the menus out again."""
        self.width = width
        self.height = height
        resize = getattr(self.text_renderer, "set_screen_size", None)
        if resize is not None:
            resize(width, height)
        for widget in self.widgets:
            if isinstance(widget, Container):
                widget.set_child_constraints()

    def box(self) -> Rectangle:
        return Rectangle(0.0, 0.0, self.width, self.height)

    def update(self) -> None:
        for widget in self.widgets:
            widget.update()

    def handle_mouse_button(self, event: MouseButtonEvent) -> None:
        if self._navigation:
            self._navigation[-1].handle_mouse_button(event)
        if self.debug_panel.visible:
            self.debug_panel.handle_mouse_button(event)
        if self.build_menu.visible:
            self.build_menu.handle_mouse_button(event)

    def handle_key(self, event: KeyEvent) -> None:
        """Escape opens or closes menus, F1 toggles the debug panel."""
        if event.action != PRESS:
            return
        state = self.app.game_state
        if state is GameState.RUNNING:
            if event.key == KEY_ESCAPE:
                if self._navigation:
                    self.pop_menu()
                else:
                    self.show_menu(GameMenu.PAUSE_MENU)
                event.handled = True
            elif event.key == KEY_F1:
                if self.debug_panel.visible:
                    self.debug_panel.hide()
                else:
                    self.debug_panel.show()
                event.handled = True
        elif state is GameState.PAUSED and event.key == KEY_ESCAPE:
            self.pop_menu()

    def handle_mouse_move(self, event: MouseMoveEvent) -> None:
        if self._navigation:
            self._navigation[-1].handle_mouse_move(event)
        if self.debug_panel.visible:
            self.debug_panel.handle_mouse_move(event)