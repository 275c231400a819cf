"""A container that stacks its children in a row or a column."""

from __future__ import annotations

from enum import Enum, auto
from typing import List

from .widgets import (
    TRANSPARENT,
    Color,
    Constraint,
    ConstraintType,
    Container,
    Rectangle,
    Screen,
    Widget,
)


class StackOrientation(Enum):
    """Direction in which the children are stacked."""

    COLUMN = auto()
    COLUMN_REVERSE = auto()
    ROW = auto()
    ROW_REVERSE = auto()


class ItemAlignment(Enum):
    """Where the stacked children sit along the stacking axis."""

    STRETCH = auto()
    BEGIN = auto()
    CENTER = auto()
    END = auto()


class StackPanel(Container):
    """Lays its children out one after another, separated by ``spacing``.

    With ``outer_spacing`` switched off the panel is shorter by one spacing
    along its stacking axis, so no gap is left before the first and after
    the last child.
    """

    def __init__(
        self,
        widget_id: str,
        gui: Screen,
        orientation: StackOrientation = StackOrientation.COLUMN,
        background_color: Color = TRANSPARENT,
        item_alignment: ItemAlignment = ItemAlignment.CENTER,
        spacing: float = 10.0,
    ) -> None:
        super().__init__(widget_id, gui, background_color)
        self.orientation = orientation
        self.item_alignment = item_alignment
        self.spacing = spacing
        self.outer_spacing = True

    @property
    def _vertical(self) -> bool:
        return self.orientation in (StackOrientation.COLUMN, StackOrientation.COLUMN_REVERSE)

    @property
    def _reversed(self) -> bool:
        return self.orientation in (StackOrientation.COLUMN_REVERSE, StackOrientation.ROW_REVERSE)

    def _extent(self, area: Rectangle) -> float:
        return area.height if self._vertical else area.width

    def _place(self, child: Widget, position: Constraint) -> None:
        if self._vertical:
            child.constraints.y = position
        else:
            child.constraints.x = position

    def _stretch(self) -> None:
        count = len(self.children)
        if count == 0:
            return
        share = 1.0 / count
        for i, child in enumerate(self.children):
            start = 1 - (i + 1) * share if self._reversed else i * share
            self._place(child, Constraint.relative(start))
            if self._vertical:
                child.constraints.height = Constraint.relative(share)
            else:
                child.constraints.width = Constraint.relative(share)

    def set_child_constraints(self) -> None:
        """Refresh nested containers, then position the children along the stack."""
        super().set_child_constraints()

        container_box = self.box()
        if not self.outer_spacing:
            if self._vertical:
                container_box.height += self.spacing
            else:
                container_box.width += self.spacing

        if self.item_alignment is ItemAlignment.STRETCH:
            self._stretch()
            return

        spacing = self.spacing
        if self.item_alignment is ItemAlignment.BEGIN:
            current = spacing / 2.0
        else:
            total = sum(self._extent(child.box()) + spacing for child in self.children)
            available = self._extent(container_box)
            if self.item_alignment is ItemAlignment.CENTER:
                current = (available - total + spacing) / 2.0
            else:
                current = (available - total) + spacing / 2.0

        order: List[Widget] = list(reversed(self.children)) if self._reversed else list(self.children)
        for child in order:
            self._place(child, Constraint.absolute(current))
            current += self._extent(child.box()) + spacing

    def box(self) -> Rectangle:
        """The widget box, adjusted for outer spacing and content-fitted sizes."""
        area = super().box()

        if not self.outer_spacing:
            if self._vertical:
                area.height -= self.spacing
            else:
                area.width -= self.spacing

        if self.constraints.height.type is ConstraintType.FIT_TO_CONTENT:
            area.height = max((child.box().height for child in self.children), default=0.0)
        if self.constraints.width.type is ConstraintType.FIT_TO_CONTENT:
            area.width = max((child.box().width for child in self.children), default=0.0)

        return area