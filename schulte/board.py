"""The main panel and the shuffled grid of numbered cells."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from .colors import DEFAULT_BUTTON_COLOR, GRID_CONTAINER_COLOR, Color, ColorTween
from .layers import BuiltInUiLayer, Node, UiRoot

GRID_SIZE = 3
MAX_CELLS = 255
GRID_GAP = 8.0
GRID_PADDING = 8.0

Rect = tuple[float, float, float, float]


@dataclass(eq=False)
class MainPanel:
    """The column that holds the timer slot above the gameplay slot."""

    panel: Node
    timer_view_slot: Node
    gameplayer_slot: Node


def build_main_panel(ui_root: UiRoot) -> MainPanel:
    """Create the main panel on the main layer of ``ui_root``."""
    panel = Node(
        name="SchulteMainPanel",
        style={
            "display": "flex",
            "flex_direction": "column",
            "align_items": "center",
            "justify_items": "center",
        },
    )
    ui_root.get_built_in_layer_node(BuiltInUiLayer.MAIN).add_child(panel)

    centered = {"align_items": "center", "justify_content": "center"}
    timer_view_slot = Node(name="TimerViewSlot", height=20.0, style=dict(centered))
    gameplayer_slot = Node(name="GameplayerSlot", height=80.0, style=dict(centered))
    panel.add_child(timer_view_slot)
    panel.add_child(gameplayer_slot)
    return MainPanel(panel, timer_view_slot, gameplayer_slot)


@dataclass(eq=False)
class Cell:
    """A numbered button on the board."""

    index: int
    node: Node
    background: Color = DEFAULT_BUTTON_COLOR
    tween: Optional[ColorTween] = None


@dataclass(eq=False)
class SchulteBoard:
    """A square grid of cells, stored in row-major display order."""

    grid_size: int
    container: Node
    cells: list[Cell]
    gap: float = GRID_GAP
    padding: float = GRID_PADDING
    container_rect: Optional[Rect] = None
    _placement: list[tuple[Cell, Rect]] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._by_index = {cell.index: cell for cell in self.cells}

    def __getitem__(self, index: int) -> Cell:
        """The cell showing the number ``index``."""
        return self._by_index[index]

    def __len__(self) -> int:
        return len(self.cells)

    def layout(self, width: float, height: float) -> list[tuple[Cell, Rect]]:
        """Place the cells in an area of ``width`` by ``height``.

        The grid is a square as large as fits, centred in the area. Each
        rectangle is ``(x, y, width, height)`` relative to the area.
        """
        if width < 0 or height < 0:
            raise ValueError("layout area must not have a negative size")
        side = min(width, height)
        left = (width - side) / 2
        top = (height - side) / 2
        self.container_rect = (left, top, side, side)

        n = self.grid_size
        cell_size = max(0.0, (side - 2 * self.padding - (n - 1) * self.gap) / n)
        step = cell_size + self.gap
        placement = []
        for position, cell in enumerate(self.cells):
            row, column = divmod(position, n)
            rect = (
                left + self.padding + column * step,
                top + self.padding + row * step,
                cell_size,
                cell_size,
            )
            placement.append((cell, rect))
        self._placement = placement
        return list(placement)

    def cell_at(self, x: float, y: float) -> Optional[Cell]:
        """The cell under the point, using the last layout; None if none."""
        for cell, (left, top, w, h) in self._placement:
            if left <= x < left + w and top <= y < top + h:
                return cell
        return None


def shuffled_indexes(
    grid_size: int, rng: Optional[random.Random] = None
) -> list[int]:
    """The numbers 1..grid_size**2 in random order."""
    if grid_size < 1 or grid_size * grid_size > MAX_CELLS:
        raise ValueError(
            f"grid size must be between 1 and 15, got {grid_size}"
        )
    indexes = list(range(1, grid_size * grid_size + 1))
    (rng if rng is not None else random.Random()).shuffle(indexes)
    return indexes


def build_board(
    main_panel: MainPanel,
    grid_size: int = GRID_SIZE,
    rng: Optional[random.Random] = None,
) -> SchulteBoard:
    """Create a shuffled board inside the gameplay slot of ``main_panel``."""
    order = shuffled_indexes(grid_size, rng)
    container = Node(
        name="SchulteGrid",
        style={
            "display": "grid",
            "aspect_ratio": 1.0,
            "columns": grid_size,
            "rows": grid_size,
            "gap": GRID_GAP,
            "padding": GRID_PADDING,
            "background": GRID_CONTAINER_COLOR,
        },
    )
    main_panel.gameplayer_slot.add_child(container)

    cells = []
    for index in order:
        node = Node(name=f"Cell{index}", style={"text": str(index)})
        container.add_child(node)
        cells.append(Cell(index, node))
    return SchulteBoard(grid_size, container, cells)