"""Game rules tying the board, the counter and the timer together."""

from __future__ import annotations

import argparse
import logging
import random
from enum import Enum, auto
from typing import Optional

from .board import GRID_SIZE, SchulteBoard, build_board, build_main_panel
from .colors import (
    CORRECT_START_COLOR,
    DEFAULT_BUTTON_COLOR,
    DISABLED_BUTTON_COLOR,
    GRID_CONTAINER_COLOR,
    HOVERED_BUTTON_COLOR,
    INCORRECT_START_COLOR,
    PRESSED_BUTTON_COLOR,
    ColorTween,
)
from .counter import CheckResult, Correct, Incorrect, SequentialCounter
from .layers import Node, build_ui_root
from .timer import GameplayTimer, format_elapsed

log = logging.getLogger(__name__)


class Interaction(Enum):
    """Pointer state over a cell."""

    NONE = auto()
    HOVERED = auto()
    PRESSED = auto()


_HOVER_COLORS = {
    Interaction.NONE: DEFAULT_BUTTON_COLOR,
    Interaction.HOVERED: HOVERED_BUTTON_COLOR,
    Interaction.PRESSED: PRESSED_BUTTON_COLOR,
}


class SchulteGame:
    """One Schulte table: click the numbers in ascending order against the clock."""

    def __init__(
        self, grid_size: int = GRID_SIZE, rng: Optional[random.Random] = None
    ) -> None:
        self.ui_root = build_ui_root()
        self.main_panel = build_main_panel(self.ui_root)
        self.board: SchulteBoard = build_board(self.main_panel, grid_size, rng)
        self.timer_view = Node(name="GameplayTimerView", style={"text": ""})
        self.main_panel.timer_view_slot.add_child(self.timer_view)
        self.timer = GameplayTimer()
        self.counter = SequentialCounter(len(self.board))
        self._interactions = {cell.index: Interaction.NONE for cell in self.board.cells}

    @property
    def completed(self) -> bool:
        return self.counter.is_level_completed()

    def set_interaction(
        self, index: int, interaction: Interaction
    ) -> Optional[CheckResult]:
        """Report the pointer state over a cell; acts only when it changes.

        Returns the click result when the change is a press, else None.
        """
        if self._interactions[index] is interaction:
            return None
        self._interactions[index] = interaction
        self.handle_hover(index, interaction)
        if interaction is Interaction.PRESSED:
            return self.handle_click(index)
        return None

    def handle_click(self, index: int) -> CheckResult:
        """Apply a click on the cell showing ``index``."""
        cell = self.board[index]
        result = self.counter.check_cell(index)
        if isinstance(result, Correct):
            if result.is_first:
                log.info("First cell clicked: %d", index)
                self.timer.reset().resume()
            else:
                log.info("Correct cell clicked: %d", index)
            cell.tween = ColorTween(CORRECT_START_COLOR, DISABLED_BUTTON_COLOR)
            cell.background = cell.tween.current()
        elif isinstance(result, Incorrect):
            log.info("Incorrect cell clicked: %d", index)
            log.info("You should click: %d", self.counter.current_level + 1)
            cell.tween = ColorTween(INCORRECT_START_COLOR, DEFAULT_BUTTON_COLOR)
            cell.background = cell.tween.current()

        if self.counter.is_level_completed():
            log.info("Level completed!")
            self.timer.pause()
            log.info("Cost time: %.2f seconds", self.timer.elapsed)
        return result

    def handle_hover(self, index: int, interaction: Interaction) -> None:
        """Recolour an uncleared cell to match the pointer state."""
        cell = self.board[index]
        if self.counter.visited(index):
            return
        cell.background = _HOVER_COLORS[interaction]

    def update(self, dt: float) -> str:
        """Advance the clock and animations by ``dt`` seconds; return the timer text."""
        if dt < 0:
            raise ValueError("dt must not be negative")
        self.timer.tick_duration(dt)
        for cell in self.board.cells:
            if cell.tween is not None:
                cell.background = cell.tween.advance(dt)
                if cell.tween.finished:
                    cell.tween = None
        text = self.timer_text()
        self.timer_view.style["text"] = text
        return text

    def timer_text(self) -> str:
        return format_elapsed(self.timer.elapsed)


def main(argv: Optional[list[str]] = None) -> int:
    """Open a window and play a Schulte table."""
    parser = argparse.ArgumentParser(prog="schulte", description="Schulte table game")
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        game = SchulteGame(args.grid_size, random.Random(args.seed))
    except ValueError as error:
        parser.error(str(error))

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((800, 800), pygame.RESIZABLE)
        pygame.display.set_caption("Schulte Square")
        clock = pygame.time.Clock()
        fonts: dict[int, pygame.font.Font] = {}

        def font(size: int) -> pygame.font.Font:
            size = max(8, size)
            if size not in fonts:
                fonts[size] = pygame.font.Font(None, size)
            return fonts[size]

        pressed_cell = None
        running = True
        while running:
            dt = clock.tick(60) / 1000.0
            width, height = screen.get_size()
            timer_height = height * 0.2
            placement = game.board.layout(width, height - timer_height)
            mx, my = pygame.mouse.get_pos()
            hovered = game.board.cell_at(mx, my - timer_height)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    pressed_cell = hovered
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    pressed_cell = None

            for cell in game.board.cells:
                if cell is pressed_cell:
                    state = Interaction.PRESSED
                elif cell is hovered:
                    state = Interaction.HOVERED
                else:
                    state = Interaction.NONE
                game.set_interaction(cell.index, state)

            text = game.update(dt)

            screen.fill((0, 0, 0))
            label = font(int(timer_height * 0.4)).render(text, True, (255, 255, 255))
            screen.blit(label, label.get_rect(center=(width / 2, timer_height / 2)))

            if game.board.container_rect is not None:
                cx, cy, cw, ch = game.board.container_rect
                pygame.draw.rect(
                    screen,
                    GRID_CONTAINER_COLOR.to_rgb8(),
                    pygame.Rect(cx, cy + timer_height, cw, ch),
                )
            for cell, (x, y, w, h) in placement:
                rect = pygame.Rect(x, y + timer_height, w, h)
                pygame.draw.rect(screen, cell.background.to_rgb8(), rect)
                number = font(int(h * 0.4)).render(str(cell.index), True, (255, 255, 255))
                screen.blit(number, number.get_rect(center=rect.center))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())