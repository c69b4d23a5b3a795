from __future__ import annotations

from typing import Optional, Tuple

import pygame

from square_game.app.snapshot import EMPTY_CELL, GameSnapshot
from square_game.game import Color, GameState


BACKGROUND = (10, 10, 14)
BOARD = (30, 30, 36)
EMPTY = (20, 20, 26)
TEXT = (230, 230, 230)


def _color_for_tag(tag: Optional[str]) -> Tuple[int, int, int]:
    if tag is None or tag == EMPTY_CELL:
        return EMPTY
    code = Color.from_tag(tag).hex_code.lstrip("#")
    return int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16)


class Renderer:
    """Draws a `GameSnapshot`: the board, the falling piece, the next preview and status text."""

    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        side_panel = 5 * self.cell_size
        return (
            self.margin * 3 + width * self.cell_size + side_panel,
            self.margin * 2 + height * self.cell_size,
        )

    def _cell_rect(self, x: int, y: int, origin: Tuple[int, int]) -> pygame.Rect:
        return pygame.Rect(
            origin[0] + x * self.cell_size,
            origin[1] + y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _grid_surface(self, snapshot: GameSnapshot) -> pygame.Surface:
        surf = pygame.Surface((snapshot.width * self.cell_size, snapshot.height * self.cell_size))
        surf.fill(BOARD)
        for y, row in enumerate(snapshot.field):
            for x, tag in enumerate(row):
                pygame.draw.rect(surf, _color_for_tag(tag), self._cell_rect(x, y, (0, 0)))
        falling = snapshot.falling_block
        if falling is not None:
            for dy, row in enumerate(falling.pattern):
                for dx, tag in enumerate(row):
                    if tag == EMPTY_CELL:
                        continue
                    pygame.draw.rect(surf, _color_for_tag(tag), self._cell_rect(falling.x + dx, falling.y + dy, (0, 0)))
        return surf

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        screen.fill(BACKGROUND)
        screen.blit(self._grid_surface(snapshot), (self.margin, self.margin))

        panel_x = self.margin * 2 + snapshot.width * self.cell_size
        for dy, row in enumerate(snapshot.next_pattern):
            for dx, tag in enumerate(row):
                if tag != EMPTY_CELL:
                    pygame.draw.rect(screen, _color_for_tag(tag), self._cell_rect(dx, dy, (panel_x, self.margin)))

        if pygame.font.get_init():
            self._draw_text(screen, snapshot, panel_x)

    def _draw_text(self, screen: pygame.Surface, snapshot: GameSnapshot, panel_x: int) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        lines = [f"Score: {snapshot.score}"]
        if snapshot.state is GameState.PAUSED:
            lines.append("Paused - P to resume")
        elif snapshot.state is GameState.GAME_OVER:
            lines.append("Game Over - R to restart")
        y = self.margin + 3 * self.cell_size
        for i, txt in enumerate(lines):
            img = self._font.render(txt, True, TEXT)
            screen.blit(img, (panel_x, y + i * 22))
