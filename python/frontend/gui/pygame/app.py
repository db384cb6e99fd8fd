"""Pygame GUI frontend.

Draws the board, a clock, and a victory overlay.  Clicks are resolved to a
tile index through ``frontend.adapter`` before they reach the game.
"""

from __future__ import annotations

import random

import pygame

from backend.engine.gameplay import GamePlay
from backend.models.board import EMPTY, is_tile_correct
from frontend.adapter import (
    DoublePress,
    Layout,
    action_for_click,
    action_for_key,
    format_elapsed,
    index_at,
)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
BOARD_PX = 376
TILE_GAP = 4
MARGIN = 20
HEADER_H = 60
FOOTER_H = 36
WIN_W = BOARD_PX + 2 * MARGIN
WIN_H = HEADER_H + BOARD_PX + FOOTER_H + MARGIN

_KEYS: dict[int, str] = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_s: "shuffle",
    pygame.K_r: "restart",
    pygame.K_c: "cheat",
}


def board_layout(size: int) -> Layout:
    tile_px = (BOARD_PX - (size - 1) * TILE_GAP) // size
    return Layout(
        size=size,
        tile_px=tile_px,
        origin_x=MARGIN,
        origin_y=HEADER_H,
        gap=TILE_GAP,
    )


class PygameApp:
    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        self._game = GamePlay(size, rng)
        self._layout = board_layout(size)
        self._cheat = DoublePress()

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("15 Puzzle")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 60, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_tile = pygame.font.SysFont(
            "Helvetica", max(14, self._layout.tile_px // 2), bold=True
        )
        self._f_small = pygame.font.SysFont("Helvetica", 16)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _blit_center(self, rendered: pygame.Surface, y: int) -> None:
        self._surf.blit(rendered, ((WIN_W - rendered.get_width()) // 2, y))

    def _draw_board(self) -> None:
        state = self._game.state
        self._surf.fill(COL_BASE)

        self._blit_center(
            self._f_title.render(
                f"Moves: {state.moves}    "
                f"Time: {format_elapsed(self._game.elapsed_time)}",
                True,
                COL_PINK,
            ),
            18,
        )

        for i, val in enumerate(state.tiles):
            rect = pygame.Rect(self._layout.tile_rect(i))
            if val == EMPTY:
                pygame.draw.rect(self._surf, COL_MANTLE, rect, border_radius=6)
                continue
            col = COL_GREEN if is_tile_correct(state.tiles, i) else COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            lbl = self._f_tile.render(str(val), True, COL_BASE)
            self._surf.blit(
                lbl,
                (
                    rect.centerx - lbl.get_width() // 2,
                    rect.centery - lbl.get_height() // 2,
                ),
            )

        self._blit_center(
            self._f_small.render(
                "Arrows  move     S  shuffle     R  restart     Esc  quit",
                True,
                COL_OVERLAY0,
            ),
            HEADER_H + BOARD_PX + 12,
        )

    def _draw_overlay(self) -> None:
        shade = pygame.Surface((WIN_W, WIN_H), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 192))
        self._surf.blit(shade, (0, 0))
        y = WIN_H // 2 - 60
        self._blit_center(self._f_big.render("Victory!", True, COL_TEXT), y)
        self._blit_center(
            self._f_small.render("Click to continue.", True, COL_TEXT), y + 76
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        state = self._game.state
        action = None
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            action = action_for_click(index_at(ev.pos, self._layout), state)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_ESCAPE, pygame.K_q):
                return False
            key = _KEYS.get(ev.key)
            if key is not None:
                action = action_for_key(key, state, self._cheat)
        if action is not None:
            self._game.send(action)
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        self._game.new_game()
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            self._draw_board()
            if self._game.is_won:
                self._draw_overlay()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = 4, rng: random.Random | None = None) -> None:
    """Launch the Pygame GUI."""
    PygameApp(size, rng).run_loop()
