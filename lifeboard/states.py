"""The splash, menu and game screens."""

from __future__ import annotations

from contextlib import suppress
from typing import TYPE_CHECKING

import pygame

from lifeboard.definitions import (
    BOARD_MARGIN,
    CELL_HEIGHT,
    CELL_WIDTH,
    GAMESTATE_BACKGROUND_COLOR,
    GAMESTATE_TEXT_ACTIVE_COLOR,
    GAMESTATE_TEXT_NORMAL_COLOR,
    GENERATION_DELAY_SECONDS,
    GENERATION_DELAY_STEP_SECONDS,
    MAX_GENERATION_DELAY_SECONDS,
    MIN_GENERATION_DELAY_SECONDS,
    PATH_MENUSTATE_BACKGROUND,
    PATH_MOULDY_FONT,
    PATH_PRESET_B_HEPTOMINO,
    PATH_PRESET_GLIDER_GUN,
    PATH_PRESET_SYMMETRY_ACORN,
    PATH_SPLASH_BACKGROUND,
    SCREEN_WIDTH,
    SPLASHSTATE_DELAY_SECONDS,
)
from lifeboard.state_machine import State

if TYPE_CHECKING:
    from lifeboard.game import GameData

_FONT_NAME = "Mouldy Font"
_TEXT_SIZE = 20
_TEXT_GAP = 10
_SPLASH_TEXTURE = "SplashState Background"
_MENU_TEXTURE = "Menu Background"

_PRESET_KEYS = {
    pygame.K_1: PATH_PRESET_GLIDER_GUN,
    pygame.K_2: PATH_PRESET_SYMMETRY_ACORN,
    pygame.K_3: PATH_PRESET_B_HEPTOMINO,
}


def _poll(handler) -> None:
    for event in pygame.event.get():
        handler(event)


def _present() -> None:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        pygame.display.flip()


def _load_background(data: GameData, name: str, path: str) -> pygame.Surface | None:
    data.assets.load_texture(name, path)
    return data.assets.texture(name) if name in data.assets else None


def _draw_background(data: GameData, background: pygame.Surface | None) -> None:
    screen = data.screen
    if screen is None:
        return
    screen.fill((0, 0, 0))
    if background is not None:
        screen.blit(background, (0, 0))
    _present()


def _is_key(event: pygame.event.Event, key: int) -> bool:
    return event.type == pygame.KEYDOWN and event.key == key


class SplashState(State):
    """Shows the splash image, then moves to the menu after a short delay."""

    def __init__(self, data: GameData) -> None:
        self.data = data
        self.background: pygame.Surface | None = None
        self._started = data.clock()

    def init(self) -> None:
        self.background = _load_background(self.data, _SPLASH_TEXTURE, PATH_SPLASH_BACKGROUND)

    def handle_input(self) -> None:
        _poll(self.handle_event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event."""
        if event.type == pygame.QUIT or _is_key(event, pygame.K_q):
            self.data.close()

    def update(self, dt: float) -> None:
        if self.data.clock() - self._started > SPLASHSTATE_DELAY_SECONDS:
            self.data.machine.add_state(MenuState(self.data))

    def draw(self, dt: float) -> None:
        _draw_background(self.data, self.background)


class MenuState(State):
    """Lets the player pick a starting board."""

    def __init__(self, data: GameData) -> None:
        self.data = data
        self.background: pygame.Surface | None = None

    def init(self) -> None:
        self.background = _load_background(self.data, _MENU_TEXTURE, PATH_MENUSTATE_BACKGROUND)

    def handle_input(self) -> None:
        _poll(self.handle_event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event."""
        if event.type == pygame.QUIT:
            self.data.close()
            return
        if event.type != pygame.KEYDOWN:
            return
        board = self.data.board
        if event.key in _PRESET_KEYS:
            # A preset that cannot be read leaves the board as it is.
            with suppress(OSError):
                board.load_preset(_PRESET_KEYS[event.key])
            self._start_game()
        elif event.key == pygame.K_4:
            board.load_random()
            self._start_game()
        elif event.key == pygame.K_5:
            board.load_blank()
            self._start_game()
        elif event.key == pygame.K_q:
            self.data.close()

    def update(self, dt: float) -> None:
        pass

    def draw(self, dt: float) -> None:
        _draw_background(self.data, self.background)

    def _start_game(self) -> None:
        self.data.machine.add_state(GameState(self.data))


class GameState(State):
    """Runs and draws the simulation, with pause, colour and speed controls."""

    def __init__(self, data: GameData) -> None:
        self.data = data
        self.paused = True
        self.random_colors = False
        self.trail_colors = False
        self.generation_delay = GENERATION_DELAY_SECONDS
        self.generations_text = "Generations #"
        self.paused_text = "(P)ause"
        self.paused_text_color = GAMESTATE_TEXT_ACTIVE_COLOR
        self._last_generation = data.clock()
        self._font: pygame.font.Font | None = None
        self._generations_pos = (BOARD_MARGIN, BOARD_MARGIN)
        self._paused_pos = (BOARD_MARGIN, BOARD_MARGIN)

    def init(self) -> None:
        assets = self.data.assets
        if not assets.load_font(_FONT_NAME, PATH_MOULDY_FONT, _TEXT_SIZE):
            assets.load_font(_FONT_NAME, None, _TEXT_SIZE)
        self._font = assets.font(_FONT_NAME) if _FONT_NAME in assets else None

        self._refresh_text()
        if self._font is not None:
            _, gen_height = self._font.size(self.generations_text)
            paused_width, paused_height = self._font.size(self.paused_text)
            self._generations_pos = (BOARD_MARGIN, BOARD_MARGIN - gen_height - _TEXT_GAP)
            self._paused_pos = (
                SCREEN_WIDTH - BOARD_MARGIN - paused_width,
                BOARD_MARGIN - paused_height - _TEXT_GAP,
            )

    def handle_input(self) -> None:
        _poll(self.handle_event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event."""
        if event.type == pygame.QUIT:
            self.data.close()
        elif event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
            if self.paused:
                x, y = event.pos
                self.data.board.toggle_cell_at(x, y)

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_q:
            self.data.close()
        elif key == pygame.K_p:
            self.paused = not self.paused
        elif key == pygame.K_c:
            self.random_colors = not self.random_colors
        elif key == pygame.K_t:
            self.trail_colors = not self.trail_colors
        elif key in (pygame.K_m, pygame.K_LEFT):
            if key == pygame.K_m:
                # Going back to the menu also slows the generation step.
                self.data.machine.add_state(MenuState(self.data))
            if self.generation_delay < MIN_GENERATION_DELAY_SECONDS:
                self.generation_delay += GENERATION_DELAY_STEP_SECONDS
        elif key == pygame.K_RIGHT:
            if self.generation_delay > MAX_GENERATION_DELAY_SECONDS:
                self.generation_delay -= GENERATION_DELAY_STEP_SECONDS

    def update(self, dt: float) -> None:
        board = self.data.board
        now = self.data.clock()
        if not self.paused and now - self._last_generation > self.generation_delay:
            self._last_generation = now
            board.process_generation()
            board.update(self.random_colors, self.trail_colors)
        if self.paused:
            board.update(self.random_colors, self.trail_colors)
        self._refresh_text()

    def _refresh_text(self) -> None:
        self.paused_text_color = (
            GAMESTATE_TEXT_ACTIVE_COLOR if self.paused else GAMESTATE_TEXT_NORMAL_COLOR
        )
        self.generations_text = f"Generations #{self.data.board.generations}"

    def draw(self, dt: float) -> None:
        screen = self.data.screen
        if screen is None:
            return
        screen.fill(GAMESTATE_BACKGROUND_COLOR)
        for cell in self.data.board:
            rect = pygame.Rect(
                int(BOARD_MARGIN + cell.column * CELL_WIDTH),
                int(BOARD_MARGIN + cell.row * CELL_HEIGHT),
                int(CELL_WIDTH),
                int(CELL_HEIGHT),
            )
            pygame.draw.rect(screen, cell.color, rect)
        if self._font is not None:
            screen.blit(
                self._font.render(self.generations_text, True, GAMESTATE_TEXT_NORMAL_COLOR),
                self._generations_pos,
            )
            screen.blit(
                self._font.render(self.paused_text, True, self.paused_text_color),
                self._paused_pos,
            )
        _present()