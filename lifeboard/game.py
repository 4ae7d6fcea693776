"""The window, shared game data and the fixed-step main loop."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable
from dataclasses import dataclass, field

import pygame

from lifeboard.assets import AssetManager
from lifeboard.board import Board
from lifeboard.definitions import (
    BOARD_COLUMNS,
    BOARD_ROWS,
    GAME_TITLE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from lifeboard.state_machine import StateMachine
from lifeboard.states import SplashState

_DT = 1.0 / 60.0
_MAX_FRAME_TIME = 0.25


@dataclass
class GameData:
    """Everything the screens share: board, states, assets, window and clock."""

    board: Board
    machine: StateMachine = field(default_factory=StateMachine)
    assets: AssetManager = field(default_factory=AssetManager)
    screen: pygame.Surface | None = None
    clock: Callable[[], float] = field(default=time.monotonic)
    is_open: bool = True

    def close(self) -> None:
        """Mark the window closed; the main loop stops after this frame."""
        self.is_open = False


class Game:
    """Opens the window and starts at the splash screen."""

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        title: str = GAME_TITLE,
        data: GameData | None = None,
    ) -> None:
        self.data = data if data is not None else GameData(Board(BOARD_ROWS, BOARD_COLUMNS))
        pygame.init()
        self.data.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.data.machine.add_state(SplashState(self.data))

    def run(self) -> None:
        """Run fixed-step updates until the window is closed."""
        data = self.data
        current = data.clock()
        accumulator = 0.0
        try:
            while data.is_open:
                data.machine.process_state_changes()
                now = data.clock()
                accumulator += min(now - current, _MAX_FRAME_TIME)
                current = now

                while accumulator >= _DT:
                    state = data.machine.active_state()
                    state.handle_input()
                    state.update(_DT)
                    accumulator -= _DT

                data.machine.active_state().draw(accumulator / _DT)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="lifeboard", description=GAME_TITLE)
    parser.parse_args(argv)
    Game(SCREEN_WIDTH, SCREEN_HEIGHT, GAME_TITLE).run()
    return 0