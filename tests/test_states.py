import pygame
import pytest

from lifeboard.board import Board
from lifeboard.cell import CellState
from lifeboard.definitions import (
    BOARD_MARGIN,
    CELL_ALIVE_FILL_COLOR,
    GAMESTATE_BACKGROUND_COLOR,
    GAMESTATE_TEXT_ACTIVE_COLOR,
    GAMESTATE_TEXT_NORMAL_COLOR,
    GENERATION_DELAY_SECONDS,
    GENERATION_DELAY_STEP_SECONDS,
    MAX_GENERATION_DELAY_SECONDS,
    MIN_GENERATION_DELAY_SECONDS,
    PATH_PRESET_GLIDER_GUN,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from lifeboard.game import GameData
from lifeboard.states import GameState, MenuState, SplashState


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def data(clock, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return GameData(
        board=Board(5, 5),
        clock=clock,
        screen=pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT)),
    )


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def activate(data, state):
    data.machine.add_state(state)
    data.machine.process_state_changes()
    return state


def test_splash_moves_to_menu_after_delay(data, clock):
    splash = activate(data, SplashState(data))
    clock.now = 0.5
    splash.update(1 / 60)
    data.machine.process_state_changes()
    assert data.machine.active_state() is splash
    clock.now = 1.5
    splash.update(1 / 60)
    data.machine.process_state_changes()
    assert isinstance(data.machine.active_state(), MenuState)


@pytest.mark.parametrize(
    "event",
    [pygame.event.Event(pygame.QUIT), pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)],
)
def test_splash_close_events(data, event):
    splash = activate(data, SplashState(data))
    splash.handle_event(event)
    assert data.is_open is False


def test_splash_ignores_other_keys(data):
    splash = activate(data, SplashState(data))
    splash.handle_event(key(pygame.K_a))
    assert data.is_open is True


def test_splash_draw_without_background_clears_screen(data):
    splash = activate(data, SplashState(data))
    data.screen.fill((9, 9, 9))
    splash.draw(0.0)
    assert data.screen.get_at((10, 10))[:3] == (0, 0, 0)


def test_menu_blank_board_starts_game(data):
    menu = activate(data, MenuState(data))
    data.board.cell_at(1, 1).state = CellState.ALIVE
    data.board.generations = 7
    menu.handle_event(key(pygame.K_5))
    data.machine.process_state_changes()
    assert isinstance(data.machine.active_state(), GameState)
    assert data.board.generations == 0
    assert not any(cell.is_alive() for cell in data.board)


def test_menu_random_board_starts_game(data):
    menu = activate(data, MenuState(data))
    data.board.generations = 3
    menu.handle_event(key(pygame.K_4))
    data.machine.process_state_changes()
    assert isinstance(data.machine.active_state(), GameState)
    assert data.board.generations == 0


def test_menu_missing_preset_still_starts_game(data):
    menu = activate(data, MenuState(data))
    menu.handle_event(key(pygame.K_2))
    data.machine.process_state_changes()
    assert isinstance(data.machine.active_state(), GameState)
    assert not any(cell.is_alive() for cell in data.board)


def test_menu_loads_preset(tmp_path, clock, monkeypatch):
    run_dir = tmp_path / "run"
    run_dir.mkdir()
    preset = run_dir / PATH_PRESET_GLIDER_GUN
    preset.parent.mkdir(parents=True)
    preset.write_text(".*\n*.\n")
    monkeypatch.chdir(run_dir)
    data = GameData(board=Board(5, 5), clock=clock)
    menu = activate(data, MenuState(data))
    menu.handle_event(key(pygame.K_1))
    alive = {(c.row, c.column) for c in data.board if c.is_alive()}
    assert alive == {(0, 0), (1, 1)}


def test_menu_quit(data):
    menu = activate(data, MenuState(data))
    menu.handle_event(key(pygame.K_q))
    assert data.is_open is False


def test_game_toggles(data):
    game = activate(data, GameState(data))
    assert game.paused is True
    game.handle_event(key(pygame.K_p))
    game.handle_event(key(pygame.K_c))
    game.handle_event(key(pygame.K_t))
    assert (game.paused, game.random_colors, game.trail_colors) == (False, True, True)


def test_game_left_slows_until_minimum(data):
    game = activate(data, GameState(data))
    game.handle_event(key(pygame.K_LEFT))
    assert game.generation_delay == pytest.approx(
        GENERATION_DELAY_SECONDS + GENERATION_DELAY_STEP_SECONDS
    )
    for _ in range(100):
        game.handle_event(key(pygame.K_LEFT))
    assert MIN_GENERATION_DELAY_SECONDS <= game.generation_delay
    assert game.generation_delay < MIN_GENERATION_DELAY_SECONDS + GENERATION_DELAY_STEP_SECONDS


def test_game_right_speeds_until_maximum(data):
    game = activate(data, GameState(data))
    for _ in range(10):
        game.handle_event(key(pygame.K_RIGHT))
    assert game.generation_delay == pytest.approx(MAX_GENERATION_DELAY_SECONDS)


def test_game_menu_key_returns_to_menu_and_slows(data):
    game = activate(data, GameState(data))
    game.handle_event(key(pygame.K_m))
    data.machine.process_state_changes()
    assert isinstance(data.machine.active_state(), MenuState)
    assert game.generation_delay == pytest.approx(
        GENERATION_DELAY_SECONDS + GENERATION_DELAY_STEP_SECONDS
    )


def test_click_toggles_cell_only_when_paused(data):
    game = activate(data, GameState(data))
    point = (int(BOARD_MARGIN) + 5, int(BOARD_MARGIN) + 5)
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=point)
    game.handle_event(click)
    assert data.board.cell_at(0, 0).is_alive()
    game.paused = False
    game.handle_event(click)
    assert data.board.cell_at(0, 0).is_alive()


def test_paused_update_commits_without_generation(data):
    game = activate(data, GameState(data))
    data.board.cell_at(2, 2).state = CellState.DEAD_TO_ALIVE
    game.update(1 / 60)
    assert data.board.cell_at(2, 2).state is CellState.ALIVE
    assert data.board.generations == 0
    assert game.generations_text == "Generations #0"
    assert game.paused_text_color == GAMESTATE_TEXT_ACTIVE_COLOR


def test_running_update_advances_blinker(data, clock):
    game = activate(data, GameState(data))
    for column in (1, 2, 3):
        data.board.cell_at(2, column).state = CellState.ALIVE
    game.paused = False
    clock.now = 1.0
    game.update(1 / 60)
    alive = {(c.row, c.column) for c in data.board if c.is_alive()}
    assert alive == {(1, 2), (2, 2), (3, 2)}
    assert game.generations_text == "Generations #1"
    assert game.paused_text_color == GAMESTATE_TEXT_NORMAL_COLOR


def test_running_update_waits_for_delay(data, clock):
    game = activate(data, GameState(data))
    game.paused = False
    clock.now = GENERATION_DELAY_SECONDS / 2
    game.update(1 / 60)
    assert data.board.generations == 0


def test_draw_paints_live_cells(data):
    game = activate(data, GameState(data))
    data.board.cell_at(0, 0).state = CellState.ALIVE
    game.update(1 / 60)
    game.draw(0.0)
    inside = (int(BOARD_MARGIN) + 5, int(BOARD_MARGIN) + 5)
    assert data.screen.get_at(inside)[:3] == CELL_ALIVE_FILL_COLOR
    far = (SCREEN_WIDTH - 5, SCREEN_HEIGHT - 5)
    assert data.screen.get_at(far)[:3] == GAMESTATE_BACKGROUND_COLOR