import pygame
import pytest

from reversi.arguments import Arguments
from reversi.mode.game import GameMode
from reversi.othello.board import BLACK, WHITE, Board

EMPTY_ROW = "--------"
FORCED_PASS_ROWS = ["-OXO----"] + [EMPTY_ROW] * 7


@pytest.fixture
def mode() -> GameMode:
    return GameMode(Arguments(True, []))


def test_on_move(mode: GameMode) -> None:
    mode.on_move((2, 3))

    game = mode.get_game()
    assert game.count_discs() == (4, 1)
    assert game.current_player() == WHITE


def test_on_move_invalid_is_ignored(mode: GameMode) -> None:
    mode.on_move((0, 0))
    mode.on_move((3, 3))

    assert mode.get_game().board == Board.start()


def test_restart_key(mode: GameMode) -> None:
    mode.on_move((2, 3))
    mode.on_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_n))

    assert mode.get_game().board == Board.start()


def test_toggle_legal_moves(mode: GameMode) -> None:
    assert "legal_moves" in mode.get_ui_details()

    mode.on_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_m))

    assert "legal_moves" not in mode.get_ui_details()


def test_ui_details(mode: GameMode) -> None:
    ui_details = mode.get_ui_details()

    assert ui_details["notice"] == ""
    assert ui_details["legal_moves"] == {(2, 3), (3, 2), (4, 5), (5, 4)}


def test_pass_and_game_end(mode: GameMode, capsys: pytest.CaptureFixture[str]) -> None:
    game = mode.get_game()
    game.board = Board.from_rows(FORCED_PASS_ROWS, BLACK)

    mode.on_move((0, 0))
    assert mode.get_ui_details()["notice"] == (
        "White has no moves and passes, Black to move again."
    )

    mode.on_move((0, 4))
    assert game.is_finished()
    assert mode.get_ui_details()["legal_moves"] == set()

    output = capsys.readouterr().out
    assert "White has no moves and passes" in output
    assert "Game over! Black wins, Black 5 - White 0" in output

    # Clicking after the game ended starts a new one.
    mode.on_move((0, 5))
    assert game.board == Board.start()
    assert not game.is_finished()


def test_start_from_moves() -> None:
    mode = GameMode(Arguments(False, ["d3", "c3"]))

    assert mode.get_game().get_fields() == ["d3", "c3"]
    assert "legal_moves" not in mode.get_ui_details()
