import pytest
from typer.testing import CliRunner

from reversi.arguments import Arguments
from reversi.main import app, parse_moves
from reversi.othello.board import WHITE, Board
from reversi.terminal import Terminal

runner = CliRunner()


@pytest.fixture
def terminal() -> Terminal:
    return Terminal(Arguments(True, []))


def test_handle_line_move(
    terminal: Terminal, capsys: pytest.CaptureFixture[str]
) -> None:
    terminal.handle_line("D3")

    assert terminal.game.count_discs() == (4, 1)
    assert terminal.game.current_player() == WHITE

    output = capsys.readouterr().out
    assert "Black 4 - White 1" in output
    assert "White to move" in output


@pytest.mark.parametrize(
    ["line", "expected"],
    [
        pytest.param("zz", "Could not parse move", id="unparsable"),
        pytest.param("a1", "Invalid move: Playing a1 flips no discs", id="no-flips"),
        pytest.param("d4", "Invalid move: Square d4 is not empty", id="occupied"),
    ],
)
def test_handle_line_error(
    terminal: Terminal, capsys: pytest.CaptureFixture[str], line: str, expected: str
) -> None:
    terminal.handle_line(line)

    assert terminal.game.board == Board.start()
    assert expected in capsys.readouterr().out


def test_handle_line_empty(
    terminal: Terminal, capsys: pytest.CaptureFixture[str]
) -> None:
    terminal.handle_line("   ")

    assert terminal.running
    assert terminal.game.board == Board.start()
    assert "Type a field such as d3" in capsys.readouterr().out


def test_handle_line_commands(terminal: Terminal) -> None:
    terminal.handle_line("d3")
    terminal.handle_line("new")
    assert terminal.game.board == Board.start()
    assert terminal.running

    terminal.handle_line("quit")
    assert not terminal.running


@pytest.mark.parametrize(
    ["moves", "expected"],
    [
        pytest.param(None, [], id="none"),
        pytest.param("", [], id="empty"),
        pytest.param("d3,c3", ["d3", "c3"], id="comma-separated"),
        pytest.param("d3 c3", ["d3", "c3"], id="space-separated"),
    ],
)
def test_parse_moves(moves: str | None, expected: list[str]) -> None:
    assert parse_moves(moves) == expected


def test_play_command() -> None:
    result = runner.invoke(app, ["play"], input="d3\nquit\n")

    assert result.exit_code == 0
    assert "Black 2 - White 2" in result.output
    assert "Black 4 - White 1" in result.output


def test_play_command_empty_line_does_not_quit() -> None:
    result = runner.invoke(app, ["play"], input="\nd3\nquit\n")

    assert result.exit_code == 0
    assert "Black 4 - White 1" in result.output


def test_play_command_with_moves() -> None:
    result = runner.invoke(app, ["play", "--moves", "d3,c3"], input="quit\n")

    assert result.exit_code == 0
    assert "Black 3 - White 3" in result.output


def test_play_command_invalid_moves() -> None:
    result = runner.invoke(app, ["play", "--moves", "a1"])

    assert result.exit_code != 0
