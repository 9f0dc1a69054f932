import os
import typer
from typing import Annotated, Optional

from reversi.arguments import Arguments
from reversi.config import SHOW_LEGAL_MOVES
from reversi.othello.game import Game
from reversi.terminal import Terminal

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from reversi.window import Window  # noqa:E402

app = typer.Typer()


def parse_moves(moves: Optional[str]) -> list[str]:
    if not moves:
        return []
    return [field for field in moves.replace(",", " ").split() if field]


def make_arguments(moves: Optional[str], hide_moves: bool) -> Arguments:
    fields = parse_moves(moves)

    try:
        Game.from_fields(fields)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--moves")

    show_legal_moves = SHOW_LEGAL_MOVES and not hide_moves
    return Arguments(show_legal_moves, fields)


@app.command()
def gui(
    moves: Annotated[Optional[str], typer.Option("--moves", "-m")] = None,
    hide_moves: Annotated[bool, typer.Option("--hide-moves")] = False,
) -> None:
    args = make_arguments(moves, hide_moves)
    Window(args).run()


@app.command()
def play(
    moves: Annotated[Optional[str], typer.Option("--moves", "-m")] = None,
    hide_moves: Annotated[bool, typer.Option("--hide-moves")] = False,
) -> None:
    args = make_arguments(moves, hide_moves)
    Terminal(args).run()


if __name__ == "__main__":
    app()
