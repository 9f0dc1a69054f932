from pygame.event import Event
from typing import Any

from reversi.arguments import Arguments
from reversi.othello.board import Coord
from reversi.othello.game import Game


class BaseMode:
    def __init__(self, args: Arguments):
        pass

    def on_event(self, event: Event) -> None:
        pass

    def on_move(self, coord: Coord) -> None:
        pass

    def get_game(self) -> Game:
        raise NotImplementedError

    def get_ui_details(self) -> dict[str, Any]:
        return {}
