import pygame
from pygame.event import Event
from typing import Any

from reversi.arguments import Arguments
from reversi.mode.base import BaseMode
from reversi.othello.board import Coord, InvalidMove
from reversi.othello.game import Game
from reversi.othello.rules import Passed


class GameMode(BaseMode):
    def __init__(self, args: Arguments) -> None:
        self.show_legal_moves = args.show_legal_moves
        self.game = Game.from_fields(args.moves)
        self.notice = self.game.status.describe()

    def on_event(self, event: Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_n:
                self.restart()
            elif event.key == pygame.K_m:
                self.show_legal_moves = not self.show_legal_moves

    def on_move(self, coord: Coord) -> None:
        if self.game.is_finished():
            self.restart()
            return

        try:
            status = self.game.on_cell_chosen(coord)
        except InvalidMove:
            return

        self.notice = status.describe()

        if isinstance(status, Passed) or status.is_finished():
            print(self.notice)

    def restart(self) -> None:
        self.notice = ""
        self.game.new_game()

    def get_game(self) -> Game:
        return self.game

    def get_ui_details(self) -> dict[str, Any]:
        ui_details: dict[str, Any] = {"notice": self.notice}

        if self.show_legal_moves:
            ui_details["legal_moves"] = self.game.get_legal_moves()

        return ui_details
