from __future__ import annotations

import threading
from typing import Callable, Optional

from reversi.othello.board import Board, Coord, InvalidMove
from reversi.othello.rules import (
    GameStatus,
    InProgress,
    NotYourTurn,
    advance_turn,
    attempt_move,
    count_discs,
    get_legal_moves,
)

Listener = Callable[["Game"], None]


class Move:
    def __init__(self, player: int, coord: Coord, flipped: set[Coord]) -> None:
        self.player = player
        self.coord = coord
        self.flipped = flipped

    def __repr__(self) -> str:
        return f"Move({self.player}, {Board.coord_to_field(self.coord)})"


class Game:
    """
    Game owns the board of one session and is the only way in for presentation code.
    Listeners are called after every accepted change, so they can re-render.
    """

    def __init__(self) -> None:
        self.board = Board.start()
        self.status: GameStatus = InProgress()
        self.history: list[Move] = []
        self.listeners: list[Listener] = []

        # Applying a move and computing the next status must happen as one unit.
        self.lock = threading.Lock()

    @classmethod
    def from_fields(cls, fields: list[str]) -> Game:
        game = Game()

        for field in fields:
            coord = Board.field_to_coord(field)

            try:
                game.on_cell_chosen(coord)
            except InvalidMove:
                raise ValueError(f'Invalid move "{field}" in "{" ".join(fields)}"')

        return game

    def subscribe(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def notify(self) -> None:
        for listener in self.listeners:
            listener(self)

    def new_game(self) -> None:
        with self.lock:
            self.board.initialize()
            self.status = InProgress()
            self.history = []

        self.notify()

    def on_cell_chosen(self, coord: Coord, player: Optional[int] = None) -> GameStatus:
        with self.lock:
            mover = self.board.current_player()

            if player is not None and player != mover:
                raise NotYourTurn(player, mover)

            flipped = attempt_move(self.board, coord, mover)
            status = advance_turn(self.board)
            self.status = status
            self.history.append(Move(mover, coord, flipped))

        self.notify()
        return status

    def get_board(self) -> tuple[tuple[int, ...], ...]:
        return self.board.snapshot()

    def current_player(self) -> int:
        return self.board.current_player()

    def count_discs(self) -> tuple[int, int]:
        return count_discs(self.board)

    def get_legal_moves(self) -> set[Coord]:
        if self.is_finished():
            return set()
        return get_legal_moves(self.board, self.board.current_player())

    def is_finished(self) -> bool:
        return self.status.is_finished()

    def get_fields(self) -> list[str]:
        return [Board.coord_to_field(move.coord) for move in self.history]
