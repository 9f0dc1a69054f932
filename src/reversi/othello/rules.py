from __future__ import annotations

from itertools import count
from typing import Optional

from reversi.othello.board import (
    BLACK,
    EMPTY,
    WHITE,
    Board,
    Coord,
    InvalidMove,
    color_name,
    opponent,
)

DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]


class CellOccupied(InvalidMove):
    def __init__(self, coord: Coord) -> None:
        super().__init__(f"Square {Board.coord_to_field(coord)} is not empty")
        self.coord = coord


class NoFlips(InvalidMove):
    def __init__(self, coord: Coord) -> None:
        super().__init__(f"Playing {Board.coord_to_field(coord)} flips no discs")
        self.coord = coord


class NotYourTurn(InvalidMove):
    def __init__(self, player: int, mover: int) -> None:
        super().__init__(f"{color_name(mover)} is to move")
        self.player = player
        self.mover = mover


class GameStatus:
    def is_finished(self) -> bool:
        return False

    def describe(self) -> str:
        raise NotImplementedError

    def as_tuple(self) -> tuple[object, ...]:
        return ()

    def __repr__(self) -> str:
        args = ", ".join(str(item) for item in self.as_tuple())
        return f"{type(self).__name__}({args})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameStatus):
            raise TypeError(f"Cannot compare GameStatus with {type(other)}")

        return type(self) is type(other) and self.as_tuple() == other.as_tuple()


class InProgress(GameStatus):
    def describe(self) -> str:
        return ""


class Passed(GameStatus):
    def __init__(self, player: int) -> None:
        assert player in [BLACK, WHITE]

        # Player who could not move and was skipped.
        self.player = player

    def as_tuple(self) -> tuple[object, ...]:
        return (self.player,)

    def describe(self) -> str:
        passer = color_name(self.player)
        mover = color_name(opponent(self.player))
        return f"{passer} has no moves and passes, {mover} to move again."


class Finished(GameStatus):
    def __init__(self, black_count: int, white_count: int) -> None:
        self.black_count = black_count
        self.white_count = white_count

    def is_finished(self) -> bool:
        return True

    def as_tuple(self) -> tuple[object, ...]:
        return (self.black_count, self.white_count)

    @property
    def winner(self) -> Optional[int]:
        if self.black_count > self.white_count:
            return BLACK
        if self.white_count > self.black_count:
            return WHITE
        return None

    def is_draw(self) -> bool:
        return self.winner is None

    def describe(self) -> str:
        score = f"Black {self.black_count} - White {self.white_count}"

        if self.winner is None:
            return f"Game over! Draw, {score}"
        return f"Game over! {color_name(self.winner)} wins, {score}"


def compute_flips(board: Board, coord: Coord, player: int) -> set[Coord]:
    assert player in [BLACK, WHITE]

    if board.get(coord) != EMPTY:
        return set()

    opp = opponent(player)
    row, col = coord
    flipped: set[Coord] = set()

    for d_row, d_col in DIRECTIONS:
        line: list[Coord] = []

        for distance in count(1):
            current = (row + d_row * distance, col + d_col * distance)

            if not Board.is_valid_coord(current):
                break

            square = board.get(current)

            if square == opp:
                line.append(current)
                continue

            if square == player:
                flipped.update(line)
            break

    return flipped


def attempt_move(board: Board, coord: Coord, player: int) -> set[Coord]:
    """
    Place a disc of `player` on `coord` and flip all bracketed opponent discs.
    Raises an InvalidMove subclass without touching the board if the move is illegal.
    Returns the flipped coordinates.
    """

    if board.get(coord) != EMPTY:
        raise CellOccupied(coord)

    flipped = compute_flips(board, coord, player)

    if not flipped:
        raise NoFlips(coord)

    board.set(coord, player)
    for flipped_coord in flipped:
        board.set(flipped_coord, player)

    return flipped


def has_legal_move(board: Board, player: int) -> bool:
    return any(
        board.get(coord) == EMPTY and compute_flips(board, coord, player)
        for coord in Board.all_coords()
    )


def get_legal_moves(board: Board, player: int) -> set[Coord]:
    return {
        coord
        for coord in Board.all_coords()
        if board.get(coord) == EMPTY and compute_flips(board, coord, player)
    }


def count_discs(board: Board) -> tuple[int, int]:
    return board.count(BLACK), board.count(WHITE)


def advance_turn(board: Board) -> GameStatus:
    """
    Hand the turn to the next player after an accepted move by `board.turn`.
    If the next player cannot move the turn goes back to the mover, if nobody can move
    the game is over.
    """

    mover = board.turn
    board.turn = opponent(mover)

    if has_legal_move(board, board.turn):
        return InProgress()

    if has_legal_move(board, mover):
        passer = board.turn
        board.turn = mover
        return Passed(passer)

    black_count, white_count = count_discs(board)
    return Finished(black_count, white_count)
