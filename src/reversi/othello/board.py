from __future__ import annotations

from typing import Iterable, Optional

ROWS = 8
COLS = 8

BLACK = -1
WHITE = 1
EMPTY = 0

Coord = tuple[int, int]


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def color_name(color: int) -> str:
    assert color in [BLACK, WHITE]
    return "Black" if color == BLACK else "White"


class InvalidMove(Exception):
    pass


class OutOfBounds(InvalidMove):
    def __init__(self, coord: Coord) -> None:
        super().__init__(f"Coordinate {coord} is not on the board")
        self.coord = coord


class Board:
    """
    Board stores the occupancy of all 64 squares and the color of the player to move.
    It is mutated in place, only the rules engine should call `set()`.
    """

    def __init__(self, squares: list[list[int]], turn: int) -> None:
        assert turn in [BLACK, WHITE]
        assert len(squares) == ROWS
        assert all(len(row) == COLS for row in squares)

        self.squares = squares
        self.turn = turn

    @classmethod
    def start(cls) -> Board:
        board = Board.empty()
        board.initialize()
        return board

    @classmethod
    def empty(cls) -> Board:
        squares = [[EMPTY] * COLS for _ in range(ROWS)]
        return Board(squares, BLACK)

    @classmethod
    def from_squares(cls, squares: list[int], turn: int) -> Board:
        assert len(squares) == ROWS * COLS
        assert turn in [BLACK, WHITE]

        for square in squares:
            if square not in [EMPTY, BLACK, WHITE]:
                raise ValueError(f"Invalid square value {square}")

        rows = [list(squares[row * COLS : (row + 1) * COLS]) for row in range(ROWS)]
        return Board(rows, turn)

    @classmethod
    def from_rows(cls, rows: list[str], turn: int) -> Board:
        # X is black, O is white, - or . is empty
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

        squares: list[int] = []
        for line in rows:
            if len(line) != COLS:
                raise ValueError(f'Invalid row length for "{line}"')

            for char in line:
                if char == "X":
                    squares.append(BLACK)
                elif char == "O":
                    squares.append(WHITE)
                elif char in "-.":
                    squares.append(EMPTY)
                else:
                    raise ValueError(f'Invalid square character "{char}"')

        return cls.from_squares(squares, turn)

    def initialize(self) -> None:
        for row in self.squares:
            row[:] = [EMPTY] * COLS

        center = ROWS // 2
        self.squares[center - 1][center - 1] = WHITE
        self.squares[center - 1][center] = BLACK
        self.squares[center][center - 1] = BLACK
        self.squares[center][center] = WHITE

        self.turn = BLACK

    def __repr__(self) -> str:
        return f"Board({self.as_tuple()[0]}, {self.turn})"

    @classmethod
    def is_valid_coord(cls, coord: Coord) -> bool:
        row, col = coord
        return row in range(ROWS) and col in range(COLS)

    @classmethod
    def all_coords(cls) -> list[Coord]:
        return [(row, col) for row in range(ROWS) for col in range(COLS)]

    def get(self, coord: Coord) -> int:
        if not self.is_valid_coord(coord):
            raise OutOfBounds(coord)

        row, col = coord
        return self.squares[row][col]

    def set(self, coord: Coord, value: int) -> None:
        assert value in [EMPTY, BLACK, WHITE]

        if not self.is_valid_coord(coord):
            raise OutOfBounds(coord)

        row, col = coord
        self.squares[row][col] = value

    def current_player(self) -> int:
        return self.turn

    def count(self, color: int) -> int:
        assert color in [EMPTY, BLACK, WHITE]
        return sum(row.count(color) for row in self.squares)

    def count_all_discs(self) -> int:
        return self.count(BLACK) + self.count(WHITE)

    def count_empties(self) -> int:
        return self.count(EMPTY)

    def snapshot(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self.squares)

    def copy(self) -> Board:
        return Board([list(row) for row in self.squares], self.turn)

    def render(self, moves: Optional[Iterable[Coord]] = None) -> str:
        moves = set(moves or [])

        lines = ["+-a-b-c-d-e-f-g-h-+"]
        for row in range(ROWS):
            line = "{} ".format(row + 1)

            for col in range(COLS):
                square = self.squares[row][col]

                if square == BLACK:
                    line += "○ "
                elif square == WHITE:
                    line += "● "
                elif (row, col) in moves:
                    line += "· "
                else:
                    line += "  "
            lines.append(line + "|")
        lines.append("+-----------------+")
        return "\n".join(lines)

    def show(self, moves: Optional[Iterable[Coord]] = None) -> None:
        print(self.render(moves))

    @classmethod
    def coord_to_field(cls, coord: Coord) -> str:
        if not cls.is_valid_coord(coord):
            raise ValueError(f"Invalid coordinate {coord}")

        row, col = coord
        return "abcdefgh"[col] + "12345678"[row]

    @classmethod
    def coords_to_fields(cls, coords: Iterable[Coord]) -> str:
        return " ".join(cls.coord_to_field(coord) for coord in sorted(coords))

    @classmethod
    def field_to_coord(cls, field: str) -> Coord:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return (row, col)

    def as_tuple(self) -> tuple[tuple[tuple[int, ...], ...], int]:
        return (self.snapshot(), self.turn)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()
