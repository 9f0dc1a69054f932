import typer

from reversi.arguments import Arguments
from reversi.othello.board import Board, InvalidMove, color_name
from reversi.othello.game import Game

QUIT_COMMANDS = ["q", "quit", "exit"]
NEW_GAME_COMMANDS = ["n", "new"]


class Terminal:
    """Play a game in the terminal, reading fields such as `d3` from standard input."""

    def __init__(self, args: Arguments) -> None:
        self.show_legal_moves = args.show_legal_moves
        self.game = Game.from_fields(args.moves)
        self.running = True

        self.game.subscribe(self.on_game_change)

    def on_game_change(self, game: Game) -> None:
        self.show()

    def show(self) -> None:
        moves = self.game.get_legal_moves() if self.show_legal_moves else set()
        self.game.board.show(moves)

        black_count, white_count = self.game.count_discs()
        print(f"Black {black_count} - White {white_count}")

        if self.game.is_finished():
            print("Type new to play again or quit to stop.")
        else:
            print(f"{color_name(self.game.current_player())} to move")

    def handle_line(self, line: str) -> None:
        line = line.strip().lower()

        if line in QUIT_COMMANDS:
            self.running = False
            return

        if not line:
            print("Type a field such as d3, new or quit.")
            return

        if line in NEW_GAME_COMMANDS:
            self.game.new_game()
            return

        try:
            coord = Board.field_to_coord(line)
        except ValueError as e:
            print(f"Could not parse move: {e}")
            return

        try:
            status = self.game.on_cell_chosen(coord)
        except InvalidMove as e:
            print(f"Invalid move: {e}")
            return

        notice = status.describe()
        if notice:
            print(notice)

    def run(self) -> None:
        self.show()

        while self.running:
            line = typer.prompt("Move")
            self.handle_line(line)
