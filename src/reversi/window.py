import pygame
from pygame.event import Event

from reversi.arguments import Arguments
from reversi.config import BOARD_WIDTH_PX, FRAME_RATE
from reversi.mode.game import GameMode
from reversi.othello.board import BLACK, COLS, ROWS, WHITE, Coord, color_name
from reversi.othello.game import Game

BOARD_HEIGHT_PX = BOARD_WIDTH_PX
STATUS_HEIGHT_PX = 80

SQUARE_SIZE = BOARD_WIDTH_PX // COLS
DISC_RADIUS = SQUARE_SIZE // 2 - 5
MOVE_INDICATOR_RADIUS = SQUARE_SIZE // 8

FONT_SIZE = 32

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)
COLOR_STATUS_BAR = (48, 48, 48)
COLOR_STATUS_TEXT = (230, 230, 230)


class NonMoveEvent(Exception):
    pass


class Window:
    def __init__(self, args: Arguments) -> None:
        pygame.init()
        self.args = args
        self.mode = GameMode(args)

        # Redraw only after the game reports a change.
        self.dirty = True
        self.mode.get_game().subscribe(self.on_game_change)

        self.screen = pygame.display.set_mode(
            (BOARD_WIDTH_PX, BOARD_HEIGHT_PX + STATUS_HEIGHT_PX)
        )
        self.clock = pygame.time.Clock()

        pygame.display.set_caption("Reversi")

    def on_game_change(self, game: Game) -> None:
        self.dirty = True

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    coord = self.get_move_from_event(event)
                except NonMoveEvent:
                    self.mode.on_event(event)

                    if event.type in [pygame.KEYDOWN, pygame.WINDOWEXPOSED]:
                        self.dirty = True
                else:
                    self.mode.on_move(coord)

            if self.dirty:
                self.draw()
                self.dirty = False

            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def get_board_square_center(self, coord: Coord) -> tuple[int, int]:
        row, col = coord

        x = col * SQUARE_SIZE + SQUARE_SIZE // 2
        y = row * SQUARE_SIZE + SQUARE_SIZE // 2

        return (x, y)

    def draw_disc(self, coord: Coord, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(coord)
        pygame.draw.circle(self.screen, color, center, DISC_RADIUS)

    def draw_move_indicator(self, coord: Coord, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(coord)
        pygame.draw.circle(self.screen, color, center, MOVE_INDICATOR_RADIUS)

    def draw_text(self, text: str, center: tuple[int, int]) -> None:
        font = pygame.font.Font(None, FONT_SIZE)
        text_surface = font.render(text, True, COLOR_STATUS_TEXT)
        text_rect = text_surface.get_rect()
        text_rect.center = center
        self.screen.blit(text_surface, text_rect.topleft)

    def draw(self) -> None:
        game = self.mode.get_game()
        squares = game.get_board()

        ui_details = self.mode.get_ui_details()
        notice: str = ui_details.pop("notice", "")
        legal_moves: set[Coord] = ui_details.pop("legal_moves", set())

        if ui_details:
            print(
                "WARNING: found unused ui details key(s): "
                + ", ".join(sorted(ui_details))
            )

        if game.current_player() == WHITE:
            turn_color = COLOR_WHITE_DISC
        else:
            turn_color = COLOR_BLACK_DISC

        self.screen.fill(COLOR_BACKGROUND)

        for offset in range(1, ROWS):
            line = offset * SQUARE_SIZE
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (0, line), (BOARD_WIDTH_PX, line)
            )
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (line, 0), (line, BOARD_HEIGHT_PX)
            )

        for row in range(ROWS):
            for col in range(COLS):
                coord = (row, col)
                square = squares[row][col]

                if square == WHITE:
                    self.draw_disc(coord, COLOR_WHITE_DISC)
                elif square == BLACK:
                    self.draw_disc(coord, COLOR_BLACK_DISC)
                elif coord in legal_moves:
                    self.draw_move_indicator(coord, turn_color)

        self.draw_status_bar(game, notice)

        pygame.display.flip()

    def draw_status_bar(self, game: Game, notice: str) -> None:
        pygame.draw.rect(
            self.screen,
            COLOR_STATUS_BAR,
            ((0, BOARD_HEIGHT_PX), (BOARD_WIDTH_PX, STATUS_HEIGHT_PX)),
        )

        black_count, white_count = game.count_discs()
        score = f"Black {black_count} - White {white_count}"

        if not game.is_finished():
            score += f"    {color_name(game.current_player())} to move"

        pygame.display.set_caption(f"Reversi - {score}")

        x = BOARD_WIDTH_PX // 2
        self.draw_text(score, (x, BOARD_HEIGHT_PX + STATUS_HEIGHT_PX // 3))
        self.draw_text(notice, (x, BOARD_HEIGHT_PX + (2 * STATUS_HEIGHT_PX) // 3))

    def get_move_from_event(self, event: Event) -> Coord:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        col: int = x // SQUARE_SIZE
        row: int = y // SQUARE_SIZE

        if not (row in range(ROWS) and col in range(COLS)):
            raise NonMoveEvent

        return (row, col)
