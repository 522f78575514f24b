"""Window, drawing and mouse/keyboard input for the Reversi game."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from .model import (
    BOARD_SIZE,
    INVALID_SQUARE,
    GameModel,
    Piece,
    Player,
    Square,
    is_square_valid,
)

GAME_NAME = "EDAversi"

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
TARGET_FPS = 60

SQUARE_SIZE = 80
SQUARE_PADDING = 1.5
SQUARE_CONTENT_OFFSET = SQUARE_PADDING
SQUARE_CONTENT_SIZE = SQUARE_SIZE - 2 * SQUARE_PADDING
SQUARE_ROUNDNESS = 0.2

PIECE_CENTER = SQUARE_SIZE // 2
PIECE_RADIUS = SQUARE_SIZE * 80 // 100 // 2

BOARD_X = 40
BOARD_Y = 40
BOARD_CONTENT_SIZE = BOARD_SIZE * SQUARE_SIZE

OUTERBORDER_PADDING = 40
OUTERBORDER_X = BOARD_X - OUTERBORDER_PADDING
OUTERBORDER_Y = BOARD_Y - OUTERBORDER_PADDING
OUTERBORDER_SIZE = BOARD_CONTENT_SIZE + 2 * OUTERBORDER_PADDING

TITLE_FONT_SIZE = 72
SUBTITLE_FONT_SIZE = 36

INFO_CENTERED_X = OUTERBORDER_SIZE + (WINDOW_WIDTH - OUTERBORDER_SIZE) // 2
INFO_TITLE_Y = WINDOW_HEIGHT // 2

INFO_WHITE_SCORE_Y = WINDOW_HEIGHT * 1 // 4 - SUBTITLE_FONT_SIZE // 2
INFO_WHITE_TIME_Y = WINDOW_HEIGHT * 1 // 4 + SUBTITLE_FONT_SIZE // 2
INFO_BLACK_SCORE_Y = WINDOW_HEIGHT * 3 // 4 - SUBTITLE_FONT_SIZE // 2
INFO_BLACK_TIME_Y = WINDOW_HEIGHT * 3 // 4 + SUBTITLE_FONT_SIZE // 2

INFO_BUTTON_WIDTH = 280
INFO_BUTTON_HEIGHT = 64

PLAY_BLACK_BUTTON = (INFO_CENTERED_X, WINDOW_HEIGHT * 1 // 8)
PLAY_WHITE_BUTTON = (INFO_CENTERED_X, WINDOW_HEIGHT * 7 // 8)

BEIGE = (211, 176, 131)
BROWN = (127, 106, 79)
DARKGREEN = (0, 117, 44)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

PIECE_COLORS = {Piece.BLACK: BLACK, Piece.WHITE: WHITE}


@dataclass(frozen=True)
class InputState:
    """User input gathered during one frame."""

    quit_requested: bool = False
    mouse_pressed: bool = False
    mouse_position: tuple[float, float] = (0.0, 0.0)
    alt_down: bool = False
    enter_pressed: bool = False


def square_at(x: float, y: float) -> Square:
    """Return the board square under a window point, or INVALID_SQUARE."""
    square = Square(
        math.floor((x - BOARD_X) / SQUARE_SIZE),
        math.floor((y - BOARD_Y) / SQUARE_SIZE),
    )
    return square if is_square_valid(square) else INVALID_SQUARE


def format_timer(seconds: float) -> str:
    """Format a number of seconds as MM:SS."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def is_point_over_button(
    center: tuple[float, float], point: tuple[float, float]
) -> bool:
    """Tell whether a point lies on the button centred at center."""
    cx, cy = center
    px, py = point
    half_width = INFO_BUTTON_WIDTH // 2
    half_height = INFO_BUTTON_HEIGHT // 2
    return (cx - half_width <= px < cx + half_width) and (
        cy - half_height <= py < cy + half_height
    )


class View:
    """The game window."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(GAME_NAME)
        self._clock = pygame.time.Clock()
        self._fonts: dict[int, pygame.font.Font] = {}

    def close(self) -> None:
        """Close the window and release the display."""
        pygame.quit()

    def poll_input(self) -> InputState:
        """Collect the input that arrived since the previous frame."""
        quit_requested = mouse_pressed = enter_pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mouse_pressed = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                enter_pressed = True
        x, y = pygame.mouse.get_pos()
        return InputState(
            quit_requested=quit_requested,
            mouse_pressed=mouse_pressed,
            mouse_position=(float(x), float(y)),
            alt_down=bool(pygame.key.get_mods() & pygame.KMOD_ALT),
            enter_pressed=enter_pressed,
        )

    def toggle_fullscreen(self) -> None:
        """Switch between windowed and fullscreen display."""
        try:
            pygame.display.toggle_fullscreen()
        except pygame.error:
            # Some video drivers cannot switch modes; stay windowed.
            pass

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _draw_centered_text(
        self, position: tuple[float, float], font_size: int, text: str
    ) -> None:
        rendered = self._font(font_size).render(text, True, BROWN)
        x, y = position
        self.screen.blit(
            rendered,
            (int(x) - rendered.get_width() // 2, int(y) - font_size // 2),
        )

    def _draw_score(self, label: str, position: tuple[float, float], score: int) -> None:
        self._draw_centered_text(position, SUBTITLE_FONT_SIZE, f"{label}{score}")

    def _draw_timer(self, position: tuple[float, float], seconds: float) -> None:
        self._draw_centered_text(position, SUBTITLE_FONT_SIZE, format_timer(seconds))

    def _draw_button(
        self, center: tuple[float, float], label: str, background: tuple[int, int, int]
    ) -> None:
        cx, cy = center
        rect = pygame.Rect(
            int(cx - INFO_BUTTON_WIDTH // 2),
            int(cy - INFO_BUTTON_HEIGHT // 2),
            INFO_BUTTON_WIDTH,
            INFO_BUTTON_HEIGHT,
        )
        pygame.draw.rect(self.screen, background, rect)
        self._draw_centered_text(center, SUBTITLE_FONT_SIZE, label)

    def _draw_board(self, model: GameModel) -> None:
        radius = round(SQUARE_ROUNDNESS * SQUARE_CONTENT_SIZE / 2)
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                left = BOARD_X + x * SQUARE_SIZE
                top = BOARD_Y + y * SQUARE_SIZE
                rect = pygame.Rect(
                    int(left + SQUARE_CONTENT_OFFSET),
                    int(top + SQUARE_CONTENT_OFFSET),
                    int(SQUARE_CONTENT_SIZE),
                    int(SQUARE_CONTENT_SIZE),
                )
                pygame.draw.rect(self.screen, DARKGREEN, rect, border_radius=radius)
                piece = model.piece_at(Square(x, y))
                if piece != Piece.EMPTY:
                    pygame.draw.circle(
                        self.screen,
                        PIECE_COLORS[piece],
                        (left + PIECE_CENTER, top + PIECE_CENTER),
                        PIECE_RADIUS,
                    )

    def draw(self, model: GameModel) -> None:
        """Render one frame of the game."""
        self.screen.fill(BEIGE)
        pygame.draw.rect(
            self.screen,
            BLACK,
            pygame.Rect(OUTERBORDER_X, OUTERBORDER_Y, OUTERBORDER_SIZE, OUTERBORDER_SIZE),
        )
        self._draw_board(model)

        self._draw_score(
            "Black score: ",
            (INFO_CENTERED_X, INFO_WHITE_SCORE_Y),
            model.score(Player.BLACK),
        )
        self._draw_timer((INFO_CENTERED_X, INFO_WHITE_TIME_Y), model.timer(Player.BLACK))
        self._draw_centered_text((INFO_CENTERED_X, INFO_TITLE_Y), TITLE_FONT_SIZE, GAME_NAME)
        self._draw_score(
            "White score: ",
            (INFO_CENTERED_X, INFO_BLACK_SCORE_Y),
            model.score(Player.WHITE),
        )
        self._draw_timer((INFO_CENTERED_X, INFO_BLACK_TIME_Y), model.timer(Player.WHITE))

        if model.game_over:
            self._draw_button(PLAY_BLACK_BUTTON, "Play black", BLACK)
            self._draw_button(PLAY_WHITE_BUTTON, "Play white", WHITE)

        pygame.display.flip()
        self._clock.tick(TARGET_FPS)

    def square_on_mouse_pointer(self, state: InputState) -> Square:
        """Return the square under the mouse, or INVALID_SQUARE."""
        return square_at(*state.mouse_position)

    def is_mouse_over_play_black_button(self, state: InputState) -> bool:
        """Tell whether the mouse is over the "Play black" button."""
        return is_point_over_button(PLAY_BLACK_BUTTON, state.mouse_position)

    def is_mouse_over_play_white_button(self, state: InputState) -> bool:
        """Tell whether the mouse is over the "Play white" button."""
        return is_point_over_button(PLAY_WHITE_BUTTON, state.mouse_position)