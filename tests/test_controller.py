from edaversi.controller import update_view
from edaversi.model import BOARD_SIZE, GameModel, Piece, Player, Square
from edaversi.view import (
    BOARD_X,
    BOARD_Y,
    PIECE_CENTER,
    PLAY_BLACK_BUTTON,
    PLAY_WHITE_BUTTON,
    SQUARE_SIZE,
    InputState,
    is_point_over_button,
    square_at,
)


class FakeView:
    def __init__(self, *states):
        self._states = list(states)
        self.draws = 0
        self.toggles = 0

    def poll_input(self):
        return self._states.pop(0)

    def draw(self, model):
        self.draws += 1

    def toggle_fullscreen(self):
        self.toggles += 1

    def square_on_mouse_pointer(self, state):
        return square_at(*state.mouse_position)

    def is_mouse_over_play_black_button(self, state):
        return is_point_over_button(PLAY_BLACK_BUTTON, state.mouse_position)

    def is_mouse_over_play_white_button(self, state):
        return is_point_over_button(PLAY_WHITE_BUTTON, state.mouse_position)


def _click(square):
    return InputState(
        mouse_pressed=True,
        mouse_position=(
            BOARD_X + square.x * SQUARE_SIZE + PIECE_CENTER,
            BOARD_Y + square.y * SQUARE_SIZE + PIECE_CENTER,
        ),
    )


def _model():
    return GameModel(clock=lambda: 0.0)


def test_quit_stops_without_drawing():
    view = FakeView(InputState(quit_requested=True))
    assert update_view(_model(), view) is False
    assert view.draws == 0


def test_idle_frame_draws_once():
    model = _model()
    view = FakeView(InputState())
    assert update_view(model, view) is True
    assert view.draws == 1
    assert model.game_over


def test_play_black_button_starts_game_for_black():
    model = _model()
    view = FakeView(InputState(mouse_pressed=True, mouse_position=PLAY_BLACK_BUTTON))
    assert update_view(model, view)
    assert not model.game_over
    assert model.human_player == Player.BLACK
    assert model.current_player == Player.BLACK
    assert model.score(Player.BLACK) == 2


def test_play_white_button_starts_game_for_white():
    model = _model()
    view = FakeView(InputState(mouse_pressed=True, mouse_position=PLAY_WHITE_BUTTON))
    assert update_view(model, view)
    assert not model.game_over
    assert model.human_player == Player.WHITE
    assert model.current_player == Player.BLACK


def test_click_elsewhere_keeps_game_over():
    model = _model()
    view = FakeView(InputState(mouse_pressed=True, mouse_position=(BOARD_X, BOARD_Y)))
    assert update_view(model, view)
    assert model.game_over


def test_human_valid_click_plays_move():
    model = _model()
    model.start()
    model.human_player = Player.BLACK
    move = model.valid_moves()[0]
    view = FakeView(_click(move))
    assert update_view(model, view)
    assert model.piece_at(move) == Piece.BLACK
    assert model.current_player == Player.WHITE
    assert model.score(Player.BLACK) == 4


def test_human_invalid_click_is_ignored():
    model = _model()
    model.start()
    model.human_player = Player.BLACK
    view = FakeView(_click(Square(0, 0)))
    assert update_view(model, view)
    assert model.piece_at(Square(0, 0)) == Piece.EMPTY
    assert model.current_player == Player.BLACK


def test_human_move_without_click_does_nothing():
    model = _model()
    model.start()
    model.human_player = Player.BLACK
    before = [model.piece_at(Square(x, y)) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE)]
    view = FakeView(InputState(mouse_position=(BOARD_X, BOARD_Y)))
    assert update_view(model, view)
    after = [model.piece_at(Square(x, y)) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE)]
    assert before == after


def test_computer_plays_its_only_move():
    model = _model()
    model.start()
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            model.set_piece(Square(x, y), Piece.EMPTY)
    model.set_piece(Square(0, 0), Piece.WHITE)
    model.set_piece(Square(1, 0), Piece.BLACK)
    model.human_player = Player.BLACK
    model.current_player = Player.WHITE
    view = FakeView(InputState())
    assert update_view(model, view)
    assert model.piece_at(Square(2, 0)) == Piece.WHITE
    assert model.piece_at(Square(1, 0)) == Piece.WHITE
    assert model.game_over
    assert view.draws == 2


def test_alt_enter_toggles_fullscreen():
    view = FakeView(InputState(alt_down=True, enter_pressed=True), InputState(enter_pressed=True))
    model = _model()
    update_view(model, view)
    update_view(model, view)
    assert view.toggles == 1