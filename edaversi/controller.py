"""Per-frame game logic: reacts to input and lets the computer play."""

from __future__ import annotations

from .ai import get_best_move
from .model import GameModel, Player, is_square_valid
from .view import View


def update_view(model: GameModel, view: View) -> bool:
    """Process one frame. Return False when the window should close."""
    state = view.poll_input()
    if state.quit_requested:
        return False

    if model.game_over:
        if state.mouse_pressed:
            if view.is_mouse_over_play_black_button(state):
                model.human_player = Player.BLACK
                model.start()
            elif view.is_mouse_over_play_white_button(state):
                model.human_player = Player.WHITE
                model.start()
    elif model.current_player == model.human_player:
        if state.mouse_pressed:
            square = view.square_on_mouse_pointer(state)
            if is_square_valid(square) and square in model.valid_moves():
                model.play_move(square)
    else:
        model.play_move(get_best_move(model, view.draw))

    if state.alt_down and state.enter_pressed:
        view.toggle_fullscreen()

    view.draw(model)
    return True