import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from edaversi.main import main  # noqa: E402


def test_unknown_argument_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2


def test_main_returns_zero_when_window_is_closed():
    pygame.init()
    pygame.time.set_timer(pygame.QUIT, 50)
    assert main([]) == 0
    assert not pygame.get_init()