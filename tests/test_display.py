import os

import numpy as np
import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from mandelview.colormaps import HOT_COLOR, CONVERGED_COLOR  # noqa: E402
from mandelview.display import PygameDisplay  # noqa: E402


@pytest.fixture
def display():
    display = PygameDisplay("test")
    yield display
    display.close()


def test_show_presents_pixels_at_full_scale(display):
    pixels = np.full((16, 16), HOT_COLOR, dtype=np.uint32)
    pixels[0, 15] = CONVERGED_COLOR
    display.show(pixels)

    assert display.screen.get_size() == (16, 16)
    assert tuple(display.screen.get_at((0, 0)))[:3] == (255, 0, 0)
    # pixel column 15 of row 0 is the top-right corner
    assert tuple(display.screen.get_at((15, 0)))[:3] == (0, 0, 255)


def test_new_frame_replaces_previous(display):
    display.show(np.full((8, 8), HOT_COLOR, dtype=np.uint32))
    display.show(np.full((8, 8), CONVERGED_COLOR, dtype=np.uint32))
    assert tuple(display.screen.get_at((4, 4)))[:3] == (0, 0, 255)


def test_message_is_kept_for_redraws(display):
    display.show(np.full((64, 64), HOT_COLOR, dtype=np.uint32), " done in 3ms.")
    assert display.message == " done in 3ms."
    assert not display.closed()


def test_quit_event_marks_display_closed(display):
    display.show(np.full((8, 8), HOT_COLOR, dtype=np.uint32))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert display.closed()
    assert display.closed()


def test_closed_before_first_frame_is_false():
    assert not PygameDisplay().closed()


def test_events_wait_until_closed_is_called(display):
    display.show(np.full((8, 8), HOT_COLOR, dtype=np.uint32))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    display.show(np.full((8, 8), CONVERGED_COLOR, dtype=np.uint32))
    assert not display._closed
    assert display.closed()
