import numpy as np
import pytest

from mandelview.compute import (
    apply_palette,
    compute_iterations,
    escape_iteration,
    pixel_to_complex,
)


def test_origin_never_escapes():
    assert escape_iteration(0.0, 0.0, 50) == 50
    assert escape_iteration(0.0, 0.0, 1000) == 1000


def test_far_point_escapes_on_first_iteration():
    assert escape_iteration(3.0, 3.0, 50) == 0


@pytest.mark.parametrize("cx, cy, expected", [
    (-1.0, 0.0, 100),   # period-2 cycle
    (0.0, 1.0, 100),    # preperiodic, bounded
    (-1.0, 1.0, 2),
    (1.0, -1.0, 1),
    (0.5, 0.0, 4),
])
def test_known_escape_counts(cx, cy, expected):
    assert escape_iteration(cx, cy, 100) == expected


def test_result_stays_within_cap():
    rng = np.random.default_rng(1234)
    for cx, cy in rng.uniform(-2.5, 2.5, size=(200, 2)):
        k = escape_iteration(cx, cy, 30)
        assert 0 <= k <= 30


def test_pixel_to_complex_corners():
    assert pixel_to_complex(0, 0, 4, 0.0, 0.0, 4.0) == (-2.0, 2.0)
    assert pixel_to_complex(2, 2, 4, 0.0, 0.0, 4.0) == (0.0, 0.0)
    assert pixel_to_complex(0, 3, 4, 0.0, 0.0, 4.0) == (-2.0, -1.0)


def test_pixel_to_complex_applies_center():
    x, y = pixel_to_complex(50, 50, 100, -0.75, 0.1, 0.5)
    assert x == pytest.approx(-0.75)
    assert y == pytest.approx(0.1)


def test_compute_iterations_shape_and_range():
    data = compute_iterations(0.0, 0.0, 4.0, 16, 40)
    assert data.shape == (16, 16)
    assert data.min() >= 0
    assert data.max() <= 40


def test_compute_iterations_is_row_major():
    data = compute_iterations(0.0, 0.0, 4.0, 8, 25)
    x, y = pixel_to_complex(1, 5, 8, 0.0, 0.0, 4.0)
    assert data[5, 1] == escape_iteration(x, y, 25)


def test_apply_palette_looks_up_each_pixel():
    iterations = np.array([[0, 1], [2, 0]], dtype=np.int32)
    palette = np.array([10, 20, 30], dtype=np.uint32)
    out = np.zeros((2, 2), dtype=np.uint32)
    apply_palette(iterations, palette, out)
    assert out.tolist() == [[10, 20], [30, 10]]
