import io

import pytest

from mandelview.console import ConsoleInput


def make_console(text, affirmative="y"):
    out = io.StringIO()
    return ConsoleInput(io.StringIO(text), out, affirmative), out


def test_reads_one_value_per_line():
    console, out = make_console("0.5\n-0.25\n2\ny\n")
    assert console.read_view() == (0.5, -0.25, 2.0)
    assert console.read_continue() == "y"
    prompts = out.getvalue()
    assert "Center on X axis" in prompts
    assert "Zoom level" in prompts
    assert "Continue? (y/n)" in prompts


def test_numbers_may_share_a_line():
    console, _ = make_console("-0.75 0.1 4\nn\n")
    assert console.read_view() == (-0.75, 0.1, 4.0)
    assert console.read_continue() == "n"


def test_continue_skips_the_rest_of_the_zoom_line():
    console, _ = make_console("0 0 1 leftover\nS\n")
    console.read_view()
    assert console.read_continue() == "S"


def test_malformed_numbers_are_reported_and_asked_again():
    console, out = make_console("abc\n1\n2\n0\n-3\n1.5\n")
    assert console.read_view() == (1.0, 2.0, 1.5)
    text = out.getvalue()
    assert "Not a number: 'abc'" in text
    assert "must be greater than 0: '0'" in text
    assert "must be greater than 0: '-3'" in text


def test_non_finite_numbers_are_rejected():
    console, out = make_console("nan\ninf\n0.5\n")
    assert console.read_float("X?") == 0.5
    assert out.getvalue().count("Not a finite number") == 2


def test_exhausted_input_raises_eof():
    console, _ = make_console("1\n")
    with pytest.raises(EOFError):
        console.read_view()


def test_prompt_shows_configured_token():
    console, out = make_console("s\n", affirmative="s")
    console.read_continue()
    assert "Continue? (s/n)" in out.getvalue()


def test_zoom_too_small_for_a_finite_span_is_asked_again():
    console, out = make_console("0 0 1e-310\n2\nn\n")
    assert console.read_view() == (0.0, 0.0, 2.0)
    assert "Zoom level out of range: 1e-310" in out.getvalue()
    assert console.read_continue() == "n"


def test_huge_zoom_is_accepted():
    console, _ = make_console("0 0 1e308\n")
    assert console.read_view() == (0.0, 0.0, 1e308)


def test_zoom_range_follows_base_span():
    console = ConsoleInput(io.StringIO("1e-300\n3\n"), io.StringIO(), base_span=1e10)
    assert console.read_zoom() == 3.0
