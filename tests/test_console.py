import io
from unittest import mock

import pytest

from fitfuel.console import Color, Console, clear_screen


def make_console():
    stream = io.StringIO()
    return Console(stream, delay_scale=0), stream


def test_write_colored_wraps_in_codes():
    console, stream = make_console()
    console.write_colored("Hola", Color.GREEN)
    assert stream.getvalue() == Color.GREEN.value + "Hola" + Color.RESET.value


def test_progressive_writes_message_and_newline():
    console, stream = make_console()
    console.progressive("Menu Principal", 1)
    assert stream.getvalue() == "Menu Principal\n"


def test_progressive_colored_output():
    console, stream = make_console()
    console.progressive_colored("Analisis:", Color.RED, 5)
    out = stream.getvalue()
    assert out.startswith(Color.RED.value)
    assert out.endswith(Color.RESET.value + "\n")
    assert "Analisis:" in out


def test_progressive_sleeps_once_per_character():
    stream = io.StringIO()
    console = Console(stream, delay_scale=1.0)
    with mock.patch("time.sleep") as sleep:
        console.progressive("abc", 10)
    assert sleep.call_count == 3
    assert sleep.call_args.args[0] == pytest.approx(10 / 1000)
    assert stream.getvalue() == "abc\n"


def test_zero_scale_never_sleeps():
    console, stream = make_console()
    with mock.patch("time.sleep") as sleep:
        console.progressive("abcdef", 50)
    assert sleep.call_count == 0
    assert stream.getvalue() == "abcdef\n"


def test_clear_screen_runs_clear_command():
    with mock.patch("subprocess.run") as run:
        run.return_value.returncode = 0
        assert clear_screen() == 0
    command = run.call_args.args[0]
    assert command in ("cls", "clear")
    assert run.call_args.kwargs["shell"] is True