import io
import struct
import sys
from datetime import datetime

import pytest

from sckit.common import (
    PAUSE_MESSAGE,
    ScError,
    eq_double,
    eq_float,
    is_big_endian,
    isspace,
    now_string,
    pause,
)


def test_is_big_endian_matches_native_layout():
    first_byte = struct.pack("=H", 1)[0]
    assert is_big_endian() == (first_byte == 0)


def test_pause_prints_default_prompt_and_consumes_line(monkeypatch, capsys):
    stdin = io.StringIO("\nrest")
    monkeypatch.setattr(sys, "stdin", stdin)
    pause()
    assert capsys.readouterr().out == "请按任意键继续. . ."
    assert stdin.read() == "rest"


def test_pause_custom_prompt(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x\n"))
    pause("go on")
    assert capsys.readouterr().out == "go on"
    assert PAUSE_MESSAGE.startswith("请按")


def test_now_string_format_and_value():
    before = datetime.now().replace(microsecond=0)
    text = now_string()
    after = datetime.now()
    parsed = datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
    assert before <= parsed <= after


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r", 32, 9])
def test_isspace_true(c):
    assert isspace(c) is True


@pytest.mark.parametrize("c", ["a", "\x0e", "\x08", "0", "_", 65])
def test_isspace_false(c):
    assert isspace(c) is False


def test_isspace_rejects_multi_character():
    with pytest.raises(ValueError):
        isspace("ab")


def test_eq_float():
    assert eq_float(1.0, 1.0 + 1e-7)
    assert not eq_float(1.0, 1.1)
    assert eq_float(-2.5, -2.5)


def test_eq_double():
    assert eq_double(0.1 + 0.2, 0.3)
    assert not eq_double(1.0, 1.0 + 1e-7)


def test_sc_error_carries_message():
    error = ScError("boom")
    assert str(error) == "boom"
    assert error.args == ("boom",)
    assert issubclass(ScError, Exception)