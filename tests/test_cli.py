import io
from unittest import mock

import pytest

from renju.cli import main
from renju.constants import FIELD_SIZE


def test_main_draws_board_and_exits_on_end_of_input(capsys):
    with mock.patch("sys.stdin", io.StringIO("")):
        assert main([]) == 0
    out = capsys.readouterr().out
    assert "Введите ход (x y): " in out
    assert ("_ " * FIELD_SIZE + "\n") * FIELD_SIZE in out


def test_main_reports_bad_input(capsys):
    with mock.patch("sys.stdin", io.StringIO("abc def\n")):
        assert main([]) == 1
    assert "abc" in capsys.readouterr().err


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2