import io
import sys
from unittest import mock

import pytest

from msmanager.data import default_registry
from msmanager.helpers import Console
from msmanager.main import main, run


@pytest.fixture(autouse=True)
def no_sleep():
    with mock.patch("msmanager.ui.time.sleep"):
        yield


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_exit_english():
    console, out = make_console("1\n0\n")
    run(console, default_registry())
    assert out.getvalue().endswith("Exiting...\n")


def test_exit_malay():
    console, out = make_console("2\n0\n")
    run(console, default_registry())
    assert "Selamat datang" in out.getvalue()
    assert out.getvalue().endswith("Keluar...\n")


def test_delete_through_menu():
    registry = default_registry()
    console, out = make_console("1\n4\nJohor\n0\n")
    run(console, registry)
    assert registry.search("Johor") is None
    assert "Record deleted." in out.getvalue()


def test_report_through_menu(tmp_path):
    console, out = make_console("1\n6\n0\n")
    with mock.patch("msmanager.helpers.subprocess.run"):
        run(console, default_registry(), tmp_path)
    assert (tmp_path / "report.csv").exists()
    assert "Report saved as" in out.getvalue()


def test_end_of_input_stops_loop():
    registry = default_registry()
    console, out = make_console("1\n")
    run(console, registry)
    assert out.getvalue().count("Your Choice: ") == 1
    assert len(registry) == 16


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n0\n"))
    assert main([]) == 0
    assert "Exiting..." in capsys.readouterr().out