import io

import pytest

from csopesy.banner import header_text
from csopesy.emulator import Emulator, main


@pytest.fixture
def setup():
    out = io.StringIO()
    calls = []
    emulator = Emulator(out, lambda: calls.append(1))
    return emulator, out, calls


def test_run_exit(setup):
    emulator, out, calls = setup
    status = emulator.run(io.StringIO("exit\ninitialize\n"))
    text = out.getvalue()
    assert status == 0
    assert calls == [1]
    assert text.startswith(header_text())
    assert text.endswith("exit command recognized. Exiting program.\n")
    assert "initialize command" not in text


@pytest.mark.parametrize(
    "command",
    ["initialize", "screen", "scheduler-test", "scheduler-stop", "report-util"],
)
def test_placeholder_commands(setup, command):
    emulator, out, _ = setup
    assert emulator.handle_main_command(command) is True
    assert out.getvalue() == f"{command} command recognized. Doing something.\n"


def test_exit_returns_false(setup):
    emulator, out, _ = setup
    assert emulator.handle("exit") is False
    assert out.getvalue() == "exit command recognized. Exiting program.\n"


def test_unknown_command(setup):
    emulator, out, _ = setup
    emulator.handle_main_command("xyz")
    assert out.getvalue() == "Unknown command: xyz\n"


def test_empty_line_prints_nothing(setup):
    emulator, out, _ = setup
    assert emulator.handle_main_command("") is True
    assert out.getvalue() == ""


def test_create_screen(setup):
    emulator, out, calls = setup
    emulator.handle("screen -s p1")
    text = out.getvalue()
    assert emulator.in_screen is True
    assert emulator.current_screen == "p1"
    assert list(emulator.screens) == ["p1"]
    assert "=== SCREEN: p1 ===\n" in text
    assert text.startswith(header_text())
    assert calls == [1]


def test_create_screen_without_name(setup):
    emulator, out, _ = setup
    emulator.handle("screen -s ")
    assert out.getvalue() == "Missing process name after 'screen -s'\n"
    assert emulator.in_screen is False
    assert emulator.screens == {}


def test_resume_missing_screen(setup):
    emulator, out, _ = setup
    emulator.handle("screen -r nope")
    assert out.getvalue() == "No screen named 'nope' found.\n"
    assert emulator.in_screen is False


def test_resume_keeps_same_screen(setup):
    emulator, _, _ = setup
    emulator.handle("screen -s p1")
    first = emulator.screens["p1"]
    emulator.handle("exit")
    emulator.handle("screen -r p1")
    assert emulator.screens["p1"] is first
    assert emulator.current_screen == "p1"


def test_unknown_screen_command(setup):
    emulator, out, _ = setup
    emulator.draw_screen("p1")
    out.truncate(0)
    out.seek(0)
    assert emulator.handle("ls") is True
    assert out.getvalue() == "Unknown screen command. Type 'exit' to return to main menu.\n"
    assert emulator.in_screen is True


def test_screen_exit_returns_to_menu(setup):
    emulator, out, calls = setup
    emulator.draw_screen("p1")
    out.truncate(0)
    out.seek(0)
    assert emulator.handle("exit") is True
    assert emulator.in_screen is False
    assert emulator.current_screen == ""
    assert out.getvalue() == header_text()
    assert len(calls) == 2


def test_clear_in_menu_redraws_header(setup):
    emulator, out, calls = setup
    emulator.handle("clear")
    assert calls == [1]
    assert out.getvalue() == header_text()


def test_end_of_input_stops(setup):
    emulator, out, _ = setup
    assert emulator.run(io.StringIO("screen -s a\n")) == 0
    assert emulator.in_screen is True
    assert out.getvalue().endswith("> ")


def test_main_uses_standard_streams(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr("csopesy.banner.subprocess.run", lambda *a, **k: calls.append(a))
    monkeypatch.setattr("sys.stdin", io.StringIO("report-util\nexit\n"))
    assert main() == 0
    captured = capsys.readouterr().out
    assert "report-util command recognized. Doing something.\n" in captured
    assert len(calls) == 1