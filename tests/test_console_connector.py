# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterable

import pytest

from taskmgr.connectors.console_connector import run_console_loop
from taskmgr.tasks.task_models import Task


def feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> list[str]:
    """Replace input() with a scripted one; EOF once the script runs out."""
    pending = list(lines)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


def test_session_add_list_exit(state, repo, monkeypatch, capsys) -> None:
    prompts = feed(
        monkeypatch,
        [
            'add "buy milk" "2% organic"',
            "list",
            "exit",
            "list",  # never read
        ],
    )

    run_console_loop(state)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        'Task "buy milk" added with ID 1',
        "1. [ ] buy milk: 2% organic",
        "Goodbye.",
    ]
    assert prompts == ["> ", "> ", "> "]
    assert repo.tasks == {1: Task("buy milk", "2% organic")}
    assert repo.save_count == 2


def test_blank_and_unknown_input(state, repo, monkeypatch, capsys) -> None:
    feed(monkeypatch, ["", "   ", "frobnicate 1", "EXIT"])

    run_console_loop(state)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        'Type "help" for usage information.',
        'Type "help" for usage information.',
        'Invalid command. Type "help" for usage information.',
        "Goodbye.",
    ]
    assert repo.save_count == 1


def test_eof_acts_like_exit(state, repo, monkeypatch, capsys) -> None:
    feed(monkeypatch, ["add A", "complete 1"])

    run_console_loop(state)

    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Goodbye."
    assert repo.tasks == {1: Task("A", "", True)}
    assert repo.save_count == 3


def test_keyboard_interrupt_saves(state, repo, monkeypatch, capsys) -> None:
    def interrupted(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)
    state.store.add("pending")

    run_console_loop(state)

    assert capsys.readouterr().out.splitlines()[-1] == "Goodbye."
    assert repo.tasks == {1: Task("pending")}


def test_crashing_handler_does_not_stop_loop(state, monkeypatch, capsys) -> None:
    def boom(task_id: int):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.store, "toggle", boom, raising=False)
    feed(monkeypatch, ["add A", "complete 1", "list", "exit"])

    run_console_loop(state)

    out = capsys.readouterr().out.splitlines()
    assert "Internal error while handling a command." in out
    assert "1. [ ] A: " in out
    assert out[-1] == "Goodbye."


def test_custom_prompt(state, monkeypatch, capsys) -> None:
    state.settings.prompt = "tasks> "
    prompts = feed(monkeypatch, ["exit"])

    run_console_loop(state)

    assert prompts == ["tasks> "]


def test_undecodable_input_does_not_block_later_saves(state, repo, monkeypatch, capsys) -> None:
    # Invalid UTF-8 bytes on stdin arrive as lone surrogates.
    feed(monkeypatch, ["add A", "add \udcff", "list", "exit"])

    run_console_loop(state)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        'Task "A" added with ID 1',
        "Invalid text: input is not valid UTF-8.",
        "1. [ ] A: ",
        "Goodbye.",
    ]
    assert repo.tasks == {1: Task("A")}
    assert repo.save_count == 2
