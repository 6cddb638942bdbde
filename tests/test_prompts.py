from __future__ import annotations

import io
from typing import Iterator

import pytest
from rich.console import Console

from tempx.prompts import RichPrompter


def make_prompter(monkeypatch: pytest.MonkeyPatch, *answers: str) -> tuple[RichPrompter, io.StringIO]:
    replies: Iterator[str] = iter(answers)
    monkeypatch.setattr("builtins.input", lambda *args: next(replies))
    output = io.StringIO()
    return RichPrompter(Console(file=output, width=120)), output


CHOICES = [("Install dependencies", "install"), ("Open in VS Code", "code"), ("Nothing", "nothing")]


def test_select_maps_number_to_value(monkeypatch: pytest.MonkeyPatch):
    prompter, output = make_prompter(monkeypatch, "2")

    assert prompter.select("What would you like to do next?", CHOICES) == "code"

    rendered = output.getvalue()
    assert "What would you like to do next?" in rendered
    assert "Open in VS Code" in rendered


def test_select_defaults_to_first_choice(monkeypatch: pytest.MonkeyPatch):
    prompter, _ = make_prompter(monkeypatch, "")
    assert prompter.select("Pick one", CHOICES) == "install"


def test_select_reprompts_on_out_of_range_number(monkeypatch: pytest.MonkeyPatch):
    prompter, _ = make_prompter(monkeypatch, "7", "3")
    assert prompter.select("Pick one", CHOICES) == "nothing"


def test_select_renders_labels_verbatim(monkeypatch: pytest.MonkeyPatch):
    prompter, output = make_prompter(monkeypatch, "1")

    assert prompter.select("Pick [one]", [("starter [bold]beta[/bold]", "beta")]) == "beta"

    rendered = output.getvalue()
    assert "starter [bold]beta[/bold]" in rendered
    assert "Pick [one]" in rendered


def test_select_requires_choices():
    with pytest.raises(ValueError):
        RichPrompter(Console(file=io.StringIO())).select("Pick one", [])


def test_text_returns_default_on_empty_answer(monkeypatch: pytest.MonkeyPatch):
    prompter, _ = make_prompter(monkeypatch, "")
    assert prompter.text("Enter target directory:", default="vite-starter") == "vite-starter"


def test_text_returns_answer(monkeypatch: pytest.MonkeyPatch):
    prompter, _ = make_prompter(monkeypatch, "my-app")
    assert prompter.text("Enter target directory:", default="vite-starter") == "my-app"


def test_text_prompt_with_brackets_is_not_markup(monkeypatch: pytest.MonkeyPatch):
    prompter, output = make_prompter(monkeypatch, "x")
    prompter.text("Directory /tmp/[x] exists?")
    assert "Directory /tmp/[x] exists?" in output.getvalue()


@pytest.mark.parametrize(("answer", "expected"), [("y", True), ("n", False), ("", True)])
def test_confirm(monkeypatch: pytest.MonkeyPatch, answer: str, expected: bool):
    prompter, _ = make_prompter(monkeypatch, answer)
    assert prompter.confirm("Remove it?", default=True) is expected
