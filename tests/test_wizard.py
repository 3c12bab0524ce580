from __future__ import annotations

import subprocess
from datetime import date
from typing import Iterable

import pytest

from jlfoundry.errors import ValidationError
from jlfoundry.identity import static_identity
from jlfoundry.wizard import InputCollector


class ScriptedPrompt:
    """Answer prompts from a fixed list and remember the questions asked."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        return self.answers.pop(0)


def _collector(answers: Iterable[str], identity=static_identity("Jane Doe", "jane@example.com")) -> tuple[InputCollector, ScriptedPrompt]:
    prompt = ScriptedPrompt(answers)
    collector = InputCollector(prompt=prompt, identity=identity, today=lambda: date(2024, 5, 1))
    return collector, prompt


def test_collect_uses_answers():
    collector, _ = _collector(["AwesomePackage", "John Doe", "john@example.com", "1.10", "An awesome package"])
    config = collector.collect()
    assert config.name == "AwesomePackage"
    assert config.author_name == "John Doe"
    assert config.author_email == "john@example.com"
    assert config.runtime_version == "1.10"
    assert config.description == "An awesome package"
    assert config.year == 2024


def test_empty_answers_adopt_defaults():
    collector, prompt = _collector(["", "", "", "", ""])
    config = collector.collect()
    assert config.name == "MyPackage"
    assert config.author_name == "Jane Doe"
    assert config.author_email == "jane@example.com"
    assert config.runtime_version == "1.12"
    assert config.description == ""
    assert prompt.questions == [
        "Package name [MyPackage]: ",
        "Author name [Jane Doe]: ",
        "Author email [jane@example.com]: ",
        "Julia version [1.12]: ",
        "Short description (optional): ",
    ]


def test_answers_are_stripped():
    collector, _ = _collector(["  Demo  ", "   ", "", "", "  words  "])
    config = collector.collect()
    assert config.name == "Demo"
    assert config.author_name == "Jane Doe"
    assert config.description == "words"


def test_unavailable_identity_defaults_to_empty_strings():
    def broken_identity() -> tuple[str, str]:
        raise OSError("no identity source")

    collector, prompt = _collector(["Demo", "", "", "", ""], identity=broken_identity)
    config = collector.collect()
    assert config.author_name == ""
    assert config.author_email == ""
    assert prompt.questions[1] == "Author name: "


def test_empty_identity_defaults_to_empty_strings():
    collector, _ = _collector(["Demo", "", "", "", ""], identity=static_identity())
    config = collector.collect()
    assert (config.author_name, config.author_email) == ("", "")


@pytest.mark.parametrize("name", ["123abc", "my-pkg"])
def test_invalid_name_raises_validation_error(name):
    collector, _ = _collector([name, "", "", "", ""])
    with pytest.raises(ValidationError):
        collector.collect()


def _raise_timeout() -> tuple[str, str]:
    raise subprocess.TimeoutExpired(["git", "config", "user.name"], 5)


def _malformed() -> tuple[str, str]:
    return ("only-one",)  # type: ignore[return-value]


def _not_a_tuple() -> tuple[str, str]:
    return 42  # type: ignore[return-value]


@pytest.mark.parametrize("provider", [_raise_timeout, _malformed, _not_a_tuple])
def test_failing_identity_providers_fall_back_to_empty_strings(provider):
    collector, _ = _collector(["Demo", "", "", "", ""], identity=provider)
    config = collector.collect()
    assert (config.author_name, config.author_email) == ("", "")
