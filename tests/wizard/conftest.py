"""Fixtures for driving wizard steps with scripted answers."""

import io

import pytest
from rich.console import Console

from common.logger import GUIDE_THEME
from wizard.context import WizardContext
from wizard.messages import Messages
from wizard.prompts import CLEAR_ANSWER, PromptAborted


class ScriptedPrompter:
    """Answers prompts from a list, the way a user would type them.

    - select: an item label, an index, "" for the default, or None to skip
    - confirm: True/False, or "" for the default
    - text: a string; "" accepts the default, CLEAR_ANSWER drops it
    Running out of answers raises PromptAborted, like closed input.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.offered = []

    def _answer(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise PromptAborted(f"No scripted answer for: {prompt}")
        return self.answers.pop(0)

    def select(self, prompt, items, default=0, allow_skip=True):
        self.offered.append(list(items))
        answer = self._answer(prompt)
        if answer is None:
            assert allow_skip, f"Cannot skip: {prompt}"
            return None
        if answer == "":
            return default
        if isinstance(answer, int):
            return answer
        return list(items).index(answer)

    def confirm(self, prompt, default=False):
        answer = self._answer(prompt)
        if answer == "":
            return default
        return answer

    def text(self, prompt, default=None, allow_empty=False, validate=None):
        while True:
            answer = self._answer(prompt)
            if answer == CLEAR_ANSWER and default and allow_empty:
                return ""
            if answer == "" and default:
                answer = default
            if not answer and not allow_empty:
                continue
            if answer and validate is not None and validate(answer):
                continue
            return answer


@pytest.fixture
def package_dir(tmp_path):
    directory = tmp_path / "demo"
    directory.mkdir()
    return directory


@pytest.fixture
def make_context(package_dir, monkeypatch):
    """Factory for a WizardContext answering from a script."""
    monkeypatch.setattr("wizard.steps.system_user_names", lambda: ["jdoe", "Jane Doe"])

    def _make(answers=(), vcs=None):
        return WizardContext(
            vcs=vcs,
            prompter=ScriptedPrompter(answers),
            console=Console(file=io.StringIO(), theme=GUIDE_THEME, width=120),
            messages=Messages(),
            directory=package_dir,
            filename="LICENSE.spdx",
            license_list_version="3.25",
        )

    return _make

