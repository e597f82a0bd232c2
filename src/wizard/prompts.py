"""Terminal prompts used by the wizard steps.

Three prompt shapes are used: pick one of a numbered list, yes/no, and free
text. Selecting can be skipped, which is reported as None and is distinct from
entering empty text.
"""

from collections.abc import Callable, Sequence
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

SKIP_CHOICE = "s"
# Typed at a text prompt to drop its suggested default
CLEAR_ANSWER = "-"

Validator = Callable[[str], str | None]


class PromptAborted(OSError):
    """Raised when the user aborts a prompt or input ends."""


class _LineStream:
    """Feeds scripted answers to rich prompts the way input() would.

    Lines come back without their newline, and running out of lines raises
    EOFError instead of returning an endless stream of empty answers.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


class Prompter:
    """Asks questions on a rich console.

    Args:
        console: Console to print prompts on
        stream: Optional input stream to read answers from instead of stdin
    """

    def __init__(self, console: Console, stream: TextIO | None = None):
        self.console = console
        self.stream = _LineStream(stream) if stream is not None else None

    def _ask(self, prompt_class, prompt: str, **kwargs):
        try:
            return prompt_class.ask(prompt, console=self.console, stream=self.stream, **kwargs)
        except (EOFError, KeyboardInterrupt) as e:
            raise PromptAborted(f"Prompt aborted ({type(e).__name__})") from e

    def select(
        self,
        prompt: str,
        items: Sequence[str],
        default: int = 0,
        allow_skip: bool = True,
    ) -> int | None:
        """Let the user pick one of ``items``.

        Returns:
            Index of the chosen item, or None if the user skipped
        """
        self.console.print(f"[bold]{escape(prompt)}[/bold]")
        for number, item in enumerate(items, start=1):
            self.console.print(f"  [cyan]{number}[/cyan]) {escape(item)}", highlight=False)
        if allow_skip:
            self.console.print(f"  [cyan]{SKIP_CHOICE}[/cyan]) skip")

        choices = [str(number) for number in range(1, len(items) + 1)]
        if allow_skip:
            choices.append(SKIP_CHOICE)

        answer = self._ask(
            Prompt,
            "Choice",
            choices=choices,
            default=str(default + 1),
            show_choices=False,
        )
        if answer == SKIP_CHOICE:
            return None
        return int(answer) - 1

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return self._ask(Confirm, escape(prompt), default=default)

    def text(
        self,
        prompt: str,
        default: str | None = None,
        allow_empty: bool = False,
        validate: Validator | None = None,
    ) -> str:
        """Ask for free text.

        Prompt text is shown as is, never parsed as rich markup.

        Args:
            prompt: Question to show
            default: Value used when the user just presses Enter
            allow_empty: Accept an empty answer. If there is also a default,
                typing CLEAR_ANSWER gives an empty answer instead of the default.
            validate: Returns an error message for invalid input, None otherwise

        Returns:
            The accepted answer
        """
        question = escape(prompt)
        clearable = bool(default) and allow_empty
        if clearable:
            question = f"{question} ([prompt.choices]{CLEAR_ANSWER}[/prompt.choices] for none)"

        while True:
            if default:
                answer = self._ask(Prompt, question, default=default)
            else:
                answer = self._ask(Prompt, question, default="", show_default=False)
            answer = answer.strip()

            if clearable and answer == CLEAR_ANSWER:
                return ""

            if not answer and not allow_empty:
                self.console.print("[prompt.invalid]A value is required")
                continue
            if answer and validate is not None:
                problem = validate(answer)
                if problem:
                    self.console.print(f"[prompt.invalid]{escape(problem)}")
                    continue
            return answer
