from abc import ABC
from abc import abstractmethod
from typing import Callable
from typing import NamedTuple

from rich.prompt import Confirm
from rich.prompt import Prompt

from redisws.errors.service import PromptUnavailable
from redisws.output.console import CONSOLE
from redisws.output.styles import Style

# returns error message or None when value is acceptable
Validator = Callable[[str], str | None]


class Option(NamedTuple):
    label: str
    value: str


class Prompter(ABC):
    @abstractmethod
    def text(self, message: str, validate: Validator = None) -> str:
        ...

    @abstractmethod
    def select(self, message: str, options: list[Option]) -> str:
        ...

    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        ...


class RichPrompter(Prompter):
    def __init__(self, console=CONSOLE):
        self._console = console

    def text(self, message: str, validate: Validator = None) -> str:
        while True:
            value = Prompt.ask(message, console=self._console).strip()
            error = validate(value) if validate else None
            if error is None:
                return value
            self._console.print(error, style=Style.bad)

    def select(self, message: str, options: list[Option]) -> str:
        labels = {option.label: option.value for option in options}
        label = Prompt.ask(
            message,
            console=self._console,
            choices=list(labels),
            default=options[0].label,
        )
        return labels[label]

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, console=self._console, default=default)


class NonInteractivePrompter(Prompter):
    def text(self, message: str, validate: Validator = None) -> str:
        raise PromptUnavailable(f"Can't ask {message!r} in non-interactive mode")

    def select(self, message: str, options: list[Option]) -> str:
        raise PromptUnavailable(f"Can't ask {message!r} in non-interactive mode")

    def confirm(self, message: str, default: bool = False) -> bool:
        raise PromptUnavailable(f"Can't confirm {message!r} in non-interactive mode, use --yes")
