"""This module represents the questions the deployment wizard asks to the user."""

import logging
from enum import Enum
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Tuple

import click

from galileocli.lib.prompts.validators import Validator
from galileocli.lib.utils.colors import Colored

LOG = logging.getLogger(__name__)

Visibility = Callable[[Any], bool]


class PromptKind(Enum):
    """An Enum of possible question types."""

    text = "text"
    confirm = "confirm"
    select = "select"
    multiselect = "multiselect"
    autocomplete_multiselect = "autocompleteMultiselect"


class PromptChoice(NamedTuple):
    title: str
    value: Any
    selected: bool = False


class Question:
    """
    A question to be prompt to the user, the answer is reported under the question's key.

    Attributes
    ----------
    _key: str
        The key to associate the answer with.
    _text: str
        The text to prompt to the user
    _default_answer: Optional[Any]
        The answer suggested to the user. It is resolved once, when the question is built, and never re-resolved.
    _required: bool
        Whether the user must provide an answer for this question or not.
    _validator: Optional[Validator]
        Checks the answer, returns a failure message to show to the user or None when the answer is valid.
    _when: Optional[Visibility]
        Predicate over the answer of the previous question, the question is skipped when it returns False.
    _hint: Optional[str]
        Extra text displayed under the question
    """

    kind = PromptKind.text

    def __init__(
        self,
        key: str,
        text: str,
        default: Optional[Any] = None,
        is_required: Optional[bool] = None,
        validator: Optional[Validator] = None,
        when: Optional[Visibility] = None,
        hint: Optional[str] = None,
    ):
        self._key = key
        self._text = text
        self._required = is_required
        self._default_answer = default
        self._validator = validator
        self._when = when
        self._hint = hint
        self._color = Colored()

    @property
    def key(self) -> str:
        return self._key

    @property
    def text(self) -> str:
        return self._text

    @property
    def default_answer(self) -> Optional[Any]:
        return self._default_answer

    @property
    def required(self) -> Optional[bool]:
        return self._required

    @property
    def validator(self) -> Optional[Validator]:
        return self._validator

    @property
    def when(self) -> Optional[Visibility]:
        return self._when

    @property
    def hint(self) -> Optional[str]:
        return self._hint

    def validate(self, answer: Any) -> Optional[str]:
        return self._validator(answer) if self._validator else None

    def should_ask(self, previous_answer: Optional[Any] = None) -> bool:
        return self._when is None or bool(self._when(previous_answer))

    def ask(self) -> Any:
        """
        prompt the user this question until a valid answer is given

        Returns
        -------
        The user provided answer.
        """
        default_answer = self._prompt_default()

        if self._hint:
            click.echo(self._color.grey(self._hint))

        while True:
            answer = self.prompt(self._text, default_answer)
            failure = self.validate(answer)
            if failure is None:
                return answer
            LOG.debug("Answer to question %s failed validation", self._key)
            click.echo(self._color.red(failure))

    def prompt(self, text: str, default_answer: Optional[Any]) -> Any:
        return click.prompt(text=text, default=default_answer)

    def _prompt_default(self) -> Optional[Any]:
        # if it is an optional question with no default answer,
        # set an empty default answer to prevent click from keep asking for an answer
        if not self._required and self._default_answer is None:
            return ""
        return self._default_answer


class Confirm(Question):
    kind = PromptKind.confirm

    def prompt(self, text: str, default_answer: Optional[Any]) -> Any:
        return click.confirm(text=text, default=bool(default_answer))


class Select(Question):
    """
    A question answered by picking one of the choices. The answer is the value of the picked choice.

    The default answer is a choice value; when it is not one of the choices the first choice is preselected instead.
    A select without choices can be built, asking it answers None.
    """

    kind = PromptKind.select

    def __init__(
        self,
        key: str,
        text: str,
        choices: Sequence[PromptChoice],
        default: Optional[Any] = None,
        is_required: Optional[bool] = None,
        validator: Optional[Validator] = None,
        when: Optional[Visibility] = None,
        hint: Optional[str] = None,
    ):
        self._choices = list(choices)
        super().__init__(key, text, default, is_required, validator, when, hint)

    @property
    def choices(self) -> List[PromptChoice]:
        return self._choices

    @property
    def initial(self) -> int:
        values = [choice.value for choice in self._choices]
        return values.index(self._default_answer) if self._default_answer in values else 0

    def prompt(self, text: str, default_answer: Optional[Any]) -> Any:
        click.echo(text)
        if not self._choices:
            LOG.debug("No choices for question %s, nothing to select", self._key)
            return None
        for index, choice in enumerate(self._choices):
            click.echo(f"\t{index + 1} - {choice.title}")
        options_indexes = self._get_options_indexes(base=1)
        choices = list(map(str, options_indexes))
        choice = click.prompt(
            text="Choice",
            default=str(default_answer + 1),
            show_choices=False,
            type=click.Choice(choices),
        )
        return self._choices[int(choice) - 1].value

    def _get_options_indexes(self, base: int = 0) -> List[int]:
        return list(range(base, len(self._choices) + base))

    def _prompt_default(self) -> Optional[Any]:
        return self.initial


class MultiSelect(Select):
    """
    A question answered by picking one or more of the choices, entered as a comma separated list of choice numbers.
    The answer is the list of picked values in the order of the choices.
    """

    kind = PromptKind.multiselect

    def __init__(
        self,
        key: str,
        text: str,
        choices: Sequence[PromptChoice],
        min_selected: int = 0,
        instructions: Optional[str] = None,
        validator: Optional[Validator] = None,
        when: Optional[Visibility] = None,
        hint: Optional[str] = None,
    ):
        if not choices:
            raise ValueError("No defined choices")
        self._min_selected = min_selected
        self._instructions = instructions
        super().__init__(
            key,
            text,
            choices,
            default=[choice.value for choice in choices if choice.selected],
            is_required=min_selected > 0,
            validator=validator,
            when=when,
            hint=hint,
        )

    @property
    def min_selected(self) -> int:
        return self._min_selected

    @property
    def instructions(self) -> Optional[str]:
        return self._instructions

    def validate(self, answer: Any) -> Optional[str]:
        if len(answer or []) < self._min_selected:
            return f"Select at least {self._min_selected} option{'s' if self._min_selected > 1 else ''}"
        return super().validate(answer)

    def prompt(self, text: str, default_answer: Optional[Any]) -> Any:
        click.echo(text)
        if self._instructions:
            click.echo(self._color.grey(self._instructions))
        for index, choice in enumerate(self._choices):
            marker = "x" if choice.selected else " "
            click.echo(f"\t[{marker}] {index + 1} - {choice.title}")
        preselected = ",".join(
            str(index + 1) for index, choice in enumerate(self._choices) if choice.value in (default_answer or [])
        )
        while True:
            raw_answer = click.prompt(text="Selection", default=preselected, show_default=bool(preselected))
            selection, invalid_tokens = self.parse_selection(raw_answer)
            if not invalid_tokens:
                return selection
            click.echo(self._color.red(f"Invalid selection: {', '.join(invalid_tokens)}"))

    def _prompt_default(self) -> Optional[Any]:
        return self._default_answer

    def parse_selection(self, raw_answer: str) -> Tuple[List[Any], List[str]]:
        """
        Parses a comma separated list of choice numbers

        Returns
        -------
        Tuple[List[Any], List[str]]
            The selected values in the order of the choices, and the tokens that did not match any choice
        """
        selected_indexes = set()
        invalid_tokens = []
        for token in (raw_answer or "").split(","):
            token = token.strip()
            if not token:
                continue
            index = self._match_token(token)
            if index is None:
                invalid_tokens.append(token)
            else:
                selected_indexes.add(index)
        return [choice.value for index, choice in enumerate(self._choices) if index in selected_indexes], invalid_tokens

    def _match_token(self, token: str) -> Optional[int]:
        if token.isdigit() and 1 <= int(token) <= len(self._choices):
            return int(token) - 1
        return None


class AutocompleteMultiSelect(MultiSelect):
    """
    A searchable multiselect: besides choice numbers, a choice can be selected by its value or by any part of its
    value that matches a single choice.
    """

    kind = PromptKind.autocomplete_multiselect

    def _match_token(self, token: str) -> Optional[int]:
        index = super()._match_token(token)
        if index is not None:
            return index

        values = [str(choice.value).lower() for choice in self._choices]
        search = token.lower()
        if search in values:
            return values.index(search)

        matches = [index for index, value in enumerate(values) if search in value]
        if len(matches) == 1:
            return matches[0]
        return None
