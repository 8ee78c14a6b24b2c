"""A flow of questions to be asked to the user in an interactive way."""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import click

from galileocli.lib.prompts.question import Question
from galileocli.lib.utils.colors import Colored

LOG = logging.getLogger(__name__)


class InteractiveFlow:
    """
    This class depends on the click module to prompt the user for answers to the questions of the flow.

    Questions are asked in order. A question whose visibility predicate rejects the answer of the previously asked
    question is skipped and gets no answer.

    Attributes
    ----------
    _questions: List[Question]
        The questions to prompt the user for its answers
    _show_summary: bool
        Whether to print the answers once every question is answered
    """

    def __init__(self, questions: Sequence[Question], show_summary: bool = True):
        self._questions: List[Question] = list(questions)
        self._show_summary = show_summary
        self._color = Colored()

    @property
    def questions(self) -> List[Question]:
        return self._questions

    def run(self, context: Optional[Dict] = None) -> Dict:
        """
        starts the flow, collects user's answers to the questions and return a new copy of the passed context
        with the answers appended to the copy

        Parameters
        ----------
        context: Optional[Dict]
            Answers collected before prompting this flow's questions

        Returns
        -------
        A new copy of the context with user's answers added to the copy such that each answer is
             associated to the key of the corresponding question
        """
        context = dict(context or {})
        answers: List[Tuple[Question, Any]] = []
        previous_answer: Optional[Any] = None

        for question in self._questions:
            if not question.should_ask(previous_answer):
                LOG.debug("Skipping question %s", question.key)
                continue
            answer = question.ask()
            context[question.key] = answer
            answers.append((question, answer))
            previous_answer = answer

        if self._show_summary:
            self._print_summary(answers)

        return context

    def _print_summary(self, answers: List[Tuple[Question, Any]]) -> None:
        click.echo(self._color.bold("SUMMARY"))
        for question, answer in answers:
            if answer is None or answer == "":
                # ignore unanswered questions
                continue
            if isinstance(answer, list):
                answer = ", ".join(map(str, answer))
            click.echo(f"\t{click.unstyle(question.text)}: {self._color.underline(str(answer))}")
