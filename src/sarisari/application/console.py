"""Console port and the retry driver built on top of it.

Handlers talk to the user only through ``Console`` so they can be driven
by a scripted fake in tests and by click in the real program.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Console(ABC):

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Show *prompt* and return one raw line of input (without newline)."""

    @abstractmethod
    def say(self, message: str = "") -> None:
        """Print one line of output."""


def prompt_until(
    console: Console,
    prompt: str,
    parse: Callable[[str], T | None],
    error_message: str,
) -> T:
    """Ask until *parse* accepts the answer.

    There is no retry limit: the session blocks on the prompt until it
    gets a usable answer.
    """
    while True:
        raw = console.ask(prompt)
        value = parse(raw)
        if value is not None:
            return value
        logger.debug("Rejected input %r for prompt %r", raw, prompt)
        console.say(error_message)
