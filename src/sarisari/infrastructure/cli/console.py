"""Console adapter backed by click."""

from __future__ import annotations

import click

from sarisari.application.console import Console


class ClickConsole(Console):

    def ask(self, prompt: str) -> str:
        # An empty default makes click return "" for a blank line instead of
        # re-asking; blank input is rejected by the caller's parser.
        return click.prompt(prompt, default="", show_default=False, prompt_suffix="")

    def say(self, message: str = "") -> None:
        click.echo(message)
