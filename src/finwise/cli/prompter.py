"""click-backed prompter for the interactive setup flow."""

import click


class ClickPrompter:
    def prompt(self, text: str, hide_input: bool = False) -> str:
        return click.prompt(text, hide_input=hide_input, type=str)

    def confirm(self, text: str, default: bool = False) -> bool:
        return click.confirm(text, default=default)
