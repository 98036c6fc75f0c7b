"""Interactive prompting used by the setup flow."""

from typing import Protocol


class Prompter(Protocol):
    """Asks the operator for input during ``CredentialStore.setup()``."""

    def prompt(self, text: str, hide_input: bool = False) -> str:
        """Ask for a value."""

    def confirm(self, text: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
