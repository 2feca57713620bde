# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from typing import TypeVar

from .common import select_prompt, yes_or_no_prompt
from .error import InteractionRequiredError
from .logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Prompter:
    """
    Gateway for all questions asked to the user.

    In non-interactive mode no prompt is ever displayed: every attempt
    to ask a question raises an InteractionRequiredError instead.
    """

    def __init__(self, non_interactive: bool):
        self.non_interactive = non_interactive

    def confirm(self, message: str) -> bool:
        """
        Ask the user a yes/no question.

        Raises:
            InteractionRequiredError: If running in non-interactive mode.
        """
        self.ensureInteractive(message)
        return yes_or_no_prompt(message)

    def select(self, message: str, choices: list[tuple[str, T]]) -> T:
        """
        Ask the user to pick one of the `choices`.

        Args:
            message (str): The question to display.
            choices (list[tuple[str, T]]): Pairs of displayed labels and returned values.

        Returns:
            T: Value associated with the selected label.

        Raises:
            InteractionRequiredError: If running in non-interactive mode.
        """
        self.ensureInteractive(message)
        index = select_prompt(message, [label for label, _ in choices])
        logger.debug(f"Selected '{choices[index][0]}'.")
        return choices[index][1]

    def ensureInteractive(self, action: str) -> None:
        """
        Raise an error if prompting is not allowed.

        Raises:
            InteractionRequiredError: If running in non-interactive mode.
        """
        if self.non_interactive:
            raise InteractionRequiredError(
                f"Input is required, but relay runs in non-interactive mode ({action.rstrip('?:. ')})."
            )
