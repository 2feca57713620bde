# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from relay_lib.core.error import MissingInputError, PolicyViolationError
from relay_lib.core.prompter import Prompter
from relay_lib.core.result import Result, err, ok
from relay_lib.properties.platform import RequestedPlatform


def resolve_platform(
    requested: str | None, prompter: Prompter, allow_all: bool = True
) -> Result[RequestedPlatform]:
    """
    Determine the platform selection of the command.

    Priority:
        1. Command-line option
        2. Interactive prompt

    Args:
        requested (str | None): Value of the `--platform` option.
        prompter (Prompter): Gateway for questions asked to the user.
        allow_all (bool): Whether the command supports all platforms at once.

    Returns:
        Result[RequestedPlatform]: The selection or a MissingInputError
        if no platform was given in non-interactive mode.
    """
    if requested:
        result = Result.fromCall(RequestedPlatform.fromStr, requested)
        if result.ok and not allow_all and result.value == RequestedPlatform.ALL:
            return err(
                PolicyViolationError(
                    "This command supports only one platform at a time. Use --platform android or --platform ios."
                )
            )
        return result

    if prompter.non_interactive:
        return err(
            MissingInputError(
                "--platform is required when running in non-interactive mode."
            )
        )

    choices = [
        ("iOS", RequestedPlatform.IOS),
        ("Android", RequestedPlatform.ANDROID),
    ]
    if allow_all:
        choices.insert(0, ("All", RequestedPlatform.ALL))

    return ok(prompter.select("Select the platform:", choices))
