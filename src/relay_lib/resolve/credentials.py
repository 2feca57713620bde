# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Resolution of App Store authentication material.

The sources are tried in this order:

1. An app-specific password from the environment.
2. An App Store Connect API key described in the submit profile.
3. Credentials stored on the remote service, used later during the submission.

Only a missing source hands over to the next one. A partially described
API key is a configuration error: fatal in non-interactive mode, downgraded
to asking the user for the key (with a warning) in interactive mode.
"""

from pathlib import Path

from relay_lib.core.config import CFG
from relay_lib.core.error import (
    InteractionRequiredError,
    MalformedInputError,
    MissingCredentialsError,
)
from relay_lib.core.fallback import FallbackChain
from relay_lib.core.logger import get_logger
from relay_lib.core.result import Result, err, ok
from relay_lib.properties.context import SubmissionContext
from relay_lib.properties.credentials import (
    CredentialSource,
    DeferredPrompt,
    DeferredService,
    StructuredKey,
    UserDefinedSecret,
)

logger = get_logger(__name__)


def resolve_app_specific_password(ctx: SubmissionContext) -> Result[CredentialSource]:
    """
    Read an app-specific password from the environment.

    Returns:
        Result[CredentialSource]: A UserDefinedSecret or a MissingCredentialsError.
    """
    if password := ctx.env.get(CFG.env_vars.app_specific_password, ""):
        return ok(UserDefinedSecret(password))

    return err(
        MissingCredentialsError(
            f"The {CFG.env_vars.app_specific_password} environment variable must be set."
        )
    )


def resolve_structured_key(ctx: SubmissionContext) -> Result[CredentialSource]:
    """
    Read an App Store Connect API key from the submit profile.

    Returns:
        Result[CredentialSource]: A StructuredKey if the key is fully described,
        a DeferredPrompt if it is described partially in interactive mode,
        a MalformedInputError if it is described partially in non-interactive mode,
        or a MissingCredentialsError if it is not described at all.
    """
    profile = ctx.profile
    values = (
        profile.asc_api_key_path,
        profile.asc_api_key_issuer_id,
        profile.asc_api_key_id,
    )

    if all(values):
        return ok(
            StructuredKey(
                path=Path(str(profile.asc_api_key_path)).expanduser(),
                issuer_id=str(profile.asc_api_key_issuer_id),
                key_id=str(profile.asc_api_key_id),
            )
        )

    # some fields are set, so the user meant to use an API key
    if any(values):
        message = f"asc_api_key_path, asc_api_key_issuer_id and asc_api_key_id must all be defined in {CFG.project_files.profiles}."
        if ctx.non_interactive:
            return err(MalformedInputError(message))

        logger.warning(message)
        return ok(DeferredPrompt())

    return err(
        MissingCredentialsError(
            f"No App Store Connect API key is defined in {CFG.project_files.profiles}."
        )
    )


def resolve_deferred_service(ctx: SubmissionContext) -> Result[CredentialSource]:
    """
    Leave the credentials to the remote service.

    Returns:
        Result[CredentialSource]: A DeferredService or an InteractionRequiredError
        in non-interactive mode.
    """
    if ctx.non_interactive:
        return err(
            InteractionRequiredError(
                f"Set {CFG.env_vars.app_specific_password} or define an App Store Connect API key in {CFG.project_files.profiles} to submit in non-interactive mode."
            )
        )

    return ok(DeferredService())


def is_missing_credentials(error: BaseException) -> bool:
    """Return True if the error only signals that no credentials were found."""
    return isinstance(error, MissingCredentialsError)


class CredentialSourceChain:
    """
    Selects exactly one source of App Store authentication material.
    """

    def __init__(self, ctx: SubmissionContext):
        self._chain = FallbackChain[CredentialSource](
            lambda: resolve_app_specific_password(ctx),
            lambda: resolve_structured_key(ctx),
            lambda: resolve_deferred_service(ctx),
            is_recoverable=is_missing_credentials,
        )

    def resolve(self) -> Result[CredentialSource]:
        """
        Run the sources in order and return the first usable one.

        Returns:
            Result[CredentialSource]: The selected source or the error that stopped the chain.
        """
        result = self._chain.resolve()
        if result.ok:
            logger.debug(f"Using credentials: {result.enforceValue()}.")
        return result
