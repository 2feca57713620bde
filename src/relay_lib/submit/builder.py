# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Callable

from relay_lib.core.error import ResolutionError
from relay_lib.core.gatherer import Gatherer
from relay_lib.core.logger import get_logger
from relay_lib.core.result import Result
from relay_lib.properties.context import SubmissionContext
from relay_lib.properties.options import SubmissionOptions
from relay_lib.properties.platform import AppPlatform
from relay_lib.resolve.app_identifier import (
    resolve_android_application_id,
    resolve_asc_app_identifier,
)
from relay_lib.resolve.archive import resolve_archive_source
from relay_lib.resolve.credentials import CredentialSourceChain

logger = get_logger(__name__)


class OptionsBuilder:
    """
    Builds the SubmissionOptions of a submission from its context.

    All resolvers of the platform are run, even if some of them fail, so that
    the user learns about every configuration problem at once. Options are only
    created if every resolver succeeded.
    """

    def __init__(self, ctx: SubmissionContext, gatherer: Gatherer | None = None):
        """
        Initialize the builder.

        Args:
            ctx (SubmissionContext): Context of the submission.
            gatherer (Gatherer | None): Gatherer used to run the resolvers concurrently.
                If not provided, a new Gatherer is created.
        """
        self._ctx = ctx
        self._gatherer = gatherer or Gatherer()

    def build(self) -> SubmissionOptions:
        """
        Resolve all inputs of the submission.

        Returns:
            SubmissionOptions: The finished options.

        Raises:
            ResolutionError: If any resolver failed. The error lists
                the messages of all failed resolvers, one per line.
        """
        results = self._gatherer.gather(self._getResolvers())

        if errors := [r.enforceError() for r in results.values() if not r.ok]:
            logger.debug(f"{len(errors)} resolver(s) failed.")
            raise ResolutionError(errors)

        optional = {}
        if "credential_source" in results:
            optional["credential_source"] = results["credential_source"].enforceValue()

        return SubmissionOptions(
            project_id=self._ctx.project_id,
            account=self._ctx.account,
            platform=self._ctx.platform,
            archive_source=results["archive_source"].enforceValue(),
            app_identifier=results["app_identifier"].enforceValue(),
            **optional,
        )

    def _getResolvers(self) -> dict[str, Callable[[], Result]]:
        """
        Collect the resolvers applicable to the platform of the submission.

        Returns:
            dict[str, Callable[[], Result]]: Resolvers keyed by the option they produce.
        """
        ctx = self._ctx
        match ctx.platform:
            case AppPlatform.IOS:
                return {
                    "archive_source": lambda: resolve_archive_source(ctx),
                    "credential_source": CredentialSourceChain(ctx).resolve,
                    "app_identifier": lambda: resolve_asc_app_identifier(ctx),
                }
            case AppPlatform.ANDROID:
                return {
                    "archive_source": lambda: resolve_archive_source(ctx),
                    "app_identifier": lambda: resolve_android_application_id(ctx),
                }
