# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from relay_lib.core.config import CFG
from relay_lib.core.error import MissingInputError
from relay_lib.core.logger import get_logger
from relay_lib.core.result import Result, err, ok
from relay_lib.properties.context import SubmissionContext

logger = get_logger(__name__)


def resolve_asc_app_identifier(ctx: SubmissionContext) -> Result[str]:
    """
    Determine the identifier of the application on App Store Connect.

    Priority:
        1. `asc_app_id` from the submit profile
        2. Lookup (or registration) on the remote service, interactive mode only

    Returns:
        Result[str]: The identifier, a MissingInputError in non-interactive mode
        without `asc_app_id`, or the error reported by the remote service.
    """
    if ctx.profile.asc_app_id:
        return ok(str(ctx.profile.asc_app_id))

    if ctx.non_interactive:
        return err(
            MissingInputError(
                f"Set asc_app_id in the submit profile ({CFG.project_files.profiles}) or re-run this command in interactive mode."
            )
        )

    logger.info(
        "Ensuring your app exists on App Store Connect. "
        "This step can be skipped by providing asc_app_id in the submit profile."
    )
    return Result.fromCall(
        ctx.remote.ensureAppRecordExists, ctx.app_config, ctx.profile.apple_id
    )


def resolve_android_application_id(ctx: SubmissionContext) -> Result[str]:
    """
    Determine the package name of the Android application.

    Priority:
        1. `application_id` from the submit profile
        2. `android.package` from the app config

    Returns:
        Result[str]: The package name or a MissingInputError.
    """
    if application_id := ctx.profile.application_id or ctx.app_config.android_package:
        return ok(str(application_id))

    return err(
        MissingInputError(
            f"Set application_id in the submit profile ({CFG.project_files.profiles}) or android.package in {CFG.project_files.app_config}."
        )
    )
