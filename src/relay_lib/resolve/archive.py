# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from pathlib import Path
from urllib.parse import urlparse

from relay_lib.core.error import MalformedInputError, MissingInputError
from relay_lib.core.logger import get_logger
from relay_lib.core.result import Result, err, ok
from relay_lib.properties.archive import ArchiveSource, ArchiveSourceType
from relay_lib.properties.context import SubmissionContext

logger = get_logger(__name__)


def resolve_archive_source(ctx: SubmissionContext) -> Result[ArchiveSource]:
    """
    Determine the archive to submit.

    At most one of `archive_path`, `archive_url`, `build_id` and `latest`
    may be set in the submit profile (after applying command-line overrides).
    If none is set, the archive is selected later by the user; this is
    not possible in non-interactive mode.

    Returns:
        Result[ArchiveSource]: The archive source, a MalformedInputError if the
        profile is inconsistent, or a MissingInputError if no archive is specified
        in non-interactive mode.
    """
    profile = ctx.profile
    specified = {
        "archive_path": profile.archive_path,
        "archive_url": profile.archive_url,
        "build_id": profile.build_id,
        "latest": profile.latest or None,
    }
    specified = {k: v for k, v in specified.items() if v is not None}

    if len(specified) > 1:
        return err(
            MalformedInputError(
                f"Only one archive source may be specified, got: {', '.join(specified)}."
            )
        )

    if profile.archive_path:
        path = Path(profile.archive_path).expanduser()
        if not path.is_file():
            return err(
                MalformedInputError(
                    f"Archive '{profile.archive_path}' does not exist or is not a file."
                )
            )
        return ok(ArchiveSource(ArchiveSourceType.PATH, str(path.resolve())))

    if profile.archive_url:
        if urlparse(profile.archive_url).scheme not in ("http", "https"):
            return err(
                MalformedInputError(
                    f"Archive URL '{profile.archive_url}' must use http or https."
                )
            )
        return ok(ArchiveSource(ArchiveSourceType.URL, profile.archive_url))

    if profile.build_id:
        return ok(ArchiveSource(ArchiveSourceType.BUILD_ID, profile.build_id))

    if profile.latest:
        return ok(ArchiveSource(ArchiveSourceType.LATEST))

    if ctx.non_interactive:
        return err(
            MissingInputError(
                "You need to specify the archive to submit (--path, --url, --id or --latest) when running in non-interactive mode."
            )
        )

    logger.debug("No archive specified, the user will be asked during the submission.")
    return ok(ArchiveSource(ArchiveSourceType.PROMPT))
