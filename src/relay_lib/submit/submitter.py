# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from relay_lib.core.logger import get_logger
from relay_lib.properties.context import SubmissionContext
from relay_lib.properties.job import JobSummary
from relay_lib.properties.options import SubmissionOptions

logger = get_logger(__name__)


class Submitter:
    """
    Class to hand resolved submissions over to the remote service.

    Submitter does not resolve anything itself. To obtain the options,
    use the OptionsBuilder.
    """

    def __init__(self, ctx: SubmissionContext, options: SubmissionOptions):
        """
        Initialize a Submitter instance.

        Args:
            ctx (SubmissionContext): Context of the submission.
            options (SubmissionOptions): Resolved inputs of the submission.
        """
        self._ctx = ctx
        self._options = options

    def submit(self) -> JobSummary:
        """
        Start the submission on the remote service.

        Returns:
            JobSummary: Summary of the created submission job.

        Raises:
            RemoteQueryError: If the submission cannot be created.
        """
        options = self._options
        logger.info(
            f"Submitting {options.platform.displayName} app '{options.app_identifier}' "
            f"from {options.archive_source} using profile '{self._ctx.profile_name}'."
        )
        if options.credential_source is not None:
            logger.info(f"Authenticating with {options.credential_source}.")

        return self._ctx.remote.createSubmission(options)
