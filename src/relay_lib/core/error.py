# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout relay.

`RelayError` is the common base of every recoverable failure a command can
report to the user. Its subclasses classify the failure so that resolvers
and fallback chains can tell a missing input (which may trigger a fallback)
from a malformed one (which never does). Each exception carries an associated
exit code used by relay commands to report failures consistently.
"""

from collections.abc import Sequence

from .config import CFG


class RelayError(Exception):
    """Common exception type for all recoverable relay errors."""

    exit_code = CFG.exit_codes.default


class MissingInputError(RelayError):
    """Raised when a required source of configuration is entirely absent."""

    pass


class MissingCredentialsError(MissingInputError):
    """Raised when no authentication material is available from a source."""

    pass


class MalformedInputError(RelayError):
    """Raised when a source is specified only partially or incorrectly."""

    pass


class RemoteQueryError(RelayError):
    """Raised when the remote service cannot be queried or rejects a request."""

    pass


class PolicyViolationError(RelayError):
    """Raised when the requested operation is not allowed in the current setting."""

    pass


class InteractionRequiredError(RelayError):
    """Raised when a value can only be obtained by asking the user, but prompts are disabled."""

    pass


class ResolutionError(RelayError):
    """
    Raised when one or more resolvers failed.

    The message contains the messages of all underlying errors, one per line.
    """

    def __init__(self, errors: Sequence[BaseException]):
        self.errors = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))


class ResultAccessError(Exception):
    """
    Raised when the wrong arm of a Result is accessed.

    This signals a bug in relay, not a problem with the user's configuration.
    """

    exit_code = CFG.exit_codes.unexpected_error
