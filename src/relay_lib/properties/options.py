# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass

from .archive import ArchiveSource
from .credentials import CredentialSource
from .platform import AppPlatform


@dataclass(frozen=True)
class SubmissionOptions:
    """
    Fully resolved inputs of a single submission.

    Built only once every resolver succeeded and never modified afterwards.
    `credential_source` is None for platforms that carry no client-side credentials.
    """

    # Identifier of the project on the remote service.
    project_id: str

    # Account owning the project.
    account: str

    # Platform of the submitted archive.
    platform: AppPlatform

    # Location of the archive to submit.
    archive_source: ArchiveSource

    # Identifier of the application in the store.
    app_identifier: str

    # Source of authentication material.
    credential_source: CredentialSource | None = None
