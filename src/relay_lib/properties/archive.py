# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass
from enum import Enum


class ArchiveSourceType(Enum):
    """
    Kind of location an archive is taken from.
    """

    PATH = 1
    URL = 2
    BUILD_ID = 3
    LATEST = 4
    PROMPT = 5

    def __str__(self):
        return self.name.lower()


@dataclass(frozen=True)
class ArchiveSource:
    """
    Location of the archive to submit.

    `location` is a local path, a URL or a build identifier depending on `type`.
    It is None for the LATEST and PROMPT sources.
    """

    type: ArchiveSourceType
    location: str | None = None

    def __str__(self) -> str:
        if self.location is None:
            return str(self.type)
        return f"{self.type} '{self.location}'"
