# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Read-only descriptions of jobs tracked by the remote service.

`JobSummary` is fetched from the remote service, shown to the user
and discarded; relay never caches or modifies it.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Self

from relay_lib.core.config import CFG

from .platform import AppPlatform


class JobStatus(Enum):
    """
    State of a job according to the remote service.
    """

    NEW = 1
    IN_QUEUE = 2
    IN_PROGRESS = 3
    FINISHED = 4
    ERRORED = 5
    CANCELED = 6
    UNKNOWN = 7

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding JobStatus enum variant.

        Returns:
            JobStatus: Corresponding enum variant. Returns UNKNOWN if no match is found.
        """
        try:
            return cls[s.upper().replace(" ", "_")]
        except KeyError:
            return cls.UNKNOWN

    @property
    def isPending(self) -> bool:
        """True if the job has not completed yet."""
        return self in {JobStatus.NEW, JobStatus.IN_QUEUE, JobStatus.IN_PROGRESS}

    @property
    def color(self) -> str:
        """Style used to display the status."""
        return getattr(CFG.status_colors, self.name.lower())


class JobKind(Enum):
    """
    Kind of work a job performs.
    """

    BUILD = 1
    SUBMISSION = 2

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def fromStr(cls, s: str) -> Self:
        return cls[s.upper()]


@dataclass(frozen=True)
class JobSummary:
    """
    Summary of a job tracked by the remote service.
    """

    # Identifier of the job.
    id: str

    # Platform the job is performed for.
    platform: AppPlatform

    # Current state of the job.
    status: JobStatus

    # Build or submission.
    kind: JobKind = JobKind.BUILD

    # Identifier of the project the job belongs to.
    project_id: str | None = None

    # Account owning the project.
    account: str | None = None

    # Name of the profile used for the job.
    profile: str | None = None

    # Name of the user who started the job.
    initiator: str | None = None

    # Time the job was created.
    created_at: datetime | None = None

    def toDict(self) -> dict[str, object]:
        """
        Convert the summary into a dictionary of plain values.
        Fields that are None are ignored.
        """
        result: dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue

            if isinstance(value, Enum):
                result[f.name] = str(value)
            elif isinstance(value, datetime):
                result[f.name] = value.strftime(CFG.date_formats.standard)
            else:
                result[f.name] = value

        return result

    @classmethod
    def fromDict(cls, data: dict[str, object]) -> Self:
        """
        Construct a summary from a dictionary created by `toDict`.

        Raises:
            TypeError: If required fields are missing.
        """
        init_kwargs: dict[str, object] = {}
        for name, value in data.items():
            match name:
                case "platform":
                    init_kwargs[name] = AppPlatform.fromStr(str(value))
                case "status":
                    init_kwargs[name] = JobStatus.fromStr(str(value))
                case "kind":
                    init_kwargs[name] = JobKind.fromStr(str(value))
                case "created_at" if isinstance(value, str):
                    init_kwargs[name] = datetime.strptime(
                        value, CFG.date_formats.standard
                    )
                case _:
                    init_kwargs[name] = value

        return cls(**init_kwargs)  # ty: ignore[invalid-argument-type]
