# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """
    User on whose behalf relay talks to the remote service.
    """

    # Name of the user.
    username: str

    # Privileged users are not limited by pending jobs.
    is_admin: bool = False
