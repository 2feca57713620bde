# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Enumerations of the platforms relay builds and submits for.

`RequestedPlatform` is what the user asks for on the command line and may
select every platform at once. `AppPlatform` is a single concrete platform
used wherever platform-specific work is performed.
"""

from enum import Enum
from typing import Self

from relay_lib.core.error import MalformedInputError


class AppPlatform(Enum):
    """
    A concrete platform of an application.
    """

    ANDROID = 1
    IOS = 2

    def __str__(self):
        return self.name.lower()

    @property
    def displayName(self) -> str:
        """Human-readable name of the platform."""
        return "Android" if self == AppPlatform.ANDROID else "iOS"

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding AppPlatform enum variant.

        Args:
            s (str): String representation of the platform (case-insensitive).

        Returns:
            AppPlatform variant.

        Raises:
            MalformedInputError if the string corresponds to no AppPlatform.
        """
        try:
            return cls[s.upper()]
        except KeyError:
            raise MalformedInputError(f"Could not recognize a platform '{s}'.")


class RequestedPlatform(Enum):
    """
    Platform selection requested by the user.
    """

    ANDROID = 1
    IOS = 2
    ALL = 3

    def __str__(self):
        return self.name.lower()

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding RequestedPlatform enum variant.

        Args:
            s (str): String representation of the platform (case-insensitive).

        Returns:
            RequestedPlatform variant.

        Raises:
            MalformedInputError if the string corresponds to no RequestedPlatform.
        """
        try:
            return cls[s.upper()]
        except KeyError:
            raise MalformedInputError(f"Could not recognize a platform '{s}'.")

    def toAppPlatforms(self) -> list[AppPlatform]:
        """
        Expand the selection into the concrete platforms it covers.

        Returns:
            list[AppPlatform]: `[ANDROID, IOS]` for ALL, otherwise a single platform.
        """
        match self:
            case RequestedPlatform.ALL:
                return [AppPlatform.ANDROID, AppPlatform.IOS]
            case RequestedPlatform.ANDROID:
                return [AppPlatform.ANDROID]
            case RequestedPlatform.IOS:
                return [AppPlatform.IOS]
