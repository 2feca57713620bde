# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Sources of authentication material used for App Store submissions.

Exactly one of the variants below is selected for every submission:

- `UserDefinedSecret`: an app-specific password supplied by the user.
- `StructuredKey`: an App Store Connect API key described by a key file,
  an issuer identifier and a key identifier.
- `DeferredPrompt`: the user will be asked for the API key later
  during the submission.
- `DeferredService`: credentials stored on the remote service will be used
  later during the submission.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class UserDefinedSecret:
    """App-specific password provided directly by the user."""

    value: str = field(repr=False)

    def __str__(self) -> str:
        return "app-specific password (user defined)"


@dataclass(frozen=True)
class StructuredKey:
    """App Store Connect API key loaded from a key file."""

    # Path to the .p8 key file.
    path: Path

    # Identifier of the key issuer.
    issuer_id: str

    # Identifier of the key.
    key_id: str

    def __str__(self) -> str:
        return f"API key '{self.key_id}' ({self.path})"


@dataclass(frozen=True)
class DeferredPrompt:
    """API key to be requested from the user during the submission."""

    def __str__(self) -> str:
        return "API key (prompt)"


@dataclass(frozen=True)
class DeferredService:
    """Credentials to be provided by the remote service during the submission."""

    def __str__(self) -> str:
        return "credentials service"


# Any of the credential source variants.
CredentialSource = UserDefinedSecret | StructuredKey | DeferredPrompt | DeferredService
