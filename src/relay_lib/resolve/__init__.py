# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Resolvers of the configuration needed to start builds and submissions.

Every resolver reads exactly one source (command-line value, environment
variable, profile, user prompt, or remote lookup) and returns a `Result`
instead of raising, so that callers can combine resolvers into fallback
chains and report all configuration problems at once.

- `platform`: the requested platform selection.
- `archive`: location of the archive to submit.
- `credentials`: sources of App Store authentication material and
  `CredentialSourceChain`, which picks exactly one of them.
- `app_identifier`: identifier of the application in the store.
- `build_profile`: build profiles of the requested platforms.
"""
