# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import FrozenInstanceError
from unittest.mock import MagicMock, patch

import pytest

from relay_lib.core.config import CFG
from relay_lib.core.error import (
    MalformedInputError,
    MissingInputError,
    RemoteQueryError,
    ResolutionError,
)
from relay_lib.core.prompter import Prompter
from relay_lib.core.result import err, ok
from relay_lib.properties.app_config import AppConfig
from relay_lib.properties.archive import ArchiveSource, ArchiveSourceType
from relay_lib.properties.context import SubmissionContext
from relay_lib.properties.credentials import DeferredService, UserDefinedSecret
from relay_lib.properties.options import SubmissionOptions
from relay_lib.properties.platform import AppPlatform
from relay_lib.properties.profiles import SubmitProfile
from relay_lib.submit.builder import OptionsBuilder


def _make_ctx(
    platform: AppPlatform = AppPlatform.IOS,
    non_interactive: bool = False,
    env: dict | None = None,
    remote: MagicMock | None = None,
    **profile,
) -> SubmissionContext:
    return SubmissionContext(
        app_config=AppConfig(
            "project-1",
            "acme",
            bundle_identifier="com.acme.app",
            android_package="com.acme.android",
        ),
        platform=platform,
        profile_name="release",
        profile=SubmitProfile(**profile),
        remote=remote or MagicMock(),
        prompter=Prompter(non_interactive),
        env=env or {},
    )


def test_build_ios_options():
    ctx = _make_ctx(
        env={CFG.env_vars.app_specific_password: "secret"},
        build_id="build-3",
        asc_app_id="123",
    )

    options = OptionsBuilder(ctx).build()

    assert options == SubmissionOptions(
        project_id="project-1",
        account="acme",
        platform=AppPlatform.IOS,
        archive_source=ArchiveSource(ArchiveSourceType.BUILD_ID, "build-3"),
        app_identifier="123",
        credential_source=UserDefinedSecret("secret"),
    )


def test_build_android_options_have_no_credentials():
    ctx = _make_ctx(platform=AppPlatform.ANDROID, latest=True)

    with patch("relay_lib.submit.builder.CredentialSourceChain") as mock_chain:
        options = OptionsBuilder(ctx).build()

    mock_chain.assert_not_called()
    assert options.credential_source is None
    assert options.app_identifier == "com.acme.android"
    assert options.archive_source == ArchiveSource(ArchiveSourceType.LATEST)


def test_build_interactive_defers_archive_and_credentials():
    remote = MagicMock()
    remote.ensureAppRecordExists.return_value = "555"

    options = OptionsBuilder(_make_ctx(remote=remote)).build()

    assert options.archive_source == ArchiveSource(ArchiveSourceType.PROMPT)
    assert options.credential_source == DeferredService()
    assert options.app_identifier == "555"


def test_build_options_are_immutable():
    ctx = _make_ctx(platform=AppPlatform.ANDROID, latest=True)
    options = OptionsBuilder(ctx).build()

    with pytest.raises(FrozenInstanceError):
        options.app_identifier = "other"  # ty: ignore[invalid-assignment]


def test_build_aggregates_every_failure():
    ctx = _make_ctx(
        non_interactive=True,
        asc_api_key_id="KEY",
    )

    with pytest.raises(ResolutionError) as exc_info:
        OptionsBuilder(ctx).build()

    errors = exc_info.value.errors
    # archive missing, partial API key, asc_app_id missing
    assert len(errors) == 3
    assert any(isinstance(e, MalformedInputError) for e in errors)
    assert sum(isinstance(e, MissingInputError) for e in errors) == 2

    message = str(exc_info.value)
    assert "must all be defined" in message
    assert "Set asc_app_id in the submit profile" in message
    assert len(message.splitlines()) == 3


def test_build_single_failure_is_reported_alone():
    ctx = _make_ctx(
        env={CFG.env_vars.app_specific_password: "secret"},
        latest=True,
        archive_url="https://a/app.ipa",
        asc_app_id="1",
    )

    with pytest.raises(ResolutionError) as exc_info:
        OptionsBuilder(ctx).build()

    assert len(exc_info.value.errors) == 1
    assert isinstance(exc_info.value.errors[0], MalformedInputError)


def test_build_remote_failure_is_aggregated():
    remote = MagicMock()
    remote.ensureAppRecordExists.side_effect = RemoteQueryError("store unreachable")

    with pytest.raises(ResolutionError, match="store unreachable"):
        OptionsBuilder(_make_ctx(remote=remote, latest=True)).build()


def test_build_runs_all_resolvers_through_gatherer():
    gatherer = MagicMock()
    gatherer.gather.return_value = {
        "archive_source": ok(ArchiveSource(ArchiveSourceType.LATEST)),
        "credential_source": err(MissingInputError("no credentials")),
        "app_identifier": err(MissingInputError("no app id")),
    }

    with pytest.raises(ResolutionError) as exc_info:
        OptionsBuilder(_make_ctx(), gatherer).build()

    (tasks,) = gatherer.gather.call_args.args
    assert list(tasks) == ["archive_source", "credential_source", "app_identifier"]
    assert str(exc_info.value) == "no credentials\nno app id"


def test_android_resolvers():
    gatherer = MagicMock()
    gatherer.gather.return_value = {
        "archive_source": ok(ArchiveSource(ArchiveSourceType.LATEST)),
        "app_identifier": ok("com.acme"),
    }

    options = OptionsBuilder(_make_ctx(platform=AppPlatform.ANDROID), gatherer).build()

    (tasks,) = gatherer.gather.call_args.args
    assert list(tasks) == ["archive_source", "app_identifier"]
    assert options.app_identifier == "com.acme"
