# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import MagicMock

import pytest

from relay_lib.core.error import MalformedInputError, MissingInputError
from relay_lib.core.prompter import Prompter
from relay_lib.properties.app_config import AppConfig
from relay_lib.properties.archive import ArchiveSource, ArchiveSourceType
from relay_lib.properties.context import SubmissionContext
from relay_lib.properties.platform import AppPlatform
from relay_lib.properties.profiles import SubmitProfile
from relay_lib.resolve.archive import resolve_archive_source


def _make_ctx(non_interactive: bool = False, **profile) -> SubmissionContext:
    return SubmissionContext(
        app_config=AppConfig("project", "acme"),
        platform=AppPlatform.IOS,
        profile_name="release",
        profile=SubmitProfile(**profile),
        remote=MagicMock(),
        prompter=Prompter(non_interactive),
        env={},
    )


def test_archive_path(tmp_path):
    archive = tmp_path / "app.ipa"
    archive.write_bytes(b"ipa")

    result = resolve_archive_source(_make_ctx(archive_path=str(archive)))

    assert result.enforceValue() == ArchiveSource(
        ArchiveSourceType.PATH, str(archive.resolve())
    )


def test_archive_path_missing_file(tmp_path):
    result = resolve_archive_source(_make_ctx(archive_path=str(tmp_path / "nope.ipa")))

    assert isinstance(result.enforceError(), MalformedInputError)


def test_archive_path_directory(tmp_path):
    result = resolve_archive_source(_make_ctx(archive_path=str(tmp_path)))

    assert isinstance(result.enforceError(), MalformedInputError)


@pytest.mark.parametrize("url", ["https://cdn.acme.com/app.ipa", "http://host/a.aab"])
def test_archive_url(url):
    result = resolve_archive_source(_make_ctx(archive_url=url))

    assert result.enforceValue() == ArchiveSource(ArchiveSourceType.URL, url)


@pytest.mark.parametrize("url", ["ftp://host/app.ipa", "app.ipa", "file:///app.ipa"])
def test_archive_url_invalid_scheme(url):
    result = resolve_archive_source(_make_ctx(archive_url=url))

    assert isinstance(result.enforceError(), MalformedInputError)


def test_archive_build_id():
    result = resolve_archive_source(_make_ctx(build_id="build-7"))

    assert result.enforceValue() == ArchiveSource(ArchiveSourceType.BUILD_ID, "build-7")


def test_archive_latest():
    result = resolve_archive_source(_make_ctx(latest=True))

    assert result.enforceValue() == ArchiveSource(ArchiveSourceType.LATEST)


def test_archive_latest_false_counts_as_unset():
    result = resolve_archive_source(_make_ctx(latest=False, build_id="b"))

    assert result.enforceValue().type == ArchiveSourceType.BUILD_ID


def test_archive_multiple_sources():
    result = resolve_archive_source(
        _make_ctx(archive_url="https://a/app.ipa", build_id="b", latest=True)
    )

    error = result.enforceError()
    assert isinstance(error, MalformedInputError)
    assert "archive_url" in str(error)
    assert "build_id" in str(error)


def test_archive_unset_non_interactive():
    result = resolve_archive_source(_make_ctx(non_interactive=True))

    assert isinstance(result.enforceError(), MissingInputError)


def test_archive_unset_interactive_is_deferred():
    result = resolve_archive_source(_make_ctx(non_interactive=False))

    assert result.enforceValue() == ArchiveSource(ArchiveSourceType.PROMPT)
