# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import MagicMock

import pytest

from relay_lib.core.config import CFG
from relay_lib.core.error import MalformedInputError, MissingInputError
from relay_lib.core.prompter import Prompter
from relay_lib.properties.app_config import AppConfig
from relay_lib.properties.platform import AppPlatform
from relay_lib.submit.factory import ContextFactory

PROFILES_YAML = """
submit:
  release:
    ios:
      archive_url: https://cdn.acme.com/app.ipa
      asc_app_id: "42"
  beta:
    ios:
      latest: true
"""


def _make_factory(project_dir, profile_name=None, **kwargs) -> ContextFactory:
    return ContextFactory(
        AppConfig("project-1", "acme"),
        project_dir,
        AppPlatform.IOS,
        MagicMock(),
        Prompter(True),
        profile_name,
        **kwargs,
    )


def test_make_context_uses_default_profile(tmp_path):
    (tmp_path / CFG.project_files.profiles).write_text(PROFILES_YAML)

    ctx = _make_factory(tmp_path).makeContext()

    assert ctx.profile_name == CFG.profiles.default_name
    assert ctx.profile.archive_url == "https://cdn.acme.com/app.ipa"
    assert ctx.profile.asc_app_id == "42"
    assert ctx.non_interactive
    assert ctx.project_id == "project-1"
    assert ctx.account == "acme"


def test_make_context_named_profile(tmp_path):
    (tmp_path / CFG.project_files.profiles).write_text(PROFILES_YAML)

    ctx = _make_factory(tmp_path, "beta").makeContext()

    assert ctx.profile.latest is True
    assert ctx.profile.archive_url is None


def test_command_line_archive_replaces_profile_archive(tmp_path):
    (tmp_path / CFG.project_files.profiles).write_text(PROFILES_YAML)

    ctx = _make_factory(tmp_path, id="build-9", latest=False).makeContext()

    assert ctx.profile.build_id == "build-9"
    assert ctx.profile.archive_url is None
    # unrelated settings are kept
    assert ctx.profile.asc_app_id == "42"


def test_no_command_line_archive_keeps_profile(tmp_path):
    (tmp_path / CFG.project_files.profiles).write_text(PROFILES_YAML)

    ctx = _make_factory(
        tmp_path, path=None, url=None, id=None, latest=False
    ).makeContext()

    assert ctx.profile.archive_url == "https://cdn.acme.com/app.ipa"


def test_missing_profiles_file_means_empty_profile(tmp_path):
    ctx = _make_factory(tmp_path, latest=True).makeContext()

    assert ctx.profile.latest is True
    assert ctx.profile.asc_app_id is None


def test_unknown_profile(tmp_path):
    (tmp_path / CFG.project_files.profiles).write_text(PROFILES_YAML)

    with pytest.raises(MissingInputError, match="nightly"):
        _make_factory(tmp_path, "nightly").makeContext()


def test_invalid_profiles_file(tmp_path):
    (tmp_path / CFG.project_files.profiles).write_text("submit: [1, 2")

    with pytest.raises(MalformedInputError):
        _make_factory(tmp_path).makeContext()
