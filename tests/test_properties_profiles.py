# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from relay_lib.core.config import CFG
from relay_lib.core.error import MalformedInputError, MissingInputError
from relay_lib.properties.platform import AppPlatform
from relay_lib.properties.profiles import BuildProfile, Profiles, SubmitProfile

PROFILES_YAML = """
build:
  release:
    ios:
      distribution: store
      image: macos-latest
    android:
      distribution: store
      env:
        FLAVOR: prod
  preview:
    android:
      distribution: internal
submit:
  release:
    ios:
      asc_app_id: "1234567890"
      apple_id: dev@acme.com
    android:
      track: internal
"""


@pytest.fixture
def profiles_file(tmp_path):
    file = tmp_path / "relay.yaml"
    file.write_text(PROFILES_YAML)
    return file


def test_from_file(profiles_file):
    profiles = Profiles.fromFile(profiles_file)

    assert profiles.getBuildProfile("release", AppPlatform.IOS) == BuildProfile(
        distribution="store", image="macos-latest"
    )
    assert profiles.getBuildProfile("release", AppPlatform.ANDROID).env == {
        "FLAVOR": "prod"
    }
    assert profiles.getSubmitProfile("release", AppPlatform.IOS).asc_app_id == "1234567890"
    assert profiles.getSubmitProfile("release", AppPlatform.ANDROID).track == "internal"


def test_get_build_profile_missing_platform(profiles_file):
    profiles = Profiles.fromFile(profiles_file)

    with pytest.raises(MissingInputError, match="preview"):
        profiles.getBuildProfile("preview", AppPlatform.IOS)


def test_get_submit_profile_default_may_be_absent():
    profile = Profiles().getSubmitProfile(CFG.profiles.default_name, AppPlatform.IOS)

    assert profile == SubmitProfile()


def test_get_submit_profile_other_must_exist():
    with pytest.raises(MissingInputError):
        Profiles().getSubmitProfile("nightly", AppPlatform.IOS)


def test_from_file_missing(tmp_path):
    with pytest.raises(MissingInputError):
        Profiles.fromFile(tmp_path / "relay.yaml")


def test_from_file_or_empty_missing(tmp_path):
    assert Profiles.fromFileOrEmpty(tmp_path / "relay.yaml") == Profiles()


def test_from_file_unknown_setting(tmp_path):
    file = tmp_path / "relay.yaml"
    file.write_text("submit:\n  release:\n    ios:\n      asc_app_idd: '1'\n")

    with pytest.raises(MalformedInputError, match="asc_app_idd"):
        Profiles.fromFile(file)


def test_from_file_unknown_platform(tmp_path):
    file = tmp_path / "relay.yaml"
    file.write_text("build:\n  release:\n    web:\n      distribution: store\n")

    with pytest.raises(MalformedInputError, match="web"):
        Profiles.fromFile(file)


def test_default_profiles_written_and_read_back(tmp_path):
    file = tmp_path / "relay.yaml"
    Profiles.default().toFile(file)

    loaded = Profiles.fromFile(file)
    name = CFG.profiles.default_name

    assert loaded.getBuildProfile(name, AppPlatform.IOS) == BuildProfile()
    assert loaded.getBuildProfile(name, AppPlatform.ANDROID) == BuildProfile()


def test_with_overrides_ignores_none():
    profile = SubmitProfile(archive_url="https://a/app.ipa", asc_app_id="1")

    updated = profile.withOverrides(archive_url=None, build_id="b-1")

    assert updated.archive_url == "https://a/app.ipa"
    assert updated.build_id == "b-1"
    assert profile.build_id is None


def test_from_file_numbers_become_text(tmp_path):
    file = tmp_path / "relay.yaml"
    file.write_text(
        "submit:\n  release:\n    ios:\n      asc_app_id: 1234567890\n      archive_path: 123\n"
    )

    profile = Profiles.fromFile(file).getSubmitProfile("release", AppPlatform.IOS)

    assert profile.asc_app_id == "1234567890"
    assert profile.archive_path == "123"


@pytest.mark.parametrize(
    "setting",
    [
        "archive_url: [a, b]",
        "latest: 'yes please'",
        "apple_id: true",
        "asc_app_id: {id: 1}",
    ],
)
def test_from_file_invalid_setting_type(tmp_path, setting):
    file = tmp_path / "relay.yaml"
    file.write_text(f"submit:\n  release:\n    ios:\n      {setting}\n")

    with pytest.raises(MalformedInputError, match="in profile 'release'"):
        Profiles.fromFile(file)


def test_from_file_env_must_be_mapping(tmp_path):
    file = tmp_path / "relay.yaml"
    file.write_text("build:\n  release:\n    android:\n      env: FLAVOR\n")

    with pytest.raises(MalformedInputError, match="must be a mapping"):
        Profiles.fromFile(file)
