# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import patch

import pytest

from relay_lib.core.config import CFG
from relay_lib.core.error import RelayError
from relay_lib.remote import RemoteInterface, RemoteMeta, VirtualRemote, remote_service


def test_virtual_remote_is_registered():
    assert RemoteMeta.fromStr("virtual") is VirtualRemote


def test_from_str_unknown():
    with pytest.raises(RelayError, match="No remote service registered as 'cloud'"):
        RemoteMeta.fromStr("cloud")


def test_obtain_by_name():
    assert RemoteMeta.obtain("virtual") is VirtualRemote


def test_obtain_from_env_var(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.service, "virtual")

    assert RemoteMeta.obtain(None) is VirtualRemote


def test_obtain_unknown_env_var(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.service, "cloud")

    with pytest.raises(RelayError):
        RemoteMeta.obtain(None)


def test_obtain_default(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.service, raising=False)

    assert RemoteMeta.obtain(None) is VirtualRemote


def test_remote_service_decorator_registers_class():
    with patch.dict(RemoteMeta._registry, clear=False):

        @remote_service
        class FakeRemote(RemoteInterface, metaclass=RemoteMeta):
            @staticmethod
            def envName() -> str:
                return "fake"

        assert RemoteMeta.fromStr("fake") is FakeRemote
        assert str(FakeRemote) == "fake"

    with pytest.raises(RelayError):
        RemoteMeta.fromStr("fake")


def test_interface_methods_are_not_implemented():
    with pytest.raises(NotImplementedError):
        RemoteInterface.getCurrentActor()
