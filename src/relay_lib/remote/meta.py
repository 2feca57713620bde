# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import os
from abc import ABCMeta

from relay_lib.core.config import CFG
from relay_lib.core.error import RelayError
from relay_lib.core.logger import get_logger

from .interface import RemoteInterface

logger = get_logger(__name__)


class RemoteMeta(ABCMeta):
    """
    Metaclass for remote service classes.
    """

    # registry of supported remote services
    _registry: dict[str, type[RemoteInterface]] = {}

    def __str__(cls: type[RemoteInterface]):
        """
        Get the string representation of the remote service class.
        """
        return cls.envName()

    @classmethod
    def register(mcs, remote_cls: type[RemoteInterface]):
        """
        Register a remote service class in the metaclass registry.

        Args:
            remote_cls: Subclass of RemoteInterface to register.
        """
        mcs._registry[remote_cls.envName()] = remote_cls

    @classmethod
    def fromStr(mcs, name: str) -> type[RemoteInterface]:
        """
        Return the remote service class registered with the given name.

        Raises:
            RelayError: If no class is registered for the given name.
        """
        try:
            return mcs._registry[name]
        except KeyError as e:
            raise RelayError(f"No remote service registered as '{name}'.") from e

    @classmethod
    def fromEnvVarOrDefault(mcs) -> type[RemoteInterface]:
        """
        Select a remote service based on the environment variable or the configured default.

        Raises:
            RelayError: If the selected name is not registered.
        """
        name = os.environ.get(CFG.env_vars.service)
        if name:
            logger.debug(f"Using remote service name from an environment variable: {name}.")
            return mcs.fromStr(name)

        return mcs.fromStr(CFG.remote.default_service)

    @classmethod
    def obtain(mcs, name: str | None) -> type[RemoteInterface]:
        """
        Obtain a remote service class by name, environment variable, or the default.

        Args:
            name (str | None): Optional name of the remote service to obtain.

        Returns:
            type[RemoteInterface]: The selected remote service class.

        Raises:
            RelayError: If no remote service with the selected name is registered.
        """
        if name:
            return mcs.fromStr(name)

        return mcs.fromEnvVarOrDefault()


def remote_service(cls):
    """
    Class decorator to register a remote service class with the RemoteMeta registry.
    """
    RemoteMeta.register(cls)
    return cls
