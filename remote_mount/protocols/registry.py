"""
Registry of protocol handlers

Each protocol tag maps to the Unmounted handler type that implements it and to
the fixed list of binaries that handler needs.
"""
from typing import Dict, Optional, Tuple, Type, Union

from remote_mount.core.errors import UnsupportedProtocol
from remote_mount.protocols import sshfs
from remote_mount.protocols.base import Protocol, Unmounted

PROTOCOL_HANDLERS: Dict[Protocol, Type[Unmounted]] = {
    Protocol.SSHFS: sshfs.SshfsUnmounted,
}

PROTOCOL_DEPENDENCIES: Dict[Protocol, Tuple[str, ...]] = {
    Protocol.SSHFS: sshfs.DEPENDENCIES,
}


def _coerce(protocol: Union[Protocol, str]) -> Protocol:
    if isinstance(protocol, Protocol):
        return protocol
    try:
        return Protocol(protocol.lower())
    except ValueError:
        raise UnsupportedProtocol(protocol) from None


def handler_for(protocol: Union[Protocol, str]) -> Type[Unmounted]:
    """Unmounted handler type for a protocol tag or its name"""
    return PROTOCOL_HANDLERS[_coerce(protocol)]


def dependencies_for(protocol: Union[Protocol, str]) -> Tuple[str, ...]:
    return PROTOCOL_DEPENDENCIES[_coerce(protocol)]


def from_env(protocol: Union[Protocol, str], mountpoint: Optional[str] = None) -> Unmounted:
    """
    Build an unmounted handler for a protocol from the environment

    Raises:
        UnsupportedProtocol: If no handler is registered for the protocol
        MissingConfigurationOption: If a required setting is absent
    """
    return handler_for(protocol).from_env(mountpoint)
