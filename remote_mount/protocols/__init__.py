"""Protocol handlers and the registry that selects them"""

from remote_mount.protocols.base import (
    ConnectionParameters,
    Mounted,
    Protocol,
    ProtocolHandler,
    Unmounted,
    mount_scope,
)
from remote_mount.protocols.registry import (
    PROTOCOL_DEPENDENCIES,
    PROTOCOL_HANDLERS,
    dependencies_for,
    from_env,
    handler_for,
)
from remote_mount.protocols.sshfs import SshfsMounted, SshfsUnmounted

__all__ = [
    'ConnectionParameters',
    'Mounted',
    'Protocol',
    'ProtocolHandler',
    'Unmounted',
    'mount_scope',
    'PROTOCOL_DEPENDENCIES',
    'PROTOCOL_HANDLERS',
    'dependencies_for',
    'from_env',
    'handler_for',
    'SshfsMounted',
    'SshfsUnmounted',
]
