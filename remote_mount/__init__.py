"""
remote_mount - mount remote filesystems by driving external tools

Handlers are state-typed: an Unmounted handle only offers ``mount()`` and a
Mounted handle only offers ``unmount()``. Each successful call consumes the
handle and returns one in the opposite state.

Example:
    >>> from remote_mount import ConnectionParameters, SshfsUnmounted
    >>>
    >>> handler = SshfsUnmounted(ConnectionParameters(
    ...     mountpoint="/mnt/remote",
    ...     connection_string="user@host:/srv/data",
    ...     password="secret",
    ... ))
    >>> mounted = await handler.mount()
    >>> unmounted = await mounted.unmount()

Logging goes through structlog. Applications call ``configure_logging()``
once at startup to install the JSON (or, at DEBUG, console) renderer; the
level defaults to ``REMOTE_MOUNT_LOG_LEVEL``.
"""

from remote_mount.core.errors import (
    AlreadyMounted,
    DependencyMissing,
    ExecutionError,
    MissingConfigurationOption,
    MountError,
    MountFailed,
    NotMounted,
    ProtocolError,
    RemoteMountError,
    ShellNotFound,
    UnmountError,
    UnmountFailed,
    UnsupportedProtocol,
)
from remote_mount.core.executor import CommandExecutor, CommandOutput
from remote_mount.logging_config import configure_logging
from remote_mount.protocols import (
    ConnectionParameters,
    Mounted,
    Protocol,
    ProtocolHandler,
    SshfsMounted,
    SshfsUnmounted,
    Unmounted,
    from_env,
    handler_for,
    mount_scope,
)

__version__ = "0.1.0"

__all__ = [
    # Handlers
    'ConnectionParameters',
    'Mounted',
    'Protocol',
    'ProtocolHandler',
    'SshfsMounted',
    'SshfsUnmounted',
    'Unmounted',
    'from_env',
    'handler_for',
    'mount_scope',

    # Execution
    'CommandExecutor',
    'CommandOutput',

    # Logging
    'configure_logging',

    # Exceptions
    'AlreadyMounted',
    'DependencyMissing',
    'ExecutionError',
    'MissingConfigurationOption',
    'MountError',
    'MountFailed',
    'NotMounted',
    'ProtocolError',
    'RemoteMountError',
    'ShellNotFound',
    'UnmountError',
    'UnmountFailed',
    'UnsupportedProtocol',
]
