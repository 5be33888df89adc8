"""
Protocol handler abstraction

A handler is either Unmounted (exposes only ``mount``) or Mounted (exposes only
``unmount``). A successful transition consumes the handle it was called on and
returns a new handle of the opposite state carrying the same connection
parameters. Calling a transition on a consumed handle raises AlreadyMounted or
NotMounted without running anything.

Dropping a Mounted handle does not unmount anything: the OS-level mount stays
active until someone unmounts it. Use ``mount_scope`` for guaranteed cleanup.
"""
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import AsyncIterator, List, Optional

import structlog

logger = structlog.get_logger()


class Protocol(Enum):
    """Supported remote mount protocols"""
    SSHFS = "sshfs"


@dataclass(frozen=True)
class ConnectionParameters:
    """Everything needed to mount one remote filesystem"""
    mountpoint: str
    connection_string: str
    password: str = field(repr=False)
    options: str = ""
    extra_args: str = ""


class ProtocolHandler(ABC):
    """Capabilities shared by handlers in every state"""

    def __init__(self, parameters: ConnectionParameters):
        self._parameters = parameters
        self._consumed = False

    @property
    def parameters(self) -> ConnectionParameters:
        return self._parameters

    @property
    def consumed(self) -> bool:
        """True once this handle has been turned into its opposite state"""
        return self._consumed

    @abstractmethod
    def missing_dependencies(self) -> Optional[List[str]]:
        """
        Check for binaries the handler needs but cannot find

        Returns:
            Names missing from $PATH, or None if everything is available
        """
        pass

    @abstractmethod
    def protocol(self) -> Protocol:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parameters!r})"


class Unmounted(ProtocolHandler):
    """A handler whose filesystem is not mounted"""

    @abstractmethod
    async def mount(self) -> "Mounted":
        """
        Mount the filesystem

        Returns:
            A Mounted handle; this handle is consumed on success

        Raises:
            AlreadyMounted: If this handle was already consumed
            DependencyMissing: If a required binary is not in $PATH
            MountFailed: If the mount binary reported a failure
        """
        pass


class Mounted(ProtocolHandler):
    """A handler whose filesystem is mounted at its mountpoint"""

    @abstractmethod
    async def unmount(self) -> Unmounted:
        """
        Unmount the filesystem

        Returns:
            An Unmounted handle; this handle is consumed on success

        Raises:
            NotMounted: If this handle was already consumed
            DependencyMissing: If a required binary is not in $PATH
            UnmountFailed: If the unmount binary reported a failure
        """
        pass


@asynccontextmanager
async def mount_scope(handler: Unmounted) -> AsyncIterator[Mounted]:
    """
    Mount for the duration of an ``async with`` block

    Unmount is always attempted on exit. If the block raised, an unmount
    failure is logged and the original exception propagates; otherwise the
    unmount failure propagates.

    Example:
        >>> async with mount_scope(SshfsUnmounted(params)) as mounted:
        ...     os.listdir(mounted.parameters.mountpoint)
    """
    mounted = await handler.mount()
    try:
        yield mounted
    except BaseException:
        try:
            await mounted.unmount()
        except Exception as e:
            logger.error(
                "Failed to unmount after error in mount scope",
                protocol=mounted.protocol().value,
                mountpoint=mounted.parameters.mountpoint,
                error=str(e)
            )
        raise
    else:
        await mounted.unmount()
