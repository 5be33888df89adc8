"""
Error types raised by protocol handlers and the command executor

Every failure is raised to the immediate caller. Nothing here is retried
automatically and no handler is left half-transitioned.
"""
from typing import Iterable, List


class RemoteMountError(Exception):
    """Base exception for all remote mount errors"""
    pass


class ProtocolError(RemoteMountError):
    """Handler could not be constructed"""
    pass


class MissingConfigurationOption(ProtocolError):
    """A required configuration value is absent"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing configuration option: {key}")


class UnsupportedProtocol(ProtocolError):
    """No handler is registered for the requested protocol"""

    def __init__(self, protocol: str):
        self.protocol = protocol
        super().__init__(f"Unsupported protocol: {protocol}")


class DependencyMissing(RemoteMountError):
    """One or more required binaries could not be found in $PATH"""

    def __init__(self, names: Iterable[str]):
        self.names: List[str] = list(names)
        super().__init__(
            "The following dependencies are missing or not in $PATH: "
            + ", ".join(self.names)
        )


class ShellNotFound(RemoteMountError):
    """The shell used to run commands could not be found in $PATH"""

    def __init__(self, shell: str):
        self.shell = shell
        super().__init__(f"Unable to find shell binary in path: {shell}")


class ExecutionError(RemoteMountError):
    """The command process could not be spawned or awaited"""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Failed to execute command: {cause}")


class MountError(RemoteMountError):
    """Mount operation failed"""
    pass


class MountFailed(MountError):
    """The mount binary ran but reported a failure"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Mount failed: {detail}")


class AlreadyMounted(MountError):
    """mount() was called on a handle that has already been mounted"""

    def __init__(self, mountpoint: str):
        self.mountpoint = mountpoint
        super().__init__(f"Filesystem at {mountpoint} is already mounted")


class UnmountError(RemoteMountError):
    """Unmount operation failed"""
    pass


class UnmountFailed(UnmountError):
    """The unmount binary ran but reported a failure"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Unmount failed: {detail}")


class NotMounted(UnmountError):
    """unmount() was called on a handle that is no longer mounted"""

    def __init__(self, mountpoint: str):
        self.mountpoint = mountpoint
        super().__init__(f"Filesystem at {mountpoint} is not mounted")
