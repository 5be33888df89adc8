"""
SSHFS protocol handler

Mounts with ``sshfs`` reading the password from stdin and unmounts with
``fusermount -u``. Commands run through ``sh -c`` because the password is
piped into sshfs rather than passed as an argument, which keeps it out of
process listings.
"""
import asyncio
import os
import shlex
from typing import List, Optional

import structlog

from remote_mount.config import SshfsSettings
from remote_mount.core.dependencies import missing_dependencies, resolve_binary
from remote_mount.core.errors import (
    AlreadyMounted,
    DependencyMissing,
    MissingConfigurationOption,
    MountFailed,
    NotMounted,
    UnmountFailed,
)
from remote_mount.core.executor import CommandExecutor, CommandOutput
from remote_mount.protocols.base import (
    ConnectionParameters,
    Mounted,
    Protocol,
    ProtocolHandler,
    Unmounted,
)

logger = structlog.get_logger()

SSHFS_BIN = "sshfs"
UMOUNT_BIN = "fusermount"
SHELL_BIN = "sh"

DEPENDENCIES = (SSHFS_BIN, UMOUNT_BIN, SHELL_BIN)


def _escape_single_quotes(value: str) -> str:
    """Escape a value for use inside a single-quoted shell word"""
    return value.replace("'", "'\\''")


def _failure_detail(output: CommandOutput, binary: str, executor: CommandExecutor) -> Optional[str]:
    """Describe why a command failed, or None if it succeeded"""
    # Only stderr decides: output there fails even with exit status 0, and a
    # silent non-zero exit still counts as success
    if output.stderr:
        return executor.redact(output.stderr)
    if output.returncode != 0:
        logger.warning("Command exited non-zero without stderr", binary=binary, returncode=output.returncode)
    return None


class _SshfsHandler(ProtocolHandler):
    """State-independent part of the SSHFS handler"""

    last_output: Optional[CommandOutput] = None

    def missing_dependencies(self) -> Optional[List[str]]:
        missing = missing_dependencies(DEPENDENCIES)
        return missing or None

    def protocol(self) -> Protocol:
        return Protocol.SSHFS

    def _executor(self) -> CommandExecutor:
        password = self._parameters.password
        return CommandExecutor(secrets=(password, _escape_single_quotes(password)))

    async def _require_dependencies(self):
        missing = await asyncio.to_thread(self.missing_dependencies)
        if missing:
            raise DependencyMissing(missing)

    async def _locate(self, binary: str) -> str:
        location = await asyncio.to_thread(resolve_binary, binary)
        if location is None:
            raise DependencyMissing([binary])
        return location


class SshfsUnmounted(_SshfsHandler, Unmounted):
    """SSHFS filesystem that is not mounted"""

    @classmethod
    def from_env(
        cls,
        mountpoint: Optional[str] = None,
        sshfs_settings: Optional[SshfsSettings] = None
    ) -> "SshfsUnmounted":
        """
        Build a handler from REMOTE_MOUNT_SSHFS_* environment variables

        Args:
            mountpoint: Overrides REMOTE_MOUNT_SSHFS_MOUNTPOINT when given
            sshfs_settings: Pre-loaded settings, read from the environment if omitted

        Raises:
            MissingConfigurationOption: If mountpoint, connection string or password is unset
        """
        if sshfs_settings is None:
            sshfs_settings = SshfsSettings()

        mountpoint = mountpoint or sshfs_settings.mountpoint
        if not mountpoint:
            raise MissingConfigurationOption(SshfsSettings.env_var("mountpoint"))
        if sshfs_settings.connection_string is None:
            raise MissingConfigurationOption(SshfsSettings.env_var("connection_string"))
        if sshfs_settings.password is None:
            raise MissingConfigurationOption(SshfsSettings.env_var("password"))

        return cls(ConnectionParameters(
            mountpoint=mountpoint,
            connection_string=sshfs_settings.connection_string,
            password=sshfs_settings.password,
            options=sshfs_settings.options,
            extra_args=sshfs_settings.extra_args,
        ))

    def build_mount_command(self, sshfs_location: str) -> str:
        """Shell command that pipes the password into sshfs"""
        params = self._parameters
        # printf rather than echo: dash's echo expands backslashes in the password
        parts = [
            f"printf '%s\\n' '{_escape_single_quotes(params.password)}'",
            "|",
            sshfs_location,
            shlex.quote(params.connection_string),
            shlex.quote(params.mountpoint),
        ]
        if params.options:
            parts.append(f"-o password_stdin,{params.options}")
        if params.extra_args:
            parts.append(params.extra_args)
        return " ".join(parts)

    async def mount(self) -> "SshfsMounted":
        mountpoint = self._parameters.mountpoint
        if self._consumed:
            raise AlreadyMounted(mountpoint)

        # Claimed up front so an overlapping call on this handle fails fast
        self._consumed = True
        try:
            return await self._mount()
        except BaseException:
            self._consumed = False
            raise

    async def _mount(self) -> "SshfsMounted":
        mountpoint = self._parameters.mountpoint
        logger.info("Mounting filesystem", protocol=Protocol.SSHFS.value, mountpoint=mountpoint)

        await self._require_dependencies()

        if not await asyncio.to_thread(os.path.exists, mountpoint):
            raise MountFailed(f"Path {mountpoint} does not exist")

        sshfs_location = await self._locate(SSHFS_BIN)

        executor = self._executor()
        output = await executor.run(SHELL_BIN, self.build_mount_command(sshfs_location))

        detail = _failure_detail(output, SSHFS_BIN, executor)
        if detail is not None:
            logger.error("Failed to mount filesystem", mountpoint=mountpoint, error=detail)
            raise MountFailed(detail)

        logger.info("Successfully mounted filesystem", mountpoint=mountpoint)

        mounted = SshfsMounted(self._parameters)
        mounted.last_output = output
        return mounted


class SshfsMounted(_SshfsHandler, Mounted):
    """
    SSHFS filesystem mounted at its mountpoint

    Discarding this handle does not unmount the filesystem.
    """

    def build_unmount_command(self, umount_location: str) -> str:
        return f"{umount_location} -u {shlex.quote(self._parameters.mountpoint)}"

    async def unmount(self) -> SshfsUnmounted:
        mountpoint = self._parameters.mountpoint
        if self._consumed:
            raise NotMounted(mountpoint)

        self._consumed = True
        try:
            return await self._unmount()
        except BaseException:
            self._consumed = False
            raise

    async def _unmount(self) -> SshfsUnmounted:
        mountpoint = self._parameters.mountpoint
        logger.info("Unmounting filesystem", protocol=Protocol.SSHFS.value, mountpoint=mountpoint)

        await self._require_dependencies()

        umount_location = await self._locate(UMOUNT_BIN)

        executor = self._executor()
        output = await executor.run(SHELL_BIN, self.build_unmount_command(umount_location))

        detail = _failure_detail(output, UMOUNT_BIN, executor)
        if detail is not None:
            logger.error("Failed to unmount filesystem", mountpoint=mountpoint, error=detail)
            raise UnmountFailed(detail)

        logger.info("Successfully unmounted filesystem", mountpoint=mountpoint)

        unmounted = SshfsUnmounted(self._parameters)
        unmounted.last_output = output
        return unmounted
