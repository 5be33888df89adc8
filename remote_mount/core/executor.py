"""
Shell command execution with secret redaction

Commands are handed to a shell as a single string because mount commands rely
on shell piping. Every secret registered with the executor is scrubbed from
the command and its output before anything is logged.
"""
import asyncio
from dataclasses import dataclass
from typing import Iterable, Tuple

import structlog

from remote_mount.core.dependencies import resolve_binary
from remote_mount.core.errors import ExecutionError, ShellNotFound

logger = structlog.get_logger()

REDACTION_MARKER = "**********"


@dataclass(frozen=True)
class CommandOutput:
    """Captured result of a finished command"""
    stdout: str
    stderr: str
    returncode: int


class CommandExecutor:
    """Runs shell command strings and captures their output"""

    def __init__(self, secrets: Iterable[str] = ()):
        # Longest first so a secret containing another is scrubbed whole
        self._secrets: Tuple[str, ...] = tuple(
            sorted({s for s in secrets if s}, key=len, reverse=True)
        )

    def redact(self, text: str) -> str:
        """Replace every registered secret in text with the redaction marker"""
        for secret in self._secrets:
            text = text.replace(secret, REDACTION_MARKER)
        return text

    async def run(self, shell: str, command: str) -> CommandOutput:
        """
        Run a fully formed command string through a shell

        Args:
            shell: Shell binary name, resolved through $PATH
            command: Command line passed to ``<shell> -c``

        Returns:
            CommandOutput with decoded stdout/stderr and the exit status

        Raises:
            ShellNotFound: If the shell is not in $PATH
            ExecutionError: If the process could not be spawned or awaited
        """
        logger.info("Executing command", command=self.redact(command))

        shell_location = await asyncio.to_thread(resolve_binary, shell)
        if shell_location is None:
            raise ShellNotFound(shell)

        try:
            process = await asyncio.create_subprocess_exec(
                shell_location, "-c", command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                stdin=asyncio.subprocess.DEVNULL
            )
            stdout, stderr = await process.communicate()
        except OSError as e:
            raise ExecutionError(e) from e

        output = CommandOutput(
            stdout=stdout.decode(errors="replace") if stdout else "",
            stderr=stderr.decode(errors="replace") if stderr else "",
            returncode=process.returncode
        )

        logger.debug(
            "Command output",
            returncode=output.returncode,
            stdout=self.redact(output.stdout),
            stderr=self.redact(output.stderr)
        )

        return output
