"""
Fatal error types.

Everything that aborts a setup run derives from SetupError and is caught
by the single handler in main.cli, which prints the message and exits 1.
"""


class SetupError(Exception):
    """Base class for errors that abort the setup run."""


class CommandSpawnError(SetupError):
    """The external program could not be started (missing, not executable)."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"failed to run command {command}: {reason}")


class CommandFailedError(SetupError):
    """The external program exited with a non-zero status."""

    def __init__(self, command: str, returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(f"command {command} exited with status {returncode}")


class DownloadError(SetupError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"failed to download {url}: {reason}")


class PromptAborted(SetupError):
    """The interactive session could not be completed."""

    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        super().__init__(f"prompt aborted: {prompt}")
