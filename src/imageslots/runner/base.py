"""Abstract base class for running the external script.

The HTTP layer depends only on this interface, so tests can inject a
mock runner and never execute a real script.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from imageslots.domain.models import ScriptResult


class ScriptRunner(ABC):
    """Runs a script with no arguments and captures its combined output.

    Example usage::

        runner = SubprocessScriptRunner()
        result = await runner.run(Path("scripts/script.sh"))
        if not result.ok:
            print(result.error)
        print(result.output.decode())
    """

    @abstractmethod
    async def run(self, script_path: Path) -> ScriptResult:
        """Execute ``script_path`` and wait for it to finish.

        Stdout and stderr are merged into ``ScriptResult.output``. A
        script that cannot be started or exits non-zero is reported via
        ``ScriptResult.error`` rather than raised, so the caller always
        gets whatever output was captured.

        Args:
            script_path: Path to an executable file.
        """
        ...


class ScriptError(Exception):
    """Raised when a script run cannot be set up at all."""


def resolve_script_path(script_path: Path | str) -> Path:
    """Resolve ``script_path`` against the current working directory.

    Resolution happens per call so a chdir after startup is honoured.

    Raises:
        ScriptError: If the working directory cannot be determined.
    """
    path = Path(script_path)
    if path.is_absolute():
        return path
    try:
        cwd = Path.cwd()
    except OSError as e:
        raise ScriptError(f"Unable to determine working directory: {e}") from e
    return cwd / path
