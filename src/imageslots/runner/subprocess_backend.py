"""Script runner backed by an asyncio subprocess."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from imageslots.domain.models import ScriptResult
from imageslots.runner.base import ScriptRunner

logger = logging.getLogger(__name__)


class SubprocessScriptRunner(ScriptRunner):
    """Executes the script directly (no shell) with stderr folded into stdout."""

    async def run(self, script_path: Path) -> ScriptResult:
        try:
            process = await asyncio.create_subprocess_exec(
                str(script_path),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            logger.warning("Unable to start %s: %s", script_path, e)
            return ScriptResult(output=b"", error=str(e))

        output, _ = await process.communicate()
        if process.returncode != 0:
            logger.warning("%s exited with status %d", script_path, process.returncode)
            return ScriptResult(output=output, error=f"exit status {process.returncode}")

        logger.debug("%s finished, %d bytes of output", script_path, len(output))
        return ScriptResult(output=output)
