"""External script execution for imageslots.

``ScriptRunner`` is the narrow capability the HTTP layer depends on;
``SubprocessScriptRunner`` is the production implementation.
"""

from imageslots.runner.base import ScriptError, ScriptRunner, resolve_script_path
from imageslots.runner.subprocess_backend import SubprocessScriptRunner

__all__ = ["ScriptError", "ScriptRunner", "SubprocessScriptRunner", "resolve_script_path"]
