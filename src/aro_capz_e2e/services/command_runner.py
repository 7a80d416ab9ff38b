"""Subprocess execution service for the end-to-end helpers."""

import subprocess
from typing import Any, Dict, List

from aro_capz_e2e.errors import E2EError


class CommandRunner:
    """Runs external commands with consistent error handling."""

    def __init__(self, logger):
        self.logger = logger

    def run(
        self,
        cmd: List[str],
        check: bool = True,
        capture_output: bool = False,
        merge_stderr: bool = False,
    ) -> subprocess.CompletedProcess:
        cmd_str = " ".join(cmd)
        self.logger.debug("Executing: %s", cmd_str)

        output_kwargs: Dict[str, Any] = {"capture_output": capture_output}
        if merge_stderr:
            # kubectl reports most failures on stderr
            output_kwargs = {"stdout": subprocess.PIPE, "stderr": subprocess.STDOUT}
            capture_output = True

        try:
            result = subprocess.run(cmd, text=True, **output_kwargs)
        except FileNotFoundError as exc:
            raise E2EError(
                f"Required command not found: {cmd[0]}. Please install it and try again."
            ) from exc
        except OSError as exc:
            raise E2EError(f"Failed to execute command: {cmd_str}. {exc}") from exc

        if capture_output and result.stdout:
            self.logger.debug("Command output: %s", result.stdout.strip())

        if result.returncode == 0:
            return result

        details = ""
        if capture_output:
            details = ((result.stdout if merge_stderr else result.stderr) or "").strip()
        message = f"Command failed ({result.returncode}): {cmd_str}"
        if details:
            message = f"{message}\n{details}"

        if check:
            raise E2EError(message)

        self.logger.warning(message)
        return result
