# src/dev_helper/core/runner.py

"""
Synchronous external command runner.

Policy: run() never raises for a failed command. It returns a CommandResult and
the caller decides whether the failure matters (e.g. "not a git repo" is an
expected answer, a failed "git commit" is not). Commands are argv lists passed
straight to the process-spawn primitive, never interpolated into shell text.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int | None
    output: str | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.returncode == 0 and self.error is None

    @property
    def command_text(self) -> str:
        return shlex.join(self.args)

    def describe_failure(self) -> str:
        if self.error:
            return self.error
        return f"exit code {self.returncode}"


class SubprocessRunner:
    """CommandRunner backed by subprocess.run (stdio inherited unless capture=True)."""

    def run(
        self,
        args: Sequence[str],
        *,
        capture: bool = False,
        cwd: str | Path | None = None,
    ) -> CommandResult:
        argv = tuple(str(a) for a in args)
        logger.debug("Running %s (capture=%s cwd=%s)", shlex.join(argv), capture, cwd)

        try:
            proc = subprocess.run(
                argv,
                cwd=None if cwd is None else str(cwd),
                capture_output=capture,
                text=True,
                check=False,
            )
        except OSError as e:
            # Spawn failure (binary missing, not executable, bad cwd).
            logger.info("Could not start %s: %s", shlex.join(argv), e)
            return CommandResult(args=argv, returncode=None, error=str(e))

        output = proc.stdout if capture else None
        if proc.returncode != 0:
            err = (proc.stderr or "").strip() if capture else ""
            logger.info("Command %s exited with %s", shlex.join(argv), proc.returncode)
            return CommandResult(
                args=argv,
                returncode=proc.returncode,
                output=output,
                error=err or None,
            )

        return CommandResult(args=argv, returncode=0, output=output)
