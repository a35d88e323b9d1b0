"""Central, test-injectable subprocess runner used across the project.

This module exposes:
- run(cmd, **kwargs): proxy to the current runner (defaults to subprocess.run)
- set_runner(runner): set a custom runner for tests (callable with same signature)
- reset_runner(): restore default
- run_command(command, args): capture stdout and exit status of a tool query
- execute_command(command, args): run a mutating command, report success only

Tool queries run with ``LC_ALL=C`` so column-aligned output parses the same
regardless of the user's locale. Failing to spawn a process raises ``OSError``
to the caller; a non-zero exit is reported through ``exit_success``.
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

# Default runner is subprocess.run
_runner: Callable = subprocess.run


@dataclass
class CommandOutput:
    """Captured result of a tool query."""

    stdout: bytes
    exit_success: bool


def run(cmd, **kwargs):
    """Run command via the currently configured runner.

    Accepts the same args as subprocess.run and returns whatever the runner returns.
    """
    return _runner(cmd, **kwargs)


def set_runner(runner: Callable):
    """Set custom runner for tests.

    runner: callable(cmd, **kwargs) -> CompletedProcess-like
    """
    global _runner
    _runner = runner


def reset_runner():
    """Reset runner to subprocess.run."""
    global _runner
    _runner = subprocess.run


_SECRET_FLAGS = ("password", "--passphrase")


def _describe(cmd: Sequence[str]) -> str:
    """Join a command line for logging, masking secrets."""
    shown = []
    for previous, arg in zip([None, *cmd], cmd):
        shown.append("***" if previous in _SECRET_FLAGS else arg)
    return " ".join(shown)


def _command_env(neutral_locale: bool) -> Optional[dict]:
    if not neutral_locale:
        return None
    env = dict(os.environ)
    env["LC_ALL"] = "C"
    return env


def run_command(
    command: str,
    args: Sequence[str] = (),
    input: Optional[bytes] = None,
    neutral_locale: bool = True,
) -> CommandOutput:
    """Run ``command`` with ``args`` and capture its stdout."""
    cmd = [command, *args]
    logger.debug(f"run: {_describe(cmd)}")
    result = run(
        cmd,
        capture_output=True,
        input=input,
        env=_command_env(neutral_locale),
        check=False,
    )
    stdout = result.stdout or b""
    if isinstance(stdout, str):
        stdout = stdout.encode("utf-8")
    return CommandOutput(stdout=stdout, exit_success=result.returncode == 0)


def execute_command(
    command: str,
    args: Sequence[str] = (),
    quiet: bool = True,
    neutral_locale: bool = True,
) -> bool:
    """Run a command for its effect and return whether it exited with 0.

    With ``quiet`` the command's stdout/stderr are discarded, otherwise they
    are inherited so interactive programs keep their terminal.
    """
    cmd = [command, *args]
    logger.debug(f"execute: {_describe(cmd)}")
    kwargs = {"env": _command_env(neutral_locale), "check": False}
    if quiet:
        kwargs["stdout"] = subprocess.DEVNULL
        kwargs["stderr"] = subprocess.DEVNULL
    result = run(cmd, **kwargs)
    if result.returncode != 0:
        logger.debug(f"{command} exited with {result.returncode}")
    return result.returncode == 0


def is_command_installed(cmd: str) -> bool:
    """Return True when ``cmd`` resolves on PATH."""
    return shutil.which(cmd) is not None
