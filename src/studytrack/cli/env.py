"""``--env-file`` support for the ``studytrack`` CLI.

Deployments usually keep ``PORT`` and ``STUDYTRACK_*`` values in ``.env``
files. The flag may appear anywhere on the command line, so it is pulled out
of argv before argparse sees the subcommands.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from dotenv import dotenv_values


def extract_env_files(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split ``--env-file PATH`` / ``--env-file=PATH`` tokens out of argv.

    Returns ``(env_files, remaining_argv)``.
    """

    env_files: list[str] = []
    remaining: list[str] = []

    tokens = iter(argv)
    for token in tokens:
        if token == "--env-file":
            path = next(tokens, None)
            if path is None:
                raise SystemExit("--env-file requires a file path")
            env_files.append(path)
        elif token.startswith("--env-file="):
            env_files.append(token.split("=", 1)[1])
        else:
            remaining.append(token)

    return env_files, remaining


def load_env_file(path: str | Path, *, override: bool = True) -> dict[str, str]:
    """Load ``KEY=value`` pairs from ``path`` into ``os.environ``."""

    resolved = Path(path).expanduser()
    if not resolved.is_file():
        raise SystemExit(f"--env-file does not exist: {resolved}")

    parsed = {key: value or "" for key, value in dotenv_values(resolved).items()}
    for key, value in parsed.items():
        if override or key not in os.environ:
            os.environ[key] = value
    return parsed


def load_env_files(paths: Iterable[str | Path], *, override: bool = True) -> dict[str, str]:
    """Load several env files in order; later files win."""

    merged: dict[str, str] = {}
    for path in paths:
        merged.update(load_env_file(path, override=override))
    return merged
