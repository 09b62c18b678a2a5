"""Locating executables along a PATH-style list of directories."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping


def find_path(environ: Mapping[str, str]) -> str:
    """Return the value of ``PATH`` in ``environ``.

    Raises ``KeyError`` when the environment has no ``PATH``.
    """
    try:
        return environ["PATH"]
    except KeyError:
        raise KeyError("PATH") from None


def get_cmd(paths: Iterable[str], cmd: str) -> str | None:
    """Return the first ``<dir>/<cmd>`` that exists, or ``None``."""
    for directory in paths:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None