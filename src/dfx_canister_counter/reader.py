"""Reader layer: locates dfx.json and parses it into document Values."""

from __future__ import annotations

import json
import os
from pathlib import Path

from .config import DEFAULT_CONFIG_NAME, DEFAULT_PROJECT_DIR
from .errors import IoError, ParseError
from .logging_config import get_logger
from .model import Value, from_python

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------

def resolve_config_path(path: str | os.PathLike | None = None) -> Path:
    """Return the dfx.json path for *path*.

    - ``None`` → ``./dfx.json``
    - a directory → ``<dir>/dfx.json``
    - anything else is taken as the file itself (it need not exist yet;
      :func:`read_document` reports a missing file)
    """
    candidate = Path(DEFAULT_PROJECT_DIR if path is None else path)
    if candidate.is_dir():
        return candidate / DEFAULT_CONFIG_NAME
    return candidate


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def read_document(path: str | os.PathLike) -> Value:
    """Read and parse the JSON file at *path*.

    Raises:
        IoError: the file is missing, unreadable, or not a regular file.
        ParseError: the contents are not UTF-8 encoded JSON, or nest
            deeper than the interpreter's recursion limit.
    """
    path = Path(path)
    logger.debug("Reading %s", path)
    try:
        with open(path, "rb") as fh:
            raw = fh.read()
    except OSError as exc:
        raise IoError(path, exc.strerror or str(exc)) from exc

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(path, f"not valid UTF-8 ({exc.reason})") from exc

    try:
        doc = from_python(json.loads(text))
    except json.JSONDecodeError as exc:
        raise ParseError(path, exc.msg, exc.lineno, exc.colno) from exc
    except RecursionError as exc:
        raise ParseError(path, "document nested too deeply") from exc

    logger.debug("Parsed %s (%d bytes)", path, len(raw))
    return doc


def load_document(path: str | os.PathLike | None = None) -> Value:
    """Resolve *path* like the CLI does, then read it."""
    return read_document(resolve_config_path(path))
