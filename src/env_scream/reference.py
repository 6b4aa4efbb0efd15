"""
Reference key loading from a flat ``KEY=VALUE`` file.

Any line that contains ``=`` is a declaration: no quoting, escaping or comment
syntax is recognised, so ``# OLD_KEY=1`` declares ``# OLD_KEY`` and
``#API_KEY=x`` declares ``#API_KEY``.
"""

from __future__ import annotations

from pathlib import Path

from env_scream.config import get_config
from env_scream.observability import get_logger

logger = get_logger(__name__)


def _trim_key(raw: str) -> str:
    # A leading BOM from Windows editors is not whitespace to str.strip
    return raw.strip().strip("\ufeff").strip()


def parse_reference_keys(content: str) -> set[str]:
    """Extract upper-cased keys from every line containing ``=``."""
    return {
        _trim_key(line.split("=", 1)[0]).upper()
        for line in content.split("\n")
        if "=" in line
    }


def reference_path(cwd: Path | None = None, filename: str | None = None) -> Path:
    """Location of the reference file for the given (or current) directory."""
    base = cwd if cwd is not None else Path.cwd()
    return base / (filename or get_config().env_filename)


def load_reference_keys(path: Path, encoding: str | None = None) -> set[str]:
    """
    Load declared keys from ``path``.

    A missing file means "nothing declared" and returns an empty set. Read
    errors on an existing path are not caught.
    """
    if not path.exists():
        logger.debug("reference_file_missing", path=str(path))
        return set()

    content = path.read_text(
        encoding=encoding or get_config().encoding, errors="replace"
    )
    keys = parse_reference_keys(content)
    logger.debug("reference_keys_loaded", path=str(path), count=len(keys))
    return keys
