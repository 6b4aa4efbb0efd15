"""
Scream detection.

Finds environment variable names implicated by common failure messages in a
log and drives the full analysis: detect, classify against the reference
file, report.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from env_scream import report
from env_scream.classifier import Autopsy, classify
from env_scream.config import DetectorConfig, get_config
from env_scream.exceptions import LogFileNotFoundError
from env_scream.observability import get_logger
from env_scream.reference import load_reference_keys, reference_path

logger = get_logger(__name__)

# Order matters only for the order suspects are reported in.
SCREAM_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Direct access: process.env.API_KEY
    re.compile(r"process\.env\.([A-Z_]+)"),
    re.compile(r"env\.([A-Z_]+)"),
    # TypeError: Cannot read properties of undefined (reading 'x') ... env.FOO
    re.compile(r"Cannot read propert.+of undefined.*env\.([A-Z_]+)", re.IGNORECASE),
    # ReferenceError: FOO is not defined
    re.compile(r"([A-Z_]+) is not defined"),
    # dotenv-safe style: Missing FOO
    re.compile(r"Missing ([A-Z_]+)"),
)


def detect_screams(
    log_content: str, patterns: Sequence[re.Pattern[str]] = SCREAM_PATTERNS
) -> list[str]:
    """
    Collect upper-cased variable names captured by ``patterns``.

    Names are deduplicated and returned in first-seen order, pattern by
    pattern. Matches without a first capture group are skipped.
    """
    suspects: dict[str, None] = {}
    for pattern in patterns:
        for match in pattern.finditer(log_content):
            captured = match.group(1) if pattern.groups else None
            if captured:
                name = captured.upper()
                if name not in suspects:
                    logger.debug("scream_detected", name=name, pattern=pattern.pattern)
                suspects[name] = None
    logger.debug("screams_collected", count=len(suspects))
    return list(suspects)


def read_log_file(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Read the whole log file, raising LogFileNotFoundError if it is absent.

    Undecodable bytes are replaced, never rejected. An empty path names no
    file (``Path("")`` would otherwise resolve to the working directory).
    """
    log_path = Path(path)
    if str(path) == "" or not log_path.exists():
        raise LogFileNotFoundError(str(path))
    return log_path.read_text(encoding=encoding, errors="replace")


class EnvScreamDetector:
    """
    Listens to a log for environment variable screams.

    The pattern list and configuration are fixed at construction.
    """

    def __init__(
        self,
        patterns: Sequence[re.Pattern[str]] = SCREAM_PATTERNS,
        config: DetectorConfig | None = None,
    ):
        self.patterns = tuple(patterns)
        self.config = config or get_config()

    def detect_screams(self, log_content: str) -> list[str]:
        return detect_screams(log_content, self.patterns)

    def autopsy(self, suspects: Sequence[str], cwd: Path | None = None) -> Autopsy:
        """Classify suspects against the reference file in ``cwd``."""
        env_path = reference_path(cwd, self.config.env_filename)
        existing = load_reference_keys(env_path, encoding=self.config.encoding)
        return classify(suspects, existing)

    def analyze(self, log_file: str | Path) -> Autopsy | None:
        """
        Run the full analysis on ``log_file`` and print the outcome.

        Returns None when the log file does not exist, an empty Autopsy when
        nothing screamed, and the classification otherwise.
        """
        try:
            log_content = read_log_file(log_file, encoding=self.config.encoding)
        except LogFileNotFoundError as e:
            logger.warning("log_file_not_found", **e.to_dict())
            report.print_log_not_found(e.path)
            return None

        suspects = self.detect_screams(log_content)
        if not suspects:
            report.print_no_screams()
            return Autopsy()

        result = self.autopsy(suspects)
        report.print_report(result, config=self.config)
        logger.info(
            "analysis_complete",
            missing=len(result.missing),
            misconfigured=len(result.misconfigured),
        )
        return result
