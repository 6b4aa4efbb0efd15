"""
env-scream: detect which .env variable is haunting your logs.
"""

from env_scream.classifier import Autopsy, classify
from env_scream.detector import SCREAM_PATTERNS, EnvScreamDetector, detect_screams
from env_scream.exceptions import EnvScreamError, LogFileNotFoundError
from env_scream.reference import load_reference_keys, parse_reference_keys

__version__ = "0.1.0"

__all__ = [
    "SCREAM_PATTERNS",
    "Autopsy",
    "EnvScreamDetector",
    "EnvScreamError",
    "LogFileNotFoundError",
    "classify",
    "detect_screams",
    "load_reference_keys",
    "parse_reference_keys",
]
