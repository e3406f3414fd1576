"""
Centralized Configuration
=========================
Centralized configuration values and constants for the file pipeline.

This module provides:
- File layout names for the pipeline (source, intermediate, final)
- Event log location and toggle
- Logging and tracing defaults
- Lenient .env loading from the repo root

Values are read from the environment once, at import time.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def load_env_file_lenient(env_path: Path | None = None) -> None:
    """Load .env from repo root without raising or overriding existing values."""
    if env_path is None:
        env_path = Path(__file__).resolve().parents[1] / ".env"
    if not env_path.exists():
        return

    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return

    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if not key:
            continue
        if not re.match(r"^[A-Za-z_][A-Za-z0-9_]*$", key):
            continue
        os.environ.setdefault(key, value)


load_env_file_lenient()


# Suffix appended to the intermediate file by the append step.
APPEND_SUFFIX = "\n\nappending to this file"

TEXT_ENCODING = "utf-8"


@dataclass(frozen=True)
class PipelineConfig:
    """File names and behavior switches for the sequential file pipeline."""

    ROOT_DIR: str = os.getenv("FILEOPS_ROOT_DIR", ".")
    FILES_SUBDIR: str = os.getenv("FILEOPS_FILES_SUBDIR", "files")

    SOURCE_NAME: str = os.getenv("FILEOPS_SOURCE_NAME", "starter.txt")
    INTERMEDIATE_NAME: str = os.getenv("FILEOPS_INTERMEDIATE_NAME", "reply.txt")
    FINAL_NAME: str = os.getenv("FILEOPS_FINAL_NAME", "newreply.txt")

    APPEND_SUFFIX: str = APPEND_SUFFIX
    ENCODING: str = TEXT_ENCODING

    # When false, an existing final file fails the rename step
    RENAME_OVERWRITE: bool = _env_flag("FILEOPS_RENAME_OVERWRITE", "true")

    # fsync after write/append so the next step sees durable content
    FSYNC: bool = _env_flag("FILEOPS_FSYNC", "true")


@dataclass(frozen=True)
class EventLogConfig:
    """Event log configuration."""

    ENABLED: bool = _env_flag("FILEOPS_EVENT_LOG", "false")
    LOGS_SUBDIR: str = os.getenv("FILEOPS_LOGS_SUBDIR", "logs")
    FILENAME: str = os.getenv("FILEOPS_EVENT_LOG_NAME", "eventLog.txt")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    LEVEL: str = os.getenv("FILEOPS_LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class TracingConfig:
    """Tracing configuration."""

    SERVICE_NAME: str = "fileops"
    OTLP_ENDPOINT: str = os.getenv("OTLP_ENDPOINT", "http://localhost:4318/v1/traces")
    ENABLED: bool = os.getenv("ENABLE_TRACING", "false").lower() == "true"


# Global singleton instances
PIPELINE = PipelineConfig()
EVENT_LOG = EventLogConfig()
LOGGING = LoggingConfig()
TRACING = TracingConfig()
