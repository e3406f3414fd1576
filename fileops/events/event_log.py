"""
Event Log
=========
Append-only text log of emitted events.

Each line is tab separated:

    YYYYMMDD<TAB>HH:MM:SS<TAB><uuid4><TAB><message>

The logs directory is created on first write.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, Union
from uuid import uuid4

from loguru import logger

from fileops.config import EVENT_LOG
from fileops.events.emitter import EventEmitter

LOG_EVENT = "log"


def format_event_line(message: str, *, now: Optional[datetime] = None, event_id: Optional[str] = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y%m%d\t%H:%M:%S")
    return f"{stamp}\t{event_id or uuid4()}\t{message}\n"


def log_event(message: str, logs_dir: Union[str, Path], filename: str = EVENT_LOG.FILENAME) -> Path:
    """Append one event line to ``logs_dir/filename``.

    Returns:
        Path to the event log file.
    """
    logs_path = Path(logs_dir)
    logs_path.mkdir(parents=True, exist_ok=True)

    out_path = logs_path / filename
    line = format_event_line(message)
    with open(out_path, "a", encoding="utf-8", newline="") as f:
        f.write(line)

    logger.debug("Event logged to {}: {}", out_path, message)
    return out_path


def attach_event_log(
    emitter: EventEmitter,
    logs_dir: Union[str, Path],
    filename: str = EVENT_LOG.FILENAME,
):
    """Register a ``log`` listener that writes every message to the event log.

    Returns the listener so callers can detach it with ``emitter.off``.
    """

    def _listener(message: str) -> None:
        log_event(message, logs_dir, filename=filename)

    emitter.on(LOG_EVENT, _listener)
    return _listener
