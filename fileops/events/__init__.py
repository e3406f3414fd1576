"""Event emitter and the on-disk event log."""

from fileops.events.emitter import EventEmitter
from fileops.events.event_log import attach_event_log, format_event_line, log_event

__all__ = ["EventEmitter", "attach_event_log", "format_event_line", "log_event"]
