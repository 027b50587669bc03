"""shaper.py - Turn one LogEvent into a GelfRecord.

Shaping rules:
    - The message is stripped of surrounding whitespace. If it has a line
      break after its first character, the first line becomes
      ``short_message`` and the whole stripped text becomes ``full_message``.
      Otherwise the whole text is ``short_message`` and there is no
      ``full_message``.
    - The host level is mapped to a syslog severity (see levels.py).
    - Events more severe than WARNING get ``file`` and ``line`` fields naming
      the application code that emitted them.
    - Every event gets a ``severity`` field with the host level name.
    - Field keys are moved into the ``_`` namespace and values resolved to
      JSON-ready forms (see fields.py).
"""

from typing import Callable, Optional, Tuple, Union

from .caller import DEFAULT_IGNORE, find_caller, internal_frame_filter
from .fields import normalize_fields
from .levels import LOG_WARNING, severity_name, syslog_level
from .record import GelfRecord, LogEvent

_default_filter = internal_frame_filter(DEFAULT_IGNORE)


def split_message(message: str) -> Tuple[str, str]:
    """Return ``(short_message, full_message)`` for a raw message.

    Example:
        >>> split_message("Starting application.\\nWaiting for request ...")
        ('Starting application.', 'Starting application.\\nWaiting for request ...')
        >>> split_message("  single line  ")
        ('single line', '')
    """
    msg = message.strip()
    i = msg.find("\n")
    if i > 0:
        return msg[:i], msg
    return msg, ""


def shape(
    event: LogEvent,
    host: str,
    facility: str = "",
    is_internal_frame: Callable[[str], bool] = _default_filter,
    raw_extra: Optional[Union[bytes, str]] = None,
) -> GelfRecord:
    """Build the GelfRecord for ``event``.

    Args:
        event: The event to shape. ``severity`` (and for severe events
            ``file`` and ``line``) are written into ``event.fields``.
        host: Value of the GELF ``host`` field.
        facility: Value of the ``_facility`` field; omitted when empty.
        is_internal_frame: Predicate marking stack frames that belong to the
            logging machinery and must be skipped by call-site inference.
        raw_extra: Optional pre-encoded JSON object spliced into the output.

    Raises:
        SerializationError: If a field value cannot be encoded.
    """
    short, full = split_message(event.message)
    level = syslog_level(event.levelno)

    if level < LOG_WARNING:
        if event.call_site is not None:
            file, line = event.call_site
        else:
            # +1 skips this frame
            file, line = find_caller(event.call_depth + 1, is_internal_frame)
        event.fields["file"] = file
        event.fields["line"] = line

    event.fields["severity"] = severity_name(event.levelno)

    return GelfRecord(
        host=host,
        short_message=short,
        full_message=full,
        timestamp=float(int(event.timestamp)),
        level=level,
        facility=facility,
        extra=normalize_fields(event.fields),
        raw_extra=raw_extra,
    )
