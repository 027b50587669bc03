"""record.py - The LogEvent input and the GelfRecord it is shaped into."""

from typing import Any, Dict, Optional, Tuple, Union

GELF_VERSION = "1.1"


class LogEvent:
    """One log event as handed over by the host logging pipeline.

    Attributes:
        message (str): Free-form text, possibly empty or multi-line.
        levelno (int): Host severity as a ``logging`` level number.
        fields (dict): Caller fields. The shaper writes ``severity`` and, for
            severe events, ``file`` and ``line`` into this mapping.
        timestamp (float): Seconds since the epoch.
        call_depth (int): Frames to skip before call-site inference starts.
        call_site (tuple): Known ``(file, line)`` of the emitting code. When
            set, it is used as-is and the stack is not inspected.
    """

    __slots__ = (
        "message", "levelno", "fields", "timestamp", "call_depth", "call_site"
    )

    def __init__(
        self,
        message: str,
        levelno: int,
        fields: Optional[Dict[str, Any]] = None,
        timestamp: float = 0.0,
        call_depth: int = 0,
        call_site: Optional[Tuple[str, int]] = None,
    ) -> None:
        self.message = message
        self.levelno = levelno
        self.fields = {} if fields is None else fields
        self.timestamp = timestamp
        self.call_depth = call_depth
        self.call_site = call_site

    def __repr__(self) -> str:  # pragma: no cover
        return f"LogEvent({self.levelno}, {self.message!r})"


class GelfRecord:
    """A GELF 1.1 message ready for serialization.

    Built fresh for every event and discarded after rendering. ``extra`` keys
    all start with ``_``, so they can never collide with the fixed schema
    keys. ``raw_extra`` is JSON object text that is spliced into the output
    as-is, without validation.
    """

    __slots__ = (
        "version",
        "host",
        "short_message",
        "full_message",
        "timestamp",
        "level",
        "facility",
        "extra",
        "raw_extra",
    )

    def __init__(
        self,
        host: str,
        short_message: str,
        full_message: str = "",
        timestamp: float = 0.0,
        level: int = 0,
        facility: str = "",
        extra: Optional[Dict[str, Any]] = None,
        raw_extra: Optional[Union[bytes, str]] = None,
    ) -> None:
        self.version = GELF_VERSION
        self.host = host
        self.short_message = short_message
        self.full_message = full_message
        self.timestamp = timestamp
        self.level = level
        self.facility = facility
        self.extra = {} if extra is None else extra
        self.raw_extra = raw_extra

    def fixed_fields(self) -> Dict[str, Any]:
        """Return the fixed-schema fields, omitting the empty optional ones.

        ``full_message``, ``level`` and ``_facility`` are left out when empty
        or zero. Key order follows the GELF schema.
        """
        fixed: Dict[str, Any] = {
            "version": self.version,
            "host": self.host,
            "short_message": self.short_message,
        }
        if self.full_message:
            fixed["full_message"] = self.full_message
        fixed["timestamp"] = self.timestamp
        if self.level:
            fixed["level"] = self.level
        if self.facility:
            fixed["_facility"] = self.facility
        return fixed

    def __repr__(self) -> str:  # pragma: no cover
        return f"GelfRecord({self.level}, {self.short_message!r})"
