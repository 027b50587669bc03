"""formatter.py - Core integration layer for gelflog.

This module provides GelfFormatter, a logging.Formatter subclass that turns
every record into a GELF 1.1 JSON document. Transport is left to the handler
it is attached to: a StreamHandler writes one JSON document per line, a
custom handler may ship ``format_bytes()`` output over UDP or TCP.

Design contract:
    - Host and facility are resolved once at construction and never change,
      so one formatter instance can serve any number of handlers and threads.
    - Anything a caller passes through ``extra=`` becomes a GELF additional
      field (``_name``).
    - Records above WARNING carry ``_file`` and ``_line`` naming the code that
      logged them.
    - Encoding failures raise SerializationError, which the logging framework
      routes to ``Handler.handleError()``.

Typical usage:
    import logging
    from gelflog import GelfFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(GelfFormatter(facility="billing"))
    logging.getLogger().addHandler(handler)

    logging.getLogger(__name__).info("charged", extra={"amount": 12})

With ``logging.config.dictConfig``::

    "formatters": {"gelf": {"()": "gelflog.GelfFormatter", "facility": "billing"}}
"""

import logging
import os
import socket
import sys
from typing import Iterable, Optional, Union

from .caller import (
    DEFAULT_IGNORE,
    UNKNOWN_FILE,
    UNKNOWN_LINE,
    internal_frame_filter,
)
from .errors import InitializationError
from .pool import BufferPool
from .record import GelfRecord, LogEvent
from .serializer import dumps
from .shaper import shape

logger = logging.getLogger(__name__)

# Attributes every LogRecord has; anything else was supplied via ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def default_facility() -> str:
    """Return the base name of the running program, e.g. ``"worker.py"``."""
    name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    return name or os.path.basename(sys.executable)


def resolve_hostname() -> str:
    """Return the name of this host.

    Raises:
        InitializationError: If the name cannot be determined or is empty.
    """
    try:
        hostname = socket.gethostname()
    except OSError as exc:
        raise InitializationError(f"cannot resolve hostname: {exc}") from exc
    if not hostname:
        raise InitializationError("cannot resolve hostname: empty host name")
    return hostname


class GelfFormatter(logging.Formatter):
    """A logging.Formatter that renders records as GELF 1.1 JSON.

    Attributes:
        RAW_EXTRA_ATTR (str): Name of the record attribute holding pre-encoded
            JSON object text to splice into the output, e.g.
            ``logger.info("x", extra={"gelf_raw": b'{"_trace":"abc"}'})``.

    Example:
        >>> import logging
        >>> from gelflog import GelfFormatter
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(GelfFormatter(facility="application-name"))
        >>> logging.getLogger().addHandler(handler)
        >>> logging.getLogger("app").info("started", extra={"animal": "walrus"})
    """

    RAW_EXTRA_ATTR = "gelf_raw"

    def __init__(
        self,
        facility: Optional[str] = None,
        ignore: Iterable[str] = (),
        pool_size: int = 16,
    ) -> None:
        """Resolve the host name and facility for this formatter.

        Args:
            facility: Value of the ``_facility`` field. Defaults to the base
                name of the running program when None or empty.
            ignore: Extra path fragments whose stack frames are skipped when
                looking for the caller of a severe record, e.g. a logging
                wrapper module of your own. The standard ``logging`` package
                and gelflog itself are always skipped. Only used by
                ``format_event()``; LogRecords already carry their call site.
            pool_size: Number of idle scratch buffers kept for reuse.

        Raises:
            InitializationError: If the host name cannot be resolved.
        """
        super().__init__()
        self._host = resolve_hostname()
        self._facility = facility or default_facility()
        self._ignore = DEFAULT_IGNORE + tuple(ignore)
        self._is_internal_frame = internal_frame_filter(self._ignore)
        self._pool = BufferPool(size=pool_size)
        logger.debug(
            "GELF formatter ready: host=%s facility=%s", self._host, self._facility
        )

    @property
    def host(self) -> str:
        return self._host

    @property
    def facility(self) -> str:
        return self._facility

    # ---------------------------------------------------------------------- #
    # Public interface
    # ---------------------------------------------------------------------- #

    def format(self, record: logging.LogRecord) -> str:
        """Return the GELF document for ``record`` without the trailing newline.

        Handlers append their own terminator, so the newline that ends the
        wire form is dropped here. Use ``format_bytes()`` for the exact wire
        bytes.
        """
        return self.format_bytes(record)[:-1].decode("utf-8")

    def format_bytes(self, record: logging.LogRecord) -> bytes:
        """Return the newline-terminated GELF document for ``record``."""
        raw_extra = getattr(record, self.RAW_EXTRA_ATTR, None)
        return self.format_event(self.to_event(record), raw_extra=raw_extra)

    def format_event(
        self, event: LogEvent, raw_extra: Optional[Union[bytes, str]] = None
    ) -> bytes:
        """Return the newline-terminated GELF document for ``event``.

        Args:
            event: The event to render. Diagnostic fields are added to
                ``event.fields``.
            raw_extra: Optional pre-encoded JSON object whose members are
                appended to the output unchecked.

        Raises:
            SerializationError: If a field value cannot be encoded.
        """
        return dumps(self.shape(event, raw_extra), pool=self._pool)

    def shape(
        self, event: LogEvent, raw_extra: Optional[Union[bytes, str]] = None
    ) -> GelfRecord:
        """Return the GelfRecord for ``event`` without serializing it."""
        return shape(
            event,
            host=self._host,
            facility=self._facility,
            is_internal_frame=self._is_internal_frame,
            raw_extra=raw_extra,
        )

    def to_event(self, record: logging.LogRecord) -> LogEvent:
        """Convert a LogRecord to a LogEvent.

        Exception and stack information are appended to the message on new
        lines, the same way ``logging.Formatter.format()`` does, so they end
        up in ``full_message``. The call site is the one the logger recorded
        (``pathname`` and ``lineno``), so records handed to another thread,
        e.g. by a QueueHandler, keep pointing at the code that logged them.
        """
        message = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            message = f"{message}\n{record.exc_text}"
        if record.stack_info:
            message = f"{message}\n{self.formatStack(record.stack_info)}"

        fields = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key != self.RAW_EXTRA_ATTR
        }
        return LogEvent(
            message=message,
            levelno=record.levelno,
            fields=fields,
            timestamp=record.created,
            call_site=(
                record.pathname or UNKNOWN_FILE,
                record.lineno or UNKNOWN_LINE,
            ),
        )
