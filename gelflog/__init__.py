"""gelflog/__init__.py - Public API for the gelflog package.

gelflog renders Python log records as GELF 1.1 (Graylog Extended Log Format)
documents: one compact JSON object per line, ready to be shipped to Graylog
or any GELF-speaking collector by whatever transport the application uses.

Quick start:
    import logging
    from gelflog import GelfFormatter

    # 1. Put the formatter on any handler
    handler = logging.StreamHandler()
    handler.setFormatter(GelfFormatter(facility="application-name"))
    logging.getLogger().addHandler(handler)

    # 2. Log as usual; ``extra`` becomes GELF additional fields
    logger = logging.getLogger(__name__)
    logger.info("Starting application.\\nWaiting for request ...",
                extra={"animal": "walrus"})
    # {"version":"1.1","host":"web-1","short_message":"Starting application.",
    #  "full_message":"Starting application.\\nWaiting for request ...",
    #  "timestamp":1700000000.0,"level":6,"_facility":"application-name",
    #  "_animal":"walrus","_severity":"info"}

    # 3. Without the logging module
    from gelflog import LogEvent
    data = GelfFormatter().format_event(LogEvent("disk full", logging.ERROR))

Exported names:
    GelfFormatter:        logging.Formatter producing GELF JSON.
    LogEvent:             Pipeline-neutral input to GelfFormatter.format_event().
    GelfRecord:           A shaped GELF message before serialization.
    shape, split_message: The record shaping step.
    render, dumps:        The serialization step.
    locate:               Call-site inference used for severe records.
    BufferPool:           Scratch buffer pool used by the serializer.
    PANIC:                Log level above CRITICAL, mapped to syslog EMERG.
    GelfError, InitializationError, SerializationError: Exceptions.
"""

from .caller import internal_frame_filter, locate
from .errors import GelfError, InitializationError, SerializationError
from .formatter import GelfFormatter
from .levels import PANIC, syslog_level
from .pool import BufferPool
from .record import GelfRecord, LogEvent
from .serializer import dumps, render
from .shaper import shape, split_message

__all__ = [
    "GelfFormatter",
    "LogEvent",
    "GelfRecord",
    "shape",
    "split_message",
    "render",
    "dumps",
    "locate",
    "internal_frame_filter",
    "syslog_level",
    "BufferPool",
    "PANIC",
    "GelfError",
    "InitializationError",
    "SerializationError",
]
__version__ = "0.1.0"
