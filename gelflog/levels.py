"""levels.py - Syslog severities and the mapping from ``logging`` levels.

GELF carries the numeric syslog severity (RFC 5424) in its ``level`` field.
The standard library has no level above CRITICAL, so a ``PANIC`` level is
registered here for applications that want to emit syslog EMERG records.
"""

import logging

# Syslog severity levels
LOG_EMERG = 0
LOG_ALERT = 1
LOG_CRIT = 2
LOG_ERR = 3
LOG_WARNING = 4
LOG_NOTICE = 5
LOG_INFO = 6
LOG_DEBUG = 7

# Result for levels with no entry in SYSLOG_LEVELS. Shares the value of
# LOG_EMERG and is omitted from the wire output.
LOG_UNMAPPED = 0

PANIC = logging.CRITICAL + 10
logging.addLevelName(PANIC, "PANIC")

SYSLOG_LEVELS = {
    PANIC: LOG_EMERG,
    logging.CRITICAL: LOG_CRIT,
    logging.ERROR: LOG_ERR,
    logging.WARNING: LOG_WARNING,
    logging.INFO: LOG_INFO,
    logging.DEBUG: LOG_DEBUG,
}


def syslog_level(levelno: int) -> int:
    """Return the syslog severity for a ``logging`` level number.

    Only the exact levels in ``SYSLOG_LEVELS`` are mapped. Custom levels in
    between (e.g. 25) and ``NOTSET`` return ``LOG_UNMAPPED``; they are never
    rounded to a neighbouring level.

    Example:
        >>> syslog_level(logging.ERROR)
        3
        >>> syslog_level(25)
        0
    """
    return SYSLOG_LEVELS.get(levelno, LOG_UNMAPPED)


def is_mapped(levelno: int) -> bool:
    """Return True if ``levelno`` has an explicit syslog mapping."""
    return levelno in SYSLOG_LEVELS


def severity_name(levelno: int) -> str:
    """Return the lower-case host name of a level, e.g. ``"warning"``."""
    return logging.getLevelName(levelno).lower()
