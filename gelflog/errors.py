"""errors.py - Exception types raised by gelflog.

Both errors are raised to the immediate caller. Inside the standard logging
pipeline an exception from ``GelfFormatter.format()`` reaches
``Handler.handleError()``, which reports it without stopping the application.
"""


class GelfError(Exception):
    """Base class for every error raised by gelflog."""


class InitializationError(GelfError):
    """The formatter could not be constructed (e.g. no hostname available)."""


class SerializationError(GelfError):
    """A record could not be encoded as JSON.

    Raised for unsupported field values, cyclic containers and non-finite
    floats. The original exception is chained as ``__cause__``.
    """
