"""fields.py - Normalization of caller-supplied fields into GELF extras.

GELF treats every top-level key starting with ``_`` as a user-defined
"additional field". ``normalize_fields()`` rewrites caller keys into that
namespace and resolves each value to a JSON-encodable form before the record
reaches the serializer:

    str, int, float, bool, None    passed through
    BaseException                  its text, ``str(exc)``
    Mapping                        dict of normalized values (keys untouched)
    list, tuple, set, frozenset    list of normalized values
    datetime, date                 ISO-8601 text
    bytes, bytearray               UTF-8 text, invalid bytes replaced

Any other type, or a container that contains itself, raises
SerializationError, as does nesting deeper than the interpreter's
recursion limit. Exceptions would otherwise fail ``json.dumps`` outright,
which is why they are reduced to their message.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, Dict

from .errors import SerializationError

_SCALARS = (str, int, float, bool, type(None))
_SEQUENCES = (list, tuple, set, frozenset)


def field_key(key: str) -> str:
    """Return ``key`` in the GELF additional-field namespace.

    Keys that already start with ``_`` are returned unchanged.

    Example:
        >>> field_key("animal"), field_key("_animal")
        ('_animal', '_animal')
    """
    key = str(key)
    if key.startswith("_"):
        return key
    return "_" + key


def normalize_fields(fields: Mapping) -> Dict[str, Any]:
    """Return a new dict of prefixed keys and JSON-ready values.

    Args:
        fields: Caller-supplied fields. Not modified.

    Returns:
        A dict whose keys all start with ``_``.

    Raises:
        SerializationError: If a value has an unsupported type or a
            container refers back to itself or is nested too deeply.
    """
    return {field_key(k): encode_value(v, k) for k, v in fields.items()}


def encode_value(value: Any, key: str = "") -> Any:
    """Resolve one field value to a JSON-encodable form."""
    try:
        return _encode(value, key, set())
    except RecursionError as exc:
        raise SerializationError(f"field {key!r}: value nested too deeply") from exc


def _encode(value: Any, key: str, seen: set) -> Any:
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, BaseException):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    if isinstance(value, (Mapping,) + _SEQUENCES):
        marker = id(value)
        if marker in seen:
            raise SerializationError(f"field {key!r}: cyclic reference detected")
        seen.add(marker)
        try:
            if isinstance(value, Mapping):
                return {k: _encode(v, key, seen) for k, v in value.items()}
            return [_encode(v, key, seen) for v in value]
        finally:
            seen.discard(marker)

    raise SerializationError(
        f"field {key!r}: cannot encode value of type {type(value).__name__}"
    )
