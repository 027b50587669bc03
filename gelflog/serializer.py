"""serializer.py - Render a GelfRecord as one newline-terminated JSON object.

The fixed schema and the dynamic extras are serialized separately and
spliced together at the byte level instead of being merged into one dict and
encoded again:

    {"version":"1.1",...,"_facility":"app"}     fixed fields
    {"_animal":"walrus","_severity":"info"}     extras
    {"_trace":"abc"}                            raw_extra (pre-encoded)

    -> {"version":"1.1",...,"_facility":"app","_animal":"walrus",
        "_severity":"info","_trace":"abc"}\\n

The splice relies on each fragment being a JSON object: the closing brace of
the first one is dropped and the bodies of the others are appended after a
comma. ``raw_extra`` is trusted; malformed text yields malformed output.
"""

import json
from typing import Optional, Union

from .errors import SerializationError
from .pool import BufferPool
from .record import GelfRecord

_pool = BufferPool()


def _encode(obj) -> bytes:
    try:
        text = json.dumps(
            obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"cannot encode GELF record: {exc}") from exc
    # lone surrogates only occur inside strings; \uXXXX keeps them intact
    return text.encode("utf-8", errors="backslashreplace")


def _object_body(raw: Union[bytes, str]) -> bytes:
    """Return the text between the outer braces of a JSON object."""
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    return bytes(raw).strip()[1:-1].strip()


def render(record: GelfRecord, buf: bytearray) -> None:
    """Append the wire form of ``record`` to ``buf``.

    Nothing is written when encoding fails, so ``buf`` is either left as it
    was or holds one complete record.

    Raises:
        SerializationError: If the fixed fields or the extras cannot be
            encoded.
    """
    fixed = _encode(record.fixed_fields())
    extra: Optional[bytes] = _encode(record.extra) if record.extra else None
    raw = _object_body(record.raw_extra) if record.raw_extra else b""

    # write up until the final }
    buf += memoryview(fixed)[:-1]
    if extra is not None:
        buf += b","
        # without the enclosing braces
        buf += memoryview(extra)[1:-1]
    if raw:
        buf += b","
        buf += raw
    buf += b"}\n"


def dumps(record: GelfRecord, pool: BufferPool = _pool) -> bytes:
    """Return the wire form of ``record`` as a new ``bytes`` object.

    The record is rendered into a buffer checked out of ``pool``; the caller
    gets a copy, so the returned bytes are never shared with another call.
    """
    with pool.acquire() as buf:
        render(record, buf)
        return bytes(buf)
