"""
Line protocol encoding and the sinks that write it.

One metric becomes one line:

    measurement,tag1=a,tag2=b field1=42i,field2=3.5,field3=true,field4="x" 1700000000000000000

- Tags are sorted by key; empty tag values are dropped.
- Integers carry an `i` suffix, booleans are `true`/`false`, strings
  are double-quoted.
- Non-finite floats are dropped (the format cannot represent them).
- A metric with no remaining fields encodes to None and is not written.
"""

import math
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

import requests

from sqlquery.exceptions import SinkError
from .sink import Sink

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _escape(text: str, chars: str) -> str:
    text = text.replace("\\", "\\\\")
    for char in chars:
        text = text.replace(char, "\\" + char)
    return text


def escape_measurement(name: str) -> str:
    return _escape(name, ", ")


def escape_key(key: str) -> str:
    """Escape a tag key, tag value or field key."""
    return _escape(key, ",= ")


def format_field_value(value: Any) -> Optional[str]:
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return f"{value}i"
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return repr(value)
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def to_nanoseconds(timestamp: datetime) -> int:
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    delta = timestamp - EPOCH
    return (delta.days * 86400 + delta.seconds) * 10 ** 9 + delta.microseconds * 1000


def encode_line(table_name: str, fields: Dict[str, Any], tags: Dict[str, str], timestamp: datetime) -> Optional[str]:
    field_parts = []
    for key, value in sorted(fields.items()):
        formatted = format_field_value(value)
        if formatted is not None:
            field_parts.append(f"{escape_key(key)}={formatted}")
    if not field_parts:
        return None

    head = escape_measurement(table_name)
    for key, value in sorted(tags.items()):
        if value == "":
            continue
        head += f",{escape_key(key)}={escape_key(value)}"

    return f"{head} {','.join(field_parts)} {to_nanoseconds(timestamp)}"


class LineProtocolSink(Sink):
    """Writes one line per metric to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.lines_written = 0

    def emit(self, table_name, fields, tags, timestamp) -> None:
        line = encode_line(table_name, fields, tags, timestamp)
        if line is None:
            return
        self.stream.write(line + "\n")
        self.lines_written += 1

    def close(self) -> None:
        self.stream.flush()


class HttpSink(Sink):
    """POSTs each metric as a line-protocol body to a write endpoint."""

    def __init__(self, url: str, timeout: float = 5.0):
        self.url = url
        self.timeout = timeout

    def emit(self, table_name, fields, tags, timestamp) -> None:
        line = encode_line(table_name, fields, tags, timestamp)
        if line is None:
            return
        try:
            response = requests.post(
                self.url,
                data=line.encode("utf-8"),
                headers={"Content-Type": "text/plain; charset=utf-8"},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise SinkError(f"Write to {self.url} failed: {e}") from e
