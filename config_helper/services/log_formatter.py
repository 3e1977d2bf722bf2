"""
Detailed log formatting for failed configuration lookups.

A diagnostic record carries the host, UTC timestamp, exception message,
stack trace and elapsed time of a failed call. It is written to the log as a
single comma separated line:

    Host: web-1, Date: 2024-05-01T12:00:00+00:00, Exception: ..., StackTrace: ..., TimeTaken: 42ms

The text form can be parsed back with deserialize(), but only on a best-effort
basis: the layout uses ',' between fields and ':' after each label, so an
exception message or stack trace containing either character will not survive
the round trip. Stack traces almost always do.
"""
import socket
import traceback
from datetime import datetime, timezone
from typing import Optional
from config_helper.models.diagnostic_record import DiagnosticRecord

FIELD_LABELS = ("Host", "Date", "Exception", "StackTrace", "TimeTaken")
FIELD_COUNT = len(FIELD_LABELS)


def build_diagnostic_record(
    exception: BaseException,
    elapsed_ms: int,
    message: Optional[str] = None
) -> DiagnosticRecord:
    """
    Build a diagnostic record for a failed operation.

    Host and timestamp are captured at call time.

    Args:
        exception: The exception that ended the operation
        elapsed_ms: Milliseconds spent before the failure
        message: Text to record instead of str(exception)

    Returns:
        DiagnosticRecord: Fully populated, immutable record
    """
    stack_trace = "".join(traceback.format_tb(exception.__traceback__)).rstrip()
    return DiagnosticRecord(
        host=socket.gethostname(),
        timestamp=datetime.now(timezone.utc),
        exception_message=message if message is not None else (str(exception) or type(exception).__name__),
        stack_trace=stack_trace,
        elapsed_ms=elapsed_ms
    )


def serialize(record: DiagnosticRecord) -> str:
    """Render a record as a single log line."""
    return (
        f"Host: {record.host}, "
        f"Date: {record.timestamp.isoformat()}, "
        f"Exception: {record.exception_message}, "
        f"StackTrace: {record.stack_trace}, "
        f"TimeTaken: {record.elapsed_ms}ms"
    )


def deserialize(text: str) -> DiagnosticRecord:
    """
    Parse a line produced by serialize() back into a record.

    Only the first colon of each segment separates label from value, so ISO
    timestamps are preserved. Commas inside any field are not.

    Raises:
        ValueError: If the text does not have the expected layout
    """
    segments = text.split(',')
    if len(segments) < FIELD_COUNT:
        raise ValueError(f"Expected {FIELD_COUNT} comma separated fields, got {len(segments)}")

    values = []
    for expected_label, segment in zip(FIELD_LABELS, segments[:FIELD_COUNT]):
        label, separator, value = segment.partition(':')
        if not separator:
            raise ValueError(f"Missing label separator in segment: {segment!r}")
        if label.strip() != expected_label:
            raise ValueError(f"Expected label {expected_label!r}, got {label.strip()!r}")
        values.append(value.strip())

    host, date, exception_message, stack_trace, time_taken = values
    return DiagnosticRecord(
        host=host,
        timestamp=datetime.fromisoformat(date),
        exception_message=exception_message,
        stack_trace=stack_trace,
        elapsed_ms=int(time_taken.removesuffix('ms'))
    )
