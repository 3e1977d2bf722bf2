"""
Diagnostic record written to the log when a parameter lookup fails.
Captures where, when and how long a failed call took.
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class DiagnosticRecord(BaseModel):
    """Immutable snapshot of a failed operation."""
    model_config = ConfigDict(frozen=True)

    host: str = Field(..., description="Host name where the failure happened")
    timestamp: datetime = Field(..., description="UTC time the record was created")
    exception_message: str = Field(default="", description="Message of the captured exception")
    stack_trace: str = Field(default="", description="Formatted traceback of the captured exception")
    elapsed_ms: int = Field(default=0, ge=0, description="Time spent before the failure, in milliseconds")
