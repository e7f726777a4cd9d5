"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class LogTextRequest(BaseModel):
    """Raw log text to parse or render."""

    text: str
    strict: Optional[bool] = None  # None = server default


class EventResponse(BaseModel):
    """Single parsed event."""

    kind: str  # EventKind name, e.g. "ACTOR_DEATH"
    tag: str  # Event tag as written in the log
    timestamp: datetime
    fields: dict[str, Any]


class ParseResponse(BaseModel):
    """Parsed events in log order."""

    events: list[EventResponse]
    total: int
    skipped: int  # Lines of known events that failed to parse


class RenderStatsResponse(BaseModel):
    """Counters from one rendering pass."""

    events: int
    suppressed: int
    skipped: int


class RenderResponse(BaseModel):
    """Rendered RTF document."""

    rtf: str
    stats: RenderStatsResponse


class ResolveResponse(BaseModel):
    """Friendly name lookup result."""

    raw: str
    friendly: str


class StatusResponse(BaseModel):
    """Server status."""

    status: str
    version: str
    friendly_names: int
    strict: bool


class ParseErrorDetail(BaseModel):
    """Hard parse failure details."""

    message: str
    line: Optional[str] = None  # Offending raw log line


class ParseErrorResponse(BaseModel):
    """Hard parse failure in strict mode."""

    detail: ParseErrorDetail
