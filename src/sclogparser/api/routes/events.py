"""Event parsing and rendering API routes."""

from fastapi import APIRouter, Depends, HTTPException

from sclogparser.api.dependencies import get_default_strict, get_friendly_names
from sclogparser.api.schemas import (
    EventResponse,
    LogTextRequest,
    ParseErrorResponse,
    ParseResponse,
    RenderResponse,
    RenderStatsResponse,
)
from sclogparser.core.errors import LogParseError
from sclogparser.core.models import LogEntry
from sclogparser.data.friendly_names import FriendlyNames
from sclogparser.parser.log_parser import iter_entries
from sclogparser.render.stream_renderer import EventStreamRenderer

router = APIRouter(prefix="/api/events", tags=["events"])

_ERROR_RESPONSES = {422: {"model": ParseErrorResponse}}


def _to_response(entry: LogEntry) -> EventResponse:
    fields = entry.to_dict()
    fields.pop("kind")
    fields.pop("timestamp")
    return EventResponse(
        kind=entry.kind.name,
        tag=entry.kind.value,
        timestamp=entry.timestamp,
        fields=fields,
    )


def _parse_error(e: LogParseError) -> HTTPException:
    return HTTPException(status_code=422, detail={"message": e.message, "line": e.line})


@router.post("/parse", response_model=ParseResponse, responses=_ERROR_RESPONSES)
def parse_events(
    request: LogTextRequest,
    default_strict: bool = Depends(get_default_strict),
) -> ParseResponse:
    """Parse log text into typed events."""
    strict = default_strict if request.strict is None else request.strict
    skipped = 0

    def count_skip(_: LogParseError) -> None:
        nonlocal skipped
        skipped += 1

    try:
        events = [
            _to_response(entry)
            for entry in iter_entries(request.text, strict=strict, on_error=count_skip)
        ]
    except LogParseError as e:
        raise _parse_error(e)

    return ParseResponse(events=events, total=len(events), skipped=skipped)


@router.post("/render", response_model=RenderResponse, responses=_ERROR_RESPONSES)
def render_events(
    request: LogTextRequest,
    names: FriendlyNames = Depends(get_friendly_names),
    default_strict: bool = Depends(get_default_strict),
) -> RenderResponse:
    """Render log text as an RTF event stream."""
    strict = default_strict if request.strict is None else request.strict
    renderer = EventStreamRenderer(names=names, strict=strict)

    try:
        rtf = renderer.render(request.text)
    except LogParseError as e:
        raise _parse_error(e)

    return RenderResponse(
        rtf=rtf,
        stats=RenderStatsResponse(
            events=renderer.stats.events,
            suppressed=renderer.stats.suppressed,
            skipped=renderer.stats.skipped,
        ),
    )
