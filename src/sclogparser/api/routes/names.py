"""Friendly name lookup API routes."""

from fastapi import APIRouter, Depends, Query

from sclogparser.api.dependencies import get_friendly_names
from sclogparser.api.schemas import ResolveResponse
from sclogparser.data.friendly_names import FriendlyNames

router = APIRouter(prefix="/api/names", tags=["names"])


@router.get("/resolve", response_model=ResolveResponse)
def resolve_name(
    raw: str = Query(..., description="Raw asset or display code"),
    names: FriendlyNames = Depends(get_friendly_names),
) -> ResolveResponse:
    """Resolve a raw code to its display name."""
    return ResolveResponse(raw=raw, friendly=names.resolve(raw))
