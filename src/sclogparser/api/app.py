"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from sclogparser.api import dependencies
from sclogparser.api.routes import events, names as names_routes
from sclogparser.api.schemas import StatusResponse
from sclogparser.data.friendly_names import FriendlyNames
from sclogparser.version import __version__


def create_app(
    names: Optional[FriendlyNames] = None,
    strict: bool = False,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        names: Friendly-name table (default: bundled table)
        strict: Default strict-parsing mode for requests that don't set it

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="SC Log Parser API",
        description="Star Citizen Game.log combat event parser",
        version=__version__,
    )

    # CORS middleware for local tools and browser front ends
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if names is None:
        names = FriendlyNames.load()

    # Dependency overrides for table and policy injection
    app.dependency_overrides[dependencies.get_friendly_names] = lambda: names
    app.dependency_overrides[dependencies.get_default_strict] = lambda: strict

    app.include_router(events.router)
    app.include_router(names_routes.router)

    app.state.names = names
    app.state.strict = strict

    @app.get("/api/status", response_model=StatusResponse)
    def get_status(request: Request) -> StatusResponse:
        """Get server status."""
        return StatusResponse(
            status="ok",
            version=__version__,
            friendly_names=len(request.app.state.names),
            strict=request.app.state.strict,
        )

    return app
