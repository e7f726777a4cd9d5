"""FastAPI dependency injection utilities.

Provides shared dependencies for API routes, configured by app factory.
"""

from sclogparser.data.friendly_names import FriendlyNames


def get_friendly_names() -> FriendlyNames:
    """Dependency injection for the friendly-name table - set by app factory.

    This function is replaced by app.py's create_app() with the loaded
    table via dependency_overrides.

    Raises:
        NotImplementedError: If not configured (should never happen in production)
    """
    raise NotImplementedError("Friendly names not configured")


def get_default_strict() -> bool:
    """Server-wide strict parsing default - set by app factory."""
    return False
