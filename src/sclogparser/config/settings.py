"""Configuration and settings management."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Log file name written by the game client (in the LIVE/PTU folder)
LOG_FILE_NAME = "Game.log"


def resolve_log_path(user_path: str) -> Optional[Path]:
    """
    Resolve a user-provided path to the game log file.

    Handles:
    - Direct path to any log file (Game.log or a backup copy)
    - Path to the directory holding Game.log (e.g. StarCitizen/LIVE)

    Args:
        user_path: Any path the user provides

    Returns:
        Path to log file if found, None otherwise
    """
    path = Path(user_path.strip().strip('"'))

    if path.is_file():
        return path

    if path.is_dir():
        direct_log = path / LOG_FILE_NAME
        if direct_log.is_file():
            return direct_log

    return None


@dataclass
class Settings:
    """Application settings for one CLI invocation."""

    # Path to the game log file
    log_path: Optional[Path] = None

    # Friendly-name table; None means the bundled table
    names_path: Optional[Path] = None

    # Where to write rendered output; None means stdout
    output_path: Optional[Path] = None

    # Abort on the first unparseable line of a known event kind
    strict: bool = False

    # Keep the application log under ./data in the project root
    portable: bool = False

    @classmethod
    def from_args(
        cls,
        log_path: Optional[str] = None,
        names_path: Optional[str] = None,
        output_path: Optional[str] = None,
        strict: bool = False,
        portable: bool = False,
    ) -> "Settings":
        """
        Create settings from CLI arguments.

        Args:
            log_path: Game.log file or the directory containing it
            names_path: Friendly-name JSON file
            output_path: Output file for rendered RTF
            strict: Abort on hard parse errors
            portable: Keep the application log under ./data
        """
        resolved = None
        if log_path:
            # Keep the raw path when it cannot be resolved so validate() can report it
            resolved = resolve_log_path(log_path) or Path(log_path)

        return cls(
            log_path=resolved,
            names_path=Path(names_path) if names_path else None,
            output_path=Path(output_path) if output_path else None,
            strict=strict,
            portable=portable,
        )

    def validate(self) -> list[str]:
        """
        Validate settings.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.log_path is None:
            errors.append("No log file specified")
        elif not self.log_path.is_file():
            errors.append(f"Log file not found: {self.log_path}")

        if self.names_path and not self.names_path.is_file():
            errors.append(f"Friendly-name file not found: {self.names_path}")

        if self.output_path and not self.output_path.parent.exists():
            errors.append(f"Output directory does not exist: {self.output_path.parent}")

        return errors
