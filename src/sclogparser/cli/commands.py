"""CLI commands for rendering and inspecting Game.log files."""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from sclogparser.config.logging import get_logger, setup_logging
from sclogparser.config.settings import Settings
from sclogparser.core.errors import LogParseError
from sclogparser.core.models import (
    ActorDeathEntry,
    EventKind,
    HostilityEventEntry,
    LogEntry,
    VehicleDestructionEntry,
)
from sclogparser.data.friendly_names import FriendlyNames
from sclogparser.parser.log_parser import iter_entries
from sclogparser.render.stream_renderer import EventStreamRenderer


def read_log_text(path: Path) -> str:
    """Read a whole log file; the game may still be writing to it."""
    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        return f.read()


def _load_settings(args: argparse.Namespace) -> Optional[Settings]:
    """Build settings from args and print validation errors."""
    settings = Settings.from_args(
        log_path=args.file,
        names_path=getattr(args, "names", None),
        output_path=getattr(args, "output", None),
        strict=getattr(args, "strict", False),
        portable=args.portable,
    )
    errors = settings.validate()
    if errors:
        for error in errors:
            print(f"Error: {error}", file=sys.stderr)
        return None
    return settings


def _read_or_report(settings: Settings) -> Optional[str]:
    try:
        return read_log_text(settings.log_path)
    except OSError as e:
        print(f"Error: Could not read log file {settings.log_path}: {e}", file=sys.stderr)
        return None


def _summarize(entry: LogEntry, names: FriendlyNames) -> str:
    """One plain-text line per entry for the parse command."""
    ts = entry.timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(entry, ActorDeathEntry):
        detail = (
            f"{names(entry.killer_name)} killed {names(entry.victim_name)} "
            f"with {names(entry.weapon_name)} ({entry.damage_type}) in {names(entry.zone)}"
        )
    elif isinstance(entry, VehicleDestructionEntry):
        detail = (
            f"{names(entry.caused_by_name)} destroyed {names(entry.vehicle_name)} "
            f"of {names(entry.driver_name)} (level {entry.from_level} -> {entry.to_level})"
        )
    elif isinstance(entry, HostilityEventEntry):
        detail = f"{names(entry.source_name)} hit {names(entry.target_name)}"
        if entry.child_name:
            detail += f" (child element : {names(entry.child_name)})"
    else:
        detail = f"Unknown event: {entry.kind}"
    return f"{ts} [{entry.kind.value}] {detail}"


def cmd_render(args: argparse.Namespace) -> int:
    """Render a log file as an RTF event stream."""
    logger = get_logger()
    settings = _load_settings(args)
    if settings is None:
        return 1

    text = _read_or_report(settings)
    if text is None:
        return 1

    names = FriendlyNames.load(settings.names_path)
    renderer = EventStreamRenderer(names=names, strict=settings.strict)
    try:
        rtf = renderer.render(text)
    except LogParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if settings.output_path:
        try:
            settings.output_path.write_text(rtf, encoding="ascii")
        except OSError as e:
            print(f"Error: Could not write output file {settings.output_path}: {e}", file=sys.stderr)
            return 1
        logger.info(f"Wrote {renderer.stats.events} events to {settings.output_path}")
    else:
        sys.stdout.write(rtf)
        sys.stdout.write("\n")

    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    """Print parsed events, one per line."""
    settings = _load_settings(args)
    if settings is None:
        return 1

    text = _read_or_report(settings)
    if text is None:
        return 1

    names = FriendlyNames.load(settings.names_path)
    kind_filter = EventKind[args.kind] if args.kind else None

    count = 0
    try:
        for entry in iter_entries(text, strict=settings.strict):
            if kind_filter is not None and entry.kind is not kind_filter:
                continue
            if args.json:
                print(json.dumps(entry.to_dict()))
            else:
                print(_summarize(entry, names))
            count += 1
    except LogParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.json:
        print(f"\n{count} events")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the HTTP API server."""
    logger = get_logger()

    # Import here to avoid loading FastAPI when not needed
    try:
        import uvicorn
        from sclogparser.api.app import create_app
    except ImportError:
        logger.error("FastAPI and Uvicorn are required for the serve command.")
        logger.error("Install with: pip install fastapi uvicorn[standard]")
        return 1

    names_path = Path(args.names) if args.names else None
    if names_path and not names_path.is_file():
        print(f"Error: Friendly-name file not found: {names_path}", file=sys.stderr)
        return 1

    app = create_app(names=FriendlyNames.load(names_path), strict=args.strict)
    logger.info(f"Starting server on {args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_level="warning")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sclogparser",
        description="Star Citizen Game.log combat event parser",
    )
    parser.add_argument(
        "--portable",
        action="store_true",
        help="Keep the application log under ./data in the project root",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # render command
    render_parser = subparsers.add_parser("render", help="Render a log file as RTF")
    render_parser.add_argument(
        "file",
        type=str,
        help="Game.log file or the folder containing it",
    )
    render_parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write RTF to this file instead of stdout",
    )

    # parse command
    parse_parser = subparsers.add_parser("parse", help="List parsed events")
    parse_parser.add_argument(
        "file",
        type=str,
        help="Game.log file or the folder containing it",
    )
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per event",
    )
    parse_parser.add_argument(
        "--kind",
        choices=[kind.name for kind in EventKind],
        help="Only show events of this kind",
    )

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start HTTP API server")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run server on (default: 8000)",
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )

    for sub in (render_parser, parse_parser, serve_parser):
        sub.add_argument(
            "--names",
            type=str,
            help="Friendly-name JSON file (default: bundled table)",
        )
        sub.add_argument(
            "--strict",
            action="store_true",
            help="Stop at the first line of a known event that fails to parse",
        )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(portable=args.portable, verbose=args.verbose)

    commands = {
        "render": cmd_render,
        "parse": cmd_parse,
        "serve": cmd_serve,
    }

    cmd_func = commands.get(args.command)
    if cmd_func is None:
        print(f"Unknown command: {args.command}")
        return 1

    return cmd_func(args)


if __name__ == "__main__":
    sys.exit(main())
