# src/main.py - v3
"""CLI entry point: fingerprint, purge, config commands.

Usage:
    reportcache fingerprint <student.json>
    reportcache purge [--path DIR]
    reportcache config
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from reportcache.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="reportcache",
        description=f"reportcache v{__version__} - student report artifact cache",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- fingerprint ---
    p_fp = subparsers.add_parser(
        "fingerprint", help="Print the cache fingerprint of a student JSON file",
    )
    p_fp.add_argument("file", type=Path, help="Path to student JSON ('-' for stdin)")
    p_fp.set_defaults(func=_cmd_fingerprint)

    # --- purge ---
    p_purge = subparsers.add_parser(
        "purge", help="Create the cache directory and remove stale artifacts",
    )
    p_purge.add_argument(
        "--path", type=Path, default=None,
        help="Cache directory (default: CACHE_PATH setting)",
    )
    p_purge.set_defaults(func=_cmd_purge)

    # --- config ---
    p_config = subparsers.add_parser(
        "config", help="Show effective settings",
    )
    p_config.set_defaults(func=_cmd_config)

    return parser


def _cmd_fingerprint(args: argparse.Namespace) -> int:
    from reportcache.cache.fingerprint import compute_fingerprint
    from reportcache.core.models import Student

    if str(args.file) == "-":
        raw = sys.stdin.read()
    else:
        if not args.file.is_file():
            logger.error("File not found: %s", args.file)
            return 1
        raw = args.file.read_text(encoding="utf-8")

    student = Student.model_validate(json.loads(raw))
    print(compute_fingerprint(student))
    return 0


def _cmd_purge(args: argparse.Namespace) -> int:
    from reportcache.cache.artifact_store import ArtifactStore
    from reportcache.config.settings import load_settings

    path = args.path if args.path is not None else load_settings().cache_path
    removed = ArtifactStore(path).initialize()
    print(f"Purged {removed} file(s) from {path}")
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    from reportcache.config.settings import load_settings

    settings = load_settings()
    dumped = settings.model_dump(mode="json")
    print(json.dumps(dumped, indent=2))
    return 0


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


if __name__ == "__main__":
    sys.exit(main())
