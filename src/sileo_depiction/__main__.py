"""CLI entry-point for sileo_depiction.

Usage:
    python -m sileo_depiction tab <package-dir> --tab details|changes|contact [--out FILE]
    python -m sileo_depiction depiction <package-dir> [--tint-color C] [--header-image URL] [--out FILE]
    python -m sileo_depiction validate <instance.json> [schema_name]

Global options (before the subcommand):
    --api-base URL     screenshot API base (overrides DEPICTION_API_BASE)
    -v, --verbose      debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import jsonschema

from sileo_depiction import __version__
from sileo_depiction.api import (
    TAB_CHOICES,
    render_depiction,
    render_tab,
    validate_instance,
)
from sileo_depiction.config import settings
from sileo_depiction.constants import DepictionConstants
from sileo_depiction.contracts.load import DEFAULT_SCHEMA, validate_file
from sileo_depiction.model.package import RecordError
from sileo_depiction.utils.exit_codes import ExitCode
from sileo_depiction.utils.json_norm import stable_json_dump

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sileo-depiction",
        description="Build native Sileo depictions from package metadata.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "--api-base",
        dest="api_base",
        default=None,
        help="Base URL screenshots are served from.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Verbose output.",
    )
    sub = p.add_subparsers(dest="command")

    # ── tab ─────────────────────────────────────────────────────────
    tab_p = sub.add_parser("tab", help="Render a single depiction tab.")
    tab_p.add_argument("package_dir", type=Path, help="Package data folder.")
    tab_p.add_argument(
        "--tab",
        choices=TAB_CHOICES,
        default="details",
        help="Which tab to render (default: details).",
    )
    _add_output_args(tab_p)

    # ── depiction ───────────────────────────────────────────────────
    dep_p = sub.add_parser("depiction", help="Render the full tabbed depiction.")
    dep_p.add_argument("package_dir", type=Path, help="Package data folder.")
    dep_p.add_argument("--tint-color", dest="tint_color", default=None)
    dep_p.add_argument("--header-image", dest="header_image", default=None)
    _add_output_args(dep_p)

    # ── validate ────────────────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Validate a rendered JSON file against a bundled schema.",
    )
    val_p.add_argument("instance", type=Path, help="Path to the JSON file to validate.")
    val_p.add_argument(
        "schema_name",
        nargs="?",
        default=DEFAULT_SCHEMA,
        help=f"Schema filename (default: {DEFAULT_SCHEMA}).",
    )
    return p


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write JSON here instead of stdout.",
    )
    p.add_argument(
        "--check",
        action="store_true",
        default=False,
        help="Validate the output against the depiction schema before writing.",
    )


def _constants(args: argparse.Namespace) -> DepictionConstants:
    constants = settings.constants()
    if args.api_base:
        constants = replace(constants, api=args.api_base.rstrip("/"))
    return constants


def _emit(result: dict, args: argparse.Namespace) -> int:
    if args.check:
        try:
            validate_instance(result, DEFAULT_SCHEMA)
        except jsonschema.ValidationError as e:
            print(f"FAIL: {e.message}", file=sys.stderr)
            return ExitCode.VIOLATION

    if args.out is None:
        stable_json_dump(result, sys.stdout)
    else:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        with args.out.open("w", encoding="utf-8") as f:
            stable_json_dump(result, f)
        logger.info(f"Wrote {args.out}")
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    # Exit code contract:
    #   1 = schema violation
    #   2 = unreadable instance / unknown schema
    try:
        validate_file(args.instance, args.schema_name)
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an :class:`ExitCode`."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return ExitCode.ERROR

    if args.command == "validate":
        return _handle_validate(args)

    constants = _constants(args)
    try:
        if args.command == "tab":
            logger.debug(f"Rendering {args.tab} tab for {args.package_dir}")
            result = render_tab(args.package_dir, args.tab, constants=constants)
        else:
            logger.debug(f"Rendering depiction for {args.package_dir}")
            result = render_depiction(
                args.package_dir,
                constants=constants,
                tint_color=args.tint_color,
                header_image=args.header_image,
            )
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except RecordError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    return _emit(result, args)


if __name__ == "__main__":
    raise SystemExit(main())
