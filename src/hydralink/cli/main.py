# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the HydraLink command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from hydralink.catalog.checks import check_schema
from hydralink.catalog.loader import SchemaError, build_catalog, load_schema, merge_schemas
from hydralink.config.bootstrap import create_serializer
from hydralink.config.settings import SETTINGS_FILE_NAME, SettingsError, load_settings
from hydralink.errors import SerializerError
from hydralink.routing.router import RouteResolutionError

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the HydraLink CLI."""
    parser = argparse.ArgumentParser(
        prog="hydralink",
        description="HydraLink: JSON-LD/Hydra mapping for Python objects",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the consistency of the schema",
        description="Load the schema files named in the settings and report schema errors.",
    )
    check_parser.add_argument(
        "settings",
        nargs="?",
        default=SETTINGS_FILE_NAME,
        help=f"Path to the settings file (default: {SETTINGS_FILE_NAME})",
    )
    check_parser.add_argument(
        "--no-import",
        action="store_true",
        help="Do not import the classes named in the schema",
    )

    # context subcommand
    context_parser = subparsers.add_parser(
        "context",
        help="Print the JSON-LD context of a type",
        description="Print the JSON-LD context document served for a documented type.",
    )
    context_parser.add_argument("type", help="Semantic type name, e.g. Person")
    context_parser.add_argument(
        "settings",
        nargs="?",
        default=SETTINGS_FILE_NAME,
        help=f"Path to the settings file (default: {SETTINGS_FILE_NAME})",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "context":
        return _cmd_context(args)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    settings_path = Path(args.settings)

    try:
        settings = load_settings(settings_path)
        document = merge_schemas(load_schema(path) for path in settings.schema_files)
        build_catalog(document, import_classes=not args.no_import)
    except (SettingsError, SchemaError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not document.types:
        print("No types found in the schema.")
        return 0

    print(f"Checking {len(document.types)} type(s)...")
    result = check_schema(document)
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    for error in result.errors:
        print(f"Error: {error.message}", file=sys.stderr)

    if result.has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_context(args: argparse.Namespace) -> int:
    """Handle the context subcommand."""
    try:
        serializer = create_serializer(Path(args.settings), import_classes=False)
        context = serializer.context(args.type)
    except (SettingsError, SchemaError, SerializerError, RouteResolutionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(context, indent=4))
    return 0
