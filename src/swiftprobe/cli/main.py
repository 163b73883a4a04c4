"""CLI entrypoint for swiftprobe."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from swiftprobe import __version__
from swiftprobe.catalog import load_catalog, validate_documents
from swiftprobe.config import load_config
from swiftprobe.constants.branding import CLI_DESCRIPTION
from swiftprobe.constants.catalog import DOCUMENT_KINDS, VALID_CATALOG_FORMATS
from swiftprobe.exceptions import ConfigError, DocumentParseError, SwiftProbeError
from swiftprobe.exceptions.validation import format_errors
from swiftprobe.probe import probe_workspace
from swiftprobe.reporting import BannerReporter, CatalogReporter, render_catalog_json
from swiftprobe.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="swiftprobe",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect = subparsers.add_parser("detect", help="Detect a Swift/Xcode project and print the session banner")
    detect.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Directory to probe (default: current directory)",
    )
    detect.add_argument("-c", "--config", type=Path, help="Explicit config file (none is read by default)")
    detect.add_argument("--no-version", action="store_true", help="Skip the Swift toolchain version query")
    detect.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")

    catalog = subparsers.add_parser("catalog", help="List skill, command and reference documents")
    catalog.add_argument("-r", "--root", type=Path, required=True, help="Knowledge-base root path")
    catalog.add_argument("-c", "--config", type=Path, help="Explicit config file")
    catalog.add_argument(
        "-k",
        "--kind",
        action="append",
        choices=DOCUMENT_KINDS,
        default=None,
        help="Only list documents of this kind (repeat flag for multiple values)",
    )
    catalog.add_argument(
        "--output-format",
        choices=sorted(VALID_CATALOG_FORMATS),
        default="text",
        help="Output format: text (default) or json",
    )
    catalog.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")

    validate = subparsers.add_parser("validate-docs", help="Lint document frontmatter without listing")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Knowledge-base root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    validate.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if args.command == "detect":
        return _handle_detect(args)
    if args.command == "catalog":
        return _handle_catalog(args)
    if args.command == "validate-docs":
        return _handle_validate_docs(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_detect(args: argparse.Namespace) -> int:
    """Probe the root and print the banner; silent when no project is found."""
    root: Path = args.root if args.root is not None else Path.cwd()

    validation_errors = preflight_validate(root, args.config, include_default_config=False)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = load_config(root, args.config, use_default_file=False)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    report = probe_workspace(root, config, query_toolchain=not args.no_version)
    output = BannerReporter(report).render()
    if output:
        print(output)
    return 0


def _handle_catalog(args: argparse.Namespace) -> int:
    validation_errors = preflight_validate(args.root, args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.root, args.config)
        records = load_catalog(args.root, config, kinds=args.kind)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except DocumentParseError as exc:
        print(f"Document error: {exc}", file=sys.stderr)
        return 1
    except SwiftProbeError as exc:
        print(f"Catalog error: {exc}", file=sys.stderr)
        return 1

    if args.output_format == "json":
        print(render_catalog_json(records))
    else:
        print(CatalogReporter(records).render())
    return 0


def _handle_validate_docs(args: argparse.Namespace) -> int:
    """Run config + document validation and report results."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    errors = validate_documents(args.root, config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Documents are valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
