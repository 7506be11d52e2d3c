"""CLI entry-point for shape_validator.

Usage:
    python -m shape_validator check <schema> <instance>
    python -m shape_validator check <schema> <instance> --json
    python -m shape_validator check <schema> <instance> --strict --max-depth 64
    python -m shape_validator codes [--json]

Schemas and instances may be JSON or YAML (``.yaml`` / ``.yml``) files.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from shape_validator import __version__
from shape_validator.contracts.load import load_document
from shape_validator.core.config import ValidatorConfig
from shape_validator.engine import Validator
from shape_validator.exceptions import ShapeValidatorError
from shape_validator.messages import catalog
from shape_validator.model import ExitCode
from shape_validator.utils.json_norm import stable_json_dump

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="shape-validator",
        description="Validate JSON/YAML documents against declarative schemas.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    sub = p.add_subparsers(dest="command")

    # ── check ────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Validate an instance document against a schema.")
    check_p.add_argument("schema", type=Path, help="Path to the schema document.")
    check_p.add_argument("instance", type=Path, help="Path to the document to validate.")
    check_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        help="Emit the validation report as JSON on stdout.",
    )
    check_p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject malformed schema keywords instead of ignoring them.",
    )
    check_p.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum nested schema evaluations (default: env or 128).",
    )

    # ── codes ────────────────────────────────────────────────────────
    codes_p = sub.add_parser("codes", help="List the error-code catalog.")
    codes_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        help="Emit the catalog as JSON on stdout.",
    )
    return p


def _config_from_args(args: argparse.Namespace) -> ValidatorConfig:
    overrides = {}
    if args.strict is not None:
        overrides["strict_schemas"] = args.strict
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    return ValidatorConfig.from_env(**overrides)


def _handle_check(args: argparse.Namespace) -> int:
    try:
        config = _config_from_args(args)
        schema = load_document(args.schema)
        instance = load_document(args.instance)
        report = Validator(config).run(schema, instance)
    except (ShapeValidatorError, RecursionError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json_out:
        stable_json_dump(report.to_dict(), sys.stdout)
    elif report.is_valid:
        print("OK")
    else:
        for v in report.violations:
            print(f"FAIL: {v.code.value} ({v.kind.value}): {v.message}")

    _logger.debug("%s: %d violation(s)", args.instance, len(report))
    return ExitCode.VALID if report.is_valid else ExitCode.INVALID


def _handle_codes(args: argparse.Namespace) -> int:
    entries = catalog()
    if args.json_out:
        stable_json_dump({"codes": entries}, sys.stdout)
    else:
        width = max(len(e["code"]) for e in entries)
        for e in entries:
            print(f"{e['code']:<{width}}  {e['message']}")
    return ExitCode.VALID


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = valid, 1 = violations, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command == "check":
        return _handle_check(args)
    if args.command == "codes":
        return _handle_codes(args)

    parser.print_help(sys.stderr)
    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
