import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from deltaguard.components.attributes import SanitizeAttributesInput, run_sanitize
from deltaguard.components.inserts import ConvertOpsInput, run_convert
from deltaguard.domain.html import encode_html, encode_link, encode_whitespaces
from deltaguard.domain.links import SanitizerOptions
from deltaguard.rules import Rules, RulesError, load_rules, options_from_rules
from deltaguard.rules.loader import RULES_PATH_ENV

logger = logging.getLogger("deltaguard.cli")


class InputError(Exception):
    pass


def read_json(source: str | None) -> Any:
    if source is None or source == "-":
        content = sys.stdin.read()
    else:
        path = Path(source)
        if not path.exists():
            raise InputError(f"File {source} not found.")
        content = path.read_text(encoding="utf-8")

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON input: {e}") from e


def get_options(args: argparse.Namespace) -> SanitizerOptions:
    explicit = args.rules or os.environ.get(RULES_PATH_ENV)
    try:
        rules = load_rules(args.rules)
    except FileNotFoundError:
        if explicit:
            raise
        # No project rules.yaml: built-in defaults apply
        logger.debug("No rules file found, using defaults")
        rules = Rules()
    return options_from_rules(rules, strict=True if args.strict else None)


def handle_sanitize(args: argparse.Namespace) -> None:
    attributes = read_json(args.file)
    output = run_sanitize(SanitizeAttributesInput(attributes, get_options(args)))
    print(json.dumps(output.attributes, indent=2, ensure_ascii=False))

    if args.report:
        for rejection in output.rejections:
            print(f"{rejection.path}: {rejection.code} ({rejection.message})", file=sys.stderr)


def handle_convert(args: argparse.Namespace) -> None:
    delta = read_json(args.file)
    ops = delta.get("ops") if isinstance(delta, dict) else delta
    output = run_convert(ConvertOpsInput(ops, get_options(args)))
    if output.skipped:
        logger.info("Skipped %d ops with unsupported inserts.", output.skipped)
    print(json.dumps([op.to_dict() for op in output.ops], indent=2, ensure_ascii=False))


def handle_encode(args: argparse.Namespace) -> None:
    text = encode_link(args.text) if args.link else encode_html(args.text)
    if args.whitespace:
        text = encode_whitespaces(text)
    print(text)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sanitize rich-text delta attributes")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # sanitize
    sanitize_parser = subparsers.add_parser("sanitize", help="Sanitize a JSON attribute map")
    sanitize_parser.add_argument("file", nargs="?", help="JSON file (default: stdin)")
    sanitize_parser.add_argument(
        "--report", action="store_true", help="List dropped attributes on stderr"
    )

    # convert
    convert_parser = subparsers.add_parser("convert", help="Convert delta ops to insert ops")
    convert_parser.add_argument("file", nargs="?", help="JSON delta file (default: stdin)")

    for sub in (sanitize_parser, convert_parser):
        sub.add_argument("--rules", help="Path to rules.yaml")
        sub.add_argument("--strict", action="store_true", help="Validate passthrough formats")

    # encode
    encode_parser = subparsers.add_parser("encode", help="Entity-encode text")
    encode_parser.add_argument("text", help="Text to encode")
    encode_parser.add_argument("--link", action="store_true", help="Encode for an href")
    encode_parser.add_argument(
        "--whitespace", action="store_true", help="Preserve runs of spaces"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    handlers = {
        "sanitize": handle_sanitize,
        "convert": handle_convert,
        "encode": handle_encode,
    }

    try:
        handlers[args.command](args)
    except (InputError, RulesError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
