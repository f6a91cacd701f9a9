"""CLI entrypoint for reading namespace metadata."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from .adapters import discover_adapter
from .config import ConfigError, load_config
from .failsafe import NamespaceReadError, raise_error, report_and_skip
from .logging import configure_logging
from .models import NamespaceRecord
from .reader import ReadOptions, read_namespaces


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cljsmeta",
        description="Extract documentation metadata from ClojureScript sources.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only log warnings and errors.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    read_parser = subparsers.add_parser(
        "read",
        help="Read namespaces and their publics as JSON.",
    )
    read_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the source directory (defaults to current directory).",
    )
    read_parser.add_argument(
        "--adapter",
        default=None,
        help="Name of the installed analysis adapter to use.",
    )
    read_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout.",
    )
    read_parser.add_argument(
        "--fail-fast",
        action="store_true",
        default=None,
        help="Abort on the first file that cannot be analyzed.",
    )
    return parser


def render_namespaces(namespaces: List[NamespaceRecord]) -> str:
    """Serialize namespaces as JSON, ordered by namespace name."""
    payload = [record.to_dict() for record in sorted(namespaces, key=lambda ns: ns.name)]
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for cljsmeta commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file)

    if args.command != "read":  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    try:
        config = load_config(Path(args.path))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    adapter_name = args.adapter or config.adapter
    fail_fast = config.fail_fast if args.fail_fast is None else args.fail_fast
    output = args.output or config.output

    try:
        options = ReadOptions(
            exception_handler=raise_error if fail_fast else report_and_skip,
            adapter_factory=discover_adapter(adapter_name),
        )
        namespaces = read_namespaces(args.path, options)
    except (FileNotFoundError, ValueError) as exc:
        parser.exit(1, f"{exc}\n")
    except NamespaceReadError as exc:
        parser.exit(1, f"cljsmeta read failed: {exc}\nRun with --verbose for more details.\n")
    except (RuntimeError, TypeError) as exc:
        parser.exit(1, f"{exc}\n")

    rendered = render_namespaces(namespaces)
    if output is None:
        sys.stdout.write(rendered + "\n")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered + "\n", encoding="utf-8")
    print(f"Wrote {len(namespaces)} namespace(s) to {output}")


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
