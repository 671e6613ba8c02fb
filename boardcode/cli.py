"""CLI entrypoints for boardcode commands."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path
from typing import List

from .config import ConfigError, load_config
from .document.clipboard import copy_code_block
from .document.render import DocumentRenderer
from .document.splitter import split_blocks
from .document.structure import extract_structure
from .hardware.fields import get_field
from .hardware.parser import HardwareConfigError
from .llm.runner import GenerationClient, GenerationError
from .logging import configure_logging, get_logger
from .models import CodeBlock, DocumentBlock, PeripheralItem, TableBlock
from .workspace import PLATFORM_PATH, Workspace


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    # Subcommands suppress their defaults so flags given before the command survive.
    def _default(value: object) -> object:
        return argparse.SUPPRESS if suppress_default else value

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=_default(False),
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=_default(False),
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=_default(None),
        help="Also write log records to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boardcode",
        description="Derive board peripherals and render generated firmware documents.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    peripherals_parser = subparsers.add_parser(
        "peripherals",
        help="List the peripherals detected in a hardware configuration.",
    )
    _add_logging_options(peripherals_parser, suppress_default=True)
    peripherals_parser.add_argument("config", help="Path to the hardware configuration JSON.")
    peripherals_parser.add_argument(
        "--common",
        action="store_true",
        help="Append the common peripheral catalog (System Tick, Watchdog, ...).",
    )
    peripherals_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the list as JSON.",
    )

    render_parser = subparsers.add_parser(
        "render",
        help="Split a generated document into blocks.",
    )
    _add_logging_options(render_parser, suppress_default=True)
    render_parser.add_argument("document", help="Path to the generated markdown document.")
    render_parser.add_argument(
        "--html",
        action="store_true",
        help="Print rendered HTML instead of a block summary.",
    )

    structure_parser = subparsers.add_parser(
        "structure",
        help="Show the project tree described by a generated document.",
    )
    _add_logging_options(structure_parser, suppress_default=True)
    structure_parser.add_argument("document", help="Path to the generated markdown document.")
    structure_parser.add_argument(
        "--platform",
        default=None,
        help="Platform identifier used for the fallback tree (e.g. STM32Cube, ESP-IDF).",
    )
    structure_parser.add_argument(
        "--config",
        default=None,
        help="Hardware configuration to read the platform identifier from.",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Request a firmware document from the generation service.",
    )
    _add_logging_options(generate_parser, suppress_default=True)
    generate_parser.add_argument("config", help="Path to the hardware configuration JSON.")
    generate_parser.add_argument(
        "--features",
        default=None,
        help="File with one feature requirement per line.",
    )
    generate_parser.add_argument(
        "--common",
        action="store_true",
        help="Include the common peripheral catalog in the active peripherals.",
    )
    generate_parser.add_argument(
        "--output",
        default=None,
        help="Write the generated document to this file instead of stdout.",
    )

    copy_parser = subparsers.add_parser(
        "copy-code",
        help="Copy a code block from a generated document to the clipboard.",
    )
    _add_logging_options(copy_parser, suppress_default=True)
    copy_parser.add_argument("document", help="Path to the generated markdown document.")
    copy_parser.add_argument(
        "--index",
        type=int,
        default=0,
        help="Zero-based index of the code block to copy.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_logging_options(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for boardcode commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )
    logger = get_logger("cli")

    try:
        settings = load_config(Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "peripherals":
        text = _read_text(parser, args.config)
        workspace = Workspace(text, settings=settings)
        if workspace.last_error:
            parser.exit(1, f"{workspace.last_error}\n")
        if args.common:
            workspace.add_common()
        _print_peripherals(workspace.peripherals, as_json=bool(args.json))
    elif args.command == "render":
        text = _read_text(parser, args.document)
        blocks = split_blocks(text)
        if args.html:
            print(DocumentRenderer().render(blocks))
        else:
            for line in _summarise_blocks(blocks):
                print(line)
    elif args.command == "structure":
        text = _read_text(parser, args.document)
        platform = args.platform
        if platform is None and args.config:
            value = get_field(_read_text(parser, args.config), PLATFORM_PATH)
            platform = value if isinstance(value, str) else None
        if platform is None:
            platform = settings.default_platform
        result = extract_structure(text, platform)
        print(result.text)
        if not result.extracted:
            print("\n* Structure inferred from SDK defaults (exact tree not found in output).")
    elif args.command == "generate":
        workspace = Workspace(_read_text(parser, args.config), settings=settings)
        if args.features:
            workspace.features = _read_text(parser, args.features)
        if args.common:
            workspace.add_common()
        client = GenerationClient.from_config(settings.llm)
        try:
            workspace.generate(client)
        except HardwareConfigError as exc:
            parser.exit(1, f"{exc}\n")
        except GenerationError as exc:
            parser.exit(1, f"Generation failed: {exc}\nRun with --verbose for more details.\n")
        document = workspace.document or ""
        if args.output:
            Path(args.output).write_text(document, encoding="utf-8")
            logger.info("Document written to %s", args.output)
        else:
            print(document)
    elif args.command == "copy-code":
        blocks = split_blocks(_read_text(parser, args.document))
        code_blocks = [block for block in blocks if isinstance(block, CodeBlock)]
        if not 0 <= args.index < len(code_blocks):
            parser.exit(1, f"No code block at index {args.index} ({len(code_blocks)} found)\n")
        if not copy_code_block(code_blocks[args.index]):
            parser.exit(1, "Clipboard is not available on this system\n")
        print(f"Copied code block {args.index} to clipboard")
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service.app import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _read_text(parser: argparse.ArgumentParser, path: str) -> str:
    try:
        return Path(path).expanduser().read_text(encoding="utf-8")
    except OSError as exc:
        parser.exit(1, f"Unable to read {path}: {exc}\n")


def _print_peripherals(items: List[PeripheralItem], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps([asdict(item) for item in items], indent=2))
        return
    if not items:
        print("No peripherals detected.")
        return
    for item in items:
        mark = "x" if item.selected else " "
        suffix = " (pinned)" if item.pinned else ""
        print(f"[{mark}] {item.identity} <{item.display_type}>{suffix}")


def _summarise_blocks(blocks: List[DocumentBlock]) -> List[str]:
    lines: List[str] = []
    for index, block in enumerate(blocks):
        if isinstance(block, CodeBlock):
            count = len(block.content.splitlines())
            lines.append(f"{index}: code ({block.language or 'text'}, {count} lines)")
        elif isinstance(block, TableBlock):
            lines.append(f"{index}: table ({len(block.headers)} columns, {len(block.rows)} rows)")
        else:
            first_line = block.text.split("\n", 1)[0]
            lines.append(f"{index}: prose {first_line[:60]!r}")
    return lines


if __name__ == "__main__":  # pragma: no cover
    main()
