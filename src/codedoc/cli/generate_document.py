"""CLI command turning source trees into a paginated PDF listing."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from codedoc.config import GenerationRequest
from codedoc.errors import GenerationError
from codedoc.generator import generate_document
from codedoc.pagination.models import PageMode
from codedoc.rendering.pdf_assembler import PDFAssembler
from codedoc.sources.scanner import collect_sources

load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a paginated source code listing")
    parser.add_argument("--path", required=True, nargs="+", help="Source files or directories")
    parser.add_argument("--output", default="output.pdf", help="Output PDF path")
    parser.add_argument("--lines", type=int, default=None, help="Lines per page (default: 50)")
    parser.add_argument("--header", default=None, help="Header text printed on every page")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in PageMode],
        default=None,
        help="Page selection mode (default: all)",
    )
    parser.add_argument("--pages", default=None, help="Page range for custom mode, e.g. 1-3,7")
    parser.add_argument("--keep-comments", action="store_true", help="Do not strip comments")
    parser.add_argument("--keep-blank-lines", action="store_true", help="Do not drop blank lines")
    parser.add_argument(
        "--font-file",
        default=None,
        help="TrueType/OpenType font; required for text outside Latin-1 such as CJK or Cyrillic",
    )
    return parser.parse_args(argv)


def _build_request(args: argparse.Namespace) -> GenerationRequest:
    return GenerationRequest.from_env(
        page_size=args.lines,
        header_text=args.header,
        page_mode=args.mode,
        custom_page_spec=args.pages,
        strip_comments=not args.keep_comments,
        remove_blank_lines=not args.keep_blank_lines,
    )


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = _parse_args(argv)

    try:
        request = _build_request(args)
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        print(json.dumps({"error": {"stage": "config", "message": str(exc)}}, ensure_ascii=True, indent=2))
        return 2

    scan = collect_sources(args.path)
    assembler = PDFAssembler(page_size=request.page_size, fontfile=args.font_file)
    scan_failures = [failure.to_dict() for failure in scan.failures]

    try:
        report = generate_document(scan.units, request, assembler, Path(args.output))
    except GenerationError as exc:
        LOGGER.error("Generation failed: %s", exc)
        payload = {
            "paths": args.path,
            "request": request.to_dict(),
            "error": exc.to_dict(),
            "failures": scan_failures,
        }
        print(json.dumps(payload, ensure_ascii=True, indent=2))
        return 1

    payload = {"paths": args.path, "request": request.to_dict(), **report.to_dict()}
    payload["failures"] = scan_failures + payload["failures"]
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
