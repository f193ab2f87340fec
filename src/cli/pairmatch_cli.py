# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command line entry point for affinity index matching."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt
from rich.style import Style

from pairmatch.loader import InputAccessError, load_corpora
from pairmatch.model import Record
from pairmatch.parser import ParseError
from pairmatch.pipeline import PipelineResult, run_pipeline

logger = logging.getLogger(__name__)

NO_MATCH_TEXT = "No alternative pair"
MATCH_STYLE = Style(color="green")
TIMING_STYLE = Style(color="cyan")


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="pairmatch",
        description="Match Russian lines to English lines by affinity index.",
    )
    parser.add_argument(
        "--ru", required=False, help="Path to the Russian strings file."
    )
    parser.add_argument(
        "--en",
        required=False,
        help="Path to the English strings file (text|comment per line).",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort when an English line has no comment field.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def run(
    argv: list[str],
    stdout: TextIO,
    stderr: TextIO,
    stdin: TextIO | None = None,
) -> int:
    """Run the matching command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.
        stdin: Stream used to prompt for paths missing from ``argv``.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger("pairmatch").setLevel(logging.DEBUG)

    prompt_console = Console(file=stderr, force_terminal=False)
    ru_path = args.ru or _prompt_path(
        "Enter path for russian strings", console=prompt_console, stdin=stdin
    )
    en_path = args.en or _prompt_path(
        "Enter path for english strings", console=prompt_console, stdin=stdin
    )
    if not ru_path or not en_path:
        logger.warning(f"Input path missing (ru={ru_path!r} en={en_path!r})")
        stderr.write("Both input paths are required\n")
        return 2

    try:
        russian_lines, english_lines = load_corpora(Path(ru_path), Path(en_path))
    except InputAccessError as exc:
        stderr.write(f"Failed to read input: {exc}\n")
        return 2

    result = run_pipeline(russian_lines, english_lines)
    _write_errors(errors=result.errors, stderr=stderr)
    if result.errors and args.strict:
        logger.warning(
            f"Aborting on malformed input (errors={len(result.errors)} path={en_path})"
        )
        stderr.write(f"Malformed lines in {en_path}; aborting\n")
        return 2

    if args.format == "json":
        _write_json(result=result, stdout=stdout)
    else:
        _write_text(result=result, stdout=stdout)
    return 0


def _prompt_path(prompt: str, console: Console, stdin: TextIO | None) -> str:
    """Ask for an input path interactively."""
    answer = Prompt.ask(prompt, console=console, stream=stdin)
    return answer.strip()


def _write_errors(errors: list[ParseError], stderr: TextIO) -> None:
    """Write skipped English lines to stderr.

    Args:
        errors: Malformed line reports.
        stderr: Standard error stream.
    """
    for error in errors:
        stderr.write(
            f"parse_error: line={error.line_number} message={error.message} "
            f"content={error.line!r}\n"
        )


def _write_text(result: PipelineResult, stdout: TextIO) -> None:
    """Write one block per Russian record followed by the elapsed time.

    Args:
        result: Pipeline result.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    for item in result.results:
        if item.match is None:
            console.print(
                f"{item.record}\n{NO_MATCH_TEXT}\n",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
        else:
            console.print(
                f"{item.record}\n{item.match}\n",
                style=MATCH_STYLE,
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
    console.print(
        f"Execution Time: {round(result.elapsed_ms)} ms",
        style=TIMING_STYLE,
        markup=False,
        highlight=False,
    )


def _record_payload(record: Record | None) -> dict[str, Any] | None:
    if record is None:
        return None
    return {"language": record.language, **asdict(record)}


def _write_json(result: PipelineResult, stdout: TextIO) -> None:
    """Write the pipeline result in JSON format.

    Args:
        result: Pipeline result.
        stdout: Standard output stream.
    """
    payload = {
        "results": [
            {
                "record": _record_payload(item.record),
                "match": _record_payload(item.match),
                "matched": item.matched,
            }
            for item in result.results
        ],
        "errors": [asdict(error) for error in result.errors],
        "elapsed_ms": result.elapsed_ms,
    }
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(payload, indent=2, ensure_ascii=False, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
