"""
Command-line interface for task classification.

Usage:
    # Single task
    task-triage "Fix the bug in the system" --description "Login page crashes"

    # JSON Lines batch: one {"title": ..., "description": ...} object per line
    task-triage --input tasks.jsonl --output results.jsonl
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple
import structlog

from task_triage.classification.classifier import classify_batch, classify_task
from task_triage.logging_config import setup_logging


logger = structlog.get_logger(__name__)


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def read_tasks(input_path: Path) -> List[Tuple[str, str]]:
    """
    Read (title, description) pairs from a JSON Lines file.

    Blank lines are skipped. A missing description is treated as "".

    Args:
        input_path: Path to .jsonl file

    Returns:
        List of (title, description) tuples

    Raises:
        ValueError: On malformed lines or non-string fields
    """
    tasks = []

    with open(input_path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue

            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{input_path}:{line_number}: invalid JSON ({e.msg})") from e

            if not isinstance(record, dict):
                raise ValueError(f"{input_path}:{line_number}: expected a JSON object")

            title = record.get("title")
            description = record.get("description", "")
            if not isinstance(title, str) or not isinstance(description, str):
                raise ValueError(
                    f"{input_path}:{line_number}: 'title' and 'description' must be strings"
                )

            tasks.append((title, description))

    logger.info("tasks_loaded", path=str(input_path), count=len(tasks))
    return tasks


def write_output(results: List[dict], output_path: Optional[Path], format: str = "jsonl"):
    """
    Write results to file.

    Args:
        results: List of classification results
        output_path: Output file path (None for stdout)
        format: Output format ("json" or "jsonl")
    """
    if not output_path:
        if format == "jsonl":
            for result in results:
                print(json.dumps(result, ensure_ascii=False))
        else:
            print(json.dumps(results, ensure_ascii=False, indent=2))
        return

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        if format == "jsonl":
            for result in results:
                f.write(json.dumps(result, ensure_ascii=False) + "\n")
        else:
            json.dump(results, f, ensure_ascii=False, indent=2)

    logger.info("output_written", path=str(output_path), count=len(results))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-triage",
        description="Task Triage CLI - categorize, prioritize and extract entities from task text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single task
  %(prog)s "Schedule a meeting with John tomorrow"

  # With description
  %(prog)s "Pay invoice" --description "Materials for site B, urgent"

  # Batch from JSON Lines, save to file
  %(prog)s --input tasks.jsonl --output results.json
        """
    )

    parser.add_argument(
        "title",
        nargs="?",
        default=None,
        help="Task title (omit when using --input)"
    )

    parser.add_argument(
        "--description",
        "-d",
        type=str,
        default="",
        help="Task description (default: empty)"
    )

    parser.add_argument(
        "--input",
        "-i",
        type=str,
        default=None,
        help="JSON Lines file with one {\"title\", \"description\"} object per line"
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout). Format auto-detected from extension (.json or .jsonl)"
    )

    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["json", "jsonl"],
        default="jsonl",
        help="Output format (default: jsonl)"
    )

    return parser


# ============================================================================
# MAIN CLI
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # stdout carries the results
    setup_logging(stream=sys.stderr)

    if args.input and args.title is not None:
        print("Error: give either a title or --input, not both", file=sys.stderr)
        return 1

    if not args.input and args.title is None:
        print("Error: a title or --input is required", file=sys.stderr)
        return 1

    try:
        if args.input:
            input_path = Path(args.input)
            if not input_path.is_file():
                print(f"Error: File not found: {input_path}", file=sys.stderr)
                return 1
            results = classify_batch(read_tasks(input_path))
        else:
            results = [classify_task(args.title, args.description)]

        output_path = Path(args.output) if args.output else None

        # Auto-detect format from file extension
        if output_path and args.format == "jsonl" and output_path.suffix == ".json":
            format = "json"
        else:
            format = args.format

        write_output([r.model_dump(mode="json") for r in results], output_path, format)

    except Exception as e:
        logger.error("cli_failed", error=str(e), exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
