"""CLI - Command line interface for ATS Checker."""

import asyncio
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown

from .config import AnalyzerConfig, load_config
from .tools import ATSAnalyzerTool, ResumeParserTool, ToolResult


console = Console()
err_console = Console(stderr=True)


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog="ats-checker",
        description="ATS Checker - score a resume against a job posting",
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output (debug logging)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Score a resume file against a job description")
    analyze_parser.add_argument("resume", help="Resume file (.pdf, .docx, .doc, .txt)")
    analyze_parser.add_argument("--job-title", "-t", required=True, help="Target job title")
    jd_group = analyze_parser.add_mutually_exclusive_group(required=True)
    jd_group.add_argument("--job-description", "-d", help="Job description text")
    jd_group.add_argument("--job-description-file", "-f", help="File containing the job description")
    analyze_parser.add_argument("--json", action="store_true", help="Print the raw analysis as JSON")

    parse_parser = subparsers.add_parser("parse", help="Extract structured fields from a resume file")
    parse_parser.add_argument("resume", help="Resume file (.pdf, .docx, .doc, .txt)")
    parse_parser.add_argument("--json", action="store_true", help="Print the parsed fields as JSON")

    return parser


def _load_config(path: str) -> AnalyzerConfig:
    if not path:
        return AnalyzerConfig()
    return load_config(path)


def _print_result(result: ToolResult, as_json: bool) -> int:
    if not result.success:
        err_console.print(f"Error: {result.error}", style="red")
        return 1
    if as_json:
        console.print_json(json.dumps(result.data))
    else:
        console.print(Markdown(result.output))
    return 0


def run(argv=None) -> int:
    """Parse *argv*, run the command and return the exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"Invalid configuration: {e}", style="red")
        return 1

    if args.command == "parse":
        tool = ResumeParserTool(workspace_dir=".", config=config)
        result = asyncio.run(tool.execute(path=args.resume))
        return _print_result(result, args.json)

    if args.job_description_file:
        jd_path = Path(args.job_description_file)
        if not jd_path.exists():
            err_console.print(f"Error: File not found: {jd_path}", style="red")
            return 1
        job_description = jd_path.read_text(encoding="utf-8")
    else:
        job_description = args.job_description

    tool = ATSAnalyzerTool(workspace_dir=".", config=config)
    result = asyncio.run(
        tool.execute(path=args.resume, job_title=args.job_title, job_description=job_description)
    )
    return _print_result(result, args.json)


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
