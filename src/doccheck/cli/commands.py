"""CLI command implementations"""

import json
from typing import Annotated, Optional

import typer

from doccheck.config import Settings, load_config
from doccheck.core.models import BlockKindEnum, CheckResult, Document
from doccheck.core.pipeline import run_check, run_check_text, run_extract
from doccheck.core.report import format_json, format_text, summarize


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_blocks(doc: Document) -> None:
    """Print each code block's classification to stderr (verbose mode)."""
    for section in doc.sections:
        for i, block in enumerate(section.blocks):
            if block.kind == BlockKindEnum.code:
                typer.echo(
                    f"  {doc.path or '-'}:{block.line} [{section.title or '(preamble)'}] "
                    f"block {i}: {block.sub_kind.value}",
                    err=True,
                )


def _echo_results(results: list[CheckResult], fmt: str) -> dict[str, int]:
    """Print results in the requested format and return the summary counts."""
    counts = summarize(results)
    if fmt == "json":
        typer.echo(format_json(results))
        return counts
    text = format_text(results)
    if text:
        typer.echo(text)
    typer.echo(
        f"Checked {counts['files']} document(s) - "
        f"{counts['warnings']} warning(s), "
        f"{counts['errors']} malformed"
    )
    return counts


def check_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to check; '-' reads stdin")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="Output format: text or json")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Echo block classifications")] = False,
    unverified: Annotated[bool, typer.Option("--report-unverified", help="Report claims next to unknown blocks")] = False,
    no_fail: Annotated[bool, typer.Option("--no-fail-on-warning", help="Exit 0 even when warnings are found")] = False,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    nesting: Annotated[Optional[int], typer.Option("--max-nesting", help="Deepest heading level that starts a section")] = None,
    ):
    """Cross-check prose claims against the code blocks next to them."""
    settings = _settings(overrides={
        "output_format": fmt, "verbose": verbose or None, "report_unverified": unverified or None,
        "fail_on_warning": False if no_fail else None, "parser_config": parser, "max_nesting": nesting,
    })
    on_document = _echo_blocks if settings.verbose else None

    if path == "-":
        text = typer.get_text_stream("stdin").read()
        results = [run_check_text(text, settings, on_document=on_document)]
    else:
        results = run_check(path, settings, on_document)
    if not results:
        typer.echo(f"No markdown files found under: {path}", err=True)
        raise typer.Exit(1)

    counts = _echo_results(results, settings.output_format)
    if counts["errors"] or (settings.fail_on_warning and counts["warnings"]):
        raise typer.Exit(1)


def extract_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to extract from")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    nesting: Annotated[Optional[int], typer.Option("--max-nesting", help="Deepest heading level that starts a section")] = None,
    ):
    """Print the sections and classified blocks of each document as JSON."""
    settings = _settings(overrides={"parser_config": parser, "max_nesting": nesting})
    try:
        docs = run_extract(path, settings)
    except RuntimeError as e:
        _fail(str(e))
    if not docs:
        typer.echo(f"No markdown files found under: {path}", err=True)
        raise typer.Exit(1)
    typer.echo(json.dumps([d.model_dump(mode="json") for d in docs], indent=2))
