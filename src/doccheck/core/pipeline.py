"""Pipeline step functions: discover, extract, and check orchestration"""

from pathlib import Path
from typing import Callable, Optional

from doccheck.config import Settings
from doccheck.core.check import check_document
from doccheck.core.extract.extract import extract_file, extract_text
from doccheck.core.models import CheckResult, Document, Finding
from doccheck.core.parse import discover_files


STDIN_LABEL = "<stdin>"


def check_text(text: str, settings: Settings = None) -> list[Finding]:
    """Extract and check in-memory markdown. Raises MalformedInputError for open fences."""
    settings = settings or Settings()
    doc = extract_text(text, settings.parser_config, settings.max_nesting)
    return check_document(doc, settings.report_unverified)


def _check_one(
    label: str,
    load: Callable[[], Document],
    settings: Settings,
    on_document: Optional[Callable[[Document], None]],
    ) -> CheckResult:
    """Extract and check one input; a parse failure is recorded instead of raised."""
    try:
        doc = load()
    except ValueError as e:
        return CheckResult(path=label, error=str(e))
    if on_document:
        on_document(doc)
    findings = [
        f if f.path else f.model_copy(update={"path": label})
        for f in check_document(doc, settings.report_unverified)
    ]
    return CheckResult(path=label, findings=findings)


def run_check(
    path: str,
    settings: Settings,
    on_document: Optional[Callable[[Document], None]] = None,
    ) -> list[CheckResult]:
    """Check every markdown file under path. Returns one CheckResult per file.

    A malformed file is recorded with its error and no findings; the remaining
    files are still checked.
    """
    return [
        _check_one(
            str(p),
            lambda p=p: extract_file(p, settings.parser_config, settings.max_nesting),
            settings,
            on_document,
        )
        for p in discover_files(Path(path))
    ]


def run_check_text(
    text: str,
    settings: Settings,
    label: str = STDIN_LABEL,
    on_document: Optional[Callable[[Document], None]] = None,
    ) -> CheckResult:
    """Check in-memory markdown as a single labelled input."""
    return _check_one(
        label,
        lambda: extract_text(text, settings.parser_config, settings.max_nesting),
        settings,
        on_document,
    )


def run_extract(path: str, settings: Settings) -> list[Document]:
    """Parse every markdown file under path into a Document."""
    docs = []
    for p in discover_files(Path(path)):
        try:
            docs.append(extract_file(p, settings.parser_config, settings.max_nesting))
        except Exception as e:
            raise RuntimeError(f"Failed to extract {p}: {e}") from e
    return docs
