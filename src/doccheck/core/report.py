"""Rendering of check results as text lines or JSON records"""

import json

from doccheck.core.models import CheckResult, Finding, SeverityEnum


def format_finding(finding: Finding) -> str:
    """Return one 'path:line: severity: [section] block N: message' line."""
    where = f"{finding.path}:{finding.line}" if finding.path else f"line {finding.line}"
    section = finding.section or "(preamble)"
    return f"{where}: {finding.severity.value}: [{section}] block {finding.block_index}: {finding.message}"


def format_text(results: list[CheckResult]) -> str:
    """Render findings and per-document errors, one per line."""
    lines = []
    for r in results:
        if r.error:
            lines.append(f"{r.path}: error: {r.error}")
        lines.extend(format_finding(f) for f in r.findings)
    return "\n".join(lines)


def format_json(results: list[CheckResult]) -> str:
    """Render results as a JSON list of key-value records."""
    return json.dumps([r.model_dump(mode="json") for r in results], indent=2)


def summarize(results: list[CheckResult]) -> dict[str, int]:
    """Count checked files, malformed files, warnings, and info findings."""
    findings = [f for r in results for f in r.findings]
    return {
        "files": len(results),
        "errors": sum(1 for r in results if r.error),
        "warnings": sum(1 for f in findings if f.severity == SeverityEnum.warning),
        "info": sum(1 for f in findings if f.severity == SeverityEnum.info),
    }
