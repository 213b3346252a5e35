"""Cross-checking of prose claims against neighbouring code blocks"""

import re
from typing import Optional

from doccheck.core.models import (
    Block,
    BlockKindEnum,
    ClaimEnum,
    Document,
    Finding,
    Section,
    SeverityEnum,
    SubKindEnum,
)


# Success phrases that mention errors must not read as failure claims.
NEUTRALIZE_RE = re.compile(
    r'\b(?:without(?:\s+any)?|with\s+no|no|zero|never)\s+'
    r'(?:compiler\s+|compile\s+|compilation\s+|runtime\s+)?'
    r'(?:errors?|exceptions?|warnings?|problems?|issues?|throwing|throws?|crashing|failing)\b'
    r'(?:\s+(?:an?|any)\s+(?:\w+\s+)?exceptions?\b)?'
    r"|\b(?:does\s*n[o']t|do\s*n[o']t|won't|will\s+not)\s+(?:throw|raise|crash)\w*"
)

CLAIM_PATTERNS: list[tuple[ClaimEnum, re.Pattern]] = [
    (ClaimEnum.fails, re.compile(
        r"\b(?:does\s*n[o']t|do\s*n[o']t|won't|will\s+not|would\s*n[o']t|can\s*n[o']t|cannot|fails?\s+to)"
        r"\s+(?:even\s+)?(?:compile|build|work|run)\b"
        r"|\bfail(?:s|ed|ing)?\b"
        r"|\berrors?\b"
        r"|\bnot\s+(?:valid|allowed|legal)\b"
    )),
    (ClaimEnum.throws, re.compile(
        r"\b(?:throw(?:s|n|ing)?|rais(?:e|es|ed|ing))\b"
        r"|\bexceptions?\b"
        r"|\bcrash(?:es|ed)?\b"
    )),
    (ClaimEnum.compiles, re.compile(
        r"\b(?:compil(?:es|ed)|works?|worked|runs?|succeeds?|succeeded|builds?)\b"
        r"|\bis\s+(?:valid|allowed|legal)\b"
        r"|\bcleanly\b"
    )),
]

# Literal error text quoted in prose: diagnostic codes and exception type names.
ERROR_CODE_RE = re.compile(r'\b[A-Z]{2,4}\d{3,5}\b')
EXCEPTION_NAME_RE = re.compile(r'`((?:[\w.]+\.)?\w+(?:Exception|Error))`')


def detect_claim(text: str) -> Optional[ClaimEnum]:
    """Return the behavior a prose block asserts, or None when it makes no claim."""
    normalized = NEUTRALIZE_RE.sub(' cleanly ', text.lower())
    for claim, pattern in CLAIM_PATTERNS:
        if pattern.search(normalized):
            return claim
    return None


def quoted_error_text(text: str) -> list[str]:
    """Return error codes and backticked exception names mentioned in prose."""
    return list(dict.fromkeys(ERROR_CODE_RE.findall(text) + EXCEPTION_NAME_RE.findall(text)))


def _compare(claim: ClaimEnum, prose: Block, code: Block) -> Optional[tuple[SeverityEnum, str]]:
    """Return (severity, message) when claim and code disagree, else None."""
    if code.sub_kind == SubKindEnum.error_transcript:
        if claim == ClaimEnum.compiles:
            return SeverityEnum.warning, "prose says the code compiles but the block is an error transcript"
        missing = [t for t in quoted_error_text(prose.text) if t not in code.text]
        if missing:
            return SeverityEnum.warning, f"error text {', '.join(missing)} not found in the adjacent transcript"
    return None


def check_section(section: Section, report_unverified: bool = False) -> list[Finding]:
    """Check every adjacent (prose, code) pair in a section and return all findings."""
    findings: list[Finding] = []
    blocks = section.blocks

    for i, block in enumerate(blocks):
        if block.kind != BlockKindEnum.code:
            continue
        for j in (i - 1, i + 1):
            if not 0 <= j < len(blocks) or blocks[j].kind != BlockKindEnum.prose:
                continue
            prose = blocks[j]
            claim = detect_claim(prose.text)
            if claim is None:
                continue
            if block.sub_kind in (None, SubKindEnum.unknown):
                # Only a failure claim needs a transcript to back it up.
                if report_unverified and claim != ClaimEnum.compiles:
                    findings.append(Finding(
                        section=section.title,
                        block_index=i,
                        line=block.line,
                        severity=SeverityEnum.info,
                        message=f"'{claim.value}' claim on line {prose.line} is not backed by an error transcript",
                    ))
                continue
            mismatch = _compare(claim, prose, block)
            if mismatch:
                severity, message = mismatch
                findings.append(Finding(
                    section=section.title,
                    block_index=i,
                    line=block.line,
                    severity=severity,
                    message=f"{message} (line {prose.line})",
                ))

    return findings


def check_document(doc: Document, report_unverified: bool = False) -> list[Finding]:
    """Check all sections of a document; findings carry the document path."""
    return [
        f.model_copy(update={"path": doc.path})
        for section in doc.sections
        for f in check_section(section, report_unverified)
    ]
