"""Data models for extracted documents, blocks, and check findings"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class BlockKindEnum(str, Enum):
    """Top-level kind of a content block"""
    code = "code"
    prose = "prose"


class SubKindEnum(str, Enum):
    """Apparent role of a code block, assigned by the classifier"""
    declaration = "declaration"
    constructor_call = "constructor-call"
    error_transcript = "error-transcript"
    unknown = "unknown"


class ClaimEnum(str, Enum):
    """Behavior asserted by a prose block about neighbouring code"""
    compiles = "compiles"
    fails = "fails"
    throws = "throws"


class SeverityEnum(str, Enum):
    info = "info"
    warning = "warning"


class Block(BaseModel):
    """A single prose or code block in source order."""
    model_config = ConfigDict(frozen=True)

    kind: BlockKindEnum
    text: str
    line: int                               # 1-based source line of the block start
    info: str = ""                          # fence info string (code only)
    sub_kind: Optional[SubKindEnum] = None  # None for prose


class Section(BaseModel):
    """Heading title plus the blocks that follow it, up to the next section heading."""
    model_config = ConfigDict(frozen=True)

    title: str                              # empty for content before the first heading
    level: Optional[int] = None
    blocks: tuple[Block, ...] = ()


class Document(BaseModel):
    """Immutable parse result for one markdown input."""
    model_config = ConfigDict(frozen=True)

    path: Optional[str] = None
    frontmatter: dict[str, Any] = {}
    sections: tuple[Section, ...] = ()

    def code_blocks(self) -> list[Block]:
        return [b for s in self.sections for b in s.blocks if b.kind == BlockKindEnum.code]


class Finding(BaseModel):
    """A single consistency-check result."""
    model_config = ConfigDict(frozen=True)

    section: str
    block_index: int
    line: int
    severity: SeverityEnum
    message: str
    path: Optional[str] = None


class CheckResult(BaseModel):
    """Outcome of checking one file; error is set when the document could not be parsed."""
    path: str
    findings: list[Finding] = []
    error: Optional[str] = None


@dataclass
class ParsedDoc:
    """Internal parse result carrying markdown-it tokens; not exported."""
    path:        Optional[Path]
    markdown:    str          # body only (frontmatter stripped)
    line_offset: int          # number of lines removed with the frontmatter
    frontmatter: dict[str, Any]
    tokens:      list         # markdown-it Token objects
