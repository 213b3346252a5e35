"""Convert markdown text into a structured Document"""

from pathlib import Path
from typing import Optional

from doccheck.core.extract.blocks import tokens_to_blocks
from doccheck.core.extract.fences import assert_fences_closed
from doccheck.core.extract.sections import group_sections, section_heading
from doccheck.core.models import Document, ParsedDoc, Section
from doccheck.core.parse import parse_file, parse_text
from doccheck.core.utils.tokens import split_lines


def extract_doc(parsed: ParsedDoc, max_nesting: int = 6) -> Document:
    """Convert a ParsedDoc into sections of classified blocks.

    Raises MalformedInputError if any code fence is left open.
    """
    source_lines = split_lines(parsed.markdown)
    path = str(parsed.path) if parsed.path else None
    assert_fences_closed(parsed.tokens, parsed.line_offset, path)

    sections = []
    for group in group_sections(parsed.tokens, max_nesting):
        title, level, body = section_heading(group, max_nesting)
        sections.append(Section(
            title=title,
            level=level,
            blocks=tuple(tokens_to_blocks(body, source_lines, parsed.line_offset)),
        ))

    return Document(path=path, frontmatter=parsed.frontmatter, sections=tuple(sections))


def extract_text(
    text: str,
    parser_config: str = 'gfm-like',
    max_nesting: int = 6,
    path: Optional[Path] = None,
    ) -> Document:
    """Parse and extract in-memory markdown text."""
    return extract_doc(parse_text(text, parser_config, path), max_nesting)


def extract_file(path: Path, parser_config: str = 'gfm-like', max_nesting: int = 6) -> Document:
    """Parse and extract a markdown file."""
    return extract_doc(parse_file(path, parser_config), max_nesting)
