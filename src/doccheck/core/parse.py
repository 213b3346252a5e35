"""File discovery, frontmatter extraction, and markdown-it tokenization"""

import re
from pathlib import Path
from typing import Any, Optional

import yaml
from markdown_it import MarkdownIt

from doccheck.core.models import ParsedDoc


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str, int]:
    """Return (frontmatter_dict, body, removed_line_count) with YAML header removed.

    A leading '---' block that is not a YAML mapping is ordinary markdown
    (thematic breaks around a paragraph), so the text is returned untouched.
    """
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError:
            return {}, text, 0
        if isinstance(fm, dict):
            return fm, text[m.end():], m.group(0).count('\n')
    return {}, text, 0


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_text(text: str, parser_config: str = 'gfm-like', path: Optional[Path] = None) -> ParsedDoc:
    """Tokenize in-memory markdown text into a ParsedDoc."""
    frontmatter, body, offset = _strip_frontmatter(text)
    return ParsedDoc(
        path=path,
        markdown=body,
        line_offset=offset,
        frontmatter=frontmatter,
        tokens=_make_parser(parser_config).parse(body),
    )


def parse_file(path: Path, parser_config: str = 'gfm-like') -> ParsedDoc:
    """Read and tokenize a single markdown file."""
    return parse_text(path.read_text(encoding='utf-8'), parser_config, path)
