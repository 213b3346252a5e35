"""Detection of code fences left open at the end of their container"""

from typing import Optional

from doccheck.core.errors import MalformedInputError
from doccheck.core.utils.tokens import start_line


def _content_lines(content: str) -> int:
    """Count the source lines held in a fence token's content."""
    return content.count('\n') + (1 if content and not content.endswith('\n') else 0)


def find_unterminated(tokens: list):
    """Return the first fence token with no closing delimiter, else None.

    markdown-it silently closes an open fence at the end of its container. A
    closed fence maps its opener, its content and its closer; an open one has no
    closer, so every mapped line after the opener is content.
    """
    for tok in tokens:
        if tok.type == 'fence' and tok.map:
            start, end = tok.map
            if _content_lines(tok.content) != end - start - 2:
                return tok
    return None


def assert_fences_closed(tokens: list, offset: int = 0, path: Optional[str] = None) -> None:
    """Raise MalformedInputError for the first unterminated fence."""
    tok = find_unterminated(tokens)
    if tok is not None:
        raise MalformedInputError(start_line(tok, offset), path)
