"""Shared markdown-it token utilities"""

import re


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def start_line(token, offset: int = 0) -> int:
    """Return the 1-based source line where a block token starts."""
    return (token.map[0] if token.map else 0) + offset + 1


def split_lines(text: str) -> list[str]:
    """Split text into lines (keeping ends) the way markdown-it counts them."""
    lines = re.split(r'\r\n?|\n', text)
    tail = [lines[-1]] if lines[-1] else []
    return [line + '\n' for line in lines[:-1]] + tail
