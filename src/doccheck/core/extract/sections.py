"""Token grouping into document sections by heading depth"""

from doccheck.core.utils.tokens import heading_level


def group_sections(tokens: list, max_nesting: int) -> list[list]:
    """Split tokens into sections; each top-level heading <= max_nesting starts a new one."""
    sections: list[list] = [[]]

    for tok in tokens:
        level = heading_level(tok) if tok.level == 0 else None
        if level is not None and level <= max_nesting and sections[-1]:
            sections.append([])
        sections[-1].append(tok)

    return [s for s in sections if s]


def section_heading(group: list, max_nesting: int) -> tuple[str, int | None, list]:
    """Return (title, level, body_tokens) for a token group from group_sections.

    The preamble before the first heading has an empty title and no level.
    """
    level = heading_level(group[0])
    if level is None or level > max_nesting or group[0].level != 0:
        return '', None, group
    title = group[1].content.strip() if len(group) > 1 and group[1].type == 'inline' else ''
    return title, level, group[3:]
