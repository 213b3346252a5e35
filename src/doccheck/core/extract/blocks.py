"""Token-to-Block conversion using source line positions"""

from doccheck.core.classify import classify_block
from doccheck.core.models import Block, BlockKindEnum
from doccheck.core.utils.tokens import start_line


LEAF_KIND_MAP: dict[str, BlockKindEnum] = {
    'paragraph_open': BlockKindEnum.prose,
    'heading_open':   BlockKindEnum.prose,
    'table_open':     BlockKindEnum.prose,
    'html_block':     BlockKindEnum.prose,
    'fence':          BlockKindEnum.code,
    'code_block':     BlockKindEnum.code,
}


def _source_slice(token, source_lines: list[str]) -> str:
    """Extract raw source for a block via token.map; fallback to token.content."""
    if token.map:
        start, end = token.map
        return ''.join(source_lines[start:end]).rstrip()
    return token.content.rstrip()


def tokens_to_blocks(tokens: list, source_lines: list[str], offset: int = 0) -> list[Block]:
    """Flatten a section's tokens into leaf prose and code Blocks in source order.

    Leaves nested in lists and blockquotes are included; container tokens are not.
    """
    blocks: list[Block] = []

    for tok in tokens:
        kind = LEAF_KIND_MAP.get(tok.type)
        if kind is None:
            continue

        if kind == BlockKindEnum.code:
            block = Block(
                kind=kind,
                text=tok.content.rstrip('\n'),
                line=start_line(tok, offset),
                info=tok.info.strip() if tok.type == 'fence' else '',
            )
            blocks.append(block.model_copy(update={"sub_kind": classify_block(block)}))
        else:
            blocks.append(Block(
                kind=kind,
                text=_source_slice(tok, source_lines),
                line=start_line(tok, offset),
            ))

    return blocks
