"""Structural classification of code blocks by apparent intent"""

import re

from doccheck.core.models import Block, BlockKindEnum, SubKindEnum


ERROR_PATTERNS = [
    re.compile(r'\berror\s+[A-Z]{1,4}\d{2,5}\b', re.IGNORECASE),                       # error CS7036
    re.compile(r'^\s*(?:[\w.]+\.)?\w*(?:Exception|Error)\s*:', re.MULTILINE),           # System.FooException: ...
    re.compile(r'^\s*(?:fatal\s+)?error\s*:', re.IGNORECASE | re.MULTILINE),
    re.compile(r'\bunhandled exception\b', re.IGNORECASE),
    re.compile(r'\bexception in thread\b', re.IGNORECASE),
    re.compile(r'^Traceback \(most recent call last\)', re.MULTILINE),
    re.compile(r'\bcompil(?:er|ation) error\b', re.IGNORECASE),
    re.compile(r'\bthrow\s+new\b'),
    re.compile(r'\bthrow\s*;'),
]

_MODIFIERS = r'(?:public|private|protected|internal|static|override|virtual|abstract|sealed|partial|readonly)'

DECLARATION_PATTERNS = [
    re.compile(r'\b(?:class|struct|interface|record|enum)\s+[A-Za-z_]\w*'),
    re.compile(rf'^\s*(?:{_MODIFIERS}\s+)+[A-Za-z_][\w<>,.\[\]? ]*\(', re.MULTILINE),    # public Vehicle(...)
    re.compile(rf'^\s*(?:{_MODIFIERS}\s+)+[\w<>,.\[\]?]+\s+\w+\s*\{{\s*(?:get|set|init)\b', re.MULTILINE),
]

CONSTRUCTOR_CALL_PATTERNS = [
    re.compile(r'\bnew\s+[A-Za-z_][\w.<>,]*\s*[({\[]'),                                  # new Vehicle(...), new Vehicle { }
    re.compile(r'\bnew\s*\('),                                                           # target-typed new()
]

RULES: list[tuple[SubKindEnum, list[re.Pattern]]] = [
    (SubKindEnum.error_transcript, ERROR_PATTERNS),
    (SubKindEnum.declaration, DECLARATION_PATTERNS),
    (SubKindEnum.constructor_call, CONSTRUCTOR_CALL_PATTERNS),
]


def classify(text: str) -> SubKindEnum:
    """Return the sub-kind of a code snippet; first matching rule wins, else unknown."""
    for sub_kind, patterns in RULES:
        if any(p.search(text) for p in patterns):
            return sub_kind
    return SubKindEnum.unknown


def classify_block(block: Block) -> SubKindEnum | None:
    """Classify a code Block; prose blocks have no sub-kind."""
    if block.kind != BlockKindEnum.code:
        return None
    return classify(block.text)
