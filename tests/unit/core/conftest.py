"""Shared fixtures for core unit tests"""

import pytest
from markdown_it import MarkdownIt


SAMPLE_MD = """\
Preamble paragraph.

# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```csharp
var v = new Vehicle();
```

    indented code

| a | b |
|---|---|
| 1 | 2 |
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return MarkdownIt("gfm-like", options_update={"linkify": False})


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(parser):
    return parser.parse(SAMPLE_MD)


@pytest.fixture(name="sample_lines")
def sample_lines_fixture():
    return SAMPLE_MD.splitlines(keepends=True)
