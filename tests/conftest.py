"""Root test configuration: shared tutorial fixtures"""

import pytest


TUTORIAL_MD = """\
---
title: Constructors
---

# Constructors

A constructor has the same name as its class.

## Default constructor

```csharp
public class Vehicle
{
    public Vehicle() { }
}
```

This works fine.

## Parameterized constructor

The following fails to compile because `Vehicle` has no matching constructor:

```csharp
var car = new Vehicle("red");
```

```
error CS1729: 'Vehicle' does not contain a constructor that takes 1 arguments
```

The compiler reports error CS1729.
"""

MISMATCH_MD = """\
# Singleton

```
Unhandled exception. System.InvalidOperationException: Instance already created
```

This compiles without errors.
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DOCCHECK_* environment settings from leaking into tests."""
    monkeypatch.delenv("DOCCHECK_VERBOSE", raising=False)


@pytest.fixture(name="tutorial_md")
def tutorial_md_fixture():
    return TUTORIAL_MD


@pytest.fixture(name="mismatch_md")
def mismatch_md_fixture():
    return MISMATCH_MD
