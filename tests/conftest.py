"""Shared fixtures for markcard tests"""

import os

import pytest


SAMPLE_MD = """\
# Intro

Welcome to **MarkCard**.

# c-a-r-d

## Second

- one
- two

```python
print("hi")
```

# c-a-r-d

| a | b |
|---|---|
| 1 | 2 |
| 3 | 4 |
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_file")
def sample_file_fixture(tmp_path):
    path = tmp_path / "deck.md"
    path.write_text(SAMPLE_MD, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host MARKCARD_* variables out of every test."""
    for name in list(os.environ):
        if name.startswith("MARKCARD_"):
            monkeypatch.delenv(name)
