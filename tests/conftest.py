"""
Test bootstrap: make the repo importable without an install and give every
test a clean USERSTYLE_* / LOG_* environment.
"""
import json
import os
import sys
from pathlib import Path

import pytest

_ROOT = os.path.abspath(os.path.join(os.path.dirname(os.path.abspath(__file__)), os.pardir))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

_ENV_KEYS = (
    "USERSTYLE_ROOT",
    "USERSTYLE_SOURCE",
    "USERSTYLE_OUTPUT",
    "USERSTYLE_MANIFEST",
    "USERSTYLE_OUTPUT_STYLE",
    "USERSTYLE_NO_WRITE",
    "LOG_JSON",
    "LOG_REDACT",
    "LOG_REDACT_VALUES",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A minimal theme project: package.json plus src/main.scss with one partial."""
    manifest = {
        "name": "Foo",
        "description": "A dark theme",
        "author": "Jane",
        "repository": {"type": "git", "url": "https://github.com/jane/foo"},
        "homepage": "https://example.com/foo",
        "license": "MIT",
        "userStyle": {"namespace": "ns", "version": "old"},
    }
    (tmp_path / "package.json").write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    src = tmp_path / "src"
    src.mkdir()
    (src / "_spacing.scss").write_text("$gap: 4px;\n", encoding="utf-8")
    (src / "main.scss").write_text('@import "spacing";\nbody { margin: $gap; }\n', encoding="utf-8")
    return tmp_path
