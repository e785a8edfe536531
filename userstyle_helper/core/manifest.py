"""
Manifest (package.json) helpers.

`update_manifest` is a pure transform; `load_manifest` / `save_manifest` are
the only functions that touch disk.
"""
from __future__ import annotations

import copy
import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping

from jsonschema import Draft7Validator

PLACEHOLDER_NAMESPACE = "github.com/your-username/your-theme"

__all__ = [
    "PLACEHOLDER_NAMESPACE",
    "ManifestError",
    "load_manifest",
    "save_manifest",
    "update_manifest",
    "lint_manifest",
]


class ManifestError(ValueError):
    """Raised when the manifest file is missing, unreadable, or not a JSON object."""


def load_manifest(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ManifestError(f"Manifest not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestError(f"Manifest is not valid UTF-8: {path} ({exc})") from exc
    except OSError as exc:
        raise ManifestError(f"Manifest could not be read: {path} ({exc})") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest is not valid JSON: {path} ({exc})") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest must be a JSON object: {path}")
    return data


def save_manifest(path: Path, manifest: Mapping[str, Any]) -> None:
    """Write the manifest the way npm does: 2-space indent, trailing newline."""
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def update_manifest(
    manifest: Mapping[str, Any],
    version: str,
    namespace: str = PLACEHOLDER_NAMESPACE,
) -> Dict[str, Any]:
    """
    Return a copy of `manifest` with userStyle.version set to `version`.

    A missing userStyle record is created with `namespace`; an existing one
    keeps its namespace and any other keys.
    """
    updated = copy.deepcopy(dict(manifest))
    user_style = updated.get("userStyle")
    if not isinstance(user_style, dict):
        updated["userStyle"] = {"namespace": namespace, "version": version}
    else:
        user_style["version"] = version
    return updated


def _schema() -> Dict[str, Any]:
    text = resources.files("userstyle_helper").joinpath("schemas/manifest.schema.json").read_text(encoding="utf-8")
    return json.loads(text)


def lint_manifest(manifest: Mapping[str, Any]) -> List[str]:
    """Validate against the bundled schema; return `path: message` warnings."""
    schema = _schema()
    Draft7Validator.check_schema(schema)
    errors = sorted(Draft7Validator(schema).iter_errors(dict(manifest)), key=lambda e: list(map(str, e.path)))
    return [f"{'/'.join(map(str, err.path)) or '<root>'}: {err.message}" for err in errors]
