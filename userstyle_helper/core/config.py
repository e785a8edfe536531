"""Config loading for userstyle_helper (optional TOML file + env overrides)."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomllib

from userstyle_helper.core.compiler import OUTPUT_STYLES
from userstyle_helper.core.manifest import PLACEHOLDER_NAMESPACE

DEFAULT_CONFIG_PATHS = [
    Path("userstyle.toml"),
    Path(".userstyle.toml"),
]


class ConfigError(ValueError):
    """Raised when the config file cannot be parsed or holds invalid values."""


def _resolve(root: Path, value: Path) -> Path:
    return value if value.is_absolute() else root / value


@dataclass
class BuildConfig:
    root: Path
    source: Path
    output: Path
    manifest: Path
    namespace: str = PLACEHOLDER_NAMESPACE
    output_style: str = "expanded"
    include_paths: List[Path] = field(default_factory=list)
    no_write: bool = False

    @classmethod
    def load(cls, root: Path, override_path: Optional[Path] = None) -> "BuildConfig":
        env_root = os.environ.get("USERSTYLE_ROOT")
        if env_root:
            root = Path(env_root).resolve()
        cfg_path = override_path
        if cfg_path is None:
            for candidate in DEFAULT_CONFIG_PATHS:
                if (root / candidate).exists():
                    cfg_path = root / candidate
                    break
        data: Dict[str, Any] = {}
        if cfg_path and cfg_path.exists():
            try:
                with cfg_path.open("rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"invalid config {cfg_path}: {exc}") from exc

        source = Path(os.environ.get("USERSTYLE_SOURCE", data.get("source", "src/main.scss")))
        output = Path(os.environ.get("USERSTYLE_OUTPUT", data.get("output", "dist/main.css")))
        manifest = Path(os.environ.get("USERSTYLE_MANIFEST", data.get("manifest", "package.json")))
        output_style = os.environ.get("USERSTYLE_OUTPUT_STYLE", data.get("output_style", "expanded"))
        if output_style not in OUTPUT_STYLES:
            raise ConfigError(f"output_style must be one of {', '.join(OUTPUT_STYLES)}; got '{output_style}'")
        namespace = data.get("namespace", PLACEHOLDER_NAMESPACE)
        if not isinstance(namespace, str) or not namespace:
            raise ConfigError("namespace must be a non-empty string")
        include_paths = data.get("include_paths", []) or []
        if not isinstance(include_paths, list):
            raise ConfigError("include_paths must be a list of paths")

        return cls(
            root=root,
            source=_resolve(root, source),
            output=_resolve(root, output),
            manifest=_resolve(root, manifest),
            namespace=namespace,
            output_style=output_style,
            include_paths=[_resolve(root, Path(p)) for p in include_paths],
            no_write=os.environ.get("USERSTYLE_NO_WRITE") == "1",
        )
