from pathlib import Path

import pytest

from userstyle_helper.core.compiler import CompileError, SourceNotFoundError, compile_stylesheet


def test_compiles_with_relative_imports(project: Path):
    css = compile_stylesheet(project / "src" / "main.scss")
    assert "body" in css
    assert "margin: 4px" in css


def test_compressed_output(project: Path):
    css = compile_stylesheet(project / "src" / "main.scss", output_style="compressed")
    assert "\n  " not in css.strip()


def test_extra_include_paths(tmp_path: Path):
    shared = tmp_path / "shared"
    shared.mkdir()
    (shared / "_vars.scss").write_text("$w: 10px;\n", encoding="utf-8")
    src = tmp_path / "main.scss"
    src.write_text('@import "vars";\na { width: $w; }\n', encoding="utf-8")
    assert "width: 10px" in compile_stylesheet(src, include_paths=[shared])


def test_missing_source(tmp_path: Path):
    with pytest.raises(SourceNotFoundError, match="Source file not found"):
        compile_stylesheet(tmp_path / "nope.scss")


def test_compiler_error_is_wrapped(tmp_path: Path):
    src = tmp_path / "broken.scss"
    src.write_text("a { color: $undefined; }\n", encoding="utf-8")
    with pytest.raises(CompileError):
        compile_stylesheet(src)


def test_unknown_output_style(project: Path):
    with pytest.raises(ValueError, match="output_style"):
        compile_stylesheet(project / "src" / "main.scss", output_style="pretty")
