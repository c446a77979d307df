"""依存境界（core は api/calcs を import しない）の破りを検出するテスト。"""

from __future__ import annotations

import ast
from pathlib import Path


def _repo_root() -> Path:
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / "src").is_dir() and (parent / "tests").is_dir():
            return parent
    raise RuntimeError("repo root が見つからない")


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    out: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            out.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            out.add(node.module)
    return out


def _violations(root: Path, forbidden: tuple[str, ...]) -> list[str]:
    bad: list[str] = []
    for path in sorted(root.rglob("*.py")):
        for module in _imported_modules(path):
            if any(module == f or module.startswith(f + ".") for f in forbidden):
                bad.append(f"{path.relative_to(root)} -> {module}")
    return bad


def test_core_does_not_import_public_layers() -> None:
    core = _repo_root() / "src" / "shinkit" / "core"
    assert _violations(core, ("shinkit.api", "shinkit.calcs")) == []


def test_elements_and_layout_do_not_import_reactive() -> None:
    core = _repo_root() / "src" / "shinkit" / "core"
    forbidden = ("shinkit.core.reactive",)
    assert _violations(core / "elements", forbidden) == []
    assert _violations(core / "layout", forbidden) == []
