from __future__ import annotations

import ast
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[4]


def _iter_python_files(base: Path) -> list[Path]:
    files: list[Path] = []
    for path in base.rglob("*.py"):
        if "__pycache__" in path.parts:
            continue
        files.append(path)
    return files


def _collect_import_targets(path: Path, *, top_level_only: bool) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    nodes = tree.body if top_level_only else list(ast.walk(tree))
    targets: list[str] = []
    for node in nodes:
        if isinstance(node, ast.Import):
            for alias in node.names:
                targets.append(alias.name)
        elif isinstance(node, ast.ImportFrom) and node.module is not None:
            targets.append(node.module)
    return targets


def _collect_wildcard_imports(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    wildcards: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.ImportFrom):
            continue
        if any(alias.name == "*" for alias in node.names):
            wildcards.append(node.module or "<relative>")
    return wildcards


def test_dynamics_package_does_not_import_tests() -> None:
    violations: list[str] = []
    for path in _iter_python_files(REPO_ROOT / "dynamics"):
        for target in _collect_import_targets(path, top_level_only=False):
            if target == "tests" or target.startswith("tests."):
                violations.append(f"{path.relative_to(REPO_ROOT)} -> {target}")
    assert not violations, "dynamics must not import tests:\n" + "\n".join(violations)


def test_dynamics_api_has_no_top_level_implementation_imports() -> None:
    violations: list[str] = []
    for path in _iter_python_files(REPO_ROOT / "dynamics" / "api"):
        for target in _collect_import_targets(path, top_level_only=True):
            if target.startswith("dynamics.runtime") or target.startswith("dynamics.properties"):
                violations.append(f"{path.relative_to(REPO_ROOT)} -> {target}")
    assert (
        not violations
    ), "dynamics.api top-level imports must not depend on implementation modules:\n" + "\n".join(
        violations
    )


def test_no_wildcard_imports_in_dynamics() -> None:
    violations: list[str] = []
    for path in _iter_python_files(REPO_ROOT / "dynamics"):
        for module in _collect_wildcard_imports(path):
            violations.append(f"{path.relative_to(REPO_ROOT)} -> from {module} import *")
    assert not violations, "Wildcard imports are forbidden in dynamics:\n" + "\n".join(violations)
