from __future__ import annotations

import ast
import os
from dataclasses import dataclass
from pathlib import Path

import pytest


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def require_arch_checks_enabled() -> None:
    """Skip architecture checks unless explicitly enabled."""
    if os.getenv("RELBRANCH_ARCH_CHECKS") != "1":
        pytest.skip("architecture checks are opt-in; set RELBRANCH_ARCH_CHECKS=1 to enable")


def package_root() -> Path:
    return Path(__file__).resolve().parents[2]


def iter_python_files(base: Path) -> list[Path]:
    return [p for p in sorted(base.rglob("*.py")) if "__pycache__" not in p.parts]


def parse_imports(path: Path) -> list[ImportRef]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    imports: list[ImportRef] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(ImportRef(module=alias.name, line=node.lineno))
            continue

        if isinstance(node, ast.ImportFrom):
            if node.level and node.level > 0:
                continue
            if node.module is None:
                continue
            imports.append(ImportRef(module=node.module, line=node.lineno))

    return imports


def matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def find_offenders(layer: str, forbidden: tuple[str, ...]) -> list[str]:
    root = package_root()
    offenders: list[str] = []
    for file_path in iter_python_files(root / layer):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, prefix) for prefix in forbidden):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")
    return offenders


def test_release_does_not_import_cli() -> None:
    require_arch_checks_enabled()

    offenders = find_offenders("release", ("relbranch.cli",))

    assert not offenders, "release -> cli dependency violations:\n" + "\n".join(offenders)


def test_core_stays_at_the_bottom() -> None:
    require_arch_checks_enabled()

    offenders = find_offenders(
        "core",
        (
            "relbranch.cli",
            "relbranch.release",
            "relbranch.git",
            "relbranch.output",
            "relbranch.platform",
        ),
    )

    assert not offenders, "core dependency violations:\n" + "\n".join(offenders)


def test_rich_is_confined_to_the_console() -> None:
    require_arch_checks_enabled()

    root = package_root()
    allowlist = {Path("output/console.py")}
    offenders: list[str] = []
    for file_path in iter_python_files(root):
        rel = file_path.relative_to(root)
        if rel.parts[0] == "test" or rel in allowlist:
            continue
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rich"):
                offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

    assert not offenders, "rich usage violations:\n" + "\n".join(offenders)
