from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def _package_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _iter_source_files(base: Path) -> list[Path]:
    """Non-test Python files under base."""
    root = _package_root()
    files: list[Path] = []
    for path in sorted(base.rglob("*.py")):
        rel = path.relative_to(root)
        if rel.parts and rel.parts[0] == "test":
            continue
        if "__pycache__" in rel.parts:
            continue
        files.append(path)
    return files


def _parse_imports(path: Path) -> list[ImportRef]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    imports: list[ImportRef] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            imports.extend(ImportRef(alias.name, node.lineno) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and not node.level and node.module:
            imports.append(ImportRef(node.module, node.lineno))
    return imports


def _matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def test_platform_layer_only_uses_stdlib() -> None:
    """Detection is imported by the host runtime; it must not pull in the CLI stack."""
    root = _package_root()
    forbidden = ("hostplat.cli", "hostplat.core", "hostplat.output", "rich", "typer")
    offenders: list[str] = []

    for file_path in _iter_source_files(root / "platform"):
        rel = file_path.relative_to(root)
        for item in _parse_imports(file_path):
            if any(_matches_prefix(item.module, prefix) for prefix in forbidden):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "platform layer dependency violations:\n" + "\n".join(offenders)


def test_direct_rich_imports_are_limited_to_console() -> None:
    root = _package_root()
    offenders: list[str] = []

    for file_path in _iter_source_files(root):
        rel = file_path.relative_to(root)
        if rel.as_posix() == "output/console.py":
            continue
        for item in _parse_imports(file_path):
            if _matches_prefix(item.module, "rich"):
                offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)
