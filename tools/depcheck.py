from __future__ import annotations

import argparse
import ast
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

FORBIDDEN_MODULES = {
    "pydantic",
    "redis",
    "opentelemetry",
    "prometheus_client",
    "vending.application",
    "vending.infrastructure",
    "vending.tools",
}

DEFAULT_DOMAIN_PATH = Path(__file__).resolve().parents[1] / "src" / "vending" / "domain"


@dataclass(frozen=True)
class Violation:
    file_path: Path
    line: int
    rule: str
    detail: str


def _python_files(root: Path) -> Iterable[Path]:
    if root.is_file() and root.suffix == ".py":
        yield root
        return
    if root.is_dir():
        yield from sorted(root.rglob("*.py"))


def _matches_forbidden(module: str) -> bool:
    return any(
        module == forbidden or module.startswith(f"{forbidden}.")
        for forbidden in FORBIDDEN_MODULES
    )


class _DomainVisitor(ast.NodeVisitor):
    def __init__(self, file_path: Path) -> None:
        self.file_path = file_path
        self.violations: list[Violation] = []

    def _add(self, node: ast.AST, rule: str, detail: str) -> None:
        self.violations.append(
            Violation(
                file_path=self.file_path,
                line=getattr(node, "lineno", 0),
                rule=rule,
                detail=detail,
            )
        )

    def visit_Import(self, node: ast.Import) -> None:
        for alias in node.names:
            if _matches_forbidden(alias.name):
                self._add(node, "import", alias.name)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        if node.module and _matches_forbidden(node.module):
            self._add(node, "import", node.module)

    def visit_Constant(self, node: ast.Constant) -> None:
        if isinstance(node.value, float):
            self._add(node, "float", repr(node.value))

    def visit_Call(self, node: ast.Call) -> None:
        if isinstance(node.func, ast.Name) and node.func.id == "float":
            self._add(node, "float", "float()")
        self.generic_visit(node)


def _scan_file(file_path: Path) -> list[Violation]:
    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    visitor = _DomainVisitor(file_path)
    visitor.visit(tree)
    return visitor.violations


def find_violations(paths: Sequence[Path]) -> list[Violation]:
    violations: list[Violation] = []
    for path in paths:
        for file_path in _python_files(path):
            violations.extend(_scan_file(file_path))
    return violations


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Policy check for src/vending/domain: no outer-layer or third-party "
            "imports, no float literals or float() calls."
        )
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="Path to scan (repeatable). Defaults to src/vending/domain.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    scan_paths = [Path(item) for item in args.path] if args.path else [DEFAULT_DOMAIN_PATH]

    violations = find_violations(scan_paths)
    if not violations:
        print("depcheck passed")
        return 0

    print("depcheck failed: domain policy violations detected")
    for violation in violations:
        print(f"{violation.file_path}:{violation.line} [{violation.rule}] -> {violation.detail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
