from __future__ import annotations

import argparse
import ast
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

FORBIDDEN_MODULES = {
    "fastapi",
    "starlette",
    "pydantic",
    "opentelemetry",
    "prometheus_client",
    "json",
    "foodstory.api",
    "foodstory.application",
    "foodstory.infrastructure",
}

# The domain mutates documents handed to it and never reads or writes files.
FORBIDDEN_CALLS = {"open"}

DEFAULT_DOMAIN_PATH = Path(__file__).resolve().parents[1] / "src" / "foodstory" / "domain"


@dataclass(frozen=True)
class Violation:
    file_path: Path
    line: int
    target: str
    kind: str = "import"

    def render(self) -> str:
        return f"{self.file_path}:{self.line} -> {self.kind} {self.target}"


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


def _scan_file(file_path: Path) -> list[Violation]:
    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    violations: list[Violation] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            violations.extend(
                Violation(file_path=file_path, line=node.lineno, target=alias.name)
                for alias in node.names
                if _matches_forbidden(alias.name)
            )
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            if _matches_forbidden(node.module):
                violations.append(
                    Violation(file_path=file_path, line=node.lineno, target=node.module)
                )
        elif isinstance(node, ast.Call) and isinstance(node.func, ast.Name):
            if node.func.id in FORBIDDEN_CALLS:
                violations.append(
                    Violation(
                        file_path=file_path,
                        line=node.lineno,
                        target=node.func.id,
                        kind="call",
                    )
                )

    return violations


def find_violations(paths: Sequence[Path]) -> list[Violation]:
    violations: list[Violation] = []
    for path in paths:
        for file_path in _python_files(path):
            violations.extend(_scan_file(file_path))
    return violations


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Dependency policy check for src/foodstory/domain."
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="Path to scan (repeatable). Defaults to src/foodstory/domain.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    scan_paths = [Path(item) for item in args.path] if args.path else [DEFAULT_DOMAIN_PATH]

    violations = find_violations(scan_paths)
    if not violations:
        print("depcheck passed")
        return 0

    print(f"depcheck failed: {len(violations)} forbidden dependency use(s) detected")
    for violation in violations:
        print(violation.render())
    return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
