"""Test that inner layers never import outer ones.

Domain and application depend only on each other; wiring lives in config.
"""

import ast
from pathlib import Path

import pytest

import guessing_utils

PACKAGE_ROOT = Path(guessing_utils.__file__).parent
FORBIDDEN = {
    "domain": (
        "guessing_utils.application",
        "guessing_utils.infrastructure",
        "guessing_utils.config",
        "guessing_utils.interface",
    ),
    "application": (
        "guessing_utils.infrastructure",
        "guessing_utils.config",
        "guessing_utils.interface",
    ),
}


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    names: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            names.add(node.module)
    return names


@pytest.mark.parametrize("layer", sorted(FORBIDDEN))
def test_inner_layer_does_not_import_outer_layers(layer):
    offenders = [
        f"{path.relative_to(PACKAGE_ROOT)} -> {name}"
        for path in sorted((PACKAGE_ROOT / layer).rglob("*.py"))
        for name in _imported_modules(path)
        if name.startswith(FORBIDDEN[layer])
    ]
    assert offenders == []
