#!/usr/bin/env python3
"""Check that the project's dependencies import and print how to run it."""

import importlib
import platform
import sys
from typing import List, Tuple

DEPENDENCIES: List[Tuple[str, str, bool]] = [
    ("numpy", "numpy", True),
    ("networkx", "networkx", True),
    ("matplotlib", "matplotlib", False),
    ("pytest", "pytest", False),
]


def get_version(module) -> str:
    for attr in ("__version__", "VERSION"):
        if hasattr(module, attr):
            value = getattr(module, attr)
            if isinstance(value, str):
                return value
            if isinstance(value, tuple):
                return ".".join(str(v) for v in value)
    return "unknown"


def check_dependencies(dependencies=DEPENDENCIES) -> List[Tuple[str, str]]:
    failed = []
    for module_name, pip_name, required in dependencies:
        try:
            module = importlib.import_module(module_name)
            print(f"[OK] {pip_name:<15} version={get_version(module)}")
        except ImportError as exc:
            label = "MISSING" if required else "OPTIONAL"
            print(f"[{label}] {pip_name:<15} reason={exc}")
            if required:
                failed.append((pip_name, str(exc)))
    return failed


def main() -> int:
    print("=== Hamiltonian path search environment check ===")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Platform: {platform.platform()}")

    failed = check_dependencies()

    if failed:
        print("\nEnvironment check failed: missing required dependencies.")
        print("Try:")
        print("  pip install -e .[render,test]")
        print("\nMissing:")
        for pip_name, reason in failed:
            print(f"  - {pip_name}: {reason}")
        return 1

    print("\nEnvironment check passed.")
    print("You can now run:")
    print("  python runner.py -N 12 -E 4 --algorithm exhaustive --runs 5")
    print("  python runner.py test_graph.col --algorithm greedy-tabu --tabu-iters 1000")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
