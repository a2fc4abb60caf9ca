"""
Build script for TurboDOM with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    pip install .

    # Compiled with mypyc
    TURBODOM_USE_MYPYC=1 pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import find_packages, setup

# Determine if we should use mypyc
USE_MYPYC = os.environ.get("TURBODOM_USE_MYPYC", "0") == "1"

# Modules to compile with mypyc (plain functions over the node model)
# Note: node.py is excluded due to type incompatibility issues with class hierarchies
# Note: treebuilder.py is excluded because it subclasses html.parser.HTMLParser
MYPYC_MODULES = [
    "src/turbodom/traversal.py",
    "src/turbodom/serialize.py",
]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install turbodom[mypyc]", file=sys.stderr)
        sys.exit(1)

    for module_path in MYPYC_MODULES:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print("=" * 70)
    print("Building TurboDOM with mypyc compilation")
    print("=" * 70)
    print(f"Compiling {len(MYPYC_MODULES)} modules:")
    for module in MYPYC_MODULES:
        print(f"  - {module}")
    print("=" * 70)

    opt_level = os.environ.get("MYPYC_OPT_LEVEL", "3")
    debug_level = os.environ.get("MYPYC_DEBUG_LEVEL", "0")

    mypyc_options = {
        "opt_level": opt_level,
        "debug_level": debug_level,
        "verbose": True,
        "separate": False,
        "multi_file": False,
    }

    return mypycify(MYPYC_MODULES, **mypyc_options)


if __name__ == "__main__":
    ext_modules = []

    if USE_MYPYC:
        ext_modules = build_with_mypyc()

    setup(
        name="turbodom",
        version="0.1.0",
        description="Read-only navigation helpers over parsed HTML trees",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        python_requires=">=3.10",
        install_requires=[],
        extras_require={
            "test": ["pytest>=7.0"],
            "mypyc": ["mypy>=1.0"],
        },
        ext_modules=ext_modules,
    )
