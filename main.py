#!/usr/bin/env python3
"""
VersionCheck Runner

Validates version consistency across:
  1. package.json version
  2. package.json devDependencies (react, react-dom)
  3. the installed copy under node_modules/ (if any)
  4. the built dist files (if any)

Usage:
    python main.py

Exit codes:
    0 -- Every version matches (warnings allowed).
    1 -- At least one mismatch, or the manifest could not be read.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from versioncheck.config import ROOT, default_config
from versioncheck.reconciler import ExitStatus, reconcile


def banner(text: str):
    """Print the run header."""
    print(f"{text}\n")


def run(root: Optional[Path] = None) -> ExitStatus:
    """Run the check against a project root and print the report."""
    banner("🔍 Validating version consistency...")
    report = reconcile(default_config(root if root is not None else ROOT))
    print(report)
    print()
    return report.status


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    return run().value


if __name__ == "__main__":
    sys.exit(main())
