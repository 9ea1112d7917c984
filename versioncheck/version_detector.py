"""
VersionCheck Version Detector — Read installed package versions from a project.

Given a project root, this module can:
  1. Read the version of a package installed under node_modules/
  2. Compare two version strings by release order

Installed packages are optional: a missing descriptor yields None rather
than an error, so callers only deal with present versions.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from packaging.version import InvalidVersion, Version

logger = logging.getLogger(__name__)


@dataclass
class InstalledPackage:
    """Information about an installed package."""
    name: str        # npm name (e.g., "react")
    version: str     # Version string (e.g., "19.2.0")


def read_installed_package(descriptor_path: str | Path) -> Optional[InstalledPackage]:
    """Read an installed package's descriptor (node_modules/<name>/package.json).

    Args:
        descriptor_path: Path to the installed package's package.json

    Returns:
        InstalledPackage, or None if the package is not installed.
    """
    descriptor_path = Path(descriptor_path)
    if not descriptor_path.exists():
        logger.debug("No installed descriptor at %s, skipping", descriptor_path)
        return None

    logger.debug("Reading installed descriptor %s", descriptor_path)
    data = json.loads(descriptor_path.read_text(encoding="utf-8"))
    return InstalledPackage(
        name=data.get("name", descriptor_path.parent.name),
        version=str(data["version"]),
    )


def compare_versions(left: str, right: str) -> int:
    """Compare two version strings.

    Returns:
        -1 if left < right
         0 if left == right
         1 if left > right
    """
    try:
        v_left = Version(left)
        v_right = Version(right)
    except InvalidVersion:
        # Fallback to basic string comparison
        return (left > right) - (left < right)

    if v_left < v_right:
        return -1
    elif v_left > v_right:
        return 1
    return 0


def describe_drift(actual: str, expected: str) -> str:
    """Say whether `actual` is older or newer than `expected`.

    Returns an empty string when the two sort equal (e.g. "19.2" vs "19.2.0").
    """
    order = compare_versions(actual, expected)
    if order < 0:
        return "older"
    if order > 0:
        return "newer"
    return ""
