"""
VersionCheck Manifest Loader — Read declared versions from package.json.

Extracts structured information about:
  1. The package's own declared version (the source of truth)
  2. The dev dependency constraints that must match it
  3. The bare version behind each constraint (range operator removed)

This module is purely a reader — it does NOT compare anything.
That's the reconciler's job.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

# A single leading range operator: ^19.2.0, ~19.2.0, >19.2.0, =19.2.0, <19.2.0
RANGE_OPERATOR = re.compile(r"^[\^~>=<]")


class VersionCheckError(Exception):
    """Base class for faults that stop a version check outright."""


class MissingInputError(VersionCheckError):
    """The manifest is absent or malformed; no verdict can be given.

    Attributes:
        path: The manifest path that could not be used
        reason: What was wrong with it
    """

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read manifest {self.path}: {reason}")


@dataclass
class Manifest:
    """Versions declared by a package manifest."""
    path: Path
    version: str                        # e.g., "19.2.0"
    dev_dependencies: dict[str, str] = field(default_factory=dict)  # name -> raw constraint

    def bare_version(self, name: str) -> str:
        """Constraint for a dev dependency with its range operator removed."""
        return strip_range_operator(self.dev_dependencies[name])


def strip_range_operator(constraint: str) -> str:
    """Remove one leading range operator from a version constraint.

    "^19.2.0", "~19.2.0" and "19.2.0" all become "19.2.0". Only the first
    character is considered, so ">=19.2.0" becomes "=19.2.0".
    """
    return RANGE_OPERATOR.sub("", constraint, count=1)


def load_manifest(
    path: str | Path,
    required_packages: Iterable[str] = (),
) -> Manifest:
    """Load a package.json and check it carries everything a run needs.

    Args:
        path: Path to the manifest file.
        required_packages: Dev dependency names that must be present.

    Returns:
        Manifest with the declared version and dev dependency constraints.

    Raises:
        MissingInputError: the file is missing, is not JSON, or lacks the
            version or one of the required dev dependencies.
    """
    path = Path(path)
    logger.debug("Reading manifest %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise MissingInputError(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise MissingInputError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise MissingInputError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise MissingInputError(path, "top level is not an object")

    version = data.get("version")
    if not isinstance(version, str):
        raise MissingInputError(path, 'missing string field "version"')

    dev_dependencies = data.get("devDependencies")
    if not isinstance(dev_dependencies, dict):
        raise MissingInputError(path, 'missing object field "devDependencies"')

    for name in required_packages:
        if not isinstance(dev_dependencies.get(name), str):
            raise MissingInputError(path, f'missing devDependencies entry "{name}"')

    return Manifest(
        path=path,
        version=version,
        dev_dependencies={
            name: value for name, value in dev_dependencies.items()
            if isinstance(value, str)
        },
    )
