"""Project layout the version check reads from.

All paths are relative to the project root. Nothing here is read from the
environment or a config file: the layout is fixed.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


# Project root: the directory holding main.py and package.json
ROOT = Path(__file__).resolve().parent.parent

MANIFEST_FILE = "package.json"

# Dev dependencies that must move in lockstep with the package version
TRACKED_PACKAGES: tuple[str, ...] = ("react", "react-dom")

# The one installed copy whose descriptor is compared against its constraint
INSTALLED_PACKAGE = "react"

DIST_FILES: tuple[str, ...] = (
    "dist/react.production.min.js",
    "dist/react.development.js",
    "dist/react-dom.production.min.js",
    "dist/react-dom.development.js",
)


@dataclass
class CheckConfig:
    """Where to find every input of a version check run.

    Attributes:
        root: Project root all other paths are resolved against
        manifest_file: Manifest path relative to root
        tracked_packages: Dev dependency names that must equal the version
        installed_package: Package whose installed descriptor is checked
        dist_files: Built artifacts whose banner version is checked
    """
    root: Path = ROOT
    manifest_file: str = MANIFEST_FILE
    tracked_packages: tuple[str, ...] = TRACKED_PACKAGES
    installed_package: str = INSTALLED_PACKAGE
    dist_files: tuple[str, ...] = field(default=DIST_FILES)

    def __post_init__(self):
        self.root = Path(self.root)
        if self.installed_package not in self.tracked_packages:
            raise ValueError(
                f"installed_package {self.installed_package!r} must be one of "
                f"tracked_packages {self.tracked_packages!r}"
            )

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest_file

    @property
    def installed_descriptor_path(self) -> Path:
        # node_modules/<name>/package.json
        return self.root / "node_modules" / self.installed_package / MANIFEST_FILE

    def dist_path(self, dist_file: str) -> Path:
        return self.root / dist_file


def default_config(root: Optional[Path] = None) -> CheckConfig:
    """Build the fixed project layout, optionally rooted somewhere else."""
    if root is None:
        return CheckConfig()
    return CheckConfig(root=Path(root))
