"""
VersionCheck Reconciler — Core consistency check.

Ties together the manifest loader, version detector, and extractor registry
to produce a structured report for a project root: every version the
project declares, installs, or ships must equal the package version.

Usage:
    from versioncheck.reconciler import reconcile

    report = reconcile()
    print(report)

    report = reconcile(default_config(root="./some/project"))
    sys.exit(report.status.value)
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from versioncheck.config import CheckConfig, default_config
from versioncheck.extractors import VersionExtractor, extract_version
from versioncheck.manifest import Manifest, load_manifest
from versioncheck.version_detector import describe_drift, read_installed_package

logger = logging.getLogger(__name__)


class Severity(Enum):
    """How a diagnostic affects the verdict."""
    ERROR = "error"      # Fails the run
    WARNING = "warning"  # Printed, never fails the run


class ExitStatus(Enum):
    """Verdict of a run, valued as the process exit code."""
    SUCCESS = 0
    FAILURE = 1


@dataclass
class Diagnostic:
    """A single problem found while reconciling versions."""
    severity: Severity
    message: str
    hint: bool = False   # Remediation step attached to the preceding error

    def __str__(self) -> str:
        if self.hint:
            return f"   💡 {self.message}"
        if self.severity == Severity.ERROR:
            return f"❌ {self.message}"
        return f"⚠️  {self.message}"


@dataclass
class ReconcileReport:
    """Complete result of one version check run."""
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    progress: list[str] = field(default_factory=list)
    artifacts_checked: int = 0
    artifacts_total: int = 0
    check_time_ms: float = 0.0

    @property
    def status(self) -> ExitStatus:
        return ExitStatus.FAILURE if self.errors else ExitStatus.SUCCESS

    def error(self, message: str, hint: Optional[str] = None) -> None:
        self.errors.append(Diagnostic(Severity.ERROR, message))
        if hint:
            self.errors.append(Diagnostic(Severity.ERROR, hint, hint=True))

    def warn(self, message: str) -> None:
        self.warnings.append(Diagnostic(Severity.WARNING, message))

    def note(self, line: str) -> None:
        self.progress.append(line)

    def __str__(self) -> str:
        lines = list(self.progress)
        lines.append("")
        lines.append("=" * 60)

        if self.errors:
            lines.append("")
            lines.append("❌ VALIDATION FAILED:")
            lines.append("")
            lines.extend(str(err) for err in self.errors)
            return "\n".join(lines)

        if self.warnings:
            lines.append("")
            lines.append("⚠️  WARNINGS:")
            lines.append("")
            lines.extend(str(warn) for warn in self.warnings)

        lines.append("")
        lines.append("✅ All version validations passed!")
        return "\n".join(lines)


def _check_dev_dependencies(
    manifest: Manifest,
    config: CheckConfig,
    report: ReconcileReport,
) -> None:
    """Each tracked dev dependency must pin the package version itself."""
    for name in config.tracked_packages:
        bare = manifest.bare_version(name)
        if bare != manifest.version:
            report.error(
                f"devDependencies.{name} ({bare}) doesn't match "
                f"package version ({manifest.version})"
            )
        else:
            report.note(f"✅ devDependencies.{name} matches package version")


def _check_installed(
    manifest: Manifest,
    config: CheckConfig,
    report: ReconcileReport,
) -> None:
    """The installed copy must match its constraint, not the package version.

    Skipped silently when the package is not installed.
    """
    pkg = read_installed_package(config.installed_descriptor_path)
    if pkg is None:
        return

    name = config.installed_package
    installed = pkg.version
    logger.debug("Installed descriptor names %s %s", pkg.name, installed)
    expected = manifest.bare_version(name)
    report.note("")
    report.note(f"📦 node_modules/{name} version: {installed}")

    if installed != expected:
        drift = describe_drift(installed, expected)
        suffix = f", installed copy is {drift}" if drift else ""
        report.error(
            f"Installed {name} ({installed}) doesn't match "
            f"devDependencies ({expected}){suffix}",
            hint="Run: npm install",
        )
    else:
        report.note(f"✅ Installed {name} matches devDependencies")


def _read_first_line(path: Path) -> str:
    """Decode only the bytes before the first newline; bad bytes are replaced."""
    with open(path, "rb") as f:
        raw = f.readline()
    return raw.decode("utf-8", errors="replace").rstrip("\n")


def _check_artifacts(
    manifest: Manifest,
    config: CheckConfig,
    extractors: Optional[Iterable[VersionExtractor]],
    report: ReconcileReport,
) -> None:
    """Every dist file that exists must carry the package version in its banner.

    Missing dist files are skipped. Only if none yields a version at all is
    a warning raised; a partial build passes quietly.
    """
    report.note("")
    report.note("📦 Checking built dist files...")
    report.artifacts_total = len(config.dist_files)

    for dist_file in config.dist_files:
        path = config.dist_path(dist_file)
        if not path.exists():
            logger.debug("Dist file %s not found, skipping", path)
            continue

        embedded = extract_version(_read_first_line(path), extractors)
        if embedded is None:
            report.warn(f"Could not extract version from {dist_file}")
            continue

        report.note(f"   {dist_file}: v{embedded}")
        if embedded != manifest.version:
            report.error(
                f"{dist_file} has v{embedded}, expected v{manifest.version}",
                hint="Run: npm run build",
            )
        report.artifacts_checked += 1

    if report.artifacts_checked == report.artifacts_total:
        report.note(f"✅ All {report.artifacts_total} dist files checked")
    elif report.artifacts_checked == 0:
        report.warn('No dist files found - run "npm run build" first')


def reconcile(
    config: Optional[CheckConfig] = None,
    extractors: Optional[Iterable[VersionExtractor]] = None,
) -> ReconcileReport:
    """Check every version in a project against its declared package version.

    Args:
        config: Project layout to check. Defaults to the fixed layout rooted
            at the repository root.
        extractors: Dist file version extractors, tried in order. Defaults
            to the registered EXTRACTORS.

    Returns:
        ReconcileReport with all errors and warnings, in the order found.

    Raises:
        MissingInputError: the manifest is missing or malformed.
    """
    if config is None:
        config = default_config()
    if extractors is not None:
        extractors = list(extractors)

    start = time.perf_counter()
    report = ReconcileReport()

    manifest = load_manifest(config.manifest_path, config.tracked_packages)

    report.note(f"📦 package.json version: {manifest.version}")
    for name in config.tracked_packages:
        report.note(f"📦 devDependencies.{name}: {manifest.bare_version(name)}")
    report.note("")

    _check_dev_dependencies(manifest, config, report)
    _check_installed(manifest, config, report)
    _check_artifacts(manifest, config, extractors, report)

    report.check_time_ms = (time.perf_counter() - start) * 1000
    logger.debug(
        "Version check finished in %.1fms: %d error(s), %d warning(s)",
        report.check_time_ms, len(report.errors), len(report.warnings),
    )
    return report
