import json

import pytest

from versioncheck.version_detector import (
    InstalledPackage,
    compare_versions,
    describe_drift,
    read_installed_package,
)

from helpers import write_installed


def test_read_installed_package(tmp_path):
    write_installed(tmp_path, "19.1.0")
    pkg = read_installed_package(tmp_path / "node_modules" / "react" / "package.json")
    assert pkg == InstalledPackage(name="react", version="19.1.0")


def test_missing_descriptor_is_none(tmp_path):
    assert read_installed_package(tmp_path / "node_modules" / "react" / "package.json") is None


def test_name_falls_back_to_directory(tmp_path):
    pkg_dir = tmp_path / "node_modules" / "react"
    pkg_dir.mkdir(parents=True)
    (pkg_dir / "package.json").write_text(json.dumps({"version": "19.2.0"}), encoding="utf-8")
    assert read_installed_package(pkg_dir / "package.json").name == "react"


@pytest.mark.parametrize("left, right, expected", [
    ("19.1.0", "19.2.0", -1),
    ("19.2.0", "19.2.0", 0),
    ("19.10.0", "19.2.0", 1),
    ("19.2", "19.2.0", 0),
])
def test_compare_versions(left, right, expected):
    assert compare_versions(left, right) == expected


def test_compare_versions_falls_back_to_strings():
    assert compare_versions("latest", "next") == -1


def test_describe_drift():
    assert describe_drift("19.1.0", "19.2.0") == "older"
    assert describe_drift("20.0.0", "19.2.0") == "newer"
    assert describe_drift("19.2", "19.2.0") == ""
